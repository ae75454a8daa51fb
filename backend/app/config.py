from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Redis
    redis_url: str = "redis://localhost:6379/0"

    # Hotel Search
    hotel_search_cache_ttl: int = 600  # 10 minutes
    hotel_search_cache_prefix: str = "hotel_search"

    # Suppliers
    supplier_timeout_seconds: float = 3.0
    supplier_connect_timeout_seconds: float = 2.0
    supplier_live_calls_enabled: bool = False
    supplier_a_url: str = "https://api.supplier-a.com/hotels/search"
    supplier_b_url: str = "https://api.supplier-b.com/hotels/search"
    supplier_c_url: str = "https://api.supplier-c.com/hotels/search"
    supplier_d_url: str = "https://api.supplier-d.com/hotels/search"

    # CORS
    cors_origins: str = "http://localhost:5173"

    @property
    def cors_origin_list(self) -> list[str]:
        return [origin.strip() for origin in self.cors_origins.split(",")]

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


settings = Settings()
