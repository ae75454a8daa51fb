"""Redis cache service for aggregated hotel search results."""

import hashlib
import json
import logging
from typing import Any

import redis.asyncio as redis

from app.config import settings

logger = logging.getLogger(__name__)


class CacheService:
    """Redis-backed cache with typed TTLs."""

    def __init__(self, client: redis.Redis | None = None):
        self._redis: redis.Redis | None = client
        self._injected = client is not None

    async def _get_redis(self) -> redis.Redis | None:
        if self._redis is None:
            client = None
            try:
                client = redis.from_url(
                    settings.redis_url,
                    encoding="utf-8",
                    decode_responses=True,
                )
                await client.ping()
            except Exception as e:
                logger.warning(f"Redis unavailable, cache disabled: {e}")
                if client is not None:
                    await client.aclose()
                return None
            self._redis = client
        return self._redis

    async def get(self, key: str) -> Any | None:
        """Get a value from cache. Returns None on miss or error."""
        try:
            r = await self._get_redis()
            if r is None:
                return None
            raw = await r.get(key)
            if raw is None:
                return None
            return json.loads(raw)
        except Exception as e:
            logger.warning(f"Cache read failed for {key}: {e}")
            return None

    async def set(self, key: str, value: Any, ttl: int | None = None) -> bool:
        """Set a value in cache with TTL. Returns False on error."""
        if ttl is None:
            ttl = settings.hotel_search_cache_ttl
        try:
            r = await self._get_redis()
            if r is None:
                return False
            await r.set(key, json.dumps(value, default=str), ex=ttl)
            return True
        except Exception as e:
            logger.warning(f"Cache write failed for {key}: {e}")
            return False

    async def delete(self, key: str) -> bool:
        """Delete a key."""
        try:
            r = await self._get_redis()
            if r is None:
                return False
            await r.delete(key)
            return True
        except Exception:
            return False

    # Hotel search helpers

    def hotel_search_key(self, canonical_params: dict) -> str:
        raw = json.dumps(canonical_params, sort_keys=True, separators=(",", ":"))
        digest = hashlib.md5(raw.encode("utf-8")).hexdigest()
        return f"{settings.hotel_search_cache_prefix}:{digest}"

    async def get_hotel_search(self, key: str) -> list[dict] | None:
        return await self.get(key)

    async def set_hotel_search(self, key: str, hotels: list[dict]) -> bool:
        return await self.set(key, hotels, settings.hotel_search_cache_ttl)

    async def flush_hotel_searches(self) -> int:
        """Remove every cached hotel search. Returns the number of keys removed."""
        try:
            r = await self._get_redis()
            if r is None:
                return 0
            removed = 0
            async for key in r.scan_iter(match=f"{settings.hotel_search_cache_prefix}:*"):
                removed += await r.delete(key)
            logger.info(f"Hotel search cache cleared ({removed} entries)")
            return removed
        except Exception as e:
            logger.warning(f"Cache flush failed: {e}")
            return 0

    async def close(self):
        if self._redis and not self._injected:
            await self._redis.aclose()
            self._redis = None


cache_service = CacheService()
