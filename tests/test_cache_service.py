from __future__ import annotations

import pytest

from app.config import settings
from app.services import cache_service as cache_module
from app.services.cache_service import CacheService


class _BrokenRedis:
    def __init__(self) -> None:
        self.closed = False

    async def ping(self) -> bool:
        raise ConnectionError("redis down")

    async def get(self, key: str):
        raise ConnectionError("redis down")

    async def set(self, key: str, value: str, ex: int | None = None):
        raise ConnectionError("redis down")

    async def delete(self, *keys: str) -> int:
        raise ConnectionError("redis down")

    async def scan_iter(self, match: str | None = None):
        raise ConnectionError("redis down")
        yield  # pragma: no cover - makes this an async generator

    async def aclose(self) -> None:
        self.closed = True


def test_hotel_search_key_is_stable_and_prefixed(cache) -> None:
    a = cache.hotel_search_key({"location": "cairo", "check_in": "2025-10-14", "sort_by": None})
    b = cache.hotel_search_key({"sort_by": None, "check_in": "2025-10-14", "location": "cairo"})
    c = cache.hotel_search_key({"location": "cairo", "check_in": "2025-10-15", "sort_by": None})

    assert a == b
    assert a != c
    prefix, digest = a.split(":")
    assert prefix == settings.hotel_search_cache_prefix
    assert len(digest) == 32


@pytest.mark.asyncio
async def test_set_and_get_round_trip_with_ttl(cache, fake_redis) -> None:
    hotels = [{"name": "Savoy Hotel London", "price_per_night": 420.0}]

    assert await cache.set_hotel_search("hotel_search:abc", hotels) is True
    assert await cache.get_hotel_search("hotel_search:abc") == hotels
    assert fake_redis.expiry["hotel_search:abc"] == 600


@pytest.mark.asyncio
async def test_get_miss_returns_none(cache) -> None:
    assert await cache.get("hotel_search:missing") is None


@pytest.mark.asyncio
async def test_empty_result_is_a_cache_hit(cache) -> None:
    await cache.set_hotel_search("hotel_search:empty", [])
    assert await cache.get_hotel_search("hotel_search:empty") == []


@pytest.mark.asyncio
async def test_flush_clears_only_hotel_searches(cache, fake_redis) -> None:
    await cache.set("hotel_search:one", [1])
    await cache.set("hotel_search:two", [2])
    await cache.set("other:three", [3])

    removed = await cache.flush_hotel_searches()

    assert removed == 2
    assert list(fake_redis.store) == ["other:three"]


@pytest.mark.asyncio
async def test_delete_removes_key(cache, fake_redis) -> None:
    await cache.set("hotel_search:gone", {"a": 1})
    assert await cache.delete("hotel_search:gone") is True
    assert "hotel_search:gone" not in fake_redis.store


@pytest.mark.asyncio
async def test_broken_client_degrades_to_miss() -> None:
    cache = CacheService(client=_BrokenRedis())

    assert await cache.get("hotel_search:any") is None
    assert await cache.set("hotel_search:any", [1]) is False
    assert await cache.delete("hotel_search:any") is False
    assert await cache.flush_hotel_searches() == 0


@pytest.mark.asyncio
async def test_unreachable_redis_disables_cache(monkeypatch) -> None:
    clients: list[_BrokenRedis] = []

    def _from_url(*args, **kwargs) -> _BrokenRedis:
        clients.append(_BrokenRedis())
        return clients[-1]

    monkeypatch.setattr(cache_module.redis, "from_url", _from_url)
    cache = CacheService()

    assert await cache.get("hotel_search:any") is None
    assert await cache.set("hotel_search:any", [1]) is False
    assert len(clients) == 2
    assert all(c.closed for c in clients)


@pytest.mark.asyncio
async def test_close_keeps_injected_client(cache, fake_redis) -> None:
    await cache.close()
    await cache.set("hotel_search:after", [1])
    assert "hotel_search:after" in fake_redis.store
