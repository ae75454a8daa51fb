"""Hotel search service. Fans out to every supplier, then merges, deduplicates, sorts, and caches."""

import asyncio
import logging
import time
from datetime import date
from decimal import Decimal

import httpx

from app.config import settings
from app.models.hotel import HotelRecord, SearchParameters
from app.services.cache_service import CacheService, cache_service
from app.services.supplier_client import SUPPLIERS, Supplier

logger = logging.getLogger(__name__)


class HotelSearchService:
    """Aggregates hotel offers from all registered suppliers."""

    def __init__(
        self,
        suppliers: list[Supplier] | None = None,
        cache: CacheService | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        live_calls: bool | None = None,
    ):
        self.suppliers = list(suppliers) if suppliers is not None else SUPPLIERS
        self.cache = cache if cache is not None else cache_service
        self._transport = transport
        self._live_calls = live_calls

    @property
    def live_calls(self) -> bool:
        if self._live_calls is None:
            return settings.supplier_live_calls_enabled
        return self._live_calls

    async def search_hotels(
        self,
        location: str,
        check_in: date,
        check_out: date,
        guests: int | None = None,
        min_price: Decimal | float | None = None,
        max_price: Decimal | float | None = None,
        sort_by: str | None = None,
    ) -> list[dict]:
        """Search all suppliers. Raises InvalidSearchParameters for out-of-range input."""
        params = SearchParameters(
            location=location,
            check_in=check_in,
            check_out=check_out,
            guests=guests,
            min_price=min_price,
            max_price=max_price,
            sort_by=sort_by,
        )
        return await self.aggregate(params)

    async def aggregate(self, params: SearchParameters) -> list[dict]:
        """
        Run one aggregated search.

        Cache hit returns the stored projection without touching suppliers.
        On a miss: fan out to suppliers, fall back to catalog data per failed
        supplier, filter, deduplicate (lowest price wins), sort, and cache.
        """
        cache_key = self.cache.hotel_search_key(params.canonical())

        cached = await self.cache.get_hotel_search(cache_key)
        if cached is not None:
            logger.info(f"Returning cached results for search: {params.location}")
            return cached

        logger.info(
            f"Starting hotel search for location: {params.location}, "
            f"check-in: {params.check_in}, check-out: {params.check_out}"
        )

        hotels = await self._collect(params)
        unique = self.deduplicate(hotels)
        ordered = self.sort_records(unique, params.sort_by)
        results = [h.to_dict() for h in ordered]

        await self.cache.set_hotel_search(cache_key, results)

        logger.info(f"Hotel search completed. Found {len(results)} unique hotels")
        return results

    async def clear_cache(self) -> int:
        return await self.cache.flush_hotel_searches()

    async def _fan_out(self, filters: dict) -> list:
        """One concurrent live call per supplier. Each slot holds a payload or the raised exception."""
        if not self.live_calls:
            return [None] * len(self.suppliers)

        timeout = httpx.Timeout(
            settings.supplier_timeout_seconds,
            connect=settings.supplier_connect_timeout_seconds,
        )
        async with httpx.AsyncClient(timeout=timeout, transport=self._transport) as client:
            calls = [
                asyncio.wait_for(
                    supplier.fetch(client, filters),
                    timeout=settings.supplier_timeout_seconds,
                )
                for supplier in self.suppliers
            ]
            return await asyncio.gather(*calls, return_exceptions=True)

    async def _collect(self, params: SearchParameters) -> list[HotelRecord]:
        start_time = time.monotonic()
        payloads = await self._fan_out(params.supplier_filters())

        # zip re-imposes registration order regardless of completion order
        all_hotels: list[HotelRecord] = []
        supplier_counts: dict[str, int] = {}
        for supplier, payload in zip(self.suppliers, payloads):
            try:
                if payload is None or isinstance(payload, BaseException):
                    reason = "live calls disabled" if payload is None else _describe_failure(payload)
                    logger.info(f"Supplier {supplier.name} live call unavailable ({reason}), falling back to catalog data")
                    payload = supplier.fallback_data(params.location, params.check_in, params.check_out)

                hotels = [
                    h for h in supplier.map_response(payload)
                    if h.matches_filters(params.guests, params.min_price, params.max_price)
                ]
            except Exception as e:
                logger.error(f"Supplier {supplier.name} processing failed: {e}")
                hotels = []

            supplier_counts[supplier.name] = len(hotels)
            all_hotels.extend(hotels)

        elapsed_ms = round((time.monotonic() - start_time) * 1000, 2)
        logger.info(
            f"Supplier requests completed in {elapsed_ms}ms: "
            f"supplier_results={supplier_counts}, total_hotels={len(all_hotels)}"
        )
        return all_hotels

    @staticmethod
    def deduplicate(hotels: list[HotelRecord]) -> list[HotelRecord]:
        """Keep one record per identity key: the cheapest, earliest on ties. Order follows first sighting."""
        unique: dict[str, HotelRecord] = {}
        duplicates = 0

        for hotel in hotels:
            key = hotel.identity_key()
            kept = unique.get(key)
            if kept is None:
                unique[key] = hotel
                continue

            duplicates += 1
            if hotel.price_per_night < kept.price_per_night:
                logger.debug(
                    f"Replacing duplicate hotel '{hotel.name}' with better price: "
                    f"{hotel.price_per_night} < {kept.price_per_night}"
                )
                unique[key] = hotel
            else:
                logger.debug(
                    f"Keeping existing hotel '{kept.name}' with better price: "
                    f"{kept.price_per_night} <= {hotel.price_per_night}"
                )

        logger.info(f"Deduplication completed. Removed {duplicates} duplicates. Unique hotels: {len(unique)}")
        return list(unique.values())

    @staticmethod
    def sort_records(hotels: list[HotelRecord], sort_by: str | None) -> list[HotelRecord]:
        """Stable sort: price ascending or rating descending. Anything else keeps input order."""
        if not sort_by:
            return list(hotels)

        criteria = sort_by.lower()
        if criteria == "price":
            return sorted(hotels, key=lambda h: h.price_per_night)
        if criteria == "rating":
            return sorted(hotels, key=lambda h: h.rating, reverse=True)

        logger.warning(f"Invalid sort criteria: {sort_by}. No sorting applied.")
        return list(hotels)


def _describe_failure(exc: BaseException) -> str:
    if isinstance(exc, httpx.HTTPStatusError):
        return f"status {exc.response.status_code}"
    if isinstance(exc, (asyncio.TimeoutError, httpx.TimeoutException)):
        return "timeout"
    return f"{type(exc).__name__}: {exc}"


hotel_search_service = HotelSearchService()
