"""Hotel supplier adapters: one capability, configured per supplier with a catalog and pricing rule."""

import logging
from datetime import date
from typing import Any

import httpx

from app.config import settings
from app.data.supplier_catalogs import (
    SUPPLIER_A_CATALOG,
    SUPPLIER_B_CATALOG,
    SUPPLIER_C_CATALOG,
    SUPPLIER_D_CATALOG,
)
from app.models.hotel import HotelRecord, to_decimal
from app.services.pricing_rules import (
    PricingRule,
    day_of_month_rule,
    length_of_stay_rule,
    seasonal_rule,
    weekend_rule,
)

logger = logging.getLogger(__name__)

# Outbound query parameter names, in request order
QUERY_FIELDS = ("location", "check_in", "check_out", "guests", "min_price", "max_price")


class SupplierMappingError(ValueError):
    """Raised when a supplier payload cannot be mapped to hotel records."""


def _as_date(value: Any) -> date:
    if isinstance(value, date):
        return value
    return date.fromisoformat(str(value))


class Supplier:
    """Adapter for one hotel supplier: catalog lookup, live fetch, and response mapping."""

    def __init__(
        self,
        name: str,
        catalog: dict[str, list[dict]],
        pricing_rule: PricingRule,
        base_url: str,
    ):
        self.name = name
        self.catalog = catalog
        self.pricing_rule = pricing_rule
        self.base_url = base_url

    def __repr__(self) -> str:
        return f"Supplier({self.name!r})"

    def _rows_for(self, location: str) -> list[dict]:
        return self.catalog.get(location.strip().lower(), [])

    def endpoint(self, filters: dict) -> str:
        """Remote search URL. Filters travel as query parameters, not in the path."""
        return self.base_url

    @staticmethod
    def query_params(filters: dict) -> dict[str, str]:
        """Build outbound query parameters, omitting absent values."""
        params = {}
        for field in QUERY_FIELDS:
            value = filters.get(field)
            if value is None:
                continue
            params[field] = value.isoformat() if isinstance(value, date) else str(value)
        return params

    def search(
        self,
        location: str,
        check_in: date,
        check_out: date,
        guests: int | None = None,
        min_price=None,
        max_price=None,
    ) -> list[HotelRecord]:
        """Search the local catalog with this supplier's pricing applied. Unknown locations yield []."""
        hotels = []
        for row in self._rows_for(location):
            price = self.pricing_rule(to_decimal(row["price_per_night"]), check_in, check_out)
            hotel = HotelRecord.from_dict({**row, "price_per_night": price}, self.name)
            if hotel.matches_filters(guests, min_price, max_price):
                hotels.append(hotel)

        logger.info(f"{self.name} returned {len(hotels)} hotels for location: {location}")
        return hotels

    def map_response(self, payload: Any) -> list[HotelRecord]:
        """
        Map a supplier JSON payload to hotel records.

        Accepts {"hotels": [...], "check_in": ..., "check_out": ...} or a bare
        list of hotels. Pricing is adjusted only when both dates are present.
        Raises SupplierMappingError on any malformed part of the payload.
        """
        if isinstance(payload, list):
            items, check_in, check_out = payload, None, None
        elif isinstance(payload, dict):
            items = payload.get("hotels", [])
            check_in, check_out = payload.get("check_in"), payload.get("check_out")
        else:
            raise SupplierMappingError(
                f"{self.name}: expected a JSON object or array, got {type(payload).__name__}"
            )

        if not isinstance(items, list):
            raise SupplierMappingError(f"{self.name}: 'hotels' must be an array")

        adjust = check_in is not None and check_out is not None
        if adjust:
            try:
                check_in, check_out = _as_date(check_in), _as_date(check_out)
            except ValueError as e:
                raise SupplierMappingError(f"{self.name}: invalid stay dates: {e}") from e

        hotels = []
        for item in items:
            if not isinstance(item, dict):
                raise SupplierMappingError(f"{self.name}: hotel entry is not an object: {item!r}")
            try:
                price = to_decimal(item["price_per_night"])
                if adjust:
                    price = self.pricing_rule(price, check_in, check_out)
                hotels.append(HotelRecord.from_dict({**item, "price_per_night": price}, self.name))
            except (KeyError, TypeError, ValueError) as e:
                raise SupplierMappingError(f"{self.name}: malformed hotel entry: {e}") from e

        logger.info(f"{self.name} mapped {len(hotels)} hotels from response")
        return hotels

    def fallback_data(self, location: str, check_in: date, check_out: date) -> dict:
        """Catalog rows for a location, shaped like a live response so map_response can consume it."""
        return {
            "hotels": [dict(row) for row in self._rows_for(location)],
            "check_in": check_in.isoformat(),
            "check_out": check_out.isoformat(),
            "location": location,
        }

    async def fetch(self, client: httpx.AsyncClient, filters: dict) -> Any:
        """Live GET against the supplier endpoint. Raises on transport errors and non-2xx."""
        resp = await client.get(
            self.endpoint(filters),
            params=self.query_params(filters),
            headers={"Accept": "application/json"},
        )
        resp.raise_for_status()
        return resp.json()


def build_suppliers() -> list[Supplier]:
    """Suppliers in registration order; merge and tie-breaking follow this order."""
    return [
        Supplier("supplier_a", SUPPLIER_A_CATALOG, weekend_rule, settings.supplier_a_url),
        Supplier("supplier_b", SUPPLIER_B_CATALOG, seasonal_rule, settings.supplier_b_url),
        Supplier("supplier_c", SUPPLIER_C_CATALOG, length_of_stay_rule, settings.supplier_c_url),
        Supplier("supplier_d", SUPPLIER_D_CATALOG, day_of_month_rule, settings.supplier_d_url),
    ]


SUPPLIERS = build_suppliers()
