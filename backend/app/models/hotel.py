"""Hotel offer and search parameter value types."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal, InvalidOperation


class InvalidSearchParameters(ValueError):
    """Raised when search parameters break a basic range or ordering rule."""


def to_decimal(value) -> Decimal | None:
    """Coerce a float/int/str amount to Decimal without float artifacts."""
    if value is None:
        return None
    if isinstance(value, bool):
        raise ValueError(f"Not a numeric amount: {value!r}")
    try:
        result = Decimal(str(value))
    except InvalidOperation as e:
        raise ValueError(f"Not a numeric amount: {value!r}") from e
    if not result.is_finite():
        raise ValueError(f"Not a finite amount: {value!r}")
    return result


@dataclass(frozen=True)
class HotelRecord:
    """One supplier offer. Never mutated after construction."""

    name: str
    location: str
    price_per_night: Decimal
    available_rooms: int
    rating: Decimal
    source: str

    def __post_init__(self):
        # Normalize numeric fields
        object.__setattr__(self, "price_per_night", to_decimal(self.price_per_night))
        object.__setattr__(self, "rating", to_decimal(self.rating))

        if self.price_per_night <= 0:
            raise ValueError(f"price_per_night must be positive, got {self.price_per_night}")
        if self.available_rooms < 0:
            raise ValueError(f"available_rooms must be >= 0, got {self.available_rooms}")
        if not Decimal("0") <= self.rating <= Decimal("5"):
            raise ValueError(f"rating must be within [0, 5], got {self.rating}")

    @classmethod
    def from_dict(cls, data: dict, source: str) -> "HotelRecord":
        rooms = data["available_rooms"]
        if isinstance(rooms, bool) or not isinstance(rooms, int):
            raise ValueError(f"available_rooms must be an integer, got {rooms!r}")
        return cls(
            name=str(data["name"]),
            location=str(data["location"]),
            price_per_night=to_decimal(data["price_per_night"]),
            available_rooms=rooms,
            rating=to_decimal(data["rating"]),
            source=source,
        )

    def identity_key(self) -> str:
        """Name + location, trimmed and lowercased. Same key = same physical hotel."""
        return f"{self.name.strip()}|{self.location.strip()}".lower()

    def matches_filters(
        self,
        guests: int | None = None,
        min_price: Decimal | float | None = None,
        max_price: Decimal | float | None = None,
    ) -> bool:
        """
        Check the guest and price-range filters.

        The guest check only requires at least one free room; it does not
        compare the guest count against room capacity.
        """
        if guests is not None and self.available_rooms < 1:
            return False

        low = to_decimal(min_price)
        if low is not None and self.price_per_night < low:
            return False

        high = to_decimal(max_price)
        if high is not None and self.price_per_night > high:
            return False

        return True

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "location": self.location,
            "price_per_night": float(self.price_per_night),
            "available_rooms": self.available_rooms,
            "rating": float(self.rating),
            "source": self.source,
        }


@dataclass(frozen=True)
class SearchParameters:
    """Normalized hotel search input. Its canonical form feeds the cache key."""

    location: str
    check_in: date
    check_out: date
    guests: int | None = None
    min_price: Decimal | None = None
    max_price: Decimal | None = None
    sort_by: str | None = None

    def __post_init__(self):
        try:
            object.__setattr__(self, "min_price", to_decimal(self.min_price))
            object.__setattr__(self, "max_price", to_decimal(self.max_price))
        except ValueError as e:
            raise InvalidSearchParameters(str(e)) from e

        if not self.location or not self.location.strip():
            raise InvalidSearchParameters("location must not be empty")
        if self.check_out <= self.check_in:
            raise InvalidSearchParameters(
                f"check_out ({self.check_out}) must be after check_in ({self.check_in})"
            )
        if self.guests is not None and self.guests < 1:
            raise InvalidSearchParameters(f"guests must be at least 1, got {self.guests}")
        if self.min_price is not None and self.min_price < 0:
            raise InvalidSearchParameters("min_price must not be negative")
        if self.max_price is not None and self.max_price < 0:
            raise InvalidSearchParameters("max_price must not be negative")
        if (
            self.min_price is not None
            and self.max_price is not None
            and self.max_price < self.min_price
        ):
            raise InvalidSearchParameters("max_price must be greater than or equal to min_price")

    @property
    def location_key(self) -> str:
        return self.location.strip().lower()

    @property
    def nights(self) -> int:
        return (self.check_out - self.check_in).days

    def canonical(self) -> dict:
        """Stable, JSON-ready form used to derive the cache key."""
        return {
            "location": self.location_key,
            "check_in": self.check_in.isoformat(),
            "check_out": self.check_out.isoformat(),
            "guests": self.guests,
            "min_price": float(self.min_price) if self.min_price is not None else None,
            "max_price": float(self.max_price) if self.max_price is not None else None,
            "sort_by": self.sort_by,
        }

    def supplier_filters(self) -> dict:
        return {
            "location": self.location,
            "check_in": self.check_in,
            "check_out": self.check_out,
            "guests": self.guests,
            "min_price": self.min_price,
            "max_price": self.max_price,
        }
