from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from app.models.hotel import HotelRecord, InvalidSearchParameters, SearchParameters


def _hotel(**overrides) -> HotelRecord:
    fields = {
        "name": "Grand Nile Hotel",
        "location": "Cairo, Egypt",
        "price_per_night": Decimal("120.00"),
        "available_rooms": 15,
        "rating": Decimal("4.5"),
        "source": "supplier_a",
    }
    fields.update(overrides)
    return HotelRecord(**fields)


def test_identity_key_is_trimmed_and_lowercased() -> None:
    a = _hotel(name="  Grand Nile Hotel ", location="Cairo, Egypt ")
    b = _hotel(name="grand nile hotel", location="CAIRO, EGYPT", source="supplier_b")

    assert a.identity_key() == "grand nile hotel|cairo, egypt"
    assert a.identity_key() == b.identity_key()


def test_identity_key_differs_by_location() -> None:
    assert _hotel(location="Cairo, Egypt").identity_key() != _hotel(location="Giza, Egypt").identity_key()


def test_matches_filters_without_constraints() -> None:
    assert _hotel().matches_filters() is True


def test_guest_filter_only_requires_a_free_room() -> None:
    assert _hotel(available_rooms=1).matches_filters(guests=10) is True
    assert _hotel(available_rooms=0).matches_filters(guests=1) is False
    # Without a guest count, sold-out hotels still pass
    assert _hotel(available_rooms=0).matches_filters() is True


def test_price_bounds_are_inclusive() -> None:
    hotel = _hotel(price_per_night=Decimal("120.00"))

    assert hotel.matches_filters(min_price=120, max_price=120) is True
    assert hotel.matches_filters(min_price=120.01) is False
    assert hotel.matches_filters(max_price=119.99) is False
    assert hotel.matches_filters(min_price=None, max_price=Decimal("500")) is True


def test_matches_filters_is_idempotent() -> None:
    hotel = _hotel(price_per_night=Decimal("95.00"))
    for args in [(None, None, None), (2, 100, None), (1, 80, 120), (None, None, 90)]:
        assert hotel.matches_filters(*args) == hotel.matches_filters(*args)


@pytest.mark.parametrize(
    "overrides",
    [
        {"price_per_night": Decimal("0")},
        {"price_per_night": Decimal("-10")},
        {"available_rooms": -1},
        {"rating": Decimal("5.1")},
        {"rating": Decimal("-0.5")},
    ],
)
def test_invalid_records_are_rejected(overrides) -> None:
    with pytest.raises(ValueError):
        _hotel(**overrides)


@pytest.mark.parametrize(
    "overrides",
    [
        {"price_per_night": Decimal("Infinity")},
        {"price_per_night": float("nan")},
        {"rating": Decimal("NaN")},
    ],
)
def test_non_finite_amounts_are_rejected(overrides) -> None:
    with pytest.raises(ValueError, match="finite"):
        _hotel(**overrides)


@pytest.mark.parametrize("rooms", [2.7, True, "3", None])
def test_from_dict_rejects_non_integer_rooms(rooms) -> None:
    row = {"name": "Ritz Paris", "location": "Paris, France", "price_per_night": 500, "available_rooms": rooms, "rating": 5}
    with pytest.raises(ValueError, match="available_rooms"):
        HotelRecord.from_dict(row, source="supplier_b")


def test_record_is_immutable() -> None:
    hotel = _hotel()
    with pytest.raises(AttributeError):
        hotel.price_per_night = Decimal("1.00")  # type: ignore[misc]


def test_from_dict_and_projection() -> None:
    hotel = HotelRecord.from_dict(
        {
            "name": "Burj Al Arab",
            "location": "Dubai, UAE",
            "price_per_night": 450.0,
            "available_rooms": 3,
            "rating": 5,
        },
        source="supplier_a",
    )

    assert hotel.price_per_night == Decimal("450.0")
    assert hotel.available_rooms == 3
    assert hotel.to_dict() == {
        "name": "Burj Al Arab",
        "location": "Dubai, UAE",
        "price_per_night": 450.0,
        "available_rooms": 3,
        "rating": 5.0,
        "source": "supplier_a",
    }


def test_search_parameters_canonical_form() -> None:
    params = SearchParameters(
        location="  Cairo ",
        check_in=date(2025, 10, 14),
        check_out=date(2025, 10, 16),
        guests=2,
        min_price=100,
        sort_by="price",
    )

    assert params.location_key == "cairo"
    assert params.nights == 2
    assert params.canonical() == {
        "location": "cairo",
        "check_in": "2025-10-14",
        "check_out": "2025-10-16",
        "guests": 2,
        "min_price": 100.0,
        "max_price": None,
        "sort_by": "price",
    }


@pytest.mark.parametrize(
    "overrides",
    [
        {"location": "   "},
        {"check_out": date(2025, 10, 14)},
        {"check_out": date(2025, 10, 13)},
        {"guests": 0},
        {"min_price": -1},
        {"max_price": -5},
        {"min_price": 200, "max_price": 100},
        {"max_price": float("inf")},
        {"min_price": "nan"},
    ],
)
def test_search_parameters_fail_fast(overrides) -> None:
    fields = {
        "location": "cairo",
        "check_in": date(2025, 10, 14),
        "check_out": date(2025, 10, 16),
    }
    fields.update(overrides)
    with pytest.raises(InvalidSearchParameters):
        SearchParameters(**fields)
