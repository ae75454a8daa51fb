"""Supplier pricing rules — date-based adjustments applied to catalog base prices.

Each rule takes (base_price, check_in, check_out) and returns the nightly
price rounded to 2 decimal places.
"""

from datetime import date
from decimal import ROUND_HALF_UP, Decimal
from typing import Callable

PricingRule = Callable[[Decimal, date, date], Decimal]

CENT = Decimal("0.01")

WEEKEND_DAYS = {4, 5, 6}  # Fri, Sat, Sun (date.weekday)
SUMMER_MONTHS = {6, 7, 8}
HOLIDAY_MONTHS = {12, 1}


def _apply(base_price: Decimal, factor: str) -> Decimal:
    return (base_price * Decimal(factor)).quantize(CENT, rounding=ROUND_HALF_UP)


def _unchanged(base_price: Decimal) -> Decimal:
    return base_price.quantize(CENT, rounding=ROUND_HALF_UP)


def weekend_rule(base_price: Decimal, check_in: date, check_out: date) -> Decimal:
    """+20% when check-in falls on Friday, Saturday or Sunday."""
    if check_in.weekday() in WEEKEND_DAYS:
        return _apply(base_price, "1.20")
    return _unchanged(base_price)


def seasonal_rule(base_price: Decimal, check_in: date, check_out: date) -> Decimal:
    """+15% for a summer check-in, +25% for December/January."""
    if check_in.month in SUMMER_MONTHS:
        return _apply(base_price, "1.15")
    if check_in.month in HOLIDAY_MONTHS:
        return _apply(base_price, "1.25")
    return _unchanged(base_price)


def length_of_stay_rule(base_price: Decimal, check_in: date, check_out: date) -> Decimal:
    """-10% for 7+ nights, +10% for a single night."""
    nights = (check_out - check_in).days
    if nights >= 7:
        return _apply(base_price, "0.90")
    if nights == 1:
        return _apply(base_price, "1.10")
    return _unchanged(base_price)


def day_of_month_rule(base_price: Decimal, check_in: date, check_out: date) -> Decimal:
    """-5% for check-in on the 1st-10th, +8% on the 26th or later."""
    if check_in.day <= 10:
        return _apply(base_price, "0.95")
    if check_in.day >= 26:
        return _apply(base_price, "1.08")
    return _unchanged(base_price)
