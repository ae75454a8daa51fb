from datetime import date
from typing import Any, Literal

from pydantic import BaseModel, Field, ValidationInfo, field_validator
from pydantic_core import PydanticCustomError


class HotelSearchRequest(BaseModel):
    location: str = Field(min_length=2, max_length=100)
    check_in: date
    check_out: date
    guests: int | None = Field(default=None, ge=1, le=20)
    min_price: float | None = Field(default=None, ge=0, allow_inf_nan=False)
    max_price: float | None = Field(default=None, ge=0, allow_inf_nan=False)
    sort_by: Literal["price", "rating"] | None = None

    @field_validator("check_in")
    @classmethod
    def check_in_not_past(cls, v: date) -> date:
        if v < date.today():
            raise PydanticCustomError("check_in_past", "Check-in date must be today or later.")
        return v

    @field_validator("check_out")
    @classmethod
    def check_out_after_check_in(cls, v: date, info: ValidationInfo) -> date:
        check_in = info.data.get("check_in")
        if check_in is not None and v <= check_in:
            raise PydanticCustomError("check_out_order", "Check-out date must be after check-in date.")
        return v

    @field_validator("max_price")
    @classmethod
    def max_price_not_below_min(cls, v: float | None, info: ValidationInfo) -> float | None:
        min_price = info.data.get("min_price")
        if v is not None and min_price is not None and v < min_price:
            raise PydanticCustomError(
                "max_price_order", "Maximum price must be greater than or equal to minimum price."
            )
        return v


def success_response(data: Any = None, message: str = "Operation completed successfully") -> dict:
    body: dict[str, Any] = {"status": True, "message": message}
    if data is not None:
        body["data"] = data
    return body


def error_response(message: str = "An error occurred", errors: Any = None) -> dict:
    body: dict[str, Any] = {"status": False, "message": message}
    if errors is not None:
        body["errors"] = errors
    return body
