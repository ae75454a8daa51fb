from app.models.hotel import HotelRecord, InvalidSearchParameters, SearchParameters

__all__ = [
    "HotelRecord",
    "InvalidSearchParameters",
    "SearchParameters",
]
