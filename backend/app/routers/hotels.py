"""Hotel search router — aggregated multi-supplier search and cache control."""

import logging
from typing import Annotated

from fastapi import APIRouter, Query
from fastapi.responses import JSONResponse

from app.schemas.hotel import HotelSearchRequest, error_response, success_response
from app.services.hotel_search_service import hotel_search_service

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/search")
async def search_hotels(req: Annotated[HotelSearchRequest, Query()]):
    """Search hotels across all suppliers."""
    logger.info(
        f"Hotel search request received: location={req.location}, "
        f"check_in={req.check_in}, check_out={req.check_out}"
    )

    try:
        hotels = await hotel_search_service.search_hotels(
            location=req.location,
            check_in=req.check_in,
            check_out=req.check_out,
            guests=req.guests,
            min_price=req.min_price,
            max_price=req.max_price,
            sort_by=req.sort_by,
        )
    except Exception as e:
        logger.exception(f"Hotel search failed for {req.model_dump(mode='json')}: {e}")
        return JSONResponse(
            status_code=500,
            content=error_response(
                "An error occurred while searching for hotels. Please try again later."
            ),
        )

    return success_response(
        {
            "hotels": hotels,
            "total_count": len(hotels),
            "search_params": req.model_dump(mode="json"),
        },
        "Hotels fetched successfully",
    )


@router.delete("/cache")
async def clear_hotel_cache():
    """Flush every cached hotel search."""
    removed = await hotel_search_service.clear_cache()
    return success_response({"removed": removed}, "Hotel search cache cleared")
