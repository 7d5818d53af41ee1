"""Shop API routes."""

from typing import Any

from fastapi import APIRouter, Depends, Path, Query
from loguru import logger

from hotelsandbox.api.dependencies import get_shop_service, request_headers
from hotelsandbox.core.models import RequestHeaders
from hotelsandbox.services.shop import ShopService

router = APIRouter(prefix="/shop/v1/hotels", tags=["Shop API"])


@router.get("", summary="Multi-property search")
def search_properties(
    adults: int = Query(..., description="Number of adults"),
    numberOfUnits: int = Query(..., description="Number of rooms"),
    arrivalDate: str = Query(..., description="Arrival date (YYYY-MM-DD)"),
    departureDate: str = Query(..., description="Departure date (YYYY-MM-DD)"),
    chainCode: str | None = Query(default=None, description="Hotel chain code"),
    hotelCodes: str | None = Query(default=None, description="Comma-separated hotel codes"),
    headers: RequestHeaders = Depends(request_headers),
    shop: ShopService = Depends(get_shop_service),
) -> Any:
    """Search for availability across multiple properties."""
    logger.info(
        "Property search request - adults: {}, units: {}, arrival: {}, departure: {}, requestId: {}",
        adults,
        numberOfUnits,
        arrivalDate,
        departureDate,
        headers.request_id,
    )

    response = shop.search_properties()

    logger.info(
        "Returning {} properties, requestId: {}",
        len(response.get("roomStays", [])),
        headers.request_id,
    )
    return response


@router.get("/{hotelCode}/offers", summary="Get property offers")
def get_property_offers(
    hotelCode: str = Path(..., description="Hotel code"),
    adults: int = Query(..., description="Number of adults"),
    numberOfUnits: int = Query(..., description="Number of rooms"),
    arrivalDate: str = Query(..., description="Arrival date (YYYY-MM-DD)"),
    departureDate: str = Query(..., description="Departure date (YYYY-MM-DD)"),
    ratePlanCodes: str | None = Query(default=None, description="Comma-separated rate plan codes"),
    ratePlanCodeMatchOnly: bool | None = Query(default=None, description="Match rate plan codes only"),
    headers: RequestHeaders = Depends(request_headers),
    shop: ShopService = Depends(get_shop_service),
) -> Any:
    """Get room types and rate plans for a specific property."""
    logger.info(
        "Property offers request - hotel: {}, adults: {}, units: {}, arrival: {}, departure: {}, requestId: {}",
        hotelCode,
        adults,
        numberOfUnits,
        arrivalDate,
        departureDate,
        headers.request_id,
    )
    return shop.get_property_offers(hotelCode)


@router.get("/{hotelCode}/calendar", summary="Get calendar availability")
def get_calendar_availability(
    hotelCode: str = Path(..., description="Hotel code"),
    adults: int = Query(..., description="Number of adults"),
    numberOfUnits: int = Query(..., description="Number of rooms"),
    startDate: str = Query(..., description="Start date (YYYY-MM-DD)"),
    endDate: str = Query(..., description="End date (YYYY-MM-DD)"),
    lengthOfStay: int | None = Query(default=None, description="Length of stay in nights"),
    headers: RequestHeaders = Depends(request_headers),
    shop: ShopService = Depends(get_shop_service),
) -> Any:
    """Get a calendar view of availability for a date range."""
    logger.info(
        "Calendar availability request - hotel: {}, adults: {}, units: {}, start: {}, end: {}, requestId: {}",
        hotelCode,
        adults,
        numberOfUnits,
        startDate,
        endDate,
        headers.request_id,
    )
    return shop.get_calendar_availability(hotelCode)


@router.get("/{hotelCode}/offer", summary="Get single offer detail")
def get_offer_detail(
    hotelCode: str = Path(..., description="Hotel code"),
    roomType: str = Query(..., description="Room type code"),
    ratePlanCode: str = Query(..., description="Rate plan code"),
    adults: int = Query(..., description="Number of adults"),
    numberOfUnits: int = Query(..., description="Number of rooms"),
    arrivalDate: str = Query(..., description="Arrival date (YYYY-MM-DD)"),
    departureDate: str = Query(..., description="Departure date (YYYY-MM-DD)"),
    headers: RequestHeaders = Depends(request_headers),
    shop: ShopService = Depends(get_shop_service),
) -> Any:
    """Retrieve a single offer by room type and rate plan code."""
    logger.info(
        "Offer detail request - hotel: {}, roomType: {}, ratePlanCode: {}, requestId: {}",
        hotelCode,
        roomType,
        ratePlanCode,
        headers.request_id,
    )
    return shop.get_offer_detail(hotelCode, roomType, ratePlanCode)
