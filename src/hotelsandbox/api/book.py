"""Book API routes."""

from typing import Any

from fastapi import APIRouter, Body, Depends, Path
from loguru import logger

from hotelsandbox.api.dependencies import (
    get_reservation_store,
    request_headers,
    require_content_type,
)
from hotelsandbox.core.models import RequestHeaders
from hotelsandbox.services.book import ReservationStore

router = APIRouter(prefix="/book/v1/hotels", tags=["Book API"])


@router.post(
    "/{hotelCode}/reservations",
    summary="Create reservation",
    dependencies=[Depends(require_content_type)],
)
def create_reservation(
    hotelCode: str = Path(..., description="Hotel code"),
    request: Any = Body(...),
    headers: RequestHeaders = Depends(request_headers),
    store: ReservationStore = Depends(get_reservation_store),
) -> Any:
    """Create a new hotel reservation."""
    logger.info(
        "Create reservation request - hotel: {}, requestId: {}", hotelCode, headers.request_id
    )

    response = store.create(request)

    logger.info(
        "Reservation created successfully - hotel: {}, requestId: {}",
        hotelCode,
        headers.request_id,
    )
    return response


@router.get("/{hotelCode}/reservations/{confirmationNumber}", summary="Retrieve reservation")
def get_reservation(
    hotelCode: str = Path(..., description="Hotel code"),
    confirmationNumber: str = Path(..., description="Confirmation number"),
    headers: RequestHeaders = Depends(request_headers),
    store: ReservationStore = Depends(get_reservation_store),
) -> Any:
    """Get reservation details by confirmation number."""
    logger.info(
        "Retrieve reservation request - hotel: {}, confirmation: {}, requestId: {}",
        hotelCode,
        confirmationNumber,
        headers.request_id,
    )
    return store.get(confirmationNumber)


@router.put(
    "/{hotelCode}/reservations/{confirmationNumber}",
    summary="Modify reservation",
    dependencies=[Depends(require_content_type)],
)
def modify_reservation(
    hotelCode: str = Path(..., description="Hotel code"),
    confirmationNumber: str = Path(..., description="Confirmation number"),
    request: Any = Body(...),
    headers: RequestHeaders = Depends(request_headers),
    store: ReservationStore = Depends(get_reservation_store),
) -> Any:
    """Update an existing reservation."""
    logger.info(
        "Modify reservation request - hotel: {}, confirmation: {}, requestId: {}",
        hotelCode,
        confirmationNumber,
        headers.request_id,
    )
    return store.modify(confirmationNumber, request)


@router.delete("/{hotelCode}/reservations/{confirmationNumber}", summary="Cancel reservation")
def cancel_reservation(
    hotelCode: str = Path(..., description="Hotel code"),
    confirmationNumber: str = Path(..., description="Confirmation number"),
    headers: RequestHeaders = Depends(request_headers),
    store: ReservationStore = Depends(get_reservation_store),
) -> Any:
    """Cancel an existing reservation."""
    logger.info(
        "Cancel reservation request - hotel: {}, confirmation: {}, requestId: {}",
        hotelCode,
        confirmationNumber,
        headers.request_id,
    )
    return store.cancel(confirmationNumber)
