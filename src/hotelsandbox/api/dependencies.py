"""FastAPI dependencies shared by the routers."""

from fastapi import Header, Request

from hotelsandbox.agent.assistant import ReservationAssistant
from hotelsandbox.core.models import RequestHeaders
from hotelsandbox.services.book import ReservationStore
from hotelsandbox.services.shop import ShopService


def request_headers(
    authorization: str = Header(..., alias="Authorization"),
    app_key: str = Header(..., alias="x-app-key"),
    channel_code: str = Header(..., alias="x-channelCode"),
    request_id: str = Header(..., alias="x-request-id"),
) -> RequestHeaders:
    """Require the distribution API headers."""
    return RequestHeaders(
        authorization=authorization,
        app_key=app_key,
        channel_code=channel_code,
        request_id=request_id,
    )


def require_content_type(content_type: str = Header(..., alias="Content-Type")) -> str:
    """Require a Content-Type header on requests with a body."""
    return content_type


def get_shop_service(request: Request) -> ShopService:
    return request.app.state.shop


def get_reservation_store(request: Request) -> ReservationStore:
    return request.app.state.reservations


def get_assistant(request: Request) -> ReservationAssistant:
    return request.app.state.assistant
