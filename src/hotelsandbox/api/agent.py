"""Reservation agent route."""

from typing import Any

from fastapi import APIRouter, Depends
from loguru import logger

from hotelsandbox.agent.assistant import ReservationAssistant
from hotelsandbox.api.dependencies import get_assistant, request_headers
from hotelsandbox.core.models import ChatRequest, RequestHeaders

router = APIRouter(prefix="/agent/v1", tags=["Reservation Agent"])


@router.post("/reservation-agent", summary="Chat with reservation agent")
def chat(
    request: ChatRequest,
    headers: RequestHeaders = Depends(request_headers),
    assistant: ReservationAssistant = Depends(get_assistant),
) -> Any:
    """Send a conversation history to the agent.

    Returns either a chat message or a structured reservation_draft once
    enough information has been collected.
    """
    logger.info("Agent chat request - requestId: {}", headers.request_id)

    response = assistant.chat(request.messages)

    logger.info(
        "Agent chat response type: {}, requestId: {}", response.type, headers.request_id
    )
    return response.to_dict()
