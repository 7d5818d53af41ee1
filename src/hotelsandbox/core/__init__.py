"""Core module for the hotel sandbox."""

from hotelsandbox.core.config import SandboxConfig, load_config
from hotelsandbox.core.fixtures import FixtureStore
from hotelsandbox.core.models import (
    AgentResponse,
    ChatRequest,
    ConversationMessage,
    ErrorDocument,
    RequestHeaders,
    ReservationDraft,
)

__all__ = [
    "SandboxConfig",
    "load_config",
    "FixtureStore",
    "AgentResponse",
    "ChatRequest",
    "ConversationMessage",
    "ErrorDocument",
    "RequestHeaders",
    "ReservationDraft",
]
