"""Hotel Sandbox - mock hotel distribution API with a reservation agent."""

__version__ = "0.1.0"

from hotelsandbox.agent.assistant import ReservationAssistant
from hotelsandbox.agent.interpreter import ResponseInterpreter
from hotelsandbox.api.app import create_app
from hotelsandbox.core.config import SandboxConfig, load_config
from hotelsandbox.core.fixtures import FixtureStore
from hotelsandbox.core.models import AgentResponse, ConversationMessage, ReservationDraft
from hotelsandbox.services.book import RandomSource, ReservationStore, SystemRandomSource
from hotelsandbox.services.shop import ShopService

__all__ = [
    "create_app",
    "SandboxConfig",
    "load_config",
    "FixtureStore",
    "ShopService",
    "ReservationStore",
    "RandomSource",
    "SystemRandomSource",
    "ResponseInterpreter",
    "ReservationAssistant",
    "AgentResponse",
    "ConversationMessage",
    "ReservationDraft",
]
