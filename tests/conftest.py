"""Pytest configuration and shared fixtures."""

import json
from pathlib import Path
from typing import Any

import pytest
from langchain_core.language_models import BaseChatModel

from hotelsandbox.core.config import DEFAULT_FIXTURES_DIR, SandboxConfig
from hotelsandbox.core.fixtures import FixtureStore
from hotelsandbox.services.book import RandomSource, ReservationStore
from hotelsandbox.services.shop import ShopService


class FixedRandomSource(RandomSource):
    """Deterministic random source for tests.

    Rolls and numbers are consumed in order. Once exhausted, rolls never
    trigger fault injection and numbers count up from 1000.
    """

    def __init__(self, rolls: list[float] | None = None, numbers: list[int] | None = None):
        self.rolls = list(rolls or [])
        self.numbers = list(numbers or [])
        self._next_number = 1000

    def random(self) -> float:
        if self.rolls:
            return self.rolls.pop(0)
        return 0.99

    def randrange(self, stop: int) -> int:
        if self.numbers:
            return self.numbers.pop(0)
        self._next_number += 1
        return self._next_number % stop


class FailingChatModel(BaseChatModel):
    """Chat model whose every call fails."""

    @property
    def _llm_type(self) -> str:
        return "failing"

    def _generate(self, messages, stop=None, run_manager=None, **kwargs):
        raise ConnectionError("model unavailable")


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the bundled fixtures directory."""
    return DEFAULT_FIXTURES_DIR


@pytest.fixture
def fixture_store(fixtures_dir: Path) -> FixtureStore:
    """Load the bundled fixtures."""
    return FixtureStore.load(fixtures_dir)


@pytest.fixture
def random_source() -> FixedRandomSource:
    """Random source that never injects failures."""
    return FixedRandomSource()


@pytest.fixture
def shop(fixture_store: FixtureStore) -> ShopService:
    """Create a shop service over the bundled fixtures."""
    return ShopService(fixture_store)


@pytest.fixture
def store(fixture_store: FixtureStore, random_source: FixedRandomSource) -> ReservationStore:
    """Create a reservation store with deterministic randomness."""
    return ReservationStore(fixture_store, random_source=random_source)


@pytest.fixture
def config(fixtures_dir: Path) -> SandboxConfig:
    """Create a test config."""
    return SandboxConfig(fixtures_dir=fixtures_dir, openai_api_key="test-key")


@pytest.fixture
def create_request() -> dict[str, Any]:
    """Create-reservation request without a credit card guarantee."""
    return {
        "reservations": [
            {
                "roomStay": {
                    "arrivalDate": "2024-12-15",
                    "departureDate": "2024-12-17",
                    "roomType": "A1K",
                    "ratePlanCode": "FLEX",
                    "guarantee": {"guaranteeCode": "6PM"},
                },
                "guests": [{"givenName": "Alex", "surname": "Sandbox"}],
            }
        ]
    }


@pytest.fixture
def cc_create_request(create_request: dict[str, Any]) -> dict[str, Any]:
    """Create-reservation request guaranteed by credit card."""
    create_request["reservations"][0]["roomStay"]["guarantee"] = {
        "guaranteeCode": "CC",
        "creditCard": {"cardType": "VI", "cardNumber": "4111111111111111"},
    }
    return create_request


@pytest.fixture
def complete_draft() -> dict[str, Any]:
    """Complete draft as the model would produce it."""
    return {
        "hotelCode": "XSBOXD1",
        "hotelName": "Sandbox New York Hotel",
        "arrivalDate": "2024-12-15",
        "departureDate": "2024-12-17",
        "adults": 2,
        "children": 0,
        "roomType": "A1K",
        "roomName": "Deluxe Room One King Bed",
        "ratePlanCode": "FLEX",
        "ratePlanName": "Flexible Rate",
        "estimatedTotal": 420.22,
        "currencyCode": "EUR",
        "cancellationPolicy": "Cancel any time",
    }


def render_draft_reply(draft: dict[str, Any], message: str | None = "Please review and confirm.") -> str:
    """Render a model reply carrying a reservation draft."""
    body: dict[str, Any] = {"type": "reservation_draft", "reservation_draft": draft}
    if message is not None:
        body["message"] = message
    return json.dumps(body, indent=2)


@pytest.fixture
def fixed_random():
    """Factory for deterministic random sources."""
    return FixedRandomSource


@pytest.fixture
def draft_reply():
    """Renderer for model replies carrying a reservation draft."""
    return render_draft_reply


@pytest.fixture
def failing_chat_model() -> FailingChatModel:
    """Chat model that raises on every call."""
    return FailingChatModel()
