"""Book API: in-memory reservation storage built from fixture templates."""

import copy
import random
import threading
from abc import ABC, abstractmethod
from collections.abc import Callable
from datetime import datetime, timezone
from typing import Any

from loguru import logger

from hotelsandbox.core.fixtures import (
    BOOK_CANCEL,
    BOOK_CREATE_CC_GUARANTEED,
    BOOK_CREATE_SUCCESS,
    FixtureStore,
)
from hotelsandbox.utils.exceptions import HotelSandboxError, NoAvailabilityError, NotFoundError

CONFIRMATION_NUMBER_SPACE = 10_000_000
MAX_CONFIRMATION_ATTEMPTS = 100


class RandomSource(ABC):
    """Source of randomness for fault injection and confirmation numbers."""

    @abstractmethod
    def random(self) -> float:
        """Return a float in [0.0, 1.0)."""
        pass

    @abstractmethod
    def randrange(self, stop: int) -> int:
        """Return an int in [0, stop)."""
        pass


class SystemRandomSource(RandomSource):
    """RandomSource backed by :class:`random.Random`."""

    def __init__(self, seed: int | None = None):
        self._random = random.Random(seed)

    def random(self) -> float:
        return self._random.random()

    def randrange(self, stop: int) -> int:
        return self._random.randrange(stop)


def utc_timestamp(now: datetime | None = None) -> str:
    """Format a UTC instant as ISO-8601 with a ``Z`` suffix."""
    now = now or datetime.now(timezone.utc)
    return now.isoformat().replace("+00:00", "Z")


class ReservationStore:
    """Thread-safe in-memory reservations keyed by confirmation number.

    Every document handed in or out is a deep copy, so neither the stored
    records nor the fixture templates can be mutated by callers.
    """

    def __init__(
        self,
        fixtures: FixtureStore,
        random_source: RandomSource | None = None,
        no_availability_rate: float = 0.1,
        clock: Callable[[], datetime] | None = None,
    ):
        """Initialize the store.

        Args:
            fixtures: Loaded fixtures providing the response templates
            random_source: Randomness for fault injection and numbering
            no_availability_rate: Probability that ``create`` is refused
            clock: Returns the current UTC time (defaults to the system clock)
        """
        self.random_source = random_source or SystemRandomSource()
        self.no_availability_rate = no_availability_rate
        self.clock = clock or (lambda: datetime.now(timezone.utc))

        self._success_template = fixtures.get(BOOK_CREATE_SUCCESS)
        self._cc_guaranteed_template = fixtures.get(BOOK_CREATE_CC_GUARANTEED)
        self._cancellation_template = fixtures.get(BOOK_CANCEL)

        self._reservations: dict[str, Any] = {}
        self._lock = threading.Lock()

    def create(self, request: Any) -> Any:
        """Create a reservation.

        Args:
            request: Create-reservation request body

        Returns:
            The stored reservation document

        Raises:
            NoAvailabilityError: When the simulated inventory check fails
            HotelSandboxError: When no unused confirmation number can be drawn
        """
        logger.debug("Creating reservation with request: {}", request)

        if self.random_source.random() < self.no_availability_rate:
            logger.warning("Simulating no availability")
            raise NoAvailabilityError("No availability for requested dates")

        template = (
            self._cc_guaranteed_template
            if has_credit_card_guarantee(request)
            else self._success_template
        )
        response = copy.deepcopy(template)
        self._stamp_timestamp(response)

        with self._lock:
            confirmation_number = self._generate_confirmation_number()
            stamp_confirmation_number(response, confirmation_number)
            self._reservations[confirmation_number] = response

        logger.info("Reservation created successfully with confirmation: {}", confirmation_number)
        return copy.deepcopy(response)

    def get(self, confirmation_number: str) -> Any:
        """Retrieve a reservation.

        Raises:
            NotFoundError: If the confirmation number is unknown
        """
        logger.debug("Retrieving reservation: {}", confirmation_number)

        with self._lock:
            reservation = self._reservations.get(confirmation_number)
            if reservation is None:
                logger.warning("Reservation not found: {}", confirmation_number)
                raise NotFoundError(f"Reservation not found: {confirmation_number}")
            result = copy.deepcopy(reservation)

        logger.info("Reservation retrieved successfully: {}", confirmation_number)
        return result

    def modify(self, confirmation_number: str, request: Any) -> Any:
        """Modify a reservation.

        Only ``lastModifyDateTime`` is refreshed; the request body is not
        merged into the stored record.

        Raises:
            NotFoundError: If the confirmation number is unknown
        """
        logger.debug("Modifying reservation: {} with request: {}", confirmation_number, request)

        with self._lock:
            existing = self._reservations.get(confirmation_number)
            if existing is None:
                logger.warning("Reservation not found for modification: {}", confirmation_number)
                raise NotFoundError(f"Reservation not found: {confirmation_number}")

            modified = copy.deepcopy(existing)
            self._stamp_timestamp(modified)
            self._reservations[confirmation_number] = modified
            result = copy.deepcopy(modified)

        logger.info("Reservation modified successfully: {}", confirmation_number)
        return result

    def cancel(self, confirmation_number: str) -> Any:
        """Cancel a reservation and return the cancellation document.

        Raises:
            NotFoundError: If the confirmation number is unknown
        """
        logger.debug("Cancelling reservation: {}", confirmation_number)

        with self._lock:
            if self._reservations.pop(confirmation_number, None) is None:
                logger.warning("Reservation not found for cancellation: {}", confirmation_number)
                raise NotFoundError(f"Reservation not found: {confirmation_number}")

        response = copy.deepcopy(self._cancellation_template)
        stamp_confirmation_number(response, confirmation_number)
        self._stamp_timestamp(response)
        reservation = _first_reservation(response)
        if reservation is not None and isinstance(reservation.get("roomStay"), dict):
            reservation["roomStay"]["cancellationDate"] = utc_timestamp(self.clock())

        logger.info("Reservation cancelled successfully: {}", confirmation_number)
        return response

    def confirmation_numbers(self) -> list[str]:
        """List the confirmation numbers currently stored."""
        with self._lock:
            return list(self._reservations.keys())

    def _generate_confirmation_number(self) -> str:
        # Caller holds the lock.
        for _ in range(MAX_CONFIRMATION_ATTEMPTS):
            candidate = f"{self.random_source.randrange(CONFIRMATION_NUMBER_SPACE):07d}"
            if candidate not in self._reservations:
                return candidate
            logger.debug("Confirmation number {} already in use, drawing again", candidate)

        raise HotelSandboxError(
            f"No free confirmation number after {MAX_CONFIRMATION_ATTEMPTS} attempts"
        )

    def _stamp_timestamp(self, response: Any) -> None:
        reservation = _first_reservation(response)
        if reservation is not None:
            reservation["lastModifyDateTime"] = utc_timestamp(self.clock())


def _first_reservation(response: Any) -> dict[str, Any] | None:
    """Return the first reservation object of a list-shaped document."""
    if isinstance(response, list) and response and isinstance(response[0], dict):
        return response[0]
    return None


def has_credit_card_guarantee(request: Any) -> bool:
    """Check if the first reservation in a request is guaranteed by credit card."""
    if not isinstance(request, dict):
        return False

    reservations = request.get("reservations")
    if not isinstance(reservations, list) or not reservations:
        return False

    first = reservations[0]
    if not isinstance(first, dict):
        return False

    room_stay = first.get("roomStay")
    if not isinstance(room_stay, dict):
        return False

    guarantee = room_stay.get("guarantee")
    return isinstance(guarantee, dict) and "creditCard" in guarantee


def stamp_confirmation_number(response: Any, confirmation_number: str) -> None:
    """Write the confirmation number into the ``Confirmation`` reservation id."""
    reservation = _first_reservation(response)
    if reservation is None:
        return

    ids = reservation.get("reservationIds")
    if not isinstance(ids, list):
        return

    for entry in ids:
        if isinstance(entry, dict) and entry.get("type") == "Confirmation":
            entry["id"] = confirmation_number
