"""Utility functions and exceptions."""

from hotelsandbox.utils.exceptions import (
    FixtureLoadError,
    HotelSandboxError,
    NoAvailabilityError,
    NotFoundError,
)

__all__ = [
    "HotelSandboxError",
    "FixtureLoadError",
    "NotFoundError",
    "NoAvailabilityError",
]
