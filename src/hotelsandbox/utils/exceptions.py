"""Custom exceptions for the hotel sandbox."""


class HotelSandboxError(Exception):
    """Base exception for hotel sandbox errors."""

    pass


class FixtureLoadError(HotelSandboxError):
    """Error loading a bundled fixture document."""

    pass


class NotFoundError(HotelSandboxError):
    """Unknown confirmation number."""

    pass


class NoAvailabilityError(HotelSandboxError):
    """Simulated lack of inventory for the requested stay."""

    pass
