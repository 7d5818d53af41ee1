"""Shop and book services."""

from hotelsandbox.services.book import RandomSource, ReservationStore, SystemRandomSource
from hotelsandbox.services.shop import ShopService

__all__ = ["ShopService", "ReservationStore", "RandomSource", "SystemRandomSource"]
