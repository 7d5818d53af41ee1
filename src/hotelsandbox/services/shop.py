"""Shop API: availability lookups answered from fixtures."""

from typing import Any

from loguru import logger

from hotelsandbox.core.fixtures import (
    SHOP_CALENDAR_AVAILABILITY,
    SHOP_MULTI_PROPERTY_SEARCH,
    SHOP_OFFER_DETAIL,
    SHOP_PROPERTY_OFFERS,
    FixtureStore,
)


class ShopService:
    """Serves shopping fixtures; query parameters never filter the result."""

    def __init__(self, fixtures: FixtureStore):
        self.fixtures = fixtures

    def search_properties(self) -> dict[str, Any]:
        logger.debug("Returning multi-property search data")
        return self.fixtures.get(SHOP_MULTI_PROPERTY_SEARCH)

    def get_property_offers(self, hotel_code: str) -> dict[str, Any]:
        logger.debug("Returning property offers for hotel: {}", hotel_code)
        return self.fixtures.get(SHOP_PROPERTY_OFFERS)

    def get_calendar_availability(self, hotel_code: str) -> dict[str, Any]:
        logger.debug("Returning calendar availability for hotel: {}", hotel_code)
        return self.fixtures.get(SHOP_CALENDAR_AVAILABILITY)

    def get_offer_detail(
        self, hotel_code: str, room_type: str, rate_plan_code: str
    ) -> dict[str, Any]:
        logger.debug(
            "Returning offer detail for hotel: {}, roomType: {}, ratePlanCode: {}",
            hotel_code,
            room_type,
            rate_plan_code,
        )
        return self.fixtures.get(SHOP_OFFER_DETAIL)
