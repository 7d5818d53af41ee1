"""Loading of the canned JSON documents served by the sandbox."""

import copy
import json
from pathlib import Path
from typing import Any

from loguru import logger

from hotelsandbox.utils.exceptions import FixtureLoadError

SHOP_MULTI_PROPERTY_SEARCH = "shop-multi-property-search"
SHOP_PROPERTY_OFFERS = "shop-property-offers"
SHOP_CALENDAR_AVAILABILITY = "shop-calendar-availability"
SHOP_OFFER_DETAIL = "shop-offer-detail"
BOOK_CREATE_SUCCESS = "book-create-reservation-success"
BOOK_CREATE_CC_GUARANTEED = "book-create-reservation-cc-guaranteed"
BOOK_RETRIEVE = "book-retrieve-reservation"
BOOK_CANCEL = "book-cancel-reservation"

FIXTURE_NAMES = (
    SHOP_MULTI_PROPERTY_SEARCH,
    SHOP_PROPERTY_OFFERS,
    SHOP_CALENDAR_AVAILABILITY,
    SHOP_OFFER_DETAIL,
    BOOK_CREATE_SUCCESS,
    BOOK_CREATE_CC_GUARANTEED,
    BOOK_RETRIEVE,
    BOOK_CANCEL,
)


class FixtureStore:
    """Read-only set of fixture documents loaded once at startup."""

    def __init__(self, documents: dict[str, Any]):
        self._documents = documents

    @classmethod
    def load(cls, fixtures_dir: str | Path) -> "FixtureStore":
        """Load every known fixture from a directory.

        Args:
            fixtures_dir: Directory holding ``<name>.json`` files

        Returns:
            FixtureStore with all documents

        Raises:
            FixtureLoadError: If any fixture is missing or is not valid JSON
        """
        directory = Path(fixtures_dir)
        logger.info("Loading fixtures from {}", directory)

        documents: dict[str, Any] = {}
        for name in FIXTURE_NAMES:
            path = directory / f"{name}.json"
            try:
                documents[name] = json.loads(path.read_text(encoding="utf-8"))
            except FileNotFoundError as e:
                raise FixtureLoadError(f"Fixture not found: {path}") from e
            except (OSError, json.JSONDecodeError) as e:
                raise FixtureLoadError(f"Failed to load fixture {path}: {e}") from e
            logger.info("Loaded {}.json", name)

        logger.info("Loaded {} fixtures", len(documents))
        return cls(documents)

    def get(self, name: str) -> Any:
        """Return a private copy of a fixture document.

        Raises:
            KeyError: If no fixture with that name was loaded
        """
        return copy.deepcopy(self._documents[name])

    def names(self) -> list[str]:
        """List the loaded fixture names."""
        return list(self._documents.keys())
