"""FastAPI application factory for the hotel sandbox."""

from fastapi import FastAPI
from langchain_core.language_models import BaseChatModel

from hotelsandbox import __version__
from hotelsandbox.agent.assistant import ReservationAssistant
from hotelsandbox.api import agent, book, shop
from hotelsandbox.api.errors import register_exception_handlers
from hotelsandbox.core.config import SandboxConfig, load_config
from hotelsandbox.core.fixtures import FixtureStore
from hotelsandbox.services.book import RandomSource, ReservationStore
from hotelsandbox.services.shop import ShopService


def create_app(
    config: SandboxConfig | None = None,
    *,
    fixtures: FixtureStore | None = None,
    random_source: RandomSource | None = None,
    chat_model: BaseChatModel | None = None,
) -> FastAPI:
    """Build the sandbox API.

    Fixtures are loaded here, so a missing or broken fixture aborts startup.

    Args:
        config: Configuration (loaded from the environment if omitted)
        fixtures: Pre-loaded fixtures (loaded from ``config.fixtures_dir`` if omitted)
        random_source: Randomness for the reservation store
        chat_model: Chat model for the agent (built from config if omitted)

    Returns:
        Configured FastAPI app

    Raises:
        FixtureLoadError: If fixtures cannot be loaded
    """
    config = config or load_config()
    fixtures = fixtures or FixtureStore.load(config.fixtures_dir)

    shop_service = ShopService(fixtures)

    app = FastAPI(
        title="Hotel Sandbox API",
        description="Mock hotel distribution API: shopping, booking and a reservation agent.",
        version=__version__,
    )
    app.state.config = config
    app.state.shop = shop_service
    app.state.reservations = ReservationStore(
        fixtures,
        random_source=random_source,
        no_availability_rate=config.no_availability_rate,
    )
    app.state.assistant = ReservationAssistant(config, shop_service, chat_model=chat_model)

    app.include_router(shop.router)
    app.include_router(book.router)
    app.include_router(agent.router)
    register_exception_handlers(app)

    @app.get("/", tags=["Health"])
    def root():
        """Health check."""
        return {"status": "ok", "service": "Hotel Sandbox API", "version": __version__}

    return app
