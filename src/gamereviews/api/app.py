"""
Main FastAPI application for the Game Reviews API
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from ..config import settings
from ..logging import configure_logging, get_logger
from ..middleware import LoggingContextMiddleware
from ..store.data_store import DataStore
from ..store.seed_data import load_seed_file

# Configure logging before creating logger
configure_logging(debug=settings.debug)
logger = get_logger(__name__)


def build_store() -> DataStore:
    """Create the application's data store from settings."""
    seed = load_seed_file(settings.seed_path) if settings.seed_path else None
    return DataStore.from_seed(seed, id_strategy=settings.id_strategy)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    logger.info("Starting Game Reviews API...", store=repr(app.state.store))

    yield

    logger.info("Shutting down Game Reviews API...")


def create_app(store: DataStore | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        store: Data store to serve. When omitted, one is built from settings.
    """
    app = FastAPI(
        title="Game Reviews API",
        description="GraphQL API for games, reviews and authors",
        version=__version__,
        lifespan=lifespan,
        debug=settings.debug,
    )
    app.state.store = store if store is not None else build_store()

    app.add_middleware(LoggingContextMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health")
    async def health_check(request: Request):  # pyright: ignore [reportUnusedFunction]
        """Health check endpoint."""
        current: DataStore = request.app.state.store
        return {
            "status": "healthy",
            "version": __version__,
            "games": len(current.games),
            "reviews": len(current.reviews),
            "authors": len(current.authors),
        }

    try:
        from ..graphql.schema import create_graphql_router, validate_schema

        logger.info("Validating GraphQL schema...")
        validate_schema()

        app.include_router(create_graphql_router(graphiql=settings.graphiql), prefix="")
        logger.info("GraphQL endpoint initialized successfully", endpoint="/graphql")
    except Exception as e:
        logger.error("Failed to initialize GraphQL endpoint", error=str(e))
        raise

    return app
