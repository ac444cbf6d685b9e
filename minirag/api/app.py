"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from minirag import __version__
from minirag.api.routes import document, query
from minirag.config import AppConfig
from minirag.session import Session
from minirag.utils import configure_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager.

    Cancels any pending answer on shutdown.
    """
    logger.info("minirag API started (%d dimensions)", app.state.session.dimensions)

    yield

    logger.info("Shutting down minirag API...")
    app.state.session.close()


def create_app(config: AppConfig | None = None, session: Session | None = None) -> FastAPI:
    """Create and configure FastAPI application.

    Args:
        config: Application config (default: built-in defaults)
        session: Existing session to serve (default: built from config)

    Returns:
        Configured FastAPI application
    """
    config = config or AppConfig()
    configure_logging(config.logging.level)

    app = FastAPI(
        title="minirag API",
        description="In-memory chunk, embed, index and retrieve pipeline",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.config = config
    app.state.session = session or Session.from_config(config)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.api.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(document.router)
    app.include_router(query.router)

    @app.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "healthy"}

    return app
