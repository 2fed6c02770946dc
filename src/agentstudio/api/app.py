"""FastAPI application factory."""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from agentstudio import __version__
from agentstudio.api.middleware import studio_error_handler
from agentstudio.api.routes import run
from agentstudio.config import get_settings
from agentstudio.logging_config import setup_logging
from agentstudio.models.errors import StudioError

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()
    setup_logging(settings)

    missing = settings.missing_credentials()
    if missing:
        # Runs will be rejected until these are set; report once at startup
        logger.warning("Missing required environment variables: %s", ", ".join(missing))

    app = FastAPI(
        title="Agentic Studio",
        description="Topic-to-published-video pipeline",
        version=__version__,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(StudioError, studio_error_handler)

    app.include_router(run.router)

    @app.get("/health")
    async def health():
        return {"status": "ok", "version": __version__}

    return app


app = create_app()
