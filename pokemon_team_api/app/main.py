"""
Main entrypoint for the Pokemon Team API.

This module assembles the FastAPI application, sets up logging and
includes the API router.  The ``create_app`` function builds and
configures the app, which is then instantiated at module import time
as ``app``, so it can be served directly::

    uvicorn pokemon_team_api.app.main:app --host 127.0.0.1 --port 3000

The application title and version are provided via ``Settings`` from
``core.config``.
"""

import logging

from fastapi import FastAPI

from .core.config import settings
from .core.logging_config import setup_logging
from .api.router import router


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.  The team it serves
        is process‑wide and shared between all instances.
    """
    # Configure logging before anything below logs.
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version)
    app.include_router(router)

    @app.on_event("startup")
    async def startup_event() -> None:
        logger = logging.getLogger(__name__)
        logger.info("Server running on %s", settings.base_url)
        logger.info("Try: curl %s/pokemon", settings.base_url)

    return app


app = create_app()
