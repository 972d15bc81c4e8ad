"""Entry point for the Pokemon Team API.

Serves the FastAPI application with Uvicorn on the address given by
the ``HOST`` and ``PORT`` environment variables (defaults
``127.0.0.1`` and ``3000``).

Usage:
    python run.py
"""
import asyncio

from uvicorn import Config, Server

from pokemon_team_api.app.core.config import settings
from pokemon_team_api.app.core.logging_config import resolve_level_name
from pokemon_team_api.app.main import app


def build_config() -> Config:
    """Uvicorn configuration derived from ``settings``."""
    return Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=resolve_level_name(settings.log_level).lower(),
    )


async def main() -> None:
    """Run the API server until it is stopped."""
    server = Server(build_config())
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
