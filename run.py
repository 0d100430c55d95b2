"""Entry point for running the marketplace API.

Starts the FastAPI application with uvicorn.  Host, port and log level
come from the environment (``HOST``, ``PORT``, ``LOG_LEVEL``); see
``marketplace_api/app/core/config.py`` for defaults.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from marketplace_api.app.core.config import settings
from marketplace_api.app.main import app


async def run_api() -> None:
    """Serve the API until interrupted."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(run_api())
    except (KeyboardInterrupt, SystemExit):
        logging.getLogger(__name__).info("API stopped")
