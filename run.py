"""Entry point for the bookshelf service.

Serves the FastAPI application with Uvicorn.  Host and port come from
the ``HOST`` and ``PORT`` environment variables (see
``bookshelf.app.core.config``); defaults are ``0.0.0.0`` and ``9000``.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from bookshelf.app.core.config import settings
from bookshelf.app.main import app


async def run_api() -> None:
    """Start the bookshelf API using Uvicorn."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
        # Logging is already configured by ``create_app``.
        log_config=None,
    )
    server = Server(config)
    logging.getLogger(__name__).info("Serving bookshelf on %s:%s", settings.host, settings.port)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(run_api())
    except (KeyboardInterrupt, SystemExit):
        pass
