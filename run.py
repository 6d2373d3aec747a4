"""Entry point for the Wedding Planner API server.

This script serves the FastAPI application with Uvicorn.  It is
intended to be executed from the project root, for example under
Docker, where you only specify a single Python file to run.

Configuration such as ``STORAGE_BACKEND``, ``DATABASE_URL``,
``API_HOST`` and ``API_PORT`` is read from environment variables; see
``wedding_planner_api/app/core/config.py`` for the full list.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from wedding_planner_api.app.core.config import settings
from wedding_planner_api.app.main import app


async def run_api() -> None:
    """Start the API using Uvicorn on ``API_HOST``:``API_PORT``."""
    config = Config(
        app=app,
        host=settings.api_host,
        port=settings.api_port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    await server.serve()


def main() -> None:
    try:
        asyncio.run(run_api())
    except (KeyboardInterrupt, SystemExit):
        logging.getLogger(__name__).info("Server stopped")


if __name__ == "__main__":
    main()
