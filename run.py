"""Entry point for the Flavor Store API.

Serves ``flavor_store_api.app.main:app`` with Uvicorn on the host and
port from ``Settings`` (``localhost:3000`` unless ``HOST``/``PORT``
are set).

Usage:
    python run.py
"""
import asyncio

from uvicorn import Config, Server

from flavor_store_api.app.core.config import settings
from flavor_store_api.app.main import app


async def main() -> None:
    """Start the API using Uvicorn."""
    config = Config(app=app, host=settings.host, port=settings.port, reload=False, log_level=settings.log_level.lower())
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
