"""Entry point for the Product Server.

This script serves the FastAPI application with uvicorn on the host
and port from ``Settings`` (``HOST``/``PORT`` environment variables,
``127.0.0.1:3000`` by default).  A single worker is used so the
in-memory product store is shared by every request.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from product_server.app.core.config import settings
from product_server.app.main import app


async def main() -> None:
    """Serve the application until interrupted."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        workers=1,
        # Logging is configured by create_app; uvicorn only sets levels.
        log_config=None,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        logging.getLogger(__name__).info("Server stopped")
