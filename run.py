"""Entry point for the Coursework API.

Starts the API under uvicorn.  Host and port come from the ``HOST`` and
``PORT`` environment variables (defaults ``0.0.0.0`` and ``3001``).

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from coursework_api.app.core.config import settings
from coursework_api.app.main import app


async def main() -> None:
    """Serve the application until interrupted."""
    config = Config(app=app, host=settings.host, port=settings.port, reload=False, log_level="info")
    server = Server(config)
    logging.getLogger(__name__).info("Server running on port %s", settings.port)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
