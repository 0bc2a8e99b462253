"""Entry point for the Face Store API server.

Starts the FastAPI application with Uvicorn.  Host, port and log level
are taken from the environment (see ``face_api.app.core.config``); the
defaults serve on ``localhost:8080``.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from face_api.app.core.config import settings
from face_api.app.main import app


async def main() -> None:
    """Serve the API until interrupted."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    logging.getLogger(__name__).info("Serving face API on %s:%s", settings.host, settings.port)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
