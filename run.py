"""Entry point for the catering booking API.

Starts the FastAPI application with Uvicorn.  It is intended to be
executed from the project root, for example in Docker or on a PaaS
where you only specify a single Python file to run.

Configuration is read from environment variables (see
``catering_api/app/core/config.py``); ``HOST`` and ``PORT`` select the
bind address.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from catering_api.app.core.config import settings
from catering_api.app.main import app


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
    try:
        await server.serve()
    except Exception:
        logging.getLogger(__name__).exception("API server stopped with an error")
        raise


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
