"""Entry point for the Service Request API.

Launches the FastAPI application with Uvicorn.  Intended to be executed
from the project root, for example under Docker, where only a single
Python file is specified.

Configuration such as ADMIN_KEY, DATA_FILE, HOST and PORT is read from
environment variables (see ``service_request_api/app/core/config.py``).

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from service_request_api.app.core.config import settings
from service_request_api.app.main import app


async def main() -> None:
    """Serve the API until interrupted."""
    config = Config(app=app, host=settings.host, port=settings.port, reload=False, log_level=settings.log_level.lower())
    server = Server(config)
    logging.getLogger(__name__).info("Server running at http://%s:%s", settings.host, settings.port)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
