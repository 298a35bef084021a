"""Entry point for the Intern Portal API.

This script serves the FastAPI application with Uvicorn.  It is meant
to be executed from the project root, for example under Docker or a
process manager where you only specify a single Python file to run.

Configuration such as PORT, MONGO_URL, DB_NAME or RECORD_STORE may be
placed in a `.env` file in the same directory; it is loaded before the
application settings are read.

Uvicorn handles SIGINT and SIGTERM: it stops accepting requests, runs
the application's shutdown hook (which closes the record store) and
exits.

Usage:
    python run.py
"""
import asyncio
import logging

from dotenv import load_dotenv
from uvicorn import Config, Server

# Environment variables must be in place before the settings module is
# imported, so load the .env file first.
load_dotenv()

from intern_portal_api.app.core.config import settings  # noqa: E402
from intern_portal_api.app.main import app  # noqa: E402

logger = logging.getLogger("intern_portal_api.run")


async def run_api() -> None:
    """Start the API using Uvicorn on ``settings.host``/``settings.port``."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    logger.info("Server is running on port %s", settings.port)
    logger.info("API available at http://localhost:%s/api", settings.port)
    logger.info("Test endpoints:")
    logger.info("  - http://localhost:%s/api (Hello World)", settings.port)
    logger.info("  - http://localhost:%s/api/user (User data)", settings.port)
    logger.info("  - http://localhost:%s/api/leaderboard (Leaderboard data)", settings.port)
    logger.info("  - http://localhost:%s/api/status (Status checks)", settings.port)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(run_api())
    except (KeyboardInterrupt, SystemExit):
        pass
