"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
portal starts on a developer machine with nothing configured; a local
MongoDB on the default port is assumed unless ``RECORD_STORE`` or
``MONGO_URL`` say otherwise.  ``run.py`` loads a ``.env`` file before
this module is imported, so values placed there are picked up too.
"""

import os
from dataclasses import dataclass, field
from typing import List


def _split_csv(raw: str) -> List[str]:
    return [item.strip() for item in raw.split(",") if item.strip()]


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Intern Portal API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    # Listen address used by ``run.py``.
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8000"))

    # Which backend holds status-check records: ``mongo`` (default),
    # ``sqlite`` for a local file, or ``memory`` for a throwaway store
    # that lives as long as the process.
    record_store: str = os.getenv("RECORD_STORE", "mongo").lower()

    # MongoDB connection string and database name.  The records live in
    # the ``statuschecks`` collection of ``db_name``.
    mongo_url: str = os.getenv("MONGO_URL", "mongodb://localhost:27017")
    db_name: str = os.getenv("DB_NAME", "intern_dashboard")
    mongo_timeout_ms: int = int(os.getenv("MONGO_TIMEOUT_MS", "5000"))

    # Path for the SQLite backend.  A relative path is resolved against
    # the project root by the ``db`` module.
    database_url: str = os.getenv("DATABASE_URL", "intern_portal.db")

    # Comma-separated list of origins allowed to call the API from a
    # browser.  ``*`` keeps the portal open to any origin.
    cors_origins: List[str] = field(
        default_factory=lambda: _split_csv(os.getenv("CORS_ORIGINS", "*"))
    )


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
