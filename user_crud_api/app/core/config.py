"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service starts without any configuration; in a deployment override
them via the environment (or a ``.env`` loaded by your process
manager).
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "User CRUD API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Optional path to a log file.  Empty means console only.
    log_file: str = os.getenv("LOG_FILE", "")

    # Path to the SQLite database file.  A relative path is resolved
    # against the project root by ``core.db.get_database_path``.
    database_url: str = os.getenv("DATABASE_URL", "users.db")

    # Prefix under which the versioned router is mounted.  Empty keeps
    # the routes at ``/users``.
    api_prefix: str = os.getenv("API_PREFIX", "")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8080"))


# Instantiated once at import time; environment variables must be set
# before this module is imported.
settings = Settings()
