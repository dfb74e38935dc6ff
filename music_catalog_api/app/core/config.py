"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables so that no settings library is required.
Defaults are provided for all fields; in a deployment override them
via the environment (for example from a ``.env`` file loaded by the
process manager).
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Music Catalog API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    # Path to the SQLite catalog database.  Relative paths are resolved
    # against the project root by the ``db`` module.
    database_url: str = os.getenv("DATABASE_URL", "music_catalog.db")

    # Prefix under which the catalog routes are mounted.  Empty by
    # default so that ``/artists``, ``/albums`` etc. sit at the root.
    api_prefix: str = os.getenv("API_PREFIX", "")

    # Comma separated list of origins allowed by the CORS middleware.
    cors_origins: str = os.getenv("CORS_ORIGINS", "*")

    host: str = os.getenv("API_HOST", "0.0.0.0")
    port: int = int(os.getenv("API_PORT", "3000"))

    @property
    def cors_origin_list(self) -> list[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables must
# be set before this module is imported.
settings = Settings()
