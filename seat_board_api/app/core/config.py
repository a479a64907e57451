"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service starts against a local SQLite file without any setup.  A
``.env`` file in the working directory is loaded first, which keeps
store credentials out of the shell history.
"""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Seat Reservation Board")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    # Which seat store backend to use: ``sqlite`` (local file) or
    # ``postgrest`` (a hosted Supabase/PostgREST ``seats`` table).
    seat_store: str = os.getenv("SEAT_STORE", "sqlite").lower()

    # Path for the SQLite database.  A relative path is resolved
    # relative to the project root by the ``db`` module.
    database_url: str = os.getenv("DATABASE_URL", "seat_board.db")

    # Connection details for the PostgREST backend.  The key is sent
    # both as ``apikey`` and as a bearer token, as Supabase expects.
    supabase_url: str = os.getenv("SUPABASE_URL", "")
    supabase_key: str = os.getenv("SUPABASE_KEY", "")
    seat_store_timeout: float = float(os.getenv("SEAT_STORE_TIMEOUT", "10"))

    # Comma separated list of allowed CORS origins.
    cors_origins: str = os.getenv("CORS_ORIGINS", "*")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3000"))

    @property
    def cors_origin_list(self) -> list[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
