"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
API starts with an in-memory store when nothing is configured.  Set
``STORAGE_BACKEND=sqlite`` to keep records in a local database file
instead.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Wedding Planner API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Optional path to a log file.  When empty only console logging is
    # configured.
    log_file: str = os.getenv("LOG_FILE", "")

    # Which record store backs the API: ``memory`` keeps everything in
    # process memory and loses it on restart, ``sqlite`` persists records
    # to ``database_url``.
    storage_backend: str = os.getenv("STORAGE_BACKEND", "memory").lower()

    # Path to the SQLite database used by the ``sqlite`` backend.  If a
    # relative path is provided, it will be resolved relative to the
    # project root by the ``db`` module.
    database_url: str = os.getenv("DATABASE_URL", "wedding_planner.db")

    # Seed a fresh store with the default budget categories.
    seed_demo_data: bool = os.getenv("SEED_DEMO_DATA", "false").lower() in {"1", "true", "yes"}

    # First identifier handed out by a new store.
    id_start: int = int(os.getenv("ID_START", "1"))

    api_host: str = os.getenv("API_HOST", "0.0.0.0")
    api_port: int = int(os.getenv("API_PORT", "8000"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Because the dataclass
# computes values at class creation time, environment variables should
# be set before importing this module.
settings = Settings()
