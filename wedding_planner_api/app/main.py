"""
Main entrypoint for the Wedding Planner API.

This module assembles the FastAPI application, sets up logging,
chooses the record store and includes the API router under ``/api``.
The ``create_app`` function builds and configures the app, which is
then instantiated at module import time as ``app``.  Run it with
uvicorn, e.g.::

    uvicorn wedding_planner_api.app.main:app --reload

Error responses follow three cases: request validation failures are
reported as 400 with an ``Invalid <entity> data`` message, missing
records (including ids that are not integers) as 404 and storage
failures as 500.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .api.router import router as api_router
from .core.config import Settings, settings as default_settings
from .core.logging_config import setup_logging
from .services.memory_store import MemoryRecordStore
from .services.record_store import RecordStore, StorageError
from .services.registry import collection_for_path
from .services.sqlite_store import SqliteRecordStore

logger = logging.getLogger(__name__)

# 500 message per HTTP method; writes default to "Failed to save data".
STORAGE_FAILURE_MESSAGES = {
    "GET": "Failed to fetch data",
    "DELETE": "Failed to delete data",
}


def build_store(config: Settings) -> RecordStore:
    """Create the record store selected by ``config.storage_backend``."""
    if config.storage_backend == "sqlite":
        store: RecordStore = SqliteRecordStore(config.database_url, start_id=config.id_start)
    elif config.storage_backend == "memory":
        store = MemoryRecordStore(start_id=config.id_start)
    else:
        raise ValueError(f"Unknown storage backend: {config.storage_backend}")
    if config.seed_demo_data:
        store.seed_demo_data()
    logger.info("Using %s record store", config.storage_backend)
    return store


def create_app(store: Optional[RecordStore] = None, config: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    store : Optional[RecordStore]
        Record store to serve.  When omitted one is built from the
        settings; tests pass their own store to stay isolated.
    config : Optional[Settings]
        Settings to use instead of the module-level ``settings``.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    config = config or default_settings
    setup_logging(config.log_level, config.log_file or None, debug=config.debug)

    app = FastAPI(title=config.project_name, version=config.api_version, debug=config.debug)
    app.state.store = store if store is not None else build_store(config)

    app.include_router(api_router, prefix="/api")

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        collection = collection_for_path(request.url.path)
        errors = exc.errors()
        logger.info("Rejected %s %s: %s", request.method, request.url.path, errors)
        # An id that is not an integer cannot name a stored record.
        if collection and errors and all(error["loc"][0] == "path" for error in errors):
            return JSONResponse(
                status_code=status.HTTP_404_NOT_FOUND,
                content={"detail": collection.not_found_message},
            )
        detail = collection.invalid_message if collection else "Invalid request data"
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": detail})

    @app.exception_handler(StorageError)
    async def storage_exception_handler(request: Request, exc: StorageError) -> JSONResponse:
        # The store has already logged the underlying error.
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": STORAGE_FAILURE_MESSAGES.get(request.method, "Failed to save data")},
        )

    @app.get("/health", tags=["health"])
    async def health_check() -> dict:
        return {"status": "ok"}

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
