"""FastAPI dependencies shared by the endpoint modules."""

from fastapi import Request

from ..services.record_store import RecordStore


def get_store(request: Request) -> RecordStore:
    """Return the record store attached to the application in ``create_app``."""
    return request.app.state.store
