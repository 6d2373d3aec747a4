"""
CRUD endpoints for the record collections.

Every collection in the registry gets the same five routes:

* ``GET /api/<path>`` – all records, in insertion order;
* ``GET /api/<path>/{record_id}`` – one record or 404;
* ``POST /api/<path>`` – create, 201 with the stored record;
* ``PUT /api/<path>/{record_id}`` – partial update, 200 or 404;
* ``DELETE /api/<path>/{record_id}`` – 204 or 404.

Request bodies are validated against the collection's pydantic
schemas; failures are turned into 400 responses by the handler
installed in ``main.create_app``.  There is no pagination, sorting or
filtering here; clients filter the full list themselves.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from ...services.record_store import RecordStore
from ...services.registry import Collection
from ..deps import get_store


def build_router(collection: Collection) -> APIRouter:
    """Create the CRUD router for one collection."""
    router = APIRouter()
    kind = collection.kind
    create_schema = collection.create_schema
    update_schema = collection.update_schema
    read_schema = collection.read_schema

    @router.get("", response_model=List[read_schema], name=f"list_{kind}")
    async def list_records(store: RecordStore = Depends(get_store)):
        return store.list(kind)

    @router.get("/{record_id}", response_model=read_schema, name=f"get_{kind}")
    async def get_record(record_id: int, store: RecordStore = Depends(get_store)):
        record = store.get(kind, record_id)
        if record is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=collection.not_found_message)
        return record

    @router.post(
        "",
        response_model=read_schema,
        status_code=status.HTTP_201_CREATED,
        name=f"create_{kind}",
    )
    async def create_record(payload: create_schema, store: RecordStore = Depends(get_store)):
        return store.create(kind, payload)

    @router.put("/{record_id}", response_model=read_schema, name=f"update_{kind}")
    async def update_record(
        record_id: int,
        payload: update_schema,
        store: RecordStore = Depends(get_store),
    ):
        record = store.update(kind, record_id, payload)
        if record is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=collection.not_found_message)
        return record

    @router.delete(
        "/{record_id}",
        status_code=status.HTTP_204_NO_CONTENT,
        name=f"delete_{kind}",
    )
    async def delete_record(record_id: int, store: RecordStore = Depends(get_store)) -> None:
        if not store.delete(kind, record_id):
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=collection.not_found_message)
        return None

    return router
