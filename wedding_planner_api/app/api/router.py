"""
Top-level API router.

Aggregates one CRUD router per record collection plus the wedding
details and summary routes.  ``main.create_app`` mounts the result
under ``/api``.
"""

from fastapi import APIRouter

from ..services.registry import COLLECTIONS, PATH_ALIASES, ROUTES
from .endpoints import records, wedding

router = APIRouter()

for path, collection in ROUTES.items():
    router.include_router(
        records.build_router(collection),
        prefix=f"/{path}",
        tags=[path],
    )

# Alias paths share the handlers of the collection they point to, but
# are hidden from the OpenAPI schema to avoid duplicate operations.
for alias, kind in PATH_ALIASES.items():
    router.include_router(
        records.build_router(COLLECTIONS[kind]),
        prefix=f"/{alias}",
        include_in_schema=False,
    )

router.include_router(wedding.router, tags=["wedding"])
