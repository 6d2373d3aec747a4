"""
Registry of the record collections exposed by the API.

Each ``Collection`` ties an entity kind to its REST path, a human
readable label used in error messages and the three pydantic schemas
that validate input and shape output.  Stores and routers look
collections up here instead of hard-coding per-entity code.
"""

from dataclasses import dataclass, replace
from typing import Any, Dict, List, Optional, Type

from pydantic import BaseModel

from ..schemas.budget import (
    BudgetCategoryCreate,
    BudgetCategoryRead,
    BudgetCategoryUpdate,
    BudgetExpenseCreate,
    BudgetExpenseRead,
    BudgetExpenseUpdate,
)
from ..schemas.dress import DressCreate, DressRead, DressUpdate
from ..schemas.guest import GuestCreate, GuestRead, GuestUpdate
from ..schemas.service import ServiceCreate, ServiceRead, ServiceUpdate
from ..schemas.task import TaskCreate, TaskRead, TaskUpdate
from ..schemas.vendor import VendorCreate, VendorRead, VendorUpdate
from ..schemas.venue import VenueCreate, VenueRead, VenueUpdate


@dataclass(frozen=True)
class Collection:
    """Description of one entity collection."""

    kind: str
    path: str
    label: str
    create_schema: Type[BaseModel]
    update_schema: Type[BaseModel]
    read_schema: Type[BaseModel]

    def validate_create(self, data: Any) -> Dict[str, Any]:
        """Validate an insert payload and return it with defaults filled.

        ``data`` may be an instance of the create schema or a plain
        mapping; the result is a JSON-ready dict keyed by wire names.
        """
        if not isinstance(data, self.create_schema):
            data = self.create_schema.model_validate(data)
        return data.model_dump(mode="json", by_alias=True)

    def validate_update(self, data: Any) -> Dict[str, Any]:
        """Validate a partial payload and return only the supplied fields."""
        if not isinstance(data, self.update_schema):
            data = self.update_schema.model_validate(data)
        return data.model_dump(mode="json", by_alias=True, exclude_unset=True)

    def to_read(self, record: Dict[str, Any]) -> BaseModel:
        return self.read_schema.model_validate(record)

    @property
    def not_found_message(self) -> str:
        return f"{self.label.capitalize()} not found"

    @property
    def invalid_message(self) -> str:
        return f"Invalid {self.label} data"


COLLECTIONS: Dict[str, Collection] = {
    c.kind: c
    for c in [
        Collection("guests", "guests", "guest", GuestCreate, GuestUpdate, GuestRead),
        Collection(
            "budget_categories",
            "budget-categories",
            "budget category",
            BudgetCategoryCreate,
            BudgetCategoryUpdate,
            BudgetCategoryRead,
        ),
        Collection(
            "budget_expenses",
            "budget-expenses",
            "budget expense",
            BudgetExpenseCreate,
            BudgetExpenseUpdate,
            BudgetExpenseRead,
        ),
        Collection("venues", "venues", "venue", VenueCreate, VenueUpdate, VenueRead),
        # Services are still published under their historical "flowers" path.
        Collection("services", "flowers", "service", ServiceCreate, ServiceUpdate, ServiceRead),
        Collection("dresses", "dresses", "dress", DressCreate, DressUpdate, DressRead),
        Collection("vendors", "vendors", "vendor", VendorCreate, VendorUpdate, VendorRead),
        Collection("tasks", "tasks", "task", TaskCreate, TaskUpdate, TaskRead),
    ]
}

# Collection served at each REST path.  The historical ``flowers`` path
# keeps its own wording in error messages ("Flower not found").
ROUTES: Dict[str, Collection] = {c.path: c for c in COLLECTIONS.values()}
ROUTES["flowers"] = replace(COLLECTIONS["services"], label="flower")

# Extra REST paths that serve an existing collection.
PATH_ALIASES: Dict[str, str] = {"services": "services"}


def get_collection(kind: str) -> Collection:
    """Return the collection registered for ``kind``.

    Raises
    ------
    ValueError
        If ``kind`` is not a known entity kind.
    """
    try:
        return COLLECTIONS[kind]
    except KeyError:
        raise ValueError(f"Unknown entity kind: {kind}") from None


def collection_for_path(path: str) -> Optional[Collection]:
    """Find the collection served at a request path such as ``/api/guests/3``."""
    segments: List[str] = [s for s in path.split("/") if s]
    if len(segments) < 2 or segments[0] != "api":
        return None
    resource = segments[1]
    if resource in ROUTES:
        return ROUTES[resource]
    if resource in PATH_ALIASES:
        return COLLECTIONS[PATH_ALIASES[resource]]
    return None
