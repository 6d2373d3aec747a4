"""
Record store interface shared by the in-memory and SQLite backends.

``RecordStore`` implements list/get/create/update/delete for every
entity kind on top of a handful of persistence hooks that the concrete
stores provide.  Identifiers come from a single counter shared by all
kinds; the counter is owned by the store instance and starts at the
``start_id`` passed to the constructor.

Records are kept as JSON-ready dicts keyed by wire (camelCase) names.
Callers receive pydantic ``<Entity>Read`` models.

Budget side effect: creating an expense adds its amount to the
``spentAmount`` of the category named by ``categoryId``.  An unknown
category is ignored and the expense is stored anyway.  Updating or
deleting an expense does not touch the category total.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Any, Dict, List, Optional

from pydantic import BaseModel

from ..schemas.common import COLOR_PALETTE
from ..schemas.wedding import WeddingDetails
from .registry import get_collection

logger = logging.getLogger(__name__)

WEDDING_DETAILS_KEY = "wedding_details"

# Budget categories created by ``seed_demo_data``.
DEMO_BUDGET_CATEGORIES = [
    ("Venue", "10000", "8500"),
    ("Catering", "6000", "4200"),
    ("Photography", "3500", "2800"),
    ("Flowers", "2500", "1840"),
    ("Music", "1500", "0"),
    ("Dress", "1500", "1200"),
]


class StorageError(Exception):
    """Raised when the storage medium rejects a read or write."""


class RecordStore(ABC):
    """Base class for record stores."""

    def __init__(self, start_id: int = 1) -> None:
        if start_id < 1:
            raise ValueError("start_id must be a positive integer")
        self.start_id = start_id

    # ------------------------------------------------------------------
    # Persistence hooks
    # ------------------------------------------------------------------
    @abstractmethod
    def next_id(self) -> int:
        """Peek at the identifier the next ``create`` will receive.

        Nothing is consumed.  Meant for diagnostics and tests, e.g. to
        check that a failed insert did not advance the counter.
        """

    @abstractmethod
    def _read(self, kind: str) -> List[Dict[str, Any]]:
        """Return the records of ``kind`` in insertion order."""

    @abstractmethod
    def _insert(self, kind: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        """Allocate the next identifier, store the record and return it."""

    @abstractmethod
    def _replace(self, kind: str, record: Dict[str, Any]) -> None:
        """Overwrite the stored record that has the same ``id``."""

    @abstractmethod
    def _remove(self, kind: str, record_id: int) -> bool:
        """Remove a record; return whether it existed."""

    @abstractmethod
    def _load_document(self, key: str) -> Optional[Dict[str, Any]]:
        """Return a stored standalone document or ``None``."""

    @abstractmethod
    def _save_document(self, key: str, value: Dict[str, Any]) -> None:
        """Store a standalone document under ``key``."""

    @abstractmethod
    def _delete_document(self, key: str) -> bool:
        """Delete a standalone document; return whether it existed."""

    # ------------------------------------------------------------------
    # CRUD
    # ------------------------------------------------------------------
    def list(self, kind: str) -> List[BaseModel]:
        """Return all records of ``kind`` in insertion order."""
        collection = get_collection(kind)
        return [collection.to_read(record) for record in self._read(kind)]

    def get(self, kind: str, record_id: int) -> Optional[BaseModel]:
        """Look a record up by identifier."""
        collection = get_collection(kind)
        record = self._find(kind, record_id)
        return collection.to_read(record) if record is not None else None

    def create(self, kind: str, data: Any) -> BaseModel:
        """Insert a record and return it with its identifier and defaults.

        ``data`` is an instance of the kind's create schema or a mapping
        that validates against it.
        """
        collection = get_collection(kind)
        payload = collection.validate_create(data)
        payload.pop("id", None)
        record = self._insert(kind, payload)
        logger.info("Created %s %s", collection.label, record["id"])
        if kind == "budget_expenses":
            self._apply_expense(record)
        return collection.to_read(record)

    def update(self, kind: str, record_id: int, changes: Any) -> Optional[BaseModel]:
        """Merge the supplied fields onto a record.

        Fields absent from ``changes`` keep their values.  Returns the
        updated record or ``None`` if ``record_id`` does not exist.
        """
        collection = get_collection(kind)
        updates = collection.validate_update(changes)
        updates.pop("id", None)
        record = self._find(kind, record_id)
        if record is None:
            return None
        if not updates:
            return collection.to_read(record)
        updated = {**record, **updates}
        self._replace(kind, updated)
        logger.info("Updated %s %s (%s)", collection.label, record_id, ", ".join(sorted(updates)))
        return collection.to_read(updated)

    def delete(self, kind: str, record_id: int) -> bool:
        """Delete a record; ``False`` means there was nothing to delete."""
        collection = get_collection(kind)
        removed = self._remove(kind, record_id)
        if removed:
            logger.info("Deleted %s %s", collection.label, record_id)
        return removed

    # ------------------------------------------------------------------
    # Wedding details
    # ------------------------------------------------------------------
    def get_wedding_details(self) -> Optional[WeddingDetails]:
        document = self._load_document(WEDDING_DETAILS_KEY)
        return WeddingDetails.model_validate(document) if document is not None else None

    def save_wedding_details(self, details: Any) -> WeddingDetails:
        if not isinstance(details, WeddingDetails):
            details = WeddingDetails.model_validate(details)
        self._save_document(WEDDING_DETAILS_KEY, details.model_dump(mode="json", by_alias=True))
        logger.info("Saved wedding details")
        return details

    def clear_wedding_details(self) -> bool:
        return self._delete_document(WEDDING_DETAILS_KEY)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def seed_demo_data(self) -> None:
        """Create the default budget categories if there are none yet."""
        if self._read("budget_categories"):
            return
        for (name, budget, spent), color in zip(DEMO_BUDGET_CATEGORIES, COLOR_PALETTE):
            self.create(
                "budget_categories",
                {"name": name, "budgetAmount": budget, "spentAmount": spent, "color": color},
            )

    def _find(self, kind: str, record_id: int) -> Optional[Dict[str, Any]]:
        for record in self._read(kind):
            if record["id"] == record_id:
                return record
        return None

    def _apply_expense(self, expense: Dict[str, Any]) -> None:
        category = self._find("budget_categories", expense["categoryId"])
        if category is None:
            logger.debug(
                "Expense %s references unknown budget category %s",
                expense["id"],
                expense["categoryId"],
            )
            return
        spent = Decimal(category["spentAmount"]) + Decimal(expense["amount"])
        self.update("budget_categories", category["id"], {"spentAmount": format(spent, "f")})
