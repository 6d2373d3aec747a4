"""
Durable record store backed by a local SQLite file.

This is the local-first variant of the record store: each entity kind
is serialised as one JSON array in the ``collections`` table, keyed by
the kind name, and the shared identifier counter lives in the
``counters`` table of the same database.  Allocating an identifier and
writing the record happen in one transaction, so a failed write never
consumes an identifier.

Every operation opens its own connection.  Storage failures are logged,
the transaction is rolled back and ``StorageError`` is raised so the
caller can report a generic failure; nothing is retried.
"""

from __future__ import annotations

import json
import logging
import sqlite3
from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Optional

from ..core.db import get_cursor, get_database_path, init_db
from .record_store import RecordStore, StorageError

logger = logging.getLogger(__name__)

COUNTER_NAME = "records"


class SqliteRecordStore(RecordStore):
    """Record store persisting JSON collections to SQLite."""

    def __init__(self, db_path: Optional[str] = None, start_id: int = 1) -> None:
        super().__init__(start_id)
        self.db_path = get_database_path(db_path)
        init_db(self.db_path)
        with get_cursor(self.db_path) as cursor:
            # Keeps the persisted counter when reopening an existing database.
            cursor.execute(
                "INSERT OR IGNORE INTO counters (name, value) VALUES (?, ?)",
                (COUNTER_NAME, start_id),
            )
        logger.debug("Opened SQLite record store at %s", self.db_path)

    @contextmanager
    def _transaction(self, action: str) -> Iterator[sqlite3.Cursor]:
        try:
            with get_cursor(self.db_path) as cursor:
                yield cursor
        except sqlite3.Error as exc:
            logger.exception("Storage failure while trying to %s", action)
            raise StorageError(f"Failed to {action}") from exc

    # ------------------------------------------------------------------
    # Collection blobs
    # ------------------------------------------------------------------
    @staticmethod
    def _load_collection(cursor: sqlite3.Cursor, kind: str) -> List[Dict[str, Any]]:
        row = cursor.execute(
            "SELECT data FROM collections WHERE kind = ?", (kind,)
        ).fetchone()
        if not row:
            return []
        return json.loads(row["data"])

    @staticmethod
    def _save_collection(cursor: sqlite3.Cursor, kind: str, records: List[Dict[str, Any]]) -> None:
        cursor.execute(
            """
            INSERT OR REPLACE INTO collections (kind, data, updated_at)
            VALUES (?, ?, CURRENT_TIMESTAMP)
            """,
            (kind, json.dumps(records)),
        )

    def next_id(self) -> int:
        with self._transaction("read the identifier counter") as cursor:
            row = cursor.execute(
                "SELECT value FROM counters WHERE name = ?", (COUNTER_NAME,)
            ).fetchone()
        return row["value"]

    def _read(self, kind: str) -> List[Dict[str, Any]]:
        with self._transaction(f"read {kind}") as cursor:
            return self._load_collection(cursor, kind)

    def _insert(self, kind: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        with self._transaction(f"create a record in {kind}") as cursor:
            row = cursor.execute(
                "SELECT value FROM counters WHERE name = ?", (COUNTER_NAME,)
            ).fetchone()
            record_id = row["value"]
            cursor.execute(
                "UPDATE counters SET value = ? WHERE name = ?",
                (record_id + 1, COUNTER_NAME),
            )
            records = self._load_collection(cursor, kind)
            record = {"id": record_id, **payload}
            records.append(record)
            self._save_collection(cursor, kind, records)
        return record

    def _replace(self, kind: str, record: Dict[str, Any]) -> None:
        with self._transaction(f"update a record in {kind}") as cursor:
            records = self._load_collection(cursor, kind)
            records = [record if r["id"] == record["id"] else r for r in records]
            self._save_collection(cursor, kind, records)

    def _remove(self, kind: str, record_id: int) -> bool:
        with self._transaction(f"delete a record from {kind}") as cursor:
            records = self._load_collection(cursor, kind)
            remaining = [r for r in records if r["id"] != record_id]
            if len(remaining) == len(records):
                return False
            self._save_collection(cursor, kind, remaining)
        return True

    # ------------------------------------------------------------------
    # Standalone documents
    # ------------------------------------------------------------------
    def _load_document(self, key: str) -> Optional[Dict[str, Any]]:
        with self._transaction(f"read {key}") as cursor:
            row = cursor.execute(
                "SELECT value FROM settings WHERE key = ?", (key,)
            ).fetchone()
        return json.loads(row["value"]) if row else None

    def _save_document(self, key: str, value: Dict[str, Any]) -> None:
        with self._transaction(f"save {key}") as cursor:
            cursor.execute(
                "INSERT OR REPLACE INTO settings (key, value, type) VALUES (?, ?, 'json')",
                (key, json.dumps(value)),
            )

    def _delete_document(self, key: str) -> bool:
        with self._transaction(f"delete {key}") as cursor:
            cursor.execute("DELETE FROM settings WHERE key = ?", (key,))
            deleted = cursor.rowcount > 0
        return deleted
