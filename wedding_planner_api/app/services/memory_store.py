"""
In-memory record store used by the API server.

Collections are dicts keyed by identifier; Python dicts keep insertion
order, so listing returns records in the order they were created and
an update does not move a record.  Everything is lost when the process
exits.
"""

from typing import Any, Dict, List, Optional

from .record_store import RecordStore
from .registry import COLLECTIONS


class MemoryRecordStore(RecordStore):
    """Record store that keeps all collections in process memory."""

    def __init__(self, start_id: int = 1) -> None:
        super().__init__(start_id)
        self._next_id = start_id
        self._collections: Dict[str, Dict[int, Dict[str, Any]]] = {kind: {} for kind in COLLECTIONS}
        self._documents: Dict[str, Dict[str, Any]] = {}

    def next_id(self) -> int:
        return self._next_id

    def _read(self, kind: str) -> List[Dict[str, Any]]:
        return [dict(record) for record in self._collections[kind].values()]

    def _insert(self, kind: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        record_id = self._next_id
        self._next_id += 1
        record = {"id": record_id, **payload}
        self._collections[kind][record_id] = record
        return dict(record)

    def _replace(self, kind: str, record: Dict[str, Any]) -> None:
        self._collections[kind][record["id"]] = dict(record)

    def _remove(self, kind: str, record_id: int) -> bool:
        return self._collections[kind].pop(record_id, None) is not None

    def _load_document(self, key: str) -> Optional[Dict[str, Any]]:
        document = self._documents.get(key)
        return dict(document) if document is not None else None

    def _save_document(self, key: str, value: Dict[str, Any]) -> None:
        self._documents[key] = dict(value)

    def _delete_document(self, key: str) -> bool:
        return self._documents.pop(key, None) is not None
