"""
Client-side list helpers.

The API returns whole collections; narrowing them down (by RSVP
status, by text search) and counting them happens on the consumer's
side.  These helpers work on wire dicts (camelCase keys) as well as on
pydantic ``Read`` models and always preserve the input order.
"""

from collections.abc import Mapping
from typing import Any, Dict, Iterable, List, Sequence

from pydantic.alias_generators import to_snake


def field_value(record: Any, field: str) -> Any:
    """Return ``field`` (a wire name such as ``rsvpStatus``) of a record."""
    if isinstance(record, Mapping):
        return record.get(field)
    return getattr(record, to_snake(field), None)


def filter_records(records: Iterable[Any], **criteria: Any) -> List[Any]:
    """Return the records whose fields equal every given criterion.

    For example ``filter_records(guests, rsvpStatus="confirmed")``.
    """
    return [
        record
        for record in records
        if all(field_value(record, field) == expected for field, expected in criteria.items())
    ]


def search_records(records: Iterable[Any], term: str, fields: Sequence[str] = ("name", "email")) -> List[Any]:
    """Case-insensitive substring search over the given text fields.

    An empty term matches everything.
    """
    needle = term.strip().lower()
    if not needle:
        return list(records)
    matches = []
    for record in records:
        for field in fields:
            value = field_value(record, field)
            if isinstance(value, str) and needle in value.lower():
                matches.append(record)
                break
    return matches


def sort_by_due_date(records: Iterable[Any], field: str = "dueDate") -> List[Any]:
    """Order records by due date, earliest first; undated records go last.

    Records sharing a date (or both lacking one) keep their input order.
    """
    return sorted(records, key=lambda record: _due_key(field_value(record, field)))


def _due_key(value: Any):
    if value is None:
        return (1, "")
    # Wire dicts carry ISO strings, models carry ``date`` objects.
    return (0, value.isoformat() if hasattr(value, "isoformat") else str(value))


def count_by(records: Iterable[Any], field: str) -> Dict[Any, int]:
    counts: Dict[Any, int] = {}
    for record in records:
        value = field_value(record, field)
        counts[value] = counts.get(value, 0) + 1
    return counts
