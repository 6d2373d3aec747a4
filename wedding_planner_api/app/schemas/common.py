"""
Shared building blocks for the entity schemas.

All models use camelCase aliases on the wire (``rsvpStatus``,
``budgetAmount``) while Python code works with snake_case attribute
names.  Money values are kept as decimal strings so they round-trip
without float rounding.
"""

from decimal import Decimal, InvalidOperation
from typing import Annotated, Any, ClassVar, FrozenSet

from pydantic import BaseModel, BeforeValidator, ConfigDict, model_validator
from pydantic.alias_generators import to_camel


# Default colours offered for budget categories, in display order.
COLOR_PALETTE = [
    "#66BB6A", "#FB8C00", "#9C27B0", "#2196F3", "#4CAF50", "#FF4081",
    "#FF5722", "#795548", "#607D8B", "#E91E63", "#00BCD4", "#CDDC39",
]


def _normalize_decimal(value: Any) -> Any:
    """Accept numbers or numeric strings and return a decimal string."""
    if value is None:
        return None
    if isinstance(value, bool):
        raise ValueError("Expected a decimal amount")
    if isinstance(value, (int, float, Decimal)):
        value = str(value)
    if not isinstance(value, str):
        raise ValueError("Expected a decimal amount")
    value = value.strip()
    try:
        parsed = Decimal(value)
    except InvalidOperation as exc:
        raise ValueError(f"'{value}' is not a valid decimal amount") from exc
    if not parsed.is_finite():
        raise ValueError(f"'{value}' is not a valid decimal amount")
    return value


DecimalString = Annotated[str, BeforeValidator(_normalize_decimal)]


class CamelModel(BaseModel):
    """Base model with camelCase aliases that also accepts field names."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PartialUpdate(CamelModel):
    """Base class for update payloads.

    Every field of an update schema is optional, but fields listed in
    ``non_nullable`` may not be explicitly set to ``null``: a record
    must keep its name, type, status and similar required values.
    """

    non_nullable: ClassVar[FrozenSet[str]] = frozenset()

    @model_validator(mode="after")
    def reject_null_required(self):
        for name in self.model_fields_set:
            if name in self.non_nullable and getattr(self, name) is None:
                raise ValueError(f"{to_camel(name)} cannot be null")
        return self
