"""Pydantic schemas for wedding dresses and their fittings."""

from datetime import date
from typing import List, Literal, Optional

from pydantic import Field

from .common import CamelModel, DecimalString, PartialUpdate

DressStatus = Literal["considering", "trying-on", "selected", "considered"]


class DressCreate(CamelModel):
    name: str = Field(..., min_length=1, examples=["Lace A-line"])
    designer: Optional[str] = None
    style: Optional[str] = None
    size: Optional[str] = None
    price: Optional[DecimalString] = None
    store: Optional[str] = None
    status: DressStatus = "considering"
    fitting_dates: Optional[List[date]] = None
    photos: Optional[List[str]] = None
    notes: Optional[str] = None


class DressUpdate(PartialUpdate):
    non_nullable = frozenset({"name", "status"})

    name: Optional[str] = Field(None, min_length=1)
    designer: Optional[str] = None
    style: Optional[str] = None
    size: Optional[str] = None
    price: Optional[DecimalString] = None
    store: Optional[str] = None
    status: Optional[DressStatus] = None
    fitting_dates: Optional[List[date]] = None
    photos: Optional[List[str]] = None
    notes: Optional[str] = None


class DressRead(DressCreate):
    id: int
