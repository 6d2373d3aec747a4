"""Pydantic schemas for venues under consideration."""

from typing import List, Literal, Optional

from pydantic import Field

from .common import CamelModel, DecimalString, PartialUpdate

VenueStatus = Literal["considering", "visited", "booked", "not-available"]


class VenueCreate(CamelModel):
    name: str = Field(..., min_length=1, examples=["Rosewood Manor"])
    address: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    website: Optional[str] = None
    capacity: Optional[int] = Field(None, ge=0)
    price: Optional[DecimalString] = None
    status: VenueStatus = "considering"
    # Ordered image references (URLs or data URLs).
    photos: Optional[List[str]] = None
    notes: Optional[str] = None


class VenueUpdate(PartialUpdate):
    non_nullable = frozenset({"name", "status"})

    name: Optional[str] = Field(None, min_length=1)
    address: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    website: Optional[str] = None
    capacity: Optional[int] = Field(None, ge=0)
    price: Optional[DecimalString] = None
    status: Optional[VenueStatus] = None
    photos: Optional[List[str]] = None
    notes: Optional[str] = None


class VenueRead(VenueCreate):
    id: int
