"""
Pydantic schemas for wedding guests.

A guest has a name, optional contact details, an RSVP status and a
flag telling whether they bring a plus one.
"""

from typing import Literal, Optional

from pydantic import Field

from .common import CamelModel, PartialUpdate

RsvpStatus = Literal["pending", "confirmed", "declined"]


class GuestCreate(CamelModel):
    """Schema for creating a guest."""

    name: str = Field(..., min_length=1, examples=["Alice Smith"])
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    rsvp_status: RsvpStatus = "pending"
    plus_one: Optional[bool] = False
    dietary_restrictions: Optional[str] = None
    notes: Optional[str] = None


class GuestUpdate(PartialUpdate):
    """Schema for updating a guest; only provided fields change."""

    non_nullable = frozenset({"name", "rsvp_status"})

    name: Optional[str] = Field(None, min_length=1)
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    rsvp_status: Optional[RsvpStatus] = None
    plus_one: Optional[bool] = None
    dietary_restrictions: Optional[str] = None
    notes: Optional[str] = None


class GuestRead(GuestCreate):
    """Schema for a stored guest."""

    id: int
