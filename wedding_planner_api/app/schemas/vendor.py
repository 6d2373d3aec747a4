"""Pydantic schemas for vendors (photographers, caterers, bands, ...)."""

from typing import Literal, Optional

from pydantic import Field

from .common import CamelModel, DecimalString, PartialUpdate

VendorStatus = Literal["pending", "negotiating", "booked", "declined"]


class VendorCreate(CamelModel):
    name: str = Field(..., min_length=1, examples=["Golden Hour Photo"])
    category: str = Field(..., min_length=1, examples=["photography"])
    contact: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    website: Optional[str] = None
    price: Optional[DecimalString] = None
    status: VendorStatus = "pending"
    notes: Optional[str] = None


class VendorUpdate(PartialUpdate):
    non_nullable = frozenset({"name", "category", "status"})

    name: Optional[str] = Field(None, min_length=1)
    category: Optional[str] = Field(None, min_length=1)
    contact: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    website: Optional[str] = None
    price: Optional[DecimalString] = None
    status: Optional[VendorStatus] = None
    notes: Optional[str] = None


class VendorRead(VendorCreate):
    id: int
