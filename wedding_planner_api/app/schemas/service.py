"""
Pydantic schemas for wedding services.

Services started out as a flower tracker and grew to cover any kind
of service (photography, hair, catering, ...).  They are still served
under ``/api/flowers``; the ``florist`` field holds the service
provider's name.
"""

from typing import List, Literal, Optional

from pydantic import Field

from .common import CamelModel, DecimalString, PartialUpdate

ServiceStatus = Literal["considering", "selected", "inspiration"]

# Values suggested to clients for ``type``; any non-empty text is accepted.
SERVICE_TYPES = [
    "photography", "videography", "hair", "makeup", "flowers",
    "music", "catering", "transportation", "decoration", "other",
]


class ServiceCreate(CamelModel):
    name: str = Field(..., min_length=1, examples=["Bridal bouquet"])
    type: str = Field(
        ...,
        min_length=1,
        description="Kind of service; free text, usually one of the suggested values.",
        examples=SERVICE_TYPES,
    )
    description: Optional[str] = None
    florist: Optional[str] = None
    price: Optional[DecimalString] = None
    status: ServiceStatus = "considering"
    photos: Optional[List[str]] = None
    notes: Optional[str] = None


class ServiceUpdate(PartialUpdate):
    non_nullable = frozenset({"name", "type", "status"})

    name: Optional[str] = Field(None, min_length=1)
    type: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    florist: Optional[str] = None
    price: Optional[DecimalString] = None
    status: Optional[ServiceStatus] = None
    photos: Optional[List[str]] = None
    notes: Optional[str] = None


class ServiceRead(ServiceCreate):
    id: int
