"""
Endpoints for the wedding details and the dashboard summary.

The wedding details (names of the couple and the date) are a single
document rather than a collection: ``GET`` returns 404 until they are
saved with ``PUT``, and ``DELETE`` clears them again.  ``/summary``
aggregates the collections for the dashboard.
"""

from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from ...schemas.wedding import DashboardSummary, WeddingDetails
from ...services.record_store import RecordStore
from ...services.summary_service import build_summary
from ..deps import get_store

router = APIRouter()


@router.get("/wedding-details", response_model=WeddingDetails)
async def get_wedding_details(store: RecordStore = Depends(get_store)) -> WeddingDetails:
    details = store.get_wedding_details()
    if details is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Wedding details not set")
    return details


@router.put("/wedding-details", response_model=WeddingDetails)
async def save_wedding_details(
    details: WeddingDetails,
    store: RecordStore = Depends(get_store),
) -> WeddingDetails:
    """Create or replace the wedding details."""
    return store.save_wedding_details(details)


@router.delete("/wedding-details", status_code=status.HTTP_204_NO_CONTENT)
async def clear_wedding_details(store: RecordStore = Depends(get_store)) -> None:
    if not store.clear_wedding_details():
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Wedding details not set")
    return None


@router.get("/summary", response_model=DashboardSummary)
async def get_summary(
    today: Optional[date] = Query(
        None,
        description="Reference day for the countdown.  Defaults to the server's current date.",
    ),
    store: RecordStore = Depends(get_store),
) -> DashboardSummary:
    """Return the dashboard statistics."""
    return build_summary(store, today=today)
