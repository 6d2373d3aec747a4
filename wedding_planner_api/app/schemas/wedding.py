"""
Schemas for the wedding itself and the dashboard summary.

``WeddingDetails`` is captured once on the setup screen (names of the
couple and the date).  ``DashboardSummary`` is computed on request from
the stored collections.
"""

from datetime import date
from typing import List, Optional

from pydantic import Field

from .common import CamelModel


class WeddingDetails(CamelModel):
    bride: str = Field(..., min_length=1)
    groom: str = Field(..., min_length=1)
    wedding_date: date


class DashboardSummary(CamelModel):
    """Headline statistics shown on the dashboard."""

    total_guests: int
    confirmed_guests: int
    pending_guests: int
    declined_guests: int
    # Money totals are decimal strings, like the budget fields.
    total_budget: str
    spent_budget: str
    remaining_budget: str
    over_budget_categories: List[int]
    total_tasks: int
    completed_tasks: int
    total_vendors: int
    booked_vendors: int
    # ``None`` when no wedding date has been saved.
    days_remaining: Optional[int] = None
