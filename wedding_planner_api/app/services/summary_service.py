"""
Dashboard statistics.

``build_summary`` aggregates the stored collections into the numbers
shown on the dashboard: guest counts per RSVP status, budget totals,
task and vendor progress and the countdown to the wedding day.  Money
is summed with ``Decimal`` and reported as decimal strings.
"""

import logging
from datetime import date
from decimal import Decimal
from typing import Optional

from ..schemas.wedding import DashboardSummary
from .filters import count_by
from .record_store import RecordStore

logger = logging.getLogger(__name__)


def days_until(wedding_date: date, today: Optional[date] = None) -> int:
    """Days left until ``wedding_date``; zero once the day has passed."""
    today = today or date.today()
    return max(0, (wedding_date - today).days)


def build_summary(store: RecordStore, today: Optional[date] = None) -> DashboardSummary:
    guests = store.list("guests")
    categories = store.list("budget_categories")
    tasks = store.list("tasks")
    vendors = store.list("vendors")

    rsvp_counts = count_by(guests, "rsvpStatus")

    total_budget = sum((Decimal(c.budget_amount) for c in categories), Decimal("0"))
    spent_budget = sum((Decimal(c.spent_amount) for c in categories), Decimal("0"))
    over_budget = [
        c.id for c in categories if Decimal(c.spent_amount) > Decimal(c.budget_amount)
    ]

    details = store.get_wedding_details()
    days_remaining = days_until(details.wedding_date, today) if details else None

    logger.debug("Built dashboard summary for %d guests and %d tasks", len(guests), len(tasks))
    return DashboardSummary(
        total_guests=len(guests),
        confirmed_guests=rsvp_counts.get("confirmed", 0),
        pending_guests=rsvp_counts.get("pending", 0),
        declined_guests=rsvp_counts.get("declined", 0),
        total_budget=format(total_budget, "f"),
        spent_budget=format(spent_budget, "f"),
        remaining_budget=format(total_budget - spent_budget, "f"),
        over_budget_categories=over_budget,
        total_tasks=len(tasks),
        completed_tasks=count_by(tasks, "status").get("completed", 0),
        total_vendors=len(vendors),
        booked_vendors=count_by(vendors, "status").get("booked", 0),
        days_remaining=days_remaining,
    )
