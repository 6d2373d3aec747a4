"""Tests for the dashboard summary and the client-side list helpers."""

from datetime import date

from wedding_planner_api.app.services.filters import count_by, filter_records, search_records, sort_by_due_date
from wedding_planner_api.app.services.memory_store import MemoryRecordStore
from wedding_planner_api.app.services.summary_service import build_summary, days_until


GUESTS = [
    {"id": 1, "name": "Alice Smith", "email": "alice@example.com", "rsvpStatus": "confirmed"},
    {"id": 2, "name": "Bob Jones", "email": None, "rsvpStatus": "pending"},
    {"id": 3, "name": "Carol White", "email": "carol@SMITH.org", "rsvpStatus": "confirmed"},
]


class TestFilters:
    def test_filter_preserves_order(self):
        assert [g["id"] for g in filter_records(GUESTS, rsvpStatus="confirmed")] == [1, 3]

    def test_filter_with_no_match(self):
        assert filter_records(GUESTS, rsvpStatus="declined") == []

    def test_search_name_and_email(self):
        assert [g["id"] for g in search_records(GUESTS, "smith")] == [1, 3]
        assert [g["id"] for g in search_records(GUESTS, "  BOB ")] == [2]

    def test_empty_search_returns_all(self):
        assert search_records(GUESTS, "") == GUESTS

    def test_count_by(self):
        assert count_by(GUESTS, "rsvpStatus") == {"confirmed": 2, "pending": 1}

    def test_sort_by_due_date_puts_undated_last(self):
        tasks = [
            {"title": "no date", "dueDate": None},
            {"title": "late", "dueDate": "2026-09-01"},
            {"title": "early", "dueDate": "2026-03-01"},
            {"title": "also undated"},
            {"title": "early too", "dueDate": "2026-03-01"},
        ]
        assert [t["title"] for t in sort_by_due_date(tasks)] == [
            "early", "early too", "late", "no date", "also undated",
        ]

    def test_sort_by_due_date_on_models(self):
        store = MemoryRecordStore()
        store.create("tasks", {"title": "later", "dueDate": "2026-08-01"})
        store.create("tasks", {"title": "whenever"})
        store.create("tasks", {"title": "sooner", "dueDate": "2026-02-01"})
        assert [t.title for t in sort_by_due_date(store.list("tasks"))] == ["sooner", "later", "whenever"]

    def test_models_are_supported(self):
        store = MemoryRecordStore()
        store.create("guests", {"name": "Dan", "rsvpStatus": "declined"})
        store.create("guests", {"name": "Eve"})
        assert [g.name for g in filter_records(store.list("guests"), rsvpStatus="declined")] == ["Dan"]


class TestSummary:
    def test_budget_totals_and_over_budget(self):
        store = MemoryRecordStore()
        over = store.create("budget_categories", {"name": "Venue", "budgetAmount": "1000", "spentAmount": "1200"})
        store.create("budget_categories", {"name": "Cake", "budgetAmount": "500.50"})
        summary = build_summary(store)
        assert summary.total_budget == "1500.50"
        assert summary.spent_budget == "1200"
        assert summary.remaining_budget == "300.50"
        assert summary.over_budget_categories == [over.id]

    def test_guest_counts(self):
        store = MemoryRecordStore()
        for rsvp in ["confirmed", "confirmed", "declined", "pending"]:
            store.create("guests", {"name": "Guest", "rsvpStatus": rsvp})
        summary = build_summary(store)
        assert (summary.total_guests, summary.confirmed_guests, summary.declined_guests, summary.pending_guests) == (4, 2, 1, 1)

    def test_countdown(self):
        store = MemoryRecordStore()
        assert build_summary(store).days_remaining is None
        store.save_wedding_details({"bride": "Anna", "groom": "Ben", "weddingDate": "2026-06-20"})
        assert build_summary(store, today=date(2026, 6, 1)).days_remaining == 19
        assert build_summary(store, today=date(2026, 7, 1)).days_remaining == 0

    def test_days_until(self):
        assert days_until(date(2026, 1, 2), today=date(2026, 1, 1)) == 1
        assert days_until(date(2026, 1, 1), today=date(2026, 1, 1)) == 0
