"""
HTTP-level tests for the REST API.

Uses FastAPI's ``TestClient`` against an application with a fresh
in-memory store per test.
"""

import sqlite3

import pytest
from fastapi.testclient import TestClient

from wedding_planner_api.app.main import build_store, create_app
from wedding_planner_api.app.core.config import Settings
from wedding_planner_api.app.services.memory_store import MemoryRecordStore
from wedding_planner_api.app.services.sqlite_store import SqliteRecordStore

RESOURCES = [
    ("/api/guests", {"name": "Alice Smith"}),
    ("/api/budget-categories", {"name": "Venue", "budgetAmount": "8000"}),
    ("/api/budget-expenses", {"categoryId": 1, "name": "Deposit", "amount": "50.50", "date": "2026-05-01"}),
    ("/api/venues", {"name": "Rosewood Manor"}),
    ("/api/flowers", {"name": "Bridal bouquet", "type": "flowers"}),
    ("/api/dresses", {"name": "Lace A-line"}),
    ("/api/vendors", {"name": "Golden Hour Photo", "category": "photography"}),
    ("/api/tasks", {"title": "Book florist"}),
]


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


@pytest.mark.parametrize("path,payload", RESOURCES)
class TestResourceLifecycle:
    def test_full_lifecycle(self, client, path, payload):
        assert client.get(path).json() == []

        created = client.post(path, json=payload)
        assert created.status_code == 201
        record = created.json()
        record_id = record["id"]

        assert client.get(path).json() == [record]
        assert client.get(f"{path}/{record_id}").json() == record

        updated = client.put(f"{path}/{record_id}", json={})
        assert updated.status_code == 200
        assert updated.json() == record

        deleted = client.delete(f"{path}/{record_id}")
        assert deleted.status_code == 204
        assert deleted.content == b""

        assert client.get(f"{path}/{record_id}").status_code == 404
        assert client.delete(f"{path}/{record_id}").status_code == 404

    def test_missing_record(self, client, path, payload):
        assert client.get(f"{path}/999").status_code == 404
        assert client.put(f"{path}/999", json={}).status_code == 404

    def test_invalid_create(self, client, path, payload):
        response = client.post(path, json={})
        assert response.status_code == 400
        assert response.json()["detail"].startswith("Invalid ")


class TestGuests:
    def test_defaults_and_nulls_in_response(self, client):
        guest = client.post("/api/guests", json={"name": "Alice Smith"}).json()
        assert guest["rsvpStatus"] == "pending"
        assert guest["plusOne"] is False
        assert guest["email"] is None
        assert guest["dietaryRestrictions"] is None

    def test_messages(self, client):
        response = client.post("/api/guests", json={"rsvpStatus": "confirmed"})
        assert response.json() == {"detail": "Invalid guest data"}
        response = client.get("/api/guests/999")
        assert response.json() == {"detail": "Guest not found"}

    def test_partial_update(self, client):
        guest = client.post("/api/guests", json={"name": "Alice", "phone": "555-0100"}).json()
        response = client.put(f"/api/guests/{guest['id']}", json={"rsvpStatus": "confirmed", "plusOne": True})
        assert response.status_code == 200
        body = response.json()
        assert body["rsvpStatus"] == "confirmed"
        assert body["plusOne"] is True
        assert body["phone"] == "555-0100"

    def test_update_validation(self, client):
        guest = client.post("/api/guests", json={"name": "Alice"}).json()
        assert client.put(f"/api/guests/{guest['id']}", json={"rsvpStatus": "maybe"}).status_code == 400
        assert client.put(f"/api/guests/{guest['id']}", json={"name": None}).status_code == 400
        assert client.get(f"/api/guests/{guest['id']}").json()["name"] == "Alice"

    def test_non_integer_id_is_not_found(self, client):
        for method in ("get", "delete"):
            response = client.request(method, "/api/guests/abc")
            assert response.status_code == 404
            assert response.json() == {"detail": "Guest not found"}
        response = client.put("/api/guests/abc", json={"name": "Alice"})
        assert response.status_code == 404

    def test_non_integer_id_with_invalid_body(self, client):
        response = client.put("/api/guests/abc", json={"rsvpStatus": "maybe"})
        assert response.status_code == 400
        assert response.json() == {"detail": "Invalid guest data"}

    def test_malformed_json(self, client):
        response = client.post(
            "/api/guests",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == 400


class TestBudget:
    def test_expense_updates_category(self, client):
        category = client.post(
            "/api/budget-categories",
            json={"name": "Venue", "budgetAmount": "8000", "spentAmount": "100.00"},
        ).json()
        expense = client.post(
            "/api/budget-expenses",
            json={"categoryId": category["id"], "name": "Deposit", "amount": "50.50", "date": "2026-05-01"},
        )
        assert expense.status_code == 201
        assert expense.json()["date"] == "2026-05-01"
        refreshed = client.get(f"/api/budget-categories/{category['id']}").json()
        assert refreshed["spentAmount"] == "150.50"

    def test_category_error_message(self, client):
        response = client.post("/api/budget-categories", json={"name": "Venue"})
        assert response.json() == {"detail": "Invalid budget category data"}


class TestServices:
    def test_services_alias_shares_collection(self, client):
        created = client.post("/api/flowers", json={"name": "Portraits", "type": "photography"}).json()
        assert created["status"] == "considering"
        assert client.get("/api/services").json() == [created]
        assert client.get(f"/api/services/{created['id']}").json() == created

    def test_flowers_path_keeps_flower_wording(self, client):
        assert client.get("/api/flowers/999").json() == {"detail": "Flower not found"}
        assert client.post("/api/flowers", json={"name": "Peonies"}).json() == {"detail": "Invalid flower data"}
        assert client.get("/api/services/999").json() == {"detail": "Service not found"}
        assert client.post("/api/services", json={"name": "Peonies"}).json() == {"detail": "Invalid service data"}

    def test_alias_hidden_from_openapi(self, client):
        paths = client.get("/openapi.json").json()["paths"]
        assert "/api/flowers" in paths
        assert "/api/services" not in paths


class TestWeddingDetails:
    def test_details_lifecycle(self, client):
        assert client.get("/api/wedding-details").status_code == 404

        payload = {"bride": "Anna", "groom": "Ben", "weddingDate": "2026-06-20"}
        saved = client.put("/api/wedding-details", json=payload)
        assert saved.status_code == 200
        assert saved.json() == payload
        assert client.get("/api/wedding-details").json() == payload

        assert client.delete("/api/wedding-details").status_code == 204
        assert client.delete("/api/wedding-details").status_code == 404

    def test_invalid_details(self, client):
        response = client.put("/api/wedding-details", json={"bride": "Anna"})
        assert response.status_code == 400
        assert response.json() == {"detail": "Invalid request data"}


class TestSummary:
    def test_summary(self, client):
        client.post("/api/guests", json={"name": "A", "rsvpStatus": "confirmed"})
        client.post("/api/guests", json={"name": "B"})
        client.post("/api/budget-categories", json={"name": "Venue", "budgetAmount": "1000", "spentAmount": "250"})
        client.post("/api/tasks", json={"title": "Cake", "status": "completed"})
        client.post("/api/tasks", json={"title": "Music"})
        client.post("/api/vendors", json={"name": "DJ", "category": "music", "status": "booked"})
        client.put("/api/wedding-details", json={"bride": "Anna", "groom": "Ben", "weddingDate": "2026-06-20"})

        summary = client.get("/api/summary", params={"today": "2026-06-10"}).json()
        assert summary["totalGuests"] == 2
        assert summary["confirmedGuests"] == 1
        assert summary["pendingGuests"] == 1
        assert summary["totalBudget"] == "1000"
        assert summary["spentBudget"] == "250"
        assert summary["remainingBudget"] == "750"
        assert summary["completedTasks"] == 1
        assert summary["totalTasks"] == 2
        assert summary["bookedVendors"] == 1
        assert summary["daysRemaining"] == 10

    def test_empty_summary(self, client):
        summary = client.get("/api/summary").json()
        assert summary["totalGuests"] == 0
        assert summary["totalBudget"] == "0"
        assert summary["daysRemaining"] is None


class TestStorageErrors:
    def test_storage_failure_is_500(self, tmp_path, monkeypatch):
        store = SqliteRecordStore(str(tmp_path / "api.db"))
        app = create_app(store=store)

        def disk_full(*args, **kwargs):
            raise sqlite3.OperationalError("database or disk is full")

        monkeypatch.setattr(SqliteRecordStore, "_save_collection", staticmethod(disk_full))
        with TestClient(app) as client:
            response = client.post("/api/guests", json={"name": "Alice"})
            assert response.status_code == 500
            assert response.json() == {"detail": "Failed to save data"}
            monkeypatch.undo()
            assert client.get("/api/guests").json() == []

    def test_read_and_delete_failures_have_own_messages(self, tmp_path, monkeypatch):
        store = SqliteRecordStore(str(tmp_path / "api.db"))
        app = create_app(store=store)

        def unreadable(*args, **kwargs):
            raise sqlite3.DatabaseError("file is not a database")

        monkeypatch.setattr(SqliteRecordStore, "_load_collection", staticmethod(unreadable))
        with TestClient(app) as client:
            response = client.get("/api/guests")
            assert response.status_code == 500
            assert response.json() == {"detail": "Failed to fetch data"}

            response = client.delete("/api/guests/1")
            assert response.status_code == 500
            assert response.json() == {"detail": "Failed to delete data"}


class TestBuildStore:
    def test_memory_backend(self):
        store = build_store(Settings(storage_backend="memory", seed_demo_data=True))
        assert isinstance(store, MemoryRecordStore)
        assert len(store.list("budget_categories")) == 6

    def test_sqlite_backend(self, tmp_path):
        config = Settings(storage_backend="sqlite", database_url=str(tmp_path / "app.db"), id_start=10)
        store = build_store(config)
        assert isinstance(store, SqliteRecordStore)
        assert store.create("guests", {"name": "Alice"}).id == 10

    def test_unknown_backend(self):
        with pytest.raises(ValueError):
            build_store(Settings(storage_backend="redis"))
