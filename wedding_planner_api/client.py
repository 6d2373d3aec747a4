"""Wedding planner API client.

This module defines a simple client wrapper around the Wedding Planner
REST API.  It is what a front end (web page, script, bot) uses to
read and change records; the filtering and counting the UI needs are
done here, on the client side, over the full lists returned by the
server.

Every operation returns a tuple ``(data, error)``.  On success
``error`` is ``None``.  On failure ``data`` is empty and ``error`` is a
dictionary with ``status_code`` and ``message`` keys; HTTP and
transport errors are logged and never raised.

Resources are addressed by entity kind:

* ``guests``, ``budget_categories``, ``budget_expenses``, ``venues``,
  ``services``, ``dresses``, ``vendors`` and ``tasks``.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests

from .app.services.filters import filter_records, search_records, sort_by_due_date


logger = logging.getLogger(__name__)

Error = Dict[str, Any]

# Entity kind -> REST path below ``/api``.
RESOURCE_PATHS: Dict[str, str] = {
    "guests": "/guests",
    "budget_categories": "/budget-categories",
    "budget_expenses": "/budget-expenses",
    "venues": "/venues",
    "services": "/flowers",
    "dresses": "/dresses",
    "vendors": "/vendors",
    "tasks": "/tasks",
}

# Text fields each list page searches in.
SEARCH_FIELDS: Dict[str, Tuple[str, ...]] = {
    "guests": ("name", "email"),
    "vendors": ("name", "contact", "category"),
    "dresses": ("name", "designer", "style"),
    "services": ("name", "description", "florist"),
    "tasks": ("title", "description", "category"),
}


class WeddingPlannerClient:
    """Client for interacting with the Wedding Planner API."""

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the server, e.g. ``http://localhost:8000``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, params: Dict[str, Any] | None = None,
        json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PUT``, ``DELETE``).
            path: Path below ``/api`` (e.g. ``/guests/3``).
            params: Query parameters to include in the request.
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)``.  ``data`` is the parsed JSON body
            (``None`` for empty responses such as 204).
        """
        url = f"{self.base_url}/api{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params,
                json=json_body,
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

        if response.status_code >= 400:
            try:
                err_json = response.json()
                message = err_json.get("detail") or err_json.get("message") or str(err_json)
            except ValueError:
                message = response.text
            logger.error("API request failed (%s): %s", response.status_code, message)
            return None, {"status_code": response.status_code, "message": message}

        if response.content:
            return response.json(), None
        return None, None

    @staticmethod
    def _resource(kind: str) -> str:
        try:
            return RESOURCE_PATHS[kind]
        except KeyError:
            raise ValueError(f"Unknown entity kind: {kind}") from None

    # ------------------------------------------------------------------
    # Generic record operations
    # ------------------------------------------------------------------
    def list_records(self, kind: str) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve every record of ``kind``.

        Returns:
            A tuple ``(records, error)``; ``records`` is empty on failure.
        """
        data, error = self._request("GET", self._resource(kind))
        if error:
            return [], error
        return data if isinstance(data, list) else [], None

    def get_record(self, kind: str, record_id: int) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", f"{self._resource(kind)}/{record_id}")

    def create_record(self, kind: str, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Create a record; omitted optional fields get server defaults."""
        return self._request("POST", self._resource(kind), json_body=payload)

    def update_record(
        self, kind: str, record_id: int, changes: Dict[str, Any]
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Change only the fields present in ``changes``."""
        return self._request("PUT", f"{self._resource(kind)}/{record_id}", json_body=changes)

    def delete_record(self, kind: str, record_id: int) -> Tuple[bool, Optional[Error]]:
        """Delete a record.

        Returns:
            A tuple ``(success, error)``.
        """
        _, error = self._request("DELETE", f"{self._resource(kind)}/{record_id}")
        if error:
            return False, error
        return True, None

    # ------------------------------------------------------------------
    # Client-side views
    # ------------------------------------------------------------------
    def list_guests(
        self, rsvp_status: Optional[str] = None, search: str = ""
    ) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """List guests, optionally narrowed by RSVP status and a search term.

        The search matches name or email, case-insensitively.  Order is
        the server's insertion order.
        """
        guests, error = self.list_records("guests")
        if error:
            return [], error
        if rsvp_status:
            guests = filter_records(guests, rsvpStatus=rsvp_status)
        return search_records(guests, search), None

    def list_open_tasks(self, limit: Optional[int] = None) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Tasks that are not completed yet, soonest due date first.

        Tasks without a due date come last.  ``limit`` keeps only the
        first entries (the dashboard shows five).
        """
        tasks, error = self.list_records("tasks")
        if error:
            return [], error
        upcoming = sort_by_due_date(task for task in tasks if task.get("status") != "completed")
        return (upcoming[:limit] if limit is not None else upcoming), None

    def list_tasks(
        self,
        status: Optional[str] = None,
        priority: Optional[str] = None,
        search: str = "",
    ) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Timeline view: tasks filtered by status and priority, searched
        in title, description and category, ordered by due date."""
        tasks, error = self.list_records("tasks")
        if error:
            return [], error
        criteria = {"status": status, "priority": priority}
        tasks = filter_records(tasks, **{k: v for k, v in criteria.items() if v})
        tasks = search_records(tasks, search, fields=("title", "description", "category"))
        return sort_by_due_date(tasks), None

    def search(self, kind: str, term: str = "", **criteria: Any) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Search a collection the way its list page does.

        ``term`` is matched case-insensitively against the fields in
        ``SEARCH_FIELDS`` for ``kind``; keyword ``criteria`` (wire names,
        e.g. ``status="booked"``) must match exactly.  ``None`` criteria
        are ignored.
        """
        try:
            fields = SEARCH_FIELDS[kind]
        except KeyError:
            raise ValueError(f"No search view for entity kind: {kind}") from None
        records, error = self.list_records(kind)
        if error:
            return [], error
        records = filter_records(records, **{k: v for k, v in criteria.items() if v is not None})
        return search_records(records, term, fields=fields), None

    # ------------------------------------------------------------------
    # Wedding details and dashboard
    # ------------------------------------------------------------------
    def get_wedding_details(self) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", "/wedding-details")

    def save_wedding_details(
        self, bride: str, groom: str, wedding_date: str
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        payload = {"bride": bride, "groom": groom, "weddingDate": wedding_date}
        return self._request("PUT", "/wedding-details", json_body=payload)

    def clear_wedding_details(self) -> Tuple[bool, Optional[Error]]:
        _, error = self._request("DELETE", "/wedding-details")
        if error:
            return False, error
        return True, None

    def get_summary(self, today: Optional[str] = None) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Fetch the dashboard statistics.

        Args:
            today: Optional ISO date used as the reference day for the
                wedding countdown.
        """
        params = {"today": today} if today else None
        return self._request("GET", "/summary", params=params)
