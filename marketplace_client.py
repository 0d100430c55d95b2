"""Service marketplace API client.

A thin wrapper around the marketplace REST API built on ``requests``.
It is meant for scripts, integrations and front‑end test harnesses
that talk to a running server.

Every public method returns a tuple ``(data, error)``.  On success
``data`` holds the decoded JSON body and ``error`` is ``None``.  On
failure ``data`` is ``None`` (or an empty list for list operations)
and ``error`` is a dictionary with the keys ``status_code`` and
``message``.  Network problems are reported with ``status_code`` set
to ``None``.

Example::

    client = MarketplaceAPI(base_url="http://localhost:8000/api")
    entry, error = client.join_waitlist({
        "full_name": "Alice Smith",
        "email": "alice@example.com",
        "user_type": "customer",
    })
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]
Result = Tuple[Optional[Dict[str, Any]], Optional[Error]]
ListResult = Tuple[List[Dict[str, Any]], Optional[Error]]


class MarketplaceAPI:
    """Client for the service marketplace API."""

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL including the API prefix, e.g.
                ``https://example.com/api``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per‑request timeout in seconds.
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
            method: HTTP method (``GET``, ``POST``, ``PATCH``).
            path: Path relative to :attr:`base_url` (e.g. ``/businesses``).
            params: Query parameters to include in the request.
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)`` as described in the module
            docstring.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params,
                json=json_body,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    message = err_json.get("detail") or err_json.get("message") or str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    def _get_list(self, path: str, params: Dict[str, Any] | None = None) -> ListResult:
        data, error = self._request("GET", path, params=params)
        if error:
            return [], error
        if isinstance(data, list):
            return data, None
        return [], None

    # ------------------------------------------------------------------
    # Waitlist and users
    # ------------------------------------------------------------------
    def join_waitlist(self, payload: Dict[str, Any]) -> Result:
        """Add a person to the pre‑launch waitlist.

        A duplicate email yields an error with ``status_code`` 409.
        """
        return self._request("POST", "/waitlist", json_body=payload)

    def register_user(self, payload: Dict[str, Any]) -> Result:
        """Register a customer or provider account."""
        return self._request("POST", "/users", json_body=payload)

    def get_user(self, user_id: int) -> Result:
        return self._request("GET", f"/users/{user_id}")

    def login(self, email: str, password: str) -> Result:
        """Check credentials; on success ``data["user"]`` is the user."""
        return self._request("POST", "/auth/login", json_body={"email": email, "password": password})

    # ------------------------------------------------------------------
    # Businesses
    # ------------------------------------------------------------------
    def create_business(self, payload: Dict[str, Any]) -> Result:
        return self._request("POST", "/businesses", json_body=payload)

    def list_businesses(self, category: Optional[str] = None) -> ListResult:
        """List businesses, optionally filtered by category."""
        params = {"category": category} if category else None
        return self._get_list("/businesses", params=params)

    def get_business(self, business_id: int) -> Result:
        return self._request("GET", f"/businesses/{business_id}")

    def get_user_businesses(self, user_id: int) -> ListResult:
        return self._get_list(f"/users/{user_id}/businesses")

    # ------------------------------------------------------------------
    # Bookings
    # ------------------------------------------------------------------
    def create_booking(self, payload: Dict[str, Any]) -> Result:
        return self._request("POST", "/bookings", json_body=payload)

    def get_booking(self, booking_id: int) -> Result:
        return self._request("GET", f"/bookings/{booking_id}")

    def get_user_bookings(self, user_id: int) -> ListResult:
        return self._get_list(f"/users/{user_id}/bookings")

    def get_business_bookings(self, business_id: int) -> ListResult:
        return self._get_list(f"/businesses/{business_id}/bookings")

    def update_booking_status(self, booking_id: int, status: str) -> Result:
        """Move a booking to ``status``.

        Unknown values yield a 400 error, a missing booking a 404.
        """
        return self._request("PATCH", f"/bookings/{booking_id}/status", json_body={"status": status})

    # ------------------------------------------------------------------
    # Messages and reviews
    # ------------------------------------------------------------------
    def send_message(self, payload: Dict[str, Any]) -> Result:
        return self._request("POST", "/messages", json_body=payload)

    def get_conversation(self, user_id: int, other_user_id: int) -> ListResult:
        return self._get_list(f"/messages/{user_id}/{other_user_id}")

    def create_review(self, payload: Dict[str, Any]) -> Result:
        return self._request("POST", "/reviews", json_body=payload)

    def get_business_reviews(self, business_id: int) -> ListResult:
        return self._get_list(f"/businesses/{business_id}/reviews")
