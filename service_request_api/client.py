"""Service Request API client.

A thin wrapper around the HTTP API using the ``requests`` library.
Every method returns a ``(data, error)`` tuple: on success ``error`` is
``None``; on failure ``data`` is ``None`` (or an empty list) and
``error`` is a dictionary with ``status_code`` and ``message`` keys.

The client exposes:

* :meth:`health` – liveness check.
* :meth:`check_availability` – whether a date/time slot is free.
* :meth:`create_request` – submit a service request.
* :meth:`list_requests` – all requests, newest first (admin).
* :meth:`update_status` – change a request's status (admin).
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests

logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class ServiceRequestClient:
    """Client for the service request booking API."""

    def __init__(
        self,
        *,
        base_url: str,
        admin_key: Optional[str] = None,
        api_prefix: str = "/api",
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the server, e.g. ``http://localhost:3000``.
            admin_key: Optional admin key sent as ``X-Admin-Key``.  Only
                needed for the admin operations.
            api_prefix: Prefix the API is mounted under.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per-request timeout in seconds.
        """
        prefix = api_prefix.strip("/")
        self.base_url = base_url.rstrip("/") + (f"/{prefix}" if prefix else "")
        self.admin_key = admin_key
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self,
        method: str,
        path: str,
        *,
        params: Dict[str, Any] | None = None,
        json_body: Any | None = None,
        admin: bool = False,
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PATCH``).
            path: Path relative to the API root (e.g. ``/requests``).
            params: Query parameters to include in the request.
            json_body: JSON body to send with the request.
            admin: Whether to send the admin key header.
        Returns:
            A tuple ``(data, error)``.
        """
        url = f"{self.base_url}{path}"
        headers: Dict[str, str] = {}
        if admin:
            if not self.admin_key:
                return None, {"status_code": None, "message": "Admin key not configured"}
            headers["X-Admin-Key"] = self.admin_key
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params,
                json=json_body,
                headers=headers,
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
                    message = err_json.get("detail") or err_json.get("error") or str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    # ------------------------------------------------------------------
    # Public operations
    # ------------------------------------------------------------------
    def health(self) -> Tuple[bool, Optional[Error]]:
        data, error = self._request("GET", "/health")
        if error:
            return False, error
        return bool(data and data.get("ok")), None

    def check_availability(self, date: str, time: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Check whether ``date``/``time`` can be booked.

        Returns:
            A tuple ``({"available": bool, "dateTime": str}, error)``.
        """
        return self._request("GET", "/availability", params={"date": date, "time": time})

    def create_request(self, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Submit a service request.

        Args:
            payload: camelCase fields of the request (``fullName``,
                ``serviceType``, ``date``, ``time`` ...).
        Returns:
            A tuple ``(request, error)`` where ``request`` is the stored
            request.  A taken slot yields ``status_code`` 409.
        """
        data, error = self._request("POST", "/requests", json_body=payload)
        if error:
            return None, error
        return (data or {}).get("request"), None

    # ------------------------------------------------------------------
    # Admin operations
    # ------------------------------------------------------------------
    def list_requests(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        data, error = self._request("GET", "/admin/requests", admin=True)
        if error:
            return [], error
        return (data or {}).get("requests", []), None

    def update_status(self, request_id: str, status: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Set the status of a request (``pending``, ``confirmed``, ``completed`` or ``cancelled``)."""
        data, error = self._request(
            "PATCH",
            f"/admin/requests/{request_id}",
            json_body={"status": status},
            admin=True,
        )
        if error:
            return None, error
        return (data or {}).get("request"), None
