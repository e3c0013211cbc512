"""Contact Manager API client.

A thin wrapper around the REST API exposed by
``contact_manager_api``.  It uses the ``requests`` library and mirrors
the server's operations:

* :meth:`list_contacts` – all contacts, newest first.
* :meth:`get_contact` – a single contact by id.
* :meth:`count_contacts` – number of stored contacts.
* :meth:`create_contact`, :meth:`update_contact`, :meth:`delete_contact`
  – mutations; these return the server's ``{success, data|error}``
  action result.
* :meth:`view_revision` – revision counter of a rendered view.
* :meth:`health` – liveness of the API and its database.

Every method returns a tuple ``(data, error)``.  On success ``error``
is ``None``; on failure ``data`` is ``None`` and ``error`` is a
dictionary with ``status_code`` and ``message``.  Network problems are
reported the same way instead of being raised.

An optional API key is sent as ``Authorization: Bearer <api_key>`` for
deployments that sit behind an authenticating proxy.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Result = Tuple[Optional[Any], Optional[Dict[str, Any]]]


class ContactManagerClient:
    """Client for interacting with the Contact Manager API."""

    def __init__(
        self,
        *,
        base_url: str,
        api_key: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the server, e.g. ``http://localhost:8000``.
            api_key: Optional bearer token added to every request.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per-request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, params: Dict[str, Any] | None = None,
        json_body: Any | None = None
    ) -> Result:
        """Perform an HTTP request against ``/api/v1``.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PATCH``, ``DELETE``).
            path: Path relative to ``/api/v1`` (e.g. ``/contacts/``).
            params: Query parameters to include in the request.
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)`` as described in the module docstring.
        """
        url = f"{self.base_url}/api/v1{path}"
        headers: Dict[str, str] = {}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
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
                    message = err_json.get("error") or err_json.get("detail") or str(err_json)
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
    # Contact reads
    # ------------------------------------------------------------------
    def list_contacts(self) -> Tuple[Optional[List[Dict[str, Any]]], Optional[Dict[str, Any]]]:
        """Retrieve all contacts, most recently created first."""
        return self._request("GET", "/contacts/")

    def get_contact(self, contact_id: int) -> Result:
        """Retrieve a single contact.  A missing contact yields a 404 error."""
        return self._request("GET", f"/contacts/{contact_id}")

    def count_contacts(self) -> Tuple[Optional[int], Optional[Dict[str, Any]]]:
        data, error = self._request("GET", "/contacts/count")
        if error:
            return None, error
        return data.get("count"), None

    # ------------------------------------------------------------------
    # Contact mutations
    # ------------------------------------------------------------------
    def create_contact(
        self,
        *,
        email: str,
        name: str,
        phone: Optional[str] = None,
        company: Optional[str] = None,
    ) -> Result:
        """Create a contact.  ``data`` is the created contact on success."""
        body = {"email": email, "name": name}
        if phone is not None:
            body["phone"] = phone
        if company is not None:
            body["company"] = company
        return self._unwrap(self._request("POST", "/contacts/", json_body=body))

    def update_contact(self, contact_id: int, **fields: Any) -> Result:
        """Partially update a contact; only the given fields change."""
        return self._unwrap(self._request("PATCH", f"/contacts/{contact_id}", json_body=fields))

    def delete_contact(self, contact_id: int) -> Tuple[bool, Optional[Dict[str, Any]]]:
        _, error = self._unwrap(self._request("DELETE", f"/contacts/{contact_id}"))
        return error is None, error

    # ------------------------------------------------------------------
    # Misc
    # ------------------------------------------------------------------
    def view_revision(self, path: str) -> Tuple[Optional[int], Optional[Dict[str, Any]]]:
        data, error = self._request("GET", "/views/revision", params={"path": path})
        if error:
            return None, error
        return data.get("revision"), None

    def health(self) -> Result:
        return self._request("GET", "/health/")

    @staticmethod
    def _unwrap(result: Result) -> Result:
        """Turn an action result body into ``(data, error)``."""
        data, error = result
        if error:
            return None, error
        if isinstance(data, dict) and "success" in data:
            if data["success"]:
                return data.get("data"), None
            return None, {"status_code": None, "message": data.get("error")}
        return data, None
