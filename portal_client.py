"""Intern Portal API client.

This module defines a small client wrapper around the portal's REST
API.  It exposes the calls the portal frontend makes, so scripts and
tests can drive the API the same way:

* :meth:`PortalAPI.hello` – check that the API answers.
* :meth:`PortalAPI.get_user` – fetch the signed-in intern's profile.
* :meth:`PortalAPI.get_leaderboard` – fetch the leaderboard.
* :meth:`PortalAPI.create_status_check` – record a status check.
* :meth:`PortalAPI.list_status_checks` – list stored status checks.
* :meth:`PortalAPI.get_dashboard` – profile, reward progress and rank
  combined, as shown on the dashboard page.

Every method returns a tuple ``(data, error)``.  On success ``error``
is ``None``; on failure ``data`` is empty and ``error`` is a dictionary
with keys ``status_code`` and ``message``.  The message is taken from
the ``error``/``message`` fields of the API's error payload, or from
the transport exception when the server could not be reached.

The client uses the ``requests`` library internally.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests

from intern_portal_api.app.services.rewards import next_reward, reward_progress

logger = logging.getLogger(__name__)

ApiError = Dict[str, Any]


class PortalAPI:
    """Client for interacting with the intern portal API."""

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
                The ``/api`` prefix is added by the client.
            api_key: Optional token sent as ``Authorization: Bearer <api_key>``.
                The portal does not check it; it is forwarded for
                deployments that put the API behind a gateway.
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
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[ApiError]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET`` or ``POST``).
            path: Path relative to ``<base_url>/api`` (e.g. ``/user``).
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)`` as described in the module docstring.
        """
        url = f"{self.base_url}/api{path}"
        headers: Dict[str, str] = {}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
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
                    message = err_json.get("error") or str(err_json)
                    if err_json.get("message"):
                        message = f"{message}: {err_json['message']}"
                except (ValueError, AttributeError):
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    # ------------------------------------------------------------------
    # Portal views
    # ------------------------------------------------------------------
    def hello(self) -> Tuple[Optional[str], Optional[ApiError]]:
        """Return the greeting of ``GET /api``."""
        data, error = self._request("GET", "")
        if error:
            return None, error
        return (data or {}).get("message"), None

    def get_user(self) -> Tuple[Optional[Dict[str, Any]], Optional[ApiError]]:
        return self._request("GET", "/user")

    def get_leaderboard(self) -> Tuple[List[Dict[str, Any]], Optional[ApiError]]:
        """Retrieve the leaderboard, highest donations first."""
        data, error = self._request("GET", "/leaderboard")
        if error:
            return [], error
        return data if isinstance(data, list) else [], None

    def get_dashboard(self) -> Tuple[Optional[Dict[str, Any]], Optional[ApiError]]:
        """Build the dashboard view for the current user.

        Returns:
            A tuple ``(dashboard, error)``.  ``dashboard`` holds the
            ``user`` profile, the progress towards every reward under
            ``rewards``, the first locked reward as ``next_reward`` and
            the user's 1-based leaderboard ``rank`` (``None`` when the
            user is not listed).
        """
        user, error = self.get_user()
        if error:
            return None, error
        leaderboard, error = self.get_leaderboard()
        if error:
            return None, error
        donations = int(user.get("donations", 0))
        rank = next(
            (index for index, entry in enumerate(leaderboard, start=1) if entry.get("name") == user.get("name")),
            None,
        )
        upcoming = next_reward(donations)
        return {
            "user": user,
            "rewards": [progress.as_payload() for progress in reward_progress(donations)],
            "next_reward": upcoming.as_payload() if upcoming else None,
            "rank": rank,
        }, None

    # ------------------------------------------------------------------
    # Status checks
    # ------------------------------------------------------------------
    def create_status_check(self, client_name: str) -> Tuple[Optional[Dict[str, Any]], Optional[ApiError]]:
        """Record a status check for ``client_name``.

        Returns:
            A tuple ``(record, error)``.  ``record`` carries the
            generated ``id`` and ``timestamp``.
        """
        return self._request("POST", "/status", json_body={"client_name": client_name})

    def list_status_checks(self) -> Tuple[List[Dict[str, Any]], Optional[ApiError]]:
        data, error = self._request("GET", "/status")
        if error:
            return [], error
        return data if isinstance(data, list) else [], None
