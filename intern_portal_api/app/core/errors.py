"""
Exception hierarchy for the portal API.

Every failure the API reports on purpose is a ``PortalError``.  Each
subclass knows its HTTP status and what may be shown to the caller;
``main.create_app`` registers a single handler that renders them as
``{"error": ..., "message": ...}``.  Internal detail (driver messages,
tracebacks) stays in the exception and the logs, never in the payload.
"""

from typing import Dict, Optional


class PortalError(Exception):
    """Base class for errors that map onto an HTTP response."""

    status_code: int = 500
    error: str = "Internal server error"
    hint: Optional[str] = None

    def __init__(self, detail: Optional[str] = None) -> None:
        self.detail = detail or self.error
        super().__init__(self.detail)

    @property
    def public_message(self) -> str:
        return self.error

    def to_payload(self) -> Dict[str, str]:
        payload = {"error": self.public_message}
        if self.hint:
            payload["message"] = self.hint
        return payload


class ValidationError(PortalError):
    """Caller input failed a required-field check."""

    status_code = 400
    error = "Invalid request"

    @property
    def public_message(self) -> str:
        return self.detail


class StoreUnavailable(PortalError):
    """The record store is not connected."""

    status_code = 503
    error = "Database not available"
    hint = "The database is not connected. Please check your database connection."


class PersistenceError(PortalError):
    """The record store accepted the call but the operation failed."""

    status_code = 500
    error = "Internal server error"


class RouteNotFound(PortalError):
    """No route matches the request path and method."""

    status_code = 404
    error = "Route not found"
