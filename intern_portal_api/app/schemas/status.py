"""
Pydantic schemas for status-check records.

A status check is the only persisted entity of the portal: a client
announces itself by name and the server stamps the record with an
identifier and a creation time.  Both generated fields are read-only
from the caller's point of view, so the create schema only carries
``client_name``.
"""

from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class StatusCheckCreate(BaseModel):
    """Request body for ``POST /api/status``.

    ``client_name`` is optional at the schema level so that a missing
    value reaches the service and is reported as ``client_name is
    required`` rather than as a generic body-parsing error.  Unknown
    keys (for instance a caller-supplied ``id``) are ignored.
    """

    model_config = ConfigDict(extra="ignore")

    client_name: Optional[str] = Field(None, description="Name of the client reporting in")


class StatusCheckRead(BaseModel):
    """A stored status-check record."""

    model_config = ConfigDict(frozen=True)

    id: str
    client_name: str
    timestamp: datetime

    def to_document(self) -> Dict[str, Any]:
        """Return the record as a plain document for the store."""
        return {"id": self.id, "client_name": self.client_name, "timestamp": self.timestamp}
