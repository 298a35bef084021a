"""
Service layer for status checks.

``StatusService`` owns the rules for status-check records: the caller
supplies a ``client_name`` and the service generates the identifier and
the creation timestamp, then hands the finished record to the store.
The store is injected so the same service runs against MongoDB, SQLite
or the in-memory store used in tests.

Connectivity is checked before every store call.  A disconnected store
therefore costs nothing: the service raises ``StoreUnavailable`` at once
and the API turns it into HTTP 503.
"""

from __future__ import annotations

import logging
import uuid
from datetime import datetime, timezone
from typing import Any, List

from intern_portal_api.app.core.db import RecordStore
from intern_portal_api.app.core.errors import StoreUnavailable, ValidationError
from intern_portal_api.app.schemas.status import StatusCheckRead

logger = logging.getLogger(__name__)

# Upper bound on the number of records returned by a listing.
STATUS_LIST_LIMIT = 1000


def _utcnow() -> datetime:
    """Current UTC time truncated to milliseconds (BSON datetime precision)."""
    now = datetime.now(timezone.utc)
    return now.replace(microsecond=now.microsecond // 1000 * 1000)


class StatusService:
    """Create and list status-check records."""

    def __init__(self, store: RecordStore) -> None:
        self._store = store

    @property
    def store(self) -> RecordStore:
        return self._store

    async def create_record(self, client_name: Any) -> StatusCheckRead:
        """Validate ``client_name`` and persist a new record.

        Raises
        ------
        ValidationError
            If ``client_name`` is missing, not a string or blank.
        StoreUnavailable
            If the store is not connected.
        PersistenceError
            If the store failed to write the record.
        """
        if not isinstance(client_name, str) or not client_name.strip():
            raise ValidationError("client_name is required")
        self._require_store()

        record = StatusCheckRead(
            id=str(uuid.uuid4()),
            client_name=client_name,
            timestamp=_utcnow(),
        )
        await self._store.insert(record)
        logger.info("Created status check %s for client %r", record.id, client_name)
        return record

    async def list_records(self) -> List[StatusCheckRead]:
        """Return up to ``STATUS_LIST_LIMIT`` stored records."""
        self._require_store()
        records = await self._store.list_all(STATUS_LIST_LIMIT)
        return records[:STATUS_LIST_LIMIT]

    def _require_store(self) -> None:
        if not self._store.connected:
            raise StoreUnavailable(f"{self._store.backend_name} store is not connected")
