"""
Record store backends for status-check records.

A record store is an append-only collection with two operations,
``insert`` and ``list_all``, plus an explicit connection lifecycle:
``connect()`` is awaited once in the background at startup,
``connected`` reports whether it succeeded and ``close()`` releases the
connection at shutdown.  Until ``connect()`` has succeeded every
operation fails immediately with ``StoreUnavailable`` instead of
waiting on a backend that may never answer.

Three backends are provided:

* ``MongoRecordStore`` talks to MongoDB through the asyncio client of
  ``pymongo``.  This is the production backend.
* ``SqliteRecordStore`` keeps the same documents in a local SQLite
  file, for running the portal without a MongoDB server.
* ``InMemoryRecordStore`` keeps records in a list.  Tests use it, and it
  can be built "unreachable" to behave like a backend that is down.

``create_record_store`` picks one according to ``settings.record_store``.
"""

from __future__ import annotations

import logging
import os
import sqlite3
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, List, Mapping, Optional

from pymongo import AsyncMongoClient
from pymongo.errors import ConnectionFailure, PyMongoError

from ..schemas.status import StatusCheckRead
from .config import Settings, settings as default_settings
from .errors import PersistenceError, StoreUnavailable

logger = logging.getLogger(__name__)

# Collection name shared with existing portal deployments.
STATUS_COLLECTION = "statuschecks"


def _record_from_document(document: Mapping[str, Any]) -> StatusCheckRead:
    timestamp = document["timestamp"]
    if isinstance(timestamp, str):
        timestamp = datetime.fromisoformat(timestamp)
    if timestamp.tzinfo is None:
        timestamp = timestamp.replace(tzinfo=timezone.utc)
    return StatusCheckRead(
        id=str(document["id"]),
        client_name=document["client_name"],
        timestamp=timestamp,
    )


class RecordStore:
    """Interface shared by all record store backends."""

    backend_name = "record"

    def __init__(self) -> None:
        self._connected = False

    @property
    def connected(self) -> bool:
        """Whether the store can currently serve requests."""
        return self._connected

    async def connect(self) -> None:
        """Establish the connection.  Failures are logged, never raised."""
        raise NotImplementedError

    async def insert(self, record: StatusCheckRead) -> None:
        """Persist a fully formed record."""
        raise NotImplementedError

    async def list_all(self, limit: int) -> List[StatusCheckRead]:
        """Return at most ``limit`` records in insertion order."""
        raise NotImplementedError

    async def close(self) -> None:
        """Release the connection; the store reports disconnected afterwards."""
        self._connected = False

    def _ensure_connected(self) -> None:
        if not self._connected:
            raise StoreUnavailable(f"{self.backend_name} store is not connected")


class InMemoryRecordStore(RecordStore):
    """Record store that keeps state within the process memory."""

    backend_name = "in-memory"

    def __init__(self, *, reachable: bool = True) -> None:
        super().__init__()
        self._reachable = reachable
        self._records: List[StatusCheckRead] = []
        self.closed = False

    async def connect(self) -> None:
        if not self._reachable:
            logger.warning("In-memory record store is configured as unreachable")
            return
        self._connected = True
        self.closed = False

    async def insert(self, record: StatusCheckRead) -> None:
        self._ensure_connected()
        self._records.append(record)

    async def list_all(self, limit: int) -> List[StatusCheckRead]:
        self._ensure_connected()
        return list(self._records[:limit])

    async def close(self) -> None:
        await super().close()
        self.closed = True

    def __len__(self) -> int:
        return len(self._records)


class MongoRecordStore(RecordStore):
    """Record store backed by a MongoDB collection."""

    backend_name = "MongoDB"

    def __init__(
        self,
        url: str,
        db_name: str,
        *,
        collection: str = STATUS_COLLECTION,
        timeout_ms: int = 5000,
    ) -> None:
        super().__init__()
        self._url = url
        self._db_name = db_name
        self._collection_name = collection
        self._timeout_ms = timeout_ms
        self._client: Optional[AsyncMongoClient] = None
        self._collection = None

    async def connect(self) -> None:
        client: Optional[AsyncMongoClient] = None
        try:
            client = AsyncMongoClient(
                self._url,
                tz_aware=True,
                serverSelectionTimeoutMS=self._timeout_ms,
            )
            await client.admin.command("ping")
        except PyMongoError as exc:
            logger.warning("MongoDB connection error: %s", exc)
            logger.warning(
                "MongoDB is not running. The server will start without database functionality."
            )
            logger.warning(
                "To fix this: install MongoDB (https://docs.mongodb.com/manual/installation/), "
                "use MongoDB Atlas (https://www.mongodb.com/atlas), "
                "or set MONGO_URL to a valid MongoDB connection string"
            )
            if client is not None:
                await client.close()
            return

        self._client = client
        self._collection = client[self._db_name][self._collection_name]
        self._connected = True
        logger.info("Connected to MongoDB database '%s'", self._db_name)

    async def insert(self, record: StatusCheckRead) -> None:
        self._ensure_connected()
        try:
            await self._collection.insert_one(record.to_document())
        except ConnectionFailure as exc:
            raise StoreUnavailable(str(exc)) from exc
        except PyMongoError as exc:
            raise PersistenceError(f"Failed to insert status check {record.id}: {exc}") from exc

    async def list_all(self, limit: int) -> List[StatusCheckRead]:
        self._ensure_connected()
        try:
            cursor = self._collection.find({}, {"_id": False}).limit(limit)
            documents = await cursor.to_list(length=None)
        except ConnectionFailure as exc:
            raise StoreUnavailable(str(exc)) from exc
        except PyMongoError as exc:
            raise PersistenceError(f"Failed to list status checks: {exc}") from exc
        return [_record_from_document(document) for document in documents]

    async def close(self) -> None:
        await super().close()
        if self._client is not None:
            await self._client.close()
            logger.info("MongoDB connection closed")
        self._client = None
        self._collection = None


def resolve_database_path(database_url: str) -> str:
    """Compute the path to the SQLite database file.

    A ``sqlite:///`` prefix is accepted and stripped.  Absolute paths
    are used as-is; relative paths are resolved against the project
    root so the file location does not depend on the working directory.
    """
    path = database_url
    if path.startswith("sqlite:///"):
        path = path[len("sqlite:///"):]
    if os.path.isabs(path):
        return path
    base_dir = Path(__file__).resolve().parents[3]
    return str((base_dir / path).resolve())


class SqliteRecordStore(RecordStore):
    """Record store keeping status checks in a local SQLite file.

    Each operation opens its own connection, so the store can be shared
    by concurrent requests without a lock.  The ``sqlite3`` calls are
    blocking and run on the event loop, which stalls other requests for
    the duration of each query; this backend is for local use, not for
    serving real traffic.
    """

    backend_name = "SQLite"

    SCHEMA = """
        CREATE TABLE IF NOT EXISTS status_checks (
            id TEXT PRIMARY KEY,
            client_name TEXT NOT NULL,
            timestamp TEXT NOT NULL
        );
    """

    def __init__(self, path: str) -> None:
        super().__init__()
        self._path = path

    @property
    def path(self) -> str:
        return self._path

    def _get_connection(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self._path)
        conn.row_factory = sqlite3.Row
        return conn

    async def connect(self) -> None:
        try:
            Path(self._path).parent.mkdir(parents=True, exist_ok=True)
            conn = self._get_connection()
            try:
                conn.executescript(self.SCHEMA)
                conn.commit()
            finally:
                conn.close()
        except (OSError, sqlite3.Error) as exc:
            logger.warning("SQLite record store unavailable at %s: %s", self._path, exc)
            return
        self._connected = True
        logger.info("Using SQLite record store at %s", self._path)

    async def insert(self, record: StatusCheckRead) -> None:
        self._ensure_connected()
        try:
            conn = self._get_connection()
            try:
                conn.execute(
                    "INSERT INTO status_checks (id, client_name, timestamp) VALUES (?, ?, ?)",
                    (record.id, record.client_name, record.timestamp.isoformat()),
                )
                conn.commit()
            finally:
                conn.close()
        except sqlite3.Error as exc:
            raise PersistenceError(f"Failed to insert status check {record.id}: {exc}") from exc

    async def list_all(self, limit: int) -> List[StatusCheckRead]:
        self._ensure_connected()
        try:
            conn = self._get_connection()
            try:
                rows = conn.execute(
                    "SELECT id, client_name, timestamp FROM status_checks ORDER BY rowid LIMIT ?",
                    (limit,),
                ).fetchall()
            finally:
                conn.close()
        except sqlite3.Error as exc:
            raise PersistenceError(f"Failed to list status checks: {exc}") from exc
        return [_record_from_document(dict(row)) for row in rows]


def create_record_store(config: Settings = default_settings) -> RecordStore:
    """Create the record store selected by the runtime configuration."""

    backend = config.record_store
    if backend == "memory":
        logger.info("Using in-memory record store")
        return InMemoryRecordStore()
    if backend == "sqlite":
        return SqliteRecordStore(resolve_database_path(config.database_url))
    if backend != "mongo":
        raise ValueError(f"Unknown RECORD_STORE backend '{backend}'")
    logger.info("Using MongoDB record store (database '%s')", config.db_name)
    return MongoRecordStore(
        config.mongo_url,
        config.db_name,
        timeout_ms=config.mongo_timeout_ms,
    )
