"""
FastAPI dependencies shared by the endpoint modules.

The record store is created once by ``create_app`` and kept on
``app.state``; request handlers reach it through these dependencies
instead of importing a module-level global.
"""

from fastapi import Depends, Request

from intern_portal_api.app.core.db import RecordStore
from intern_portal_api.app.services.status_service import StatusService


def get_record_store(request: Request) -> RecordStore:
    return request.app.state.record_store


def get_status_service(store: RecordStore = Depends(get_record_store)) -> StatusService:
    return StatusService(store)
