"""
Status-check endpoints.

``POST /api/status`` records that a client checked in and returns the
stored record with its generated ``id`` and ``timestamp``;
``GET /api/status`` lists stored records, at most 1000 of them.

Failures are raised as ``PortalError`` subclasses and rendered by the
application's exception handlers: a missing ``client_name`` becomes
400, a disconnected store 503 and a failed write or read 500.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, status

from intern_portal_api.app.api.deps import get_status_service
from intern_portal_api.app.schemas.portal import ErrorResponse
from intern_portal_api.app.schemas.status import StatusCheckCreate, StatusCheckRead
from intern_portal_api.app.services.status_service import StatusService

router = APIRouter()

_STORE_ERRORS = {
    status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
    status.HTTP_503_SERVICE_UNAVAILABLE: {"model": ErrorResponse},
}


@router.post(
    "",
    response_model=StatusCheckRead,
    status_code=status.HTTP_201_CREATED,
    responses={status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse}, **_STORE_ERRORS},
)
@router.post(
    "/",
    response_model=StatusCheckRead,
    status_code=status.HTTP_201_CREATED,
    include_in_schema=False,
)
async def create_status_check(
    payload: Optional[StatusCheckCreate] = None,
    service: StatusService = Depends(get_status_service),
) -> StatusCheckRead:
    """Create a status check for ``client_name``.

    The body may be omitted entirely; that is reported the same way as
    an empty ``client_name``.
    """
    client_name = payload.client_name if payload is not None else None
    return await service.create_record(client_name)


@router.get("", response_model=List[StatusCheckRead], responses=_STORE_ERRORS)
@router.get("/", response_model=List[StatusCheckRead], include_in_schema=False)
async def list_status_checks(
    service: StatusService = Depends(get_status_service),
) -> List[StatusCheckRead]:
    return await service.list_records()
