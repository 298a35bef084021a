"""
Top-level router of the portal API.

Aggregates the resource routers under one router which the application
mounts at ``/api``.  The bare ``/api`` greeting lives here because a
sub-router cannot be included with both an empty prefix and an empty
path.

Every route is also registered with a trailing slash, so ``/api/user/``
answers like ``/api/user`` instead of redirecting.
"""

import logging

from fastapi import APIRouter

from intern_portal_api.app.schemas.portal import HelloMessage

from .endpoints import leaderboard, status, user

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=HelloMessage, tags=["portal"])
@router.get("/", response_model=HelloMessage, include_in_schema=False)
async def hello() -> HelloMessage:
    """Greeting used by clients to check that the API is up."""
    logger.info("API root endpoint hit")
    return HelloMessage(message="Hello World")


router.include_router(user.router, prefix="/user", tags=["portal"])
router.include_router(leaderboard.router, prefix="/leaderboard", tags=["portal"])
router.include_router(status.router, prefix="/status", tags=["status"])
