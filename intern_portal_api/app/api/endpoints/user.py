"""
Current-user endpoint.

Returns the profile of the intern shown on the dashboard.  Login is a
stub in the portal, so there is exactly one user and no authentication.
"""

import logging

from fastapi import APIRouter

from intern_portal_api.app.schemas.portal import UserProfile
from intern_portal_api.app.services.portal_service import PortalDataService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=UserProfile)
@router.get("/", response_model=UserProfile, include_in_schema=False)
async def get_user() -> UserProfile:
    user = PortalDataService.get_user()
    logger.info("User endpoint hit, returning: %s", user.model_dump())
    return user
