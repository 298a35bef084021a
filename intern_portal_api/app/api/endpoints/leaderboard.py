"""
Leaderboard endpoint.

The leaderboard is fixed demo data ordered by donations, highest first.
Clients derive ranks from the position in the list.
"""

import logging
from typing import List

from fastapi import APIRouter

from intern_portal_api.app.schemas.portal import LeaderboardEntry
from intern_portal_api.app.services.portal_service import PortalDataService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=List[LeaderboardEntry])
@router.get("/", response_model=List[LeaderboardEntry], include_in_schema=False)
async def get_leaderboard() -> List[LeaderboardEntry]:
    entries = PortalDataService.get_leaderboard()
    logger.info("Leaderboard endpoint hit, returning %d entries", len(entries))
    return entries
