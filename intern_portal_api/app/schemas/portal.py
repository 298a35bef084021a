"""
Pydantic schemas for the static portal views.

The dashboard and leaderboard pages read these structures; they are
fixed demo data and never persisted.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class HelloMessage(BaseModel):
    message: str


class UserProfile(BaseModel):
    """The signed-in intern shown on the dashboard."""

    model_config = ConfigDict(frozen=True)

    name: str
    referral: str = Field(..., description="Referral code shared with donors")
    donations: int = Field(..., ge=0, description="Total donations raised")


class LeaderboardEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    donations: int = Field(..., ge=0)


class ErrorResponse(BaseModel):
    """Shape of every error payload returned by the API."""

    error: str
    message: Optional[str] = None
