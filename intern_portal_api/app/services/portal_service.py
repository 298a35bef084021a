"""
Static data providers for the dashboard and leaderboard views.

The portal is a demo: the signed-in intern and the leaderboard are
fixed structures defined here.  Nothing mutates them, so every call
returns the same content for the lifetime of the process.
"""

from typing import List, Tuple

from intern_portal_api.app.schemas.portal import LeaderboardEntry, UserProfile

CURRENT_USER = UserProfile(name="Nachiketh", referral="nachiketh2025", donations=15420)

LEADERBOARD: Tuple[LeaderboardEntry, ...] = (
    LeaderboardEntry(name="Alice", donations=20000),
    LeaderboardEntry(name="Bob", donations=18000),
    LeaderboardEntry(name="Nachiketh", donations=15420),
    LeaderboardEntry(name="Charlie", donations=12500),
    LeaderboardEntry(name="Diana", donations=11800),
    LeaderboardEntry(name="Emma", donations=9600),
    LeaderboardEntry(name="Frank", donations=8200),
)


class PortalDataService:
    """Read-only access to the demo user and leaderboard."""

    @classmethod
    def get_user(cls) -> UserProfile:
        return CURRENT_USER

    @classmethod
    def get_leaderboard(cls) -> List[LeaderboardEntry]:
        """Return the leaderboard, highest donations first."""
        return list(LEADERBOARD)
