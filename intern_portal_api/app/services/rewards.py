"""
Reward badges earned by donation totals.

The dashboard shows five badges.  A badge is unlocked once an intern's
donations reach its threshold; for the badges still locked the
dashboard shows how far along the intern is and how much is left to
raise.  ``reward_progress`` does that arithmetic so clients do not have
to repeat it.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence


@dataclass(frozen=True)
class Reward:
    name: str
    threshold: int


REWARDS: Sequence[Reward] = (
    Reward("Bronze Badge", 5000),
    Reward("Silver Badge", 10000),
    Reward("Gold Badge", 15000),
    Reward("Platinum Badge", 20000),
    Reward("Diamond Badge", 50000),
)


@dataclass(frozen=True)
class RewardProgress:
    """Progress of one donation total towards one reward."""

    name: str
    threshold: int
    unlocked: bool
    progress: float
    remaining: int

    def as_payload(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "threshold": self.threshold,
            "unlocked": self.unlocked,
            "progress": self.progress,
            "remaining": self.remaining,
        }


def reward_progress(donations: int, rewards: Sequence[Reward] = REWARDS) -> List[RewardProgress]:
    """Return the progress towards every reward, in catalogue order.

    ``progress`` is a percentage capped at 100 and rounded to two
    decimals; ``remaining`` is zero for unlocked rewards.
    """
    if donations < 0:
        raise ValueError("donations must not be negative")
    result = []
    for reward in rewards:
        unlocked = donations >= reward.threshold
        progress = min(donations / reward.threshold * 100, 100.0)
        result.append(
            RewardProgress(
                name=reward.name,
                threshold=reward.threshold,
                unlocked=unlocked,
                progress=round(progress, 2),
                remaining=0 if unlocked else reward.threshold - donations,
            )
        )
    return result


def next_reward(donations: int, rewards: Sequence[Reward] = REWARDS) -> Optional[RewardProgress]:
    """Return the first reward not yet unlocked, or ``None`` when all are."""
    for progress in reward_progress(donations, rewards):
        if not progress.unlocked:
            return progress
    return None
