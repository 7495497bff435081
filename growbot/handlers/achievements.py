"""Achievements and the progress users make towards them."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

_CENTENARIAN_HEIGHT = 100


@dataclass(frozen=True)
class AchievementDef:
    """An achievement and the progress needed to unlock it."""

    key: str
    target: int


ACHIEVEMENTS = (
    AchievementDef("first_bloom", 1),
    AchievementDef("kind_soul_1", 10),
    AchievementDef("kind_soul_2", 50),
    AchievementDef("kind_soul_3", 200),
    AchievementDef("underdog", 1),
    AchievementDef("centenarian", 100),
    AchievementDef("mythical", 1),
    AchievementDef("traveler", 12),
    AchievementDef("generous", 25),
    AchievementDef("champion", 10),
)


@dataclass
class UserAchievement:
    """A user's progress towards one achievement."""

    key: str
    progress: int = 0
    target: int = 0
    unlocked: bool = False

    def progress_text(self) -> str:
        """Describe the progress as 'current/target', or 'Unlocked'."""
        if self.unlocked:
            return "Unlocked"
        return f"{self.progress}/{self.target}"


class AchievementKind(Enum):
    """Kinds of actions that can advance achievements."""

    FIRST_GROW = "first_grow"
    SHOW_MERCY = "show_mercy"
    WIN_AS_DUEL = "win_as_duel"
    REACH_HEIGHT = "reach_height"
    WIN_SPROUT_OF_DAY = "win_sprout_of_day"
    PARTICIPATE_IN_EVENT = "participate_in_event"
    GIFT_ITEM = "gift_item"


@dataclass(frozen=True)
class AchievementAction:
    """An action, with the height reached or the gift recipient where relevant."""

    kind: AchievementKind
    value: Optional[int] = None

    @classmethod
    def reach_height(cls, height: int) -> "AchievementAction":
        return cls(AchievementKind.REACH_HEIGHT, height)

    @classmethod
    def gift_item(cls, recipient_id: int) -> "AchievementAction":
        return cls(AchievementKind.GIFT_ITEM, recipient_id)


def default_achievements() -> List[UserAchievement]:
    """Return every achievement with no progress made."""
    return [UserAchievement(key=d.key, progress=0, target=d.target, unlocked=False) for d in ACHIEVEMENTS]


def check_achievements(action: AchievementAction) -> List[str]:
    """Return the keys of achievements the action unlocks."""
    if action.kind is AchievementKind.FIRST_GROW:
        return ["first_bloom"]
    if action.kind is AchievementKind.REACH_HEIGHT:
        height = action.value if action.value is not None else 0
        if height >= _CENTENARIAN_HEIGHT:
            return ["centenarian"]
    return []