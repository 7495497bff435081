"""The winner's choice of how much of a battle bet to keep."""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import ClassVar, Optional, Tuple

from growbot.handlers.callback_data import CallbackData, InvalidCallbackData
from growbot.handlers.pvp import new_short_timestamp

_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1
_INT = re.compile(r"[+-]?[0-9]+")


class MercyAction(Enum):
    """What the winner does with the loser's bet."""

    TAKE_FULL = 0
    SHOW_MERCY = 1
    FULL_RETURN = 2


@dataclass(frozen=True)
class MercyCallbackData(CallbackData):
    """Data of the buttons offering the winner a choice of mercy.

    The action is kept as its raw number so that unknown values survive parsing.
    """

    PREFIX: ClassVar[str] = "mercy"

    winner: int
    loser: int
    bet: int
    action: int
    timestamp: Optional[int] = None

    @classmethod
    def create(
        cls,
        winner: int,
        loser: int,
        bet: int,
        action: MercyAction,
        now: Optional[datetime] = None,
    ) -> "MercyCallbackData":
        """Build the data stamped with the given or current moment."""
        return cls(
            winner=winner,
            loser=loser,
            bet=bet,
            action=action.value,
            timestamp=new_short_timestamp(now),
        )

    def mercy_action(self) -> Optional[MercyAction]:
        """Return the chosen action, or None if the number is unknown."""
        try:
            return MercyAction(self.action)
        except ValueError:
            return None

    def _payload(self) -> str:
        base = f"{self.winner}:{self.loser}:{self.bet}:{self.action}"
        return base if self.timestamp is None else f"{base}:{self.timestamp}"

    @classmethod
    def _from_parts(cls, parts) -> "MercyCallbackData":
        winner = parts.uint("winner", 64)
        loser = parts.uint("loser", 64)
        bet = parts.uint("bet", 16)
        action = parts.uint("action", 8)
        try:
            raw = parts.next("timestamp")
        except InvalidCallbackData as exc:
            if exc.missing_part is None:
                raise
            return cls(winner=winner, loser=loser, bet=bet, action=action, timestamp=None)
        if _INT.fullmatch(raw) is None:
            raise parts.error(f"part 'timestamp' is not an integer: {raw!r}")
        timestamp = int(raw)
        if not _I64_MIN <= timestamp <= _I64_MAX:
            raise parts.error(f"part 'timestamp' is out of range: {raw!r}")
        return cls(winner=winner, loser=loser, bet=bet, action=action, timestamp=timestamp)


@dataclass
class MercyStats:
    """How often a user showed and received mercy."""

    mercy_shown: int = 0
    mercy_received: int = 0
    kind_soul_points: int = 0


def split_bet(bet: int, action: MercyAction) -> Tuple[int, int]:
    """Split the bet into (taken by the winner, returned to the loser)."""
    if action is MercyAction.TAKE_FULL:
        return bet, 0
    if action is MercyAction.SHOW_MERCY:
        returned = bet // 2
        return bet - returned, returned
    return 0, bet