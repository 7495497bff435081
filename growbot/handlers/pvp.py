"""Battles between users: callback data, winner choice and loan withholding."""

from __future__ import annotations

import math
import random
import re
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import ClassVar, Optional, Protocol, Tuple, TypeVar

from growbot.handlers.callback_data import CallbackData, InvalidCallbackData

# Timestamps are counted from 22.06.2024 to keep button data short.
TIMESTAMP_MILLIS_SINCE_2024 = 1719014400000

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_U16_MAX = 2**16 - 1
_U32_MAX = 2**32 - 1
_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1
_UINT = re.compile(r"\+?[0-9]+")
_INT = re.compile(r"[+-]?[0-9]+")

T = TypeVar("T")


class _RandomSource(Protocol):
    def random(self) -> float: ...


def _utc(now: Optional[datetime]) -> datetime:
    if now is None:
        return datetime.now(timezone.utc)
    if now.tzinfo is None:
        return now.replace(tzinfo=timezone.utc)
    return now


def new_short_timestamp(now: Optional[datetime] = None) -> int:
    """Return milliseconds since 22.06.2024 (UTC) for the given or current moment."""
    millis = (_utc(now) - _EPOCH) // timedelta(milliseconds=1)
    return millis - TIMESTAMP_MILLIS_SINCE_2024


@dataclass(frozen=True)
class BattleCallbackData(CallbackData):
    """Data of the button that accepts a battle.

    The timestamp makes repeated clicks on one button distinguishable;
    buttons of the older layout carry none.
    """

    PREFIX: ClassVar[str] = "pvp"

    initiator: int
    bet: int
    timestamp: Optional[int] = None

    @classmethod
    def create(cls, initiator: int, bet: int, now: Optional[datetime] = None) -> "BattleCallbackData":
        """Build the data stamped with the given or current moment."""
        return cls(initiator=initiator, bet=bet, timestamp=new_short_timestamp(now))

    def _payload(self) -> str:
        if self.timestamp is None:
            return f"{self.initiator}:{self.bet}"
        return f"{self.initiator}:{self.bet}:{self.timestamp}"

    @classmethod
    def _from_parts(cls, parts) -> "BattleCallbackData":
        initiator = parts.uint("uid", 64)
        bet = parts.uint("bet", 16)
        try:
            raw = parts.next("timestamp")
        except InvalidCallbackData as exc:
            if exc.missing_part is None:
                raise
            return cls(initiator=initiator, bet=bet, timestamp=None)
        if _INT.fullmatch(raw) is None:
            raise parts.error(f"part 'timestamp' is not an integer: {raw!r}")
        timestamp = int(raw)
        if not _I64_MIN <= timestamp <= _I64_MAX:
            raise parts.error(f"part 'timestamp' is out of range: {raw!r}")
        return cls(initiator=initiator, bet=bet, timestamp=timestamp)


def choose_winner(initiator: T, acceptor: T, rng: Optional[_RandomSource] = None) -> Tuple[T, T]:
    """Pick the winner with equal chances; returns (winner, loser)."""
    source = rng if rng is not None else random.SystemRandom()
    if source.random() < 0.5:
        return acceptor, initiator
    return initiator, acceptor


def _round_half_away_from_zero(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def loan_withholding(award: int, payout_ratio: float, debt: int) -> int:
    """Return how much of a battle award goes to paying off the winner's loan.

    The payout never exceeds the debt.
    """
    payout = _round_half_away_from_zero(payout_ratio * float(award))
    payout = min(max(payout, 0), _U16_MAX)
    return min(payout, debt)


def is_bet_query(query: str) -> bool:
    """Tell whether an inline query is a bet: an unsigned 32-bit number."""
    if _UINT.fullmatch(query) is None:
        return False
    return int(query) <= _U32_MAX