"""Perks that add to or take from a growth increment."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar

_U16_MAX = 2**16 - 1


def _round_half_away_from_zero(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


@dataclass(frozen=True)
class ChangeIntent:
    """The length before a change and the increment about to be applied."""

    current_length: int
    base_increment: int


@dataclass(frozen=True)
class HelpPussiesPerk:
    """Helps users with a negative length climb back by a share of their depth."""

    name: ClassVar[str] = "help-pussies"

    coefficient: float

    def apply(self, change_intent: ChangeIntent) -> int:
        """Return the additional change for the intended growth."""
        if change_intent.current_length >= 0:
            return 0
        depth = float(abs(change_intent.current_length))
        return _round_half_away_from_zero(self.coefficient * depth)

    def enabled(self) -> bool:
        """Tell whether the perk has any effect."""
        return self.coefficient > 0.0


def loan_payout(base_increment: int, payout_ratio: float, debt: int) -> int:
    """Return how much of a positive increment goes to paying off the loan.

    The payout is never more than the debt; a non-positive increment pays nothing.
    The length changes by the negated payout.
    """
    if base_increment <= 0:
        return 0
    payout = _round_half_away_from_zero(float(base_increment) * payout_ratio)
    payout = min(max(payout, 0), _U16_MAX)
    return min(payout, debt)