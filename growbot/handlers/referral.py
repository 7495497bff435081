"""Referral codes and rewards."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

_NAME_PART_LIMIT = 6
_REFERRER_BONUS_CM = 1
_REFERRER_BONUS_SUNBEAMS = 30


@dataclass(frozen=True)
class ReferralStats:
    """How many referrals a user made and what they earned."""

    successful_referrals: int = 0
    total_bonus_cm: int = 0
    total_bonus_sunbeams: int = 0


def _truncated_remainder(value: int, divisor: int) -> int:
    remainder = abs(value) % divisor
    return -remainder if value < 0 else remainder


def referral_code(user_id: int, first_name: str) -> str:
    """Build a stable referral code of the form SPROUT-NAME-XXX."""
    name_part = "".join(c for c in first_name if c.isalnum())[:_NAME_PART_LIMIT].upper()
    if not name_part:
        name_part = "USER"
    suffix = format(_truncated_remainder(user_id, 4096) & 0xFFFF, "03X")
    return f"SPROUT-{name_part}-{suffix}"


def claim_referral_reward() -> Tuple[int, int]:
    """Return the referrer's reward as (centimetres, sunbeams)."""
    return _REFERRER_BONUS_CM, _REFERRER_BONUS_SUNBEAMS