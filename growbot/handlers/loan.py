"""Loans that cover a negative length and are paid back from growth."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import ClassVar, Union

from growbot.handlers.callback_data import CallbackData, InvalidCallbackData


def _format_float(value: float) -> str:
    if value != value:
        return "NaN"
    if value in (float("inf"), float("-inf")):
        return "inf" if value > 0 else "-inf"
    text = format(Decimal(repr(value)), "f")
    whole, _, fraction = text.partition(".")
    fraction = fraction.rstrip("0")
    return f"{whole}.{fraction}" if fraction else whole


@dataclass(frozen=True)
class LoanConfirmed:
    """The user agreed to borrow the debt at the given payout ratio."""

    value: int
    payout_ratio: float

    def __str__(self) -> str:
        return f"confirmed:{self.value}:{_format_float(self.payout_ratio)}"


@dataclass(frozen=True)
class LoanRefused:
    """The user declined the loan."""

    def __str__(self) -> str:
        return "refused"


LoanAction = Union[LoanConfirmed, LoanRefused]


@dataclass(frozen=True)
class LoanCallbackData(CallbackData):
    """Data of the loan confirmation buttons."""

    PREFIX: ClassVar[str] = "loan"

    uid: int
    action: LoanAction

    def _payload(self) -> str:
        return f"{self.uid}:{self.action}"

    @classmethod
    def _from_parts(cls, parts) -> "LoanCallbackData":
        uid = parts.uint("uid", 64)
        action_name = parts.next("action")
        if action_name == "confirmed":
            value = parts.uint("value", 16)
            try:
                payout_ratio = parts.float("payout_ratio")
            except InvalidCallbackData as exc:
                # Older buttons carry no ratio; zero never matches a live ratio,
                # so such buttons get the "ratio changed" or "disabled" answer.
                if exc.missing_part is None:
                    raise
                payout_ratio = 0.0
            action: LoanAction = LoanConfirmed(value=value, payout_ratio=payout_ratio)
        elif action_name == "refused":
            action = LoanRefused()
        else:
            raise parts.error(f"unknown action {action_name!r}")
        return cls(uid=uid, action=action)


def format_payout_percentage(payout_ratio: float) -> str:
    """Show the payout ratio as a percentage with two decimals."""
    return f"{payout_ratio * 100.0:.2f}%"


def debt_for_length(length: int) -> int:
    """Return the debt that brings a negative length back to zero.

    Raises ValueError for a length that is not negative.
    """
    if length >= 0:
        raise ValueError(f"a loan is available only for a negative length, got {length}")
    return abs(length) % (1 << 16)