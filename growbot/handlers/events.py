"""Monthly events and how they modify actions."""

from __future__ import annotations

import random
from dataclasses import dataclass
from datetime import date, datetime, timezone
from enum import Enum
from typing import Optional, Protocol


class EventMechanic(Enum):
    """What an event changes in the game."""

    MERCY_MULTIPLIER = "mercy_multiplier"
    GIFT_BONUS_XP = "gift_bonus_xp"
    GLOBAL_LEADERBOARD = "global_leaderboard"
    DOUBLE_GROWTH_CHANCE = "double_growth_chance"
    CROSS_CHAT_GOAL = "cross_chat_goal"
    GROWTH_MULTIPLIER = "growth_multiplier"
    HIGH_RISK_DUELS = "high_risk_duels"
    HARVEST_EXCHANGE = "harvest_exchange"
    TRIVIA_GROWTH = "trivia_growth"
    COSMETIC_EVENT = "cosmetic_event"
    MERCY_ACHIEVEMENT_BONUS = "mercy_achievement_bonus"
    LOGIN_STREAK = "login_streak"


class EventAction(Enum):
    """Actions that an event may modify."""

    GROW = "grow"
    DUEL = "duel"
    SHOW_MERCY = "show_mercy"
    MERCY_ACHIEVEMENT = "mercy_achievement"
    GIFT = "gift"


@dataclass(frozen=True)
class MonthlyEvent:
    """An event running for a whole calendar month."""

    month: int
    key: str
    name: str
    description: str
    mechanic: EventMechanic
    multiplier: Optional[float] = None
    chance: Optional[float] = None
    cap: Optional[int] = None
    target_chats: Optional[int] = None


MONTHLY_EVENTS = (
    MonthlyEvent(1, "frost_festival", "Frost Festival", "Grows are smaller but mercy bonuses 3x",
                 EventMechanic.MERCY_MULTIPLIER, multiplier=3.0),
    MonthlyEvent(2, "heart_bloom", "Heart Bloom", "Gift sunbeams for shared XP",
                 EventMechanic.GIFT_BONUS_XP),
    MonthlyEvent(3, "spring_rally", "Spring Rally", "Global leaderboard across all chats",
                 EventMechanic.GLOBAL_LEADERBOARD),
    MonthlyEvent(4, "rain_dance", "Rain Dance", "Every grow has a chance of downpour doubling",
                 EventMechanic.DOUBLE_GROWTH_CHANCE, chance=0.25),
    MonthlyEvent(5, "pollinator_quest", "Pollinator Quest", "Visit 5 different chats",
                 EventMechanic.CROSS_CHAT_GOAL, target_chats=5),
    MonthlyEvent(6, "solstice_surge", "Solstice Surge", "48h of 2x growth, capped per player",
                 EventMechanic.GROWTH_MULTIPLIER, multiplier=2.0, cap=50),
    MonthlyEvent(7, "fire_garden", "Fire Garden", "High-risk duels with 3x wagers, mercy disabled",
                 EventMechanic.HIGH_RISK_DUELS, multiplier=3.0),
    MonthlyEvent(8, "harvest_moon", "Harvest Moon", "Exchange sprouts for permanent seeds",
                 EventMechanic.HARVEST_EXCHANGE),
    MonthlyEvent(9, "wisdom_trials", "Wisdom Trials", "Trivia-based growth, no RNG",
                 EventMechanic.TRIVIA_GROWTH),
    MonthlyEvent(10, "haunted_hollow", "Haunted Hollow", "Cosmetic-only spooky frames",
                 EventMechanic.COSMETIC_EVENT),
    MonthlyEvent(11, "gratitude_grove", "Gratitude Grove", "Mercy actions count 5x toward achievements",
                 EventMechanic.MERCY_ACHIEVEMENT_BONUS, multiplier=5.0),
    MonthlyEvent(12, "winter_lights", "Winter Lights", "Daily login streak rewards",
                 EventMechanic.LOGIN_STREAK),
)


class _RandomSource(Protocol):
    def random(self) -> float: ...


def _today_utc() -> date:
    return datetime.now(timezone.utc).date()


def _event_for_month(month: int) -> Optional[MonthlyEvent]:
    return next((event for event in MONTHLY_EVENTS if event.month == month), None)


def get_current_event(today: Optional[date] = None) -> Optional[MonthlyEvent]:
    """Return the event of the current month (UTC unless a day is given)."""
    day = today if today is not None else _today_utc()
    return _event_for_month(day.month)


def get_upcoming_event(today: Optional[date] = None) -> Optional[MonthlyEvent]:
    """Return the event of the next month."""
    day = today if today is not None else _today_utc()
    next_month = 1 if day.month == 12 else day.month + 1
    return _event_for_month(next_month)


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in a month; unknown months count 30."""
    if month in (1, 3, 5, 7, 8, 10, 12):
        return 31
    if month in (4, 6, 9, 11):
        return 30
    if month == 2:
        leap = (year % 4 == 0 and year % 100 != 0) or year % 400 == 0
        return 29 if leap else 28
    return 30


def days_until_month_end(today: Optional[date] = None) -> int:
    """Return the days left after today until the month ends."""
    day = today if today is not None else _today_utc()
    return days_in_month(day.year, day.month) - day.day


def get_event_modifier(
    action: EventAction,
    today: Optional[date] = None,
    rng: Optional[_RandomSource] = None,
) -> Optional[float]:
    """Return the multiplier the current event applies to the action, if any."""
    event = get_current_event(today)
    if event is None:
        return None
    mechanic = event.mechanic
    if mechanic is EventMechanic.MERCY_MULTIPLIER and action is EventAction.SHOW_MERCY:
        return event.multiplier
    if mechanic is EventMechanic.DOUBLE_GROWTH_CHANCE and action is EventAction.GROW:
        source = rng if rng is not None else random
        return 2.0 if source.random() < event.chance else None
    if mechanic is EventMechanic.GROWTH_MULTIPLIER and action is EventAction.GROW:
        return event.multiplier
    if mechanic is EventMechanic.HIGH_RISK_DUELS and action is EventAction.DUEL:
        return event.multiplier
    if mechanic is EventMechanic.MERCY_ACHIEVEMENT_BONUS and action is EventAction.MERCY_ACHIEVEMENT:
        return event.multiplier
    return None