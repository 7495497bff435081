"""Values substituted into the help and start messages."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from growbot.config.env import get_env_mandatory_value


@dataclass(frozen=True)
class HelpContext:
    """Placeholders of the help message templates."""

    bot_name: str
    grow_min: str
    grow_max: str
    other_bots: str
    admin_channel_ru: str
    admin_channel_en: str
    admin_chat_ru: str
    admin_chat_en: str
    git_repo: str
    help_pussies_percentage: float


def ensure_starts_with_at_sign(s: str) -> str:
    """Prefix the string with '@' unless it already has one."""
    return s if s.startswith("@") else f"@{s}"


def build_help_context(
    bot_name: str,
    grow_min: int,
    grow_max: int,
    competitor_bots: Iterable[str],
    help_pussies_coefficient: Optional[float],
) -> HelpContext:
    """Build the help context; the HELP_* variables must be set."""
    other_bots = ", ".join(ensure_starts_with_at_sign(name) for name in competitor_bots)
    percentage = help_pussies_coefficient * 100.0 if help_pussies_coefficient is not None else 0.0
    return HelpContext(
        bot_name=bot_name,
        grow_min=str(grow_min),
        grow_max=str(grow_max),
        other_bots=other_bots,
        admin_channel_ru=ensure_starts_with_at_sign(get_env_mandatory_value("HELP_ADMIN_CHANNEL_RU")),
        admin_channel_en=ensure_starts_with_at_sign(get_env_mandatory_value("HELP_ADMIN_CHANNEL_EN")),
        admin_chat_ru=ensure_starts_with_at_sign(get_env_mandatory_value("HELP_ADMIN_CHAT_RU")),
        admin_chat_en=ensure_starts_with_at_sign(get_env_mandatory_value("HELP_ADMIN_CHAT_EN")),
        git_repo=get_env_mandatory_value("HELP_GIT_REPO"),
        help_pussies_percentage=percentage,
    )