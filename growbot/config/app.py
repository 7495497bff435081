"""Application and database settings loaded from the environment."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional
from urllib.parse import urlsplit

from growbot.config.announcements import Announcement, AnnouncementsConfig
from growbot.config.env import (
    get_env_mandatory_value,
    get_env_value_or_default,
    get_optional_env_ratio,
)
from growbot.config.toggles import (
    BattlesFeatureToggles,
    CachedEnvToggles,
    DickOfDaySelectionMode,
    FeatureToggles,
)
from growbot.domain import Ratio, SupportedLanguage


@dataclass
class AppConfig:
    """Settings of the bot's behaviour."""

    features: FeatureToggles = field(default_factory=FeatureToggles)
    top_limit: int = 10
    loan_payout_ratio: float = 0.0
    dod_rich_exclusion_ratio: Optional[Ratio] = None
    pvp_default_bet: int = 1
    announcements: AnnouncementsConfig = field(default_factory=AnnouncementsConfig)
    command_toggles: CachedEnvToggles = field(default_factory=CachedEnvToggles)

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Load the settings from environment variables."""
        features = FeatureToggles(
            chats_merging=get_env_value_or_default("CHATS_MERGING_ENABLED", False),
            top_unlimited=get_env_value_or_default("TOP_UNLIMITED_ENABLED", False),
            multiple_loans=get_env_value_or_default("MULTIPLE_LOANS_ENABLED", False),
            dod_selection_mode=get_env_value_or_default(
                "DOD_SELECTION_MODE", DickOfDaySelectionMode.RANDOM, DickOfDaySelectionMode.parse
            ),
            pvp=BattlesFeatureToggles(
                check_acceptor_length=get_env_value_or_default("PVP_CHECK_ACCEPTOR_LENGTH", False),
                callback_locks=get_env_value_or_default("PVP_CALLBACK_LOCKS_ENABLED", True),
                show_stats=get_env_value_or_default("PVP_STATS_SHOW", True),
                show_stats_notice=get_env_value_or_default("PVP_STATS_SHOW_NOTICE", True),
            ),
        )
        texts = {
            SupportedLanguage.EN: get_env_value_or_default("ANNOUNCEMENT_EN", ""),
            SupportedLanguage.RU: get_env_value_or_default("ANNOUNCEMENT_RU", ""),
        }
        announcements = {
            lang: ann
            for lang, ann in ((lang, Announcement.create(text)) for lang, text in texts.items())
            if ann is not None
        }
        return cls(
            features=features,
            top_limit=get_env_value_or_default("TOP_LIMIT", 10),
            loan_payout_ratio=get_env_value_or_default("LOAN_PAYOUT_COEF", 0.0),
            dod_rich_exclusion_ratio=get_optional_env_ratio("DOD_RICH_EXCLUSION_RATIO"),
            pvp_default_bet=get_env_value_or_default("PVP_DEFAULT_BET", 1),
            announcements=AnnouncementsConfig(
                max_shows=get_env_value_or_default("ANNOUNCEMENT_MAX_SHOWS", 0),
                announcements=announcements,
            ),
        )


def _parse_url(value: str) -> str:
    parts = urlsplit(value)
    if not parts.scheme:
        raise ValueError(f"relative URL without a base: {value!r}")
    return value


@dataclass(frozen=True)
class DatabaseConfig:
    """Connection settings of the database."""

    url: str
    max_connections: int = 10

    @classmethod
    def from_env(cls) -> "DatabaseConfig":
        """Load the settings; DATABASE_URL must be set to an absolute URL."""
        return cls(
            url=get_env_mandatory_value("DATABASE_URL", _parse_url),
            max_connections=get_env_value_or_default("DATABASE_MAX_CONNECTIONS", 10),
        )