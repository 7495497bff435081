"""Announcements appended to bot answers."""

from __future__ import annotations

import hashlib
from dataclasses import dataclass, field
from typing import Dict, Optional

from growbot.domain import LanguageCode, SupportedLanguage


@dataclass(frozen=True)
class Announcement:
    """Announcement text with its SHA-256 digest."""

    text: str
    hash: bytes

    @classmethod
    def create(cls, text: str) -> Optional["Announcement"]:
        """Build an announcement, or return None for empty text."""
        if not text:
            return None
        return cls(text=text, hash=hashlib.sha256(text.encode("utf-8")).digest())


@dataclass
class AnnouncementsConfig:
    """Announcements per language and how often each may be shown."""

    max_shows: int = 0
    announcements: Dict[SupportedLanguage, Announcement] = field(default_factory=dict)

    def get(self, lang_code: LanguageCode) -> Optional[Announcement]:
        """Return the announcement for the user's language, if any."""
        return self.announcements.get(lang_code.to_supported_language())