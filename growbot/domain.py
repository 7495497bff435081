"""Domain values: language codes, ratios and user names."""

from __future__ import annotations

import unicodedata
from dataclasses import dataclass
from enum import Enum
from typing import Optional

_DEFAULT_LANGUAGE_CODE = "en"
_RU_SPEAKING_LOCALES = frozenset({"ru", "uk", "be"})
_LTR_MARK = "\u200e"


class SupportedLanguage(Enum):
    """Languages the bot has translations for."""

    EN = "en"
    RU = "ru"


@dataclass(frozen=True)
class LanguageCode:
    """A language code as reported by a chat client."""

    value: str

    @classmethod
    def from_maybe_string(cls, value: Optional[str]) -> "LanguageCode":
        """Wrap the given code, falling back to English when there is none."""
        if value is None:
            return cls(_DEFAULT_LANGUAGE_CODE)
        return cls(value)

    def to_supported_language(self) -> SupportedLanguage:
        """Map the code onto one of the languages with translations."""
        code = self.value.lower()
        if len(code) < 2:
            return SupportedLanguage.EN
        if code[:2] in _RU_SPEAKING_LOCALES:
            return SupportedLanguage.RU
        return SupportedLanguage.EN

    def __str__(self) -> str:
        return self.value


class InvalidRatioValue(ValueError):
    """Raised when a ratio lies outside the range [0, 1]."""

    def __init__(self, value: float) -> None:
        super().__init__(str(value))
        self.value = value


@dataclass(frozen=True)
class Ratio:
    """A number between 0 and 1 inclusive."""

    value: float

    def __post_init__(self) -> None:
        if not 0.0 <= self.value <= 1.0:
            raise InvalidRatioValue(self.value)


@dataclass(frozen=True)
class Username:
    """A user's display name."""

    value: str

    def escaped(self) -> str:
        """Return the name safe for HTML, isolated by left-to-right marks."""
        safe_name = "".join(c for c in self.value if unicodedata.category(c) != "Cf")
        ltr_name = f"{_LTR_MARK}{safe_name}{_LTR_MARK}"
        return ltr_name.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")

    def __str__(self) -> str:
        return self.value