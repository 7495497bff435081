"""Callback data carried by inline buttons, and handler results with buttons."""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar, Iterator, List, Optional, Tuple, Type, TypeVar

_UINT = re.compile(r"\+?[0-9]+")
_FLOAT = re.compile(
    r"[+-]?(inf|infinity|nan|([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?)",
    re.IGNORECASE,
)

C = TypeVar("C", bound="CallbackData")


class InvalidCallbackData(ValueError):
    """Raised when the data of a button cannot be parsed."""

    def __init__(self, data: str, reason: str, missing_part: Optional[str] = None) -> None:
        super().__init__(f"invalid callback data '{data}': {reason}")
        self.data = data
        self.reason = reason
        self.missing_part = missing_part


class _Parts:
    """Colon-separated parts of a callback payload, read one after another."""

    def __init__(self, data: str, payload: str) -> None:
        self._data = data
        self._parts: Iterator[str] = iter(payload.split(":"))

    def error(self, reason: str) -> InvalidCallbackData:
        return InvalidCallbackData(self._data, reason)

    def next(self, name: str) -> str:
        try:
            return next(self._parts)
        except StopIteration:
            raise InvalidCallbackData(self._data, f"missing part '{name}'", missing_part=name) from None

    def uint(self, name: str, bits: int = 64) -> int:
        raw = self.next(name)
        if _UINT.fullmatch(raw) is None:
            raise self.error(f"part '{name}' is not an unsigned integer: {raw!r}")
        value = int(raw)
        if value >= 1 << bits:
            raise self.error(f"part '{name}' is out of range: {raw!r}")
        return value

    def float(self, name: str) -> float:
        raw = self.next(name)
        if _FLOAT.fullmatch(raw) is None:
            raise self.error(f"part '{name}' is not a number: {raw!r}")
        return float(raw)


class CallbackData(ABC):
    """Data of an inline button, serialized as '<prefix>:<payload>'."""

    PREFIX: ClassVar[str]

    @abstractmethod
    def _payload(self) -> str:
        """Serialize everything after the prefix."""

    @classmethod
    @abstractmethod
    def _from_parts(cls: Type[C], parts: _Parts) -> C:
        """Build the data from the parts that follow the prefix."""

    def to_data_string(self) -> str:
        """Serialize the data for an inline button."""
        return f"{self.PREFIX}:{self._payload()}"

    @classmethod
    def has_prefix(cls, data: Optional[str]) -> bool:
        """Tell whether the button data belongs to this kind."""
        return data is not None and data.startswith(f"{cls.PREFIX}:")

    @classmethod
    def parse(cls: Type[C], data: Optional[str]) -> C:
        """Parse button data; raises InvalidCallbackData when it is malformed."""
        if data is None:
            raise InvalidCallbackData("", "no data")
        if not cls.has_prefix(data):
            raise InvalidCallbackData(data, "invalid prefix")
        payload = data[len(cls.PREFIX) + 1:]
        return cls._from_parts(_Parts(data, payload))


@dataclass(frozen=True)
class CallbackButton:
    """An inline button with a title and its callback data."""

    title: str
    data: CallbackData


@dataclass(frozen=True)
class HandlerImplResult:
    """Answer text, optionally with one row of inline buttons."""

    text: str
    buttons: Optional[List[CallbackButton]] = None

    def keyboard(self) -> Optional[List[List[Tuple[str, str]]]]:
        """Return the keyboard as rows of (title, callback data), or None for text only."""
        if self.buttons is None:
            return None
        return [[(button.title, button.data.to_data_string()) for button in self.buttons]]