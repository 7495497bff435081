"""Importing lengths from the top lists of other bots."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterable, List, Set

from growbot.domain import Username

ORIGINAL_BOT_USERNAMES = ("pipisabot", "kraft28_bot")

_TOP_LINE_REGEXP = re.compile(
    r"\d{1,3}((\. )|\|)(?P<name>.+?)(\.{3})? — (?P<length>\d+) см."
)
_PIPISA_NAME_LIMIT = 13
_MAX_LENGTH = 2**32 - 1


class OriginalBotKind(Enum):
    """Bots whose top lists can be imported."""

    PIPISA = "pipisabot"
    KRAFT28 = "kraft28_bot"

    @classmethod
    def from_username(cls, value: str) -> "OriginalBotKind":
        """Recognise a bot by its username, with or without leading '@'."""
        name = value.lstrip("@")
        for kind in cls:
            if kind.value == name:
                return kind
        raise ValueError("Unknown OriginalBotKind")

    def convert_name(self, name: str) -> str:
        """Shorten a name the way this bot shows it in its top list."""
        if self is OriginalBotKind.PIPISA:
            return name[:_PIPISA_NAME_LIMIT]
        return name


class InvalidLines(ValueError):
    """Raised when lines of a top list cannot be recognised."""

    def __init__(self, lines: List[str]) -> None:
        super().__init__(f"[{', '.join(lines)}]")
        self.lines = list(lines)


@dataclass(frozen=True)
class OriginalUser:
    """A line of another bot's top list."""

    name: Username
    length: int


@dataclass(frozen=True)
class ChatMember:
    """A known member of the chat."""

    uid: int
    full_name: str


@dataclass(frozen=True)
class UserInfo:
    """A chat member matched with a line of the top list."""

    uid: int
    name: Username
    length: int


@dataclass
class ImportResult:
    """Outcome of matching a top list against the chat members."""

    imported: List[UserInfo] = field(default_factory=list)
    already_present: List[UserInfo] = field(default_factory=list)
    not_found: List[Username] = field(default_factory=list)


def _lines(text: str) -> List[str]:
    parts = text.split("\n")
    if parts and parts[-1] == "":
        parts.pop()
    return [part[:-1] if part.endswith("\r") else part for part in parts]


def parse_top(text: str) -> List[OriginalUser]:
    """Parse the top list; everything before its first line is skipped.

    Raises InvalidLines if any line after the first one does not match.
    """
    lines = _lines(text)
    start = next(
        (i for i, line in enumerate(lines) if _TOP_LINE_REGEXP.search(line)),
        len(lines),
    )
    matches = [(line, _TOP_LINE_REGEXP.search(line)) for line in lines[start:]]
    invalid = [line for line, match in matches if match is None]
    if invalid:
        raise InvalidLines(invalid)

    users = []
    for _, match in matches:
        length = int(match.group("length"))
        if length > _MAX_LENGTH:
            continue
        users.append(OriginalUser(name=Username(match.group("name")), length=length))
    return users


def plan_import(
    kind: OriginalBotKind,
    members: Iterable[ChatMember],
    text: str,
    imported_uids: Iterable[int],
) -> ImportResult:
    """Match the top list with the chat members and sort them into outcomes."""
    by_short_name: Dict[str, ChatMember] = {
        kind.convert_name(member.full_name): member for member in members
    }
    already_imported: Set[int] = set(imported_uids)

    imported: List[UserInfo] = []
    already_present: List[UserInfo] = []
    not_found: List[Username] = []
    for user in parse_top(text):
        member = by_short_name.get(user.name.value)
        if member is None:
            not_found.append(user.name)
            continue
        info = UserInfo(uid=member.uid, name=Username(member.full_name), length=user.length)
        if member.uid in already_imported:
            already_present.append(info)
        else:
            imported.append(info)
    return ImportResult(imported=imported, already_present=already_present, not_found=not_found)