"""Reading typed values from environment variables."""

from __future__ import annotations

import logging
import os
from typing import Callable, Optional, TypeVar

from growbot.domain import InvalidRatioValue, Ratio

T = TypeVar("T")

log = logging.getLogger(__name__)


class MissingEnvironmentVariable(LookupError):
    """Raised when a mandatory environment variable is not set."""

    def __init__(self, key: str) -> None:
        super().__init__(f"environment variable {key} is not set")
        self.key = key


def _parse_bool(value: str) -> bool:
    if value == "true":
        return True
    if value == "false":
        return False
    raise ValueError(f"invalid boolean value: {value!r}")


def _parser_for(default: object) -> Callable[[str], object]:
    if isinstance(default, bool):
        return _parse_bool
    if isinstance(default, int):
        return int
    if isinstance(default, float):
        return float
    return str


def get_env_mandatory_value(key: str, parse: Callable[[str], T] = str) -> T:
    """Return the parsed value of a variable that must be set."""
    raw = os.environ.get(key)
    if raw is None:
        raise MissingEnvironmentVariable(key)
    return parse(raw)


def get_env_value_or_default(key: str, default: T, parse: Optional[Callable[[str], T]] = None) -> T:
    """Return the parsed value of a variable, or the default if it is unset or invalid."""
    parser = parse if parse is not None else _parser_for(default)
    raw = os.environ.get(key)
    if raw is None:
        log.warning(
            "no value was found for an optional environment variable %s, using the default value %s",
            key, default,
        )
        return default
    try:
        return parser(raw)
    except ValueError:
        log.warning("invalid value of the %s environment variable, using the default value %s", key, default)
        return default


def get_optional_env_ratio(key: str) -> Optional[Ratio]:
    """Return a ratio from the environment, or None if it is unset or out of range."""
    value = get_env_value_or_default(key, -1.0)
    try:
        return Ratio(value)
    except InvalidRatioValue:
        log.warning("%s is disabled due to the invalid value: %s", key, value)
        return None