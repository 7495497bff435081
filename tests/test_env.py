import pytest

from growbot.config.env import (
    MissingEnvironmentVariable,
    get_env_mandatory_value,
    get_env_value_or_default,
    get_optional_env_ratio,
)
from growbot.domain import Ratio

KEY = "GROWBOT_TEST_VALUE"


def test_mandatory_missing(monkeypatch):
    monkeypatch.delenv(KEY, raising=False)
    with pytest.raises(MissingEnvironmentVariable) as info:
        get_env_mandatory_value(KEY)
    assert info.value.key == KEY


def test_mandatory_present(monkeypatch):
    monkeypatch.setenv(KEY, "42")
    assert get_env_mandatory_value(KEY, int) == 42


def test_mandatory_invalid(monkeypatch):
    monkeypatch.setenv(KEY, "abc")
    with pytest.raises(ValueError):
        get_env_mandatory_value(KEY, int)


def test_default_when_missing(monkeypatch):
    monkeypatch.delenv(KEY, raising=False)
    assert get_env_value_or_default(KEY, 7) == 7


def test_default_when_invalid(monkeypatch):
    monkeypatch.setenv(KEY, "not-a-number")
    assert get_env_value_or_default(KEY, 7) == 7


def test_int_parsed(monkeypatch):
    monkeypatch.setenv(KEY, "15")
    assert get_env_value_or_default(KEY, 7) == 15


def test_float_parsed(monkeypatch):
    monkeypatch.setenv(KEY, "0.25")
    assert get_env_value_or_default(KEY, 0.0) == 0.25


@pytest.mark.parametrize("raw,expected", [("true", True), ("false", False)])
def test_bool_parsed(monkeypatch, raw, expected):
    monkeypatch.setenv(KEY, raw)
    assert get_env_value_or_default(KEY, not expected) is expected


def test_bool_invalid_uses_default(monkeypatch):
    monkeypatch.setenv(KEY, "yes")
    assert get_env_value_or_default(KEY, True) is True


def test_custom_parser(monkeypatch):
    monkeypatch.setenv(KEY, "abc")
    assert get_env_value_or_default(KEY, "", str.upper) == "ABC"


def test_ratio_valid(monkeypatch):
    monkeypatch.setenv(KEY, "0.5")
    assert get_optional_env_ratio(KEY) == Ratio(0.5)


@pytest.mark.parametrize("raw", ["2", "-0.5", "junk"])
def test_ratio_invalid(monkeypatch, raw):
    monkeypatch.setenv(KEY, raw)
    assert get_optional_env_ratio(KEY) is None


def test_ratio_missing(monkeypatch):
    monkeypatch.delenv(KEY, raising=False)
    assert get_optional_env_ratio(KEY) is None