import pytest

from growbot.domain import Username
from growbot.handlers.importing import (
    ChatMember,
    InvalidLines,
    OriginalBotKind,
    OriginalUser,
    UserInfo,
    parse_top,
    plan_import,
)

TOP_TEXT = (
    "Топ 10 пись\n"
    "\n"
    "1. Alice — 15 см.\n"
    "2|Bob... — 10 см.\n"
    "3. Carol — 7 см.\n"
)


def test_convert_name_pipisa():
    short = "SadBot #incel"
    assert OriginalBotKind.PIPISA.convert_name("SadBot #incel...") == short
    assert OriginalBotKind.PIPISA.convert_name("SadBot #incel>suicide") == short


def test_convert_name_kraft28_keeps_name():
    assert OriginalBotKind.KRAFT28.convert_name("SadBot #incel>suicide") == "SadBot #incel>suicide"


@pytest.mark.parametrize(
    "variant, kind",
    [
        ("@pipisabot", OriginalBotKind.PIPISA),
        ("pipisabot", OriginalBotKind.PIPISA),
        ("@kraft28_bot", OriginalBotKind.KRAFT28),
        ("kraft28_bot", OriginalBotKind.KRAFT28),
    ],
)
def test_from_username_valid(variant, kind):
    assert OriginalBotKind.from_username(variant) == kind


@pytest.mark.parametrize("variant", ["@pipisa", "pipisa", "@kraft28", "kraft28"])
def test_from_username_invalid(variant):
    with pytest.raises(ValueError):
        OriginalBotKind.from_username(variant)


def test_parse_top():
    assert parse_top(TOP_TEXT) == [
        OriginalUser(Username("Alice"), 15),
        OriginalUser(Username("Bob"), 10),
        OriginalUser(Username("Carol"), 7),
    ]


def test_parse_top_without_lines():
    assert parse_top("nothing here\nat all") == []


def test_parse_top_invalid_lines():
    text = TOP_TEXT + "some footer\n4. Dave — 3 см.\nanother"
    with pytest.raises(InvalidLines) as info:
        parse_top(text)
    assert info.value.lines == ["some footer", "another"]
    assert str(info.value) == "[some footer, another]"


def test_parse_top_skips_overflowing_length():
    text = "1. Alice — 99999999999 см.\n2. Bob — 5 см."
    assert parse_top(text) == [OriginalUser(Username("Bob"), 5)]


def test_plan_import():
    members = [
        ChatMember(uid=1, full_name="Alice"),
        ChatMember(uid=2, full_name="Bob"),
        ChatMember(uid=4, full_name="Eve"),
    ]
    result = plan_import(OriginalBotKind.KRAFT28, members, TOP_TEXT, [2])
    assert result.imported == [UserInfo(1, Username("Alice"), 15)]
    assert result.already_present == [UserInfo(2, Username("Bob"), 10)]
    assert result.not_found == [Username("Carol")]


def test_plan_import_matches_shortened_names():
    members = [ChatMember(uid=7, full_name="SadBot #incel>suicide")]
    text = "1. SadBot #incel... — 20 см."
    result = plan_import(OriginalBotKind.PIPISA, members, text, [])
    assert result.imported == [UserInfo(7, Username("SadBot #incel>suicide"), 20)]
    assert result.not_found == []


def test_plan_import_propagates_invalid_lines():
    with pytest.raises(InvalidLines):
        plan_import(OriginalBotKind.PIPISA, [], "1. A — 1 см.\nbad", [])