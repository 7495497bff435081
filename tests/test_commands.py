import os

import pytest

from growbot.commands import BotCommand, CommandScope, commands_for_scope
from growbot.config.toggles import CachedEnvToggles


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in list(os.environ):
        if key.startswith("DISABLE_CMD_"):
            monkeypatch.delenv(key)


def names(commands):
    return [c.command for c in commands]


def test_private_chat_commands():
    result = commands_for_scope(CommandScope.ALL_PRIVATE_CHATS, CachedEnvToggles())
    assert names(result) == ["help", "privacy", "promo", "stats"]


def test_group_chat_commands():
    result = commands_for_scope(CommandScope.ALL_GROUP_CHATS, CachedEnvToggles())
    assert names(result) == ["help", "grow", "top", "dick_of_day", "pvp", "loan", "stats"]


def test_admin_commands_extend_group_commands_with_import():
    toggles = CachedEnvToggles()
    group = commands_for_scope(CommandScope.ALL_GROUP_CHATS, toggles)
    admin = commands_for_scope(CommandScope.ALL_CHAT_ADMINISTRATORS, toggles)
    assert admin[:-1] == group
    assert admin[-1] == BotCommand("import", "commands.import.description")


def test_descriptions_are_translation_keys():
    result = commands_for_scope(CommandScope.ALL_GROUP_CHATS, CachedEnvToggles())
    by_name = {c.command: c.description for c in result}
    assert by_name["dick_of_day"] == "commands.dod.description"
    assert by_name["grow"] == "commands.grow.description"


def test_commands_without_description_are_left_out():
    result = names(commands_for_scope(CommandScope.ALL_GROUP_CHATS, CachedEnvToggles()))
    for hidden in ("dod", "battle", "attack", "fight", "borrow"):
        assert hidden not in result


def test_disabled_command_is_left_out(monkeypatch):
    monkeypatch.setenv("DISABLE_CMD_DOD", "1")
    result = names(commands_for_scope(CommandScope.ALL_GROUP_CHATS, CachedEnvToggles()))
    assert "dick_of_day" not in result
    assert "grow" in result


def test_disabled_command_removed_from_every_scope(monkeypatch):
    monkeypatch.setenv("DISABLE_CMD_STATS", "")
    toggles = CachedEnvToggles()
    for scope in CommandScope:
        assert "stats" not in names(commands_for_scope(scope, toggles))