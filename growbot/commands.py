"""Bot commands registered in each chat scope."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Sequence, Tuple

from growbot.config.toggles import CachedEnvToggles

log = logging.getLogger(__name__)

# Each command is (name, description key); an empty key keeps the command
# out of the registered menu.
_Command = Tuple[str, str]

_HELP: Sequence[_Command] = (("help", "help"),)
_PRIVACY: Sequence[_Command] = (("privacy", "privacy"),)
_PROMO: Sequence[_Command] = (("promo", "promo"),)
_STATS: Sequence[_Command] = (("stats", "stats"),)
_DICK: Sequence[_Command] = (("grow", "grow"), ("top", "top"))
_DICK_OF_DAY: Sequence[_Command] = (("dick_of_day", "dod"), ("dod", ""))
_BATTLE: Sequence[_Command] = (("pvp", "pvp"), ("battle", ""), ("attack", ""), ("fight", ""))
_LOAN: Sequence[_Command] = (("loan", "loan"), ("borrow", ""))
_IMPORT: Sequence[_Command] = (("import", "import"),)


class CommandScope(Enum):
    """Chats in which a set of commands is offered."""

    ALL_PRIVATE_CHATS = "all_private_chats"
    ALL_GROUP_CHATS = "all_group_chats"
    ALL_CHAT_ADMINISTRATORS = "all_chat_administrators"


@dataclass(frozen=True)
class BotCommand:
    """A command of the menu with the translation key of its description."""

    command: str
    description: str


_PERSONAL_COMMANDS: Tuple[Sequence[_Command], ...] = (_HELP, _PRIVACY, _PROMO, _STATS)
_GROUP_COMMANDS: Tuple[Sequence[_Command], ...] = (_HELP, _DICK, _DICK_OF_DAY, _BATTLE, _LOAN, _STATS)
_ADMIN_COMMANDS: Tuple[Sequence[_Command], ...] = _GROUP_COMMANDS + (_IMPORT,)

_COMMANDS_BY_SCOPE: Dict[CommandScope, Tuple[Sequence[_Command], ...]] = {
    CommandScope.ALL_PRIVATE_CHATS: _PERSONAL_COMMANDS,
    CommandScope.ALL_GROUP_CHATS: _GROUP_COMMANDS,
    CommandScope.ALL_CHAT_ADMINISTRATORS: _ADMIN_COMMANDS,
}


def commands_for_scope(scope: CommandScope, toggles: CachedEnvToggles) -> List[BotCommand]:
    """Return the commands to register for the scope, without disabled ones.

    The description of each command is its translation key.
    """
    commands = [
        BotCommand(command=name, description=f"commands.{key}.description")
        for group in _COMMANDS_BY_SCOPE[scope]
        for name, key in group
        if key and toggles.enabled(key)
    ]
    log.info("Registering commands for scope %s: %s", scope.name, commands)
    return commands