from features.chat.telegram.reply_library import (
    COMMAND_HELP,
    COMMAND_START,
    HELP_MESSAGE,
    START_MESSAGE,
)
from util import log
from util.config import config

COMMAND_PREFIX = "/"

REPLIES_BY_COMMAND: dict[str, str] = {
    COMMAND_START: START_MESSAGE,
    COMMAND_HELP: HELP_MESSAGE,
}


def is_command(text: str | None) -> bool:
    return bool(text) and text.startswith(COMMAND_PREFIX)


def route_command(text: str | None) -> str | None:
    """Returns the fixed reply for a known command, or None when there's nothing to answer."""
    if not is_command(text):
        return None
    full_command = text.split(" ")[0]
    core_command = full_command
    if "@" in full_command:
        core_command, bot_tag = full_command.split("@", 1)
        if bot_tag.lower() != config.telegram_bot_username.lower():
            log.d(f"Command '{full_command}' is tagged for another bot")
            return None
    reply = REPLIES_BY_COMMAND.get(core_command[len(COMMAND_PREFIX):])
    if reply is None:
        log.d(f"Unknown command '{full_command}'")
    return reply
