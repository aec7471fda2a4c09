from features.chat.telegram.model.update import Update
from features.chat.telegram.sdk.telegram_bot_api import TelegramBotAPI
from features.chat.telegram.telegram_command_router import is_command, route_command
from features.chat.telegram.telegram_domain_mapper import TelegramDomainMapper
from features.resources.resource_parser import format_record, parse_message
from util import log
from util.config import config


def respond_to_update(update: Update) -> bool:
    if config.log_telegram_update:
        log.t(f"Received a Telegram update: `{update}`")

    try:
        reply = resolve_reply(update)
        if reply is None:
            return False
        chat_id, text = reply
        TelegramBotAPI().send_text_message(chat_id, text)
        log.i(f"Replied to update {update.update_id} in chat #{chat_id}")
        return True
    except Exception as e:
        log.e(f"Failed to respond to update {update.update_id}", e)
        return False


def resolve_reply(update: Update) -> tuple[int, str] | None:
    """Resolves the chat and the reply text for an update, or None when the update needs no answer."""
    domain_update = TelegramDomainMapper().map_update(update)
    if not domain_update:
        return None

    if is_command(domain_update.text):
        command_reply = route_command(domain_update.text)
        if command_reply is None:
            return None
        return domain_update.chat_id, command_reply

    record = parse_message(domain_update.text, domain_update.entities)
    log.d(f"Parsed resource '{record.name}' from update {update.update_id}")
    return domain_update.chat_id, format_record(record)
