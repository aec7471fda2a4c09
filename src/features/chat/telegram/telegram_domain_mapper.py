from pydantic import BaseModel

from features.chat.telegram.model.message import Message
from features.chat.telegram.model.message_entity import MessageEntity
from features.chat.telegram.model.update import Update
from features.resources.inline_entity import InlineEntity
from util import log
from util.functions import utf16_length


class TelegramDomainMapper:

    ENTITY_KINDS: dict[str, InlineEntity.Kind] = {
        "text_link": InlineEntity.Kind.hyperlink,
        "url": InlineEntity.Kind.plain_url,
    }

    class Result(BaseModel):
        chat_id: int
        text: str
        entities: list[InlineEntity]

    def map_update(self, update: Update) -> Result | None:
        log.t(f"Mapping Telegram update: {update.update_id}")
        message = update.message
        if not message:
            log.d(f"  Nothing to map in update {update.update_id}")
            return None
        if message.text is None:
            log.d(f"  Message {message.message_id} has no text, ignoring")
            return None
        return TelegramDomainMapper.Result(
            chat_id = message.chat.id,
            text = message.text,
            entities = self.map_entities(message),
        )

    def map_entities(self, message: Message) -> list[InlineEntity]:
        text = message.text or ""
        text_length = utf16_length(text)
        result: list[InlineEntity] = []
        for entity in message.entities or []:
            if entity.offset < 0 or entity.offset + entity.length > text_length:
                log.w(f"  Entity '{entity.type}' at {entity.offset}+{entity.length} is out of text bounds ({text_length})")
            result.append(self.map_entity(entity))
        return result

    def map_entity(self, entity: MessageEntity) -> InlineEntity:
        kind = self.ENTITY_KINDS.get(entity.type, InlineEntity.Kind.other)
        return InlineEntity(
            kind = kind,
            offset = entity.offset,
            length = entity.length,
            url = entity.url if kind == InlineEntity.Kind.hyperlink else None,
        )
