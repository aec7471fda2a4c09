from pydantic import BaseModel, Field

from features.chat.telegram.model.chat import Chat
from features.chat.telegram.model.message_entity import MessageEntity
from features.chat.telegram.model.user import User


class Message(BaseModel):
    """https://core.telegram.org/bots/api#message"""
    chat: Chat
    message_id: int
    from_user: User | None = Field(None, alias = "from")
    text: str | None = None
    entities: list[MessageEntity] | None = None
    date: int
