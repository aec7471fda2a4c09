from pydantic import BaseModel


class MessageEntity(BaseModel):
    """https://core.telegram.org/bots/api#messageentity"""
    type: str
    offset: int  # in UTF-16 code units
    length: int  # in UTF-16 code units
    url: str | None = None  # only for "text_link"
