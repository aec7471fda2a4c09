from pydantic import BaseModel


class User(BaseModel):
    """https://core.telegram.org/bots/api#user"""
    id: int
    is_bot: bool
    first_name: str
    username: str | None = None
