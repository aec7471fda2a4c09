from enum import Enum

from pydantic import BaseModel, ConfigDict


class InlineEntity(BaseModel):
    """A marked span of message text; offset and length are in UTF-16 code units."""

    model_config = ConfigDict(frozen = True)

    class Kind(str, Enum):
        hyperlink = "hyperlink"  # visible label with an explicit destination URL
        plain_url = "plain_url"  # the visible text itself is the URL
        other = "other"

    kind: Kind
    offset: int
    length: int
    url: str | None = None
