from pydantic import BaseModel, ConfigDict

from features.resources.resource_vocabulary import (
    DESCRIPTION_DEFAULT,
    LINK_DEFAULT,
    NAME_DEFAULT,
    TAGS_DEFAULT,
)


class ResourceRecord(BaseModel):
    model_config = ConfigDict(frozen = True)

    name: str = NAME_DEFAULT
    tags: str = TAGS_DEFAULT
    description: str = DESCRIPTION_DEFAULT
    link: str = LINK_DEFAULT
