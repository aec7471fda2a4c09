import re
from typing import Sequence

from features.resources.inline_entity import InlineEntity
from features.resources.resource_record import ResourceRecord
from features.resources.resource_vocabulary import (
    DESCRIPTION_END_FALLBACK,
    DESCRIPTION_END_MARKER,
    DESCRIPTION_LABEL,
    LINK_LABEL,
    LINK_POINTER_END,
    LINK_POINTER_START,
    LINK_TRIGGER_PHRASES,
    NAME_DEFAULT,
    NAME_LABEL,
    TAGS_LABEL,
)
from util.functions import utf16_slice

HASHTAG_PATTERN = re.compile(r"#\S+")
NAME_PATTERN = re.compile(r"(.+?)(?=\s*#\S)", re.DOTALL)
DESCRIPTION_END_FALLBACK_PATTERN = re.compile(re.escape(DESCRIPTION_END_FALLBACK), re.IGNORECASE)
POINTER_LINK_PATTERN = re.compile(rf"{re.escape(LINK_POINTER_START)}\s*(.+?)\s*{re.escape(LINK_POINTER_END)}")


def parse_message(text: str, entities: Sequence[InlineEntity] | None = None) -> ResourceRecord:
    """
    Extracts the resource record from a forwarded channel post.

    Expected layout, loosely: `<name> #tag1 #tag2 <description> 💾 获取资源请点击：<link>`.
    Every field falls back to its default when it can't be found, so this never fails.
    """
    fields: dict[str, str] = {}

    name = __resolve_name(text)
    if name is not None:
        fields["name"] = name

    tag_matches = list(HASHTAG_PATTERN.finditer(text))
    if tag_matches:
        fields["tags"] = " ".join(match.group() for match in tag_matches)

    description_start = tag_matches[-1].end() if tag_matches else len(fields.get("name", NAME_DEFAULT))
    description = __resolve_description(text, description_start)
    if description is not None:
        fields["description"] = description

    link = __resolve_entity_link(text, entities or []) or __resolve_pointer_link(text)
    if link is not None:
        fields["link"] = link

    return ResourceRecord(**fields)


def format_record(record: ResourceRecord) -> str:
    return "\n".join(
        [
            f"{NAME_LABEL}{record.name}",
            f"{TAGS_LABEL}{record.tags}",
            f"{DESCRIPTION_LABEL}{record.description}",
            f"{LINK_LABEL}{record.link}",
        ],
    )


def __resolve_name(text: str) -> str | None:
    match = NAME_PATTERN.match(text)
    return match.group(1).strip() if match else None


def __resolve_description(text: str, start: int) -> str | None:
    end = text.find(DESCRIPTION_END_MARKER)
    if end == -1:
        fallback_match = DESCRIPTION_END_FALLBACK_PATTERN.search(text)
        if not fallback_match:
            return None
        end = fallback_match.start()
    return text[start:end].strip()


def __resolve_pointer_link(text: str) -> str | None:
    match = POINTER_LINK_PATTERN.search(text)
    return match.group(1).strip() if match else None


def __resolve_entity_link(text: str, entities: Sequence[InlineEntity]) -> str | None:
    # first pass: a hyperlink whose visible label asks to be clicked
    for entity in entities:
        if entity.kind != InlineEntity.Kind.hyperlink or not entity.url:
            continue
        label = utf16_slice(text, entity.offset, entity.length)
        if any(phrase in label for phrase in LINK_TRIGGER_PHRASES):
            return entity.url

    # second pass: whichever link-like entity comes first
    for entity in entities:
        if entity.kind == InlineEntity.Kind.hyperlink and entity.url:
            return entity.url
        if entity.kind == InlineEntity.Kind.plain_url:
            return utf16_slice(text, entity.offset, entity.length) or None
    return None
