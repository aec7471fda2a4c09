import unittest

from features.chat.telegram.model.chat import Chat
from features.chat.telegram.model.message import Message
from features.chat.telegram.model.message_entity import MessageEntity
from features.chat.telegram.model.update import Update
from features.chat.telegram.telegram_domain_mapper import TelegramDomainMapper
from features.resources.inline_entity import InlineEntity


class TelegramDomainMapperTest(unittest.TestCase):

    mapper: TelegramDomainMapper

    def setUp(self):
        self.mapper = TelegramDomainMapper()

    @staticmethod
    def create_message(text: str | None, entities: list[MessageEntity] | None = None) -> Message:
        return Message(
            chat = Chat(id = 42, type = "private"),
            message_id = 7,
            text = text,
            entities = entities,
            date = 1700000000,
        )

    def test_map_update_with_text(self):
        entities = [MessageEntity(type = "url", offset = 0, length = 11)]
        update = Update(update_id = 1, message = self.create_message("https://x.y", entities))

        result = self.mapper.map_update(update)

        self.assertIsNotNone(result)
        self.assertEqual(result.chat_id, 42)
        self.assertEqual(result.text, "https://x.y")
        self.assertEqual(
            result.entities,
            [InlineEntity(kind = InlineEntity.Kind.plain_url, offset = 0, length = 11)],
        )

    def test_map_update_without_message(self):
        update = Update(update_id = 1)

        self.assertIsNone(self.mapper.map_update(update))

    def test_map_update_ignores_edited_message(self):
        update = Update(update_id = 1, edited_message = self.create_message("edited"))

        self.assertIsNone(self.mapper.map_update(update))

    def test_map_update_without_text(self):
        update = Update(update_id = 1, message = self.create_message(None))

        self.assertIsNone(self.mapper.map_update(update))

    def test_map_update_with_empty_text(self):
        update = Update(update_id = 1, message = self.create_message(""))

        result = self.mapper.map_update(update)

        self.assertIsNotNone(result)
        self.assertEqual(result.text, "")
        self.assertEqual(result.entities, [])

    def test_map_entities_kinds(self):
        message = self.create_message(
            "点我获取 https://x.y bold",
            [
                MessageEntity(type = "text_link", offset = 0, length = 4, url = "https://pan.example.com"),
                MessageEntity(type = "url", offset = 5, length = 11),
                MessageEntity(type = "bold", offset = 17, length = 4),
            ],
        )

        result = self.mapper.map_entities(message)

        self.assertEqual(
            result,
            [
                InlineEntity(
                    kind = InlineEntity.Kind.hyperlink,
                    offset = 0,
                    length = 4,
                    url = "https://pan.example.com",
                ),
                InlineEntity(kind = InlineEntity.Kind.plain_url, offset = 5, length = 11),
                InlineEntity(kind = InlineEntity.Kind.other, offset = 17, length = 4),
            ],
        )

    def test_map_entities_keeps_order_and_out_of_bounds_entities(self):
        message = self.create_message(
            "short",
            [
                MessageEntity(type = "url", offset = 3, length = 50),
                MessageEntity(type = "text_link", offset = 0, length = 2, url = "https://a.b"),
            ],
        )

        result = self.mapper.map_entities(message)

        self.assertEqual([entity.offset for entity in result], [3, 0])

    def test_map_entity_drops_url_for_non_hyperlinks(self):
        entity = MessageEntity(type = "mention", offset = 0, length = 3, url = "https://ignored")

        result = self.mapper.map_entity(entity)

        self.assertEqual(result.kind, InlineEntity.Kind.other)
        self.assertIsNone(result.url)

    def test_message_parses_bot_api_payload(self):
        payload = {
            "update_id": 10,
            "message": {
                "message_id": 3,
                "from": {"id": 5, "is_bot": False, "first_name": "Ann"},
                "chat": {"id": 5, "type": "private"},
                "date": 1700000000,
                "text": "App #tag",
                "entities": [{"type": "hashtag", "offset": 4, "length": 4}],
            },
        }

        update = Update.model_validate(payload)

        self.assertEqual(update.message.from_user.first_name, "Ann")
        self.assertEqual(update.message.entities[0].type, "hashtag")
