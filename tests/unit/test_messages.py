"""Tests for message flattening."""

from modelruntime.types import ContentBlock, Message
from modelruntime.utils.messages import convert_messages, flatten_content, image_placeholder


class TestFlattenContent:
    """Test content flattening."""

    def test_string_passes_through(self):
        """Plain string content is unchanged."""
        assert flatten_content("Hello there") == "Hello there"

    def test_none_is_empty(self):
        assert flatten_content(None) == ""

    def test_text_and_image_parts_in_order(self):
        """Parts are concatenated in their original order."""
        content = [
            ContentBlock(type="text", text="Look: "),
            ContentBlock(type="image_url", image_url={"url": "https://example.com/a.png"}),
            ContentBlock(type="text", text=" thanks"),
        ]
        assert flatten_content(content) == "Look: [Image: https://example.com/a.png] thanks"

    def test_unknown_part_kind_becomes_empty(self):
        """Unknown part kinds degrade to empty text instead of failing."""
        content = [
            ContentBlock(type="text", text="a"),
            ContentBlock(type="input_audio", data="..."),
            ContentBlock(type="text", text="b"),
        ]
        assert flatten_content(content) == "ab"

    def test_plain_dict_parts(self):
        content = [
            {"type": "text", "text": "x"},
            {"type": "image_url", "image_url": {"url": "data:image/png;base64,AAA"}},
            {"type": "file", "file": {}},
        ]
        assert flatten_content(content) == "x[Image: data:image/png;base64,AAA]"

    def test_image_placeholder(self):
        assert image_placeholder("u") == "[Image: u]"


class TestConvertMessages:
    """Test message conversion."""

    def test_roles_and_order_preserved(self):
        """Roles and message order are kept."""
        messages = [
            Message.system("rules"),
            Message.with_image("What is this?", "https://example.com/cat.jpg"),
            Message.assistant("A cat."),
        ]

        converted = convert_messages(messages)

        assert converted == [
            {"role": "system", "content": "rules"},
            {"role": "user", "content": "What is this?[Image: https://example.com/cat.jpg]"},
            {"role": "assistant", "content": "A cat."},
        ]

    def test_empty_list(self):
        assert convert_messages([]) == []

    def test_dict_messages(self):
        converted = convert_messages([{"role": "user", "content": [{"type": "text", "text": "hi"}]}])
        assert converted == [{"role": "user", "content": "hi"}]


class TestIncompleteContentBlocks:
    """Incomplete parts are accepted and degrade instead of failing."""

    def test_text_block_without_text(self):
        block = ContentBlock(type="text")

        assert block.text is None
        assert flatten_content([block, ContentBlock(type="text", text="ok")]) == "ok"

    def test_image_block_without_url(self):
        assert flatten_content([ContentBlock(type="image_url", image_url={})]) == image_placeholder("")

    def test_message_with_text_part_missing_text(self):
        message = Message.model_validate({"role": "user", "content": [{"type": "text"}]})
        assert convert_messages([message]) == [{"role": "user", "content": ""}]
