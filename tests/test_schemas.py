"""Tests for record schemas in lora_data/data_formats/schemas.py."""

from __future__ import annotations

import json

import pytest

from lora_data.data_formats import DETECTION_ORDER, Schema, SchemaValidationError

from conftest import to_line


class TestDetectionOrder:
    """Tests for the fixed schema priority."""

    def test_order(self):
        """Schemas are tried chat, tool, text, completion."""
        assert DETECTION_ORDER == (
            Schema.CHAT,
            Schema.TOOL,
            Schema.TEXT,
            Schema.COMPLETION,
        )

    def test_schema_values(self):
        """Schema values are the lowercase names."""
        assert [s.value for s in Schema] == ["chat", "tool", "text", "completion"]


class TestChatSchema:
    """Tests for the chat schema."""

    def test_matches(self, chat_record):
        assert Schema.CHAT.matches(to_line(chat_record))

    def test_normalize(self, chat_record):
        """Messages are joined as 'role: content' lines."""
        assert Schema.CHAT.normalize(to_line(chat_record)) == "user: hi\nassistant: hello"

    def test_empty_messages_normalize_to_empty_string(self):
        line = '{"messages": []}'
        assert Schema.CHAT.matches(line)
        assert Schema.CHAT.normalize(line) == ""

    def test_extra_fields_tolerated(self):
        line = to_line({
            "messages": [{"role": "user", "content": "x", "name": "bob"}],
            "uuid": "abc",
        })
        assert Schema.CHAT.matches(line)
        assert Schema.CHAT.normalize(line) == "user: x"

    def test_missing_content_does_not_match(self):
        assert not Schema.CHAT.matches('{"messages": [{"role": "user"}]}')

    def test_non_string_content_does_not_match(self):
        assert not Schema.CHAT.matches('{"messages": [{"role": "user", "content": 5}]}')

    def test_null_content_does_not_match(self):
        assert not Schema.CHAT.matches('{"messages": [{"role": "user", "content": null}]}')

    def test_messages_not_array_does_not_match(self):
        assert not Schema.CHAT.matches('{"messages": "hi"}')

    def test_message_not_object_does_not_match(self):
        assert not Schema.CHAT.matches('{"messages": ["hi"]}')


class TestToolSchema:
    """Tests for the tool schema."""

    def test_matches(self, tool_record):
        assert Schema.TOOL.matches(to_line(tool_record))

    def test_normalize_returns_line_verbatim(self, tool_record):
        line = to_line(tool_record)
        assert Schema.TOOL.normalize(line) == line

    def test_optional_property_fields_may_be_null(self, tool_record):
        tool_record["function"]["parameters"]["properties"]["city"] = {
            "type": "string",
            "description": None,
            "enum": None,
        }
        assert Schema.TOOL.matches(to_line(tool_record))

    def test_empty_properties_and_required(self, tool_record):
        tool_record["function"]["parameters"]["properties"] = {}
        tool_record["function"]["parameters"]["required"] = []
        assert Schema.TOOL.matches(to_line(tool_record))

    def test_missing_description_does_not_match(self, tool_record):
        del tool_record["function"]["description"]
        assert not Schema.TOOL.matches(to_line(tool_record))

    def test_missing_required_does_not_match(self, tool_record):
        del tool_record["function"]["parameters"]["required"]
        assert not Schema.TOOL.matches(to_line(tool_record))

    def test_property_without_type_does_not_match(self, tool_record):
        tool_record["function"]["parameters"]["properties"]["city"] = {"description": "x"}
        assert not Schema.TOOL.matches(to_line(tool_record))

    def test_non_string_enum_does_not_match(self, tool_record):
        tool_record["function"]["parameters"]["properties"]["unit"]["enum"] = [1, 2]
        assert not Schema.TOOL.matches(to_line(tool_record))

    def test_non_string_required_item_does_not_match(self, tool_record):
        tool_record["function"]["parameters"]["required"] = [1]
        assert not Schema.TOOL.matches(to_line(tool_record))


class TestTextSchema:
    """Tests for the text schema."""

    def test_normalize(self):
        assert Schema.TEXT.normalize('{"text": "hello world"}') == "hello world"

    def test_empty_text_is_valid(self):
        assert Schema.TEXT.normalize('{"text": ""}') == ""

    def test_unicode_preserved(self):
        line = json.dumps({"text": "héllo 世界"})
        assert Schema.TEXT.normalize(line) == "héllo 世界"

    def test_numeric_text_does_not_match(self):
        assert not Schema.TEXT.matches('{"text": 42}')


class TestCompletionSchema:
    """Tests for the completion schema."""

    def test_normalize(self, completion_record):
        assert Schema.COMPLETION.normalize(to_line(completion_record)) == "Q: 1+1?\n\nA: 2"

    def test_missing_completion_does_not_match(self):
        assert not Schema.COMPLETION.matches('{"prompt": "Q"}')


class TestMalformedLines:
    """Lines that are not JSON objects never match."""

    @pytest.mark.parametrize("line", [
        "not json",
        '{"text": "unterminated',
        '["text"]',
        '"text"',
        "null",
        "42",
    ])
    def test_no_schema_matches(self, line):
        for schema in Schema:
            assert not schema.matches(line)

    def test_normalize_raises_schema_validation_error(self):
        with pytest.raises(SchemaValidationError) as exc_info:
            Schema.TEXT.normalize("not json")
        assert exc_info.value.schema is Schema.TEXT

    def test_normalize_reports_missing_field(self):
        with pytest.raises(SchemaValidationError, match="completion: Field required"):
            Schema.COMPLETION.normalize('{"prompt": "Q"}')

    def test_schema_validation_error_is_value_error(self):
        with pytest.raises(ValueError):
            Schema.CHAT.normalize('{"text": "x"}')


class TestNormalizeIsPure:
    """Normalizing the same line twice gives the same result."""

    def test_deterministic(self, chat_record, tool_record, completion_record, text_record):
        for schema, record in (
            (Schema.CHAT, chat_record),
            (Schema.TOOL, tool_record),
            (Schema.COMPLETION, completion_record),
            (Schema.TEXT, text_record),
        ):
            line = to_line(record)
            assert schema.normalize(line) == schema.normalize(line)


class TestStrictTyping:
    """Fields are checked with strict JSON types."""

    @pytest.mark.parametrize("line", [
        '{"text": true}',
        '{"text": 1.5}',
        '{"prompt": "p", "completion": 2}',
        '{"messages": [{"role": "user", "content": ["hi"]}]}',
    ])
    def test_no_coercion_to_string(self, line):
        for schema in Schema:
            assert not schema.matches(line)

    def test_tool_properties_must_be_object(self, tool_record):
        tool_record["function"]["parameters"]["properties"] = ["city"]
        assert not Schema.TOOL.matches(to_line(tool_record))

    def test_validation_error_kept_as_cause(self):
        with pytest.raises(SchemaValidationError) as exc_info:
            Schema.TEXT.normalize('{"text": 1}')
        assert exc_info.value.reason.startswith("text:")
        assert exc_info.value.__cause__ is not None


class TestDeeplyNestedInput:
    """Pathologically nested JSON fails to match instead of crashing."""

    def test_nested_array_matches_nothing(self):
        line = "[" * 100000 + "]" * 100000
        for schema in Schema:
            assert not schema.matches(line)

    def test_nested_field_matches_nothing(self):
        line = '{"text": ' + "[" * 100000 + "]" * 100000 + "}"
        assert not Schema.TEXT.matches(line)

    def test_nested_normalize_raises_schema_validation_error(self):
        with pytest.raises(SchemaValidationError):
            Schema.TEXT.normalize("{" * 100000)
