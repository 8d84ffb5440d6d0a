"""
Record schemas for JSONL fine-tuning data.

A JSONL data file stores one JSON object per line, and every object in a file
follows one of four shapes:

- chat: ``{"messages": [{"role": ..., "content": ...}, ...]}``
- tool: an OpenAI-style function definition
  ``{"type": ..., "function": {"name", "description", "parameters"}}``
- text: ``{"text": ...}``
- completion: ``{"prompt": ..., "completion": ...}``

The shapes are declared as pydantic models in ``records.py``. Each schema
pairs its model with a normalizer that flattens a conforming record into the
single string handed to the trainer.

Usage:
    from lora_data.data_formats.schemas import Schema

    Schema.TEXT.matches('{"text": "hello"}')    # True
    Schema.TEXT.normalize('{"text": "hello"}')  # 'hello'
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable

from pydantic import TypeAdapter, ValidationError

from lora_data.data_formats.errors import SchemaValidationError
from lora_data.data_formats.records import (
    ChatAdapter,
    ChatRecord,
    CompletionAdapter,
    CompletionRecord,
    TextAdapter,
    TextRecord,
    ToolAdapter,
    ToolRecord,
)


class Schema(Enum):
    """The closed set of record shapes a JSONL data file may use."""

    CHAT = "chat"
    TOOL = "tool"
    TEXT = "text"
    COMPLETION = "completion"

    def matches(self, raw_line: str) -> bool:
        """Return True if the line is a JSON object with this schema's shape.

        Never raises: malformed JSON, non-object values and missing or
        mistyped fields all simply fail to match.
        """
        try:
            _ADAPTERS[self].validate_json(raw_line)
        except ValidationError:
            return False
        return True

    def normalize(self, raw_line: str) -> str:
        """Flatten a line of this schema into a single training string.

        Args:
            raw_line: One non-blank line of a JSONL file.

        Returns:
            The normalized example text.

        Raises:
            SchemaValidationError: If the line is not a JSON object of this
                schema's shape.
        """
        try:
            record = _ADAPTERS[self].validate_json(raw_line)
        except ValidationError as exc:
            raise SchemaValidationError(self, _describe(exc)) from exc

        return _NORMALIZERS[self](record, raw_line)


# Order in which detection tries the schemas. Shapes are not guaranteed to be
# disjoint, so the first match wins.
DETECTION_ORDER: tuple[Schema, ...] = (
    Schema.CHAT,
    Schema.TOOL,
    Schema.TEXT,
    Schema.COMPLETION,
)


def _describe(exc: ValidationError) -> str:
    """Summarize the first validation error as '<location>: <message>'."""
    error = exc.errors()[0]
    location = ".".join(str(part) for part in error["loc"])
    if not location:
        return error["msg"]
    return f"{location}: {error['msg']}"


# ============== Normalizers ==============


def _normalize_chat(record: ChatRecord, raw_line: str) -> str:
    # An empty "messages" array is accepted and yields an empty string.
    return "\n".join(f"{m.role}: {m.content}" for m in record.messages)


def _normalize_tool(record: ToolRecord, raw_line: str) -> str:
    return raw_line


def _normalize_text(record: TextRecord, raw_line: str) -> str:
    return record.text


def _normalize_completion(record: CompletionRecord, raw_line: str) -> str:
    return f"{record.prompt}\n\n{record.completion}"


_ADAPTERS: dict[Schema, TypeAdapter[Any]] = {
    Schema.CHAT: ChatAdapter,
    Schema.TOOL: ToolAdapter,
    Schema.TEXT: TextAdapter,
    Schema.COMPLETION: CompletionAdapter,
}

_NORMALIZERS: dict[Schema, Callable[[Any, str], str]] = {
    Schema.CHAT: _normalize_chat,
    Schema.TOOL: _normalize_tool,
    Schema.TEXT: _normalize_text,
    Schema.COMPLETION: _normalize_completion,
}
