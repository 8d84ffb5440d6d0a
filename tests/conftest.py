"""Pytest configuration and shared fixtures for lora_data tests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest


@pytest.fixture
def chat_record() -> dict[str, Any]:
    """Return a minimal chat record."""
    return {
        "messages": [
            {"role": "user", "content": "hi"},
            {"role": "assistant", "content": "hello"},
        ]
    }


@pytest.fixture
def tool_record() -> dict[str, Any]:
    """Return a tool definition record."""
    return {
        "type": "function",
        "function": {
            "name": "get_weather",
            "description": "Get weather for a city",
            "parameters": {
                "type": "object",
                "properties": {
                    "city": {"type": "string", "description": "City name"},
                    "unit": {"type": "string", "enum": ["celsius", "fahrenheit"]},
                },
                "required": ["city"],
            },
        },
    }


@pytest.fixture
def completion_record() -> dict[str, Any]:
    """Return a prompt/completion record."""
    return {"prompt": "Q: 1+1?", "completion": "A: 2"}


@pytest.fixture
def text_record() -> dict[str, Any]:
    """Return a text record."""
    return {"text": "hello world"}


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    """Return a directory holding chat train/valid/test splits."""
    for split, count in (("train", 3), ("valid", 2), ("test", 1)):
        write_jsonl(
            tmp_path / f"{split}-chat.jsonl",
            [
                {"messages": [{"role": "user", "content": f"{split} {i}"}]}
                for i in range(count)
            ],
        )
    return tmp_path


def to_line(record: dict[str, Any]) -> str:
    """Serialize a record as one JSONL line."""
    return json.dumps(record, ensure_ascii=False)


def write_jsonl(path: Path, records: list[dict[str, Any]]) -> None:
    """Helper to write records to a JSONL file."""
    with open(path, 'w', encoding='utf-8') as f:
        for record in records:
            f.write(to_line(record) + '\n')
