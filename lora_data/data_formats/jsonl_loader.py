"""
JSONL format data loader.

This module provides the JSONLLoader class for loading JSONL (JSON Lines)
files where each line is a JSON object in one of the supported record
schemas (chat, tool, text, completion).
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterator

from lora_data.data_formats.base import DataLoader
from lora_data.data_formats.record_decoder import RecordDecoder, iter_non_blank
from lora_data.data_formats.schemas import Schema


def read_lines(filename: str | Path) -> list[str]:
    """Read a UTF-8 file and split it into lines without terminators.

    Lines end at a line feed only, with an optional carriage return before it.
    Other Unicode line breaks such as U+2028 stay inside the line. A leading
    byte order mark is dropped.
    """
    with open(filename, "r", encoding="utf-8-sig", newline="") as f:
        content = f.read()
    return [line.removesuffix("\r") for line in content.split("\n")]


class JSONLLoader(DataLoader):
    """Data loader for JSONL (JSON Lines) format.

    The record schema is detected from the first non-blank line and applied
    to every line of the file.

    Attributes:
        format_name: Returns 'jsonl'.
    """

    @property
    def format_name(self) -> str:
        """Return the format name."""
        return "jsonl"

    def load(self, filename: str | Path) -> Iterator[str]:
        """Lazily decode records from a JSONL file.

        The whole file is read up front; records are normalized one at a time.

        Args:
            filename: Path to the JSONL file.

        Yields:
            Each record as a normalized string.

        Raises:
            FileNotFoundError: If the file does not exist.
            UnrecognizedSchemaError: If the first non-blank line matches no
                schema.
            InvalidRecordError: If a line does not conform to the file's
                schema.

        Examples:
            >>> loader = JSONLLoader()
            >>> for record in loader.load("train.jsonl"):
            ...     print(record)
        """
        lines = read_lines(filename)
        yield from RecordDecoder().iter_decode(lines)

    def detect_file_schema(self, filename: str | Path) -> Schema | None:
        """Return the schema of a JSONL file without decoding the rest of it.

        Returns None for a file with no non-blank lines.

        Raises:
            UnrecognizedSchemaError: If the first non-blank line matches no
                schema.
        """
        decoder = RecordDecoder()
        for line_number, raw_line in iter_non_blank(read_lines(filename)):
            decoder.decode_line(line_number, raw_line)
            break
        return decoder.schema
