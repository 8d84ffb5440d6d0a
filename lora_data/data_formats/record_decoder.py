"""
Decoding of JSONL lines into normalized training strings.

A file's schema is detected once, from its first non-blank line, and every
non-blank line of the file is then decoded with that same schema.
"""

from __future__ import annotations

import logging
from typing import Iterable, Iterator

from lora_data.data_formats.errors import (
    InvalidRecordError,
    SchemaValidationError,
    UnrecognizedSchemaError,
)
from lora_data.data_formats.format_detector import detect_schema
from lora_data.data_formats.schemas import Schema

logger = logging.getLogger(__name__)


def iter_non_blank(lines: Iterable[str]) -> Iterator[tuple[int, str]]:
    """Yield (line_number, line) for every line that is not whitespace-only.

    Line numbers are 1-based and count blank lines too.
    """
    for line_number, line in enumerate(lines, start=1):
        if line.strip():
            yield line_number, line


class RecordDecoder:
    """Decodes the lines of one JSONL file with a single, fixed schema.

    Use a new decoder per file. The schema is None until the first non-blank
    line has been seen, unless one is passed in explicitly.

    Attributes:
        schema: The schema bound to this file, or None before detection.
    """

    def __init__(self, schema: Schema | None = None) -> None:
        self.schema = schema

    def decode_line(self, line_number: int, raw_line: str) -> str:
        """Decode one non-blank line, detecting the schema if not yet bound.

        Raises:
            UnrecognizedSchemaError: If this is the first line and it matches
                no schema.
            InvalidRecordError: If the line does not conform to the bound
                schema.
        """
        if self.schema is None:
            schema = detect_schema(raw_line)
            if schema is None:
                raise UnrecognizedSchemaError(line_number, raw_line)
            logger.debug("Detected '%s' schema at line %d", schema.value, line_number)
            self.schema = schema

        try:
            return self.schema.normalize(raw_line)
        except SchemaValidationError as exc:
            raise InvalidRecordError(line_number, raw_line, self.schema) from exc

    def iter_decode(self, lines: Iterable[str]) -> Iterator[str]:
        """Lazily decode lines, skipping blank ones.

        Args:
            lines: Raw lines of the file in order, without line terminators.

        Yields:
            One normalized string per non-blank line, in file order.

        Raises:
            UnrecognizedSchemaError: If the first non-blank line matches no
                schema.
            InvalidRecordError: On the first line that does not conform to
                the file's schema.
        """
        for line_number, raw_line in iter_non_blank(lines):
            yield self.decode_line(line_number, raw_line)

    def decode(self, lines: Iterable[str]) -> list[str]:
        """Decode all lines, failing on the first bad one.

        No partial result is ever returned.
        """
        return list(self.iter_decode(lines))


def decode_records(lines: Iterable[str]) -> list[str]:
    """Decode the lines of one JSONL file with a fresh decoder.

    Examples:
        >>> decode_records(['{"prompt": "Q: 1+1?", "completion": "A: 2"}'])
        ['Q: 1+1?\\n\\nA: 2']
    """
    return RecordDecoder().decode(lines)
