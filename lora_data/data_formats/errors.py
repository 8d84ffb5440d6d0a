"""
Error types raised while loading fine-tuning data files.

Every failure aborts the whole load call. The loader errors also subclass
the built-in exception a caller would expect (``FileNotFoundError`` or
``ValueError``) so existing ``except`` clauses keep working.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from lora_data.data_formats.schemas import Schema


class LoRADataError(Exception):
    """Base class for all data loading failures."""


class DataFileNotFoundError(LoRADataError, FileNotFoundError):
    """No ``<name>.<ext>`` file exists in a directory for any supported extension."""

    def __init__(self, directory: str | Path, name: str) -> None:
        self.directory = Path(directory)
        self.name = name
        super().__init__(f"No data file named '{name}' found in '{self.directory}'")


class UnsupportedFormatError(LoRADataError, ValueError):
    """A file reference carries an extension outside the supported set."""

    def __init__(self, extension: str, filename: str | Path | None = None) -> None:
        self.extension = extension
        self.filename = filename
        shown = extension or "(none)"
        message = f"Unsupported file format '{shown}'"
        if filename is not None:
            message += f" for '{filename}'"
        super().__init__(message)


class UnrecognizedSchemaError(LoRADataError, ValueError):
    """The first non-blank line of a JSONL file matches none of the record schemas."""

    def __init__(self, line_number: int, raw_line: str) -> None:
        self.line_number = line_number
        self.raw_line = raw_line
        super().__init__(f"Line {line_number} matches no known record schema: {raw_line}")


class InvalidRecordError(LoRADataError, ValueError):
    """A line does not conform to the schema fixed for its file."""

    def __init__(self, line_number: int, raw_line: str, schema: Schema) -> None:
        self.line_number = line_number
        self.raw_line = raw_line
        self.schema = schema
        super().__init__(
            f"Line {line_number} is not a valid '{schema.value}' record: {raw_line}"
        )


class SchemaValidationError(ValueError):
    """A single line failed the shape check of one schema.

    Raised by ``Schema.normalize``; the record decoder re-raises it as an
    ``InvalidRecordError`` carrying the line number.
    """

    def __init__(self, schema: Schema, reason: str) -> None:
        self.schema = schema
        self.reason = reason
        super().__init__(f"{schema.value}: {reason}")
