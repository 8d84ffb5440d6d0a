"""
Format detection utilities for data files.

Two levels of detection live here:

- container format, from the file extension (``jsonl`` or ``txt``), which
  picks the loader;
- record schema, from the content of a single JSONL line, which picks how
  each record is flattened into a training string.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from lora_data.data_formats.errors import UnsupportedFormatError
from lora_data.data_formats.schemas import DETECTION_ORDER, Schema

if TYPE_CHECKING:
    from lora_data.data_formats.base import DataLoader


# Mapping of file extensions to format names
EXTENSION_MAP: dict[str, str] = {
    ".jsonl": "jsonl",
    ".txt": "txt",
}

# Supported format names
SUPPORTED_FORMATS = frozenset(["jsonl", "txt"])


def detect_schema(raw_line: str) -> Schema | None:
    """Detect the record schema of a single JSONL line.

    Schemas are tried in ``DETECTION_ORDER`` (chat, tool, text, completion)
    and the first one whose shape matches is returned.

    Args:
        raw_line: One non-blank line of a JSONL file.

    Returns:
        The matching schema, or None if the line matches no schema.

    Examples:
        >>> detect_schema('{"text": "hello world"}')
        <Schema.TEXT: 'text'>
        >>> detect_schema('{"foo": "bar"}') is None
        True
    """
    for schema in DETECTION_ORDER:
        if schema.matches(raw_line):
            return schema
    return None


def detect_format(filename: str | Path) -> str:
    """Detect the container format of a data file from its extension.

    Extensions are case-sensitive: "train.JSONL" is unsupported.

    Args:
        filename: Path to the file.

    Returns:
        Format name: "jsonl" or "txt".

    Raises:
        UnsupportedFormatError: If the extension is not supported.

    Examples:
        >>> detect_format("train.jsonl")
        'jsonl'
        >>> detect_format("valid.txt")
        'txt'
    """
    extension = Path(filename).suffix

    if extension in EXTENSION_MAP:
        return EXTENSION_MAP[extension]

    raise UnsupportedFormatError(extension.lstrip("."), filename)


def get_loader(filename: str | Path) -> "DataLoader":
    """Factory function to get appropriate loader for a file.

    Args:
        filename: Path to the file.

    Returns:
        A DataLoader instance appropriate for the file format.

    Raises:
        UnsupportedFormatError: If the extension is not supported.

    Examples:
        >>> loader = get_loader("train.jsonl")
        >>> for record in loader.load("train.jsonl"):
        ...     print(record)
    """
    return get_loader_for_format(detect_format(filename))


def get_loader_for_format(format_name: str) -> "DataLoader":
    """Get a loader for a specific format name.

    Args:
        format_name: The format name ("jsonl" or "txt").

    Returns:
        A DataLoader instance for the specified format.

    Raises:
        UnsupportedFormatError: If the format name is not supported.

    Examples:
        >>> loader = get_loader_for_format("txt")
        >>> loader.format_name
        'txt'
    """
    # Import loaders here to avoid circular imports
    from lora_data.data_formats.jsonl_loader import JSONLLoader
    from lora_data.data_formats.text_loader import TextLoader

    if format_name not in SUPPORTED_FORMATS:
        raise UnsupportedFormatError(format_name)

    loaders: dict[str, DataLoader] = {
        "jsonl": JSONLLoader(),
        "txt": TextLoader(),
    }

    return loaders[format_name]
