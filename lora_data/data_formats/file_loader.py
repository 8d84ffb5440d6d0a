"""
Loading of fine-tuning data sets by logical name or by file path.

A data set is referred to either by a file path (``data/train.jsonl``) or by
a directory plus a logical name (``data``, ``train``). In the second case the
supported extensions are tried in priority order and the first existing file
is loaded.

Usage:
    from lora_data.data_formats import load_from_directory, load_splits

    train = load_from_directory("data", "train")
    splits = load_splits("data", data_format="chat")
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from lora_data.data_formats.errors import DataFileNotFoundError
from lora_data.data_formats.format_detector import get_loader
from lora_data.data_formats.schemas import Schema

logger = logging.getLogger(__name__)

# Extensions tried when resolving a logical name, highest priority first
SUPPORTED_EXTENSIONS: tuple[str, ...] = ("jsonl", "txt")

# Logical names of the data sets used for training, validation and testing
SPLIT_NAMES: tuple[str, ...] = ("train", "valid", "test")


@dataclass
class DataSplits:
    """Training, validation and test examples loaded from one directory."""

    train: list[str] = field(default_factory=list)
    valid: list[str] = field(default_factory=list)
    test: list[str] = field(default_factory=list)


def resolve_data_file(directory: str | Path, name: str) -> Path:
    """Find the data file for a logical name.

    Args:
        directory: Directory holding the data files.
        name: Base file name without extension, e.g. "train".

    Returns:
        Path of the first ``<name>.<ext>`` that exists, trying extensions in
        ``SUPPORTED_EXTENSIONS`` order.

    Raises:
        DataFileNotFoundError: If no candidate file exists.
    """
    directory = Path(directory)
    for ext in SUPPORTED_EXTENSIONS:
        path = directory / f"{name}.{ext}"
        if path.is_file():
            logger.debug("Resolved data set '%s' to %s", name, path)
            return path

    raise DataFileNotFoundError(directory, name)


def load_from_directory(directory: str | Path, name: str) -> list[str]:
    """Load a data set by logical name.

    Given a directory and a base name, e.g. "train", loads ``train.jsonl`` if
    it exists, otherwise ``train.txt``.

    Raises:
        DataFileNotFoundError: If neither file exists.
        UnrecognizedSchemaError: If a JSONL file uses no known schema.
        InvalidRecordError: If a JSONL line does not match the file's schema.
    """
    return load_from_file(resolve_data_file(directory, name))


def load_from_file(path: str | Path) -> list[str]:
    """Load a ``.jsonl`` or ``.txt`` file and return its training examples.

    JSONL files are decoded with the schema detected from their first
    non-blank line. Text files yield their non-blank lines unchanged.

    Args:
        path: Path to the data file.

    Returns:
        The normalized examples in file order.

    Raises:
        FileNotFoundError: If the file does not exist.
        UnsupportedFormatError: If the extension is neither jsonl nor txt.
        UnrecognizedSchemaError: If a JSONL file uses no known schema.
        InvalidRecordError: If a JSONL line does not match the file's schema.
    """
    path = Path(path)
    loader = get_loader(path)
    records = loader.load_all(path)
    logger.debug("Loaded %d records from %s", len(records), path)
    return records


def split_name(split: str, data_format: str | None = None) -> str:
    """Return the logical name of a split, e.g. "train" or "train-chat"."""
    if data_format is None:
        return split
    return f"{split}-{data_format}"


def load_splits(directory: str | Path, data_format: str | None = None) -> DataSplits:
    """Load the train, valid and test data sets from one directory.

    Args:
        directory: Directory holding the data files.
        data_format: Optional schema name ("chat", "tool", "completion",
            "text"). When given, the files are looked up as
            ``train-<data_format>``, ``valid-<data_format>`` and
            ``test-<data_format>``.

    Returns:
        The three loaded data sets.

    Raises:
        ValueError: If data_format is not a schema name.
        DataFileNotFoundError: If any of the three data sets is missing.
    """
    if data_format is not None:
        # Raises ValueError for unknown names
        Schema(data_format)

    loaded = {
        split: load_from_directory(directory, split_name(split, data_format))
        for split in SPLIT_NAMES
    }
    return DataSplits(**loaded)
