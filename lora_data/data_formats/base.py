"""
Abstract base class for data loaders.

This module defines the DataLoader interface that the container-specific
loaders (JSONL, plain text) implement. A loader turns one data file into the
ordered sequence of training strings the trainer consumes.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Callable, Iterator


class DataLoader(ABC):
    """Abstract base class for loading fine-tuning data files.

    Subclasses implement ``load``; the remaining methods are built on it.
    """

    @property
    @abstractmethod
    def format_name(self) -> str:
        """Return the format name (e.g., 'jsonl', 'txt')."""
        pass

    @abstractmethod
    def load(self, filename: str | Path) -> Iterator[str]:
        """Lazily load normalized records from file.

        Args:
            filename: Path to the file.

        Yields:
            Each record as a normalized string.

        Raises:
            FileNotFoundError: If the file does not exist.
            ValueError: If a line cannot be decoded.
        """
        pass

    def load_all(
        self,
        filename: str | Path,
        progress_callback: Callable[[int, int | None], None] | None = None,
    ) -> list[str]:
        """Load all records from file into memory.

        Args:
            filename: Path to the file.
            progress_callback: Optional callback(loaded_count, total_count) for
                              progress updates. total_count is None until the
                              last call.

        Returns:
            A list of all records.

        Raises:
            FileNotFoundError: If the file does not exist.
            ValueError: If a line cannot be decoded.
        """
        records: list[str] = []

        for i, record in enumerate(self.load(filename)):
            records.append(record)
            if progress_callback is not None and i % 1000 == 0:
                progress_callback(i + 1, None)

        if progress_callback is not None:
            progress_callback(len(records), len(records))

        return records

    def get_record_at_index(self, filename: str | Path, index: int) -> str:
        """Get a specific record by index.

        Streams through the file until reaching the desired index.

        Args:
            filename: Path to the file.
            index: The zero-based index of the record to load.

        Returns:
            The record at the given index.

        Raises:
            FileNotFoundError: If the file does not exist.
            IndexError: If the index is out of range.
        """
        if index < 0:
            raise IndexError(f"Record index {index} cannot be negative")

        for i, record in enumerate(self.load(filename)):
            if i == index:
                return record

        raise IndexError(f"Record index {index} out of range")
