"""
Plain text data loader.

Each non-blank line of a ``.txt`` file is one training example, returned
exactly as written.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterator

from lora_data.data_formats.base import DataLoader
from lora_data.data_formats.jsonl_loader import read_lines
from lora_data.data_formats.record_decoder import iter_non_blank


class TextLoader(DataLoader):
    """Data loader for newline-delimited plain text.

    Attributes:
        format_name: Returns 'txt'.
    """

    @property
    def format_name(self) -> str:
        """Return the format name."""
        return "txt"

    def load(self, filename: str | Path) -> Iterator[str]:
        """Yield the non-blank lines of a text file, unmodified and in order.

        Raises:
            FileNotFoundError: If the file does not exist.
        """
        for _, line in iter_non_blank(read_lines(filename)):
            yield line
