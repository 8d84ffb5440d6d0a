"""
Discovery of the data sets stored in a directory.

A data set is a logical name such as "train" backed by ``train.jsonl``,
``train.txt`` or both. When both exist the JSONL file is the one that gets
loaded and the text file is shadowed.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from lora_data.data_formats.file_loader import SUPPORTED_EXTENSIONS, resolve_data_file


@dataclass
class DataSetInfo:
    """One logical data set found in a directory.

    Attributes:
        name: Logical name, e.g. "train".
        path: The file ``resolve_data_file`` picks for this name.
        format: Extension of that file ("jsonl" or "txt").
        size: Size of that file in bytes.
        shadowed: Names of lower-priority files that are never loaded.
    """

    name: str
    path: Path
    format: str
    size: int
    shadowed: list[str] = field(default_factory=list)


def discover_data_sets(directory: str | Path) -> list[DataSetInfo]:
    """Find every logical data set in a directory.

    Only files whose extension is exactly one of ``SUPPORTED_EXTENSIONS`` are
    considered, matching how names are resolved when loading.

    Args:
        directory: Path to the directory to scan.

    Returns:
        One entry per logical name, sorted by name. An unreadable or missing
        directory yields an empty list.
    """
    dir_path = Path(directory)

    try:
        names = {
            file_path.stem
            for file_path in dir_path.iterdir()
            if file_path.is_file() and file_path.suffix.lstrip(".") in SUPPORTED_EXTENSIONS
        }
    except OSError:
        return []

    data_sets = []
    for name in sorted(names, key=str.lower):
        path = resolve_data_file(dir_path, name)
        fmt = path.suffix.lstrip(".")
        shadowed = [
            f"{name}.{ext}"
            for ext in SUPPORTED_EXTENSIONS[SUPPORTED_EXTENSIONS.index(fmt) + 1:]
            if (dir_path / f"{name}.{ext}").is_file()
        ]
        data_sets.append(DataSetInfo(
            name=name,
            path=path.absolute(),
            format=fmt,
            size=path.stat().st_size,
            shadowed=shadowed,
        ))

    return data_sets


def format_file_size(size_bytes: float) -> str:
    """Format file size for display (e.g., '1.2 MB')."""
    for unit in ['B', 'KB', 'MB', 'GB']:
        if size_bytes < 1024:
            return f"{size_bytes:.1f} {unit}"
        size_bytes /= 1024
    return f"{size_bytes:.1f} TB"
