#!/usr/bin/env python3
"""
LoRA Data Inspector

A CLI tool for checking fine-tuning data sets before training. Shows how each
file is detected and what the trainer will actually receive.

Usage:
    python -m lora_data.main files <dir>                  List data files in a directory
    python -m lora_data.main list <source> [--name NAME]  List normalized records
    python -m lora_data.main show <source> <index>        Show a specific record
    python -m lora_data.main detect <file>                Show format and record schema
    python -m lora_data.main stats <source>               Show data set statistics
    python -m lora_data.main splits <dir> [--format F]    Load train/valid/test splits

<source> is either a data file, or a directory together with --name, in which
case <name>.jsonl is preferred over <name>.txt.

Supported Formats:
    - JSONL (.jsonl): one chat, tool, text or completion record per line
    - Text (.txt): one example per line
"""

import argparse
import sys
from pathlib import Path
from typing import NoReturn

from rich.console import Console
from rich.table import Table
from rich.text import Text
from tqdm import tqdm

from lora_data.data_formats import (
    JSONLLoader,
    LoRADataError,
    Schema,
    discover_data_sets,
    format_file_size,
    get_loader,
    load_splits,
    resolve_data_file,
)
from lora_data.data_formats.file_loader import SPLIT_NAMES, split_name

console = Console(soft_wrap=True)
err_console = Console(stderr=True, soft_wrap=True)


def fail(message: str) -> NoReturn:
    """Print an error and exit with status 1."""
    err_console.print(Text(f"Error: {message}", style="bold red"))
    sys.exit(1)


def truncate(text: str, max_len: int = 60) -> str:
    """Truncate text with ellipsis, showing newlines as \\n."""
    text = text.replace("\n", "\\n")
    if len(text) <= max_len:
        return text
    return text[:max_len - 3] + "..."


def resolve_source(source: str, name: str | None) -> Path:
    """Turn a file path, or a directory plus logical name, into a file path."""
    path = Path(source)
    if path.is_dir():
        if not name:
            fail(f"'{source}' is a directory; pass --name to pick a data set")
        return resolve_data_file(path, name)
    return path


# ============== Commands ==============

def cmd_files(args):
    """List the data sets found in a directory and the file each one loads."""
    data_sets = discover_data_sets(args.directory)
    if not data_sets:
        console.print(f"No data files found in {args.directory}")
        return

    table = Table(title=f"Data sets in {args.directory}")
    table.add_column("NAME")
    table.add_column("FILE")
    table.add_column("SIZE", justify="right")
    table.add_column("SHADOWED")
    for info in data_sets:
        table.add_row(
            Text(info.name),
            Text(info.path.name),
            format_file_size(info.size),
            Text(", ".join(info.shadowed) or "-"),
        )
    console.print(table)


def cmd_list(args):
    """List normalized records with a short preview."""
    path = resolve_source(args.source, args.name)
    loader = get_loader(path)
    console.print(f"Loading {path}...")

    count = 0
    for idx, record in enumerate(loader.load(path)):
        console.print(Text(f"{idx:<6} {truncate(record)}"))
        count += 1
        if args.limit and count >= args.limit:
            console.print(f"\n... (limited to {args.limit} records)")
            break

    console.print("-" * 60)
    console.print(f"Displayed {count} records")


def cmd_show(args):
    """Show one normalized record in full."""
    path = resolve_source(args.source, args.name)
    loader = get_loader(path)

    try:
        record = loader.get_record_at_index(path, args.index)
    except IndexError as exc:
        fail(str(exc))

    console.print(f"Record {args.index}:")
    console.print("=" * 60)
    console.print(Text(record))


def cmd_detect(args):
    """Show the container format and, for JSONL, the record schema."""
    path = Path(args.file)
    loader = get_loader(path)
    console.print(f"File:   {path}")
    console.print(f"Format: {loader.format_name}")

    if isinstance(loader, JSONLLoader):
        schema = loader.detect_file_schema(path)
        console.print(f"Schema: {schema.value if schema else 'none (no records)'}")


def cmd_stats(args):
    """Show record count and length statistics."""
    path = resolve_source(args.source, args.name)
    loader = get_loader(path)

    with tqdm(desc=f"Decoding {path.name}", unit="rec", disable=args.quiet) as bar:
        def report(loaded, total):
            if total is not None:
                bar.total = total
            bar.update(loaded - bar.n)

        records = loader.load_all(path, progress_callback=report)

    lengths = [len(record) for record in records]

    schema: Schema | None = None
    if isinstance(loader, JSONLLoader):
        schema = loader.detect_file_schema(path)

    total = len(lengths)
    console.print("\n" + "=" * 60)
    console.print("DATA SET STATISTICS")
    console.print("=" * 60)
    console.print(f"  File:                {path}")
    console.print(f"  Format:              {loader.format_name}")
    if loader.format_name == "jsonl":
        console.print(f"  Schema:              {schema.value if schema else '-'}")
    console.print(f"  Records:             {total:,}")
    console.print(f"  Empty records:       {sum(1 for n in lengths if n == 0):,}")
    if total:
        console.print(f"  Avg length (chars):  {sum(lengths) / total:.1f}")
        console.print(f"  Min length (chars):  {min(lengths):,}")
        console.print(f"  Max length (chars):  {max(lengths):,}")
    console.print("=" * 60)


def cmd_splits(args):
    """Load the train/valid/test data sets and show their sizes."""
    splits = load_splits(args.directory, args.data_format)

    table = Table(title=f"Splits in {args.directory}")
    table.add_column("SPLIT")
    table.add_column("NAME")
    table.add_column("RECORDS", justify="right")
    for split in SPLIT_NAMES:
        table.add_row(
            split,
            Text(split_name(split, args.data_format)),
            f"{len(getattr(splits, split)):,}",
        )
    console.print(table)


def main():
    parser = argparse.ArgumentParser(
        description="LoRA Data Inspector - Supports JSONL and plain text data sets",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )
    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    # Files command
    files_parser = subparsers.add_parser('files', help='List data files in a directory')
    files_parser.add_argument('directory', help='Directory to scan')
    files_parser.set_defaults(func=cmd_files)

    # List command
    list_parser = subparsers.add_parser('list', help='List normalized records')
    list_parser.add_argument('source', help='Data file, or directory with --name')
    list_parser.add_argument('--name', help='Logical data set name (e.g., train)')
    list_parser.add_argument('-n', '--limit', type=int, help='Limit number of records')
    list_parser.set_defaults(func=cmd_list)

    # Show command
    show_parser = subparsers.add_parser('show', help='Show a specific record')
    show_parser.add_argument('source', help='Data file, or directory with --name')
    show_parser.add_argument('index', type=int, help='Record index (0-based)')
    show_parser.add_argument('--name', help='Logical data set name (e.g., train)')
    show_parser.set_defaults(func=cmd_show)

    # Detect command
    detect_parser = subparsers.add_parser('detect', help='Show format and record schema')
    detect_parser.add_argument('file', help='Data file path (JSONL or text)')
    detect_parser.set_defaults(func=cmd_detect)

    # Stats command
    stats_parser = subparsers.add_parser('stats', help='Show data set statistics')
    stats_parser.add_argument('source', help='Data file, or directory with --name')
    stats_parser.add_argument('--name', help='Logical data set name (e.g., train)')
    stats_parser.add_argument('-q', '--quiet', action='store_true', help='Hide the progress bar')
    stats_parser.set_defaults(func=cmd_stats)

    # Splits command
    splits_parser = subparsers.add_parser('splits', help='Load train/valid/test data sets')
    splits_parser.add_argument('directory', help='Directory holding the splits')
    splits_parser.add_argument(
        '--format',
        dest='data_format',
        choices=[schema.value for schema in Schema],
        default=None,
        help='Look up train-<format>, valid-<format> and test-<format>'
    )
    splits_parser.set_defaults(func=cmd_splits)

    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    try:
        args.func(args)
    except (LoRADataError, OSError, UnicodeDecodeError) as exc:
        fail(str(exc))


if __name__ == "__main__":
    main()
