"""
Data formats module for loading fine-tuning data sets.

Data files are either JSONL, with one JSON record per line in a chat, tool,
text or completion schema, or plain text with one example per line. Every
loader returns the examples as flat strings ready for training.

Usage:
    from lora_data.data_formats import load_from_directory, load_from_file

    # Resolve "train" to train.jsonl or train.txt
    examples = load_from_directory("data", "train")

    # Or load a file directly
    examples = load_from_file("data/valid.jsonl")

    # Detect the schema of a single line
    from lora_data.data_formats import detect_schema
    detect_schema('{"text": "hello"}')  # Schema.TEXT
"""

from lora_data.data_formats.base import DataLoader
from lora_data.data_formats.directory_loader import DataSetInfo, discover_data_sets, format_file_size
from lora_data.data_formats.errors import (
    DataFileNotFoundError,
    InvalidRecordError,
    LoRADataError,
    SchemaValidationError,
    UnrecognizedSchemaError,
    UnsupportedFormatError,
)
from lora_data.data_formats.file_loader import (
    SPLIT_NAMES,
    SUPPORTED_EXTENSIONS,
    DataSplits,
    load_from_directory,
    load_from_file,
    load_splits,
    resolve_data_file,
)
from lora_data.data_formats.format_detector import (
    EXTENSION_MAP,
    SUPPORTED_FORMATS,
    detect_format,
    detect_schema,
    get_loader,
    get_loader_for_format,
)
from lora_data.data_formats.jsonl_loader import JSONLLoader
from lora_data.data_formats.record_decoder import RecordDecoder, decode_records
from lora_data.data_formats.schemas import DETECTION_ORDER, Schema
from lora_data.data_formats.text_loader import TextLoader

__all__ = [
    # Base class
    "DataLoader",
    # Schemas
    "Schema",
    "DETECTION_ORDER",
    # Format detection
    "detect_format",
    "detect_schema",
    "get_loader",
    "get_loader_for_format",
    "EXTENSION_MAP",
    "SUPPORTED_FORMATS",
    # Decoding
    "RecordDecoder",
    "decode_records",
    # Loaders
    "JSONLLoader",
    "TextLoader",
    # File loading
    "load_from_directory",
    "load_from_file",
    "load_splits",
    "resolve_data_file",
    "DataSplits",
    "SUPPORTED_EXTENSIONS",
    "SPLIT_NAMES",
    # Directory scanning
    "discover_data_sets",
    "DataSetInfo",
    "format_file_size",
    # Errors
    "LoRADataError",
    "DataFileNotFoundError",
    "UnsupportedFormatError",
    "UnrecognizedSchemaError",
    "InvalidRecordError",
    "SchemaValidationError",
]
