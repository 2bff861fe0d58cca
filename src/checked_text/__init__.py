"""Bounds-checked, version-tracked text with type-directed conversions."""

from .errors import (
    ConversionError,
    EncodingError,
    ErrorKind,
    InvalidArgumentError,
    InvalidatedCursorError,
    TextError,
    TextIndexError,
    UnsupportedTypeError,
)
from .hashing import hash_code
from .text import Text
from .versioning import CheckedCursor, VersionTracker
from .view import TextView, ViewKind
from .conversion import (
    CHAR,
    Capability,
    ConversionRegistry,
    from_value,
    int8,
    int16,
    int32,
    int64,
    is_value,
    to_value,
    uint8,
    uint16,
    uint32,
    uint64,
)
from .streams import read_line, read_token, write_text

__all__ = [
    "CHAR",
    "Capability",
    "CheckedCursor",
    "ConversionError",
    "ConversionRegistry",
    "EncodingError",
    "ErrorKind",
    "InvalidArgumentError",
    "InvalidatedCursorError",
    "Text",
    "TextError",
    "TextIndexError",
    "TextView",
    "UnsupportedTypeError",
    "VersionTracker",
    "ViewKind",
    "from_value",
    "hash_code",
    "int8",
    "int16",
    "int32",
    "int64",
    "is_value",
    "read_line",
    "read_token",
    "to_value",
    "uint8",
    "uint16",
    "uint32",
    "uint64",
    "write_text",
]

__version__ = "0.1.0"
