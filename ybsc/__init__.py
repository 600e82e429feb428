"""
Reader for the Yale Bright Star Catalog binary format.

Only the little-endian file layout with 32-byte entries is supported.
"""

from .catalog import (
    ENTRY_DTYPE,
    HEADER_DTYPE,
    STAR_DTYPE,
    Equinox,
    IdType,
    RawEntry,
    RawHeader,
    Star,
    Ybsc,
    convert_entry,
    decode,
    load,
    read_header,
)
from .errors import (
    BadEntrySizeError,
    InvalidCharError,
    InvalidStarNumberError,
    InvalidStnumError,
    TruncatedInputError,
    YbscError,
)

__all__ = [
    "ENTRY_DTYPE",
    "HEADER_DTYPE",
    "STAR_DTYPE",
    "Equinox",
    "IdType",
    "RawEntry",
    "RawHeader",
    "Star",
    "Ybsc",
    "convert_entry",
    "decode",
    "load",
    "read_header",
    "BadEntrySizeError",
    "InvalidCharError",
    "InvalidStarNumberError",
    "InvalidStnumError",
    "TruncatedInputError",
    "YbscError",
]
