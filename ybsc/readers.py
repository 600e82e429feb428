"""Little-endian primitive readers used by the header and entry decoders."""

from __future__ import annotations

from typing import BinaryIO

import numpy as np

from .errors import InvalidCharError, TruncatedInputError

I16 = np.dtype("<i2")
I32 = np.dtype("<i4")
U32 = np.dtype("<u4")
U64 = np.dtype("<u8")
F32 = np.dtype("<f4")
F64 = np.dtype("<f8")


def read_exact(stream: BinaryIO, size: int) -> bytes:
    """Consume exactly *size* bytes or raise :class:`TruncatedInputError`."""
    chunks = []
    remaining = size
    while remaining > 0:
        chunk = stream.read(remaining)
        if not chunk:
            break
        chunks.append(chunk)
        remaining -= len(chunk)
    data = b"".join(chunks)
    if len(data) != size:
        raise TruncatedInputError(size, len(data))
    return data


def _read_scalar(stream: BinaryIO, dtype: np.dtype):
    return np.frombuffer(read_exact(stream, dtype.itemsize), dtype=dtype)[0]


def read_i16(stream: BinaryIO) -> int:
    return int(_read_scalar(stream, I16))


def read_i32(stream: BinaryIO) -> int:
    return int(_read_scalar(stream, I32))


def read_u32(stream: BinaryIO) -> int:
    return int(_read_scalar(stream, U32))


def read_u64(stream: BinaryIO) -> int:
    return int(_read_scalar(stream, U64))


def read_f32(stream: BinaryIO) -> float:
    # reinterpret the raw bits, NaN payloads included
    bits = np.array([read_u32(stream)], dtype=U32)
    return float(bits.view(F32)[0])


def read_f64(stream: BinaryIO) -> float:
    bits = np.array([read_u64(stream)], dtype=U64)
    return float(bits.view(F64)[0])


def read_char(stream: BinaryIO) -> str:
    value = read_exact(stream, 1)[0]
    try:
        return chr(value)
    except (ValueError, OverflowError) as exc:
        raise InvalidCharError(value) from exc
