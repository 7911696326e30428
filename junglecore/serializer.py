"""Length-prefixed string I/O on binary streams."""

from __future__ import annotations

import struct
from typing import BinaryIO

_LENGTH = struct.Struct("<I")
_WIDE_CHAR_SIZE = 2
_WIDE_ENCODING = "utf-16-le"


def _read_exact(stream: BinaryIO, size: int) -> bytes:
    data = stream.read(size)
    if len(data) != size:
        raise EOFError(f"expected {size} bytes, got {len(data)}")
    return data


def _read_length(stream: BinaryIO) -> int:
    (length,) = _LENGTH.unpack(_read_exact(stream, _LENGTH.size))
    return length


def _cut_at_nul(text: str) -> str:
    return text.split("\0", 1)[0]


def write_string(stream: BinaryIO, text: str) -> None:
    """Write a narrow string: uint32 byte count, then UTF-8 bytes."""
    data = text.encode("utf-8")
    stream.write(_LENGTH.pack(len(data)))
    stream.write(data)


def read_string(stream: BinaryIO) -> str:
    """Read a narrow string written by :func:`write_string`; text stops at a NUL."""
    length = _read_length(stream)
    data = _read_exact(stream, length)
    return _cut_at_nul(data.decode("utf-8"))


def write_wide_string(stream: BinaryIO, text: str) -> None:
    """Write a wide string: uint32 count of 16-bit units, then UTF-16LE data."""
    data = text.encode(_WIDE_ENCODING)
    stream.write(_LENGTH.pack(len(data) // _WIDE_CHAR_SIZE))
    stream.write(data)


def read_wide_string(stream: BinaryIO) -> str:
    """Read a wide string written by :func:`write_wide_string`; text stops at a NUL."""
    length = _read_length(stream)
    data = _read_exact(stream, length * _WIDE_CHAR_SIZE)
    return _cut_at_nul(data.decode(_WIDE_ENCODING))