"""Byte-order reversal of binary values and host endianness queries."""

from __future__ import annotations

import struct
import sys

_SUPPORTED_SIZES = (2, 4, 8)


def reverse_bytes(buffer: bytes) -> bytes:
    """Return buffer with its byte order reversed; only 2, 4 or 8 bytes are allowed."""
    if len(buffer) not in _SUPPORTED_SIZES:
        raise ValueError(f"reverse_bytes: unrecognised number of bytes = {len(buffer)}")
    return bytes(reversed(buffer))


def byte_swap(value: int | float, fmt: str) -> int | float:
    """Byte-swap value stored with the struct format character fmt.

    Standard sizes are used, e.g. 'i' and 'I' are 4 bytes, 'q' and 'd' are 8,
    'f' is 4 and 'h' is 2.
    """
    code = "=" + fmt
    return struct.unpack(code, reverse_bytes(struct.pack(code, value)))[0]


def is_little_endian() -> bool:
    """True if this machine stores values little-endian."""
    return sys.byteorder == "little"


def is_big_endian() -> bool:
    """True if this machine stores values big-endian."""
    return not is_little_endian()