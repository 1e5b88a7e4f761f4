"""
Binary codec plumbing: ``tag_byte || raw_bytes`` records over byte streams.
"""

from __future__ import annotations

from typing import BinaryIO

from ..errors import InvalidDataError, InvalidLengthError, UnknownAlgorithmError
from ..key_type import KeyType


def read_exact(stream: BinaryIO, length: int) -> bytes:
    """Read exactly ``length`` bytes or fail with InvalidLengthError."""
    data = stream.read(length)
    if len(data) != length:
        raise InvalidLengthError(length, len(data))
    return data


def read_key_type(stream: BinaryIO) -> KeyType:
    """Read the leading tag byte; an unknown tag is a data-format error."""
    tag = read_exact(stream, 1)[0]
    try:
        return KeyType.from_byte(tag)
    except UnknownAlgorithmError as err:
        raise InvalidDataError(str(err)) from err


def ensure_consumed(stream: BinaryIO) -> None:
    """Fail if anything is left after a record that should fill the buffer."""
    rest = stream.read()
    if rest:
        raise InvalidDataError(f"{len(rest)} trailing bytes after record")


__all__: tuple[str, ...] = ("ensure_consumed", "read_exact", "read_key_type")
