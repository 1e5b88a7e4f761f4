"""
Base58 (Bitcoin alphabet) text codec for key and signature payloads.

The decoders report length mismatches as InvalidLengthError and bad input as
InvalidDataError. A decoded value longer than the destination is reported as
``received = expected + 1``, which is all that a fixed-size decode buffer can
tell about an oversized input.
"""

from __future__ import annotations

import base58

from ..config import BASE58_ENCODE_LIMIT
from ..errors import InvalidDataError, InvalidLengthError

_ALPHABET = frozenset(base58.BITCOIN_ALPHABET.decode("ascii"))


def _decode(encoded: str) -> bytes:
    for position, char in enumerate(encoded):
        if char not in _ALPHABET:
            raise InvalidDataError(
                f"provided string contained invalid character {char!r} at byte {position}"
            )
    try:
        return base58.b58decode(encoded)
    except ValueError as err:
        raise InvalidDataError(str(err)) from err


def decode_fixed(length: int, encoded: str) -> bytes:
    """
    Decode base58 text into exactly ``length`` bytes.

    Args:
        length: Required decoded size.
        encoded: Base58 text.

    Returns:
        The decoded bytes.
    """
    data = _decode(encoded)
    if len(data) > length:
        raise InvalidLengthError(length, length + 1)
    if len(data) != length:
        raise InvalidLengthError(length, len(data))
    return data


def decode_capped(max_length: int, encoded: str) -> bytes:
    """
    Decode base58 text of variable length, bounded by ``max_length``.

    A base58 string never decodes to more bytes than it has characters, so
    the effective bound is ``min(max_length, len(encoded))``.
    """
    capacity = min(max_length, len(encoded))
    data = _decode(encoded)
    if len(data) > capacity:
        raise InvalidLengthError(capacity, capacity + 1)
    return data


def encode(data: bytes) -> str:
    """Base58 text of ``data``; N zero bytes encode to N '1' characters."""
    assert len(data) <= BASE58_ENCODE_LIMIT, "base58 payload exceeds encode limit"
    return base58.b58encode(bytes(data)).decode("ascii")


__all__: tuple[str, ...] = ("decode_capped", "decode_fixed", "encode")
