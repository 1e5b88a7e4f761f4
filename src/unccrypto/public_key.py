"""
Algorithm-tagged public keys.

Binary form is ``tag_byte || raw_bytes`` with the raw length implied by the
tag; textual form is ``<algorithm>:<base58(raw_bytes)>``.
"""

from __future__ import annotations

import io
from functools import total_ordering
from typing import BinaryIO

from .curves import ed25519, rsa2048, secp256k1
from .errors import InvalidLengthError
from .key_type import KeyType, split_key_type_data
from .serde import base58
from .serde.binary import ensure_consumed, read_exact, read_key_type

PUBLIC_KEY_LENGTHS = {
    KeyType.ED25519: ed25519.PUBLIC_KEY_LENGTH,
    KeyType.SECP256K1: secp256k1.PUBLIC_KEY_LENGTH,
    KeyType.RSA2048: rsa2048.PUBLIC_KEY_LENGTH,
}


@total_ordering
class PublicKey:
    """
    Public key of one of the supported algorithms.

    Ed25519 keys are the 32-byte compressed point, secp256k1 keys the 64-byte
    uncompressed ``x || y`` without the 0x04 marker, RSA-2048 keys the 294-byte
    DER SubjectPublicKeyInfo. Equality, ordering and hashing follow
    ``(key_type, raw_bytes)``.
    """

    __slots__ = ("_key_type", "_data")

    def __init__(self, key_type: KeyType, data: bytes) -> None:
        key_type = KeyType.from_byte(key_type)
        expected = PUBLIC_KEY_LENGTHS[key_type]
        if len(data) != expected:
            raise InvalidLengthError(expected, len(data))
        self._key_type = key_type
        self._data = bytes(data)

    @classmethod
    def empty(cls, key_type: KeyType) -> PublicKey:
        """All-zero placeholder of the right length; not a usable key."""
        return cls(key_type, bytes(PUBLIC_KEY_LENGTHS[KeyType.from_byte(key_type)]))

    def key_type(self) -> KeyType:
        return self._key_type

    def raw_bytes(self) -> bytes:
        return self._data

    def length(self) -> int:
        """Serialized size (payload plus tag byte), for storage accounting."""
        return PUBLIC_KEY_LENGTHS[self._key_type] + 1

    def __len__(self) -> int:
        return self.length()

    # Binary codec

    def write_to(self, stream: BinaryIO) -> None:
        stream.write(bytes([self._key_type]))
        stream.write(self._data)

    def to_bytes(self) -> bytes:
        return bytes([self._key_type]) + self._data

    @classmethod
    def read_from(cls, stream: BinaryIO) -> PublicKey:
        """Read one key from ``stream``, leaving any following data unread."""
        key_type = read_key_type(stream)
        return cls(key_type, read_exact(stream, PUBLIC_KEY_LENGTHS[key_type]))

    @classmethod
    def from_bytes(cls, data: bytes) -> PublicKey:
        stream = io.BytesIO(data)
        key = cls.read_from(stream)
        ensure_consumed(stream)
        return key

    # Textual codec

    def __str__(self) -> str:
        return f"{self._key_type}:{base58.encode(self._data)}"

    @classmethod
    def from_str(cls, text: str) -> PublicKey:
        key_type, key_data = split_key_type_data(text)
        return cls(key_type, base58.decode_fixed(PUBLIC_KEY_LENGTHS[key_type], key_data))

    def to_json(self) -> str:
        return str(self)

    @classmethod
    def from_json(cls, value: object) -> PublicKey:
        if not isinstance(value, str):
            raise TypeError(f"expected a string, got {type(value).__name__}")
        return cls.from_str(value)

    def __repr__(self) -> str:
        return f"PublicKey({self})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PublicKey):
            return NotImplemented
        return self._key_type == other._key_type and self._data == other._data

    def __lt__(self, other: PublicKey) -> bool:
        if not isinstance(other, PublicKey):
            return NotImplemented
        return (self._key_type, self._data) < (other._key_type, other._data)

    def __hash__(self) -> int:
        # Tag first so equal keys hash equally across variants.
        return hash((int(self._key_type), self._data))


__all__: tuple[str, ...] = ("PUBLIC_KEY_LENGTHS", "PublicKey")
