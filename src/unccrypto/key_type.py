"""
Algorithm tag shared by public keys, secret keys and signatures.
"""

from __future__ import annotations

from enum import IntEnum

from .errors import UnknownAlgorithmError


class KeyType(IntEnum):
    """Closed set of supported signature algorithms; the value is the wire tag byte."""

    ED25519 = 0
    SECP256K1 = 1
    RSA2048 = 2

    def __str__(self) -> str:
        return _NAMES[self]

    def __format__(self, format_spec: str) -> str:
        return format(_NAMES[self], format_spec)

    @property
    def canonical_name(self) -> str:
        return _NAMES[self]

    @classmethod
    def parse(cls, text: str) -> KeyType:
        """Parse a case-insensitive algorithm name ("ed25519", "secp256k1", "rsa2048")."""
        lowered = text.lower()
        try:
            return _BY_NAME[lowered]
        except KeyError:
            raise UnknownAlgorithmError(lowered) from None

    @classmethod
    def from_byte(cls, value: int) -> KeyType:
        try:
            return cls(value)
        except ValueError:
            raise UnknownAlgorithmError(value) from None


_NAMES = {
    KeyType.ED25519: "ed25519",
    KeyType.SECP256K1: "secp256k1",
    KeyType.RSA2048: "rsa2048",
}
_BY_NAME = {name: key_type for key_type, name in _NAMES.items()}


def split_key_type_data(text: str) -> tuple[KeyType, str]:
    """
    Split "<algorithm>:<data>" at the first colon.

    Text without a colon predates the multi-algorithm format and is read as
    Ed25519 with the whole string as data.
    """
    prefix, sep, data = text.partition(":")
    if not sep:
        return KeyType.ED25519, text
    return KeyType.parse(prefix), data


__all__: tuple[str, ...] = ("KeyType", "split_key_type_data")
