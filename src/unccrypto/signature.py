"""
Algorithm-tagged signatures: verification, secp256k1 recovery and the
binary / textual codecs.
"""

from __future__ import annotations

import io
import logging
from typing import BinaryIO

from .curves import ed25519, rsa2048, secp256k1
from .errors import InvalidDataError, InvalidLengthError
from .key_type import KeyType, split_key_type_data
from .public_key import PublicKey
from .serde import base58
from .serde.binary import ensure_consumed, read_exact, read_key_type

logger = logging.getLogger(__name__)

SIGNATURE_LENGTHS = {
    KeyType.ED25519: ed25519.SIGNATURE_LENGTH,
    KeyType.SECP256K1: secp256k1.SIGNATURE_LENGTH,
    KeyType.RSA2048: rsa2048.SIGNATURE_LENGTH,
}

# Bits that ed25519-dalek 1.x rejected in the last byte of an encoded signature.
_ED25519_LEGACY_MASK = 0b1110_0000


class Signature:
    """
    Signature of one of the supported algorithms.

    Ed25519 signatures are 64 bytes, secp256k1 signatures 65 bytes
    (``r || s || recovery_id``), RSA-2048 signatures 256 bytes.
    """

    __slots__ = ("_key_type", "_data")

    def __init__(self, key_type: KeyType, data: bytes) -> None:
        key_type = KeyType.from_byte(key_type)
        expected = SIGNATURE_LENGTHS[key_type]
        if len(data) != expected:
            raise InvalidLengthError(expected, len(data))
        self._key_type = key_type
        self._data = bytes(data)

    @classmethod
    def from_parts(cls, key_type: KeyType, data: bytes) -> Signature:
        """Build a signature from its algorithm and raw signature blob."""
        return cls(key_type, data)

    @classmethod
    def empty(cls, key_type: KeyType = KeyType.ED25519) -> Signature:
        return cls(key_type, bytes(SIGNATURE_LENGTHS[KeyType.from_byte(key_type)]))

    def key_type(self) -> KeyType:
        return self._key_type

    def raw_bytes(self) -> bytes:
        return self._data

    def verify(self, data: bytes, public_key: PublicKey) -> bool:
        """
        True iff this signature signs ``data`` under ``public_key``.

        Mismatched algorithms, malformed keys and malformed signatures all
        give False; this never raises on untrusted input.
        """
        if self._key_type != public_key.key_type():
            return False
        try:
            if self._key_type == KeyType.ED25519:
                return ed25519.ed25519_verify(data, self._data, public_key.raw_bytes())
            if self._key_type == KeyType.SECP256K1:
                r, s, recid = secp256k1.split_signature(self._data)
                return secp256k1.verify(data, r, s, recid, public_key.raw_bytes())
            return rsa2048.verify_unprefixed(public_key.raw_bytes(), data, self._data)
        except Exception:
            logger.debug("%s verify failed unexpectedly", self._key_type, exc_info=True)
            return False

    def _require_secp256k1(self, operation: str) -> None:
        if self._key_type != KeyType.SECP256K1:
            raise InvalidDataError(
                f"{operation} is only defined for secp256k1 signatures, not {self._key_type}"
            )

    def check_signature_values(self, reject_upper: bool) -> bool:
        """
        r and s below the curve order; with ``reject_upper`` also s in the lower
        half (low-S). Not applied by :meth:`verify`.
        """
        self._require_secp256k1("check_signature_values")
        return secp256k1.check_signature_values(self._data, reject_upper)

    def recover(self, message_digest: bytes) -> PublicKey:
        """Recover the secp256k1 public key that produced this signature over a 32-byte digest."""
        self._require_secp256k1("recover")
        if len(message_digest) != secp256k1.MESSAGE_LENGTH:
            raise InvalidLengthError(secp256k1.MESSAGE_LENGTH, len(message_digest))
        r, s, recid = secp256k1.split_signature(self._data)
        try:
            uncompressed = secp256k1.recover_pubkey(message_digest, r, s, recid)
        except ValueError as err:
            logger.debug("secp256k1 recover failed: %s", err)
            raise InvalidDataError(str(err)) from err
        return PublicKey(KeyType.SECP256K1, uncompressed[1:])

    # Binary codec

    def write_to(self, stream: BinaryIO) -> None:
        stream.write(bytes([self._key_type]))
        stream.write(self._data)

    def to_bytes(self) -> bytes:
        return bytes([self._key_type]) + self._data

    @classmethod
    def read_from(cls, stream: BinaryIO) -> Signature:
        key_type = read_key_type(stream)
        data = read_exact(stream, SIGNATURE_LENGTHS[key_type])
        # Kept for compatibility with data accepted by older nodes.
        if key_type == KeyType.ED25519 and data[-1] & _ED25519_LEGACY_MASK:
            raise InvalidDataError("signature error")
        return cls(key_type, data)

    @classmethod
    def from_bytes(cls, data: bytes) -> Signature:
        stream = io.BytesIO(data)
        signature = cls.read_from(stream)
        ensure_consumed(stream)
        return signature

    # Textual codec

    def __str__(self) -> str:
        return f"{self._key_type}:{base58.encode(self._data)}"

    @classmethod
    def from_str(cls, text: str) -> Signature:
        key_type, sig_data = split_key_type_data(text)
        return cls(key_type, base58.decode_fixed(SIGNATURE_LENGTHS[key_type], sig_data))

    def to_json(self) -> str:
        return str(self)

    @classmethod
    def from_json(cls, value: object) -> Signature:
        if not isinstance(value, str):
            raise TypeError(f"expected a string, got {type(value).__name__}")
        return cls.from_str(value)

    def __repr__(self) -> str:
        return f"Signature({self})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Signature):
            return NotImplemented
        return self._key_type == other._key_type and self._data == other._data

    def __hash__(self) -> int:
        return hash((int(self._key_type), self._data))


__all__: tuple[str, ...] = ("SIGNATURE_LENGTHS", "Signature")
