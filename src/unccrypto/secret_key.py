"""
Algorithm-tagged secret keys: generation, seed derivation, signing and the
textual codec.

Ed25519 secret keys hold 64 bytes of keypair material (32-byte secret then
its 32-byte public key), secp256k1 keys a 32-byte scalar and RSA-2048 keys a
``cryptography`` private key, written out as PKCS#8 DER.
"""

from __future__ import annotations

import logging

from cryptography.hazmat.primitives.asymmetric import rsa

from .config import RSA_SECRET_KEY_TEXT_LIMIT, SEED_LENGTH, SEED_PAD_BYTE
from .curves import ed25519, rsa2048, secp256k1
from .errors import InvalidDataError, InvalidLengthError
from .key_type import KeyType, split_key_type_data
from .public_key import PublicKey
from .serde import base58
from .signature import Signature

logger = logging.getLogger(__name__)


def _padded_seed(seed: str) -> bytes:
    seed_bytes = seed.encode("utf-8")[:SEED_LENGTH]
    return seed_bytes + SEED_PAD_BYTE * (SEED_LENGTH - len(seed_bytes))


class SecretKey:
    __slots__ = ("_key_type", "_material")

    def __init__(self, key_type: KeyType, material: bytes | rsa.RSAPrivateKey) -> None:
        key_type = KeyType.from_byte(key_type)
        if key_type == KeyType.RSA2048:
            if not isinstance(material, rsa.RSAPrivateKey):
                raise InvalidDataError("rsa2048 secret key must be an RSA private key")
        elif key_type == KeyType.ED25519:
            if len(material) != ed25519.KEYPAIR_LENGTH:
                raise InvalidLengthError(ed25519.KEYPAIR_LENGTH, len(material))
            material = bytes(material)
        else:
            if len(material) != secp256k1.SECRET_KEY_LENGTH:
                raise InvalidLengthError(secp256k1.SECRET_KEY_LENGTH, len(material))
            if not secp256k1.is_valid_privkey(material):
                raise InvalidDataError("malformed or out-of-range secret key")
            material = bytes(material)
        self._key_type = key_type
        self._material = material

    @classmethod
    def _from_ed25519_seed(cls, seed: bytes) -> SecretKey:
        return cls(KeyType.ED25519, seed + ed25519.ed25519_public_key(seed))

    @classmethod
    def generate_random(cls, key_type: KeyType) -> SecretKey:
        """Fresh key from the OS randomness source."""
        key_type = KeyType.from_byte(key_type)
        logger.debug("generating random %s secret key", key_type)
        if key_type == KeyType.ED25519:
            return cls._from_ed25519_seed(ed25519.ed25519_generate_seed())
        if key_type == KeyType.SECP256K1:
            return cls(key_type, secp256k1.generate_privkey())
        return cls(key_type, rsa2048.generate_private_key())

    @classmethod
    def derive_from_seed(cls, key_type: KeyType, seed: str) -> SecretKey:
        """
        Deterministic key from a text seed, for reproducible fixtures.

        The seed is UTF-8 encoded and cut or space-padded to 32 bytes. Ed25519
        uses those bytes as the secret, secp256k1 reads its scalar from a
        ChaCha12 stream keyed by them and RSA-2048 draws from a SHAKE256
        stream over them. Changing any of this changes every
        identity ever derived from a seed.
        """
        key_type = KeyType.from_byte(key_type)
        padded = _padded_seed(seed)
        if key_type == KeyType.ED25519:
            return cls._from_ed25519_seed(padded)
        if key_type == KeyType.SECP256K1:
            return cls(key_type, secp256k1.privkey_from_seed(padded))
        return cls(key_type, rsa2048.private_key_from_seed(padded))

    def key_type(self) -> KeyType:
        return self._key_type

    def public_key(self) -> PublicKey:
        if self._key_type == KeyType.ED25519:
            return PublicKey(KeyType.ED25519, self._material[ed25519.SECRET_KEY_LENGTH:])
        if self._key_type == KeyType.SECP256K1:
            return PublicKey(KeyType.SECP256K1, secp256k1.privkey_to_pubkey(self._material)[1:])
        # Raises InvalidLengthError if the DER encoding is not the expected 294 bytes.
        return PublicKey(KeyType.RSA2048, rsa2048.public_key_der(self._material))

    def sign(self, data: bytes) -> Signature:
        """
        Sign ``data``.

        Ed25519 signs the bytes as given. Secp256k1 treats them as a 32-byte
        digest. RSA-2048 pads them unprefixed, so callers pass a digest that
        fits the modulus.
        """
        if self._key_type == KeyType.ED25519:
            seed = self._material[: ed25519.SECRET_KEY_LENGTH]
            if ed25519.ed25519_public_key(seed) != self._material[ed25519.SECRET_KEY_LENGTH:]:
                raise InvalidDataError("keypair public half does not match its secret")
            return Signature(KeyType.ED25519, ed25519.ed25519_sign(data, seed))
        if self._key_type == KeyType.SECP256K1:
            if len(data) != secp256k1.MESSAGE_LENGTH:
                raise InvalidLengthError(secp256k1.MESSAGE_LENGTH, len(data))
            r, s, recid = secp256k1.sign_recoverable(self._material, data)
            return Signature(KeyType.SECP256K1, secp256k1.join_signature(r, s, recid))
        try:
            signed = rsa2048.sign_unprefixed(self._material, data)
        except ValueError as err:
            raise InvalidDataError(str(err)) from err
        return Signature(KeyType.RSA2048, signed)

    def _encoded_material(self) -> bytes:
        if self._key_type == KeyType.RSA2048:
            return rsa2048.private_key_to_pkcs8(self._material)
        return self._material

    # Textual codec

    def __str__(self) -> str:
        return f"{self._key_type}:{base58.encode(self._encoded_material())}"

    @classmethod
    def from_str(cls, text: str) -> SecretKey:
        key_type, key_data = split_key_type_data(text)
        if key_type == KeyType.ED25519:
            return cls(key_type, base58.decode_fixed(ed25519.KEYPAIR_LENGTH, key_data))
        if key_type == KeyType.SECP256K1:
            return cls(key_type, base58.decode_fixed(secp256k1.SECRET_KEY_LENGTH, key_data))
        der = base58.decode_capped(RSA_SECRET_KEY_TEXT_LIMIT, key_data)
        try:
            return cls(key_type, rsa2048.private_key_from_pkcs8(der))
        except ValueError as err:
            raise InvalidDataError(str(err)) from err

    def to_json(self) -> str:
        return str(self)

    @classmethod
    def from_json(cls, value: object) -> SecretKey:
        if not isinstance(value, str):
            raise TypeError(f"expected a string, got {type(value).__name__}")
        return cls.from_str(value)

    def __repr__(self) -> str:
        return f"SecretKey({self._key_type}, public_key={self.public_key()})"

    def _identity(self) -> bytes | tuple[int, ...]:
        if self._key_type == KeyType.ED25519:
            # The trailing public half is derived material, not identity.
            return self._material[: ed25519.SECRET_KEY_LENGTH]
        if self._key_type == KeyType.SECP256K1:
            return self._material
        return rsa2048.private_numbers_of(self._material)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SecretKey):
            return NotImplemented
        return self._key_type == other._key_type and self._identity() == other._identity()

    def __hash__(self) -> int:
        return hash((int(self._key_type), self._identity()))


__all__: tuple[str, ...] = ("SecretKey",)
