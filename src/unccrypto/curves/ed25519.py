"""
Ed25519 (RFC 8032): public key derivation, sign, verify.
Backed by the ``cryptography`` Ed25519 implementation.
"""

from __future__ import annotations

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric.ed25519 import (
    Ed25519PrivateKey,
    Ed25519PublicKey,
)

SECRET_KEY_LENGTH = 32
PUBLIC_KEY_LENGTH = 32
KEYPAIR_LENGTH = SECRET_KEY_LENGTH + PUBLIC_KEY_LENGTH
SIGNATURE_LENGTH = 64


def _private_key(seed: bytes) -> Ed25519PrivateKey:
    if len(seed) != SECRET_KEY_LENGTH:
        raise ValueError("Ed25519 secret must be 32 bytes")
    return Ed25519PrivateKey.from_private_bytes(bytes(seed))


def ed25519_generate_seed() -> bytes:
    """Fresh 32-byte secret seed from the OS randomness source."""
    return Ed25519PrivateKey.generate().private_bytes(
        encoding=serialization.Encoding.Raw,
        format=serialization.PrivateFormat.Raw,
        encryption_algorithm=serialization.NoEncryption(),
    )


def ed25519_public_key(seed: bytes) -> bytes:
    """
    Ed25519 public key (32 bytes) from 32-byte seed.

    Args:
        seed: 32-byte secret seed.

    Returns:
        32-byte compressed public key.
    """
    return (
        _private_key(seed)
        .public_key()
        .public_bytes(
            encoding=serialization.Encoding.Raw,
            format=serialization.PublicFormat.Raw,
        )
    )


def ed25519_sign(message: bytes, seed: bytes) -> bytes:
    """
    Ed25519 signature (64 bytes) of message under 32-byte seed.

    Args:
        message: Arbitrary bytes to sign.
        seed: 32-byte secret seed.

    Returns:
        64-byte signature (R || S).
    """
    return _private_key(seed).sign(bytes(message))


def ed25519_verify(message: bytes, signature: bytes, public_key: bytes) -> bool:
    """
    Verify Ed25519 signature.

    Args:
        message: Original message bytes.
        signature: 64-byte signature (R || S).
        public_key: 32-byte compressed public key.

    Returns:
        True iff signature is valid; malformed keys or signatures give False.
    """
    if len(signature) != SIGNATURE_LENGTH or len(public_key) != PUBLIC_KEY_LENGTH:
        return False
    try:
        key = Ed25519PublicKey.from_public_bytes(bytes(public_key))
        key.verify(bytes(signature), bytes(message))
    except (InvalidSignature, ValueError):
        return False
    return True


__all__: tuple[str, ...] = (
    "KEYPAIR_LENGTH",
    "PUBLIC_KEY_LENGTH",
    "SECRET_KEY_LENGTH",
    "SIGNATURE_LENGTH",
    "ed25519_generate_seed",
    "ed25519_public_key",
    "ed25519_sign",
    "ed25519_verify",
)
