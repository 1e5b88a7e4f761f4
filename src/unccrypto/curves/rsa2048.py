"""
RSA-2048 with unprefixed PKCS#1 v1.5 signatures: the signed block carries the
caller's bytes directly, with no DigestInfo prefix and no hashing.

Keys are ``cryptography`` RSA objects; the blinded private-key operation
runs in python-rsa. Seeded generation runs pycryptodome's
``RSA.generate`` over a SHAKE256 stream so that fixture keys are reproducible.
"""

from __future__ import annotations

import hmac
import logging

import rsa as python_rsa
from Crypto.Hash import SHAKE256
from Crypto.PublicKey import RSA
from cryptography.exceptions import InvalidSignature, UnsupportedAlgorithm
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import padding, rsa

from ..config import RSA_KEY_BITS, RSA_PUBLIC_EXPONENT

logger = logging.getLogger(__name__)

# DER SubjectPublicKeyInfo of a 2048-bit modulus with e = 65537.
PUBLIC_KEY_LENGTH = 294
SIGNATURE_LENGTH = 256

# 0x00 0x01 <at least 8 x 0xff> 0x00
_PADDING_OVERHEAD = 11


def generate_private_key() -> rsa.RSAPrivateKey:
    return rsa.generate_private_key(
        public_exponent=RSA_PUBLIC_EXPONENT, key_size=RSA_KEY_BITS
    )


def private_key_from_seed(seed: bytes) -> rsa.RSAPrivateKey:
    """Deterministic key: pycryptodome RSA generation fed by SHAKE256(seed)."""
    stream = SHAKE256.new(data=bytes(seed))
    key = RSA.generate(RSA_KEY_BITS, randfunc=stream.read, e=RSA_PUBLIC_EXPONENT)
    return private_key_from_pkcs8(key.export_key(format="DER", pkcs=8))


def private_key_to_pkcs8(private_key: rsa.RSAPrivateKey) -> bytes:
    return private_key.private_bytes(
        encoding=serialization.Encoding.DER,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=serialization.NoEncryption(),
    )


def private_key_from_pkcs8(der: bytes) -> rsa.RSAPrivateKey:
    """Load a PKCS#8 DER private key; raises ValueError unless it is an RSA key."""
    try:
        key = serialization.load_der_private_key(bytes(der), password=None)
    except (TypeError, UnsupportedAlgorithm) as err:
        raise ValueError(str(err)) from err
    if not isinstance(key, rsa.RSAPrivateKey):
        raise ValueError("PKCS#8 document does not hold an RSA private key")
    return key


def public_key_der(private_key: rsa.RSAPrivateKey) -> bytes:
    """DER SubjectPublicKeyInfo of the key's public half."""
    return private_key.public_key().public_bytes(
        encoding=serialization.Encoding.DER,
        format=serialization.PublicFormat.SubjectPublicKeyInfo,
    )


def private_numbers_of(private_key: rsa.RSAPrivateKey) -> tuple[int, ...]:
    numbers = private_key.private_numbers()
    return (
        numbers.public_numbers.n,
        numbers.public_numbers.e,
        numbers.d,
        numbers.p,
        numbers.q,
    )


def sign_unprefixed(private_key: rsa.RSAPrivateKey, data: bytes) -> bytes:
    """
    PKCS#1 v1.5 signature over ``data`` with no DigestInfo prefix.

    Args:
        private_key: RSA private key.
        data: Pre-hashed input, at most modulus size - 11 bytes.

    Returns:
        Signature of modulus size (256 bytes for RSA-2048).
    """
    numbers = private_key.private_numbers()
    n = numbers.public_numbers.n
    k = (n.bit_length() + 7) // 8
    if len(data) + _PADDING_OVERHEAD > k:
        raise ValueError(
            f"message too long: {len(data)} bytes for a {k}-byte modulus"
        )
    block = b"\x00\x01" + b"\xff" * (k - len(data) - 3) + b"\x00" + bytes(data)
    blinding_key = python_rsa.PrivateKey(
        n, numbers.public_numbers.e, numbers.d, numbers.p, numbers.q
    )
    signature = blinding_key.blinded_encrypt(int.from_bytes(block, "big"))
    return signature.to_bytes(k, "big")


def verify_unprefixed(public_key: bytes, data: bytes, signature: bytes) -> bool:
    """
    Check an unprefixed PKCS#1 v1.5 signature against a DER SubjectPublicKeyInfo.

    Returns False on any structural or cryptographic failure.
    """
    try:
        key = serialization.load_der_public_key(bytes(public_key))
    except (ValueError, TypeError, UnsupportedAlgorithm):
        logger.debug("rsa2048 verify: public key is not valid DER")
        return False
    if not isinstance(key, rsa.RSAPublicKey):
        return False
    try:
        recovered = key.recover_data_from_signature(
            bytes(signature), padding.PKCS1v15(), None
        )
    except (InvalidSignature, ValueError):
        return False
    return hmac.compare_digest(recovered, bytes(data))


__all__: tuple[str, ...] = (
    "PUBLIC_KEY_LENGTH",
    "SIGNATURE_LENGTH",
    "generate_private_key",
    "private_key_from_pkcs8",
    "private_key_from_seed",
    "private_key_to_pkcs8",
    "private_numbers_of",
    "public_key_der",
    "sign_unprefixed",
    "verify_unprefixed",
)
