"""Signature primitives: Ed25519, secp256k1 (recoverable ECDSA), RSA-2048."""

from .ed25519 import ed25519_public_key, ed25519_sign, ed25519_verify
from .secp256k1 import (privkey_to_pubkey, recover_pubkey, secp256k1_context,
                        sign_recoverable)

__all__: tuple[str, ...] = (
    "ed25519_public_key",
    "ed25519_sign",
    "ed25519_verify",
    "privkey_to_pubkey",
    "recover_pubkey",
    "secp256k1_context",
    "sign_recoverable",
)
