#!/usr/bin/env python3
"""Example: sign and verify with each supported algorithm."""

import hashlib

from unccrypto import KeyType, PublicKey, SecretKey, Signature

digest = hashlib.sha256(b"Hello, chain").digest()

for key_type in KeyType:
    secret_key = SecretKey.derive_from_seed(key_type, "example")
    public_key = secret_key.public_key()
    signature = secret_key.sign(digest)
    print(f"{key_type} public key:", str(public_key)[:48] + "...")
    print(f"{key_type} signature:", str(signature)[:48] + "...")

    # What a storage layer would keep, and read back.
    stored = public_key.to_bytes() + signature.to_bytes()
    print(f"{key_type} stored bytes:", len(stored))
    restored_key = PublicKey.from_str(str(public_key))
    restored_sig = Signature.from_str(str(signature))
    print(f"{key_type} verify:", restored_sig.verify(digest, restored_key))

secp_signature = SecretKey.derive_from_seed(KeyType.SECP256K1, "example").sign(digest)
print("secp256k1 recovered:", secp_signature.recover(digest))
