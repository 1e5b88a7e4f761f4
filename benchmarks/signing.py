"""
Benchmark sign / verify / recover per algorithm.

Run from repo root after pip install -e .:

  python benchmarks/signing.py
"""

from __future__ import annotations

import hashlib
import time

from unccrypto import KeyType, SecretKey

DIGEST = hashlib.sha256(b"bench message").digest()


def _time_it(fn, *args, n: int = 200):
    # Warmup
    for _ in range(5):
        fn(*args)
    start = time.perf_counter()
    for _ in range(n):
        fn(*args)
    return (time.perf_counter() - start) / n


def main() -> None:
    print(f"{'operation':<24} {'us/call':>12}")
    print("-" * 37)
    for key_type in KeyType:
        secret_key = SecretKey.derive_from_seed(key_type, "bench")
        public_key = secret_key.public_key()
        signature = secret_key.sign(DIGEST)
        n = 20 if key_type == KeyType.RSA2048 else 200
        rows = [
            (f"{key_type} sign", _time_it(secret_key.sign, DIGEST, n=n)),
            (f"{key_type} verify", _time_it(signature.verify, DIGEST, public_key, n=n)),
        ]
        if key_type == KeyType.SECP256K1:
            rows.append((f"{key_type} recover", _time_it(signature.recover, DIGEST, n=n)))
        for name, seconds in rows:
            print(f"{name:<24} {seconds * 1e6:>12.1f}")


if __name__ == "__main__":
    main()
