"""
secp256k1 (Bitcoin/Ethereum curve): key derivation, recoverable ECDSA sign,
public key recovery and verification.

All curve operations run in libsecp256k1 (through ``coincurve``) on a
process-wide context created on first use. Verification parses the
recoverable form, drops the recovery id and checks the standard (r, s)
signature against the uncompressed point ``0x04 || x || y``; libsecp256k1
only accepts the low-S form there.
"""

from __future__ import annotations

import logging
import threading

from coincurve import PrivateKey, PublicKey
from coincurve.context import Context
from cryptography.hazmat.primitives.asymmetric.utils import encode_dss_signature

from ..rng import ChaChaStream

logger = logging.getLogger(__name__)

_N = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141
# Half of _N, plus one.
_N_HALF_ONE = 0x7FFFFFFFFFFFFFFFFFFFFFFFFFFFFFFF5D576E7357A4501DDFE92F46681B20A1

SECRET_KEY_LENGTH = 32
PUBLIC_KEY_LENGTH = 64
MESSAGE_LENGTH = 32
COMPACT_SIGNATURE_LENGTH = 64
SIGNATURE_LENGTH = 65

# Rounds of the keystream seeded keys are drawn from.
SEED_STREAM_ROUNDS = 12

_UNCOMPRESSED_TAG = b"\x04"

_context: Context | None = None
_context_lock = threading.Lock()


def secp256k1_context() -> Context:
    """Shared secp256k1 context; built once, read-only afterwards."""
    global _context
    if _context is None:
        with _context_lock:
            if _context is None:
                _context = Context()
                logger.debug("secp256k1 context created")
    return _context


def _validate_privkey(privkey: bytes) -> None:
    if len(privkey) != SECRET_KEY_LENGTH:
        raise ValueError("privkey must be 32 bytes")
    d = int.from_bytes(privkey, "big")
    if d == 0 or d >= _N:
        raise ValueError("invalid privkey")


def _validate_msg_hash(msg_hash: bytes) -> None:
    if len(msg_hash) != MESSAGE_LENGTH:
        raise ValueError("msg_hash must be 32 bytes")


def generate_privkey() -> bytes:
    """Fresh 32-byte private scalar from the OS randomness source."""
    return PrivateKey(context=secp256k1_context()).secret


def privkey_from_seed(seed: bytes) -> bytes:
    """
    First valid 32-byte scalar read from the ChaCha12 keystream keyed by ``seed``.

    Reproduces keys issued from the same 32-byte seed by earlier nodes.
    """
    stream = ChaChaStream(seed, rounds=SEED_STREAM_ROUNDS)
    while True:
        candidate = stream.read(SECRET_KEY_LENGTH)
        if is_valid_privkey(candidate):
            return candidate


def is_valid_privkey(privkey: bytes) -> bool:
    try:
        _validate_privkey(privkey)
    except ValueError:
        return False
    return True


def privkey_to_pubkey(privkey: bytes) -> bytes:
    """
    Derive uncompressed public key (65 bytes: 0x04 || x || y) from 32-byte private key.

    Args:
        privkey: 32-byte secp256k1 private key.

    Returns:
        65-byte uncompressed public key.
    """
    _validate_privkey(privkey)
    key = PrivateKey(bytes(privkey), context=secp256k1_context())
    return key.public_key.format(compressed=False)


def sign_recoverable(privkey: bytes, msg_hash: bytes) -> tuple[int, int, int]:
    """
    ECDSA sign with recovery id (RFC 6979 nonce, low-S).

    Args:
        privkey: 32-byte private key.
        msg_hash: 32-byte message hash to sign.

    Returns:
        (r, s, recid) where recid is the raw recovery id.
    """
    _validate_privkey(privkey)
    _validate_msg_hash(msg_hash)
    key = PrivateKey(bytes(privkey), context=secp256k1_context())
    return split_signature(key.sign_recoverable(bytes(msg_hash), hasher=None))


def split_signature(signature: bytes) -> tuple[int, int, int]:
    """Split a 65-byte ``r || s || recid`` signature into its integers."""
    if len(signature) != SIGNATURE_LENGTH:
        raise ValueError("signature must be 65 bytes")
    r = int.from_bytes(signature[0:32], "big")
    s = int.from_bytes(signature[32:64], "big")
    return (r, s, signature[64])


def join_signature(r: int, s: int, recid: int) -> bytes:
    return r.to_bytes(32, "big") + s.to_bytes(32, "big") + bytes([recid])


def _parse_recoverable(r: int, s: int, recid: int) -> None:
    # Same rules as a compact recoverable signature parse: recid in 0..3, no overflow.
    if not 0 <= recid <= 3:
        raise ValueError(f"invalid recovery id {recid}")
    if r >= _N or s >= _N:
        raise ValueError("signature component overflows curve order")


def recover_pubkey(msg_hash: bytes, r: int, s: int, recid: int) -> bytes:
    """
    Recover uncompressed public key (65 bytes) from ECDSA signature (msg_hash, r, s, recid).

    Args:
        msg_hash: 32-byte message hash that was signed.
        r, s: Signature components (scalars).
        recid: Recovery id (0-3) indicating which public key.

    Returns:
        65-byte uncompressed public key.
    """
    _validate_msg_hash(msg_hash)
    _parse_recoverable(r, s, recid)
    try:
        public_key = PublicKey.from_signature_and_message(
            join_signature(r, s, recid),
            bytes(msg_hash),
            hasher=None,
            context=secp256k1_context(),
        )
    except ValueError as err:
        raise ValueError(f"public key recovery failed: {err}") from err
    return public_key.format(compressed=False)


def verify(msg_hash: bytes, r: int, s: int, recid: int, public_key: bytes) -> bool:
    """
    Verify a recoverable signature against a raw 64-byte (x || y) public key.

    High-S signatures are rejected. Every failure (bad recovery id, wrong
    digest size, point not on the curve, bad signature) yields False.
    """
    try:
        _parse_recoverable(r, s, recid)
    except ValueError as err:
        logger.debug("secp256k1 verify: %s", err)
        return False
    if len(msg_hash) != MESSAGE_LENGTH or len(public_key) != PUBLIC_KEY_LENGTH:
        return False
    try:
        point = PublicKey(_UNCOMPRESSED_TAG + bytes(public_key), context=secp256k1_context())
    except ValueError:
        logger.debug("secp256k1 verify: public key is not a curve point")
        return False
    try:
        return point.verify(encode_dss_signature(r, s), bytes(msg_hash), hasher=None)
    except ValueError as err:
        logger.debug("secp256k1 verify: %s", err)
        return False


def check_signature_values(signature: bytes, reject_upper: bool) -> bool:
    """
    Range check on (r, s): both below the curve order and, with
    ``reject_upper``, s below half the order plus one (low-S form).
    """
    r, s, _ = split_signature(signature)
    s_bound = _N_HALF_ONE if reject_upper else _N
    return r < _N and s < s_bound


__all__: tuple[str, ...] = (
    "COMPACT_SIGNATURE_LENGTH",
    "MESSAGE_LENGTH",
    "PUBLIC_KEY_LENGTH",
    "SECRET_KEY_LENGTH",
    "SIGNATURE_LENGTH",
    "check_signature_values",
    "generate_privkey",
    "is_valid_privkey",
    "join_signature",
    "privkey_from_seed",
    "privkey_to_pubkey",
    "recover_pubkey",
    "secp256k1_context",
    "sign_recoverable",
    "split_signature",
    "verify",
)
