"""Serialization / deserialization (serde): base58 text and tagged binary records."""

from .base58 import decode_capped, decode_fixed, encode
from .binary import ensure_consumed, read_exact, read_key_type

__all__: tuple[str, ...] = (
    "decode_capped",
    "decode_fixed",
    "encode",
    "ensure_consumed",
    "read_exact",
    "read_key_type",
)
