"""
ChaCha keystream (64-bit block counter, 64-bit stream id). Pure Python.

Seeded secp256k1 keys read their scalar from the 12-round variant keyed by
the padded seed, with counter and stream id starting at zero. Output is the
little-endian serialization of consecutive blocks.
"""

from __future__ import annotations

import struct

# "expand 32-byte k"
_CONSTANTS = (0x61707865, 0x3320646E, 0x79622D32, 0x6B206574)
_MASK32 = 0xFFFFFFFF

KEY_LENGTH = 32
BLOCK_LENGTH = 64


def _rotl32(v: int, n: int) -> int:
    return ((v << n) & _MASK32) | (v >> (32 - n))


def _quarter_round(x: list[int], a: int, b: int, c: int, d: int) -> None:
    x[a] = (x[a] + x[b]) & _MASK32
    x[d] = _rotl32(x[d] ^ x[a], 16)
    x[c] = (x[c] + x[d]) & _MASK32
    x[b] = _rotl32(x[b] ^ x[c], 12)
    x[a] = (x[a] + x[b]) & _MASK32
    x[d] = _rotl32(x[d] ^ x[a], 8)
    x[c] = (x[c] + x[d]) & _MASK32
    x[b] = _rotl32(x[b] ^ x[c], 7)


def chacha_block(key: bytes, counter: int, stream_id: int = 0, rounds: int = 12) -> bytes:
    """
    One 64-byte ChaCha keystream block.

    Args:
        key: 32-byte key.
        counter: 64-bit block counter.
        stream_id: 64-bit stream id (nonce).
        rounds: 8, 12 or 20.

    Returns:
        64 bytes of keystream.
    """
    if len(key) != KEY_LENGTH:
        raise ValueError("ChaCha key must be 32 bytes")
    if rounds not in (8, 12, 20):
        raise ValueError(f"unsupported round count {rounds}")
    state = [
        *_CONSTANTS,
        *struct.unpack("<8I", key),
        counter & _MASK32,
        (counter >> 32) & _MASK32,
        stream_id & _MASK32,
        (stream_id >> 32) & _MASK32,
    ]
    x = list(state)
    for _ in range(rounds // 2):
        # columns
        _quarter_round(x, 0, 4, 8, 12)
        _quarter_round(x, 1, 5, 9, 13)
        _quarter_round(x, 2, 6, 10, 14)
        _quarter_round(x, 3, 7, 11, 15)
        # diagonals
        _quarter_round(x, 0, 5, 10, 15)
        _quarter_round(x, 1, 6, 11, 12)
        _quarter_round(x, 2, 7, 8, 13)
        _quarter_round(x, 3, 4, 9, 14)
    return struct.pack("<16I", *((w + s) & _MASK32 for w, s in zip(x, state)))


class ChaChaStream:
    """Sequential reader over a ChaCha keystream, starting at block 0."""

    def __init__(self, key: bytes, rounds: int = 12, stream_id: int = 0) -> None:
        if len(key) != KEY_LENGTH:
            raise ValueError("ChaCha key must be 32 bytes")
        self._key = bytes(key)
        self._rounds = rounds
        self._stream_id = stream_id
        self._counter = 0
        self._buffer = b""

    def read(self, length: int) -> bytes:
        while len(self._buffer) < length:
            self._buffer += chacha_block(self._key, self._counter, self._stream_id, self._rounds)
            self._counter += 1
        out, self._buffer = self._buffer[:length], self._buffer[length:]
        return out


__all__: tuple[str, ...] = ("BLOCK_LENGTH", "KEY_LENGTH", "ChaChaStream", "chacha_block")
