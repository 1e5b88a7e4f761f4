"""Deterministic byte streams for seed-derived keys."""

from .chacha import ChaChaStream, chacha_block

__all__: tuple[str, ...] = ("ChaChaStream", "chacha_block")
