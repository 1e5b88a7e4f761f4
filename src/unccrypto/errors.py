"""
Error kinds raised while parsing, decoding or building keys and signatures.
"""

from __future__ import annotations


class CryptoError(ValueError):
    """Base class for every error raised by unccrypto."""


class UnknownAlgorithmError(CryptoError):
    """Unrecognized textual algorithm name or numeric tag byte."""

    def __init__(self, provided: str | int) -> None:
        self.provided = provided
        super().__init__(f"unknown key type '{provided}'")


class InvalidLengthError(CryptoError):
    """Payload does not have the fixed size required by its variant."""

    def __init__(self, expected: int, received: int) -> None:
        self.expected = expected
        self.received = received
        super().__init__(
            f"invalid length: expected {expected} bytes, received {received}"
        )


class InvalidDataError(CryptoError):
    """Payload has the right size but fails structural or cryptographic checks."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(f"invalid data: {message}")


__all__: tuple[str, ...] = (
    "CryptoError",
    "InvalidDataError",
    "InvalidLengthError",
    "UnknownAlgorithmError",
)
