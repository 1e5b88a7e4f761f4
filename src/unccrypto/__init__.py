"""
Multi-algorithm identity keys for the chain: Ed25519, secp256k1 (recoverable
ECDSA) and RSA-2048 keys and signatures, with tagged binary and base58 text forms.
"""

import logging

from .__about__ import __version__
from .errors import (CryptoError, InvalidDataError, InvalidLengthError,
                     UnknownAlgorithmError)
from .key_type import KeyType
from .public_key import PublicKey
from .secret_key import SecretKey
from .signature import Signature

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__: tuple[str, ...] = (
    # About
    "__version__",
    # Algorithm tag
    "KeyType",
    # Values
    "PublicKey",
    "SecretKey",
    "Signature",
    # Errors
    "CryptoError",
    "InvalidDataError",
    "InvalidLengthError",
    "UnknownAlgorithmError",
)
