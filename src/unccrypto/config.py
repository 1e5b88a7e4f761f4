"""
Fixed parameters. These are part of the wire and seed-derivation formats, so
they are plain constants rather than environment-driven settings.
"""

RSA_KEY_BITS = 2048
RSA_PUBLIC_EXPONENT = 65537

# Upper bound on what the base58 encoder accepts; the largest payload encoded
# in practice is an RSA PKCS#8 secret key (~1.2 KiB).
BASE58_ENCODE_LIMIT = 2048
# RSA secret keys are variable length and decoded through the capped decoder.
RSA_SECRET_KEY_TEXT_LIMIT = 2048

SEED_LENGTH = 32
SEED_PAD_BYTE = b" "
