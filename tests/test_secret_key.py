import hashlib

import pytest

from unccrypto import (InvalidDataError, InvalidLengthError, KeyType,
                       SecretKey, UnknownAlgorithmError)

DATA = hashlib.sha256(b"123").digest()


@pytest.fixture(scope="module")
def rsa_seed_key():
    return SecretKey.derive_from_seed(KeyType.RSA2048, "test")


@pytest.mark.parametrize("key_type", [KeyType.ED25519, KeyType.SECP256K1])
def test_derive_from_seed_is_deterministic(key_type: KeyType) -> None:
    first = SecretKey.derive_from_seed(key_type, "alice")
    second = SecretKey.derive_from_seed(key_type, "alice")
    assert first == second
    assert str(first) == str(second)
    assert first.public_key() == second.public_key()
    assert first != SecretKey.derive_from_seed(key_type, "bob")


def test_rsa_derive_from_seed_is_deterministic(rsa_seed_key) -> None:
    assert str(SecretKey.derive_from_seed(KeyType.RSA2048, "test")) == str(rsa_seed_key)
    assert len(rsa_seed_key.public_key().raw_bytes()) == 294


def test_seed_is_cut_at_32_bytes() -> None:
    long_seed = "x" * 32
    assert SecretKey.derive_from_seed(KeyType.ED25519, long_seed) == SecretKey.derive_from_seed(
        KeyType.ED25519, long_seed + "ignored"
    )


@pytest.mark.parametrize("key_type", [KeyType.ED25519, KeyType.SECP256K1])
def test_public_key_is_pure(key_type: KeyType) -> None:
    secret_key = SecretKey.generate_random(key_type)
    assert secret_key.key_type() is key_type
    assert secret_key.public_key() == secret_key.public_key()


@pytest.mark.parametrize("key_type", [KeyType.ED25519, KeyType.SECP256K1])
def test_text_round_trip(key_type: KeyType) -> None:
    secret_key = SecretKey.generate_random(key_type)
    parsed = SecretKey.from_str(str(secret_key))
    assert parsed == secret_key
    assert hash(parsed) == hash(secret_key)
    assert SecretKey.from_json(secret_key.to_json()) == secret_key


def test_rsa_text_round_trip(rsa_seed_key) -> None:
    text = str(rsa_seed_key)
    assert text.startswith("rsa2048:")
    parsed = SecretKey.from_str(text)
    assert parsed == rsa_seed_key
    assert parsed.public_key() == rsa_seed_key.public_key()


def test_ed25519_text_is_full_keypair() -> None:
    secret_key = SecretKey.derive_from_seed(KeyType.ED25519, "test")
    parsed = SecretKey.from_str(str(secret_key).split(":", 1)[1])
    assert parsed == secret_key


def test_ed25519_equality_ignores_public_half() -> None:
    secret_key = SecretKey.derive_from_seed(KeyType.ED25519, "test")
    material = secret_key._material
    altered = SecretKey(KeyType.ED25519, material[:32] + bytes(32))
    assert altered == secret_key
    assert hash(altered) == hash(secret_key)
    with pytest.raises(InvalidDataError):
        altered.sign(DATA)


def test_secp256k1_sign_requires_digest() -> None:
    secret_key = SecretKey.derive_from_seed(KeyType.SECP256K1, "test")
    with pytest.raises(InvalidLengthError):
        secret_key.sign(b"not a digest")


def test_rsa_sign_rejects_oversized_input(rsa_seed_key) -> None:
    with pytest.raises(InvalidDataError):
        rsa_seed_key.sign(bytes(300))


def test_text_decode_errors() -> None:
    invalid = "secp256k1:2xVqteU8PWhadHTv99TGh3bSf"
    with pytest.raises(InvalidLengthError):
        SecretKey.from_str(invalid)
    with pytest.raises(InvalidDataError):
        SecretKey.from_str("secp256k1:" + "1" * 32)
    with pytest.raises(InvalidDataError):
        SecretKey.from_str("rsa2048:2xVqteU8PWhadHTv99TGh3bSf")
    with pytest.raises(UnknownAlgorithmError):
        SecretKey.from_str("bls:2xVqteU8PWhadHTv99TGh3bSf")


def test_repr_hides_secret_material() -> None:
    secret_key = SecretKey.derive_from_seed(KeyType.SECP256K1, "test")
    text = repr(secret_key)
    assert str(secret_key).split(":", 1)[1] not in text
    assert str(secret_key.public_key()) in text


def test_unknown_tag_in_constructor() -> None:
    with pytest.raises(UnknownAlgorithmError):
        SecretKey(5, bytes(32))
    with pytest.raises(UnknownAlgorithmError):
        SecretKey.derive_from_seed(4, "test")
