import io
import json

import pytest

from unccrypto import (InvalidDataError, InvalidLengthError, KeyType,
                       PublicKey, SecretKey, UnknownAlgorithmError)

EXPECTED_LENGTHS = {KeyType.ED25519: 32, KeyType.SECP256K1: 64, KeyType.RSA2048: 294}


@pytest.mark.parametrize("key_type", list(KeyType))
def test_empty_has_fixed_length(key_type: KeyType) -> None:
    key = PublicKey.empty(key_type)
    assert key.key_type() is key_type
    assert key.raw_bytes() == bytes(EXPECTED_LENGTHS[key_type])
    assert key.length() == len(key) == EXPECTED_LENGTHS[key_type] + 1


@pytest.mark.parametrize("key_type", list(KeyType))
def test_empty_text_is_all_ones(key_type: KeyType) -> None:
    expected = f"{key_type}:" + "1" * EXPECTED_LENGTHS[key_type]
    assert str(PublicKey.empty(key_type)) == expected
    assert PublicKey.from_str(expected) == PublicKey.empty(key_type)


def test_constructor_enforces_length() -> None:
    with pytest.raises(InvalidLengthError) as excinfo:
        PublicKey(KeyType.SECP256K1, bytes(65))
    assert (excinfo.value.expected, excinfo.value.received) == (64, 65)


def test_binary_layout() -> None:
    key = PublicKey(KeyType.ED25519, bytes(range(32)))
    assert key.to_bytes() == b"\x00" + bytes(range(32))
    assert PublicKey.from_bytes(key.to_bytes()) == key


@pytest.mark.parametrize("key_type", list(KeyType))
def test_binary_round_trip_of_generated_keys(key_type: KeyType) -> None:
    key = SecretKey.generate_random(key_type).public_key()
    assert PublicKey.from_bytes(key.to_bytes()) == key
    assert PublicKey.from_str(str(key)) == key


def test_stream_reads_concatenated_records() -> None:
    first = PublicKey.empty(KeyType.SECP256K1)
    second = PublicKey(KeyType.ED25519, b"\x07" * 32)
    stream = io.BytesIO()
    first.write_to(stream)
    second.write_to(stream)
    stream.seek(0)
    assert PublicKey.read_from(stream) == first
    assert PublicKey.read_from(stream) == second
    assert stream.read() == b""


def test_binary_decode_errors() -> None:
    with pytest.raises(InvalidLengthError):
        PublicKey.from_bytes(b"\x00")
    with pytest.raises(InvalidLengthError):
        PublicKey.from_bytes(b"")
    with pytest.raises(InvalidDataError):
        PublicKey.from_bytes(b"\x03" + bytes(32))
    with pytest.raises(InvalidDataError):
        PublicKey.from_bytes(PublicKey.empty(KeyType.ED25519).to_bytes() + b"\x00")


def test_text_decode_errors() -> None:
    with pytest.raises(InvalidLengthError):
        PublicKey.from_str("secp256k1:2xVqteU8PWhadHTv99TGh3bSf")
    with pytest.raises(UnknownAlgorithmError):
        PublicKey.from_str("ecdsa:2xVqteU8PWhadHTv99TGh3bSf")
    with pytest.raises(InvalidDataError):
        PublicKey.from_str("ed25519:0OIl")


def test_json_is_plain_string() -> None:
    key = PublicKey.empty(KeyType.ED25519)
    document = json.dumps({"public_key": key.to_json()})
    assert PublicKey.from_json(json.loads(document)["public_key"]) == key
    with pytest.raises(TypeError):
        PublicKey.from_json(123)


def test_equality_ordering_and_hash() -> None:
    a = PublicKey(KeyType.ED25519, b"\x01" * 32)
    b = PublicKey(KeyType.ED25519, b"\x02" * 32)
    c = PublicKey.empty(KeyType.SECP256K1)
    assert a == PublicKey(KeyType.ED25519, b"\x01" * 32)
    assert hash(a) == hash(PublicKey(KeyType.ED25519, b"\x01" * 32))
    assert sorted([c, b, a]) == [a, b, c]
    assert len({a, b, c, PublicKey(KeyType.ED25519, b"\x01" * 32)}) == 3
    assert repr(a) == f"PublicKey({a})"


def test_unknown_tag_in_constructor() -> None:
    with pytest.raises(UnknownAlgorithmError):
        PublicKey(9, bytes(32))
    with pytest.raises(UnknownAlgorithmError):
        PublicKey.empty(3)
