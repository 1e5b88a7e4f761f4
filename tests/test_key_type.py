import pytest

from unccrypto import KeyType, UnknownAlgorithmError
from unccrypto.key_type import split_key_type_data


@pytest.mark.parametrize(
    "text, expected",
    [
        ("ed25519", KeyType.ED25519),
        ("SECP256K1", KeyType.SECP256K1),
        ("Rsa2048", KeyType.RSA2048),
    ],
)
def test_parse_is_case_insensitive(text: str, expected: KeyType) -> None:
    assert KeyType.parse(text) is expected


def test_parse_unknown_name() -> None:
    with pytest.raises(UnknownAlgorithmError) as excinfo:
        KeyType.parse("ECDSA")
    assert excinfo.value.provided == "ecdsa"


def test_from_byte() -> None:
    assert [KeyType.from_byte(b) for b in (0, 1, 2)] == [
        KeyType.ED25519,
        KeyType.SECP256K1,
        KeyType.RSA2048,
    ]
    with pytest.raises(UnknownAlgorithmError) as excinfo:
        KeyType.from_byte(3)
    assert excinfo.value.provided == 3


def test_names_and_ordering() -> None:
    assert [str(k) for k in KeyType] == ["ed25519", "secp256k1", "rsa2048"]
    assert f"{KeyType.SECP256K1}" == "secp256k1"
    assert KeyType.ED25519 < KeyType.SECP256K1 < KeyType.RSA2048


def test_split_key_type_data() -> None:
    assert split_key_type_data("secp256k1:abc") == (KeyType.SECP256K1, "abc")
    # Only the first colon separates.
    assert split_key_type_data("rsa2048:a:b") == (KeyType.RSA2048, "a:b")
    # No prefix: legacy Ed25519.
    assert split_key_type_data("abc") == (KeyType.ED25519, "abc")
    with pytest.raises(UnknownAlgorithmError):
        split_key_type_data("dsa:abc")
