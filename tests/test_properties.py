"""Property tests: verification never raises and never accepts a foreign key."""

import hashlib

from hypothesis import given, settings, strategies as st

from unccrypto import KeyType, PublicKey, SecretKey, Signature
from unccrypto.public_key import PUBLIC_KEY_LENGTHS
from unccrypto.signature import SIGNATURE_LENGTHS

curve_types = st.sampled_from([KeyType.ED25519, KeyType.SECP256K1])


@st.composite
def garbage_signatures(draw):
    key_type = draw(st.sampled_from(list(KeyType)))
    raw = draw(st.binary(min_size=SIGNATURE_LENGTHS[key_type], max_size=SIGNATURE_LENGTHS[key_type]))
    return Signature.from_parts(key_type, raw)


@st.composite
def garbage_public_keys(draw):
    key_type = draw(st.sampled_from(list(KeyType)))
    raw = draw(st.binary(min_size=PUBLIC_KEY_LENGTHS[key_type], max_size=PUBLIC_KEY_LENGTHS[key_type]))
    return PublicKey(key_type, raw)


@settings(deadline=None)
@given(signature=garbage_signatures(), data=st.binary(max_size=64), public_key=garbage_public_keys())
def test_verify_never_raises(signature: Signature, data: bytes, public_key: PublicKey) -> None:
    assert signature.verify(data, public_key) in (True, False)


@settings(max_examples=25, deadline=None)
@given(key_type=curve_types, message=st.binary(min_size=1, max_size=64))
def test_signature_rejected_by_other_key(key_type: KeyType, message: bytes) -> None:
    digest = hashlib.sha256(message).digest()
    signer = SecretKey.generate_random(key_type)
    other = SecretKey.generate_random(key_type)
    signature = signer.sign(digest)
    assert signature.verify(digest, signer.public_key())
    assert not signature.verify(digest, other.public_key())
