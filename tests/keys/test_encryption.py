import random

import pytest

from threshold_bls import (
    Ciphertext,
    CiphertextTamperedError,
    DecodeError,
    DecryptionShare,
    DuplicateIndex,
    NotEnoughShares,
    SecretKey,
    SecretKeySet,
    combine_decryption_shares,
)
from threshold_bls.curve.groups import g1_base_mul

PLAINTEXT = b"Rip and tear, until it's done"


def _rejected(data: bytes) -> bool:
    try:
        ciphertext = Ciphertext.from_bytes(data)
    except DecodeError:
        return True
    return not ciphertext.verify()


def _flip(data: bytes, bit: int) -> bytes:
    out = bytearray(data)
    out[bit // 8] ^= 1 << (bit % 8)
    return bytes(out)


def test_single_key_round_trip(rng: random.Random) -> None:
    sk = SecretKey.random(rng)
    ciphertext = sk.public_key().encrypt(PLAINTEXT, rng)
    assert ciphertext.verify()
    assert ciphertext.payload != PLAINTEXT
    assert len(ciphertext.payload) == len(PLAINTEXT)
    assert sk.decrypt(ciphertext) == PLAINTEXT


def test_other_key_cannot_decrypt(rng: random.Random) -> None:
    ciphertext = SecretKey.random(rng).public_key().encrypt(PLAINTEXT, rng)
    assert SecretKey.random(rng).decrypt(ciphertext) != PLAINTEXT


def test_threshold_decryption_with_any_quorum(key_set: SecretKeySet, rng: random.Random) -> None:
    pk_set = key_set.public_keys()
    ciphertext = pk_set.public_key().encrypt(PLAINTEXT, rng)
    shares = {i: key_set.secret_key_share(i).decrypt_share(ciphertext) for i in (1, 2, 3)}
    for a, b in ((1, 2), (2, 3)):
        assert pk_set.decrypt([shares[a], shares[b]], ciphertext) == PLAINTEXT
    assert combine_decryption_shares(1, shares.values(), ciphertext) == PLAINTEXT
    assert key_set.secret_key().decrypt(ciphertext) == PLAINTEXT


def test_single_decryption_share_is_not_enough(key_set: SecretKeySet, rng: random.Random) -> None:
    pk_set = key_set.public_keys()
    ciphertext = pk_set.public_key().encrypt(b"short", rng)
    share = key_set.secret_key_share(1).decrypt_share(ciphertext)
    with pytest.raises(NotEnoughShares):
        pk_set.decrypt([share], ciphertext)


def test_empty_plaintext(rng: random.Random) -> None:
    sk = SecretKey.random(rng)
    ciphertext = sk.public_key().encrypt(b"", rng)
    assert ciphertext.payload == b""
    assert sk.decrypt(ciphertext) == b""


@pytest.mark.parametrize("bit", [0, 2, 100, 383, 384 + 5, 384 + 400, 384 + 767])
def test_flipping_a_bit_of_u_or_w_is_rejected(bit: int, rng: random.Random) -> None:
    ciphertext = SecretKey.random(rng).public_key().encrypt(PLAINTEXT, rng)
    assert not _rejected(ciphertext.to_bytes())
    assert _rejected(_flip(ciphertext.to_bytes(), bit))


def test_tampered_payload_is_rejected(key_set: SecretKeySet, rng: random.Random) -> None:
    ciphertext = key_set.public_keys().public_key().encrypt(PLAINTEXT, rng)
    tampered = Ciphertext(u=ciphertext.u, w=ciphertext.w, payload=_flip(ciphertext.payload, 3))
    assert not tampered.verify()
    with pytest.raises(CiphertextTamperedError):
        key_set.secret_key_share(1).decrypt_share(tampered)
    with pytest.raises(CiphertextTamperedError):
        key_set.secret_key().decrypt(tampered)


def test_substituted_u_is_rejected(key_set: SecretKeySet, rng: random.Random) -> None:
    ciphertext = key_set.public_keys().public_key().encrypt(PLAINTEXT, rng)
    tampered = Ciphertext(u=g1_base_mul(5), w=ciphertext.w, payload=ciphertext.payload)
    assert not tampered.verify()


def test_combining_for_tampered_ciphertext_fails(key_set: SecretKeySet, rng: random.Random) -> None:
    pk_set = key_set.public_keys()
    ciphertext = pk_set.public_key().encrypt(PLAINTEXT, rng)
    shares = [key_set.secret_key_share(i).decrypt_share(ciphertext) for i in (1, 2)]
    tampered = Ciphertext(u=ciphertext.u, w=ciphertext.w, payload=ciphertext.payload + b"!")
    with pytest.raises(CiphertextTamperedError):
        pk_set.decrypt(shares, tampered)


def test_decryption_shares_are_distinct_per_index(key_set: SecretKeySet, rng: random.Random) -> None:
    ciphertext = key_set.public_keys().public_key().encrypt(PLAINTEXT, rng)
    s1 = key_set.secret_key_share(1).decrypt_share(ciphertext)
    s2 = key_set.secret_key_share(2).decrypt_share(ciphertext)
    assert s1.index == 1 and s2.index == 2
    assert s1 != s2
    assert s1 == key_set.secret_key_share(1).decrypt_share(ciphertext)


def test_conflicting_decryption_shares_for_one_index_are_rejected(key_set: SecretKeySet, rng: random.Random) -> None:
    pk_set = key_set.public_keys()
    ciphertext = pk_set.public_key().encrypt(b"hello", rng)
    s1 = key_set.secret_key_share(1).decrypt_share(ciphertext)
    s2 = key_set.secret_key_share(2).decrypt_share(ciphertext)
    forged = DecryptionShare(1, s2.value)
    with pytest.raises(DuplicateIndex):
        pk_set.decrypt([s1, forged, s2], ciphertext)
    with pytest.raises(DuplicateIndex):
        combine_decryption_shares(1, [s1, s2, forged], ciphertext)


def test_repeated_identical_decryption_share_is_merged(key_set: SecretKeySet, rng: random.Random) -> None:
    pk_set = key_set.public_keys()
    ciphertext = pk_set.public_key().encrypt(b"hello", rng)
    s1 = key_set.secret_key_share(1).decrypt_share(ciphertext)
    s2 = key_set.secret_key_share(2).decrypt_share(ciphertext)
    assert pk_set.decrypt([s1, s1, s2], ciphertext) == b"hello"
    with pytest.raises(NotEnoughShares):
        pk_set.decrypt([s1, s1], ciphertext)
