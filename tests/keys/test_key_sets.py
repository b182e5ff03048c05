import random

import pytest

from threshold_bls import (
    DecodeError,
    InvalidIndex,
    PublicKeySet,
    SecretKey,
    SecretKeySet,
    SecretKeyShare,
    combine_public_key_shares,
    reconstruct_secret_key,
)


def _scalar(key: SecretKey) -> int:
    return int.from_bytes(key.to_bytes(), byteorder="big")


def test_threshold_is_polynomial_degree(key_set: SecretKeySet, key_set_t2: SecretKeySet) -> None:
    assert key_set.threshold() == 1
    assert key_set.public_keys().threshold() == 1
    assert key_set_t2.threshold() == 2


@pytest.mark.parametrize("index", [0, -1, 2**64, True, 1.5])
def test_invalid_indices_are_rejected(key_set: SecretKeySet, index: object) -> None:
    with pytest.raises(InvalidIndex):
        key_set.secret_key_share(index)  # type: ignore[arg-type]
    with pytest.raises(InvalidIndex):
        key_set.public_keys().public_key_share(index)  # type: ignore[arg-type]


def test_master_public_key_matches_secret(key_set: SecretKeySet) -> None:
    assert key_set.public_keys().public_key() == key_set.secret_key().public_key()


def test_every_share_verifies_against_the_commitment(key_set_t2: SecretKeySet) -> None:
    pk_set = key_set_t2.public_keys()
    for index in range(1, 6):
        share = key_set_t2.secret_key_share(index)
        assert pk_set.verify_secret_key_share(share)
        assert pk_set.public_key_share(index) == share.public_key_share()


@pytest.mark.parametrize("position", [0, 3, 7, 8, 9, 16, 24, 31, 38, 39])
def test_mutated_share_fails_verification(key_set: SecretKeySet, position: int) -> None:
    pk_set = key_set.public_keys()
    data = bytearray(key_set.secret_key_share(2).to_bytes())
    data[position] ^= 0x01
    try:
        tampered = SecretKeyShare.from_bytes(bytes(data))
    except DecodeError:
        pytest.skip("mutation produced an unreduced scalar")
    assert not pk_set.verify_secret_key_share(tampered)


def test_share_from_another_index_fails_verification(key_set: SecretKeySet) -> None:
    pk_set = key_set.public_keys()
    share = key_set.secret_key_share(1)
    relabelled = SecretKeyShare(2, share.scalar())
    assert not pk_set.verify_secret_key_share(relabelled)


def test_reconstruction_is_subset_independent(key_set_t2: SecretKeySet) -> None:
    shares = {i: key_set_t2.secret_key_share(i) for i in range(1, 6)}
    master = key_set_t2.secret_key()
    for subset in ((1, 2, 3), (2, 4, 5), (1, 3, 4, 5)):
        assert reconstruct_secret_key(2, [shares[i] for i in subset]) == master


def test_public_key_shares_combine_to_master_key(key_set: SecretKeySet) -> None:
    pk_set = key_set.public_keys()
    shares = [pk_set.public_key_share(i) for i in (1, 3)]
    assert combine_public_key_shares(1, shares) == pk_set.public_key()


def test_combined_key_sets_add_their_secrets() -> None:
    rng = random.Random(21)
    a = SecretKeySet.random(1, rng)
    b = SecretKeySet.random(1, rng)
    combined = a.public_keys().combine(b.public_keys())
    expected = SecretKey(_scalar(a.secret_key()) + _scalar(b.secret_key()))
    assert combined.public_key() == expected.public_key()
    share_sum = a.public_keys().public_key_share(2).combine(b.public_keys().public_key_share(2))
    assert share_sum == combined.public_key_share(2)


def test_public_key_set_bytes_round_trip(key_set_t2: SecretKeySet) -> None:
    pk_set = key_set_t2.public_keys()
    restored = PublicKeySet.from_bytes(pk_set.to_bytes())
    assert restored == pk_set
    assert restored.public_key_share(4) == pk_set.public_key_share(4)


def test_secret_key_set_is_deterministic_for_a_seed() -> None:
    a = SecretKeySet.random(2, random.Random(99))
    b = SecretKeySet.random(2, random.Random(99))
    assert a.public_keys() == b.public_keys()
    assert a.secret_key_share(3) == b.secret_key_share(3)


def test_secret_material_is_redacted_from_repr(key_set: SecretKeySet) -> None:
    share = key_set.secret_key_share(1)
    scalar_hex = f"{share.scalar():x}"
    assert scalar_hex not in repr(share)
    assert scalar_hex not in repr(key_set.secret_key())
    assert scalar_hex not in repr(key_set)
    assert "redacted" in repr(share)


def test_context_manager_zeroizes_on_exit(rng: random.Random) -> None:
    with SecretKey.random(rng) as key:
        assert key != SecretKey(0)
    assert key == SecretKey(0)


def test_context_manager_zeroizes_on_error(key_set: SecretKeySet) -> None:
    share = key_set.secret_key_share(3)
    with pytest.raises(RuntimeError):
        with share:
            raise RuntimeError("boom")
    assert share.scalar() == 0


def test_zero_threshold_is_ordinary_key(rng: random.Random) -> None:
    sk_set = SecretKeySet.random(0, rng)
    share = sk_set.secret_key_share(4)
    assert reconstruct_secret_key(0, [share]) == sk_set.secret_key()
    assert share.scalar() == _scalar(sk_set.secret_key())
