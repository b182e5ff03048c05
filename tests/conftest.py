import random

import pytest

from threshold_bls import SecretKeySet


@pytest.fixture
def rng() -> random.Random:
    return random.Random(20240611)


@pytest.fixture(scope="module")
def key_set() -> SecretKeySet:
    """Threshold 1: any two of the shares 1..3 suffice."""
    return SecretKeySet.random(1, random.Random(7))


@pytest.fixture(scope="module")
def key_set_t2() -> SecretKeySet:
    """Threshold 2 with five participants."""
    return SecretKeySet.random(2, random.Random(11))
