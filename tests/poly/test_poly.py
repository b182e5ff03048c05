import random

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from threshold_bls.curve.groups import CURVE_ORDER, g1_base_mul, points_equal
from threshold_bls.errors import DecodeError
from threshold_bls.poly import Commitment, Poly

scalars = st.integers(min_value=0, max_value=CURVE_ORDER - 1)


def test_random_polynomial_has_requested_degree(rng: random.Random) -> None:
    poly = Poly.random(3, rng)
    assert poly.degree() == 3
    assert len(poly.coeffs) == 4


def test_constant_polynomial_is_degree_zero() -> None:
    poly = Poly.from_scalar(42)
    assert poly.degree() == 0
    assert poly.evaluate(0) == 42
    assert poly.evaluate(12345) == 42


def test_add() -> None:
    assert Poly([0, 1]) + Poly([1, 0]) == Poly([1, 1])
    assert Poly([]) + Poly([1]) == Poly([1])


def test_add_different_degrees() -> None:
    p1 = Poly([1, 1, 1])
    p2 = Poly([0, 0])
    assert p1 + p2 == Poly([1, 1, 1])
    assert (p1 + p2) + Poly([0, 0, 0, 1]) == Poly([1, 1, 1, 1])


def test_sub_cancels_to_zero() -> None:
    p = Poly([3, 4, 5])
    assert (p - p).is_zero()
    assert (p - p).coeffs == ()


def test_mul() -> None:
    assert Poly([1, 1]) * Poly([0, 1]) == Poly([0, 1, 1])
    assert (Poly([1, 2]) * 0).is_zero()


def test_arithmetic_evaluation_and_interpolation() -> None:
    p1 = Poly.monomial(3) * 5 + Poly.monomial(1) - 2
    assert p1 == Poly([-2, 1, 0, 5])
    samples = [(-1, -8), (2, 40), (3, 136), (5, 628)]
    for x, y in samples:
        assert p1.evaluate(x) == y % CURVE_ORDER
    assert Poly.interpolate(samples) == p1


def test_interpolate_rejects_repeated_points() -> None:
    with pytest.raises(ValueError):
        Poly.interpolate([(1, 2), (1, 3)])


def test_zeroize_clears_coefficients() -> None:
    poly = Poly.monomial(3) + Poly.monomial(2) - 1
    poly.zeroize()
    assert poly.is_zero()


def test_repr_hides_coefficients(rng: random.Random) -> None:
    poly = Poly.random(2, rng)
    assert str(poly.coeffs[0]) not in repr(poly)
    assert str(poly.coeffs[0]) in poly.reveal()


@settings(max_examples=10, deadline=None)
@given(coeffs=st.lists(scalars, min_size=1, max_size=4), x=st.integers(min_value=0, max_value=2**64 - 1))
def test_commitment_evaluates_in_the_exponent(coeffs: list, x: int) -> None:
    poly = Poly(coeffs)
    assert points_equal(poly.commitment().evaluate(x), g1_base_mul(poly.evaluate(x)))


def test_commitment_addition_matches_polynomial_addition(rng: random.Random) -> None:
    p1 = Poly.random(2, rng)
    p2 = Poly.random(1, rng)
    assert p1.commitment() + p2.commitment() == (p1 + p2).commitment()


def test_commitment_bytes_round_trip(rng: random.Random) -> None:
    commitment = Poly.random(2, rng).commitment()
    data = commitment.to_bytes()
    assert len(data) == 3 * 48
    assert Commitment.from_bytes(data) == commitment
    with pytest.raises(DecodeError):
        Commitment.from_bytes(data[:-1])
    with pytest.raises(DecodeError):
        Commitment.from_bytes(b"")
