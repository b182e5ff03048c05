"""
Thin adapter over ``py_ecc``'s BLS12-381 arithmetic.

Public keys and commitments live in G1, signatures and ciphertext tags in G2 and
decryption shares in GT. Scalars are plain ``int`` values reduced modulo the group order.
"""

from __future__ import annotations

import hashlib
import random
import secrets
from typing import Any, Optional, Tuple

from py_ecc.bls.hash_to_curve import hash_to_G2
from py_ecc.optimized_bls12_381 import (
    FQ12,
    G1,
    G2,
    Z1,
    Z2,
    add,
    b,
    b2,
    curve_order,
    eq,
    field_modulus,
    final_exponentiate,
    is_inf,
    is_on_curve,
    multiply,
    neg,
    pairing as _miller_pairing,
)

CURVE_ORDER: int = curve_order
FIELD_MODULUS: int = field_modulus

# Optimized projective points as produced by py_ecc.
G1Point = Tuple[Any, Any, Any]
G2Point = Tuple[Any, Any, Any]
GTElement = FQ12

G1_GENERATOR: G1Point = G1
G2_GENERATOR: G2Point = G2

SIGNATURE_DST = b"BLS_SIG_BLS12381G2_XMD:SHA-256_SSWU_RO_NUL_"
CIPHERTEXT_DST = b"THRESHOLD_BLS_CT_BLS12381G2_XMD:SHA-256_SSWU_RO_"
KEY_DST = b"THRESHOLD_BLS_KEM_BLS12381G2_XMD:SHA-256_SSWU_RO_"

_SYSTEM_RANDOM = secrets.SystemRandom()


def random_scalar(rng: Optional[random.Random] = None) -> int:
    """Draw a uniform scalar in ``[0, CURVE_ORDER)``."""
    source = rng if rng is not None else _SYSTEM_RANDOM
    return source.randrange(CURVE_ORDER)


def to_scalar(value: int) -> int:
    return int(value) % CURVE_ORDER


def g1_mul(point: G1Point, k: int) -> G1Point:
    return multiply(point, to_scalar(k))


def g2_mul(point: G2Point, k: int) -> G2Point:
    return multiply(point, to_scalar(k))


def g1_base_mul(k: int) -> G1Point:
    return g1_mul(G1_GENERATOR, k)


def point_add(p: Any, q: Any) -> Any:
    return add(p, q)


def g1_identity() -> G1Point:
    return Z1


def g2_identity() -> G2Point:
    return Z2


def points_equal(p: Any, q: Any) -> bool:
    return eq(p, q)


def is_identity(p: Any) -> bool:
    return is_inf(p)


def g1_on_curve(p: G1Point) -> bool:
    return is_on_curve(p, b)


def g2_on_curve(p: G2Point) -> bool:
    return is_on_curve(p, b2)


def in_prime_subgroup(p: Any) -> bool:
    """True if ``p`` is annihilated by the group order."""
    return is_inf(multiply(p, CURVE_ORDER))


def hash_to_g2(data: bytes, dst: bytes = SIGNATURE_DST) -> G2Point:
    return hash_to_G2(bytes(data), dst, hashlib.sha256)


def pairing(p: G1Point, q: G2Point) -> GTElement:
    """Compute ``e(p, q)`` with ``p`` in G1 and ``q`` in G2."""
    return _miller_pairing(q, p)


def pairings_equal(p1: G1Point, q1: G2Point, p2: G1Point, q2: G2Point) -> bool:
    """
    Check ``e(p1, q1) == e(p2, q2)`` with a single final exponentiation.
    """
    lhs = _miller_pairing(q1, p1, final_exponentiate=False)
    rhs = _miller_pairing(q2, neg(p2), final_exponentiate=False)
    return final_exponentiate(lhs * rhs) == FQ12.one()


def gt_one() -> GTElement:
    return FQ12.one()


def gt_mul(x: GTElement, y: GTElement) -> GTElement:
    return x * y


def gt_pow(x: GTElement, k: int) -> GTElement:
    return x ** to_scalar(k)


def gt_coefficients(x: GTElement) -> Tuple[int, ...]:
    return tuple(int(c) % FIELD_MODULUS for c in x.coeffs)


def gt_from_coefficients(coeffs: Tuple[int, ...]) -> GTElement:
    return FQ12(list(coeffs))


def gt_equal(x: GTElement, y: GTElement) -> bool:
    return gt_coefficients(x) == gt_coefficients(y)
