"""
Symmetric bivariate polynomials and their commitments.

These back dealer-less key generation: each dealer hands row ``m`` of a random symmetric
polynomial to participant ``m``; participants cross-check values against the public
commitment and sum the rows' values at 0 into their key shares.
"""

from __future__ import annotations

import random
from typing import Iterable, List, Optional, Tuple

from ..curve.groups import (
    CURVE_ORDER,
    G1Point,
    g1_base_mul,
    g1_identity,
    g1_mul,
    point_add,
    points_equal,
    random_scalar,
    to_scalar,
)
from .commitment import Commitment
from .univariate import Poly


def coeff_position(i: int, j: int) -> int:
    """Position of coefficient ``(i, j)`` in the packed upper triangle."""
    if j < i:
        i, j = j, i
    return j * (j + 1) // 2 + i


def powers(x: int, degree: int) -> List[int]:
    """``[1, x, x^2, ..., x^degree]`` mod the group order."""
    x = to_scalar(x)
    result = [1]
    for _ in range(degree):
        result.append((result[-1] * x) % CURVE_ORDER)
    return result


class BivarPoly:
    """A symmetric polynomial ``f(x, y) = f(y, x)`` of the same degree in both variables."""

    __slots__ = ("_degree", "_coeffs")

    def __init__(self, degree: int, coeffs: Iterable[int]) -> None:
        coeffs = [to_scalar(c) for c in coeffs]
        expected = coeff_position(degree, degree) + 1
        if len(coeffs) != expected:
            raise ValueError(f"Degree {degree} bivariate polynomial needs {expected} coefficients, got {len(coeffs)}")
        self._degree = degree
        self._coeffs: List[int] = coeffs

    @classmethod
    def random(cls, degree: int, rng: Optional[random.Random] = None) -> "BivarPoly":
        if degree < 0:
            raise ValueError("degree must be non-negative")
        count = coeff_position(degree, degree) + 1
        return cls(degree, (random_scalar(rng) for _ in range(count)))

    @classmethod
    def with_secret(cls, secret: int, degree: int, rng: Optional[random.Random] = None) -> "BivarPoly":
        poly = cls.random(degree, rng)
        poly._coeffs[0] = to_scalar(secret)
        return poly

    def degree(self) -> int:
        return self._degree

    def evaluate(self, x: int, y: int) -> int:
        x_pow = powers(x, self._degree)
        y_pow = powers(y, self._degree)
        result = 0
        for i, x_i in enumerate(x_pow):
            for j, y_j in enumerate(y_pow):
                result = (result + self._coeffs[coeff_position(i, j)] * x_i * y_j) % CURVE_ORDER
        return result

    def row(self, x: int) -> Poly:
        """The univariate polynomial ``y -> f(x, y)``."""
        x_pow = powers(x, self._degree)
        coeffs = []
        for i in range(self._degree + 1):
            acc = 0
            for j, x_j in enumerate(x_pow):
                acc = (acc + self._coeffs[coeff_position(i, j)] * x_j) % CURVE_ORDER
            coeffs.append(acc)
        return Poly(coeffs)

    def commitment(self) -> "BivarCommitment":
        return BivarCommitment(self._degree, [g1_base_mul(c) for c in self._coeffs])

    def zeroize(self) -> None:
        for i in range(len(self._coeffs)):
            self._coeffs[i] = 0

    def reveal(self) -> str:
        return f"BivarPoly(degree={self._degree}, coeffs={self._coeffs!r})"

    def __repr__(self) -> str:
        return f"BivarPoly(degree={self._degree})"


class BivarCommitment:
    """Commitment to a :class:`BivarPoly`; safe to publish."""

    __slots__ = ("_degree", "_coeffs")

    def __init__(self, degree: int, coeffs: Iterable[G1Point]) -> None:
        self._degree = degree
        self._coeffs: Tuple[G1Point, ...] = tuple(coeffs)

    def degree(self) -> int:
        return self._degree

    def evaluate(self, x: int, y: int) -> G1Point:
        x_pow = powers(x, self._degree)
        y_pow = powers(y, self._degree)
        result = g1_identity()
        for i, x_i in enumerate(x_pow):
            for j, y_j in enumerate(y_pow):
                term = g1_mul(self._coeffs[coeff_position(i, j)], x_i * y_j)
                result = point_add(result, term)
        return result

    def row(self, x: int) -> Commitment:
        """Commitment to ``BivarPoly.row(x)``."""
        x_pow = powers(x, self._degree)
        coeffs = []
        for i in range(self._degree + 1):
            acc = g1_identity()
            for j, x_j in enumerate(x_pow):
                acc = point_add(acc, g1_mul(self._coeffs[coeff_position(i, j)], x_j))
            coeffs.append(acc)
        return Commitment(coeffs)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BivarCommitment):
            return NotImplemented
        return self._degree == other._degree and all(
            points_equal(a, b) for a, b in zip(self._coeffs, other._coeffs)
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"BivarCommitment(degree={self._degree})"
