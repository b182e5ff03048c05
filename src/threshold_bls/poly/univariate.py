"""Univariate polynomials over the BLS12-381 scalar field."""

from __future__ import annotations

import random
from typing import Iterable, List, Optional, Sequence, Tuple, Union

from ..curve.groups import CURVE_ORDER, g1_base_mul, random_scalar, to_scalar
from .commitment import Commitment


class Poly:
    """
    A polynomial ``c_0 + c_1 x + ... + c_t x^t`` with scalar coefficients.

    ``c_0`` is the shared secret when the polynomial backs a key set. Instances are
    treated as immutable; arithmetic returns new polynomials with trailing zero
    coefficients trimmed.
    """

    __slots__ = ("_coeffs",)

    def __init__(self, coeffs: Iterable[int]) -> None:
        self._coeffs: List[int] = [to_scalar(c) for c in coeffs]

    @classmethod
    def random(cls, degree: int, rng: Optional[random.Random] = None) -> "Poly":
        """Draw ``degree + 1`` independent uniform coefficients."""
        if degree < 0:
            raise ValueError("degree must be non-negative")
        return cls(random_scalar(rng) for _ in range(degree + 1))

    @classmethod
    def constant(cls, scalar: int) -> "Poly":
        return cls([scalar])

    from_scalar = constant

    @classmethod
    def zero(cls) -> "Poly":
        return cls([])

    @classmethod
    def one(cls) -> "Poly":
        return cls.constant(1)

    @classmethod
    def monomial(cls, degree: int) -> "Poly":
        return cls([0] * degree + [1])

    @classmethod
    def interpolate(cls, samples: Iterable[Tuple[int, int]]) -> "Poly":
        """
        Return the unique polynomial of minimal degree through ``samples``.

        Uses Newton's form: each new point adds a multiple of ``prod (x - x_i)`` over the
        points already included.
        """
        points = [(to_scalar(x), to_scalar(y)) for x, y in samples]
        if not points:
            return cls.zero()
        if len({x for x, _ in points}) != len(points):
            raise ValueError("Interpolation points must have distinct x coordinates")
        x0, y0 = points[0]
        poly = cls.constant(y0)
        base = cls([-x0, 1])
        for x, y in points[1:]:
            diff = (y - poly.evaluate(x)) % CURVE_ORDER
            scale = (diff * pow(base.evaluate(x), -1, CURVE_ORDER)) % CURVE_ORDER
            poly = poly + base * scale
            base = base * cls([-x, 1])
        return poly

    @property
    def coeffs(self) -> Tuple[int, ...]:
        return tuple(self._coeffs)

    def degree(self) -> int:
        return max(len(self._coeffs) - 1, 0)

    def is_zero(self) -> bool:
        return all(c == 0 for c in self._coeffs)

    def evaluate(self, x: int) -> int:
        """Horner evaluation at ``x``."""
        x = to_scalar(x)
        result = 0
        for c in reversed(self._coeffs):
            result = (result * x + c) % CURVE_ORDER
        return result

    def commitment(self) -> Commitment:
        return Commitment(g1_base_mul(c) for c in self._coeffs)

    def zeroize(self) -> None:
        """Overwrite every coefficient with zero."""
        for i in range(len(self._coeffs)):
            self._coeffs[i] = 0

    def reveal(self) -> str:
        """Debug string that *does* include the coefficients."""
        return f"Poly(coeffs={self._coeffs!r})"

    @staticmethod
    def _trimmed(coeffs: Sequence[int]) -> "Poly":
        coeffs = list(coeffs)
        while coeffs and coeffs[-1] == 0:
            coeffs.pop()
        return Poly(coeffs)

    def __add__(self, other: Union["Poly", int]) -> "Poly":
        if isinstance(other, int):
            other = Poly.constant(other)
        if not isinstance(other, Poly):
            return NotImplemented
        length = max(len(self._coeffs), len(other._coeffs))
        a = self._coeffs + [0] * (length - len(self._coeffs))
        b = other._coeffs + [0] * (length - len(other._coeffs))
        return Poly._trimmed((x + y) % CURVE_ORDER for x, y in zip(a, b))

    __radd__ = __add__

    def __neg__(self) -> "Poly":
        return Poly(-c for c in self._coeffs)

    def __sub__(self, other: Union["Poly", int]) -> "Poly":
        if isinstance(other, int):
            other = Poly.constant(other)
        if not isinstance(other, Poly):
            return NotImplemented
        return self + (-other)

    def __mul__(self, other: Union["Poly", int]) -> "Poly":
        if isinstance(other, int):
            scalar = to_scalar(other)
            return Poly._trimmed((c * scalar) % CURVE_ORDER for c in self._coeffs)
        if not isinstance(other, Poly):
            return NotImplemented
        if self.is_zero() or other.is_zero():
            return Poly.zero()
        product = [0] * (len(self._coeffs) + len(other._coeffs) - 1)
        for i, a in enumerate(self._coeffs):
            for j, b in enumerate(other._coeffs):
                product[i + j] = (product[i + j] + a * b) % CURVE_ORDER
        return Poly._trimmed(product)

    __rmul__ = __mul__

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Poly):
            return NotImplemented
        return Poly._trimmed(self._coeffs)._coeffs == Poly._trimmed(other._coeffs)._coeffs

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Poly(degree={self.degree()})"
