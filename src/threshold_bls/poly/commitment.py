"""Public commitments to polynomials: each coefficient multiplied onto the G1 generator."""

from __future__ import annotations

from typing import Iterable, Tuple

from ..codec import G1_BYTES, decode_g1, encode_g1
from ..curve.groups import G1Point, g1_identity, g1_mul, point_add, points_equal, to_scalar
from ..errors import DecodeError


class Commitment:
    """
    Commitment to a univariate polynomial.

    ``evaluate(x)`` equals ``G1 * poly.evaluate(x)`` for the committed polynomial, which is
    what makes individual shares verifiable.
    """

    __slots__ = ("_coeffs",)

    def __init__(self, coeffs: Iterable[G1Point]) -> None:
        self._coeffs: Tuple[G1Point, ...] = tuple(coeffs)

    @property
    def coeffs(self) -> Tuple[G1Point, ...]:
        return self._coeffs

    def degree(self) -> int:
        return max(len(self._coeffs) - 1, 0)

    def evaluate(self, x: int) -> G1Point:
        """Horner evaluation in the exponent."""
        x = to_scalar(x)
        result = g1_identity()
        for c in reversed(self._coeffs):
            result = point_add(g1_mul(result, x), c)
        return result

    def __add__(self, other: "Commitment") -> "Commitment":
        if not isinstance(other, Commitment):
            return NotImplemented
        length = max(len(self._coeffs), len(other._coeffs))
        a = self._coeffs + (g1_identity(),) * (length - len(self._coeffs))
        b = other._coeffs + (g1_identity(),) * (length - len(other._coeffs))
        return Commitment(point_add(x, y) for x, y in zip(a, b))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Commitment):
            return NotImplemented
        return len(self._coeffs) == len(other._coeffs) and all(
            points_equal(x, y) for x, y in zip(self._coeffs, other._coeffs)
        )

    def __hash__(self) -> int:
        return hash(self.to_bytes())

    def __repr__(self) -> str:
        return f"Commitment(degree={self.degree()})"

    def to_bytes(self) -> bytes:
        return b"".join(encode_g1(c) for c in self._coeffs)

    @classmethod
    def from_bytes(cls, data: bytes) -> "Commitment":
        data = bytes(data)
        if not data or len(data) % G1_BYTES:
            raise DecodeError(f"Commitment length must be a positive multiple of {G1_BYTES}, got {len(data)}")
        return cls(decode_g1(data[i : i + G1_BYTES]) for i in range(0, len(data), G1_BYTES))
