"""
Lagrange interpolation at zero over indexed contributions.

The coefficients are computed once over the scalar field; the per-group adapters only
differ in how a contribution is scaled by a coefficient and accumulated.
"""

from __future__ import annotations

from typing import Callable, Dict, Iterable, List, Sequence, Tuple, TypeVar

from .codec import validate_index
from .curve.groups import (
    CURVE_ORDER,
    G1Point,
    G2Point,
    GTElement,
    g1_identity,
    g1_mul,
    g2_identity,
    g2_mul,
    gt_equal,
    gt_mul,
    gt_one,
    gt_pow,
    point_add,
    points_equal,
)
from .errors import DuplicateIndex, NotEnoughShares
from .utils import get_logger

V = TypeVar("V")

logger = get_logger(__name__)


def lagrange_coefficients(indices: Sequence[int]) -> List[int]:
    """
    Return ``lambda_i(0) = prod_{j != i} x_j / (x_j - x_i)`` for each index, mod the group order.
    """
    coeffs: List[int] = []
    for i, x_i in enumerate(indices):
        numerator = 1
        denominator = 1
        for j, x_j in enumerate(indices):
            if i == j:
                continue
            numerator = (numerator * -x_j) % CURVE_ORDER
            denominator = (denominator * (x_i - x_j)) % CURVE_ORDER
        if denominator == 0:
            raise DuplicateIndex(f"Index {x_i} appears more than once")
        coeffs.append((numerator * pow(denominator, -1, CURVE_ORDER)) % CURVE_ORDER)
    return coeffs


def collect_samples(samples: Iterable[Tuple[int, V]], same: Callable[[V, V], bool]) -> Dict[int, V]:
    """Deduplicate identical samples and reject conflicting ones."""
    collected: Dict[int, V] = {}
    for index, value in samples:
        index = validate_index(index)
        if index in collected:
            if not same(collected[index], value):
                raise DuplicateIndex(f"Index {index} was supplied with two different values")
            continue
        collected[index] = value
    return collected


def interpolate(
    samples: Iterable[Tuple[int, V]],
    threshold: int,
    scale: Callable[[V, int], V],
    accumulate: Callable[[V, V], V],
    identity: V,
    same: Callable[[V, V], bool],
) -> V:
    """
    Combine at least ``threshold + 1`` indexed samples into the value at index 0.

    Every distinct sample takes part; for consistent samples any extra ones leave the
    result unchanged.
    """
    if threshold < 0:
        raise ValueError("threshold must be non-negative")
    collected = collect_samples(samples, same)
    if len(collected) < threshold + 1:
        raise NotEnoughShares(
            f"Need at least {threshold + 1} distinct shares, got {len(collected)}"
        )
    indices = sorted(collected)
    logger.debug("Interpolating %d samples (threshold %d)", len(indices), threshold)
    result = identity
    for index, coeff in zip(indices, lagrange_coefficients(indices)):
        result = accumulate(result, scale(collected[index], coeff))
    return result


def interpolate_scalars(samples: Iterable[Tuple[int, int]], threshold: int) -> int:
    return interpolate(
        ((i, int(v) % CURVE_ORDER) for i, v in samples),
        threshold,
        scale=lambda v, c: (v * c) % CURVE_ORDER,
        accumulate=lambda acc, v: (acc + v) % CURVE_ORDER,
        identity=0,
        same=lambda a, b: a == b,
    )


def interpolate_g1(samples: Iterable[Tuple[int, G1Point]], threshold: int) -> G1Point:
    return interpolate(samples, threshold, g1_mul, point_add, g1_identity(), points_equal)


def interpolate_g2(samples: Iterable[Tuple[int, G2Point]], threshold: int) -> G2Point:
    return interpolate(samples, threshold, g2_mul, point_add, g2_identity(), points_equal)


def interpolate_gt(samples: Iterable[Tuple[int, GTElement]], threshold: int) -> GTElement:
    return interpolate(samples, threshold, gt_pow, gt_mul, gt_one(), gt_equal)
