"""
Fixed-width byte encodings for scalars, indices and group elements.

Every public type exposes ``to_bytes``/``from_bytes`` built from the helpers here;
``encode``/``decode`` dispatch to them generically.
"""

from __future__ import annotations

from typing import Any, Type, TypeVar

from py_ecc.bls.point_compression import compress_G1, compress_G2, decompress_G1, decompress_G2

from .curve.groups import (
    CURVE_ORDER,
    FIELD_MODULUS,
    G1Point,
    G2Point,
    GTElement,
    gt_coefficients,
    gt_from_coefficients,
    gt_one,
    gt_equal,
    in_prime_subgroup,
)
from .errors import DecodeError, InvalidIndex

INDEX_BYTES = 8
SCALAR_BYTES = 32
FQ_BYTES = 48
G1_BYTES = 48
G2_BYTES = 96
GT_BYTES = 12 * FQ_BYTES
MAX_INDEX = 2 ** (8 * INDEX_BYTES) - 1

T = TypeVar("T")


def validate_index(index: Any) -> int:
    """Return ``index`` as an int, rejecting the reserved slot 0 and unencodable values."""
    if isinstance(index, bool) or not isinstance(index, int):
        raise InvalidIndex(f"Share index must be an integer, got {type(index).__name__}")
    if index <= 0:
        raise InvalidIndex(f"Share index must be positive (index 0 is the master key), got {index}")
    if index > MAX_INDEX:
        raise InvalidIndex(f"Share index {index} does not fit in {INDEX_BYTES} bytes")
    return index


def expect_length(data: bytes, length: int, what: str) -> bytes:
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise DecodeError(f"{what} must be bytes, got {type(data).__name__}")
    data = bytes(data)
    if len(data) != length:
        raise DecodeError(f"{what} must be {length} bytes, got {len(data)}")
    return data


def encode_index(index: int) -> bytes:
    return validate_index(index).to_bytes(INDEX_BYTES, byteorder="big")


def decode_index(data: bytes) -> int:
    data = expect_length(data, INDEX_BYTES, "Index")
    index = int.from_bytes(data, byteorder="big")
    if index == 0:
        raise DecodeError("Index 0 is reserved for the master key")
    return index


def encode_scalar(value: int) -> bytes:
    return (int(value) % CURVE_ORDER).to_bytes(SCALAR_BYTES, byteorder="big")


def decode_scalar(data: bytes) -> int:
    data = expect_length(data, SCALAR_BYTES, "Scalar")
    value = int.from_bytes(data, byteorder="big")
    if value >= CURVE_ORDER:
        raise DecodeError("Scalar is not reduced modulo the group order")
    return value


def encode_g1(point: G1Point) -> bytes:
    return int(compress_G1(point)).to_bytes(G1_BYTES, byteorder="big")


def decode_g1(data: bytes) -> G1Point:
    data = expect_length(data, G1_BYTES, "G1 point")
    try:
        point = decompress_G1(int.from_bytes(data, byteorder="big"))
    except ValueError as exc:
        raise DecodeError(f"Invalid G1 point encoding: {exc}") from exc
    if not in_prime_subgroup(point):
        raise DecodeError("G1 point is not in the prime-order subgroup")
    return point


def encode_g2(point: G2Point) -> bytes:
    z1, z2 = compress_G2(point)
    half = G2_BYTES // 2
    return int(z1).to_bytes(half, byteorder="big") + int(z2).to_bytes(half, byteorder="big")


def decode_g2(data: bytes) -> G2Point:
    data = expect_length(data, G2_BYTES, "G2 point")
    half = G2_BYTES // 2
    z1 = int.from_bytes(data[:half], byteorder="big")
    z2 = int.from_bytes(data[half:], byteorder="big")
    try:
        point = decompress_G2((z1, z2))
    except ValueError as exc:
        raise DecodeError(f"Invalid G2 point encoding: {exc}") from exc
    if not in_prime_subgroup(point):
        raise DecodeError("G2 point is not in the prime-order subgroup")
    return point


def encode_gt(value: GTElement) -> bytes:
    return b"".join(c.to_bytes(FQ_BYTES, byteorder="big") for c in gt_coefficients(value))


def decode_gt(data: bytes) -> GTElement:
    data = expect_length(data, GT_BYTES, "GT element")
    coeffs = []
    for offset in range(0, GT_BYTES, FQ_BYTES):
        c = int.from_bytes(data[offset : offset + FQ_BYTES], byteorder="big")
        if c >= FIELD_MODULUS:
            raise DecodeError("GT coefficient is not reduced modulo the field prime")
        coeffs.append(c)
    value = gt_from_coefficients(tuple(coeffs))
    if _is_zero(coeffs) or not gt_equal(value ** CURVE_ORDER, gt_one()):
        raise DecodeError("GT element is not in the order-r subgroup")
    return value


def _is_zero(coeffs: list[int]) -> bool:
    return all(c == 0 for c in coeffs)


def encode(obj: Any) -> bytes:
    """Serialize any public key, share, signature or ciphertext type."""
    to_bytes = getattr(obj, "to_bytes", None)
    if to_bytes is None:
        raise TypeError(f"{type(obj).__name__} has no byte encoding")
    return to_bytes()


def decode(cls: Type[T], data: bytes) -> T:
    """Inverse of :func:`encode` for the given type."""
    from_bytes = getattr(cls, "from_bytes", None)
    if from_bytes is None:
        raise TypeError(f"{cls.__name__} has no byte decoding")
    return from_bytes(data)
