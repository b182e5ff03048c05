"""
Pairing-based encryption payloads.

For a master key ``pk = G1 * s`` and ephemeral ``r``:

* ``U = G1 * r``
* the shared value is ``K = e(pk * r, H_key(U)) = e(U * s, H_key(U))``
* ``payload = plaintext XOR keystream(K)``
* ``W = H_ct(U, payload) * r`` binds ``U`` and the payload, checked by
  ``e(G1, W) == e(U, H_ct(U, payload))``.

A decryption share is ``e(U * s_i, H_key(U))``; shares combine multiplicatively in GT.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..codec import (
    G1_BYTES,
    G2_BYTES,
    GT_BYTES,
    INDEX_BYTES,
    decode_g1,
    decode_g2,
    decode_gt,
    decode_index,
    encode_g1,
    encode_g2,
    encode_gt,
    encode_index,
    expect_length,
    validate_index,
)
from ..curve.groups import (
    CIPHERTEXT_DST,
    G1_GENERATOR,
    KEY_DST,
    G1Point,
    G2Point,
    GTElement,
    g1_mul,
    gt_equal,
    hash_to_g2,
    pairing,
    pairings_equal,
    points_equal,
)
from ..curve.keystream import xor_with_keystream
from ..errors import DecodeError


def tag_point(u: G1Point, payload: bytes) -> G2Point:
    return hash_to_g2(encode_g1(u) + payload, CIPHERTEXT_DST)


def key_point(u: G1Point) -> G2Point:
    return hash_to_g2(encode_g1(u), KEY_DST)


def shared_value(u: G1Point, scalar: int) -> GTElement:
    """``e(U * scalar, H_key(U))``: the full shared value for the master scalar, a share otherwise."""
    return pairing(g1_mul(u, scalar), key_point(u))


def apply_keystream(shared: GTElement, data: bytes) -> bytes:
    return xor_with_keystream(encode_gt(shared), data)


@dataclass(frozen=True, eq=False)
class Ciphertext:
    u: G1Point
    w: G2Point
    payload: bytes

    def verify(self) -> bool:
        """True if ``W`` matches ``U`` and the payload; tampered ciphertexts fail."""
        return pairings_equal(G1_GENERATOR, self.w, self.u, tag_point(self.u, self.payload))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Ciphertext):
            return NotImplemented
        return (
            points_equal(self.u, other.u)
            and points_equal(self.w, other.w)
            and self.payload == other.payload
        )

    def __hash__(self) -> int:
        return hash(self.to_bytes())

    def __repr__(self) -> str:
        return f"Ciphertext(payload_len={len(self.payload)})"

    def to_bytes(self) -> bytes:
        return encode_g1(self.u) + encode_g2(self.w) + bytes(self.payload)

    @classmethod
    def from_bytes(cls, data: bytes) -> "Ciphertext":
        data = bytes(data)
        header = G1_BYTES + G2_BYTES
        if len(data) < header:
            raise DecodeError(f"Ciphertext must be at least {header} bytes, got {len(data)}")
        return cls(decode_g1(data[:G1_BYTES]), decode_g2(data[G1_BYTES:header]), data[header:])


@dataclass(frozen=True, eq=False)
class DecryptionShare:
    """One participant's GT contribution towards the shared value of a ciphertext."""

    index: int
    value: GTElement

    def __post_init__(self) -> None:
        validate_index(self.index)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DecryptionShare):
            return NotImplemented
        return self.index == other.index and gt_equal(self.value, other.value)

    def __hash__(self) -> int:
        return hash(self.to_bytes())

    def __repr__(self) -> str:
        return f"DecryptionShare(index={self.index})"

    def to_bytes(self) -> bytes:
        return encode_index(self.index) + encode_gt(self.value)

    @classmethod
    def from_bytes(cls, data: bytes) -> "DecryptionShare":
        data = expect_length(data, INDEX_BYTES + GT_BYTES, "DecryptionShare")
        return cls(decode_index(data[:INDEX_BYTES]), decode_gt(data[INDEX_BYTES:]))
