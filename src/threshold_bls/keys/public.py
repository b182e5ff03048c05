from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Optional

from ..codec import G1_BYTES, INDEX_BYTES, decode_g1, decode_index, encode_g1, encode_index, expect_length, validate_index
from ..curve.groups import (
    G1_GENERATOR,
    G1Point,
    g1_base_mul,
    g1_mul,
    g2_mul,
    hash_to_g2,
    pairing,
    pairings_equal,
    point_add,
    points_equal,
    random_scalar,
)
from .ciphertext import Ciphertext, apply_keystream, key_point, tag_point
from .signature import Message, Signature, SignatureShare, message_bytes


@dataclass(frozen=True, eq=False)
class PublicKey:
    """Master (or single-party) public key ``G1 * s``."""

    point: G1Point

    def verify(self, signature: Signature, message: Message) -> bool:
        """Check ``e(G1, sig) == e(pk, H(message))``."""
        if not isinstance(signature, Signature):
            return False
        return pairings_equal(G1_GENERATOR, signature.point, self.point, hash_to_g2(message_bytes(message)))

    def encrypt(self, plaintext: bytes, rng: Optional[random.Random] = None) -> Ciphertext:
        """Encrypt ``plaintext`` so that the matching secret key, or ``t + 1`` shares of it, can decrypt."""
        r = random_scalar(rng)
        u = g1_base_mul(r)
        shared = pairing(g1_mul(self.point, r), key_point(u))
        payload = apply_keystream(shared, bytes(plaintext))
        w = g2_mul(tag_point(u, payload), r)
        return Ciphertext(u=u, w=w, payload=payload)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PublicKey):
            return NotImplemented
        return points_equal(self.point, other.point)

    def __hash__(self) -> int:
        return hash(self.to_bytes())

    def __repr__(self) -> str:
        return f"PublicKey({self.to_bytes()[:6].hex()}...)"

    def to_bytes(self) -> bytes:
        return encode_g1(self.point)

    @classmethod
    def from_bytes(cls, data: bytes) -> "PublicKey":
        return cls(decode_g1(data))


@dataclass(frozen=True, eq=False)
class PublicKeyShare:
    """The commitment evaluated at a participant's index; equals ``G1 * share``."""

    index: int
    point: G1Point

    def __post_init__(self) -> None:
        validate_index(self.index)

    @property
    def public_key(self) -> PublicKey:
        return PublicKey(self.point)

    def verify(self, share: SignatureShare, message: Message) -> bool:
        """Check a signature share from the participant holding this index."""
        if not isinstance(share, SignatureShare) or share.index != self.index:
            return False
        return self.public_key.verify(Signature(share.point), message)

    def combine(self, other: "PublicKeyShare") -> "PublicKeyShare":
        """Sum two shares for the same index, e.g. contributions from different dealers."""
        if other.index != self.index:
            raise ValueError(f"Cannot combine public key shares {self.index} and {other.index}")
        return PublicKeyShare(self.index, point_add(self.point, other.point))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PublicKeyShare):
            return NotImplemented
        return self.index == other.index and points_equal(self.point, other.point)

    def __hash__(self) -> int:
        return hash(self.to_bytes())

    def __repr__(self) -> str:
        return f"PublicKeyShare(index={self.index}, {encode_g1(self.point)[:6].hex()}...)"

    def to_bytes(self) -> bytes:
        return encode_index(self.index) + encode_g1(self.point)

    @classmethod
    def from_bytes(cls, data: bytes) -> "PublicKeyShare":
        data = expect_length(data, INDEX_BYTES + G1_BYTES, "PublicKeyShare")
        return cls(decode_index(data[:INDEX_BYTES]), decode_g1(data[INDEX_BYTES:]))
