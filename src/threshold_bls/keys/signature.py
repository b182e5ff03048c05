from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from ..codec import (
    G2_BYTES,
    INDEX_BYTES,
    decode_g2,
    decode_index,
    encode_g2,
    encode_index,
    expect_length,
    validate_index,
)
from ..curve.groups import G2Point, points_equal

Message = Union[bytes, bytearray, str]


def message_bytes(message: Message) -> bytes:
    if isinstance(message, str):
        return message.encode("utf-8")
    return bytes(message)


@dataclass(frozen=True, eq=False)
class Signature:
    """BLS signature: the message hash in G2 multiplied by the secret scalar."""

    point: G2Point

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Signature):
            return NotImplemented
        return points_equal(self.point, other.point)

    def __hash__(self) -> int:
        return hash(self.to_bytes())

    def __repr__(self) -> str:
        return f"Signature({self.to_bytes()[:6].hex()}...)"

    def to_bytes(self) -> bytes:
        return encode_g2(self.point)

    @classmethod
    def from_bytes(cls, data: bytes) -> "Signature":
        return cls(decode_g2(data))


@dataclass(frozen=True, eq=False)
class SignatureShare:
    """Signature produced by one key share, tagged with that share's index."""

    index: int
    point: G2Point

    def __post_init__(self) -> None:
        validate_index(self.index)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SignatureShare):
            return NotImplemented
        return self.index == other.index and points_equal(self.point, other.point)

    def __hash__(self) -> int:
        return hash(self.to_bytes())

    def __repr__(self) -> str:
        return f"SignatureShare(index={self.index}, {encode_g2(self.point)[:6].hex()}...)"

    def to_bytes(self) -> bytes:
        return encode_index(self.index) + encode_g2(self.point)

    @classmethod
    def from_bytes(cls, data: bytes) -> "SignatureShare":
        data = expect_length(data, INDEX_BYTES + G2_BYTES, "SignatureShare")
        return cls(decode_index(data[:INDEX_BYTES]), decode_g2(data[INDEX_BYTES:]))
