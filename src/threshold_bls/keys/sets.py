"""
Key sets: a dealer's secret polynomial and its public commitment.

``SecretKeySet`` issues one ``SecretKeyShare`` per participant index. ``PublicKeySet`` is
the part that can be published; it yields the master ``PublicKey``, the expected
``PublicKeyShare`` for every index, and combines ``threshold + 1`` signature or decryption
shares.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Iterable, Optional

from ..codec import validate_index
from ..curve.groups import points_equal
from ..errors import CiphertextTamperedError, InvalidShare
from ..lagrange import interpolate_g1, interpolate_g2, interpolate_gt, interpolate_scalars
from ..poly import Commitment, Poly
from ..utils import get_logger
from .ciphertext import Ciphertext, DecryptionShare, apply_keystream
from .public import PublicKey, PublicKeyShare
from .secret import SecretKey, SecretKeyShare
from .signature import Message, Signature, SignatureShare

logger = get_logger(__name__)


def combine_signatures(threshold: int, shares: Iterable[SignatureShare]) -> Signature:
    """Interpolate signature shares in G2 into the master signature."""
    samples = [(share.index, share.point) for share in shares]
    logger.debug("Combining %d signature shares (threshold %d)", len(samples), threshold)
    return Signature(interpolate_g2(samples, threshold))


def combine_decryption_shares(threshold: int, shares: Iterable[DecryptionShare], ciphertext: Ciphertext) -> bytes:
    """Interpolate decryption shares in GT and strip the keystream from the payload."""
    if not ciphertext.verify():
        logger.warning("Refusing to combine decryption shares for a ciphertext that failed verification")
        raise CiphertextTamperedError("Ciphertext failed verification")
    samples = [(share.index, share.value) for share in shares]
    logger.debug("Combining %d decryption shares (threshold %d)", len(samples), threshold)
    shared = interpolate_gt(samples, threshold)
    return apply_keystream(shared, ciphertext.payload)


def reconstruct_secret_key(threshold: int, shares: Iterable[SecretKeyShare]) -> SecretKey:
    """Recover the master secret key from ``threshold + 1`` secret key shares."""
    return SecretKey(interpolate_scalars(((s.index, s.scalar()) for s in shares), threshold))


def combine_public_key_shares(threshold: int, shares: Iterable[PublicKeyShare]) -> PublicKey:
    return PublicKey(interpolate_g1(((s.index, s.point) for s in shares), threshold))


@dataclass(frozen=True)
class PublicKeySet:
    """Commitment to the dealer's polynomial; its value at 0 is the master public key."""

    commitment: Commitment

    def threshold(self) -> int:
        return self.commitment.degree()

    def public_key(self) -> PublicKey:
        return PublicKey(self.commitment.evaluate(0))

    def public_key_share(self, index: int) -> PublicKeyShare:
        index = validate_index(index)
        return PublicKeyShare(index, self.commitment.evaluate(index))

    def verify_secret_key_share(self, share: SecretKeyShare) -> bool:
        """True if ``G1 * share`` matches the commitment evaluated at the share's index."""
        expected = self.public_key_share(share.index)
        return points_equal(expected.point, share.public_key_share().point)

    def combine_signatures(self, shares: Iterable[SignatureShare], message: Optional[Message] = None) -> Signature:
        """
        Combine signature shares into a signature under :meth:`public_key`.

        When ``message`` is given every share is checked against its public key share first
        and the first failing one raises :class:`InvalidShare`.
        """
        shares = list(shares)
        if message is not None:
            for share in shares:
                if not self.public_key_share(share.index).verify(share, message):
                    logger.warning("Signature share %d failed verification", share.index)
                    raise InvalidShare(share.index)
        return combine_signatures(self.threshold(), shares)

    def decrypt(self, shares: Iterable[DecryptionShare], ciphertext: Ciphertext) -> bytes:
        return combine_decryption_shares(self.threshold(), shares, ciphertext)

    def combine(self, other: "PublicKeySet") -> "PublicKeySet":
        """Sum of two key sets, e.g. the contributions of several dealers."""
        return PublicKeySet(self.commitment + other.commitment)

    def to_bytes(self) -> bytes:
        return self.commitment.to_bytes()

    @classmethod
    def from_bytes(cls, data: bytes) -> "PublicKeySet":
        return cls(Commitment.from_bytes(data))


class SecretKeySet:
    """A dealer's secret polynomial of degree ``threshold``."""

    __slots__ = ("_poly",)

    def __init__(self, poly: Poly) -> None:
        self._poly = poly

    @classmethod
    def random(cls, threshold: int, rng: Optional[random.Random] = None) -> "SecretKeySet":
        """Any ``threshold + 1`` of the issued shares can sign and decrypt together."""
        return cls(Poly.random(threshold, rng))

    def threshold(self) -> int:
        return self._poly.degree()

    def secret_key_share(self, index: int) -> SecretKeyShare:
        index = validate_index(index)
        return SecretKeyShare(index, self._poly.evaluate(index))

    def public_keys(self) -> PublicKeySet:
        return PublicKeySet(self._poly.commitment())

    def secret_key(self) -> SecretKey:
        """The master key, i.e. the polynomial's value at 0."""
        return SecretKey(self._poly.evaluate(0))

    def zeroize(self) -> None:
        self._poly.zeroize()

    def reveal(self) -> str:
        return f"SecretKeySet({self._poly.reveal()})"

    def __enter__(self) -> "SecretKeySet":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:  # noqa: ANN001
        self.zeroize()

    def __repr__(self) -> str:
        return f"SecretKeySet(threshold={self.threshold()}, <redacted>)"
