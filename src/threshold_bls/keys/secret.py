"""
Secret keys and secret key shares.

Both are context managers: leaving the ``with`` block, normally or through an exception,
overwrites the held scalar with zero. Their ``repr`` never includes the scalar; use
``reveal()`` when the value really has to be printed.
"""

from __future__ import annotations

import hmac
import random
from typing import Optional

from ..codec import INDEX_BYTES, SCALAR_BYTES, decode_index, decode_scalar, encode_index, encode_scalar, expect_length, validate_index
from ..curve.groups import g1_base_mul, g2_mul, hash_to_g2, to_scalar
from ..errors import CiphertextTamperedError
from ..poly import Poly
from ..utils import get_logger
from .ciphertext import Ciphertext, DecryptionShare, apply_keystream, shared_value
from .public import PublicKey, PublicKeyShare
from .signature import Message, Signature, SignatureShare, message_bytes

logger = get_logger(__name__)


class SecretKey:
    __slots__ = ("_scalar",)

    def __init__(self, scalar: int) -> None:
        self._scalar = to_scalar(scalar)

    @classmethod
    def random(cls, rng: Optional[random.Random] = None) -> "SecretKey":
        """A single key: the constant term of a random degree-0 polynomial."""
        poly = Poly.random(0, rng)
        key = cls(poly.evaluate(0))
        poly.zeroize()
        return key

    @classmethod
    def from_scalar(cls, scalar: int) -> "SecretKey":
        return cls(scalar)

    def public_key(self) -> PublicKey:
        return PublicKey(g1_base_mul(self._scalar))

    def sign(self, message: Message) -> Signature:
        return Signature(g2_mul(hash_to_g2(message_bytes(message)), self._scalar))

    def decrypt(self, ciphertext: Ciphertext) -> bytes:
        if not ciphertext.verify():
            logger.warning("Refusing to decrypt a ciphertext that failed verification")
            raise CiphertextTamperedError("Ciphertext failed verification")
        return apply_keystream(shared_value(ciphertext.u, self._scalar), ciphertext.payload)

    def zeroize(self) -> None:
        self._scalar = 0

    def reveal(self) -> str:
        return f"SecretKey({self._scalar:#066x})"

    def __enter__(self) -> "SecretKey":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:  # noqa: ANN001
        self.zeroize()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SecretKey):
            return NotImplemented
        return hmac.compare_digest(self.to_bytes(), other.to_bytes())

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return "SecretKey(<redacted>)"

    def to_bytes(self) -> bytes:
        return encode_scalar(self._scalar)

    @classmethod
    def from_bytes(cls, data: bytes) -> "SecretKey":
        return cls(decode_scalar(data))


class SecretKeyShare:
    """A participant's secret: the dealer's polynomial evaluated at the participant's index."""

    __slots__ = ("_index", "_key")

    def __init__(self, index: int, scalar: int) -> None:
        self._index = validate_index(index)
        self._key = SecretKey(scalar)

    @property
    def index(self) -> int:
        return self._index

    def public_key_share(self) -> PublicKeyShare:
        return PublicKeyShare(self._index, self._key.public_key().point)

    def sign(self, message: Message) -> SignatureShare:
        return SignatureShare(self._index, self._key.sign(message).point)

    def decrypt_share(self, ciphertext: Ciphertext) -> DecryptionShare:
        """Compute this participant's decryption share; the ciphertext is verified first."""
        if not ciphertext.verify():
            logger.warning("Share %d refusing a ciphertext that failed verification", self._index)
            raise CiphertextTamperedError("Ciphertext failed verification")
        return DecryptionShare(self._index, shared_value(ciphertext.u, self._key._scalar))

    def scalar(self) -> int:
        return self._key._scalar

    def zeroize(self) -> None:
        self._key.zeroize()

    def reveal(self) -> str:
        return f"SecretKeyShare(index={self._index}, {self._key._scalar:#066x})"

    def __enter__(self) -> "SecretKeyShare":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:  # noqa: ANN001
        self.zeroize()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SecretKeyShare):
            return NotImplemented
        return hmac.compare_digest(self.to_bytes(), other.to_bytes())

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"SecretKeyShare(index={self._index}, <redacted>)"

    def to_bytes(self) -> bytes:
        return encode_index(self._index) + self._key.to_bytes()

    @classmethod
    def from_bytes(cls, data: bytes) -> "SecretKeyShare":
        data = expect_length(data, INDEX_BYTES + SCALAR_BYTES, "SecretKeyShare")
        return cls(decode_index(data[:INDEX_BYTES]), decode_scalar(data[INDEX_BYTES:]))
