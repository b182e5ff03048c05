"""Exception types raised by threshold key, share and codec operations."""


class ThresholdCryptoError(Exception):
    """Base class for every error raised by this package."""


class InvalidIndex(ThresholdCryptoError, ValueError):
    """A participant index is zero, negative, non-integral or too large to encode."""


class NotEnoughShares(ThresholdCryptoError):
    """Fewer than ``threshold + 1`` distinct shares were supplied."""


class DuplicateIndex(ThresholdCryptoError):
    """Two contributions share an index but carry different values."""


class InvalidShare(ThresholdCryptoError):
    """A share failed verification against its public key share."""

    def __init__(self, index: int, message: str | None = None) -> None:
        self.index = index
        super().__init__(message or f"Share with index {index} failed verification")


class CiphertextTamperedError(ThresholdCryptoError):
    """A ciphertext failed its pairing consistency check."""


class DecodeError(ThresholdCryptoError, ValueError):
    """Serialized input has the wrong length or does not encode a valid element."""
