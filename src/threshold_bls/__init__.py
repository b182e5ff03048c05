"""
Threshold BLS signatures and threshold encryption on BLS12-381.

A dealer splits a master key into shares; any ``threshold + 1`` shares can jointly sign,
decrypt, or reconstruct the key, while ``threshold`` or fewer reveal nothing.

Modules:
- curve: pairing-group adapter over py_ecc, keystream derivation
- poly: polynomials, commitments, bivariate polynomials
- keys: keys, shares, signatures, ciphertexts, key sets
- lagrange: interpolation at zero in every group
- codec: fixed-width encodings
- dealer / config: trusted-dealer key generation and key files
"""

from .codec import decode, encode
from .errors import (
    CiphertextTamperedError,
    DecodeError,
    DuplicateIndex,
    InvalidIndex,
    InvalidShare,
    NotEnoughShares,
    ThresholdCryptoError,
)
from .keys import (
    Ciphertext,
    DecryptionShare,
    PublicKey,
    PublicKeySet,
    PublicKeyShare,
    SecretKey,
    SecretKeySet,
    SecretKeyShare,
    Signature,
    SignatureShare,
    combine_decryption_shares,
    combine_public_key_shares,
    combine_signatures,
    reconstruct_secret_key,
)
from .poly import BivarCommitment, BivarPoly, Commitment, Poly

__all__ = [
    "decode",
    "encode",
    "CiphertextTamperedError",
    "DecodeError",
    "DuplicateIndex",
    "InvalidIndex",
    "InvalidShare",
    "NotEnoughShares",
    "ThresholdCryptoError",
    "Ciphertext",
    "DecryptionShare",
    "PublicKey",
    "PublicKeySet",
    "PublicKeyShare",
    "SecretKey",
    "SecretKeySet",
    "SecretKeyShare",
    "Signature",
    "SignatureShare",
    "combine_decryption_shares",
    "combine_public_key_shares",
    "combine_signatures",
    "reconstruct_secret_key",
    "BivarCommitment",
    "BivarPoly",
    "Commitment",
    "Poly",
]
