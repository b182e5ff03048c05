from .ciphertext import Ciphertext, DecryptionShare
from .public import PublicKey, PublicKeyShare
from .secret import SecretKey, SecretKeyShare
from .sets import (
    PublicKeySet,
    SecretKeySet,
    combine_decryption_shares,
    combine_public_key_shares,
    combine_signatures,
    reconstruct_secret_key,
)
from .signature import Signature, SignatureShare

__all__ = [
    "Ciphertext",
    "DecryptionShare",
    "PublicKey",
    "PublicKeyShare",
    "SecretKey",
    "SecretKeyShare",
    "PublicKeySet",
    "SecretKeySet",
    "combine_decryption_shares",
    "combine_public_key_shares",
    "combine_signatures",
    "reconstruct_secret_key",
    "Signature",
    "SignatureShare",
]
