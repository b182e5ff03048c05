"""
Keystream used to mask ciphertext payloads.

The seed is the encoded GT shared value of a ciphertext. HKDF-SHA256 stretches it into an
AES-256 key and a CTR nonce, and the cipher's output over zero bytes is the keystream, so
encryption and decryption are the same XOR.
"""

from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes
from cryptography.hazmat.primitives.kdf.hkdf import HKDF

KEYSTREAM_INFO = b"threshold-bls/keystream"


def _stream_cipher(seed: bytes) -> Cipher:
    material = HKDF(algorithm=hashes.SHA256(), length=48, salt=None, info=KEYSTREAM_INFO).derive(seed)
    return Cipher(algorithms.AES(material[:32]), modes.CTR(material[32:]))


def keystream_bytes(seed: bytes, length: int) -> bytes:
    if length < 0:
        raise ValueError("length must be non-negative")
    if length == 0:
        return b""
    encryptor = _stream_cipher(seed).encryptor()
    return encryptor.update(b"\x00" * length) + encryptor.finalize()


def xor_with_keystream(seed: bytes, data: bytes) -> bytes:
    """Mask or unmask ``data``; applying it twice with the same seed is the identity."""
    data = bytes(data)
    if not data:
        return b""
    stream = keystream_bytes(seed, len(data))
    masked = int.from_bytes(data, byteorder="big") ^ int.from_bytes(stream, byteorder="big")
    return masked.to_bytes(len(data), byteorder="big")
