from .groups import (
    CURVE_ORDER,
    FIELD_MODULUS,
    G1_GENERATOR,
    G2_GENERATOR,
    hash_to_g2,
    pairing,
    pairings_equal,
    random_scalar,
)
from .keystream import keystream_bytes, xor_with_keystream

__all__ = [
    "CURVE_ORDER",
    "FIELD_MODULUS",
    "G1_GENERATOR",
    "G2_GENERATOR",
    "hash_to_g2",
    "pairing",
    "pairings_equal",
    "random_scalar",
    "keystream_bytes",
    "xor_with_keystream",
]
