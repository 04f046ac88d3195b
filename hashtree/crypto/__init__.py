"""
Core cryptographic utilities.

Provides the hash primitive strategies used by the tree builder.
"""
from .hashing import (
    HashAlgorithm,
    SHA256,
    SHA512,
    SHA3_256,
    BLAKE2B_256,
    DEFAULT_HASH_ALGORITHM,
    HASH_ALGORITHMS,
    get_hash_algorithm,
    sha256,
    hash_concat,
    to_hex,
    from_hex,
)

__all__ = [
    "HashAlgorithm",
    "SHA256",
    "SHA512",
    "SHA3_256",
    "BLAKE2B_256",
    "DEFAULT_HASH_ALGORITHM",
    "HASH_ALGORITHMS",
    "get_hash_algorithm",
    "sha256",
    "hash_concat",
    "to_hex",
    "from_hex",
]
