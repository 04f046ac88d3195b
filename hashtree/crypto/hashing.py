"""
Hashing Utilities
Hash primitive strategies and hex helpers for hash tree commitments.

This module provides:
- HashAlgorithm: named, fixed-size digest strategy passed to the tree builder
- A registry of hashlib-backed algorithms (sha256 is the default)
- hash_concat for internal-node digests
- Hex encoding/decoding with 0x prefix for wire documents

Security/Determinism Notes:
- Leaf records and internal concatenations go through the same primitive;
  there is no domain-separation prefix
- All operations are deterministic
"""
from __future__ import annotations

import hashlib
from dataclasses import dataclass, field
from typing import Callable

from hashtree.schemas.errors import UnsupportedHashAlgorithmException


@dataclass(frozen=True)
class HashAlgorithm:
    """
    A deterministic digest function over arbitrary bytes.

    Instances are callable: ``SHA256(b"data")`` returns the digest.

    Attributes:
        name: Registry name, recorded in proof documents
        digest_size: Length of every digest in bytes
        func: Callable mapping bytes to a digest of digest_size bytes
    """
    name: str
    digest_size: int
    func: Callable[[bytes], bytes] = field(repr=False, compare=False)

    def __call__(self, data: bytes) -> bytes:
        return self.func(data)


def sha256(data: bytes) -> bytes:
    """
    Compute SHA-256 hash of raw bytes.

    Example:
        >>> sha256(b"hello").hex()
        '2cf24dba5fb0a30e26e83b2ac5b9e29e1b161e5c1fa7425e73043362938b9824'
    """
    return hashlib.sha256(data).digest()


def _sha512(data: bytes) -> bytes:
    return hashlib.sha512(data).digest()


def _sha3_256(data: bytes) -> bytes:
    return hashlib.sha3_256(data).digest()


def _blake2b_256(data: bytes) -> bytes:
    return hashlib.blake2b(data, digest_size=32).digest()


SHA256 = HashAlgorithm(name="sha256", digest_size=32, func=sha256)
SHA512 = HashAlgorithm(name="sha512", digest_size=64, func=_sha512)
SHA3_256 = HashAlgorithm(name="sha3_256", digest_size=32, func=_sha3_256)
BLAKE2B_256 = HashAlgorithm(name="blake2b", digest_size=32, func=_blake2b_256)

DEFAULT_HASH_ALGORITHM: HashAlgorithm = SHA256

HASH_ALGORITHMS: dict[str, HashAlgorithm] = {
    alg.name: alg for alg in (SHA256, SHA512, SHA3_256, BLAKE2B_256)
}


def get_hash_algorithm(name: str) -> HashAlgorithm:
    """
    Look up a registered hash algorithm by name.

    Lookup is case-insensitive and accepts "-" in place of "_"
    (so "SHA3-256" resolves to sha3_256).

    Raises:
        UnsupportedHashAlgorithmException: If no algorithm is registered
            under that name
    """
    key = name.strip().lower().replace("-", "_")
    try:
        return HASH_ALGORITHMS[key]
    except KeyError:
        raise UnsupportedHashAlgorithmException(
            f"Unsupported hash algorithm: {name!r}",
            details={"supported": sorted(HASH_ALGORITHMS)},
        ) from None


def hash_concat(
    left: bytes,
    right: bytes,
    hash_algorithm: HashAlgorithm = DEFAULT_HASH_ALGORITHM,
) -> bytes:
    """
    Hash the concatenation of two byte sequences.

    This is used for computing internal-node digests:
    parent = H(left + right)
    """
    return hash_algorithm(left + right)


def to_hex(data: bytes) -> str:
    """
    Convert bytes to hexadecimal string with 0x prefix.

    Example:
        >>> to_hex(bytes.fromhex("deadbeef"))
        '0xdeadbeef'
    """
    return "0x" + data.hex()


def from_hex(hex_string: str) -> bytes:
    """
    Convert hexadecimal string (with 0x prefix) to bytes.

    Raises:
        ValueError: If string doesn't start with 0x, has odd length,
                   or contains invalid hex characters
    """
    if not hex_string.startswith("0x"):
        raise ValueError(
            f"Hex string must start with '0x' prefix, got: {hex_string[:10]}..."
        )

    hex_content = hex_string[2:]

    if len(hex_content) % 2 != 0:
        raise ValueError(
            f"Hex string must have even length after 0x prefix, "
            f"got length {len(hex_content)}"
        )

    try:
        return bytes.fromhex(hex_content)
    except ValueError as e:
        raise ValueError(f"Invalid hex characters in string: {e}") from e


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
