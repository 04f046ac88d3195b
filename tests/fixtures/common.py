"""
Common test fixtures shared by all modules.

Provides:
- Golden digests for the reference record sets (SHA-256)
- Record factories
"""

import hashlib


# =============================================================================
# Golden Values (SHA-256)
# =============================================================================

GOLDEN_RECORDS: list[bytes] = [b"T1", b"T2", b"T3", b"T4"]

GOLDEN_LEAVES: dict[bytes, str] = {
    b"T1": "1f93603db53bfad5c92390f735d0cbb8617b4ab8214ae91c5664a3d1e9b009c8",
    b"T2": "0f617ba98e6a0f426517e51aff86858da592399abcde80b1b5995a6d0b71a055",
    b"T3": "5dd67f7fb9c529cb28245800137482c9c2fdff9b7d22f54cd3bfa90c59b78481",
    b"T4": "11ee5e9af3eec0dc5afa6d11db4f11e5a7a9ec95a8668da51b20155729a32bbe",
}

# H(T1 leaf + T2 leaf) and H(T3 leaf + T4 leaf)
GOLDEN_T1_T2 = "7da210d9768a05ddb0c9763624792d2b069bcf2ec174dee7c5971ff20d890976"
GOLDEN_T3_T4 = "2065ef19d604ae160374752bfd5438eab43881641f4be108998ad5bb6de1d772"

GOLDEN_ROOT_HEX = "edf86ea3d9f827b9653b5d2d3e99d8661145c676e7903a6ba2fc7ef482a1e504"

# construct([b"A"]): H(H("A") + H("A"))
SINGLE_A_ROOT_HEX = "e2d7d313d2e64f38e362097ddc2751bd68731aee8a851fa94e7b6a4b327ff5ab"

TRANSACTIONS: list[bytes] = [
    b"Transaction 1",
    b"Transaction 2",
    b"Transaction 3",
    b"Transaction 4",
]
TRANSACTIONS_ROOT_HEX = "fdf76ad58a4424e78b8a87bfcc90caa0c1299e9fd99d10f40588a838194b661f"


# =============================================================================
# Factories
# =============================================================================

def make_records(count: int, prefix: str = "record") -> list[bytes]:
    """Create count distinct records: b"record-0", b"record-1", ..."""
    return [f"{prefix}-{i}".encode() for i in range(count)]


def h(data: bytes) -> bytes:
    """Reference SHA-256, independent of the package under test."""
    return hashlib.sha256(data).digest()


def flip_bit(data: bytes, bit: int = 0) -> bytes:
    """Return data with one bit flipped."""
    buf = bytearray(data)
    buf[bit // 8] ^= 1 << (bit % 8)
    return bytes(buf)
