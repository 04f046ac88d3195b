"""
Merkle Inclusion Proofs
Self-contained proof structure and verification.

A proof is the leaf digest plus the sibling digests met on the way from that
leaf to the root, each tagged with the side the sibling sits on. It carries
everything needed to recompute the root, so it can be checked long after the
tree that produced it is gone, against a root obtained out of band.

Verification Rules:
1. Start from the leaf digest
2. For each step, in stored (leaf-to-root) order:
   - sibling on the LEFT:  current = H(sibling + current)
   - sibling on the RIGHT: current = H(current + sibling)
3. The proof is valid iff the final digest equals the expected root byte for byte

Verification is a pure predicate: a mismatch returns False, it never raises.
"""
from __future__ import annotations

import hmac
from dataclasses import dataclass
from enum import Enum

from hashtree.crypto.hashing import DEFAULT_HASH_ALGORITHM, HashAlgorithm, hash_concat


class Side(str, Enum):
    """Which operand a sibling digest is when hashing with the path node."""

    LEFT = "left"
    RIGHT = "right"

    @property
    def opposite(self) -> "Side":
        return Side.RIGHT if self is Side.LEFT else Side.LEFT


@dataclass(frozen=True)
class ProofStep:
    """One level of an inclusion proof."""

    sibling: bytes
    side: Side


@dataclass(frozen=True)
class MerkleProof:
    """
    An inclusion proof for a single record.

    Attributes:
        leaf: Digest of the proven record
        steps: Sibling digests with their sides, leaf-to-root
        hash_algorithm: Primitive the proof must be replayed with
        root: Root of the tree the proof was generated from. Informational
            only; verify() always takes the expected root as an argument.
    """
    leaf: bytes
    steps: tuple[ProofStep, ...]
    hash_algorithm: HashAlgorithm = DEFAULT_HASH_ALGORITHM
    root: bytes | None = None

    def __len__(self) -> int:
        return len(self.steps)

    def compute_root(self) -> bytes:
        """Fold the steps over the leaf digest and return the resulting root."""
        current = self.leaf
        for step in self.steps:
            if step.side is Side.LEFT:
                current = hash_concat(step.sibling, current, self.hash_algorithm)
            else:
                current = hash_concat(current, step.sibling, self.hash_algorithm)
        return current

    def verify(self, expected_root: bytes | None) -> bool:
        """
        Check this proof against a claimed root digest.

        Args:
            expected_root: Root digest obtained independently of the proof.
                None (an empty tree has no root) never verifies.

        Returns:
            True if replaying the proof reproduces expected_root exactly
        """
        if expected_root is None:
            return False
        return hmac.compare_digest(self.compute_root(), bytes(expected_root))


def verify_merkle_proof(proof: MerkleProof, expected_root: bytes | None) -> bool:
    """Functional form of MerkleProof.verify()."""
    return proof.verify(expected_root)


def compute_tree_depth(num_leaves: int) -> int:
    """
    Compute the number of levels above the leaves in a padded tree.

    This is also the length of every inclusion proof from that tree.
    A lone leaf is paired with its duplicate, so one leaf gives depth 1.

    Args:
        num_leaves: Number of records the tree was built from

    Returns:
        Tree depth (0 for empty tree)
    """
    if num_leaves < 0:
        raise ValueError(f"num_leaves must be non-negative, got {num_leaves}")
    if num_leaves == 0:
        return 0
    if num_leaves == 1:
        return 1
    # ceil(log2(n)) without float rounding
    return (num_leaves - 1).bit_length()


__all__ = [
    "Side",
    "ProofStep",
    "MerkleProof",
    "verify_merkle_proof",
    "compute_tree_depth",
]
