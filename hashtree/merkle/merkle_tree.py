"""
Merkle Tree
Immutable binary hash tree with root queries and proof generation.

Tree Rules (Hard Contracts):
1. Leaf digest: H(record)
2. Internal digest: H(left.digest + right.digest)
3. Every node has exactly 0 or exactly 2 children
4. Empty input has no root

Trees are produced by hashtree.merkle.builder and never mutated afterwards,
so a published instance can be queried from several threads without locking.

Proof Selection:
- Leaves are searched depth-first, left to right
- The first leaf whose digest matches wins; duplicate records (and padding
  duplicates) are not disambiguated
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field

from hashtree.crypto.hashing import DEFAULT_HASH_ALGORITHM, HashAlgorithm
from hashtree.merkle.merkle_proofs import MerkleProof, ProofStep, Side


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MerkleNode:
    """
    A node in the hash tree.

    Leaves have no children; internal nodes have both. Nodes are immutable,
    so the padding rule can reuse the last node of a level instead of
    deep-copying it.
    """
    digest: bytes
    left: MerkleNode | None = field(default=None, repr=False)
    right: MerkleNode | None = field(default=None, repr=False)

    def __post_init__(self) -> None:
        if (self.left is None) != (self.right is None):
            raise ValueError("A node must have either zero or two children")

    @property
    def is_leaf(self) -> bool:
        return self.left is None

    @classmethod
    def leaf(cls, record: bytes, hash_algorithm: HashAlgorithm) -> MerkleNode:
        """Create a leaf holding the digest of one record."""
        return cls(digest=hash_algorithm(record))

    @classmethod
    def internal(
        cls,
        left: MerkleNode,
        right: MerkleNode,
        hash_algorithm: HashAlgorithm,
    ) -> MerkleNode:
        """Create a parent committing to the concatenation of two children."""
        return cls(
            digest=hash_algorithm(left.digest + right.digest),
            left=left,
            right=right,
        )


@dataclass(frozen=True)
class MerkleTree:
    """
    A built hash tree.

    Attributes:
        root: Root node, or None when built from zero records
        hash_algorithm: Primitive used for every node in the tree
        leaf_count: Number of records the tree was built from
        depth: Levels above the leaves (the length of every proof)

    leaf_count and depth are populated by MerkleTreeBuilder. A tree with a
    root has at least one leaf and one level; an empty tree has neither.
    """
    root: MerkleNode | None
    hash_algorithm: HashAlgorithm = DEFAULT_HASH_ALGORITHM
    leaf_count: int = field(default=0, kw_only=True)
    depth: int = field(default=0, kw_only=True)

    def __post_init__(self) -> None:
        if self.root is None:
            if self.leaf_count or self.depth:
                raise ValueError("An empty tree has no leaves and depth 0")
        elif self.leaf_count < 1 or self.depth < 1:
            raise ValueError(
                f"A tree with a root needs leaf_count >= 1 and depth >= 1, "
                f"got leaf_count={self.leaf_count} depth={self.depth}"
            )

    @property
    def is_empty(self) -> bool:
        return self.root is None

    def root_hash(self) -> bytes | None:
        """Return the root digest, or None for an empty tree."""
        if self.root is None:
            return None
        return self.root.digest

    def root_hash_display(self) -> str | None:
        """Return the root digest as lowercase hex, or None for an empty tree."""
        digest = self.root_hash()
        return digest.hex() if digest is not None else None

    def generate_proof(self, record: bytes) -> MerkleProof | None:
        """
        Generate an inclusion proof for a record.

        Args:
            record: Record bytes exactly as they were given to the builder

        Returns:
            MerkleProof for the first matching leaf, or None if no leaf
            matches (including when the tree is empty)
        """
        if self.root is None:
            return None

        target = self.hash_algorithm(record)
        steps = _find_path(self.root, target)
        if steps is None:
            logger.debug("No leaf matches digest %s", target.hex())
            return None

        return MerkleProof(
            leaf=target,
            steps=tuple(steps),
            hash_algorithm=self.hash_algorithm,
            root=self.root.digest,
        )

    def verify_proof(self, proof: MerkleProof) -> bool:
        """Verify a proof against this tree's root. Always False when empty."""
        if self.root is None:
            return False
        return proof.verify(self.root.digest)

    def contains(self, record: bytes) -> bool:
        """Check whether a record has a leaf in this tree."""
        if self.root is None:
            return False
        return _find_path(self.root, self.hash_algorithm(record)) is not None


def _find_path(node: MerkleNode, target: bytes) -> list[ProofStep] | None:
    """
    Depth-first, left-to-right search for a leaf with the target digest.

    Returns the sibling steps from that leaf up to (but excluding) node,
    leaf-to-root ordered, or None if no leaf under node matches.
    """
    if node.is_leaf:
        return [] if node.digest == target else None

    steps = _find_path(node.left, target)
    if steps is not None:
        steps.append(ProofStep(sibling=node.right.digest, side=Side.RIGHT))
        return steps

    steps = _find_path(node.right, target)
    if steps is not None:
        steps.append(ProofStep(sibling=node.left.digest, side=Side.LEFT))
        return steps

    return None


__all__ = [
    "MerkleNode",
    "MerkleTree",
]
