"""
Merkle Tree Builder
Deterministic bottom-up construction of a MerkleTree from ordered records.

Algorithm:
1. Empty input: return a tree with no root
2. Hash every record into a leaf, preserving input order
3. Repeat until a single node remains:
   - If the level has an odd number of nodes, duplicate the last node
   - Pair nodes by index (0,1), (2,3), ... into parents H(left + right)

Padding Rule: the duplicate-last step runs at every level, internal levels
included, and also for a lone leaf.
Example: [a, b, c, d, e] -> [a, b, c, d, e, e] -> [ab, cd, ee]
         -> [ab, cd, ee, ee] -> [abcd, eeee] -> [root]

Determinism Notes:
- No randomness, no sorting: leaf order is the caller's order
- Records are opaque bytes; their content is never inspected
"""
from __future__ import annotations

import logging
from typing import Iterable

from hashtree.crypto.hashing import DEFAULT_HASH_ALGORITHM, HashAlgorithm
from hashtree.merkle.merkle_tree import MerkleNode, MerkleTree


logger = logging.getLogger(__name__)

_BYTES_TYPES = (bytes, bytearray, memoryview)


class MerkleTreeBuilder:
    """
    Builds MerkleTree instances with a fixed hash primitive.

    Example:
        >>> builder = MerkleTreeBuilder()
        >>> tree = builder.build([b"T1", b"T2", b"T3", b"T4"])
        >>> tree.root_hash_display()[:16]
        'edf86ea3d9f827b9'
    """

    def __init__(self, hash_algorithm: HashAlgorithm = DEFAULT_HASH_ALGORITHM) -> None:
        self.hash_algorithm = hash_algorithm

    def build(self, records: Iterable[bytes]) -> MerkleTree:
        """
        Build a tree over records in the given order.

        Args:
            records: Ordered byte-string records (may be empty)

        Returns:
            The built MerkleTree

        Raises:
            TypeError: If a record is not bytes-like (encode text first)
        """
        level: list[MerkleNode] = []
        for position, record in enumerate(records):
            if not isinstance(record, _BYTES_TYPES):
                raise TypeError(
                    f"Record {position} must be bytes-like, got {type(record).__name__}"
                )
            level.append(MerkleNode.leaf(bytes(record), self.hash_algorithm))

        leaf_count = len(level)
        if leaf_count == 0:
            logger.debug("Built empty tree")
            return MerkleTree(root=None, hash_algorithm=self.hash_algorithm)

        depth = 0
        while True:
            if len(level) % 2 == 1:
                level.append(level[-1])
            level = [
                MerkleNode.internal(level[i], level[i + 1], self.hash_algorithm)
                for i in range(0, len(level), 2)
            ]
            depth += 1
            if len(level) == 1:
                break

        logger.debug(
            "Built tree: leaves=%d depth=%d hash_alg=%s",
            leaf_count, depth, self.hash_algorithm.name,
        )
        return MerkleTree(
            root=level[0],
            hash_algorithm=self.hash_algorithm,
            leaf_count=leaf_count,
            depth=depth,
        )


def construct(
    records: Iterable[bytes],
    hash_algorithm: HashAlgorithm = DEFAULT_HASH_ALGORITHM,
) -> MerkleTree:
    """Build a MerkleTree over records. Convenience wrapper around MerkleTreeBuilder."""
    return MerkleTreeBuilder(hash_algorithm).build(records)


__all__ = [
    "MerkleTreeBuilder",
    "construct",
]
