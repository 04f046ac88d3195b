"""
hashtree - binary hash tree commitments with inclusion proofs.

Build a tree over ordered records, publish its root, and hand out proofs
that any party can check against that root without the tree.
"""

from hashtree.crypto.hashing import (
    DEFAULT_HASH_ALGORITHM,
    HashAlgorithm,
    get_hash_algorithm,
)
from hashtree.merkle import (
    MerkleNode,
    MerkleProof,
    MerkleTree,
    MerkleTreeBuilder,
    ProofStep,
    Side,
    compute_tree_depth,
    construct,
    verify_merkle_proof,
)

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_HASH_ALGORITHM",
    "HashAlgorithm",
    "get_hash_algorithm",
    "MerkleNode",
    "MerkleProof",
    "MerkleTree",
    "MerkleTreeBuilder",
    "ProofStep",
    "Side",
    "compute_tree_depth",
    "construct",
    "verify_merkle_proof",
]
