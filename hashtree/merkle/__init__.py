"""
Merkle Tree and Inclusion Proofs
Deterministic tree construction + proof generation/verification.

This package provides:
- construct / MerkleTreeBuilder: build an immutable tree from ordered records
- MerkleTree: root queries and proof generation
- MerkleProof: self-contained proof, verifiable without the tree

Commitment Rules:
1. Leaf hashing: H(record)
2. Parent hashing: H(left + right)
3. Padding: Duplicate last node if odd number at any level
4. Empty tree: no root
5. Single leaf: root = H(leaf + leaf)

Usage:
    from hashtree.merkle import construct

    tree = construct([b"T1", b"T2", b"T3", b"T4"])
    root = tree.root_hash()

    proof = tree.generate_proof(b"T2")
    assert proof is not None and proof.verify(root)
"""
from .merkle_proofs import (
    Side,
    ProofStep,
    MerkleProof,
    verify_merkle_proof,
    compute_tree_depth,
)
from .merkle_tree import (
    MerkleNode,
    MerkleTree,
)
from .builder import (
    MerkleTreeBuilder,
    construct,
)


__all__ = [
    # Core types
    "MerkleNode",
    "MerkleTree",
    "MerkleProof",
    "ProofStep",
    "Side",
    # Construction
    "MerkleTreeBuilder",
    "construct",
    # Verification
    "verify_merkle_proof",
    "compute_tree_depth",
]
