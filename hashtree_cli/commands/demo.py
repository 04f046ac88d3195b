"""
CLI Demo Command

Build a tree over four sample transactions, print the root, verify a proof
for one of them and confirm an unknown transaction has no proof.

Usage:
    hashtree demo
"""

from __future__ import annotations

import logging
from argparse import Namespace

from hashtree.merkle import construct


logger = logging.getLogger(__name__)


EXIT_SUCCESS = 0
EXIT_VERIFICATION_FAILED = 2

SAMPLE_RECORDS: tuple[bytes, ...] = (
    b"Transaction 1",
    b"Transaction 2",
    b"Transaction 3",
    b"Transaction 4",
)


def demo_cmd(args: Namespace) -> int:
    """Execute the demo command."""
    print("Merkle Tree Example")

    tree = construct(SAMPLE_RECORDS, args.hash_algorithm)
    print(f"Merkle Root: {tree.root_hash_display()}")

    proof = tree.generate_proof(b"Transaction 2")
    is_valid = proof is not None and tree.verify_proof(proof)
    print(f"Proof verification: {'Valid' if is_valid else 'Invalid'}")

    absent_ok = tree.generate_proof(b"Transaction 0") is None
    print(f"Invalid data test: {'Passed' if absent_ok else 'Failed'}")

    if is_valid and absent_ok:
        return EXIT_SUCCESS
    logger.error("Demo checks failed")
    return EXIT_VERIFICATION_FAILED
