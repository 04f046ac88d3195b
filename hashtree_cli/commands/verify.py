"""
CLI Verify Command

Verify a proof document offline against a trusted root.

- Decode the proof document
- Optionally check the proof's leaf is the digest of a given record
- Replay the proof and compare with the root

Usage:
    hashtree verify proof.json --root <hex> [--record "Transaction 2"] [--json]
"""

from __future__ import annotations

import json
import logging
import sys
from argparse import Namespace
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any

from hashtree.schemas.errors import ErrorCodes, HashTreeException
from hashtree.schemas.proof import ProofDocument
from hashtree.schemas.versioning import UnsupportedSchemaVersionError
from hashtree_cli.records import encode_record, parse_digest


logger = logging.getLogger(__name__)


# Exit codes
EXIT_SUCCESS = 0
EXIT_RUNTIME_ERROR = 1
EXIT_VERIFICATION_FAILED = 2


@dataclass
class VerifySummary:
    """Summary of proof verification for CLI output."""
    proof_path: str = ""
    hash_alg: str = ""
    root: str = ""
    root_source: str = "argument"
    depth: int = 0
    leaf_ok: bool | None = None
    proof_ok: bool = False
    errors: list[dict[str, Any]] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        d = asdict(self)
        if self.leaf_ok is None:
            del d["leaf_ok"]
        if not d["errors"]:
            del d["errors"]
        return d

    @property
    def all_ok(self) -> bool:
        """Check if all verifications passed."""
        return self.proof_ok and self.leaf_ok is not False


def print_summary_human(summary: VerifySummary) -> None:
    """Print summary in human-readable format."""
    print(f"proof: {summary.proof_path}")
    print(f"hash_alg: {summary.hash_alg}")
    print(f"root: {summary.root} ({summary.root_source})")
    print(f"depth: {summary.depth}")
    if summary.leaf_ok is not None:
        print(f"leaf_ok: {str(summary.leaf_ok).lower()}")
    print(f"proof_ok: {str(summary.proof_ok).lower()}")

    if summary.errors:
        print(f"\nerrors ({len(summary.errors)}):")
        for err in summary.errors:
            print(f"  ✗ {err['code']}: {err['message']}")


def verify_cmd(args: Namespace) -> int:
    """
    Execute the verify command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code
    """
    proof_path = Path(args.proof_path)
    if not proof_path.is_file():
        print(f"Error: Proof not found: {proof_path}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    try:
        document = ProofDocument.from_json(proof_path.read_text())
        proof = document.to_proof()
    except HashTreeException as e:
        if args.json:
            print(e.to_error_model().model_dump_json(indent=2))
        print(f"Error loading proof: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR
    except UnsupportedSchemaVersionError as e:
        print(f"Error loading proof: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    summary = VerifySummary(
        proof_path=str(proof_path),
        hash_alg=proof.hash_algorithm.name,
        depth=len(proof),
    )

    if args.root is not None:
        try:
            expected_root = parse_digest(args.root)
        except ValueError as e:
            print(f"Error: invalid --root: {e}", file=sys.stderr)
            return EXIT_RUNTIME_ERROR
    elif proof.root is not None:
        logger.warning(
            "No --root given; checking against the root embedded in the proof. "
            "This only shows the proof is internally consistent."
        )
        expected_root = proof.root
        summary.root_source = "embedded"
    else:
        print("Error: --root is required (proof carries no root)", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    summary.root = expected_root.hex()

    if args.record is not None:
        record = encode_record(args.record, args.runtime_config)
        summary.leaf_ok = proof.hash_algorithm(record) == proof.leaf
        if not summary.leaf_ok:
            summary.errors.append({
                "code": ErrorCodes.LEAF_MISMATCH,
                "message": "Proof leaf is not the digest of the given record",
            })

    summary.proof_ok = proof.verify(expected_root)
    if not summary.proof_ok:
        summary.errors.append({
            "code": ErrorCodes.ROOT_MISMATCH,
            "message": "Replayed proof does not reproduce the expected root",
        })

    if args.json:
        print(json.dumps(summary.to_dict(), indent=2))
    else:
        print_summary_human(summary)

    if summary.all_ok:
        logger.info("Verification passed")
        return EXIT_SUCCESS

    logger.warning("Verification failed")
    return EXIT_VERIFICATION_FAILED
