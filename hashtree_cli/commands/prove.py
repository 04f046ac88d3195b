"""
CLI Prove Command

Generate an inclusion proof document for one record.

Usage:
    hashtree prove "Transaction 2" --records records.txt [--out proof.json]
"""

from __future__ import annotations

import json
import logging
import sys
from argparse import Namespace
from pathlib import Path

from hashtree.merkle import construct
from hashtree.schemas.errors import ErrorCodes, HashTreeError
from hashtree.schemas.proof import ProofDocument
from hashtree_cli.records import RecordInputError, encode_record, load_records


logger = logging.getLogger(__name__)


EXIT_SUCCESS = 0
EXIT_RUNTIME_ERROR = 1
EXIT_NOT_FOUND = 2


def prove_cmd(args: Namespace) -> int:
    """
    Execute the prove command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (2 when the record is not in the tree)
    """
    config = args.runtime_config

    try:
        records = load_records(args, config)
    except RecordInputError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    tree = construct(records, args.hash_algorithm)
    proof = tree.generate_proof(encode_record(args.target, config))

    if proof is None:
        error = HashTreeError(
            code=ErrorCodes.RECORD_NOT_FOUND,
            message=f"Record not found in tree of {tree.leaf_count} records",
            details={"record": args.target},
        )
        if args.json:
            print(error.model_dump_json(indent=2))
        else:
            print(f"Error: {error.message}", file=sys.stderr)
        logger.warning("Proof generation failed: record not found")
        return EXIT_NOT_FOUND

    document = ProofDocument.from_proof(proof)

    if args.out:
        out_path = Path(args.out)
        out_path.write_text(document.to_json() + "\n")
        logger.info(f"Wrote proof with {document.depth} steps to {out_path}")
        if args.json:
            print(json.dumps({
                "proof": str(out_path),
                "root": tree.root_hash_display(),
                "depth": document.depth,
            }, indent=2))
        else:
            print(f"proof: {out_path}")
            print(f"root: {tree.root_hash_display()}")
    else:
        print(document.to_json())

    return EXIT_SUCCESS
