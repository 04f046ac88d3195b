"""
CLI Root Command

Build a tree over the given records and print its root digest.

Usage:
    hashtree root --records records.txt [--json]
    hashtree root --record T1 --record T2 --record T3 --record T4
"""

from __future__ import annotations

import json
import logging
import sys
from argparse import Namespace

from hashtree.merkle import construct
from hashtree_cli.records import RecordInputError, load_records


logger = logging.getLogger(__name__)


EXIT_SUCCESS = 0
EXIT_RUNTIME_ERROR = 1


def root_cmd(args: Namespace) -> int:
    """
    Execute the root command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code
    """
    config = args.runtime_config
    algorithm = args.hash_algorithm

    try:
        records = load_records(args, config)
    except RecordInputError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    tree = construct(records, algorithm)
    logger.info(f"Built tree over {tree.leaf_count} records")

    if args.json:
        print(json.dumps({
            "root": tree.root_hash_display(),
            "hash_alg": algorithm.name,
            "leaf_count": tree.leaf_count,
            "depth": tree.depth,
        }, indent=2))
    elif tree.is_empty:
        print("root: (empty tree)")
    else:
        print(f"root: {tree.root_hash_display()}")
        print(f"leaves: {tree.leaf_count}")
        print(f"depth: {tree.depth}")

    return EXIT_SUCCESS
