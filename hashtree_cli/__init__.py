"""
hashtree CLI

Command-line interface for building hash tree commitments.

Usage:
    python -m hashtree_cli root --records records.txt
    python -m hashtree_cli prove "<record>" --records records.txt --out proof.json
    python -m hashtree_cli verify proof.json --root <hex>
    python -m hashtree_cli demo
"""

__version__ = "0.1.0"
