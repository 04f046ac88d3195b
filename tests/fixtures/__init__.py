"""
Test fixtures package.

Import factory functions and constants from here:
    from fixtures import GOLDEN_ROOT_HEX, make_records
"""

from .common import (
    GOLDEN_LEAVES,
    GOLDEN_RECORDS,
    GOLDEN_ROOT_HEX,
    GOLDEN_T1_T2,
    GOLDEN_T3_T4,
    SINGLE_A_ROOT_HEX,
    TRANSACTIONS,
    TRANSACTIONS_ROOT_HEX,
    flip_bit,
    h,
    make_records,
)

__all__ = [
    "GOLDEN_LEAVES",
    "GOLDEN_RECORDS",
    "GOLDEN_ROOT_HEX",
    "GOLDEN_T1_T2",
    "GOLDEN_T3_T4",
    "SINGLE_A_ROOT_HEX",
    "TRANSACTIONS",
    "TRANSACTIONS_ROOT_HEX",
    "flip_bit",
    "h",
    "make_records",
]
