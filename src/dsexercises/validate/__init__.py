"""
Validation utilities public API.

Re-exports:
    - Oracle:
        ORACLE_NAME
        oracle_sort
        equals_oracle

    - Property checks:
        is_nondecreasing
        is_nonincreasing
        first_nondecreasing_violation_index
        is_permutation
        permutation_counter_diff
        bst_violation
"""

from .oracle import ORACLE_NAME, equals_oracle, oracle_sort
from .properties import (
    bst_violation,
    first_nondecreasing_violation_index,
    is_nondecreasing,
    is_nonincreasing,
    is_permutation,
    permutation_counter_diff,
)

__all__ = [
    "ORACLE_NAME",
    "oracle_sort",
    "equals_oracle",
    "is_nondecreasing",
    "is_nonincreasing",
    "first_nondecreasing_violation_index",
    "is_permutation",
    "permutation_counter_diff",
    "bst_violation",
]
