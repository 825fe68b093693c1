"""
Property checks for sorted output and for the binary search tree.

Used by the test-suite and by the benchmark harness (output validation).

Public API (stable):
    is_nondecreasing(xs) -> bool
    is_nonincreasing(xs) -> bool
    first_nondecreasing_violation_index(xs) -> int | None
    is_permutation(a, b) -> bool
    permutation_counter_diff(a, b) -> dict[int, int]
    bst_violation(tree) -> tuple[int, int] | None

Notes
-----
- Stability is not checked: equal integers are indistinguishable. A stability test
  needs tagged items such as (key, id) pairs.
"""

from __future__ import annotations

from collections import Counter
from typing import Dict, List, Optional, Sequence, Tuple

from dsexercises.structures.bstree import BSTree

__all__ = [
    "is_nondecreasing",
    "is_nonincreasing",
    "first_nondecreasing_violation_index",
    "is_permutation",
    "permutation_counter_diff",
    "bst_violation",
]


def is_nondecreasing(xs: Sequence[int]) -> bool:
    """Return True iff xs[i] <= xs[i+1] for all i."""
    return first_nondecreasing_violation_index(xs) is None


def is_nonincreasing(xs: Sequence[int]) -> bool:
    """Return True iff xs[i] >= xs[i+1] for all i (e.g. values popped off a sorted stack)."""
    return all(xs[i] >= xs[i + 1] for i in range(len(xs) - 1))


def first_nondecreasing_violation_index(xs: Sequence[int]) -> int | None:
    """
    Return the first index i where xs[i] > xs[i+1], or None if nondecreasing.

    Handy for error messages:
        i = first_nondecreasing_violation_index(out)
        assert i is None, f"not nondecreasing at i={i}: {out[i]} > {out[i+1]}"
    """
    for i in range(len(xs) - 1):
        if xs[i] > xs[i + 1]:
            return i
    return None


def is_permutation(a: Sequence[int], b: Sequence[int]) -> bool:
    """Return True iff `a` and `b` hold the same multiset of values."""
    return len(a) == len(b) and Counter(a) == Counter(b)


def permutation_counter_diff(a: Sequence[int], b: Sequence[int]) -> Dict[int, int]:
    """
    Return value -> (count in a - count in b) for every value whose counts differ.

    An empty dict means `a` and `b` are permutations of each other.
    """
    ca, cb = Counter(a), Counter(b)
    diff: Dict[int, int] = {}
    for k in ca.keys() | cb.keys():
        d = ca[k] - cb[k]
        if d:
            diff[k] = d
    return diff


def bst_violation(tree: BSTree) -> Optional[Tuple[int, int]]:
    """
    Check the search-tree ordering of every node against all of its ancestors.

    Left descendants must be strictly smaller than the ancestor; right descendants
    must be greater than or equal to it (equal values are routed right).

    Returns
    -------
    (ancestor_value, offending_value) for the first violation found, else None.
    """
    # Each entry carries the tightest bounds inherited from the ancestors:
    # lower bound is inclusive (came from a right turn), upper bound exclusive.
    pending: List[Tuple[BSTree, Optional[int], Optional[int]]] = [(tree, None, None)]
    while pending:
        node, lower, upper = pending.pop()
        if lower is not None and node.value < lower:
            return lower, node.value
        if upper is not None and node.value >= upper:
            return upper, node.value
        if node.left is not None:
            pending.append((node.left, lower, node.value))
        if node.right is not None:
            pending.append((node.right, node.value, upper))
    return None
