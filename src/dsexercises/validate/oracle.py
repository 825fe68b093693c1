"""
Oracle for sorting correctness.

Python's built-in `sorted()` is the ground truth: a correct, stable total order for
integers that never mutates its input.

Public API (stable):
    oracle_sort(a: list[int]) -> list[int]
    equals_oracle(a: list[int], out: list[int]) -> bool

Every in-place algorithm in `dsexercises.algorithms` must leave its list equal to
`oracle_sort` of the original contents.
"""

from __future__ import annotations

from typing import List, Sequence

ORACLE_NAME: str = "python_sorted_timsort"

__all__ = ["ORACLE_NAME", "oracle_sort", "equals_oracle"]


def oracle_sort(a: Sequence[int]) -> List[int]:
    """Return a new nondecreasing list holding the elements of `a`."""
    return sorted(a)


def equals_oracle(a: Sequence[int], out: Sequence[int]) -> bool:
    """
    True iff `out` is exactly the oracle's ordering of `a`.

    Parameters
    ----------
    a : sequence of int
        The input as it was before sorting.
    out : sequence of int
        What the algorithm produced.
    """
    return list(out) == oracle_sort(a)
