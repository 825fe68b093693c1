"""
Insertion sort (in place).

For each position `outer`, walk backwards while the elements are strictly greater
than `a[outer]`; the furthest-back such index is where the element belongs. It is
then removed and reinserted there, shifting the run it jumped over one slot right.

Equal elements are never jumped over, so the sort is stable.

Public API (stable):
    sort(a: list[int], *, config: dict | None = None) -> None

Complexity: O(n^2) worst case (reversed input), O(n) on already-sorted input.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

__all__ = ["sort"]


def sort(a: List[int], *, config: Optional[Dict[str, Any]] = None) -> None:
    """
    Sort `a` in nondecreasing order, in place.

    Parameters
    ----------
    a : list[int]
        The list to sort. It is mutated.
    config : dict | None
        Unused; accepted so the function fits the benchmark algorithm contract.
    """
    for outer in range(len(a)):
        pivot = a[outer]
        to = outer
        for inner in range(outer - 1, -1, -1):
            if a[inner] > pivot:
                to = inner
            else:
                break

        if to != outer:
            del a[outer]
            a.insert(to, pivot)
