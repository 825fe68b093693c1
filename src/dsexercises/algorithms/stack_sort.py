"""
Benchmark adapter for `StackSorter`.

Loads the list onto a StackSorter, sorts it with one auxiliary stack, then pops the
result back into `a`. Pops come out largest first, so they are written from the
end of the list towards the front.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from dsexercises.structures.stack_sorter import StackSorter

__all__ = ["sort"]


def sort(a: List[int], *, config: Optional[Dict[str, Any]] = None) -> None:
    sorter = StackSorter()
    for v in a:
        sorter.push(v)
    sorter.sort()
    for i in range(len(a) - 1, -1, -1):
        a[i] = sorter.pop()  # type: ignore[assignment]
