"""
Shell sort (in place).

Starting from a gap equal to the list length, each round shrinks the gap and makes
one pass comparing every element with the one `gap` positions before it, swapping
when they are out of order. The round with gap 1 is the last.

A single pass per gap does not fully order the list for every gap sequence, so the
sort always finishes with one insertion-sort pass. The gapped rounds only move
far-out-of-place elements closer to home first; correctness comes from the final
pass.

Gap rules (config["gaps"]):
    "halving" (default): gap = max(gap // 2, 1)
    "knuth":             gap = gap // 3 + 1

Public API (stable):
    sort(a: list[int], *, config: dict | None = None) -> None
    SUPPORTED_GAP_RULES
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Iterator, List, Optional

from . import insertion_sort

__all__ = ["SUPPORTED_GAP_RULES", "gap_sequence", "sort"]

logger = logging.getLogger(__name__)

_GAP_RULES: Dict[str, Callable[[int], int]] = {
    "halving": lambda gap: max(gap // 2, 1),
    "knuth": lambda gap: gap // 3 + 1,
}
SUPPORTED_GAP_RULES = frozenset(_GAP_RULES)


def gap_sequence(n: int, rule: str = "halving") -> Iterator[int]:
    """
    Yield the gaps used for a list of length `n`, ending with 1.

    An empty list still yields a single gap of 1 (its pass is a no-op).
    """
    if rule not in _GAP_RULES:
        raise ValueError(
            f"Unsupported gap rule: {rule!r}. Supported: {sorted(SUPPORTED_GAP_RULES)}"
        )
    step = _GAP_RULES[rule]
    gap = n
    while True:
        gap = step(gap)
        yield gap
        if gap == 1:
            return


def sort(a: List[int], *, config: Optional[Dict[str, Any]] = None) -> None:
    """
    Sort `a` in nondecreasing order, in place.

    Parameters
    ----------
    a : list[int]
        The list to sort. It is mutated.
    config : dict | None
        Optional {"gaps": "halving" | "knuth"}.

    Raises
    ------
    ValueError
        If config["gaps"] names an unknown rule.
    """
    rule = (config or {}).get("gaps", "halving")
    n = len(a)

    for gap in gap_sequence(n, rule):
        for index in range(gap, n):
            left = index - gap
            if a[left] > a[index]:
                a[left], a[index] = a[index], a[left]
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("shell sort (%s) gap=%d: %s", rule, gap, a)

    insertion_sort.sort(a)
