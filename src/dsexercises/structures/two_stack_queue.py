"""
FIFO queue built from two LIFO stacks.

`arrivals` holds every queued element in push order (its bottom is the oldest).
`pop` reverses it onto `reversal`, takes the oldest element off the top, then pours
`reversal` back so that, between calls, `reversal` is always empty.

Push is O(1); pop is O(n) because of the two full transfers.
"""

from __future__ import annotations

from typing import List, Optional

__all__ = ["TwoStackQueue"]


class TwoStackQueue:
    def __init__(self) -> None:
        self._arrivals: List[int] = []
        self._reversal: List[int] = []

    def push(self, value: int) -> None:
        self._arrivals.append(value)

    def pop(self) -> Optional[int]:
        """Remove and return the oldest element, or None when the queue is empty."""
        if not self._arrivals:
            return None
        self._pour(self._arrivals, self._reversal)
        value = self._reversal.pop()
        self._pour(self._reversal, self._arrivals)
        return value

    def peek(self) -> Optional[int]:
        if not self._arrivals:
            return None
        self._pour(self._arrivals, self._reversal)
        value = self._reversal[-1]
        self._pour(self._reversal, self._arrivals)
        return value

    def is_empty(self) -> bool:
        return not self._arrivals

    def __len__(self) -> int:
        return len(self._arrivals)

    def __repr__(self) -> str:
        return f"TwoStackQueue(oldest -> {self._arrivals!r})"

    @staticmethod
    def _pour(src: List[int], dst: List[int]) -> None:
        # Stack-only transfer: pop from one top, push onto the other.
        while src:
            dst.append(src.pop())
