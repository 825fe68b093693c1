"""
Linked stack with O(1) push, pop and min.

Each node records the minimum of itself and every node beneath it, so the stack's
minimum is always available on the top node without scanning:

    node.minimum == min(node.value, node.below.minimum)

Public API (stable):
    MinStack.push(value) -> None
    MinStack.pop() -> int | None
    MinStack.min() -> int | None
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

__all__ = ["MinStack"]


@dataclass
class _Node:
    value: int
    minimum: int
    below: Optional["_Node"] = None


class MinStack:
    def __init__(self) -> None:
        self._top: Optional[_Node] = None
        self._size = 0

    def push(self, value: int) -> None:
        top = self._top
        minimum = value if top is None else min(value, top.minimum)
        self._top = _Node(value=value, minimum=minimum, below=top)
        self._size += 1

    def pop(self) -> Optional[int]:
        top = self._top
        if top is None:
            return None
        self._top = top.below
        self._size -= 1
        return top.value

    def peek(self) -> Optional[int]:
        return None if self._top is None else self._top.value

    def min(self) -> Optional[int]:
        """Smallest value currently on the stack, or None when empty."""
        return None if self._top is None else self._top.minimum

    def is_empty(self) -> bool:
        return self._top is None

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        values = []
        node = self._top
        while node is not None:
            values.append(node.value)
            node = node.below
        return f"MinStack(top -> {values!r})"
