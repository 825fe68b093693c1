"""
Three stacks multiplexed over a single backing list.

Slot `i` of the backing list belongs to logical stack `i % 3`:

    index:  0  1  2  3  4  5  6 ...
    stack:  F  S  T  F  S  T  F ...

The top of a logical stack is its highest-indexed occupied slot. Popping clears a
slot (sets it to None) and never compacts the list. When a push lands beyond the
end of the list, the list grows by exactly three empty slots, one per stack.

Public API (stable):
    StackChoice.FIRST / SECOND / THIRD
    TriStack.push(stack, value) -> None
    TriStack.pop(stack) -> int | None
    TriStack.find_top(stack) -> tuple[int, int] | None

Notes
-----
- Locating the top is a linear scan of the backing list (O(n)). Caching each
  stack's top index would be a valid optimization with the same observable
  behavior; the scan is kept for simplicity.
- Striping assumes the three stacks are used at roughly the same pace. If only
  one stack is used, the backing list is three times larger than needed.
"""

from __future__ import annotations

import enum
import logging
from typing import List, Optional, Tuple, Union

__all__ = ["StackChoice", "TriStack"]

logger = logging.getLogger(__name__)

_NUM_STACKS = 3


class StackChoice(enum.IntEnum):
    """Selects one of the three logical stacks; the value is its base offset."""

    FIRST = 0
    SECOND = 1
    THIRD = 2


class TriStack:
    def __init__(self) -> None:
        self._slots: List[Optional[int]] = []

    def push(self, stack: Union[StackChoice, int], value: int) -> None:
        choice = _coerce_choice(stack)
        top = self.find_top(choice)
        index = int(choice) if top is None else top[0] + _NUM_STACKS

        if index >= len(self._slots):
            self._slots.extend([None] * _NUM_STACKS)
            logger.debug(
                "tristack grew to %d slots for %s", len(self._slots), choice.name
            )

        self._slots[index] = value

    def pop(self, stack: Union[StackChoice, int]) -> Optional[int]:
        top = self.find_top(stack)
        if top is None:
            return None
        index, value = top
        self._slots[index] = None
        return value

    def peek(self, stack: Union[StackChoice, int]) -> Optional[int]:
        top = self.find_top(stack)
        return None if top is None else top[1]

    def is_empty(self, stack: Union[StackChoice, int]) -> bool:
        return self.find_top(stack) is None

    def find_top(self, stack: Union[StackChoice, int]) -> Optional[Tuple[int, int]]:
        """
        Return `(index, value)` of the given stack's top slot, or None if it is empty.

        Scans every slot whose index is congruent to the stack's offset (mod 3) and
        keeps the last occupied one.
        """
        choice = _coerce_choice(stack)
        found: Optional[Tuple[int, int]] = None
        for index in range(int(choice), len(self._slots), _NUM_STACKS):
            value = self._slots[index]
            if value is not None:
                found = (index, value)
        return found

    @property
    def slots(self) -> Tuple[Optional[int], ...]:
        """Snapshot of the backing list (empty slots are None)."""
        return tuple(self._slots)

    def __len__(self) -> int:
        return sum(1 for v in self._slots if v is not None)

    def __repr__(self) -> str:
        return f"TriStack({self._slots!r})"


def _coerce_choice(stack: Union[StackChoice, int]) -> StackChoice:
    try:
        return StackChoice(stack)
    except ValueError as e:
        raise ValueError(
            f"stack must be one of {[c.name for c in StackChoice]} (or 0..2); got {stack!r}"
        ) from e
