"""
Sort a stack using at most one additional stack.

`StackSorter` is an ordinary stack (push/pop/peek/is_empty act on the primary
`list`) with a `sort()` that only uses stack operations and a single scratch stack
`temp`.

While sorting, `temp` keeps its smallest value on top (values grow towards its
bottom). After `sort()`, the largest value is on top of `list`, so popping yields
the values in descending order:

    s = StackSorter()
    for v in (1, 2, 6, 4, 3, 5):
        s.push(v)
    s.sort()
    [s.pop() for _ in range(6)]  # -> [6, 5, 4, 3, 2, 1]
"""

from __future__ import annotations

from typing import List, Optional

__all__ = ["StackSorter"]


class StackSorter:
    def __init__(self) -> None:
        self.list: List[int] = []
        self.temp: List[int] = []

    def push(self, value: int) -> None:
        self.list.append(value)

    def pop(self) -> Optional[int]:
        return self.list.pop() if self.list else None

    def peek(self) -> Optional[int]:
        return self.list[-1] if self.list else None

    def is_empty(self) -> bool:
        return not self.list

    def sort(self) -> None:
        """
        Sort `list` in place so its top holds the largest value.

        Each value taken off `list` is inserted into `temp` at its ordered position:
        smaller values resting on `temp` are parked back on `list`, the value is
        pushed, and the parked run (plus any further values from `list` that already
        fit) is pulled straight back on top of it.
        """
        primary, temp = self.list, self.temp
        while primary:
            value = primary.pop()
            if not temp or value < temp[-1]:
                temp.append(value)
                continue

            while temp and temp[-1] <= value:
                primary.append(temp.pop())
            temp.append(value)
            while primary and primary[-1] <= temp[-1]:
                temp.append(primary.pop())

        while temp:
            primary.append(temp.pop())

    def __len__(self) -> int:
        return len(self.list)

    def __repr__(self) -> str:
        return f"StackSorter(list={self.list!r})"
