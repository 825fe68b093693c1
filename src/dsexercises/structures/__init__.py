"""
Data structures public API.

Re-exports:
    - BSTree                  (unbalanced binary search tree)
    - TriStack, StackChoice   (three stacks over one list)
    - MinStack                (O(1) minimum)
    - TwoStackQueue           (FIFO from two stacks)
    - StackSorter             (sort with one extra stack)
"""

from .bstree import BSTree
from .min_stack import MinStack
from .stack_sorter import StackSorter
from .tristack import StackChoice, TriStack
from .two_stack_queue import TwoStackQueue

__all__ = [
    "BSTree",
    "MinStack",
    "StackChoice",
    "StackSorter",
    "TriStack",
    "TwoStackQueue",
]
