"""
Unbalanced binary search tree over integers.

Every node owns its (optional) left and right children. Values smaller than a node
go left; everything else goes right, so equal values are kept and routed into the
right subtree. Nothing is ever rebalanced: the shape is fully determined by the
order of insertion, e.g.

    t = BSTree(7)
    for v in (1, 2, 3, 4, 5, 6):
        t.insert(v)

produces the chain 7 -> 1 -> 2 -> ... -> 6 down the left-then-right spine.

Public API (stable):
    BSTree(value)
    BSTree.insert(value) -> None
    BSTree.depth() -> int
    BSTree.balanced() -> bool

Conventions:
- `depth()` is recomputed from scratch on every call (no cached per-node depth), so
  it always reflects the current structure. It costs O(number of nodes).
- `balanced()` only compares the depths of the root's two immediate subtrees; it is
  a local check, not an AVL-style guarantee for every node.
"""

from __future__ import annotations

from typing import Iterator, List, Optional

from rich.tree import Tree

__all__ = ["BSTree"]


class BSTree:
    """A binary search tree node; the root node stands for the whole tree."""

    __slots__ = ("value", "left", "right")

    def __init__(self, value: int) -> None:
        self.value: int = value
        self.left: Optional[BSTree] = None
        self.right: Optional[BSTree] = None

    def insert(self, value: int) -> None:
        """
        Insert `value` below this node.

        Smaller values descend left; equal or larger values descend right. A new leaf
        is created at the first absent child slot reached.
        """
        node = self
        while True:
            if value < node.value:
                if node.left is None:
                    node.left = BSTree(value)
                    return
                node = node.left
            else:
                if node.right is None:
                    node.right = BSTree(value)
                    return
                node = node.right

    def depth(self) -> int:
        """
        Return 1 for a leaf, else 1 + the deeper of the two subtrees.

        Walks the tree level by level, so long insertion chains do not hit the
        interpreter's recursion limit.
        """
        levels = 0
        frontier: List[BSTree] = [self]
        while frontier:
            levels += 1
            frontier = [
                child
                for node in frontier
                for child in (node.left, node.right)
                if child is not None
            ]
        return levels

    def balanced(self) -> bool:
        """True iff the root's left and right subtree depths differ by at most one."""
        return abs(_depth(self.left) - _depth(self.right)) <= 1

    # ------------------------- container protocol ------------------------- #

    def __iter__(self) -> Iterator[int]:
        # In-order walk with an explicit stack; avoids recursion limits on chains.
        pending: List[BSTree] = []
        node: Optional[BSTree] = self
        while pending or node is not None:
            while node is not None:
                pending.append(node)
                node = node.left
            node = pending.pop()
            yield node.value
            node = node.right

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __contains__(self, value: object) -> bool:
        node: Optional[BSTree] = self
        while node is not None:
            if value == node.value:
                return True
            node = node.left if value < node.value else node.right  # type: ignore[operator]
        return False

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BSTree):
            return NotImplemented
        # Structural equality: same values in the same shape.
        pairs: List[tuple] = [(self, other)]
        while pairs:
            a, b = pairs.pop()
            if a is None or b is None:
                if a is not b:
                    return False
                continue
            if a.value != b.value:
                return False
            pairs.append((a.left, b.left))
            pairs.append((a.right, b.right))
        return True

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        parts = [repr(self.value)]
        if self.left is not None:
            parts.append(f"left={self.left!r}")
        if self.right is not None:
            parts.append(f"right={self.right!r}")
        return f"BSTree({', '.join(parts)})"

    # ------------------------- display ------------------------- #

    def to_rich_tree(self) -> Tree:
        """
        Build a `rich.tree.Tree` showing the structure, left child first.

        A missing child is shown as a dim placeholder when its sibling exists, so the
        side each child hangs on stays readable.
        """
        root = Tree(str(self.value))
        _attach(root, self)
        return root


def _depth(node: Optional[BSTree]) -> int:
    # An absent child counts as depth 0.
    if node is None:
        return 0
    return node.depth()


def _attach(branch: Tree, node: BSTree) -> None:
    if node.left is None and node.right is None:
        return
    for label, child in (("L", node.left), ("R", node.right)):
        if child is None:
            branch.add(f"[dim]{label}: -[/dim]")
        else:
            _attach(branch.add(f"{label}: {child.value}"), child)
