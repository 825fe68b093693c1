"""
Tests for the unbalanced binary search tree.
"""

from __future__ import annotations

from typing import List

from hypothesis import given, settings, strategies as st

from dsexercises.structures import BSTree
from dsexercises.validate import bst_violation, is_nondecreasing


def _build(values: List[int]) -> BSTree:
    tree = BSTree(values[0])
    for v in values[1:]:
        tree.insert(v)
    return tree


def test_single_node() -> None:
    t = BSTree(5)
    assert t.depth() == 1
    assert t.balanced() is True
    assert t.left is None and t.right is None
    assert list(t) == [5]


def test_insert_places_children() -> None:
    t = _build([2, 1, 3])
    assert t.balanced() is True
    expected = BSTree(2)
    expected.left = BSTree(1)
    expected.right = BSTree(3)
    assert t == expected

    t.insert(4)
    t.insert(5)
    assert t.balanced() is False


def test_depth_follows_longest_branch() -> None:
    t = BSTree(5)
    for v in (6, 7, 8):
        t.insert(v)
    assert t.depth() == 4
    for v in (4, 3, 2):
        t.insert(v)
    assert t.depth() == 4


def test_balanced_is_a_root_local_check() -> None:
    t = BSTree(10)
    assert t.balanced()
    t.insert(11)
    t.insert(12)
    assert not t.balanced()
    t.insert(1)
    t.insert(2)
    assert t.balanced()


def test_balanced_ignores_deeper_imbalance() -> None:
    # Both root subtrees are chains of depth 3: each is itself unbalanced,
    # but the root comparison is all that counts.
    t = _build([0, -1, -2, -3, 1, 2, 3])
    assert t.left.balanced() is False
    assert t.balanced() is True


def test_neighbours_stay_balanced_until_one_side_grows() -> None:
    t = _build([10, 9, 11, 8, 12])
    assert t.balanced()
    for v in (13, 14):
        t.insert(v)
    assert t.depth() == 5
    assert not t.balanced()


def test_duplicates_are_routed_right() -> None:
    t = BSTree(4)
    t.insert(4)
    t.insert(4)
    assert t.left is None
    assert t.right is not None and t.right.value == 4
    assert t.right.right is not None and t.right.right.value == 4
    assert len(t) == 3
    assert list(t) == [4, 4, 4]


def test_depth_tracks_mutation() -> None:
    t = BSTree(0)
    for i in range(1, 6):
        t.insert(i)
        assert t.depth() == i + 1


def test_long_chain_does_not_recurse() -> None:
    t = BSTree(0)
    for i in range(1, 3000):
        t.insert(i)
    assert t.depth() == 3000
    assert not t.balanced()
    assert bst_violation(t) is None
    assert 2999 in t


def test_contains_and_len() -> None:
    t = _build([8, 3, 10, 1, 6, 14, 4, 7, 13])
    assert len(t) == 9
    assert 6 in t and 13 in t
    assert 5 not in t and 100 not in t


def test_repr_is_nested() -> None:
    assert repr(_build([2, 1, 3])) == "BSTree(2, left=BSTree(1), right=BSTree(3))"


def test_rich_tree_labels_sides() -> None:
    rendered = _build([2, 3]).to_rich_tree()
    assert rendered.label == "2"
    labels = [str(child.label) for child in rendered.children]
    assert labels == ["[dim]L: -[/dim]", "R: 3"]


def test_bst_violation_detects_bad_tree() -> None:
    t = _build([5, 3, 8])
    t.left.right = BSTree(9)  # 9 sits left of 5
    assert bst_violation(t) == (5, 9)


@settings(deadline=None, max_examples=100)
@given(st.lists(st.integers(min_value=-1000, max_value=1000), min_size=1, max_size=200))
def test_property_search_order(values: List[int]) -> None:
    t = _build(values)
    assert bst_violation(t) is None
    inorder = list(t)
    assert is_nondecreasing(inorder)
    assert sorted(values) == inorder
    assert 1 <= t.depth() <= len(values)


@settings(deadline=None, max_examples=50)
@given(st.lists(st.integers(min_value=-50, max_value=50), min_size=1, max_size=60))
def test_property_balanced_matches_subtree_depths(values: List[int]) -> None:
    t = _build(values)
    left = t.left.depth() if t.left else 0
    right = t.right.depth() if t.right else 0
    assert t.depth() == 1 + max(left, right)
    assert t.balanced() == (abs(left - right) <= 1)
