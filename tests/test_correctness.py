"""
Correctness tests for the in-place sorting algorithms against the oracle.

Every module in `dsexercises.algorithms` is checked for:
- Output exactly matches the oracle (strongest guarantee)
- Nondecreasing order (diagnostic)
- Permutation preservation (no lost/duplicated elements)
- Idempotence (sorting sorted input changes nothing)
"""

from __future__ import annotations

import importlib
from typing import List

import pytest
from hypothesis import given, settings, strategies as st

from dsexercises.algorithms import ALGORITHMS
from dsexercises.validate import (
    first_nondecreasing_violation_index,
    is_permutation,
    oracle_sort,
)

SORTS = {name: importlib.import_module(f"dsexercises.algorithms.{name}").sort for name in ALGORITHMS}


# ------------------------- helpers ------------------------- #

def _check_one(name: str, a: List[int], *, config: dict | None = None) -> None:
    """Common assertion bundle for one input."""
    sort = SORTS[name]
    out = list(a)
    assert sort(out, config=config) is None, "Sorts work in place and return None"

    assert out == oracle_sort(a), "Output must exactly match the oracle"

    i = first_nondecreasing_violation_index(out)
    assert i is None, f"not nondecreasing at i={i}: {out[i]} > {out[i + 1]}"
    assert is_permutation(a, out), "Output is not a permutation of input"

    again = list(out)
    sort(again, config=config)
    assert again == out, "Sorting sorted input must be a no-op"


# ------------------------- unit tests (deterministic) ------------------------- #

@pytest.mark.parametrize("name", ALGORITHMS)
@pytest.mark.parametrize(
    "a",
    [
        [],
        [5],
        [2, 1],
        [1, 2, 3, 4],
        [4, 3, 2, 1],
        [7, 7, 7, 7],
        [1, 3, 2, 3, 1, 2],
        [1, 3, 5, 7, 9, 8, 6, 4, 2],
        list(range(20)),
        list(range(20))[::-1],
        [0, -1, 5, -10, 3, 3, 2],
    ],
)
def test_unit_cases(name: str, a: List[int]) -> None:
    _check_one(name, a)


def test_insertion_sort_doc_example() -> None:
    from dsexercises.algorithms import insertion_sort

    data = [1, 3, 5, 7, 9, 8, 6, 4, 2]
    insertion_sort.sort(data)
    assert data == [1, 2, 3, 4, 5, 6, 7, 8, 9]


def test_insertion_sort_is_stable() -> None:
    from dsexercises.algorithms import insertion_sort

    # Tag equal keys and compare on the key only through a custom int subclass.
    class Key(int):
        def __new__(cls, value: int, tag: str):
            obj = super().__new__(cls, value)
            obj.tag = tag
            return obj

    data = [Key(2, "a"), Key(1, "b"), Key(2, "c"), Key(1, "d"), Key(2, "e")]
    insertion_sort.sort(data)
    assert [k.tag for k in data] == ["b", "d", "a", "c", "e"]


@pytest.mark.parametrize("gaps", ["halving", "knuth"])
def test_shell_sort_gap_rules(gaps: str) -> None:
    _check_one("shell_sort", [9, 1, 8, 2, 7, 3, 6, 4, 5, 0], config={"gaps": gaps})


def test_shell_sort_unknown_gap_rule() -> None:
    with pytest.raises(ValueError, match="gap rule"):
        SORTS["shell_sort"]([3, 2, 1], config={"gaps": "fibonacci"})


def test_gap_sequences() -> None:
    from dsexercises.algorithms.shell_sort import gap_sequence

    assert list(gap_sequence(16)) == [8, 4, 2, 1]
    assert list(gap_sequence(9)) == [4, 2, 1]
    assert list(gap_sequence(1)) == [1]
    assert list(gap_sequence(0)) == [1]
    assert list(gap_sequence(100, "knuth")) == [34, 12, 5, 2, 1]


# ------------------------- property-based tests (randomized) ------------------------- #

small_ints = st.integers(min_value=-10_000, max_value=10_000)


@pytest.mark.parametrize("name", ALGORITHMS)
@settings(deadline=None, max_examples=60)
@given(a=st.lists(small_ints, min_size=0, max_size=150))
def test_property_random_small_range(name: str, a: List[int]) -> None:
    _check_one(name, a)


@pytest.mark.parametrize("name", ALGORITHMS)
@settings(deadline=None, max_examples=40)
@given(a=st.lists(st.integers(min_value=0, max_value=7), min_size=0, max_size=150))
def test_property_many_duplicates(name: str, a: List[int]) -> None:
    _check_one(name, a)


@settings(deadline=None, max_examples=40)
@given(
    a=st.lists(small_ints, max_size=100),
    gaps=st.sampled_from(["halving", "knuth"]),
)
def test_property_shell_sort_any_gap_rule(a: List[int], gaps: str) -> None:
    _check_one("shell_sort", a, config={"gaps": gaps})
