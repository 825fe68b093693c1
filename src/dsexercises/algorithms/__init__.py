"""
Sorting algorithms.

Every module here follows one contract so the benchmark runner can load it by name
(`dsexercises.algorithms.<name>`):

    sort(a: list[int], *, config: dict | None = None) -> None   # sorts `a` in place
"""

ALGORITHMS = ("builtin_timsort", "insertion_sort", "shell_sort", "stack_sort")

__all__ = ["ALGORITHMS"]
