"""
dsexercises: classic data structures and sorting algorithms over integers.

Subpackages:
    structures  binary search tree and the stack family
    algorithms  in-place sorts sharing one `sort(a, *, config=None)` contract
    datasets    seeded input generators
    validate    oracle and property checks
    bench       timing harness and experiment runner
"""

__version__ = "0.1.0"
