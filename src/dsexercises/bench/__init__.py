"""
Benchmark package.

    from dsexercises.bench.measure import time_sort_call
    from dsexercises.bench.runner import run_experiment
"""
