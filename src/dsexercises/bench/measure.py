"""
Timing harness for in-place sorting algorithms.

Each sample times exactly one call to `sort(arg, config=...)` on a fresh copy of the
input, using a monotonic high-resolution clock. Copying, GC handling, warmup and
output checks all happen outside the timed block.

Public API (stable):
    time_sort_call(...) -> dict

Returned dict schema:
    {
        "algo": str,
        "repeats": int,
        "samples_ns": list[int],                     # elapsed ns per completed sample
        "status": "ok" | "timeout" | "error" | "invalid",
        "error": str | None,                         # set for "error" and "invalid"
        "timed_out_on_repeat": int | None,           # 0-based repeat index on timeout
    }
"""

from __future__ import annotations

import gc
import time
from typing import Any, Callable, Dict, List, Optional

__all__ = ["time_sort_call"]

OutputCheck = Callable[[List[int], List[int]], bool]


def time_sort_call(
    *,
    algo_name: str,
    algo_fn: Callable[..., None],
    a: List[int],
    config: Optional[Dict[str, Any]],
    repeats: int,
    warmup: bool,
    disable_gc: bool,
    timeout_seconds: float,
    check: Optional[OutputCheck] = None,
) -> Dict[str, Any]:
    """
    Time repeated in-place calls of `algo_fn` on copies of `a`.

    Parameters
    ----------
    algo_name : str
        Logical name of the algorithm (for records).
    algo_fn : Callable[..., None]
        Implements sort(a: list[int], *, config: dict | None) and sorts in place.
    a : list[int]
        Input array. Never handed to the algorithm directly, so it stays intact.
    config : dict | None
        Passed through unchanged.
    repeats : int
        Number of timed samples to collect.
    warmup : bool
        If True, make one untimed call first.
    disable_gc : bool
        If True, collect and disable the GC around the timed loop; restored afterwards.
    timeout_seconds : float
        If one sample exceeds this, status becomes "timeout" and sampling stops.
    check : callable | None
        check(original, output) -> bool, applied to each sample's output outside the
        timed block. A False result sets status "invalid" and stops sampling.

    Returns
    -------
    dict
        See module docstring for the schema.

    Raises
    ------
    ValueError
        If `repeats` is negative or `timeout_seconds` is not positive.
    """
    if repeats < 0:
        raise ValueError("repeats must be nonnegative")
    if timeout_seconds <= 0:
        raise ValueError("timeout_seconds must be positive")

    result: Dict[str, Any] = {
        "algo": algo_name,
        "repeats": repeats,
        "samples_ns": [],
        "status": "ok",
        "error": None,
        "timed_out_on_repeat": None,
    }

    if warmup and repeats > 0:
        try:
            algo_fn(list(a), config=config)
        except Exception as e:
            result["status"] = "error"
            result["error"] = f"warmup failed: {e!r}"
            return result

    prev_gc_enabled = gc.isenabled()
    try:
        if disable_gc:
            gc.collect()
            gc.disable()

        threshold_ns = int(timeout_seconds * 1e9)
        for r in range(repeats):
            arg = list(a)
            try:
                t0 = time.perf_counter_ns()
                algo_fn(arg, config=config)
                t1 = time.perf_counter_ns()
            except Exception as e:
                result["status"] = "error"
                result["error"] = f"run failed at repeat {r}: {e!r}"
                break

            elapsed = t1 - t0
            result["samples_ns"].append(int(elapsed))

            if check is not None and not check(a, arg):
                result["status"] = "invalid"
                result["error"] = f"output failed validation at repeat {r}"
                break

            if elapsed > threshold_ns:
                result["status"] = "timeout"
                result["timed_out_on_repeat"] = r
                break
    finally:
        # Only re-enable what we disabled; respect a caller who had GC off already.
        if disable_gc and prev_gc_enabled:
            gc.enable()

    return result
