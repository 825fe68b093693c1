"""
Integer input generators for the sorting exercises.

Implemented distributions:
- "random":        uniform integers from an inclusive range (default [0, 2**31 - 1]).
- "small_range":   uniform integers from a small inclusive range (default [0, 255]).
- "sorted":        [0, 1, ..., n-1]; best case for insertion sort.
- "reversed":      [n-1, ..., 0]; worst case for insertion sort.
- "nearly_sorted": [0..n-1] followed by ceil(swap_frac * n) random pair swaps.
- "few_uniques":   n draws from k distinct values picked from an inclusive range.

Public API (stable):
    make_dataset(n: int, spec: dict, rng: numpy.random.Generator) -> list[int]
    SUPPORTED_DISTS

Conventions:
- Every range in params is **inclusive** on both ends and given as [min, max].
- "sorted" and "reversed" are deterministic and ignore both params and RNG.
- Returns a plain Python `list[int]`; the algorithms never see NumPy types.
- The caller owns (and seeds) the RNG so a whole experiment is reproducible.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Tuple

import numpy as np

__all__ = ["SUPPORTED_DISTS", "make_dataset"]

_DEFAULT_RANGE: Tuple[int, int] = (0, 2**31 - 1)


def make_dataset(n: int, spec: Dict[str, Any], rng: np.random.Generator) -> List[int]:
    """
    Generate `n` integers according to `spec`.

    Parameters
    ----------
    n : int
        Number of elements (>= 0).
    spec : dict
        {"dist": <name>, "params": {...}}. Params per dist:

            random:        {"range": [lo, hi]}                 # optional
            small_range:   {"min_val": 0, "max_val": 255}      # or {"range": [lo, hi]}
            nearly_sorted: {"swap_frac": 0.05}                 # in [0, 1]
            few_uniques:   {"k": 10, "range": [lo, hi]}        # k required
            sorted / reversed: {}
    rng : numpy.random.Generator
        Seeded upstream; unused by the deterministic distributions.

    Raises
    ------
    ValueError
        On a negative/non-int `n`, an unknown dist or malformed params.
    """
    if not isinstance(n, (int, np.integer)) or isinstance(n, bool):
        raise ValueError("n must be an int")
    if n < 0:
        raise ValueError("n must be nonnegative")
    if not isinstance(spec, dict):
        raise ValueError("spec must be a dict")

    dist = spec.get("dist")
    if dist not in _GENERATORS:
        raise ValueError(
            f"Unsupported dataset dist: {dist!r}. Supported: {sorted(SUPPORTED_DISTS)}"
        )
    params = spec.get("params") or {}
    if not isinstance(params, dict):
        raise ValueError(f"{dist}.params must be a dict")

    return _GENERATORS[dist](int(n), params, rng)


# ------------------------- distributions ------------------------- #


def _random(n: int, params: Dict[str, Any], rng: np.random.Generator) -> List[int]:
    lo, hi = _parse_range(params, "random")
    if n == 0:
        return []
    # Generator.integers is half-open; +1 makes `hi` reachable.
    return rng.integers(lo, hi + 1, size=n, dtype=np.int64).tolist()


def _small_range(n: int, params: Dict[str, Any], rng: np.random.Generator) -> List[int]:
    # Either params["range"] or the min_val/max_val pair; defaults to bytes.
    if "range" in params:
        lo, hi = _parse_range(params, "small_range")
    else:
        lo, hi = params.get("min_val", 0), params.get("max_val", 255)
        if not all(isinstance(x, (int, np.integer)) and not isinstance(x, bool) for x in (lo, hi)):
            raise ValueError("small_range.params.min_val/max_val must be integers")
        lo, hi = int(lo), int(hi)
        if lo > hi:
            raise ValueError(f"small_range invalid: min > max ({lo} > {hi})")
    if n == 0:
        return []
    return rng.integers(lo, hi + 1, size=n, dtype=np.int64).tolist()


def _sorted(n: int, params: Dict[str, Any], rng: np.random.Generator) -> List[int]:
    return list(range(n))


def _reversed(n: int, params: Dict[str, Any], rng: np.random.Generator) -> List[int]:
    return list(range(n - 1, -1, -1))


def _nearly_sorted(n: int, params: Dict[str, Any], rng: np.random.Generator) -> List[int]:
    raw = params.get("swap_frac", 0.05)
    try:
        swap_frac = float(raw)
    except (TypeError, ValueError) as e:
        raise ValueError(
            f"nearly_sorted.params.swap_frac must be a float in [0.0, 1.0]; got {raw!r}"
        ) from e
    if not 0.0 <= swap_frac <= 1.0:
        raise ValueError(
            f"nearly_sorted.params.swap_frac must be in [0.0, 1.0]; got {swap_frac}"
        )

    out = list(range(n))
    swaps = int(np.ceil(swap_frac * n))
    if n == 0 or swaps == 0:
        return out
    idxs = rng.integers(0, n, size=(swaps, 2))
    for i, j in idxs.tolist():
        # i == j is a no-op, so the effective swap count can be lower.
        out[i], out[j] = out[j], out[i]
    return out


def _few_uniques(n: int, params: Dict[str, Any], rng: np.random.Generator) -> List[int]:
    k = params.get("k")
    if not isinstance(k, int) or isinstance(k, bool) or k < 1:
        raise ValueError(f"few_uniques.params.k must be an integer >= 1; got {k!r}")
    lo, hi = _parse_range(params, "few_uniques")
    if n == 0:
        return []

    wanted = min(k, n, hi - lo + 1)
    # Draw from `rng` (not the `random` module) so values follow the experiment seed.
    values: List[int] = []
    seen = set()
    while len(values) < wanted:
        for v in rng.integers(lo, hi + 1, size=2 * (wanted - len(values))).tolist():
            if v not in seen:
                seen.add(v)
                values.append(v)
                if len(values) == wanted:
                    break

    return [values[t] for t in rng.integers(0, wanted, size=n).tolist()]


_GENERATORS: Dict[str, Callable[[int, Dict[str, Any], np.random.Generator], List[int]]] = {
    "random": _random,
    "small_range": _small_range,
    "sorted": _sorted,
    "reversed": _reversed,
    "nearly_sorted": _nearly_sorted,
    "few_uniques": _few_uniques,
}
SUPPORTED_DISTS = frozenset(_GENERATORS)


# ------------------------- helpers ------------------------- #


def _parse_range(params: Dict[str, Any], dist: str) -> Tuple[int, int]:
    """Return the inclusive [lo, hi] from params["range"], or the default range."""
    if "range" not in params:
        return _DEFAULT_RANGE
    spec = params["range"]
    if not isinstance(spec, (list, tuple)) or len(spec) != 2:
        raise ValueError(f"{dist}.params.range must be a 2-element list [min, max]")
    if not all(isinstance(x, (int, np.integer)) for x in spec):
        raise ValueError(f"{dist}.params.range values must be integers")
    lo, hi = int(spec[0]), int(spec[1])
    if lo > hi:
        raise ValueError(f"{dist}.params.range invalid: min > max ({lo} > {hi})")
    return lo, hi
