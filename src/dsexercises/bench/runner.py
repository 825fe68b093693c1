"""
Experiment runner: times the sorting algorithms over a sweep of input sizes.

Usage (from repo root):
    python -m dsexercises bench experiments/configs/sorting_scaling.yaml

Config (YAML):
    experiment_name: str
    seed: int
    repeats: int
    warmup: bool
    disable_gc: bool
    timeout_seconds: float
    validate: bool                 # optional, default true
    dataset: {dist: str, params: {...}}
    sizes: [int, ...]
    algorithms: [{name: str, config: {...}}, ...]

Design notes:
- For each size n, ONE dataset is generated and every algorithm gets a copy of it.
- Samples are kept in memory and aggregated with pandas; nothing is written to disk.
  The summary is printed as a rich table and returned as a DataFrame.
- On timeout/error/invalid output at size n, larger sizes are skipped for that algo.
"""

from __future__ import annotations

import datetime as _dt
import importlib
import logging
import platform
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import numpy as np
import pandas as pd
import psutil
import yaml
from rich.console import Console
from rich.table import Table
from tqdm import tqdm

from dsexercises.bench.measure import time_sort_call
from dsexercises.datasets import make_dataset
from dsexercises.validate import equals_oracle

__all__ = ["AlgoSpec", "load_config", "run_experiment", "summarize"]

logger = logging.getLogger(__name__)

_console = Console()

REQUIRED_KEYS = (
    "experiment_name",
    "seed",
    "repeats",
    "warmup",
    "disable_gc",
    "timeout_seconds",
    "dataset",
    "sizes",
    "algorithms",
)
SUMMARY_COLUMNS = ["algo", "n", "samples_ok", "median_ns", "iqr_ns", "min_ns", "max_ns"]


# ------------------------- data structures ------------------------- #

@dataclass(frozen=True)
class AlgoSpec:
    name: str
    sort_fn: Any
    config: Dict[str, Any]


# ------------------------- helpers: config & meta ------------------------- #

def load_config(path: Path) -> Dict[str, Any]:
    """Read and validate an experiment config."""
    with path.open("r", encoding="utf-8") as f:
        cfg = yaml.safe_load(f)
    if not isinstance(cfg, dict):
        raise ValueError(f"Experiment config must be a mapping: {path}")

    missing = [k for k in REQUIRED_KEYS if k not in cfg]
    if missing:
        raise ValueError(f"Missing required config keys: {missing}")

    sizes = cfg["sizes"]
    if (
        not isinstance(sizes, list)
        or not sizes
        or not all(isinstance(n, int) and n > 0 for n in sizes)
    ):
        raise ValueError("Config 'sizes' must be a non-empty list of positive integers")
    if not isinstance(cfg["algorithms"], list) or not cfg["algorithms"]:
        raise ValueError("Config 'algorithms' must be a non-empty list")
    cfg.setdefault("validate", True)
    return cfg


def _gather_meta() -> Dict[str, Any]:
    return {
        "python": platform.python_version(),
        "numpy": np.__version__,
        "pandas": pd.__version__,
        "cpu": platform.processor() or platform.machine(),
        "cores_logical": psutil.cpu_count(logical=True),
        "ram_gb": round(psutil.virtual_memory().total / (1024**3), 2),
        "start_time": _dt.datetime.now().isoformat(timespec="seconds"),
    }


def _resolve_algorithms(cfg_algos: List[Dict[str, Any]]) -> List[AlgoSpec]:
    specs: List[AlgoSpec] = []
    seen = set()
    for entry in cfg_algos:
        name = entry.get("name") if isinstance(entry, dict) else None
        if not name or not isinstance(name, str):
            raise ValueError("Each algorithm must have a string 'name' field")
        if name in seen:
            raise ValueError(f"Duplicate algorithm name in config: {name}")
        seen.add(name)

        try:
            mod = importlib.import_module(f"dsexercises.algorithms.{name}")
        except ImportError as e:
            raise ImportError(
                f"Could not import algorithm module 'dsexercises.algorithms.{name}': {e!r}"
            ) from e
        if not callable(getattr(mod, "sort", None)):
            raise AttributeError(
                f"Algorithm module '{name}' must define a callable `sort(a, *, config=None)`"
            )

        config = entry.get("config") or {}
        if not isinstance(config, dict):
            raise ValueError(f"Algorithm '{name}': 'config' must be a dict if provided")

        specs.append(AlgoSpec(name=name, sort_fn=mod.sort, config=config))
    return specs


# ------------------------- aggregation ------------------------- #

def summarize(records: List[Dict[str, Any]]) -> pd.DataFrame:
    """Median, IQR, min and max of `time_ns` per (algo, n); status-only records are ignored."""
    df = pd.DataFrame.from_records(records)
    if df.empty or "time_ns" not in df:
        return pd.DataFrame(columns=SUMMARY_COLUMNS)
    df = df[df["time_ns"].notna()]
    if df.empty:
        return pd.DataFrame(columns=SUMMARY_COLUMNS)

    grouped = df.groupby(["algo", "n"])["time_ns"]
    out = grouped.agg(
        samples_ok="count",
        median_ns="median",
        min_ns="min",
        max_ns="max",
    )
    out["iqr_ns"] = grouped.quantile(0.75) - grouped.quantile(0.25)
    out = out.reset_index()
    out[["median_ns", "iqr_ns", "min_ns", "max_ns"]] = out[
        ["median_ns", "iqr_ns", "min_ns", "max_ns"]
    ].astype("int64")
    return out[SUMMARY_COLUMNS].sort_values(["algo", "n"], ignore_index=True)


def _print_summary(summary: pd.DataFrame, sizes: List[int]) -> None:
    table = Table(title="Benchmark Summary (median ± IQR in ms)")
    table.add_column("Algorithm", style="bold")
    picks: List[Tuple[str, int]] = []
    for n in dict.fromkeys((sizes[0], sizes[len(sizes) // 2], sizes[-1])):
        picks.append((f"n={n}", n))
        table.add_column(f"n={n}", justify="right")

    def _format_cell(median_ns: Optional[int], iqr_ns: Optional[int]) -> str:
        if median_ns is None:
            return "—"
        if iqr_ns is None:
            return f"{median_ns / 1e6:.2f}"
        return f"{median_ns / 1e6:.2f} ± {iqr_ns / 1e6:.2f}"

    for algo in summary["algo"].unique():
        row = [str(algo)]
        for _, npick in picks:
            s = summary[(summary["algo"] == algo) & (summary["n"] == npick)]
            if s.empty:
                row.append(_format_cell(None, None))
            else:
                row.append(
                    _format_cell(int(s["median_ns"].iloc[0]), int(s["iqr_ns"].iloc[0]))
                )
        table.add_row(*row)
    _console.print()
    _console.print(table)
    _console.print()


# ------------------------- core runner ------------------------- #

def run_experiment(config_path: Path, *, show_progress: bool = True) -> pd.DataFrame:
    """
    Run every configured algorithm over every size and return the summary frame.

    Raises
    ------
    ValueError / ImportError / AttributeError
        For malformed configs or unknown algorithm modules.
    """
    cfg = load_config(config_path)

    experiment_name = str(cfg["experiment_name"])
    sizes: List[int] = list(cfg["sizes"])
    repeats = int(cfg["repeats"])
    warmup = bool(cfg["warmup"])
    disable_gc = bool(cfg["disable_gc"])
    timeout_seconds = float(cfg["timeout_seconds"])
    dataset_spec: Dict[str, Any] = dict(cfg["dataset"])
    check = equals_oracle if cfg["validate"] else None

    algos = _resolve_algorithms(list(cfg["algorithms"]))
    rng = np.random.default_rng(int(cfg["seed"]))
    per_algo_skip = {a.name: False for a in algos}
    records: List[Dict[str, Any]] = []

    meta = _gather_meta()
    _console.print(f"[bold]Experiment:[/bold] {experiment_name}")
    _console.print(f"[bold]Algorithms:[/bold] {', '.join(a.name for a in algos)}")
    _console.print(
        f"[dim]python {meta['python']} | numpy {meta['numpy']} | pandas {meta['pandas']} | "
        f"{meta['cpu']} x{meta['cores_logical']} | {meta['ram_gb']} GB RAM | {meta['start_time']}[/dim]"
    )

    for n in tqdm(sizes, desc="Sizes", unit="n", disable=not show_progress):
        base_a = make_dataset(n, dataset_spec, rng)

        for spec in algos:
            if per_algo_skip[spec.name]:
                continue

            res = time_sort_call(
                algo_name=spec.name,
                algo_fn=spec.sort_fn,
                a=base_a,
                config=spec.config,
                repeats=repeats,
                warmup=warmup,
                disable_gc=disable_gc,
                timeout_seconds=timeout_seconds,
                check=check,
            )

            for trial, t_ns in enumerate(res["samples_ns"]):
                records.append(
                    {"algo": spec.name, "n": n, "trial": trial, "time_ns": t_ns}
                )

            status = res["status"]
            if status != "ok":
                per_algo_skip[spec.name] = True
                records.append(
                    {
                        "algo": spec.name,
                        "n": n,
                        "status": status,
                        "error": res["error"],
                        "timed_out_on_repeat": res["timed_out_on_repeat"],
                    }
                )
                logger.warning(
                    "%s stopped at n=%d (%s): %s; skipping larger sizes",
                    spec.name,
                    n,
                    status,
                    res["error"] or "sample exceeded timeout",
                )
                # Invalid or failed samples are not timings of a correct sort.
                if status in ("error", "invalid"):
                    records = [
                        r
                        for r in records
                        if not (r["algo"] == spec.name and r["n"] == n and "time_ns" in r)
                    ]

    summary = summarize(records)
    _print_summary(summary, sizes)
    return summary
