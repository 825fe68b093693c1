"""
Command line entry point.

    dsexercises tree                 # interactive binary search tree demo
    dsexercises bench CONFIG.yaml    # run a sorting benchmark
    dsexercises -v ...               # debug logging
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import List, Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.prompt import IntPrompt

from dsexercises.structures.bstree import BSTree

__all__ = ["main", "run_tree_demo"]

_console = Console()


def run_tree_demo(console: Console = _console) -> BSTree:
    """
    Grow a tree from integers typed at the prompt, showing its shape after each insert.

    Non-numeric input is re-prompted. Ctrl+C or end-of-input stops the loop; the tree
    built so far is returned.
    """
    console.print("Creating a binary tree")
    try:
        tree = BSTree(IntPrompt.ask("Please enter an integer", console=console))
    except (EOFError, KeyboardInterrupt):
        raise SystemExit("No seed value given; nothing to do.") from None

    console.print("Press Ctrl+C to stop modifying the tree")
    while True:
        console.print(tree.to_rich_tree())
        console.print(f"Depth: {tree.depth()} | Balanced: {tree.balanced()}")
        try:
            value = IntPrompt.ask("Please enter an integer to add to the tree", console=console)
        except (EOFError, KeyboardInterrupt):
            console.print()
            return tree
        tree.insert(value)


def _parse_args(argv: Optional[List[str]]) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        prog="dsexercises", description="Data structure and sorting exercises."
    )
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = p.add_subparsers(dest="command", required=True)

    sub.add_parser("tree", help="Interactive binary search tree demo")

    bench = sub.add_parser("bench", help="Run a sorting benchmark from a YAML config")
    bench.add_argument("config", type=str, help="Path to YAML experiment config")
    bench.add_argument("--no-progress", action="store_true", help="Hide the progress bar")
    return p.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )

    if args.command == "tree":
        run_tree_demo()
        return

    # Imported lazily: the benchmark pulls in numpy/pandas.
    from dsexercises.bench.runner import run_experiment

    config_path = Path(args.config).resolve()
    if not config_path.exists():
        raise SystemExit(f"Config file not found: {config_path}")
    try:
        run_experiment(config_path, show_progress=not args.no_progress)
    except Exception as e:
        _console.print(f"[bold red]Runner failed:[/bold red] {e!r}")
        raise
