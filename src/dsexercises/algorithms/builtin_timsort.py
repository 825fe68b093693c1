"""
Reference baseline: Python's built-in `list.sort` (Timsort), in place.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

__all__ = ["sort"]


def sort(a: List[int], *, config: Optional[Dict[str, Any]] = None) -> None:
    a.sort()
