# tests/utils.py
"""
Small, reusable helpers used across the kmeansviz test suite.

Functions:
- labels_equal_up_to_perm(y1, y2): same partition regardless of slot numbering.
- brute_force_sse(points, centroids): nearest-centroid SSE recomputed with plain loops.
- time_block(label, meta=None): context manager that prints wall-clock time with optional metadata.
- print_timing(label, seconds, **meta): convenience printer for timings (used by time_block).
"""

from __future__ import annotations

import json
import time
from contextlib import contextmanager
from typing import Any, Dict, Optional, Sequence

import numpy as np


def labels_equal_up_to_perm(y1: Sequence[int], y2: Sequence[int]) -> bool:
    """
    True if y1 and y2 induce the same partition of the points.

    Works for any number of clusters by checking that the label mapping
    is a bijection.
    """
    y1 = np.asarray(y1)
    y2 = np.asarray(y2)
    if y1.shape != y2.shape:
        return False
    forward: Dict[int, int] = {}
    backward: Dict[int, int] = {}
    for a, b in zip(y1.tolist(), y2.tolist()):
        if forward.setdefault(a, b) != b or backward.setdefault(b, a) != a:
            return False
    return True


def brute_force_sse(points, centroids) -> float:
    """Sum over points of the squared distance to the nearest centroid."""
    total = 0.0
    for p in points:
        total += min((p.x - c.x) ** 2 + (p.y - c.y) ** 2 for c in centroids)
    return total


@contextmanager
def time_block(label: str, meta: Optional[Dict[str, Any]] = None):
    """
    Context manager to time a block and print a single-line summary.

    Output
    ------
    [timing] fit {"n":90,"K":3} 0.012s
    """
    t0 = time.perf_counter()
    try:
        yield
    finally:
        dt = time.perf_counter() - t0
        print_timing(label, dt, **(meta or {}))


def print_timing(label: str, seconds: float, **meta: Any) -> None:
    """
    Print timing in a compact, machine-readable single line.
    """
    meta_str = ""
    if meta:
        meta_str = " " + json.dumps(meta, separators=(",", ":"))
    print(f"[timing] {label}{meta_str} {seconds:.3f}s")
