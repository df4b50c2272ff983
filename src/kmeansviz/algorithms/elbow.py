"""
Elbow-method estimation of the number of clusters.

Runs K-Means over a range of K, then picks the K where the inertia curve
bends the most. The bend at an interior point is the absolute change in
direction between its incoming and outgoing segments, each direction
taken as ``atan2(delta_inertia, delta_k)``.
"""

from typing import Optional, Sequence, List, Dict, Any, Union
from dataclasses import dataclass, field
import math
import torch

from ..base.data_structures import ElbowPoint
from ..utils.validation import validate_points, check_random_state
from .kmeans import run_kmeans


@dataclass(frozen=True)
class ElbowAnalysis:
    """Inertia curve of an elbow sweep and the K chosen from it."""
    points: List[ElbowPoint]
    optimal_k: Optional[int]
    curvatures: Dict[int, float] = field(default_factory=dict)


def elbow_sweep(points: Sequence[Any],
                k_min: int = 2,
                k_max: int = 8,
                max_iterations: int = 100,
                random_state: Optional[Union[int, torch.Generator]] = None,
                verbose: int = 0) -> List[ElbowPoint]:
    """Inertia for every K from ``k_min`` to ``min(k_max, N - 1)``.

    Args:
        points: Point set
        k_min: Smallest K tested
        k_max: Largest K tested, further capped at N - 1
        max_iterations: Iteration cap for each run
        random_state: Seed or generator shared by all runs
        verbose: Verbosity level

    Returns:
        One ElbowPoint per tested K, by increasing K (empty if the range is)
    """
    points = validate_points(points)
    generator = check_random_state(random_state)

    upper = min(k_max, len(points) - 1)
    results = []
    for k in range(k_min, upper + 1):
        result = run_kmeans(points, k, max_iterations=max_iterations,
                            random_state=generator)
        results.append(ElbowPoint(k=k, inertia=result.inertia))
        if verbose:
            print(f"k={k}: inertia = {result.inertia:.4f} ({result.iterations} iterations)")

    return results


def elbow_curvatures(elbow_points: Sequence[ElbowPoint]) -> Dict[int, float]:
    """Bend of the inertia curve at every interior K."""
    curvatures = {}
    for i in range(1, len(elbow_points) - 1):
        p1, p2, p3 = elbow_points[i - 1], elbow_points[i], elbow_points[i + 1]

        angle1 = math.atan2(p2.inertia - p1.inertia, p2.k - p1.k)
        angle2 = math.atan2(p3.inertia - p2.inertia, p3.k - p2.k)
        curvatures[p2.k] = abs(angle2 - angle1)

    return curvatures


def find_optimal_k(elbow_points: Sequence[ElbowPoint]) -> Optional[int]:
    """K at the point of maximum curvature of the inertia curve.

    Args:
        elbow_points: Sweep results ordered by increasing K

    Returns:
        The chosen K (the first one on ties), or None with fewer than
        three points
    """
    if len(elbow_points) < 3:
        return None

    best_k = None
    max_curvature = -math.inf
    for k, curvature in elbow_curvatures(elbow_points).items():
        if curvature > max_curvature:
            max_curvature = curvature
            best_k = k

    return best_k


def estimate_optimal_k(points: Sequence[Any],
                       k_min: int = 2,
                       k_max: int = 8,
                       max_iterations: int = 100,
                       random_state: Optional[Union[int, torch.Generator]] = None,
                       verbose: int = 0) -> ElbowAnalysis:
    """Run the elbow sweep and choose K from it."""
    sweep = elbow_sweep(points, k_min=k_min, k_max=k_max,
                        max_iterations=max_iterations,
                        random_state=random_state, verbose=verbose)
    optimal_k = find_optimal_k(sweep)

    if verbose and optimal_k is not None:
        print(f"Optimal K detected at {optimal_k} (elbow point)")

    return ElbowAnalysis(points=sweep, optimal_k=optimal_k,
                         curvatures=elbow_curvatures(sweep))
