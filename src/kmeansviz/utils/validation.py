"""
Input validation utilities.

Converts the loose point formats a front end hands over into ``Point``
records and checks clustering parameters before any computation starts.
"""

from typing import Optional, Union, List, Any, Mapping
import math
import torch
from torch import Tensor
import numpy as np

from ..base.data_structures import Point


class InsufficientPointsError(ValueError):
    """Raised when fewer points than clusters are supplied."""

    def __init__(self, n_points: int, n_clusters: int):
        self.n_points = n_points
        self.n_clusters = n_clusters
        super().__init__(
            f"Not enough points for the specified number of clusters: "
            f"need at least {n_clusters}, got {n_points}"
        )


def _coerce_point(item: Any) -> Point:
    """Turn one point-like item into a Point."""
    if isinstance(item, Point):
        return item
    if isinstance(item, Mapping):
        if 'x' not in item or 'y' not in item:
            raise ValueError(f"Point mapping needs 'x' and 'y' keys, got {sorted(item)}")
        cluster = item.get('cluster')
        return Point(float(item['x']), float(item['y']),
                     None if cluster is None else int(cluster))
    if hasattr(item, 'x') and hasattr(item, 'y'):
        cluster = getattr(item, 'cluster', None)
        return Point(float(item.x), float(item.y),
                     None if cluster is None else int(cluster))
    if isinstance(item, (tuple, list)):
        if len(item) != 2:
            raise ValueError(f"Expected (x, y) pair, got {len(item)} values")
        return Point(float(item[0]), float(item[1]))
    raise TypeError(f"Cannot convert {type(item)} to Point")


def validate_points(points: Union[List[Any], tuple, np.ndarray, Tensor],
                    ensure_finite: bool = True) -> List[Point]:
    """Validate and convert input points.

    Args:
        points: Sequence of Point / (x, y) pairs / mappings with 'x' and 'y',
            or an (n, 2) array or tensor
        ensure_finite: Whether to reject NaN and infinite coordinates

    Returns:
        List of Point (a new list; Point records are immutable)

    Raises:
        ValueError: If shape or values are invalid
        TypeError: If the input type is not supported
    """
    if isinstance(points, Tensor):
        points = points.detach().cpu().numpy()

    if isinstance(points, np.ndarray):
        if points.size == 0:
            return []
        if points.ndim != 2 or points.shape[1] != 2:
            raise ValueError(f"Expected array of shape (n, 2), got {points.shape}")
        result = [Point(float(x), float(y)) for x, y in points.tolist()]
    elif isinstance(points, (list, tuple)):
        result = [_coerce_point(item) for item in points]
    else:
        raise TypeError(f"Cannot convert {type(points)} to a point set")

    if ensure_finite:
        for p in result:
            if not (math.isfinite(p.x) and math.isfinite(p.y)):
                raise ValueError(f"Point coordinates must be finite, got ({p.x}, {p.y})")

    return result


def check_n_clusters(n_clusters: int, n_samples: int) -> None:
    """Validate number of clusters.

    Args:
        n_clusters: Number of clusters
        n_samples: Number of samples

    Raises:
        TypeError: If n_clusters is not an int
        ValueError: If n_clusters is not positive
        InsufficientPointsError: If there are fewer samples than clusters
    """
    if isinstance(n_clusters, bool) or not isinstance(n_clusters, int):
        raise TypeError(f"n_clusters must be int, got {type(n_clusters)}")

    if n_clusters <= 0:
        raise ValueError(f"n_clusters must be positive, got {n_clusters}")

    if n_samples < n_clusters:
        raise InsufficientPointsError(n_samples, n_clusters)


def check_max_iter(max_iter: int) -> None:
    """Validate the iteration cap."""
    if isinstance(max_iter, bool) or not isinstance(max_iter, int):
        raise TypeError(f"max_iter must be int, got {type(max_iter)}")
    if max_iter < 1:
        raise ValueError(f"max_iter must be at least 1, got {max_iter}")


def check_random_state(random_state: Optional[Union[int, torch.Generator]]) -> Optional[torch.Generator]:
    """Create generator from random state.

    Args:
        random_state: Seed or generator

    Returns:
        Generator, or None to use torch's process-wide generator
    """
    if random_state is None:
        return None
    elif isinstance(random_state, torch.Generator):
        return random_state
    elif isinstance(random_state, (int, np.integer)) and not isinstance(random_state, bool):
        generator = torch.Generator()
        generator.manual_seed(int(random_state))
        return generator
    else:
        raise TypeError(f"random_state must be int or Generator, got {type(random_state)}")
