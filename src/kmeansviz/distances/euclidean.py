"""
Euclidean distance, the only metric used by the engine.

Scalar helpers work on anything exposing ``x`` and ``y`` (points and
centroids alike); the tensor helper computes full distance matrices for
the vectorised stages.
"""

import math
import torch
from torch import Tensor


def squared_distance(a, b) -> float:
    """Squared Euclidean distance between two entities with ``x``/``y``."""
    dx = a.x - b.x
    dy = a.y - b.y
    return dx * dx + dy * dy


def distance(a, b) -> float:
    """Euclidean distance between two entities with ``x``/``y``."""
    return math.sqrt(squared_distance(a, b))


def euclidean_distances(points: Tensor, centers: Tensor,
                        squared: bool = False) -> Tensor:
    """Distance matrix between two coordinate sets.

    Args:
        points: (n, 2) coordinates
        centers: (k, 2) coordinates
        squared: Return squared distances instead

    Returns:
        (n, k) tensor of distances
    """
    # Coincident points must come out as exactly 0
    diff = points.unsqueeze(1) - centers.unsqueeze(0)
    squared_distances = torch.sum(diff * diff, dim=2)

    if squared:
        return squared_distances
    return torch.sqrt(squared_distances)
