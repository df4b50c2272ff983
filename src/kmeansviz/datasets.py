"""
Synthetic point sets for trying out the engine.

``make_sample_blobs`` reproduces the demo data of the visualizer: a few
ring-shaped blobs scattered in canvas coordinates.
"""

from typing import List, Optional, Sequence, Tuple, Union
import math
import torch

from .base.data_structures import Point
from .utils.validation import check_random_state

# Blob centers in canvas pixel coordinates
SAMPLE_CENTERS: Tuple[Tuple[float, float], ...] = (
    (200.0, 150.0),
    (600.0, 150.0),
    (400.0, 350.0),
)


def make_sample_blobs(centers: Sequence[Tuple[float, float]] = SAMPLE_CENTERS,
                      points_per_cluster: int = 30,
                      min_radius: float = 20.0,
                      max_radius: float = 100.0,
                      random_state: Optional[Union[int, torch.Generator]] = None) -> List[Point]:
    """Generate unlabeled points around each center.

    Every point sits at a uniform random angle and at a radius drawn
    uniformly from ``[min_radius, max_radius)``.

    Args:
        centers: Blob centers
        points_per_cluster: Points generated around each center
        min_radius: Smallest distance from the center
        max_radius: Upper bound on the distance from the center
        random_state: Seed or generator; None uses torch's global RNG

    Returns:
        ``len(centers) * points_per_cluster`` points, grouped by center
    """
    if points_per_cluster < 0:
        raise ValueError(f"points_per_cluster must be non-negative, got {points_per_cluster}")
    if not 0 <= min_radius <= max_radius:
        raise ValueError(f"Expected 0 <= min_radius <= max_radius, got {min_radius}, {max_radius}")

    generator = check_random_state(random_state)

    samples = []
    for cx, cy in centers:
        angles = torch.rand(points_per_cluster, generator=generator, dtype=torch.float64) * 2 * math.pi
        radii = torch.rand(points_per_cluster, generator=generator, dtype=torch.float64) \
            * (max_radius - min_radius) + min_radius

        xs = cx + torch.cos(angles) * radii
        ys = cy + torch.sin(angles) * radii
        samples.extend(Point(x, y) for x, y in zip(xs.tolist(), ys.tolist()))

    return samples
