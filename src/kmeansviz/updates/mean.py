"""
Mean update strategy for centroid-based clustering.
"""

from typing import List, Optional, Sequence
import torch

from ..base.interfaces import ParameterUpdater
from ..base.data_structures import (
    Point, Centroid, points_to_tensor, labels_to_tensor
)


class MeanUpdater(ParameterUpdater):
    """Moves each centroid to the mean of the points labeled with its slot.

    A slot with no members is reseeded at a uniformly random point drawn
    from the whole point set (not only from unclaimed points), which keeps
    exactly K centroids alive. The slots reseeded by the last call are kept
    in ``last_reseeded``.
    """

    def __init__(self):
        self.last_reseeded: List[int] = []

    def update(self, points: Sequence[Point], n_clusters: int,
               generator: Optional[torch.Generator] = None) -> List[Centroid]:
        """Recompute centroids.

        Args:
            points: Labeled points
            n_clusters: Number of slots K
            generator: Random source for the empty-cluster fallback

        Returns:
            K new centroids in slot order
        """
        X = points_to_tensor(points)
        labels = labels_to_tensor(points)

        centroids = []
        self.last_reseeded = []

        for k in range(n_clusters):
            mask = labels == k
            if mask.any():
                mean = X[mask].mean(dim=0)
                centroids.append(Centroid(mean[0].item(), mean[1].item(), k))
            else:
                idx = torch.randint(len(points), (1,), generator=generator).item()
                centroids.append(Centroid(points[idx].x, points[idx].y, k))
                self.last_reseeded.append(k)

        return centroids


def update_centroids(points: Sequence[Point], n_clusters: int,
                     generator: Optional[torch.Generator] = None) -> List[Centroid]:
    """Functional form of :class:`MeanUpdater`."""
    return MeanUpdater().update(points, n_clusters, generator=generator)
