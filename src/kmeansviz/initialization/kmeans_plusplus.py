"""
K-means++ initialization strategy.

Selects initial cluster centers using the K-means++ algorithm, which chooses
centers that are far apart to improve convergence speed and quality.
"""

from typing import List, Optional, Sequence
import torch

from ..base.interfaces import InitializationStrategy
from ..base.data_structures import Point, Centroid, points_to_tensor
from ..distances.euclidean import euclidean_distances


class KMeansPlusPlusInit(InitializationStrategy):
    """K-means++ initialization for better starting positions.

    Algorithm:
    1. Choose first center uniformly at random
    2. For each remaining center:
       - Compute squared distance from each point to nearest existing center
       - Choose next center with probability proportional to that distance,
         by walking the cumulative sum up to a uniform random threshold

    A single candidate is drawn per center. The same position can be chosen
    twice when the data contains duplicate points.
    """

    def initialize(self, points: Sequence[Point], n_clusters: int,
                   generator: Optional[torch.Generator] = None) -> List[Centroid]:
        """Initialize cluster centers using K-means++.

        Args:
            points: Point set with at least n_clusters members
            n_clusters: Number of clusters
            generator: Random source (None for torch's global generator)

        Returns:
            List of centroids in slot order
        """
        n_points = len(points)

        if n_clusters > n_points:
            raise ValueError(f"Cannot create {n_clusters} clusters from {n_points} points")

        X = points_to_tensor(points)

        # Choose first center uniformly at random
        first_idx = torch.randint(n_points, (1,), generator=generator).item()
        center_indices = [first_idx]

        # Squared distance of every point to its nearest chosen center
        min_sq_dist = euclidean_distances(X, X[first_idx].unsqueeze(0), squared=True)[:, 0]

        for _ in range(1, n_clusters):
            idx = self._sample_index(min_sq_dist, generator)
            center_indices.append(idx)

            new_sq_dist = euclidean_distances(X, X[idx].unsqueeze(0), squared=True)[:, 0]
            min_sq_dist = torch.minimum(min_sq_dist, new_sq_dist)

        return [
            Centroid(points[idx].x, points[idx].y, slot)
            for slot, idx in enumerate(center_indices)
        ]

    @staticmethod
    def _sample_index(weights: torch.Tensor,
                      generator: Optional[torch.Generator]) -> int:
        """Draw an index with probability proportional to ``weights``.

        The first index whose cumulative weight reaches the threshold wins,
        so a zero total (every point sits on a chosen center) picks index 0.
        """
        cumulative = torch.cumsum(weights, dim=0)
        threshold = torch.rand(1, generator=generator, dtype=torch.float64) * cumulative[-1]
        idx = torch.searchsorted(cumulative, threshold).item()
        # Rounding can push the threshold past the last cumulative value
        return min(idx, len(weights) - 1)


def initialize_centroids(points: Sequence[Point], n_clusters: int,
                         generator: Optional[torch.Generator] = None) -> List[Centroid]:
    """Functional form of :class:`KMeansPlusPlusInit`."""
    return KMeansPlusPlusInit().initialize(points, n_clusters, generator=generator)
