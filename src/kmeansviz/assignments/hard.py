"""
Hard assignment strategy.

Assigns each point to its nearest centroid under the Euclidean distance.
"""

from typing import List, Sequence, Tuple
from dataclasses import replace
import torch
from torch import Tensor

from ..base.interfaces import AssignmentStrategy
from ..base.data_structures import (
    Point, Centroid, points_to_tensor, centroids_to_tensor
)
from ..distances.euclidean import euclidean_distances


class HardAssignment(AssignmentStrategy):
    """Hard (discrete) assignment to nearest centroid.

    Ties go to the lowest slot index. Points come back as new ``Point``
    records carrying the slot of their nearest centroid.
    """

    def nearest(self, points: Sequence[Point],
                centroids: Sequence[Centroid]) -> Tuple[Tensor, Tensor]:
        """Nearest slot and distance to it for every point.

        Returns:
            slots: (n,) long tensor of centroid slot indices
            distances: (n,) tensor of distances to the chosen centroid
        """
        X = points_to_tensor(points)
        C = centroids_to_tensor(centroids)

        distances = euclidean_distances(X, C)

        # argmin returns the first minimal index
        positions = torch.argmin(distances, dim=1)
        min_distances = torch.gather(distances, 1, positions.unsqueeze(1)).squeeze(1)

        slot_ids = torch.tensor([c.cluster for c in centroids], dtype=torch.long)
        return slot_ids[positions], min_distances

    def compute_assignments(self, points: Sequence[Point],
                            centroids: Sequence[Centroid]) -> List[Point]:
        """Assign each point to nearest centroid.

        Args:
            points: Data points (labels, if any, are ignored)
            centroids: K centroids

        Returns:
            New list of labeled points
        """
        if len(points) == 0:
            return []

        slots, _ = self.nearest(points, centroids)
        return [replace(p, cluster=int(s)) for p, s in zip(points, slots.tolist())]


def assign_clusters(points: Sequence[Point],
                    centroids: Sequence[Centroid]) -> List[Point]:
    """Functional form of :class:`HardAssignment`."""
    return HardAssignment().compute_assignments(points, centroids)
