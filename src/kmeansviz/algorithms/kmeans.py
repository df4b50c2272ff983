"""
K-means clustering algorithm.

The classic Lloyd iteration assembled from the engine's components:
K-means++ seeding, nearest-centroid assignment, mean update with
empty-cluster reseeding, and a centroid-shift convergence test.
"""

from typing import Optional, Sequence, Any, Union
import torch

from ..base.clustering_base import BaseClusteringAlgorithm
from ..base.data_structures import ClusteringResult
from ..assignments.hard import HardAssignment
from ..initialization.kmeans_plusplus import KMeansPlusPlusInit
from ..utils.convergence import CentroidShift
from ..updates.mean import MeanUpdater
from ..utils.metrics import calculate_inertia
from ..utils.validation import validate_points


class KMeans(BaseClusteringAlgorithm):
    """K-means clustering algorithm.

    Partitions 2-D points into K clusters by minimizing the within-cluster
    sum of squared distances.

    Parameters
    ----------
    n_clusters : int
        Number of clusters
    max_iter : int, default=100
        Maximum number of update/reassign passes. Hitting the cap is not
        an error; the last state is returned.
    tol : float, default=1e-3
        The run has converged once every centroid moved less than this
        distance in one pass
    verbose : int, default=0
        Verbosity level
    random_state : int or torch.Generator, optional
        Random source for seeding and empty-cluster reseeding. None uses
        torch's process-wide generator, so repeated runs may differ.

    Attributes
    ----------
    result_ : ClusteringResult
        Centroids, labeled points, inertia and iteration count
    cluster_centers_ : Tensor of shape (n_clusters, 2)
        Cluster centroids
    labels_ : list of int
        Cluster slot of every training point
    inertia_ : float
        Sum of squared distances to the assigned centroid
    n_iter_ : int
        Number of iterations run, including the one that converged
    history_ : list of AlgorithmState
        Per-iteration centroids, inertia and shift
    """

    def __init__(self,
                 n_clusters: int,
                 max_iter: int = 100,
                 tol: float = 1e-3,
                 verbose: int = 0,
                 random_state: Optional[Union[int, torch.Generator]] = None):
        """Initialize K-means algorithm."""
        super().__init__(
            n_clusters=n_clusters,
            max_iter=max_iter,
            tol=tol,
            verbose=verbose,
            random_state=random_state
        )

    def _create_components(self) -> None:
        """Create K-means specific components."""
        self.initialization_strategy = KMeansPlusPlusInit()
        self.assignment_strategy = HardAssignment()
        self.update_strategy = MeanUpdater()
        self.convergence_criterion = CentroidShift(tol=self.tol)

    def score(self, points: Sequence[Any]) -> float:
        """Opposite of the inertia of ``points`` against the fitted centroids."""
        if not self.fitted_:
            raise RuntimeError("Model must be fitted before calling score")

        points = validate_points(points)
        labeled = self.assignment_strategy.compute_assignments(points, self.result_.centroids)
        return -calculate_inertia(labeled, self.result_.centroids)


def run_kmeans(points: Sequence[Any], k: int, max_iterations: int = 100,
               random_state: Optional[Union[int, torch.Generator]] = None,
               verbose: int = 0) -> ClusteringResult:
    """Run K-Means on a point set.

    Args:
        points: Point set (Point records, (x, y) pairs, mappings or an
            (n, 2) array)
        k: Number of clusters
        max_iterations: Cap on update/reassign passes
        random_state: Seed or generator; None for unseeded behavior
        verbose: Verbosity level

    Returns:
        ClusteringResult with K centroids, labeled points, inertia and
        iteration count

    Raises:
        InsufficientPointsError: If ``len(points) < k``; nothing is computed
    """
    model = KMeans(n_clusters=k, max_iter=max_iterations,
                   verbose=verbose, random_state=random_state)
    return model.fit(points).result_
