"""
Interactive clustering session.

Holds the state a visualizer front end works with: the current point set,
the chosen K and the outcome of the last run (clustering result,
silhouette score and elbow analysis). Rendering is left to the caller.
"""

from typing import Optional, List, Dict, Union
from dataclasses import dataclass, field
import torch

from .base.data_structures import Point, ClusteringResult, ElbowPoint, SilhouetteSample
from .algorithms.kmeans import run_kmeans
from .algorithms.elbow import elbow_sweep, find_optimal_k
from .datasets import make_sample_blobs
from .utils.metrics import (
    calculate_silhouette_score, silhouette_profile, silhouette_quality
)
from .utils.validation import check_n_clusters, check_random_state


@dataclass(frozen=True)
class SessionSnapshot:
    """Everything produced by one ``ClusteringSession.run`` call."""
    k: int
    result: ClusteringResult
    silhouette: float
    elbow: List[ElbowPoint] = field(default_factory=list)
    optimal_k: Optional[int] = None

    @property
    def quality(self) -> str:
        return silhouette_quality(self.silhouette)

    def silhouette_profile(self) -> Dict[int, List[SilhouetteSample]]:
        return silhouette_profile(self.result.points, self.k)


class ClusteringSession:
    """Point set plus clustering controls.

    Args:
        k: Number of clusters for the main run
        k_max: Largest K tried by the elbow sweep (further capped at N - 1)
        max_iterations: Iteration cap for every run
        random_state: Seed or generator used for every random draw of the
            session; None uses torch's global RNG
        verbose: Verbosity level
    """

    def __init__(self, k: int = 3, k_max: int = 8, max_iterations: int = 100,
                 random_state: Optional[Union[int, torch.Generator]] = None,
                 verbose: int = 0):
        self.k = k
        self.k_max = k_max
        self.max_iterations = max_iterations
        self.verbose = verbose
        self._generator = check_random_state(random_state)

        self.points: List[Point] = []
        self.snapshot: Optional[SessionSnapshot] = None

    @property
    def can_run(self) -> bool:
        return len(self.points) >= self.k

    def set_k(self, k: int) -> None:
        if isinstance(k, bool) or not isinstance(k, int) or k < 1:
            raise ValueError(f"k must be a positive int, got {k!r}")
        self.k = k

    def add_point(self, x: float, y: float) -> Point:
        """Append an unlabeled point."""
        point = Point(float(x), float(y))
        self.points.append(point)
        return point

    def generate_sample(self, **kwargs) -> List[Point]:
        """Replace the point set with sample blobs and drop previous results."""
        kwargs.setdefault('random_state', self._generator)
        self.points = make_sample_blobs(**kwargs)
        self.snapshot = None
        if self.verbose:
            print(f"Sample data generated: {len(self.points)} points")
        return self.points

    def run(self) -> SessionSnapshot:
        """Cluster the current points with K and run the elbow sweep.

        The session's points are replaced by their labeled copies.

        Raises:
            InsufficientPointsError: If there are fewer points than K
        """
        check_n_clusters(self.k, len(self.points))

        result = run_kmeans(self.points, self.k,
                            max_iterations=self.max_iterations,
                            random_state=self._generator,
                            verbose=max(self.verbose - 1, 0))
        self.points = list(result.points)

        silhouette = calculate_silhouette_score(result.points)
        elbow = elbow_sweep(self.points, k_min=2, k_max=self.k_max,
                            max_iterations=self.max_iterations,
                            random_state=self._generator)

        self.snapshot = SessionSnapshot(
            k=self.k,
            result=result,
            silhouette=silhouette,
            elbow=elbow,
            optimal_k=find_optimal_k(elbow)
        )

        if self.verbose:
            print(f"Clustering complete! Converged in {result.iterations} iterations")
        return self.snapshot

    def reset(self) -> None:
        """Clear points and results."""
        self.points = []
        self.snapshot = None
