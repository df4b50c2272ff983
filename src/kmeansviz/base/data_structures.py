"""
Core data structures for the K-Means visualizer engine.

Points and centroids are small immutable records; the pipeline stages
return fresh instances instead of mutating their inputs. Helpers at the
bottom of the module pack them into float64 tensors for the vectorised
distance computations.
"""

from typing import Optional, Sequence, Tuple, Dict
from dataclasses import dataclass, field
import torch
from torch import Tensor


# Label used in tensors for points that have not been assigned yet
UNASSIGNED = -1


@dataclass(frozen=True)
class Point:
    """A 2-D data point, optionally labeled with its cluster slot."""
    x: float
    y: float
    cluster: Optional[int] = None


@dataclass(frozen=True)
class Centroid:
    """Representative of cluster slot ``cluster`` (0..K-1)."""
    x: float
    y: float
    cluster: int


@dataclass(frozen=True)
class AlgorithmState:
    """Snapshot of one pass of the assign/update loop.

    Used for convergence diagnostics and for checking the monotone descent
    of inertia across iterations.
    """
    iteration: int
    centroids: Tuple[Centroid, ...]
    inertia: float
    max_shift: float
    reseeded: Tuple[int, ...] = ()
    converged: bool = False


@dataclass(frozen=True)
class ClusteringResult:
    """Output of a single K-Means run."""
    centroids: Tuple[Centroid, ...]
    points: Tuple[Point, ...]
    inertia: float
    iterations: int
    history: Tuple[AlgorithmState, ...] = field(default=(), repr=False)

    @property
    def n_clusters(self) -> int:
        return len(self.centroids)

    @property
    def labels(self) -> Tuple[int, ...]:
        """Cluster slot of every point, in input order."""
        return tuple(p.cluster for p in self.points)

    @property
    def converged(self) -> bool:
        return bool(self.history) and self.history[-1].converged

    def cluster_sizes(self) -> Dict[int, int]:
        """Number of points per slot, including empty slots."""
        sizes = {c.cluster: 0 for c in self.centroids}
        for p in self.points:
            sizes[p.cluster] = sizes.get(p.cluster, 0) + 1
        return sizes


@dataclass(frozen=True)
class ElbowPoint:
    """Inertia obtained for one tested K."""
    k: int
    inertia: float


@dataclass(frozen=True)
class SilhouetteSample:
    """A point paired with its silhouette coefficient."""
    point: Point
    score: float


def points_to_tensor(points: Sequence[Point]) -> Tensor:
    """Stack point coordinates into an (n, 2) float64 tensor."""
    if len(points) == 0:
        return torch.zeros(0, 2, dtype=torch.float64)
    return torch.tensor([[p.x, p.y] for p in points], dtype=torch.float64)


def centroids_to_tensor(centroids: Sequence[Centroid]) -> Tensor:
    """Stack centroid coordinates into a (k, 2) float64 tensor, in slot order."""
    if len(centroids) == 0:
        return torch.zeros(0, 2, dtype=torch.float64)
    return torch.tensor([[c.x, c.y] for c in centroids], dtype=torch.float64)


def labels_to_tensor(points: Sequence[Point], missing: int = UNASSIGNED) -> Tensor:
    """(n,) long tensor of cluster labels; unlabeled points get ``missing``."""
    return torch.tensor(
        [missing if p.cluster is None else p.cluster for p in points],
        dtype=torch.long
    )
