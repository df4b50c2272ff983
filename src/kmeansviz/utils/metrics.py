"""
Clustering evaluation metrics.

Inertia (within-cluster sum of squares) and the silhouette coefficient,
computed from a labeled point set. All degenerate inputs (no points, a
single cluster, singleton clusters, coincident points) map to defined
fallback values instead of raising.
"""

from typing import Optional, Sequence, List, Dict
import torch
from torch import Tensor

from ..base.data_structures import (
    Point, Centroid, SilhouetteSample, points_to_tensor, centroids_to_tensor
)
from ..distances.euclidean import euclidean_distances


def pairwise_distances(X: Tensor, Y: Optional[Tensor] = None) -> Tensor:
    """Compute pairwise Euclidean distances between points.

    Args:
        X: (n, 2) first set of points
        Y: (m, 2) second set of points (if None, uses X)

    Returns:
        (n, m) distance matrix
    """
    if Y is None:
        Y = X
    return euclidean_distances(X, Y)


def calculate_inertia(points: Sequence[Point], centroids: Sequence[Centroid]) -> float:
    """Compute sum of squared distances to the assigned centroids (inertia).

    Each point is matched to ``centroids[point.cluster]``; a point without a
    label counts as belonging to slot 0.

    Args:
        points: Labeled data points
        centroids: Centroids, indexed by position

    Returns:
        Total inertia (lower is better)
    """
    if len(points) == 0:
        return 0.0

    X = points_to_tensor(points)
    C = centroids_to_tensor(centroids)
    index = torch.tensor([p.cluster or 0 for p in points], dtype=torch.long)

    diff = X - C[index]
    return torch.sum(diff * diff).item()


def _silhouette_values(points: Sequence[Point]) -> Tensor:
    """Silhouette coefficient of every point, as an (n,) tensor.

    Points are grouped by their ``cluster`` value. With fewer than two
    groups every coefficient is 0.
    """
    n_samples = len(points)
    groups = list(dict.fromkeys(p.cluster for p in points))
    n_groups = len(groups)

    if n_groups <= 1:
        return torch.zeros(n_samples, dtype=torch.float64)

    position = {label: j for j, label in enumerate(groups)}
    codes = torch.tensor([position[p.cluster] for p in points], dtype=torch.long)

    distances = pairwise_distances(points_to_tensor(points))

    # Sum of distances from every point to every group, and group sizes
    one_hot = torch.nn.functional.one_hot(codes, n_groups).to(torch.float64)
    group_sums = distances @ one_hot              # (n, G)
    group_sizes = one_hot.sum(dim=0)              # (G,)

    own_sum = torch.gather(group_sums, 1, codes.unsqueeze(1)).squeeze(1)
    own_size = group_sizes[codes]

    # Mean intra-cluster distance, excluding the point itself; 0 for singletons
    a = torch.where(own_size > 1,
                    own_sum / (own_size - 1).clamp(min=1),
                    torch.zeros_like(own_sum))

    # Mean distance to the nearest other group
    other_means = group_sums / group_sizes.unsqueeze(0)
    other_means = other_means.scatter(1, codes.unsqueeze(1), float('inf'))
    b = other_means.min(dim=1).values

    denom = torch.maximum(a, b)
    s = (b - a) / denom
    s = torch.where((denom == 0) | torch.isnan(s), torch.zeros_like(s), s)
    return s


def calculate_silhouette_scores(points: Sequence[Point]) -> List[SilhouetteSample]:
    """Per-point silhouette coefficients.

    For point i in cluster c, ``a`` is its mean distance to the other members
    of c (0 when c is a singleton) and ``b`` its smallest mean distance to
    another cluster; the coefficient is ``(b - a) / max(a, b)``, with 0 when
    that is undefined.

    Args:
        points: Labeled data points

    Returns:
        One SilhouetteSample per point, in input order
    """
    if len(points) == 0:
        return []

    values = _silhouette_values(points).tolist()
    return [SilhouetteSample(point, score) for point, score in zip(points, values)]


def calculate_silhouette_score(points: Sequence[Point]) -> float:
    """Compute mean Silhouette Coefficient.

    Returns 0 for an empty point set or when all points share one cluster.

    Args:
        points: Labeled data points

    Returns:
        Mean silhouette coefficient in [-1, 1]
    """
    if len(points) == 0:
        return 0.0
    return _silhouette_values(points).mean().item()


def silhouette_profile(points: Sequence[Point],
                       n_clusters: int) -> Dict[int, List[SilhouetteSample]]:
    """Silhouette coefficients grouped by cluster slot, best first.

    Args:
        points: Labeled data points
        n_clusters: Number of slots K; every slot 0..K-1 gets an entry

    Returns:
        Mapping slot -> samples of that slot sorted by descending score
    """
    samples = calculate_silhouette_scores(points)
    return {
        k: sorted((s for s in samples if s.point.cluster == k),
                  key=lambda s: s.score, reverse=True)
        for k in range(n_clusters)
    }


def silhouette_quality(score: float) -> str:
    """Coarse rating of a mean silhouette score: 'good', 'fair' or 'poor'."""
    if score > 0.5:
        return 'good'
    if score > 0.25:
        return 'fair'
    return 'poor'
