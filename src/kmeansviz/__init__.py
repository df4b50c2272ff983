"""
kmeansviz: the clustering and cluster-quality engine behind an interactive
K-Means visualizer.

The package implements K-Means on small 2-D point sets together with the
metrics a visualizer shows next to it:
- K-means++ seeding
- Lloyd iteration with empty-cluster reseeding
- Inertia (SSE) and silhouette scores
- Elbow-based estimation of the number of clusters

Example usage:
    >>> from kmeansviz import make_sample_blobs, run_kmeans, calculate_silhouette_score
    >>>
    >>> points = make_sample_blobs(random_state=0)
    >>> result = run_kmeans(points, k=3, random_state=0)
    >>> result.inertia, result.iterations
    >>> calculate_silhouette_score(result.points)
"""

__version__ = '0.1.0'

from .base import (
    Point,
    Centroid,
    ClusteringResult,
    ElbowPoint,
    SilhouetteSample,
    AlgorithmState
)

from .distances import distance
from .initialization import KMeansPlusPlusInit, initialize_centroids
from .assignments import HardAssignment, assign_clusters
from .updates import MeanUpdater, update_centroids

from .algorithms import (
    KMeans,
    run_kmeans,
    ElbowAnalysis,
    elbow_sweep,
    find_optimal_k,
    estimate_optimal_k
)

from .utils import (
    CentroidShift,
    InsufficientPointsError,
    calculate_inertia,
    calculate_silhouette_score,
    calculate_silhouette_scores,
    silhouette_profile,
    silhouette_quality
)

from .datasets import make_sample_blobs
from .session import ClusteringSession, SessionSnapshot

__all__ = [
    # Data model
    'Point',
    'Centroid',
    'ClusteringResult',
    'ElbowPoint',
    'SilhouetteSample',
    'AlgorithmState',

    # Pipeline stages
    'distance',
    'KMeansPlusPlusInit',
    'initialize_centroids',
    'HardAssignment',
    'assign_clusters',
    'MeanUpdater',
    'update_centroids',
    'CentroidShift',

    # Driver and elbow
    'KMeans',
    'run_kmeans',
    'ElbowAnalysis',
    'elbow_sweep',
    'find_optimal_k',
    'estimate_optimal_k',

    # Metrics
    'calculate_inertia',
    'calculate_silhouette_score',
    'calculate_silhouette_scores',
    'silhouette_profile',
    'silhouette_quality',

    # Errors
    'InsufficientPointsError',

    # Session and sample data
    'make_sample_blobs',
    'ClusteringSession',
    'SessionSnapshot',

    # Version
    '__version__'
]
