"""Utility functions for the K-Means engine."""

from .convergence import CentroidShift

from .metrics import (
    pairwise_distances,
    calculate_inertia,
    calculate_silhouette_score,
    calculate_silhouette_scores,
    silhouette_profile,
    silhouette_quality
)

from .validation import (
    InsufficientPointsError,
    validate_points,
    check_n_clusters,
    check_max_iter,
    check_random_state
)

__all__ = [
    # Convergence criteria
    'CentroidShift',

    # Metrics
    'pairwise_distances',
    'calculate_inertia',
    'calculate_silhouette_score',
    'calculate_silhouette_scores',
    'silhouette_profile',
    'silhouette_quality',

    # Validation
    'InsufficientPointsError',
    'validate_points',
    'check_n_clusters',
    'check_max_iter',
    'check_random_state'
]
