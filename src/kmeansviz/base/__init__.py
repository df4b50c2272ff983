"""Base classes, interfaces and data structures for the K-Means engine."""

from .data_structures import (
    Point,
    Centroid,
    ClusteringResult,
    ElbowPoint,
    SilhouetteSample,
    AlgorithmState,
    points_to_tensor,
    centroids_to_tensor,
    labels_to_tensor
)

from .interfaces import (
    InitializationStrategy,
    AssignmentStrategy,
    ParameterUpdater,
    ConvergenceCriterion
)

__all__ = [
    # Data structures
    'Point',
    'Centroid',
    'ClusteringResult',
    'ElbowPoint',
    'SilhouetteSample',
    'AlgorithmState',
    'points_to_tensor',
    'centroids_to_tensor',
    'labels_to_tensor',

    # Interfaces
    'InitializationStrategy',
    'AssignmentStrategy',
    'ParameterUpdater',
    'ConvergenceCriterion'
]
