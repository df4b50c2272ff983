"""Clustering algorithm implementations."""

from .kmeans import KMeans, run_kmeans
from .elbow import (
    ElbowAnalysis,
    elbow_sweep,
    elbow_curvatures,
    find_optimal_k,
    estimate_optimal_k
)

__all__ = [
    'KMeans',
    'run_kmeans',
    'ElbowAnalysis',
    'elbow_sweep',
    'elbow_curvatures',
    'find_optimal_k',
    'estimate_optimal_k'
]
