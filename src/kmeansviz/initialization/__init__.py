"""Initialization strategies for clustering algorithms."""

from .kmeans_plusplus import KMeansPlusPlusInit, initialize_centroids

__all__ = [
    'KMeansPlusPlusInit',
    'initialize_centroids'
]
