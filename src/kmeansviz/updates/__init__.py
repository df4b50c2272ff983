"""Parameter update strategies for clustering algorithms."""

from .mean import MeanUpdater, update_centroids

__all__ = ['MeanUpdater', 'update_centroids']
