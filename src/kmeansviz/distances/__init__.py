"""Distance functions."""

from .euclidean import distance, squared_distance, euclidean_distances

__all__ = ['distance', 'squared_distance', 'euclidean_distances']
