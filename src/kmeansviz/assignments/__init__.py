"""Assignment strategies for clustering algorithms."""

from .hard import HardAssignment, assign_clusters

__all__ = ['HardAssignment', 'assign_clusters']
