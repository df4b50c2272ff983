"""
Core interfaces for the K-Means engine.

Each stage of the pipeline (initialization, assignment, update,
convergence) is a small strategy object so the driver can be assembled
from interchangeable parts and tested one stage at a time.
"""

from abc import ABC, abstractmethod
from typing import Optional, Dict, Any, List, Sequence
import torch

from .data_structures import Point, Centroid


class InitializationStrategy(ABC):
    """Abstract base class for centroid seeding strategies."""

    @abstractmethod
    def initialize(self, points: Sequence[Point], n_clusters: int,
                   generator: Optional[torch.Generator] = None) -> List[Centroid]:
        """Choose initial centroids.

        Args:
            points: Point set with at least ``n_clusters`` members
            n_clusters: Number of centroids K
            generator: Random source; None uses torch's global generator

        Returns:
            K centroids in slot order 0..K-1
        """
        pass


class AssignmentStrategy(ABC):
    """Abstract base class for point-to-centroid assignment."""

    @abstractmethod
    def compute_assignments(self, points: Sequence[Point],
                            centroids: Sequence[Centroid]) -> List[Point]:
        """Label every point with a centroid slot.

        Returns:
            New list of labeled points; the input is left untouched
        """
        pass


class ParameterUpdater(ABC):
    """Abstract base class for centroid update strategies."""

    @abstractmethod
    def update(self, points: Sequence[Point], n_clusters: int,
               generator: Optional[torch.Generator] = None) -> List[Centroid]:
        """Recompute K centroids from the labels carried by ``points``."""
        pass


class ConvergenceCriterion(ABC):
    """Abstract base class for convergence checking."""

    def __init__(self):
        self.history = []

    @abstractmethod
    def check(self, current_state: Dict[str, Any]) -> bool:
        """Check if algorithm has converged.

        Args:
            current_state: Dictionary containing current algorithm state

        Returns:
            True if converged, False otherwise
        """
        pass

    def reset(self):
        """Reset convergence history."""
        self.history = []
