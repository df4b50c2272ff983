"""
Convergence criterion for the K-Means loop.

The loop stops once no centroid moved by ``tol`` or more between the
previous centroid set and the freshly updated one.
"""

from typing import Dict, Any

from ..base.interfaces import ConvergenceCriterion
from ..distances.euclidean import distance


class CentroidShift(ConvergenceCriterion):
    """Convergence based on how far each centroid moved."""

    def __init__(self, tol: float = 1e-3):
        """
        Args:
            tol: Every slot must move strictly less than this distance
        """
        super().__init__()
        self.tol = tol

    @staticmethod
    def shifts(previous, current) -> list:
        """Per-slot displacement between two centroid sets, matched by slot."""
        by_slot = {c.cluster: c for c in current}
        return [distance(old, by_slot[old.cluster]) for old in previous]

    def check(self, current_state: Dict[str, Any]) -> bool:
        """Check if centroids have stabilized.

        Expects ``previous_centroids`` and ``centroids`` in the state.
        """
        shifts = self.shifts(current_state['previous_centroids'],
                             current_state['centroids'])
        max_shift = max(shifts) if shifts else 0.0
        converged = all(s < self.tol for s in shifts)

        self.history.append({
            'iteration': current_state.get('iteration', len(self.history)),
            'max_shift': max_shift,
            'converged': converged
        })

        return converged
