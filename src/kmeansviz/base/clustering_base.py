"""
Base class for clustering algorithms in the K-Means engine.

Provides the common algorithmic skeleton for alternating optimization
between assignment and update steps.
"""

from abc import abstractmethod
from typing import Optional, Dict, Any, List, Sequence, Union
import torch
from torch import Tensor
import time
import warnings

from .interfaces import (
    AssignmentStrategy, ParameterUpdater,
    InitializationStrategy, ConvergenceCriterion
)
from .data_structures import (
    Point, Centroid, AlgorithmState, ClusteringResult, centroids_to_tensor
)
from ..utils.metrics import calculate_inertia
from ..utils.validation import (
    validate_points, check_n_clusters, check_max_iter, check_random_state
)


class BaseClusteringAlgorithm:
    """Base class implementing the alternating optimization framework.

    Subclasses need to specify:
    - Initialization strategy
    - Assignment strategy
    - Parameter update strategy
    - Convergence criterion

    The loop seeds the centroids, assigns every point once, then repeats
    update -> reassign -> convergence check until the criterion holds or
    ``max_iter`` passes have run. Reaching ``max_iter`` is not an error; the
    last state is returned as is.
    """

    def __init__(self,
                 n_clusters: int,
                 max_iter: int = 100,
                 tol: float = 1e-3,
                 verbose: int = 0,
                 random_state: Optional[Union[int, torch.Generator]] = None):
        """
        Args:
            n_clusters: Number of clusters K
            max_iter: Maximum iterations
            tol: Convergence tolerance
            verbose: Verbosity level (0=silent, 1=progress, 2=detailed)
            random_state: Seed or generator; None uses torch's global RNG
        """
        self.n_clusters = n_clusters
        self.max_iter = max_iter
        self.tol = tol
        self.verbose = verbose
        self.random_state = random_state

        # These will be set by subclasses
        self.assignment_strategy: Optional[AssignmentStrategy] = None
        self.update_strategy: Optional[ParameterUpdater] = None
        self.initialization_strategy: Optional[InitializationStrategy] = None
        self.convergence_criterion: Optional[ConvergenceCriterion] = None

        # Algorithm state
        self.fitted_ = False
        self.n_iter_ = 0
        self.history_: List[AlgorithmState] = []
        self.result_: Optional[ClusteringResult] = None

    @abstractmethod
    def _create_components(self) -> None:
        """Create algorithm-specific components.

        Subclasses must implement this to instantiate:
        - self.initialization_strategy
        - self.assignment_strategy
        - self.update_strategy
        - self.convergence_criterion
        """
        pass

    def fit(self, points: Sequence[Any]) -> 'BaseClusteringAlgorithm':
        """Fit the clustering model.

        Args:
            points: Point set (see ``validate_points`` for accepted formats)

        Returns:
            Self

        Raises:
            InsufficientPointsError: If there are fewer points than clusters
        """
        points = validate_points(points)
        check_n_clusters(self.n_clusters, len(points))
        check_max_iter(self.max_iter)
        generator = check_random_state(self.random_state)

        self._create_components()

        if self.verbose:
            print(f"Initializing {self.n_clusters} clusters from {len(points)} points...")

        start_time = time.time()
        centroids = self.initialization_strategy.initialize(
            points, self.n_clusters, generator=generator
        )

        # Initial assignment, not counted as an iteration
        labeled = self.assignment_strategy.compute_assignments(points, centroids)

        self.n_iter_ = 0
        self.history_ = []
        self.convergence_criterion.reset()
        converged = False

        for iteration in range(1, self.max_iter + 1):
            iter_start_time = time.time()

            # Update step, from the labels of the previous pass
            new_centroids = self.update_strategy.update(
                labeled, self.n_clusters, generator=generator
            )
            reseeded = tuple(getattr(self.update_strategy, 'last_reseeded', ()))

            # Assignment step
            labeled = self.assignment_strategy.compute_assignments(labeled, new_centroids)

            converged = self.convergence_criterion.check({
                'iteration': iteration,
                'previous_centroids': centroids,
                'centroids': new_centroids
            })
            centroids = new_centroids
            self.n_iter_ = iteration

            objective_value = calculate_inertia(labeled, centroids)
            last_check = self.convergence_criterion.history[-1] \
                if self.convergence_criterion.history else {}
            max_shift = last_check.get('max_shift', float('nan'))
            self.history_.append(AlgorithmState(
                iteration=iteration,
                centroids=tuple(centroids),
                inertia=objective_value,
                max_shift=max_shift,
                reseeded=reseeded,
                converged=converged
            ))

            # Logging
            iter_time = time.time() - iter_start_time
            if reseeded and self.verbose >= 2:
                print(f"Iteration {iteration:3d}: reseeded empty clusters {list(reseeded)}")
            if self.verbose >= 2 or (self.verbose >= 1 and iteration % 10 == 0):
                print(f"Iteration {iteration:3d}: inertia = {objective_value:.6f} "
                      f"max shift = {max_shift:.6f} ({iter_time:.3f}s)")

            if converged:
                if self.verbose:
                    print(f"Converged at iteration {iteration}")
                break

        total_time = time.time() - start_time

        if self.verbose:
            if not converged:
                warnings.warn(f"Failed to converge after {self.max_iter} iterations")
            print(f"Total fitting time: {total_time:.3f}s")

        self.result_ = ClusteringResult(
            centroids=tuple(centroids),
            points=tuple(labeled),
            inertia=calculate_inertia(labeled, centroids),
            iterations=self.n_iter_,
            history=tuple(self.history_)
        )
        self.fitted_ = True
        return self

    def fit_predict(self, points: Sequence[Any]) -> List[int]:
        """Fit and return the cluster slot of every point."""
        self.fit(points)
        return self.labels_

    def predict(self, points: Sequence[Any]) -> List[int]:
        """Nearest fitted centroid for new points.

        Args:
            points: Point set

        Returns:
            Cluster slot of every point
        """
        if not self.fitted_:
            raise RuntimeError("Model must be fitted before calling predict")

        points = validate_points(points)
        labeled = self.assignment_strategy.compute_assignments(
            points, self.result_.centroids
        )
        return [p.cluster for p in labeled]

    @property
    def labels_(self) -> List[int]:
        """Cluster slot of every training point."""
        if not self.fitted_:
            raise RuntimeError("Model must be fitted first")
        return list(self.result_.labels)

    @property
    def centroids_(self) -> List[Centroid]:
        if not self.fitted_:
            raise RuntimeError("Model must be fitted first")
        return list(self.result_.centroids)

    @property
    def cluster_centers_(self) -> Tensor:
        """Get cluster centers as a (K, 2) tensor."""
        if not self.fitted_:
            raise RuntimeError("Model must be fitted first")
        return centroids_to_tensor(self.result_.centroids)

    @property
    def inertia_(self) -> float:
        """Get final objective value."""
        if not self.fitted_:
            raise RuntimeError("Model must be fitted first")
        return self.result_.inertia

    def get_params(self, deep: bool = True) -> Dict[str, Any]:
        """Get parameters (sklearn compatibility)."""
        return {
            'n_clusters': self.n_clusters,
            'max_iter': self.max_iter,
            'tol': self.tol,
            'verbose': self.verbose,
            'random_state': self.random_state
        }

    def set_params(self, **params) -> 'BaseClusteringAlgorithm':
        """Set parameters (sklearn compatibility)."""
        valid = self.get_params()
        for key, value in params.items():
            if key not in valid:
                raise ValueError(f"Invalid parameter {key!r} for {type(self).__name__}")
            setattr(self, key, value)
        return self
