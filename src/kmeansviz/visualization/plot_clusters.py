"""
Cluster visualization utilities.

Matplotlib renderings of the engine's outputs: labeled points with their
centroids, the elbow curve, and the silhouette diagram. Every function
draws on the given axes (or a new figure) and returns the axes.
"""

from typing import Optional, Sequence, List
import matplotlib.pyplot as plt
import numpy as np

from ..base.data_structures import Point, Centroid, ElbowPoint
from ..utils.metrics import silhouette_profile


def _cluster_colors(n_clusters: int) -> list:
    cmap = plt.get_cmap('tab10' if n_clusters <= 10 else 'tab20')
    return [cmap(i % cmap.N) for i in range(max(n_clusters, 1))]


def plot_clusters_2d(points: Sequence[Point],
                     centroids: Optional[Sequence[Centroid]] = None,
                     ax: Optional[plt.Axes] = None,
                     colors: Optional[List[str]] = None,
                     alpha: float = 0.7,
                     center_marker: str = 'X',
                     center_size: int = 200,
                     point_size: int = 50,
                     show_legend: bool = True,
                     invert_y: bool = False,
                     title: Optional[str] = None) -> plt.Axes:
    """Plot 2D clustering results.

    Args:
        points: Points, labeled or not; unlabeled points are drawn in grey
        centroids: Optional centroids
        ax: Matplotlib axes (created if None)
        colors: List of colors indexed by cluster slot
        alpha: Point transparency
        center_marker: Marker for centroids
        center_size: Size of centroid markers
        point_size: Size of data points
        show_legend: Whether to show legend
        invert_y: Flip the y axis to match canvas (screen) coordinates
        title: Plot title

    Returns:
        Matplotlib axes
    """
    if ax is None:
        fig, ax = plt.subplots(figsize=(8, 6))

    slots = sorted({p.cluster for p in points if p.cluster is not None})
    n_clusters = max([len(centroids or [])] + [s + 1 for s in slots])

    if colors is None:
        colors = _cluster_colors(n_clusters)

    unlabeled = [p for p in points if p.cluster is None]
    if unlabeled:
        ax.scatter([p.x for p in unlabeled], [p.y for p in unlabeled],
                   c='lightgrey', s=point_size, alpha=alpha,
                   edgecolors='black', linewidth=0.5, label='Unassigned')

    for slot in slots:
        members = [p for p in points if p.cluster == slot]
        ax.scatter([p.x for p in members], [p.y for p in members],
                   c=[colors[slot % len(colors)]],
                   s=point_size,
                   alpha=alpha,
                   edgecolors='black',
                   linewidth=0.5,
                   label=f'Cluster {slot}')

    if centroids:
        ax.scatter([c.x for c in centroids], [c.y for c in centroids],
                   c='black',
                   marker=center_marker,
                   s=center_size,
                   edgecolors='white',
                   linewidth=2,
                   label='Centroids',
                   zorder=10)

    ax.set_xlabel('x')
    ax.set_ylabel('y')
    if invert_y:
        ax.invert_yaxis()

    if title:
        ax.set_title(title)

    if show_legend and (slots or unlabeled or centroids):
        ax.legend()

    return ax


def plot_elbow(elbow_points: Sequence[ElbowPoint],
               optimal_k: Optional[int] = None,
               ax: Optional[plt.Axes] = None,
               title: str = 'Elbow Method - Optimal K') -> plt.Axes:
    """Inertia against K, with the chosen K highlighted.

    Args:
        elbow_points: Sweep results ordered by K
        optimal_k: K to mark, if any
        ax: Matplotlib axes (created if None)
        title: Plot title

    Returns:
        Matplotlib axes
    """
    if ax is None:
        fig, ax = plt.subplots(figsize=(6, 4))

    ks = [p.k for p in elbow_points]
    inertias = [p.inertia for p in elbow_points]
    ax.plot(ks, inertias, 'o-', color='tab:blue', label='Inertia')

    if optimal_k is not None:
        match = [p for p in elbow_points if p.k == optimal_k]
        y = match[0].inertia if match else 0.0
        ax.scatter([optimal_k], [y], s=150, c='tab:orange', zorder=10,
                   label=f'Optimal K = {optimal_k}')

    ax.set_xlabel('Number of clusters (K)')
    ax.set_ylabel('Inertia (SSE)')
    ax.set_xticks(ks)
    ax.set_title(title)
    if elbow_points:
        ax.legend()

    return ax


def plot_silhouette(points: Sequence[Point],
                    n_clusters: int,
                    average_score: Optional[float] = None,
                    ax: Optional[plt.Axes] = None,
                    gap: int = 5,
                    title: Optional[str] = None) -> plt.Axes:
    """Silhouette diagram: one horizontal bar per point, grouped by cluster.

    Args:
        points: Labeled points
        n_clusters: Number of cluster slots
        average_score: Mean score, drawn as a dashed vertical line
        ax: Matplotlib axes (created if None)
        gap: Vertical space between cluster groups
        title: Plot title (defaults to 'Silhouette Diagram (K=k)')

    Returns:
        Matplotlib axes
    """
    if ax is None:
        fig, ax = plt.subplots(figsize=(6, 6))

    colors = _cluster_colors(n_clusters)
    profile = silhouette_profile(points, n_clusters)

    y_lower = 0
    for slot, samples in profile.items():
        scores = np.array([s.score for s in samples])
        y_upper = y_lower + len(scores)
        if len(scores):
            ax.barh(np.arange(y_lower, y_upper), scores, height=1.0,
                    color=colors[slot % len(colors)], alpha=0.8,
                    edgecolor='none')
            ax.text(-1.05, (y_lower + y_upper) / 2, f'C{slot}', va='center')
        y_lower = y_upper + gap

    if average_score is not None:
        ax.axvline(average_score, color='tab:red', linestyle='--',
                   label=f'Average = {average_score:.3f}')
        ax.legend(loc='lower right')

    ax.axvline(0.0, color='black', linewidth=0.8)
    ax.set_xlim(-1.1, 1.0)
    ax.set_xlabel('Silhouette coefficient')
    ax.set_yticks([])
    ax.set_title(title or f'Silhouette Diagram (K={n_clusters})')

    return ax
