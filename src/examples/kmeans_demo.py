"""
Demo of the K-Means visualizer engine.

This example shows how to:
1. Generate the three-blob sample data
2. Run K-Means and read the quality metrics
3. Sweep K for the elbow method
4. Plot clusters, elbow curve and silhouette diagram
"""

import matplotlib.pyplot as plt

from kmeansviz import ClusteringSession, silhouette_quality
from kmeansviz.visualization import plot_clusters_2d, plot_elbow, plot_silhouette


def plot_results(snapshot):
    """Clusters, elbow curve and silhouette diagram side by side."""
    fig, axes = plt.subplots(1, 3, figsize=(18, 6))

    plot_clusters_2d(snapshot.result.points, snapshot.result.centroids,
                     ax=axes[0], invert_y=True,
                     title=f'K-Means (K={snapshot.k})')
    plot_elbow(snapshot.elbow, snapshot.optimal_k, ax=axes[1])
    plot_silhouette(snapshot.result.points, snapshot.k,
                    average_score=snapshot.silhouette, ax=axes[2])

    plt.tight_layout()
    plt.show()


def main():
    print("=== K-Means Clustering Demo ===\n")

    session = ClusteringSession(k=3, random_state=42, verbose=1)

    print("Generating sample data...")
    points = session.generate_sample()
    print(f"Number of points: {len(points)}\n")

    print("Running K-Means...")
    snapshot = session.run()
    result = snapshot.result

    print(f"\nK = {snapshot.k}")
    print(f"Iterations: {result.iterations}")
    print(f"Inertia (SSE): {result.inertia:.2f}")
    print(f"Silhouette: {snapshot.silhouette:.3f} ({silhouette_quality(snapshot.silhouette)})")
    print(f"Cluster sizes: {result.cluster_sizes()}")

    print("\n=== Elbow Method ===")
    for p in snapshot.elbow:
        marker = "  <- elbow" if p.k == snapshot.optimal_k else ""
        print(f"K={p.k}: inertia = {p.inertia:.2f}{marker}")

    print("\nPlotting results...")
    plot_results(snapshot)


if __name__ == "__main__":
    main()
