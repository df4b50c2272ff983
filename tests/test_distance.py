import math

import pytest
import torch

from kmeansviz import Point, Centroid, distance
from kmeansviz.distances import squared_distance, euclidean_distances


def test_distance_between_points_and_centroids():
    assert distance(Point(0.0, 0.0), Point(3.0, 4.0)) == pytest.approx(5.0)
    assert distance(Point(1.0, 1.0), Centroid(4.0, 5.0, 2)) == pytest.approx(5.0)
    assert squared_distance(Point(0.0, 0.0), Point(3.0, 4.0)) == pytest.approx(25.0)


def test_distance_is_symmetric_and_zero_on_itself():
    a = Point(-2.5, 7.0)
    b = Point(10.0, -1.0)
    assert distance(a, b) == distance(b, a)
    assert distance(a, a) == 0.0


def test_distance_ignores_cluster_labels():
    assert distance(Point(0.0, 0.0, cluster=1), Point(0.0, 2.0, cluster=5)) == pytest.approx(2.0)


def test_euclidean_distances_matrix():
    X = torch.tensor([[0.0, 0.0], [3.0, 4.0]], dtype=torch.float64)
    C = torch.tensor([[0.0, 0.0], [6.0, 8.0], [3.0, 0.0]], dtype=torch.float64)

    D = euclidean_distances(X, C)
    expected = torch.tensor([[0.0, 10.0, 3.0],
                             [5.0, 5.0, 4.0]], dtype=torch.float64)
    assert D.shape == (2, 3)
    assert torch.allclose(D, expected)

    D2 = euclidean_distances(X, C, squared=True)
    assert torch.allclose(D2, expected ** 2)


def test_euclidean_distances_exact_zero_for_coincident_points():
    X = torch.tensor([[123.456, 789.012]], dtype=torch.float64)
    D = euclidean_distances(X, X)
    assert D.item() == 0.0
    assert not math.isnan(D.item())
