"""
Input validation: point coercion and parameter checks.
"""

import math

import numpy as np
import pytest
import torch

from kmeansviz import Point, Centroid, InsufficientPointsError
from kmeansviz.utils.validation import (
    validate_points, check_n_clusters, check_max_iter, check_random_state
)


def test_validate_points_accepts_mixed_sequences():
    points = validate_points([
        Point(1.0, 2.0),
        (3, 4),
        [5.5, 6.5],
        {"x": 7, "y": 8, "cluster": 1},
        Centroid(9.0, 10.0, 2),
    ])
    assert points == [
        Point(1.0, 2.0),
        Point(3.0, 4.0),
        Point(5.5, 6.5),
        Point(7.0, 8.0, 1),
        Point(9.0, 10.0, 2),
    ]
    assert all(isinstance(p.x, float) for p in points)


def test_validate_points_from_array_and_tensor():
    arr = np.array([[0.0, 1.0], [2.0, 3.0]])
    assert validate_points(arr) == [Point(0.0, 1.0), Point(2.0, 3.0)]

    t = torch.tensor([[0.0, 1.0], [2.0, 3.0]])
    assert validate_points(t) == [Point(0.0, 1.0), Point(2.0, 3.0)]

    assert validate_points(np.zeros((0, 2))) == []
    assert validate_points([]) == []


def test_validate_points_rejects_bad_input():
    with pytest.raises(ValueError):
        validate_points(np.zeros((3, 3)))
    with pytest.raises(ValueError):
        validate_points([(1.0, 2.0, 3.0)])
    with pytest.raises(ValueError):
        validate_points([{"x": 1.0}])
    with pytest.raises(ValueError):
        validate_points([(math.nan, 0.0)])
    with pytest.raises(ValueError):
        validate_points([(0.0, math.inf)])
    with pytest.raises(TypeError):
        validate_points("not points")
    with pytest.raises(TypeError):
        validate_points([object()])


def test_validate_points_returns_new_list():
    original = [Point(0.0, 0.0), Point(1.0, 1.0)]
    validated = validate_points(original)
    assert validated == original
    assert validated is not original


def test_check_n_clusters():
    check_n_clusters(3, 3)
    check_n_clusters(1, 10)

    with pytest.raises(TypeError):
        check_n_clusters(2.0, 5)
    with pytest.raises(TypeError):
        check_n_clusters(True, 5)
    with pytest.raises(ValueError):
        check_n_clusters(0, 5)

    with pytest.raises(InsufficientPointsError) as excinfo:
        check_n_clusters(4, 3)
    assert excinfo.value.n_points == 3
    assert excinfo.value.n_clusters == 4
    assert isinstance(excinfo.value, ValueError)


def test_check_max_iter():
    check_max_iter(1)
    with pytest.raises(ValueError):
        check_max_iter(0)
    with pytest.raises(TypeError):
        check_max_iter(10.0)


def test_check_random_state():
    assert check_random_state(None) is None

    g = torch.Generator()
    assert check_random_state(g) is g

    g1 = check_random_state(7)
    g2 = check_random_state(np.int64(7))
    assert isinstance(g1, torch.Generator)
    assert torch.equal(torch.rand(4, generator=g1), torch.rand(4, generator=g2))

    with pytest.raises(TypeError):
        check_random_state("seed")
