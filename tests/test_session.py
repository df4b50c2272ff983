"""
Clustering session: point editing, runs, and result bookkeeping.
"""

import pytest

from kmeansviz import ClusteringSession, SessionSnapshot, InsufficientPointsError, Point

from data_gen import make_two_pairs


def test_add_points_and_run():
    session = ClusteringSession(k=2, random_state=0)
    for p in make_two_pairs()[0]:
        session.add_point(p.x, p.y)

    assert session.can_run
    snapshot = session.run()

    assert isinstance(snapshot, SessionSnapshot)
    assert session.snapshot is snapshot
    assert snapshot.k == 2
    assert snapshot.result.n_clusters == 2
    assert snapshot.silhouette == pytest.approx(1.0, abs=1e-3)
    assert snapshot.quality == 'good'
    # Session points now carry their labels
    assert all(p.cluster is not None for p in session.points)
    # Four points only allow K=2..3 in the sweep
    assert [e.k for e in snapshot.elbow] == [2, 3]
    assert snapshot.optimal_k is None


def test_run_refuses_when_too_few_points():
    session = ClusteringSession(k=3)
    session.add_point(0, 0)
    session.add_point(1, 1)

    assert not session.can_run
    with pytest.raises(InsufficientPointsError):
        session.run()
    assert session.snapshot is None


def test_generate_sample_replaces_points_and_clears_results():
    session = ClusteringSession(k=2, random_state=0)
    session.add_point(0, 0)
    session.add_point(5, 5)
    session.run()

    points = session.generate_sample()

    assert len(points) == 90
    assert session.points == points
    assert session.snapshot is None
    assert all(p.cluster is None for p in session.points)


def test_sample_run_finds_three_clusters():
    session = ClusteringSession(k=3, random_state=0)
    session.generate_sample()
    snapshot = session.run()

    assert [e.k for e in snapshot.elbow] == list(range(2, 9))
    assert snapshot.optimal_k in range(3, 8)
    assert sum(len(v) for v in snapshot.silhouette_profile().values()) == 90
    assert -1.0 <= snapshot.silhouette <= 1.0


def test_set_k():
    session = ClusteringSession()
    session.set_k(5)
    assert session.k == 5
    for bad in (0, -1, 2.0, True):
        with pytest.raises(ValueError):
            session.set_k(bad)


def test_reset():
    session = ClusteringSession(k=1, random_state=0)
    added = session.add_point(1.5, 2)
    assert added == Point(1.5, 2.0)
    session.run()

    session.reset()

    assert session.points == []
    assert session.snapshot is None
    assert not session.can_run


def test_verbose_run_reports_completion(capsys):
    session = ClusteringSession(k=1, random_state=0, verbose=1)
    session.add_point(0, 0)
    session.run()
    assert "Clustering complete! Converged in 1 iterations" in capsys.readouterr().out
