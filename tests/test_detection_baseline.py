"""
Tests for baseline estimation.
"""

from datetime import timedelta

import pytest

from surgewatch.detection import BaselineEstimator, TheaterActivity


def snapshot(timestamp, transport=0, fighter=0, recon=0):
    return TheaterActivity(
        theater_id="europe-west",
        timestamp=timestamp,
        transport_count=transport,
        fighter_count=fighter,
        recon_count=recon,
        total_military=transport + fighter + recon,
    )


@pytest.fixture
def estimator():
    return BaselineEstimator()


class TestBaselineEstimator:
    """Tests for BaselineEstimator class."""

    def test_cold_start_defaults(self, estimator, t0):
        baseline = estimator.estimate([], t0)
        assert (baseline.transport, baseline.fighter, baseline.recon) == (3, 2, 1)

    def test_too_few_samples(self, estimator, t0):
        history = [snapshot(t0 - timedelta(hours=i), transport=20) for i in range(5)]
        baseline = estimator.estimate(history, t0)
        assert baseline.transport == 3

    def test_mean_of_window(self, estimator, t0):
        counts = [4, 4, 4, 6, 6, 6]
        history = [
            snapshot(t0 - timedelta(hours=10 - i), transport=c, fighter=c // 2, recon=c)
            for i, c in enumerate(counts)
        ]
        baseline = estimator.estimate(history, t0)
        assert baseline.transport == pytest.approx(5.0)
        assert baseline.fighter == pytest.approx(2.5)
        assert baseline.recon == pytest.approx(5.0)

    def test_floors(self, estimator, t0):
        """Quiet history never yields baselines below the floors."""
        history = [snapshot(t0 - timedelta(hours=i), transport=1) for i in range(8)]
        baseline = estimator.estimate(history, t0)
        assert baseline.transport == 2
        assert baseline.fighter == 1
        assert baseline.recon == 1

    def test_old_samples_ignored(self, estimator, t0):
        """Samples outside the 48h window do not count."""
        history = [snapshot(t0 - timedelta(hours=49), transport=50)]
        history += [snapshot(t0 - timedelta(hours=i), transport=4) for i in range(5, 0, -1)]
        baseline = estimator.estimate(history, t0)
        assert baseline.transport == 3  # only 5 qualifying samples

        history.append(snapshot(t0, transport=4))
        baseline = estimator.estimate(history, t0)
        assert baseline.transport == pytest.approx(4.0)

    def test_window_edge_included(self, estimator, t0):
        history = [snapshot(t0 - timedelta(hours=48), transport=8)]
        history += [snapshot(t0, transport=2) for _ in range(5)]
        baseline = estimator.estimate(history, t0)
        assert baseline.transport == pytest.approx(3.0)

    def test_custom_parameters(self, t0):
        estimator = BaselineEstimator(window_hours=1, min_samples=2,
                                      defaults={"transport": 9, "fighter": 9, "recon": 9})
        assert estimator.estimate([], t0).transport == 9

        history = [snapshot(t0, transport=6), snapshot(t0, transport=4)]
        assert estimator.estimate(history, t0).transport == pytest.approx(5.0)
