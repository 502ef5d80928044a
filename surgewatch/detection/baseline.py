"""
Baseline Estimation
Expected per-theater activity from recent history.
"""

from datetime import datetime, timedelta
from typing import Dict, Optional, Sequence

from surgewatch.config import Settings

from .models import Baseline, TheaterActivity


class BaselineEstimator:
    """
    Estimates normal activity levels from a theater's history.

    With too few recent samples the estimator returns fixed defaults,
    otherwise the per-category mean of the trailing window. Results are
    never below the per-category floors.
    """

    def __init__(
        self,
        window_hours: float = Settings.BASELINE_WINDOW_HOURS,
        min_samples: int = Settings.BASELINE_MIN_SAMPLES,
        defaults: Optional[Dict[str, float]] = None,
        floors: Optional[Dict[str, float]] = None,
    ):
        """
        Initialize baseline estimator.

        Args:
            window_hours: Trailing window considered (default: 48h)
            min_samples: Samples required before history is used (default: 6)
            defaults: Cold-start baseline per category
            floors: Minimum baseline per category
        """
        self.window = timedelta(hours=window_hours)
        self.min_samples = min_samples
        self.defaults = dict(defaults or Settings.DEFAULT_BASELINE)
        self.floors = dict(floors or Settings.BASELINE_FLOORS)

    def estimate(self, history: Sequence[TheaterActivity], now: datetime) -> Baseline:
        """
        Estimate the baseline at a point in time.

        Args:
            history: Theater activity snapshots, oldest first
            now: Reference time for the trailing window

        Returns:
            Baseline with transport, fighter and recon levels
        """
        cutoff = now - self.window
        relevant = [h for h in history if h.timestamp >= cutoff]

        if len(relevant) < self.min_samples:
            return Baseline(
                transport=self.defaults["transport"],
                fighter=self.defaults["fighter"],
                recon=self.defaults["recon"],
            )

        samples = len(relevant)
        avg_transport = sum(h.transport_count for h in relevant) / samples
        avg_fighter = sum(h.fighter_count for h in relevant) / samples
        avg_recon = sum(h.recon_count for h in relevant) / samples

        return Baseline(
            transport=max(self.floors["transport"], avg_transport),
            fighter=max(self.floors["fighter"], avg_fighter),
            recon=max(self.floors["recon"], avg_recon),
        )
