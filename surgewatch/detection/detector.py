"""
Surge Detection
Compares each theater's current activity with its baseline and manages
the lifecycle of surge alerts.

Each call to analyze() is one cycle:
1. Lazy, time-gated cleanup of old history and stale alerts
2. Aggregation of the cycle's flights per theater
3. Append of each theater's snapshot to its bounded history
4. Baseline estimation from the trailing window
5. Airlift and fighter surge evaluation

Only alerts created during the cycle are returned. An airlift alert that
fires again is refreshed in place; a fighter alert that fires again is
left untouched until it expires.
"""

import logging
import threading
from collections import deque
from datetime import datetime, timedelta
from typing import Callable, Deque, Dict, Iterable, List, Optional

from surgewatch.config import Config, Settings
from surgewatch.registry import TheaterRegistry
from surgewatch.utils import round_half_up, utc_now

from .aggregator import ActivityAggregator, TheaterCycle
from .baseline import BaselineEstimator
from .classifier import FlightClassifier
from .constants import SURGE_AIRLIFT, SURGE_FIGHTER
from .models import Baseline, Flight, SurgeAlert, TheaterActivity

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


class SurgeDetector:
    """
    Stateful surge detector.

    Holds per-theater activity history, active alerts and the last cleanup
    time. All state changes happen inside analyze() under a single lock;
    the read accessors take the same lock and return copies.

    Example:
        >>> detector = SurgeDetector()
        >>> new_alerts = detector.analyze(flights)
        >>> for alert in detector.get_active_alerts():
        ...     print(alert.id, alert.surge_multiple)
    """

    def __init__(
        self,
        registry: Optional[TheaterRegistry] = None,
        config: Optional[Config] = None,
        clock: Optional[Clock] = None,
    ) -> None:
        """
        Initialize surge detector.

        Args:
            registry: Theater and base catalog (default: built from config)
            config: Runtime configuration (default: built-in defaults)
            clock: Zero-argument callable returning the current aware datetime
        """
        self.config = config or Config()
        self.registry = registry or TheaterRegistry.from_config(self.config)
        self.clock: Clock = clock or utc_now

        get = self.config.get
        self.surge_threshold = float(get("detection.surge_threshold", Settings.SURGE_THRESHOLD))
        self.min_airlift_count = int(get("detection.min_airlift_count", Settings.MIN_AIRLIFT_COUNT))
        self.min_fighter_count = int(get("detection.min_fighter_count", Settings.MIN_FIGHTER_COUNT))
        self.max_history_entries = int(
            get("detection.max_history_entries", Settings.MAX_HISTORY_ENTRIES)
        )
        self.max_history_age = timedelta(
            hours=get("detection.max_history_hours", Settings.MAX_HISTORY_HOURS)
        )
        self.cleanup_interval = timedelta(
            minutes=get("detection.cleanup_interval_minutes", Settings.CLEANUP_INTERVAL_MINUTES)
        )
        self.alert_expiry = timedelta(
            hours=get("detection.alert_expiry_hours", Settings.ALERT_EXPIRY_HOURS)
        )

        self.classifier = FlightClassifier(
            get("detection.transport_callsign_patterns", Settings.TRANSPORT_CALLSIGN_PATTERNS)
        )
        self.aggregator = ActivityAggregator(self.registry, self.classifier)
        self.baseline_estimator = BaselineEstimator(
            window_hours=get("detection.baseline_window_hours", Settings.BASELINE_WINDOW_HOURS),
            min_samples=int(
                get("detection.baseline_min_samples", Settings.BASELINE_MIN_SAMPLES)
            ),
        )

        self._lock = threading.Lock()
        self._history: Dict[str, Deque[TheaterActivity]] = {}
        self._active: Dict[str, SurgeAlert] = {}
        self._last_cleanup: Optional[datetime] = None
        self._last_cycle: Optional[datetime] = None

    # --- Analysis ---

    def analyze(self, flights: Iterable[Flight], now: Optional[datetime] = None) -> List[SurgeAlert]:
        """
        Run one analysis cycle.

        Args:
            flights: Flight records for this cycle
            now: Cycle time (default: the detector clock)

        Returns:
            Alerts created during this cycle, empty if none
        """
        flights = list(flights)

        with self._lock:
            now = self._cycle_time(now)
            self._cleanup_locked(now, force=False)

            cycles = self.aggregator.aggregate(flights, now)
            new_alerts: List[SurgeAlert] = []

            for cycle in cycles:
                self._record_activity(cycle.activity)
                baseline = self.baseline_estimator.estimate(
                    self._history[cycle.theater.id], now
                )

                alert = self._evaluate_airlift(cycle, baseline, now)
                if alert is not None:
                    new_alerts.append(alert.snapshot())

                alert = self._evaluate_fighter(cycle, baseline, now)
                if alert is not None:
                    new_alerts.append(alert.snapshot())

            active_count = len(self._active)

        logger.info(
            "Analyzed %d flights across %d theaters: %d new alerts, %d active",
            len(flights), len(cycles), len(new_alerts), active_count,
        )
        return new_alerts

    def _cycle_time(self, now: Optional[datetime]) -> datetime:
        """Resolve the cycle time, never moving backwards."""
        if now is None:
            now = self.clock()
        if self._last_cycle is not None and now < self._last_cycle:
            logger.warning(
                "Cycle time %s is earlier than previous cycle %s; using previous",
                now.isoformat(), self._last_cycle.isoformat(),
            )
            now = self._last_cycle
        self._last_cycle = now
        return now

    def _record_activity(self, activity: TheaterActivity) -> None:
        history = self._history.get(activity.theater_id)
        if history is None:
            history = self._history[activity.theater_id] = deque(maxlen=self.max_history_entries)
        history.append(activity)

    def _evaluate_airlift(
        self, cycle: TheaterCycle, baseline: Baseline, now: datetime
    ) -> Optional[SurgeAlert]:
        """Create or refresh the theater's airlift alert. Returns it only if new."""
        count = cycle.activity.transport_count
        if count < baseline.transport * self.surge_threshold or count < self.min_airlift_count:
            return None

        key = f"{SURGE_AIRLIFT}-{cycle.theater.id}"
        surge_multiple = count / baseline.transport

        existing = self._active.get(key)
        if existing is not None:
            existing.current_count = count
            existing.surge_multiple = surge_multiple
            existing.aircraft_types = dict(cycle.aircraft_types)
            existing.nearby_bases = list(cycle.nearby_bases)
            existing.last_updated = now
            logger.debug("Refreshed %s: %d aircraft (%.1fx)", key, count, surge_multiple)
            return None

        alert = self._new_alert(key, SURGE_AIRLIFT, cycle, count, baseline.transport, now)
        logger.info("New airlift surge in %s: %d aircraft (%.1fx baseline)",
                    cycle.theater.name, count, surge_multiple)
        return alert

    def _evaluate_fighter(
        self, cycle: TheaterCycle, baseline: Baseline, now: datetime
    ) -> Optional[SurgeAlert]:
        """Create the theater's fighter alert if none is active."""
        count = cycle.activity.fighter_count
        if count < baseline.fighter * self.surge_threshold or count < self.min_fighter_count:
            return None

        key = f"{SURGE_FIGHTER}-{cycle.theater.id}"
        if key in self._active:
            return None

        alert = self._new_alert(key, SURGE_FIGHTER, cycle, count, baseline.fighter, now)
        logger.info("New fighter surge in %s: %d aircraft (%.1fx baseline)",
                    cycle.theater.name, count, alert.surge_multiple)
        return alert

    def _new_alert(
        self,
        key: str,
        surge_type: str,
        cycle: TheaterCycle,
        count: int,
        baseline_level: float,
        now: datetime,
    ) -> SurgeAlert:
        alert = SurgeAlert(
            id=key,
            theater=cycle.theater,
            type=surge_type,
            current_count=count,
            baseline_count=round_half_up(baseline_level),
            surge_multiple=count / baseline_level,
            aircraft_types=dict(cycle.aircraft_types),
            nearby_bases=list(cycle.nearby_bases),
            first_detected=now,
            last_updated=now,
        )
        self._active[key] = alert
        return alert

    # --- Cleanup ---

    def cleanup(self, now: Optional[datetime] = None, force: bool = False) -> bool:
        """
        Prune old history and evict stale alerts.

        Args:
            now: Reference time (default: the detector clock)
            force: Run even if the cleanup interval has not elapsed

        Returns:
            True if cleanup ran
        """
        with self._lock:
            return self._cleanup_locked(now or self.clock(), force)

    def _cleanup_locked(self, now: datetime, force: bool) -> bool:
        if self._last_cleanup is None and not force:
            # First cycle only starts the interval
            self._last_cleanup = now
            return False
        if not force and now - self._last_cleanup < self.cleanup_interval:
            return False
        self._last_cleanup = now

        cutoff = now - self.max_history_age
        pruned = 0
        for theater_id in list(self._history):
            history = self._history[theater_id]
            while history and history[0].timestamp < cutoff:
                history.popleft()
                pruned += 1
            if not history:
                del self._history[theater_id]

        expired = [
            key for key, alert in self._active.items()
            if now - alert.last_updated > self.alert_expiry
        ]
        for key in expired:
            del self._active[key]

        logger.info("Cleanup removed %d snapshots and %d stale alerts", pruned, len(expired))
        return True

    # --- Read Accessors ---

    def get_active_alerts(self) -> List[SurgeAlert]:
        """Get copies of all active alerts."""
        with self._lock:
            return [alert.snapshot() for alert in self._active.values()]

    def get_alert(self, key: str) -> Optional[SurgeAlert]:
        """Get a copy of one active alert by key."""
        with self._lock:
            alert = self._active.get(key)
            return alert.snapshot() if alert is not None else None

    def get_theater_activity(self, theater_id: str) -> List[TheaterActivity]:
        """Get a theater's activity history, oldest first."""
        with self._lock:
            return list(self._history.get(theater_id, ()))

    def get_baseline(self, theater_id: str, now: Optional[datetime] = None) -> Baseline:
        """Get the current baseline estimate for a theater."""
        with self._lock:
            history = list(self._history.get(theater_id, ()))
        return self.baseline_estimator.estimate(history, now or self.clock())

    @property
    def last_cleanup(self) -> Optional[datetime]:
        """Time of the last cleanup, or of the first cycle if none has run."""
        return self._last_cleanup

    def reset(self) -> None:
        """Clear all history, alerts and timing state."""
        with self._lock:
            self._history.clear()
            self._active.clear()
            self._last_cleanup = None
            self._last_cycle = None
