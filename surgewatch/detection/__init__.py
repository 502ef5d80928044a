"""
SurgeWatch Detection Component

Streaming surge detection over periodic flight snapshots.

Main Classes:
    - SurgeDetector: Stateful detector coordinating one analysis cycle
    - FlightClassifier: Transport / fighter / recon / other classification
    - ActivityAggregator: Per-theater activity snapshots
    - BaselineEstimator: Expected activity from recent history
    - SignalFormatter: Display-ready signals from alerts
    - ReportGenerator: JSON and text reports

Example:
    >>> from surgewatch.detection import SurgeDetector, Flight
    >>> detector = SurgeDetector()
    >>> alerts = detector.analyze([Flight('a1', 'RCH123', 49.44, 7.60)])
"""

from .models import Flight, TheaterActivity, Baseline, SurgeAlert
from .classifier import FlightClassifier
from .aggregator import ActivityAggregator, TheaterCycle
from .baseline import BaselineEstimator
from .detector import SurgeDetector
from .signals import Signal, SignalFormatter, surge_alert_to_signal
from .reporter import ReportGenerator

from . import constants

__all__ = [
    # Data model
    "Flight",
    "TheaterActivity",
    "Baseline",
    "SurgeAlert",
    "TheaterCycle",
    "Signal",
    # Main classes
    "SurgeDetector",
    "FlightClassifier",
    "ActivityAggregator",
    "BaselineEstimator",
    "SignalFormatter",
    "ReportGenerator",
    "surge_alert_to_signal",
    # Modules
    "constants",
]
