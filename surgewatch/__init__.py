"""
SurgeWatch - Military Activity Surge Detection

Streaming detection of abnormal surges of military air activity within
geographic theaters, from periodic snapshots of aircraft positions.

Components:
    - registry: Theater and base catalog with proximity lookups
    - detection: Classification, baselines, surge alerts and signals
    - visualization: Interactive alert maps

Example:
    >>> from surgewatch import Config
    >>> from surgewatch.detection import SurgeDetector
    >>> detector = SurgeDetector(config=Config('surgewatch.yaml'))
    >>> new_alerts = detector.analyze(flights)
"""

from . import config
from . import utils
from . import registry
from . import detection
from . import visualization

from .config import Config

SURGEWATCH_VERSION = "v0.1.0"

__version__ = SURGEWATCH_VERSION
__license__ = "MIT"

__all__ = [
    "Config",
    "config",
    "utils",
    "registry",
    "detection",
    "visualization",
]
