"""
SurgeWatch Visualization Component

Interactive map of theaters, bases and active surge alerts.

Main Classes:
    - AlertMapGenerator: Folium map with severity-coloured alert overlays

Example:
    >>> from surgewatch.visualization import AlertMapGenerator
    >>> gen = AlertMapGenerator()
    >>> gen.add_registry(detector.registry)
    >>> gen.add_alerts(detector.get_active_alerts())
    >>> gen.save('surges.html')
"""

from .map_generator import AlertMapGenerator

from . import constants

__all__ = [
    "AlertMapGenerator",
    # Modules
    "constants",
]
