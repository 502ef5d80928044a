"""
SurgeWatch Registry Component

Static reference data: theaters, bases and proximity lookups.

Main Classes:
    - Base: Military installation with a position
    - Theater: Named region grouping several bases
    - TheaterRegistry: Catalog with nearby_bases() and theater_of()

Example:
    >>> from surgewatch.registry import TheaterRegistry
    >>> registry = TheaterRegistry()
    >>> [b.name for b, _ in registry.nearby_bases(26.36, 127.77)][:1]
    ['Kadena Air Base']
"""

from .registry import Base, Theater, TheaterRegistry

from . import constants

__all__ = [
    "Base",
    "Theater",
    "TheaterRegistry",
    # Modules
    "constants",
]
