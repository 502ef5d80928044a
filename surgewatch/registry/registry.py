"""
Theater Registry
Static catalog of theaters and bases with proximity lookups.

A flight is assigned to a theater in two tiers:
1. The closest base within the proximity radius that belongs to a theater
2. Otherwise the nearest theater center within the fallback radius

Base proximity always wins over center distance, so a flight next to a
theater's base is assigned to that theater even when another theater's
center is geometrically closer.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Tuple

from surgewatch.config import Config, Settings
from surgewatch.utils import haversine_distance, validate_coordinates

from .constants import DEFAULT_BASES, DEFAULT_THEATERS

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Base:
    """A military installation with a fixed position."""

    id: str
    name: str
    lat: float
    lon: float

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Base":
        return cls(
            id=str(data["id"]),
            name=str(data["name"]),
            lat=float(data["lat"]),
            lon=float(data["lon"]),
        )


@dataclass(frozen=True)
class Theater:
    """A named geographic region grouping several bases."""

    id: str
    name: str
    base_ids: frozenset = field(default_factory=frozenset)
    center_lat: float = 0.0
    center_lon: float = 0.0

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Theater":
        base_ids = data.get("base_ids", ())
        if isinstance(base_ids, str):
            raise ValueError(f"Theater {data['id']!r}: base_ids must be a list, not a string")
        return cls(
            id=str(data["id"]),
            name=str(data["name"]),
            base_ids=frozenset(base_ids),
            center_lat=float(data["center_lat"]),
            center_lon=float(data["center_lon"]),
        )


class TheaterRegistry:
    """
    Read-only catalog of theaters and bases.

    Example:
        >>> registry = TheaterRegistry()
        >>> registry.theater_of(49.44, 7.60).id
        'europe-west'
    """

    def __init__(
        self,
        theaters: Optional[Iterable[Theater]] = None,
        bases: Optional[Iterable[Base]] = None,
        proximity_radius_km: float = Settings.PROXIMITY_RADIUS_KM,
        center_fallback_km: float = Settings.THEATER_CENTER_FALLBACK_KM,
    ) -> None:
        """
        Initialize theater registry.

        Args:
            theaters: Theater catalog (default: built-in catalog)
            bases: Base catalog (default: built-in catalog)
            proximity_radius_km: Radius for base proximity lookups
            center_fallback_km: Max distance to a theater center for fallback

        Raises:
            ValueError: If two theaters share the same id
        """
        if theaters is None:
            theaters = [Theater.from_dict(t) for t in DEFAULT_THEATERS]
        if bases is None:
            bases = [Base.from_dict(b) for b in DEFAULT_BASES]

        self._theaters: Dict[str, Theater] = {}
        for theater in theaters:
            if theater.id in self._theaters:
                raise ValueError(f"Duplicate theater id: {theater.id}")
            self._theaters[theater.id] = theater

        self._bases: List[Base] = list(bases)
        self.proximity_radius_km = proximity_radius_km
        self.center_fallback_km = center_fallback_km

        # First theater listing a base owns it
        self._base_owner: Dict[str, Theater] = {}
        for theater in self._theaters.values():
            for base_id in theater.base_ids:
                self._base_owner.setdefault(base_id, theater)

    @classmethod
    def from_config(cls, config: Config) -> "TheaterRegistry":
        """
        Build a registry from configuration.

        Uses the optional 'theaters' and 'bases' sections, falling back to
        the built-in catalogs for whichever is missing.
        """
        theaters = None
        if config.theaters:
            theaters = [Theater.from_dict(t) for t in config.theaters]
        bases = None
        if config.bases:
            bases = [Base.from_dict(b) for b in config.bases]

        return cls(
            theaters=theaters,
            bases=bases,
            proximity_radius_km=config.proximity_radius_km,
            center_fallback_km=config.theater_center_fallback_km,
        )

    @property
    def theaters(self) -> List[Theater]:
        """All theaters in catalog order."""
        return list(self._theaters.values())

    @property
    def bases(self) -> List[Base]:
        """All bases in catalog order."""
        return list(self._bases)

    def get_theater(self, theater_id: str) -> Optional[Theater]:
        """Look up a theater by id."""
        return self._theaters.get(theater_id)

    def theater_for_base(self, base_id: str) -> Optional[Theater]:
        """Get the theater owning a base, if any."""
        return self._base_owner.get(base_id)

    def nearby_bases(
        self, lat: float, lon: float, radius_km: Optional[float] = None
    ) -> List[Tuple[Base, float]]:
        """
        Find bases within a radius of a point.

        Args:
            lat: Latitude in degrees
            lon: Longitude in degrees
            radius_km: Search radius (default: registry proximity radius)

        Returns:
            List of (base, distance_km) tuples, closest first
        """
        if radius_km is None:
            radius_km = self.proximity_radius_km

        nearby = []
        for base in self._bases:
            dist = haversine_distance(lat, lon, base.lat, base.lon)
            if dist <= radius_km:
                nearby.append((base, dist))

        nearby.sort(key=lambda item: item[1])
        return nearby

    def theater_of(
        self,
        lat: float,
        lon: float,
        nearby: Optional[List[Tuple[Base, float]]] = None,
    ) -> Optional[Theater]:
        """
        Resolve the theater for a position.

        Args:
            lat: Latitude in degrees
            lon: Longitude in degrees
            nearby: Precomputed result of nearby_bases() for this position

        Returns:
            Owning theater, or None if the position is unassigned
        """
        if not validate_coordinates(lat, lon):
            return None

        if nearby is None:
            nearby = self.nearby_bases(lat, lon)

        for base, _ in nearby:
            theater = self.theater_for_base(base.id)
            if theater is not None:
                return theater

        closest: Optional[Theater] = None
        closest_dist = self.center_fallback_km
        for theater in self._theaters.values():
            dist = haversine_distance(lat, lon, theater.center_lat, theater.center_lon)
            if dist < closest_dist:
                closest = theater
                closest_dist = dist

        return closest

    def theater_of_flight(
        self, flight, nearby: Optional[List[Tuple[Base, float]]] = None
    ) -> Optional[Theater]:
        """Resolve the theater for a flight record."""
        return self.theater_of(flight.lat, flight.lon, nearby=nearby)
