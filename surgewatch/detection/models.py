"""
Detection Data Model
Flight records, activity snapshots, baselines and surge alerts.
"""

from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Any, Dict, List, Optional, Tuple

from surgewatch.registry import Theater


@dataclass(frozen=True)
class Flight:
    """A single aircraft position from one analysis cycle."""

    id: str
    callsign: str
    lat: float
    lon: float
    aircraft_type: Optional[str] = None
    aircraft_model: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Flight":
        """
        Build a flight from a feed record.

        Accepts snake_case keys as well as the camelCase keys
        (aircraftType, aircraftModel) used by upstream feeds.

        Raises:
            ValueError: If the position is missing or not numeric
        """
        if not isinstance(data, dict):
            raise ValueError(f"Flight record must be a mapping, got {type(data).__name__}")

        try:
            lat = float(data["lat"])
            lon = float(data["lon"])
        except (KeyError, TypeError, ValueError) as e:
            raise ValueError(f"Flight {data.get('id')!r} has no usable position: {e}") from e

        return cls(
            id=str(data.get("id", "")),
            callsign=str(data.get("callsign") or "").strip(),
            lat=lat,
            lon=lon,
            aircraft_type=data.get("aircraft_type", data.get("aircraftType")),
            aircraft_model=data.get("aircraft_model", data.get("aircraftModel")),
        )


@dataclass(frozen=True)
class TheaterActivity:
    """One cycle's aggregated activity for a theater."""

    theater_id: str
    timestamp: datetime
    transport_count: int
    fighter_count: int
    recon_count: int
    total_military: int
    flight_ids: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "theater_id": self.theater_id,
            "timestamp": self.timestamp.isoformat(),
            "transport_count": self.transport_count,
            "fighter_count": self.fighter_count,
            "recon_count": self.recon_count,
            "total_military": self.total_military,
            "flight_ids": list(self.flight_ids),
        }


@dataclass(frozen=True)
class Baseline:
    """Expected activity level per category."""

    transport: float
    fighter: float
    recon: float


@dataclass
class SurgeAlert:
    """
    An active surge for one (type, theater) pair.

    The id is the alert key, "<type>-<theater id>".
    """

    id: str
    theater: Theater
    type: str
    current_count: int
    baseline_count: int
    surge_multiple: float
    aircraft_types: Dict[str, int] = field(default_factory=dict)
    nearby_bases: List[str] = field(default_factory=list)
    first_detected: Optional[datetime] = None
    last_updated: Optional[datetime] = None

    def snapshot(self) -> "SurgeAlert":
        """Detached copy safe to hand to other threads."""
        return replace(
            self,
            aircraft_types=dict(self.aircraft_types),
            nearby_bases=list(self.nearby_bases),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "theater_id": self.theater.id,
            "theater_name": self.theater.name,
            "type": self.type,
            "current_count": self.current_count,
            "baseline_count": self.baseline_count,
            "surge_multiple": self.surge_multiple,
            "aircraft_types": dict(self.aircraft_types),
            "nearby_bases": list(self.nearby_bases),
            "first_detected": self.first_detected.isoformat() if self.first_detected else None,
            "last_updated": self.last_updated.isoformat() if self.last_updated else None,
        }
