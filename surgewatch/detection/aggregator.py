"""
Activity Aggregation
Groups one cycle's flights by theater and tallies their activity.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, Iterable, List

from surgewatch.config import Settings
from surgewatch.registry import Theater, TheaterRegistry
from surgewatch.utils import validate_coordinates

from .classifier import FlightClassifier
from .constants import (
    CATEGORY_FIGHTER,
    CATEGORY_RECON,
    CATEGORY_TRANSPORT,
    UNKNOWN_AIRCRAFT,
)
from .models import Flight, TheaterActivity

logger = logging.getLogger(__name__)


@dataclass
class TheaterCycle:
    """Aggregated result for one theater in one analysis cycle."""

    theater: Theater
    activity: TheaterActivity
    aircraft_types: Dict[str, int] = field(default_factory=dict)
    nearby_bases: List[str] = field(default_factory=list)


@dataclass
class _Tally:
    theater: Theater
    flight_ids: List[str] = field(default_factory=list)
    counts: Dict[str, int] = field(default_factory=dict)
    aircraft_types: Dict[str, int] = field(default_factory=dict)
    nearby_bases: Dict[str, None] = field(default_factory=dict)  # ordered set


class ActivityAggregator:
    """
    Builds per-theater activity snapshots for an analysis cycle.

    Flights with invalid coordinates or without a theater are dropped.
    Flights classified as 'other' count only toward total traffic.
    """

    def __init__(
        self,
        registry: TheaterRegistry,
        classifier: FlightClassifier,
        bases_per_flight: int = Settings.NEARBY_BASES_PER_FLIGHT,
    ):
        """
        Initialize activity aggregator.

        Args:
            registry: Theater and base catalog
            classifier: Flight classifier
            bases_per_flight: Nearest base names collected per flight (default: 3)
        """
        self.registry = registry
        self.classifier = classifier
        self.bases_per_flight = bases_per_flight

    def aggregate(self, flights: Iterable[Flight], now: datetime) -> List[TheaterCycle]:
        """
        Aggregate one cycle of flights.

        Args:
            flights: Flight records for this cycle
            now: Cycle timestamp stamped on every snapshot

        Returns:
            One TheaterCycle per theater with at least one flight, in order
            of each theater's first flight
        """
        tallies: Dict[str, _Tally] = {}
        dropped = 0

        for flight in flights:
            if not validate_coordinates(flight.lat, flight.lon):
                logger.debug("Skipping flight %s: invalid position (%r, %r)",
                             flight.id, flight.lat, flight.lon)
                dropped += 1
                continue

            nearby = self.registry.nearby_bases(flight.lat, flight.lon)
            theater = self.registry.theater_of_flight(flight, nearby=nearby)
            if theater is None:
                logger.debug("Skipping flight %s: outside all theaters", flight.id)
                dropped += 1
                continue

            tally = tallies.get(theater.id)
            if tally is None:
                tally = tallies[theater.id] = _Tally(theater=theater)

            tally.flight_ids.append(flight.id)
            category = self.classifier.classify(flight)
            tally.counts[category] = tally.counts.get(category, 0) + 1

            type_key = flight.aircraft_model or flight.aircraft_type or UNKNOWN_AIRCRAFT
            tally.aircraft_types[type_key] = tally.aircraft_types.get(type_key, 0) + 1

            for base, _ in nearby[: self.bases_per_flight]:
                tally.nearby_bases.setdefault(base.name, None)

        if dropped:
            logger.debug("Dropped %d unassigned flights this cycle", dropped)

        cycles = []
        for theater_id, tally in tallies.items():
            activity = TheaterActivity(
                theater_id=theater_id,
                timestamp=now,
                transport_count=tally.counts.get(CATEGORY_TRANSPORT, 0),
                fighter_count=tally.counts.get(CATEGORY_FIGHTER, 0),
                recon_count=tally.counts.get(CATEGORY_RECON, 0),
                total_military=len(tally.flight_ids),
                flight_ids=tuple(tally.flight_ids),
            )
            cycles.append(
                TheaterCycle(
                    theater=tally.theater,
                    activity=activity,
                    aircraft_types=tally.aircraft_types,
                    nearby_bases=list(tally.nearby_bases),
                )
            )

        return cycles
