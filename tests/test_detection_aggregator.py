"""
Tests for activity aggregation.
"""

import pytest

from surgewatch.detection import ActivityAggregator, Flight, FlightClassifier

from conftest import KADENA, RAMSTEIN, SOUTH_PACIFIC, make_flights


@pytest.fixture
def aggregator(registry):
    return ActivityAggregator(registry, FlightClassifier())


class TestActivityAggregator:
    """Tests for ActivityAggregator class."""

    def test_counts_per_category(self, aggregator, t0):
        flights = (
            make_flights(2, "transport")
            + make_flights(1, "fighter")
            + make_flights(1, "recon")
            + make_flights(1, "other")
        )
        cycles = aggregator.aggregate(flights, t0)

        assert len(cycles) == 1
        activity = cycles[0].activity
        assert activity.theater_id == "europe-west"
        assert activity.timestamp == t0
        assert activity.transport_count == 2
        assert activity.fighter_count == 1
        assert activity.recon_count == 1
        assert activity.total_military == 5
        assert activity.flight_ids == tuple(f.id for f in flights)

    def test_aircraft_histogram(self, aggregator, t0):
        flights = make_flights(2, "transport") + [
            Flight("typed", "T1", *RAMSTEIN, aircraft_type="tanker"),
            Flight("bare", "T2", *RAMSTEIN),
        ]
        cycle = aggregator.aggregate(flights, t0)[0]
        assert cycle.aircraft_types == {"C-17": 2, "tanker": 1, "unknown": 1}

    def test_nearby_bases_deduplicated(self, aggregator, t0):
        cycle = aggregator.aggregate(make_flights(4, "transport"), t0)[0]
        assert cycle.nearby_bases[0] == "Ramstein Air Base"
        assert len(cycle.nearby_bases) == len(set(cycle.nearby_bases))
        assert len(cycle.nearby_bases) <= 3

    def test_groups_by_theater(self, aggregator, t0):
        flights = make_flights(2, "fighter", position=KADENA) + make_flights(3, "transport")
        cycles = aggregator.aggregate(flights, t0)
        by_theater = {c.theater.id: c.activity for c in cycles}

        assert [c.theater.id for c in cycles] == ["pacific-west", "europe-west"]
        assert by_theater["pacific-west"].fighter_count == 2
        assert by_theater["europe-west"].transport_count == 3

    def test_unassigned_and_invalid_dropped(self, aggregator, t0):
        flights = make_flights(1, "transport") + [
            Flight("lost", "RCH1", *SOUTH_PACIFIC, aircraft_type="transport"),
            Flight("nan", "RCH2", float("nan"), 7.6, aircraft_type="transport"),
            Flight("range", "RCH3", 95.0, 7.6, aircraft_type="transport"),
        ]
        cycles = aggregator.aggregate(flights, t0)
        assert len(cycles) == 1
        assert cycles[0].activity.flight_ids == ("transport-0",)

    def test_empty_cycle(self, aggregator, t0):
        assert aggregator.aggregate([], t0) == []
