"""
Tests for flight classification.
"""

import pytest

from surgewatch.detection import Flight, FlightClassifier


def flight(callsign="TEST01", aircraft_type=None, model=None):
    return Flight("f1", callsign, 49.4, 7.6, aircraft_type=aircraft_type, aircraft_model=model)


@pytest.fixture
def classifier():
    return FlightClassifier()


class TestFlightClassifier:
    """Tests for FlightClassifier class."""

    @pytest.mark.parametrize("aircraft_type", ["transport", "tanker"])
    def test_transport_types(self, classifier, aircraft_type):
        assert classifier.classify(flight(aircraft_type=aircraft_type)) == "transport"

    @pytest.mark.parametrize("callsign", ["RCH871", "reach12", "MOOSE44", "Herky01", "EVAC7", "DUSTOFF21"])
    def test_transport_callsigns(self, classifier, callsign):
        assert classifier.classify(flight(callsign=callsign)) == "transport"

    def test_callsign_beats_declared_type(self, classifier):
        """Airlift callsigns classify as transport regardless of type."""
        assert classifier.classify(flight("RCH001", aircraft_type="fighter")) == "transport"

    def test_callsign_prefix_only(self, classifier):
        assert classifier.classify(flight("XRCH01")) == "other"

    def test_fighter(self, classifier):
        assert classifier.classify(flight(aircraft_type="fighter")) == "fighter"

    @pytest.mark.parametrize("aircraft_type", ["reconnaissance", "awacs"])
    def test_recon(self, classifier, aircraft_type):
        assert classifier.classify(flight(aircraft_type=aircraft_type)) == "recon"

    def test_other(self, classifier):
        assert classifier.classify(flight(aircraft_type="helicopter")) == "other"
        assert classifier.classify(flight(callsign="", aircraft_type=None)) == "other"

    def test_custom_patterns(self):
        classifier = FlightClassifier([r"^CNV"])
        assert classifier.classify(flight("CNV4410")) == "transport"
        assert classifier.classify(flight("RCH871")) == "other"


class TestFlightFromDict:
    """Tests for Flight.from_dict."""

    def test_camel_case_keys(self):
        f = Flight.from_dict({
            "id": "ae1234",
            "callsign": " RCH871 ",
            "lat": "49.4",
            "lon": 7.6,
            "aircraftType": "transport",
            "aircraftModel": "C-17",
        })
        assert f.callsign == "RCH871"
        assert f.lat == 49.4
        assert f.aircraft_type == "transport"
        assert f.aircraft_model == "C-17"

    def test_missing_callsign(self):
        f = Flight.from_dict({"id": "x", "callsign": None, "lat": 1, "lon": 2})
        assert f.callsign == ""

    def test_missing_position(self):
        with pytest.raises(ValueError):
            Flight.from_dict({"id": "x", "lat": 1})
        with pytest.raises(ValueError):
            Flight.from_dict({"id": "x", "lat": "north", "lon": 2})

    def test_numeric_callsign(self, classifier):
        f = Flight.from_dict({"id": "x", "callsign": 1234, "lat": 1, "lon": 2})
        assert f.callsign == "1234"
        assert classifier.classify(f) == "other"

    @pytest.mark.parametrize("record", [None, "RCH871", ["49.4", "7.6"]])
    def test_record_not_a_mapping(self, record):
        with pytest.raises(ValueError):
            Flight.from_dict(record)
