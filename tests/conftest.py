"""
Shared fixtures for SurgeWatch tests.
"""

import sys
from datetime import datetime, timezone
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from surgewatch.detection import Flight, SurgeDetector
from surgewatch.registry import TheaterRegistry

RAMSTEIN = (49.437, 7.600)
KADENA = (26.356, 127.768)
SOUTH_PACIFIC = (-45.0, -120.0)

AIRCRAFT = {
    "transport": ("transport", "C-17"),
    "fighter": ("fighter", "F-16"),
    "recon": ("reconnaissance", "RC-135"),
    "other": ("helicopter", "UH-60"),
}


def make_flights(count, kind="transport", position=RAMSTEIN, prefix=None):
    """Build `count` flights of one kind clustered at a position."""
    aircraft_type, model = AIRCRAFT[kind]
    prefix = prefix or kind
    return [
        Flight(
            id=f"{prefix}-{i}",
            callsign=f"TEST{i:02d}",
            lat=position[0] + i * 0.001,
            lon=position[1],
            aircraft_type=aircraft_type,
            aircraft_model=model,
        )
        for i in range(count)
    ]


@pytest.fixture
def t0():
    """Fixed reference time."""
    return datetime(2026, 1, 1, tzinfo=timezone.utc)


@pytest.fixture
def registry():
    """Default theater registry."""
    return TheaterRegistry()


@pytest.fixture
def detector(registry, t0):
    """Detector whose clock is pinned to t0."""
    return SurgeDetector(registry=registry, clock=lambda: t0)
