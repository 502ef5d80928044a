"""
Flight Classification
Maps flight records to coarse activity categories.
"""

import re
from typing import Iterable, Optional

from surgewatch.config import Settings

from .constants import (
    CATEGORY_FIGHTER,
    CATEGORY_OTHER,
    CATEGORY_RECON,
    CATEGORY_TRANSPORT,
    FIGHTER_AIRCRAFT_TYPES,
    RECON_AIRCRAFT_TYPES,
    TRANSPORT_AIRCRAFT_TYPES,
)
from .models import Flight


class FlightClassifier:
    """
    Classifies flights as transport, fighter, recon or other.

    Transport wins over the declared type: a flight whose callsign matches
    an airlift prefix is transport even if it declares itself a fighter.
    """

    def __init__(self, callsign_patterns: Optional[Iterable[str]] = None):
        """
        Initialize flight classifier.

        Args:
            callsign_patterns: Regex patterns identifying airlift callsigns
                               (default: Settings.TRANSPORT_CALLSIGN_PATTERNS)
        """
        if callsign_patterns is None:
            callsign_patterns = Settings.TRANSPORT_CALLSIGN_PATTERNS
        self.callsign_patterns = [re.compile(p, re.IGNORECASE) for p in callsign_patterns]

    def is_transport(self, flight: Flight) -> bool:
        """Check declared type and callsign for airlift activity."""
        if flight.aircraft_type in TRANSPORT_AIRCRAFT_TYPES:
            return True

        callsign = (flight.callsign or "").upper()
        return any(p.search(callsign) for p in self.callsign_patterns)

    def classify(self, flight: Flight) -> str:
        """
        Classify a flight.

        Args:
            flight: Flight record

        Returns:
            One of 'transport', 'fighter', 'recon', 'other'
        """
        if self.is_transport(flight):
            return CATEGORY_TRANSPORT
        if flight.aircraft_type in FIGHTER_AIRCRAFT_TYPES:
            return CATEGORY_FIGHTER
        if flight.aircraft_type in RECON_AIRCRAFT_TYPES:
            return CATEGORY_RECON
        return CATEGORY_OTHER
