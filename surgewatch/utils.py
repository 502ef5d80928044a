"""
SurgeWatch Utility Functions
Common utility functions for distance calculations, validation and logging.
"""

import logging
import math
import sys
from datetime import datetime, timedelta, timezone
from math import radians, sin, cos, sqrt, atan2
from typing import Optional

from .config import Constants


def haversine_distance(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """
    Calculate great circle distance between two points using Haversine formula.

    The Haversine formula calculates the shortest distance over the earth's
    surface, giving an "as-the-crow-flies" distance between two points.

    Args:
        lat1: Latitude of first point in degrees
        lon1: Longitude of first point in degrees
        lat2: Latitude of second point in degrees
        lon2: Longitude of second point in degrees

    Returns:
        Distance in kilometers

    Example:
        >>> haversine_distance(49.437, 7.600, 49.437, 7.600)
        0.0
    """
    lat1, lon1, lat2, lon2 = map(radians, [lat1, lon1, lat2, lon2])

    dlat = lat2 - lat1
    dlon = lon2 - lon1

    a = sin(dlat / 2) ** 2 + cos(lat1) * cos(lat2) * sin(dlon / 2) ** 2
    c = 2 * atan2(sqrt(a), sqrt(1 - a))

    return Constants.EARTH_RADIUS_KM * c


def validate_coordinates(lat, lon) -> bool:
    """
    Validate latitude and longitude coordinates.

    Rejects non-numeric, NaN and infinite values as well as values
    outside the valid ranges.

    Args:
        lat: Latitude in degrees
        lon: Longitude in degrees

    Returns:
        True if coordinates are valid

    Example:
        >>> validate_coordinates(26.356, 127.768)
        True
        >>> validate_coordinates(float('nan'), 8.0)
        False
    """
    if isinstance(lat, bool) or isinstance(lon, bool):
        return False
    if not isinstance(lat, (int, float)) or not isinstance(lon, (int, float)):
        return False
    if not (math.isfinite(lat) and math.isfinite(lon)):
        return False
    return -90 <= lat <= 90 and -180 <= lon <= 180


def utc_now() -> datetime:
    """Get the current time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


def to_epoch_ms(moment: datetime) -> int:
    """
    Convert a datetime to integer milliseconds since the Unix epoch.

    Naive datetimes are interpreted as UTC.
    """
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return int(round(moment.timestamp() * Constants.MS_PER_SECOND))


def parse_timestamp(value: str) -> datetime:
    """
    Parse an ISO 8601 timestamp into an aware UTC datetime.

    A trailing 'Z' is accepted; naive values are interpreted as UTC.

    Raises:
        ValueError: If the value is not a valid ISO 8601 timestamp
    """
    if not isinstance(value, str):
        raise ValueError(f"Timestamp must be an ISO 8601 string, got {value!r}")
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    moment = datetime.fromisoformat(text)
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positive values."""
    return int(math.floor(value + 0.5))


def format_age(delta: timedelta) -> str:
    """
    Format a time span in human-readable form.

    Example:
        >>> format_age(timedelta(hours=1, minutes=5))
        '1h 5m'
    """
    seconds = int(delta.total_seconds())
    if seconds < 0:
        return "N/A"

    hours = seconds // 3600
    minutes = (seconds % 3600) // 60

    if hours > 0:
        return f"{hours}h {minutes}m"
    return f"{minutes}m"


def setup_logging(level: str = "INFO", fmt: Optional[str] = None) -> None:
    """
    Configure the root logger with a single stream handler.

    Args:
        level: Logging level name (e.g. 'INFO', 'DEBUG')
        fmt: Log record format string
    """
    root = logging.getLogger()
    root.setLevel(level.upper())
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        logging.Formatter(fmt or "%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    )
    root.handlers.clear()
    root.addHandler(handler)
