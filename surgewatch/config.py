"""
SurgeWatch Configuration Management

This module provides configuration management for the SurgeWatch detection
engine. It includes physical constants, detection settings, signal
presentation options, and runtime configuration loaded from YAML files.
"""

import logging
import os
from typing import Any, Dict, List, Optional

import yaml

logger = logging.getLogger(__name__)

# =============================================================================
# Physical Constants
# =============================================================================


class Constants:
    """Physical constants representing real-world measurements."""

    EARTH_RADIUS_KM: float = 6371.0  # Earth's radius for distance calculations
    MS_PER_SECOND: int = 1000  # Epoch millisecond conversion for signal ids


# =============================================================================
# Detection Settings
# =============================================================================


class Settings:
    """Configurable settings for theater resolution and surge detection."""

    # --- Proximity ---
    PROXIMITY_RADIUS_KM: float = 150.0  # Radius for "near a base" (km)
    THEATER_CENTER_FALLBACK_KM: float = 1500.0  # Max distance to a theater center (km)
    NEARBY_BASES_PER_FLIGHT: int = 3  # Base names collected per flight

    # --- Surge Thresholds ---
    SURGE_THRESHOLD: float = 2.0  # Multiple of baseline that counts as a surge
    MIN_AIRLIFT_COUNT: int = 5  # Absolute floor for airlift surges
    MIN_FIGHTER_COUNT: int = 4  # Absolute floor for fighter surges

    # --- Baseline ---
    BASELINE_WINDOW_HOURS: float = 48.0  # Trailing window for baseline samples
    BASELINE_MIN_SAMPLES: int = 6  # Samples required before trusting history
    DEFAULT_BASELINE: Dict[str, float] = {"transport": 3, "fighter": 2, "recon": 1}
    BASELINE_FLOORS: Dict[str, float] = {"transport": 2, "fighter": 1, "recon": 1}

    # --- State Retention ---
    MAX_HISTORY_ENTRIES: int = 200  # Snapshots kept per theater
    MAX_HISTORY_HOURS: float = 72.0  # Snapshot age limit enforced at cleanup
    CLEANUP_INTERVAL_MINUTES: float = 60.0  # Minimum gap between cleanups
    ALERT_EXPIRY_HOURS: float = 2.0  # Inactivity before an alert is evicted

    # Callsign prefixes flown by airlift, medevac and heavy-lift operations
    TRANSPORT_CALLSIGN_PATTERNS: List[str] = [
        r"^RCH",
        r"^REACH",
        r"^MOOSE",
        r"^HERKY",
        r"^EVAC",
        r"^DUSTOFF",
    ]

    # --- Visualization ---
    DEFAULT_MAP_STYLE: str = "CartoDB.Positron"  # Base map tile style
    DEFAULT_ZOOM: int = 3  # Initial map zoom level


# =============================================================================
# Signal Presentation
# =============================================================================


class SignalStyle:
    """Presentation settings for rendering alerts as signals."""

    SIGNAL_TYPE: str = "military_surge"
    SOURCE: str = "Military Flight Tracking"
    CATEGORY: str = "military"

    TYPE_LABELS: Dict[str, str] = {
        "airlift": "Military Airlift Surge",
        "fighter": "Fighter Deployment Surge",
        "reconnaissance": "Reconnaissance Surge",
    }

    TYPE_ICONS: Dict[str, str] = {
        "airlift": "🛫",
        "fighter": "✈️",
        "reconnaissance": "🔭",
    }

    # Severity tiers, checked from the top down (minimum surge multiple)
    SEVERITY_TIERS: List[tuple] = [
        ("critical", 4.0),
        ("high", 3.0),
    ]
    DEFAULT_SEVERITY: str = "medium"

    # confidence = min(cap, base + (multiple - offset) * slope)
    CONFIDENCE_BASE: float = 0.6
    CONFIDENCE_OFFSET: float = 2.0
    CONFIDENCE_SLOPE: float = 0.1
    CONFIDENCE_CAP: float = 0.95

    TOP_AIRCRAFT_TYPES: int = 3  # Aircraft types named in descriptions
    TOP_NEARBY_BASES: int = 3  # Base names named in descriptions


# =============================================================================
# Runtime Configuration
# =============================================================================


class Config:
    """
    Runtime configuration manager for SurgeWatch.

    Loads settings from YAML files or uses sensible defaults.
    Provides property-based access to common settings.

    Example:
        >>> config = Config('surgewatch.yaml')
        >>> print(f"Surge threshold: {config.surge_threshold}x")
    """

    def __init__(self, config_path: Optional[str] = None) -> None:
        """
        Initialize configuration.

        Args:
            config_path: Path to YAML configuration file. If None or missing,
                        uses default configuration.
        """
        self.config_path = config_path
        self._config: Dict[str, Any] = self._load_config()

    def _load_config(self) -> Dict[str, Any]:
        """
        Load configuration from YAML file or return defaults.

        Returns:
            Configuration dictionary
        """
        if self.config_path is None or not os.path.exists(self.config_path):
            return self._get_default_config()

        try:
            with open(self.config_path, "r", encoding="utf-8") as f:
                config = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            logger.warning("Could not load config file %s: %s", self.config_path, e)
            return self._get_default_config()

        if not self._validate_config(config):
            logger.warning("Invalid config structure in %s, using defaults", self.config_path)
            return self._get_default_config()

        # Missing sections fall back to their defaults
        merged = self._get_default_config()
        for section, values in config.items():
            if isinstance(values, dict) and isinstance(merged.get(section), dict):
                merged[section].update(values)
            else:
                merged[section] = values
        return merged

    def _validate_config(self, config: Any) -> bool:
        """
        Validate configuration structure and value ranges.

        Args:
            config: Parsed YAML document

        Returns:
            True if valid, False otherwise
        """
        try:
            assert isinstance(config, dict)

            detection = config.get("detection", {})
            assert isinstance(detection, dict)
            for key in (
                "surge_threshold",
                "proximity_radius_km",
                "theater_center_fallback_km",
                "baseline_window_hours",
                "max_history_hours",
                "alert_expiry_hours",
                "cleanup_interval_minutes",
            ):
                if key in detection:
                    assert isinstance(detection[key], (float, int))
                    assert detection[key] > 0
            for key in (
                "min_airlift_count",
                "min_fighter_count",
                "max_history_entries",
                "baseline_min_samples",
            ):
                if key in detection:
                    assert isinstance(detection[key], int)
                    assert detection[key] > 0
            if "transport_callsign_patterns" in detection:
                assert isinstance(detection["transport_callsign_patterns"], list)

            log_cfg = config.get("logging", {})
            assert isinstance(log_cfg, dict)
            if "level" in log_cfg:
                assert isinstance(logging.getLevelName(str(log_cfg["level"]).upper()), int)

            signals = config.get("signals", {})
            assert isinstance(signals, dict)
            for key in ("labels", "icons"):
                if key in signals:
                    assert isinstance(signals[key], dict)
            if "severity_tiers" in signals:
                assert isinstance(signals["severity_tiers"], list)
                for tier in signals["severity_tiers"]:
                    assert isinstance(tier["name"], str)
                    assert isinstance(tier["min_multiple"], (float, int))
            if "confidence" in signals:
                assert isinstance(signals["confidence"], dict)
                for value in signals["confidence"].values():
                    assert isinstance(value, (float, int))

            # Catalog entries need a position; theaters list their bases
            coordinate_keys = {
                "theaters": ("center_lat", "center_lon"),
                "bases": ("lat", "lon"),
            }
            for section, coords in coordinate_keys.items():
                if section in config:
                    assert isinstance(config[section], list)
                    for entry in config[section]:
                        assert isinstance(entry, dict)
                        assert "id" in entry and "name" in entry
                        for key in coords:
                            assert isinstance(entry[key], (float, int))
                            assert not isinstance(entry[key], bool)
                        if section == "theaters" and "base_ids" in entry:
                            assert isinstance(entry["base_ids"], list)

            return True
        except (AssertionError, KeyError, TypeError):
            return False

    def _get_default_config(self) -> Dict[str, Any]:
        """
        Get default configuration.

        Returns:
            Default configuration dictionary
        """
        return {
            "detection": {
                "proximity_radius_km": Settings.PROXIMITY_RADIUS_KM,
                "theater_center_fallback_km": Settings.THEATER_CENTER_FALLBACK_KM,
                "surge_threshold": Settings.SURGE_THRESHOLD,
                "min_airlift_count": Settings.MIN_AIRLIFT_COUNT,
                "min_fighter_count": Settings.MIN_FIGHTER_COUNT,
                "baseline_window_hours": Settings.BASELINE_WINDOW_HOURS,
                "baseline_min_samples": Settings.BASELINE_MIN_SAMPLES,
                "max_history_entries": Settings.MAX_HISTORY_ENTRIES,
                "max_history_hours": Settings.MAX_HISTORY_HOURS,
                "cleanup_interval_minutes": Settings.CLEANUP_INTERVAL_MINUTES,
                "alert_expiry_hours": Settings.ALERT_EXPIRY_HOURS,
                "transport_callsign_patterns": list(Settings.TRANSPORT_CALLSIGN_PATTERNS),
            },
            "signals": {
                "labels": dict(SignalStyle.TYPE_LABELS),
                "icons": dict(SignalStyle.TYPE_ICONS),
                "severity_tiers": [
                    {"name": name, "min_multiple": minimum}
                    for name, minimum in SignalStyle.SEVERITY_TIERS
                ],
                "confidence": {
                    "base": SignalStyle.CONFIDENCE_BASE,
                    "offset": SignalStyle.CONFIDENCE_OFFSET,
                    "slope": SignalStyle.CONFIDENCE_SLOPE,
                    "cap": SignalStyle.CONFIDENCE_CAP,
                },
            },
            "logging": {
                "level": "INFO",
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            },
            "map": {
                "style": Settings.DEFAULT_MAP_STYLE,
                "zoom": Settings.DEFAULT_ZOOM,
            },
        }

    def save_config(self) -> None:
        """
        Save current configuration to YAML file.

        Raises:
            ValueError: If config_path is not set
        """
        if self.config_path is None:
            raise ValueError("Cannot save config: no config_path specified")

        with open(self.config_path, "w", encoding="utf-8") as f:
            yaml.dump(self._config, f, default_flow_style=False, allow_unicode=True)

    # --- Property Accessors ---

    @property
    def surge_threshold(self) -> float:
        """Get the baseline multiple that counts as a surge."""
        return float(self._config["detection"]["surge_threshold"])

    @property
    def proximity_radius_km(self) -> float:
        """Get the base proximity radius in kilometers."""
        return float(self._config["detection"]["proximity_radius_km"])

    @property
    def theater_center_fallback_km(self) -> float:
        """Get the maximum distance to a theater center in kilometers."""
        return float(self._config["detection"]["theater_center_fallback_km"])

    @property
    def transport_callsign_patterns(self) -> List[str]:
        """Get regex patterns identifying airlift callsigns."""
        return list(self._config["detection"]["transport_callsign_patterns"])

    @property
    def log_level(self) -> str:
        """Get logging level name."""
        return str(self._config["logging"].get("level", "INFO")).upper()

    @property
    def log_format(self) -> Optional[str]:
        """Get logging format string."""
        return self._config["logging"].get("format")

    @property
    def theaters(self) -> Optional[List[Dict[str, Any]]]:
        """Get custom theater catalog, if configured."""
        return self._config.get("theaters")

    @property
    def bases(self) -> Optional[List[Dict[str, Any]]]:
        """Get custom base catalog, if configured."""
        return self._config.get("bases")

    # --- Generic Accessors ---

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value using dot notation.

        Args:
            key: Dot-separated key path (e.g., 'detection.surge_threshold')
            default: Default value if key not found

        Returns:
            Configuration value or default

        Example:
            >>> config.get('detection.min_airlift_count', 5)
            5
        """
        keys = key.split(".")
        value = self._config

        for k in keys:
            if isinstance(value, dict):
                value = value.get(k)
                if value is None:
                    return default
            else:
                return default

        return value

    def set(self, key: str, value: Any) -> None:
        """
        Set configuration value using dot notation.

        Args:
            key: Dot-separated key path (e.g., 'detection.surge_threshold')
            value: Value to set

        Example:
            >>> config.set('detection.surge_threshold', 2.5)
        """
        keys = key.split(".")
        config = self._config

        # Navigate to parent of target key
        for k in keys[:-1]:
            if k not in config:
                config[k] = {}
            config = config[k]

        config[keys[-1]] = value
