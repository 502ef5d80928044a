"""
Alert Map Generator
Creates interactive Folium maps of theaters, bases and active surges.
"""

import logging
from typing import Iterable, Optional

import folium

from surgewatch.config import Settings
from surgewatch.detection import SignalFormatter, SurgeAlert
from surgewatch.registry import Base, Theater, TheaterRegistry

from .constants import (
    ALERT_BASE_RADIUS_KM,
    ALERT_FILL_OPACITY,
    ALERT_MAX_RADIUS_KM,
    ALERT_RADIUS_PER_MULTIPLE_KM,
    BASE_COLOR,
    BASE_MARKER_RADIUS,
    MAP_TILE_URLS,
    SEVERITY_COLORS,
    THEATER_COLOR,
)

logger = logging.getLogger(__name__)


class AlertMapGenerator:
    """
    Generates interactive surge maps using Folium.

    Supports visualization of:
    - Theater centers
    - Base positions
    - Active surge alerts, coloured by severity
    """

    def __init__(
        self,
        center_lat: float = 30.0,
        center_lon: float = 40.0,
        zoom: int = Settings.DEFAULT_ZOOM,
        style: str = Settings.DEFAULT_MAP_STYLE,
        formatter: Optional[SignalFormatter] = None,
    ):
        """
        Initialize map generator.

        Args:
            center_lat: Initial map center latitude
            center_lon: Initial map center longitude
            zoom: Initial zoom level (default: 3)
            style: Map style/theme (default: CartoDB.Positron)
            formatter: Signal formatter used for popups
        """
        self.center_lat = center_lat
        self.center_lon = center_lon
        self.zoom = zoom
        self.style = style
        self.formatter = formatter or SignalFormatter()

        self.map = self._create_base_map()

    def _create_base_map(self) -> folium.Map:
        """Create base Folium map."""
        tiles = MAP_TILE_URLS.get(self.style, self.style)

        return folium.Map(
            location=[self.center_lat, self.center_lon],
            zoom_start=self.zoom,
            tiles=tiles,
            attr="SurgeWatch",
        )

    def add_theater(self, theater: Theater):
        """Add a theater center marker."""
        folium.Marker(
            [theater.center_lat, theater.center_lon],
            popup=f"{theater.name} ({len(theater.base_ids)} bases)",
            tooltip=theater.name,
            icon=folium.Icon(color="purple", icon="globe", prefix="fa"),
        ).add_to(self.map)

    def add_base(self, base: Base, theater: Optional[Theater] = None):
        """Add a small base marker."""
        label = base.name if theater is None else f"{base.name} ({theater.name})"
        folium.CircleMarker(
            location=[base.lat, base.lon],
            radius=BASE_MARKER_RADIUS,
            color=THEATER_COLOR if theater is not None else BASE_COLOR,
            fill=True,
            fill_opacity=0.7,
            tooltip=label,
        ).add_to(self.map)

    def add_registry(self, registry: TheaterRegistry):
        """Add every theater and base of a registry."""
        for theater in registry.theaters:
            self.add_theater(theater)
        for base in registry.bases:
            self.add_base(base, registry.theater_for_base(base.id))

    def add_alert(self, alert: SurgeAlert):
        """
        Add a surge alert as a circle around its theater center.

        Args:
            alert: Active surge alert
        """
        signal = self.formatter.to_signal(alert)
        color = self._get_severity_color(signal.severity)

        folium.Circle(
            location=[signal.location["lat"], signal.location["lon"]],
            radius=self._alert_radius_km(alert.surge_multiple) * 1000,
            color=color,
            fill=True,
            fill_color=color,
            fill_opacity=ALERT_FILL_OPACITY,
            popup=folium.Popup(self._create_alert_popup(signal), max_width=320),
            tooltip=signal.title,
        ).add_to(self.map)

    def add_alerts(self, alerts: Iterable[SurgeAlert]):
        for alert in alerts:
            self.add_alert(alert)

    def _create_alert_popup(self, signal) -> str:
        """
        Create HTML popup for an alert.

        Args:
            signal: Signal rendered from the alert

        Returns:
            HTML string for popup
        """
        return f"""
        <div style='font-family: Arial; min-width: 200px;'>
            <h4 style='margin: 0 0 10px 0; color: {self._get_severity_color(signal.severity)};'>
                {signal.title}
            </h4>
            <p>{signal.description}</p>
            <table style='width: 100%; border-collapse: collapse;'>
                <tr><td><b>Severity:</b></td><td>{signal.severity}</td></tr>
                <tr><td><b>Confidence:</b></td><td>{signal.confidence:.2f}</td></tr>
                <tr><td><b>Detected:</b></td><td>{signal.timestamp:%Y-%m-%d %H:%M} UTC</td></tr>
            </table>
        </div>
        """

    @staticmethod
    def _alert_radius_km(surge_multiple: float) -> float:
        radius = ALERT_BASE_RADIUS_KM + surge_multiple * ALERT_RADIUS_PER_MULTIPLE_KM
        return min(radius, ALERT_MAX_RADIUS_KM)

    @staticmethod
    def _get_severity_color(severity: str) -> str:
        return SEVERITY_COLORS.get(severity, SEVERITY_COLORS["low"])

    def save(self, filename: str):
        """
        Save map to HTML file.

        Args:
            filename: Output filename (should end in .html)
        """
        self.map.save(filename)

        # Give the page a title
        with open(filename, "r", encoding="utf-8") as f:
            html_content = f.read()
        html_content = html_content.replace(
            "<head>", "<head>\n    <title>SurgeWatch Map</title>", 1
        )
        with open(filename, "w", encoding="utf-8") as f:
            f.write(html_content)

        logger.info("Map saved to %s", filename)
