"""
Visualization Constants
"""

# Map configuration
MAP_TILE_URLS = {
    "CartoDB.DarkMatter": "https://{s}.basemaps.cartocdn.com/dark_all/{z}/{x}/{y}{r}.png",
    "CartoDB.Positron": "https://{s}.basemaps.cartocdn.com/light_all/{z}/{x}/{y}{r}.png",
    "OpenStreetMap": "https://{s}.tile.openstreetmap.org/{z}/{x}/{y}.png",
}

# Severity colors
SEVERITY_COLORS = {
    "critical": "#e74c3c",  # Red
    "high":     "#f17c15",  # Orange
    "medium":   "#ffd015",  # Yellow
    "low":      "#3498db",  # Blue
}

# Theater and base markers
THEATER_COLOR = "#7c3aed"
BASE_COLOR = "#2c3e50"
BASE_MARKER_RADIUS = 4

# Alert circles (radius grows with surge multiple)
ALERT_BASE_RADIUS_KM = 150
ALERT_RADIUS_PER_MULTIPLE_KM = 75
ALERT_MAX_RADIUS_KM = 600
ALERT_FILL_OPACITY = 0.3
