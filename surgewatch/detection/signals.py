"""
Signal Formatting
Renders surge alerts as generic, display-ready notification records.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional, Tuple

from surgewatch.config import Config, SignalStyle
from surgewatch.utils import to_epoch_ms

from .models import SurgeAlert


@dataclass(frozen=True)
class Signal:
    """A display-ready notification derived from a surge alert."""

    id: str
    type: str
    source: str
    title: str
    description: str
    severity: str
    confidence: float
    category: str
    timestamp: datetime
    location: Dict[str, Any] = field(default_factory=dict)
    data: Dict[str, Any] = field(default_factory=dict)
    metadata: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "type": self.type,
            "source": self.source,
            "title": self.title,
            "description": self.description,
            "severity": self.severity,
            "confidence": self.confidence,
            "category": self.category,
            "timestamp": self.timestamp.isoformat(),
            "location": dict(self.location),
            "data": dict(self.data),
            "metadata": dict(self.metadata),
        }


class SignalFormatter:
    """
    Converts SurgeAlert objects into Signal records.

    Labels, icons, severity tiers and the confidence curve come from
    SignalStyle unless overridden.
    """

    def __init__(
        self,
        labels: Optional[Dict[str, str]] = None,
        icons: Optional[Dict[str, str]] = None,
        severity_tiers: Optional[List[Tuple[str, float]]] = None,
        confidence_base: float = SignalStyle.CONFIDENCE_BASE,
        confidence_offset: float = SignalStyle.CONFIDENCE_OFFSET,
        confidence_slope: float = SignalStyle.CONFIDENCE_SLOPE,
        confidence_cap: float = SignalStyle.CONFIDENCE_CAP,
    ):
        """
        Initialize signal formatter.

        Args:
            labels: Title label per surge type
            icons: Title icon per surge type
            severity_tiers: (severity, minimum multiple) pairs
            confidence_base: Confidence at the offset multiple
            confidence_offset: Surge multiple where the curve starts
            confidence_slope: Confidence gained per unit of multiple
            confidence_cap: Upper bound on confidence
        """
        self.labels = dict(SignalStyle.TYPE_LABELS)
        self.labels.update(labels or {})
        self.icons = dict(SignalStyle.TYPE_ICONS)
        self.icons.update(icons or {})
        # Checked highest threshold first
        self.severity_tiers = sorted(
            severity_tiers or SignalStyle.SEVERITY_TIERS, key=lambda tier: tier[1], reverse=True
        )
        self.confidence_base = confidence_base
        self.confidence_offset = confidence_offset
        self.confidence_slope = confidence_slope
        self.confidence_cap = confidence_cap

    @classmethod
    def from_config(cls, config: Config) -> "SignalFormatter":
        """Build a formatter from the 'signals' config section."""
        tiers = config.get("signals.severity_tiers")
        curve = config.get("signals.confidence", {})
        return cls(
            labels=config.get("signals.labels"),
            icons=config.get("signals.icons"),
            severity_tiers=[(t["name"], float(t["min_multiple"])) for t in tiers] if tiers else None,
            confidence_base=float(curve.get("base", SignalStyle.CONFIDENCE_BASE)),
            confidence_offset=float(curve.get("offset", SignalStyle.CONFIDENCE_OFFSET)),
            confidence_slope=float(curve.get("slope", SignalStyle.CONFIDENCE_SLOPE)),
            confidence_cap=float(curve.get("cap", SignalStyle.CONFIDENCE_CAP)),
        )

    def severity(self, surge_multiple: float) -> str:
        """Map a surge multiple to a severity tier."""
        for name, minimum in self.severity_tiers:
            if surge_multiple >= minimum:
                return name
        return SignalStyle.DEFAULT_SEVERITY

    def confidence(self, surge_multiple: float) -> float:
        """Confidence grows with surge strength, capped below certainty."""
        return min(
            self.confidence_cap,
            self.confidence_base + (surge_multiple - self.confidence_offset) * self.confidence_slope,
        )

    def title(self, alert: SurgeAlert) -> str:
        label = self.labels.get(alert.type, alert.type)
        icon = self.icons.get(alert.type)
        if icon:
            label = f"{icon} {label}"
        return f"{label} - {alert.theater.name}"

    def description(self, alert: SurgeAlert) -> str:
        # Stable sort keeps first-seen order among equal counts
        top_types = sorted(alert.aircraft_types.items(), key=lambda item: item[1], reverse=True)
        aircraft_list = ", ".join(
            f"{count}x {name}" for name, count in top_types[: SignalStyle.TOP_AIRCRAFT_TYPES]
        )
        bases = ", ".join(alert.nearby_bases[: SignalStyle.TOP_NEARBY_BASES])

        return (
            f"{alert.current_count} {alert.type} aircraft detected "
            f"({alert.surge_multiple:.1f}x baseline). "
            f"{aircraft_list}. Near: {bases}"
        )

    def to_signal(self, alert: SurgeAlert) -> Signal:
        """
        Render an alert as a signal.

        Args:
            alert: Surge alert

        Returns:
            Signal anchored at the alert's theater center
        """
        metadata = {
            "theater_id": alert.theater.id,
            "surge_type": alert.type,
            "current_count": alert.current_count,
            "baseline_count": alert.baseline_count,
            "surge_multiple": alert.surge_multiple,
            "aircraft_types": dict(alert.aircraft_types),
            "nearby_bases": list(alert.nearby_bases),
        }

        return Signal(
            id=f"surge-{alert.id}-{to_epoch_ms(alert.first_detected)}",
            type=SignalStyle.SIGNAL_TYPE,
            source=SignalStyle.SOURCE,
            title=self.title(alert),
            description=self.description(alert),
            severity=self.severity(alert.surge_multiple),
            confidence=self.confidence(alert.surge_multiple),
            category=SignalStyle.CATEGORY,
            timestamp=alert.first_detected,
            location={
                "lat": alert.theater.center_lat,
                "lon": alert.theater.center_lon,
                "name": alert.theater.name,
            },
            data=metadata,
            metadata=dict(metadata),
        )


def surge_alert_to_signal(alert: SurgeAlert) -> Signal:
    """Render an alert with the default presentation style."""
    return SignalFormatter().to_signal(alert)
