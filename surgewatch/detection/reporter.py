"""
Report Generator
Writes active alerts and their signals to report files.
"""

import json
from datetime import datetime
from typing import Any, Dict, Iterable, List, Optional

from surgewatch.utils import format_age, utc_now

from .models import SurgeAlert, TheaterActivity
from .signals import SignalFormatter


class ReportGenerator:
    """
    Generates surge reports in multiple formats.
    """

    def __init__(self, formatter: Optional[SignalFormatter] = None):
        self.formatter = formatter or SignalFormatter()

    def build_report(self, alerts: Iterable[SurgeAlert],
                     generated_at: Optional[datetime] = None,
                     activity: Optional[Dict[str, List[TheaterActivity]]] = None) -> Dict[str, Any]:
        """
        Build the report structure.

        Args:
            alerts: Alerts to include
            generated_at: Report time (default: now)
            activity: Optional per-theater activity history, oldest first

        Returns:
            Dictionary with metadata, alerts, signals and activity
        """
        alerts = list(alerts)
        generated_at = generated_at or utc_now()

        signals = []
        for alert in alerts:
            signal = self.formatter.to_signal(alert).to_dict()
            signal["active_for"] = format_age(generated_at - alert.first_detected)
            signals.append(signal)

        return {
            "metadata": {
                "generated_at": generated_at.isoformat(),
                "alert_count": len(alerts),
            },
            "alerts": [alert.to_dict() for alert in alerts],
            "signals": signals,
            "activity": {
                theater_id: [entry.to_dict() for entry in entries]
                for theater_id, entries in (activity or {}).items()
            },
        }

    def generate_report(self, alerts: Iterable[SurgeAlert],
                        output_path: str, format: str = 'json',
                        generated_at: Optional[datetime] = None,
                        activity: Optional[Dict[str, List[TheaterActivity]]] = None):
        """
        Generate surge report.

        Args:
            alerts: Alerts to include
            output_path: Output file path
            format: Report format ('json', 'txt')
            generated_at: Report time (default: now)
            activity: Optional per-theater activity history

        Raises:
            ValueError: If the format is not supported
        """
        if format not in ('json', 'txt'):
            raise ValueError(f"Unsupported format: {format}")

        report = self.build_report(alerts, generated_at, activity)
        if format == 'json':
            self._generate_json_report(report, output_path)
        else:
            self._generate_text_report(report, output_path)

    def _generate_json_report(self, report: Dict[str, Any], output_path: str):
        """Generate JSON report."""
        with open(output_path, 'w', encoding='utf-8') as f:
            json.dump(report, f, indent=2, default=str, ensure_ascii=False)

    def _generate_text_report(self, report: Dict[str, Any], output_path: str):
        """Generate text report."""
        with open(output_path, 'w', encoding='utf-8') as f:
            f.write("=" * 70 + "\n")
            f.write("SURGEWATCH MILITARY ACTIVITY REPORT\n")
            f.write("=" * 70 + "\n\n")

            f.write(f"Generated: {report['metadata']['generated_at']}\n")
            f.write(f"Active alerts: {report['metadata']['alert_count']}\n\n")

            if not report['signals']:
                f.write("No active surges.\n")
            for signal in report['signals']:
                f.write(f"[{signal['severity'].upper():8s}] {signal['title']}\n")
                f.write(f"    {signal['description']}\n")
                f.write(f"    Confidence: {signal['confidence']:.2f}  "
                        f"First detected: {signal['timestamp']}  "
                        f"Active for: {signal['active_for']}\n\n")

            if report['activity']:
                f.write("-" * 70 + "\n")
                f.write("THEATER ACTIVITY\n")
                f.write("-" * 70 + "\n")
                for theater_id, entries in report['activity'].items():
                    f.write(f"\n{theater_id} ({len(entries)} snapshots)\n")
                    for entry in entries:
                        f.write(f"  {entry['timestamp']}  transport={entry['transport_count']:<3d} "
                                f"fighter={entry['fighter_count']:<3d} recon={entry['recon_count']:<3d} "
                                f"total={entry['total_military']}\n")
