#!/usr/bin/env python3
"""
SurgeWatch Replay Script

Replays recorded flight snapshots through the surge detector.

Input is a JSON file holding a list of cycles:
    [{"timestamp": "2026-01-01T00:00:00Z", "flights": [{...}, ...]}, ...]

Usage:
    python scripts/replay.py --input CYCLES_FILE [--config CONFIG_FILE]
                             [--report REPORT_FILE] [--format json|txt]
                             [--map MAP_FILE]
"""

import sys
import json
import logging
import argparse
from datetime import datetime
from pathlib import Path
from typing import List, Optional, Tuple

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from surgewatch import Config
from surgewatch.detection import Flight, ReportGenerator, SignalFormatter, SurgeDetector
from surgewatch.utils import parse_timestamp, setup_logging

logger = logging.getLogger("surgewatch.replay")


def load_cycles(path: str) -> List[Tuple[datetime, List[Flight]]]:
    """
    Load recorded cycles from a JSON file.

    Flights without a usable position are skipped with a warning.

    Args:
        path: Path to the cycles file

    Returns:
        List of (timestamp, flights) tuples in timestamp order

    Raises:
        ValueError: If the file structure or a timestamp is invalid
    """
    with open(path, "r", encoding="utf-8") as f:
        raw = json.load(f)

    if not isinstance(raw, list):
        raise ValueError("Cycles file must contain a JSON list")

    cycles = []
    for index, entry in enumerate(raw):
        if not isinstance(entry, dict) or "timestamp" not in entry:
            raise ValueError(f"Cycle #{index} has no timestamp")

        timestamp = parse_timestamp(entry["timestamp"])
        records = entry.get("flights") or []
        if not isinstance(records, list):
            raise ValueError(f"Cycle #{index}: flights must be a list")

        flights = []
        for record in records:
            try:
                flights.append(Flight.from_dict(record))
            except ValueError as e:
                logger.warning("Cycle #%d: %s", index, e)
        cycles.append((timestamp, flights))

    cycles.sort(key=lambda item: item[0])
    return cycles


def main(argv: Optional[List[str]] = None):
    """Main entry point for the replay script."""
    parser = argparse.ArgumentParser(
        description="SurgeWatch Replay - Run recorded flight snapshots through the surge detector"
    )
    parser.add_argument("--input", type=str, required=True, help="Path to recorded cycles (JSON)")
    parser.add_argument("--config", type=str, default=None, help="Path to configuration file")
    parser.add_argument("--report", type=str, default=None, help="Write a report of active alerts")
    parser.add_argument(
        "--format", type=str, default="json", choices=["json", "txt"], help="Report format"
    )
    parser.add_argument("--map", type=str, default=None, help="Write an HTML map of active alerts")

    args = parser.parse_args(argv)

    config = Config(args.config)
    setup_logging(config.log_level, config.log_format)

    try:
        cycles = load_cycles(args.input)
    except (OSError, ValueError) as e:
        print(f"❌ Error loading cycles: {e}")
        sys.exit(1)

    detector = SurgeDetector(config=config)
    formatter = SignalFormatter.from_config(config)

    print("\n" + "=" * 70)
    print(f"🛰️  SURGEWATCH REPLAY - {len(cycles)} cycles")
    print("=" * 70)

    for timestamp, flights in cycles:
        for alert in detector.analyze(flights, now=timestamp):
            signal = formatter.to_signal(alert)
            print(f"\n[{timestamp:%Y-%m-%d %H:%M}] {signal.title}")
            print(f"   {signal.description}")
            print(f"   Severity: {signal.severity}, confidence {signal.confidence:.2f}")

    active = detector.get_active_alerts()
    print(f"\n📊 {len(active)} active alerts at end of replay")

    if args.report:
        activity = {
            theater_id: detector.get_theater_activity(theater_id)
            for theater_id in sorted({alert.theater.id for alert in active})
        }
        ReportGenerator(formatter).generate_report(
            active,
            args.report,
            format=args.format,
            generated_at=cycles[-1][0] if cycles else None,
            activity=activity,
        )
        print(f"💾 Report saved to: {args.report}")

    if args.map:
        from surgewatch.visualization import AlertMapGenerator

        generator = AlertMapGenerator(
            zoom=config.get("map.zoom", 3),
            style=config.get("map.style", "CartoDB.Positron"),
            formatter=formatter,
        )
        generator.add_registry(detector.registry)
        generator.add_alerts(active)
        generator.save(args.map)
        print(f"🗺️  Map saved to: {args.map}")

    return active


if __name__ == "__main__":
    main()
