"""
Tests for the replay script.
"""

import json
import logging
from datetime import datetime, timezone

import pytest

from scripts.replay import load_cycles, main


def record(i, kind="transport", lat=49.437, lon=7.600):
    return {
        "id": f"{kind}-{i}",
        "callsign": f"TEST{i:02d}",
        "lat": lat + i * 0.001,
        "lon": lon,
        "aircraftType": kind,
        "aircraftModel": "C-17" if kind == "transport" else "F-16",
    }


@pytest.fixture(autouse=True)
def restore_logging():
    """main() reconfigures the root logger."""
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    yield
    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)


@pytest.fixture
def cycles_file(tmp_path):
    cycles = [
        {"timestamp": "2026-01-01T00:10:00Z", "flights": [record(i) for i in range(8)]},
        {"timestamp": "2026-01-01T00:00:00Z", "flights": [record(i) for i in range(6)]
            + [{"id": "broken", "callsign": "X"}]},
        {"timestamp": "2026-01-01T00:20:00Z", "flights": [record(i, "fighter") for i in range(4)]},
    ]
    path = tmp_path / "cycles.json"
    path.write_text(json.dumps(cycles))
    return path


class TestLoadCycles:
    """Tests for load_cycles."""

    def test_sorted_and_parsed(self, cycles_file):
        cycles = load_cycles(str(cycles_file))
        assert [ts for ts, _ in cycles] == [
            datetime(2026, 1, 1, 0, 0, tzinfo=timezone.utc),
            datetime(2026, 1, 1, 0, 10, tzinfo=timezone.utc),
            datetime(2026, 1, 1, 0, 20, tzinfo=timezone.utc),
        ]

    def test_broken_flights_skipped(self, cycles_file):
        cycles = load_cycles(str(cycles_file))
        assert len(cycles[0][1]) == 6

    def test_not_a_list(self, tmp_path):
        path = tmp_path / "cycles.json"
        path.write_text(json.dumps({"timestamp": "2026-01-01T00:00:00Z"}))
        with pytest.raises(ValueError):
            load_cycles(str(path))

    def test_missing_timestamp(self, tmp_path):
        path = tmp_path / "cycles.json"
        path.write_text(json.dumps([{"flights": []}]))
        with pytest.raises(ValueError):
            load_cycles(str(path))

    def test_malformed_records_skipped(self, tmp_path):
        """Odd callsigns are coerced, non-mapping records are skipped."""
        path = tmp_path / "cycles.json"
        path.write_text(json.dumps([{
            "timestamp": "2026-01-01T00:00:00Z",
            "flights": [dict(record(0), callsign=1234), None, "RCH871", record(1)],
        }]))

        flights = load_cycles(str(path))[0][1]
        assert [f.id for f in flights] == ["transport-0", "transport-1"]
        assert flights[0].callsign == "1234"

    @pytest.mark.parametrize("timestamp", [1767225600, None, ["2026-01-01"]])
    def test_non_string_timestamp(self, tmp_path, timestamp):
        path = tmp_path / "cycles.json"
        path.write_text(json.dumps([{"timestamp": timestamp, "flights": []}]))
        with pytest.raises(ValueError):
            load_cycles(str(path))

    def test_flights_not_a_list(self, tmp_path):
        path = tmp_path / "cycles.json"
        path.write_text(json.dumps([{"timestamp": "2026-01-01T00:00:00Z", "flights": {"id": "x"}}]))
        with pytest.raises(ValueError):
            load_cycles(str(path))


class TestReplayMain:
    """Tests for the replay entry point."""

    def test_replay_with_report(self, tmp_path, cycles_file, capsys):
        report = tmp_path / "report.json"
        active = main(["--input", str(cycles_file), "--report", str(report)])

        assert sorted(a.id for a in active) == ["airlift-europe-west", "fighter-europe-west"]
        airlift = next(a for a in active if a.type == "airlift")
        assert airlift.current_count == 8

        data = json.loads(report.read_text(encoding="utf-8"))
        assert data["metadata"]["alert_count"] == 2
        assert "Military Airlift Surge - Western Europe" in capsys.readouterr().out

    def test_missing_input(self, tmp_path):
        with pytest.raises(SystemExit):
            main(["--input", str(tmp_path / "missing.json")])

    def test_malformed_input_exits(self, tmp_path):
        path = tmp_path / "cycles.json"
        path.write_text(json.dumps([{"timestamp": 1767225600, "flights": []}]))
        with pytest.raises(SystemExit):
            main(["--input", str(path)])

    def test_text_report_with_activity(self, tmp_path, cycles_file):
        report = tmp_path / "report.txt"
        main(["--input", str(cycles_file), "--report", str(report), "--format", "txt"])

        content = report.read_text(encoding="utf-8")
        assert "THEATER ACTIVITY" in content
        assert "europe-west (3 snapshots)" in content
        assert "Active for: 20m" in content
