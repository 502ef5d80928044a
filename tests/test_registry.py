"""
Tests for the theater registry.
"""

import pytest
import yaml

from surgewatch.config import Config
from surgewatch.registry import Base, Theater, TheaterRegistry

from conftest import KADENA, RAMSTEIN, SOUTH_PACIFIC


@pytest.fixture
def split_registry():
    """
    Two theaters where base proximity and center distance disagree.

    The point (0, 0) is 0 km from Near's center but within 50 km of a
    base owned by Far, whose center is 1000+ km away.
    """
    theaters = [
        Theater("near", "Near", frozenset({"near_base"}), 0.0, 0.0),
        Theater("far", "Far", frozenset({"far_base"}), 10.0, 0.0),
    ]
    bases = [
        Base("far_base", "Far Outpost", 0.3, 0.0),
        Base("near_base", "Near Base", 5.0, 0.0),
    ]
    return TheaterRegistry(theaters=theaters, bases=bases)


class TestNearbyBases:
    """Tests for nearby_bases."""

    def test_sorted_by_distance(self, registry):
        nearby = registry.nearby_bases(*RAMSTEIN)
        distances = [d for _, d in nearby]
        assert distances == sorted(distances)
        assert nearby[0][0].id == "ramstein"
        assert nearby[0][1] == pytest.approx(0.0, abs=1e-6)

    def test_within_radius(self, registry):
        for _, dist in registry.nearby_bases(*RAMSTEIN):
            assert dist <= 150

    def test_custom_radius(self, registry):
        nearby = registry.nearby_bases(*RAMSTEIN, radius_km=10)
        assert [b.id for b, _ in nearby] == ["ramstein"]

    def test_nothing_nearby(self, registry):
        assert registry.nearby_bases(*SOUTH_PACIFIC) == []


class TestTheaterOf:
    """Tests for two-tier theater resolution."""

    def test_base_proximity(self, registry):
        assert registry.theater_of(*RAMSTEIN).id == "europe-west"
        assert registry.theater_of(*KADENA).id == "pacific-west"

    def test_base_beats_closer_center(self, split_registry):
        """A theater's base wins even when another center is closer."""
        assert split_registry.theater_of(0.0, 0.0).id == "far"

    def test_center_fallback(self, registry):
        """Without nearby bases the theater center decides."""
        assert registry.nearby_bases(45.0, 25.0) == []
        assert registry.theater_of(45.0, 25.0).id == "europe-east"

    def test_nearest_center_wins(self, registry):
        """Fallback picks the nearest center, not the first listed."""
        assert registry.nearby_bases(47.0, 15.0) == []
        assert registry.theater_of(47.0, 15.0).id == "europe-west"

    def test_unowned_base_falls_back_to_center(self, registry):
        """Incirlik belongs to no theater; the closest center is used."""
        assert registry.theater_for_base("incirlik") is None
        assert registry.theater_of(37.002, 35.426).id == "europe-east"

    def test_unassigned(self, registry):
        assert registry.theater_of(*SOUTH_PACIFIC) is None

    def test_unowned_base_without_center(self, registry):
        """Rota is near a base but far from every theater center."""
        assert registry.theater_of(36.645, -6.349) is None

    def test_invalid_coordinates(self, registry):
        assert registry.theater_of(float("nan"), 7.6) is None
        assert registry.theater_of(120.0, 7.6) is None


class TestRegistryCatalog:
    """Tests for catalog construction."""

    def test_default_catalog(self, registry):
        ids = [t.id for t in registry.theaters]
        assert ids == ["middle-east", "europe-east", "europe-west", "pacific-west", "africa-horn"]
        assert registry.get_theater("africa-horn").name == "Horn of Africa"
        assert registry.get_theater("nowhere") is None

    def test_every_theater_base_exists(self, registry):
        base_ids = {b.id for b in registry.bases}
        for theater in registry.theaters:
            assert theater.base_ids <= base_ids

    def test_duplicate_theater(self):
        theaters = [
            Theater("dup", "One", frozenset(), 0.0, 0.0),
            Theater("dup", "Two", frozenset(), 1.0, 1.0),
        ]
        with pytest.raises(ValueError):
            TheaterRegistry(theaters=theaters, bases=[])

    def test_from_config(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text(yaml.safe_dump({
            "detection": {"proximity_radius_km": 80},
            "theaters": [{
                "id": "arctic",
                "name": "Arctic",
                "base_ids": ["thule"],
                "center_lat": 76.5,
                "center_lon": -68.7,
            }],
        }))

        registry = TheaterRegistry.from_config(Config(str(path)))
        assert [t.id for t in registry.theaters] == ["arctic"]
        assert registry.proximity_radius_km == 80
        # Default bases are kept when none are configured
        assert registry.theater_of(76.53, -68.70).id == "arctic"

    def test_theater_base_ids_must_be_list(self):
        with pytest.raises(ValueError):
            Theater.from_dict({
                "id": "arctic", "name": "Arctic", "base_ids": "thule",
                "center_lat": 76.5, "center_lon": -68.7,
            })
