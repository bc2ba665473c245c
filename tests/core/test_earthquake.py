"""Unit tests for earthquake feed parsing.

These tests cover pure functions:
- No mocks needed
- Fast, deterministic execution
"""

from datetime import datetime, timezone

import pytest

from quake_map.core.earthquake import (
    Earthquake,
    parse_earthquake,
    parse_earthquakes,
    get_reported_count,
    filter_by_magnitude,
)


# Sample USGS GeoJSON feature for testing
SAMPLE_FEATURE = {
    "type": "Feature",
    "id": "nc75095866",
    "properties": {
        "mag": 4.2,
        "place": "10km NE of San Francisco, CA",
        "time": 1703001600000,  # 2023-12-19 12:00:00 UTC
        "url": "https://earthquake.usgs.gov/earthquakes/eventpage/nc75095866",
        "magType": "ml",
    },
    "geometry": {
        "type": "Point",
        "coordinates": [-122.4194, 37.7749, 10.5],  # lon, lat, depth
    },
}

SAMPLE_GEOJSON = {
    "type": "FeatureCollection",
    "metadata": {"count": 1},
    "features": [SAMPLE_FEATURE],
}


class TestParseEarthquake:
    """Tests for parse_earthquake() pure function."""

    def test_parses_valid_feature(self):
        """Should parse a valid GeoJSON feature into Earthquake."""
        result = parse_earthquake(SAMPLE_FEATURE)

        assert result is not None
        assert result.id == "nc75095866"
        assert result.magnitude == 4.2
        assert result.place == "10km NE of San Francisco, CA"
        assert result.latitude == 37.7749
        assert result.longitude == -122.4194
        assert result.depth_km == 10.5
        assert result.mag_type == "ml"

    def test_parses_time_correctly(self):
        """Should convert milliseconds to datetime."""
        result = parse_earthquake(SAMPLE_FEATURE)

        assert result is not None
        expected_time = datetime(2023, 12, 19, 12, 0, 0, tzinfo=timezone.utc)
        assert result.time == expected_time

    def test_keeps_event_without_magnitude(self):
        """Events without a magnitude are kept with magnitude None."""
        feature = {
            "id": "nomag",
            "properties": {"mag": None, "time": 1703001600000},
            "geometry": {"coordinates": [1.0, 2.0, 3.0]},
        }
        result = parse_earthquake(feature)

        assert result is not None
        assert result.magnitude is None

    def test_keeps_event_without_time(self):
        """Events without a time are kept with time None."""
        feature = {
            "id": "notime",
            "properties": {"mag": 3.0},
            "geometry": {"coordinates": [0, 0, 0]},
        }
        result = parse_earthquake(feature)

        assert result is not None
        assert result.time is None

    def test_out_of_range_time_keeps_event(self):
        """A timestamp beyond datetime's range leaves time None."""
        feature = {
            "id": "fartime",
            "properties": {"mag": 2.0, "time": 10**20},
            "geometry": {"coordinates": [0, 0, 0]},
        }
        result = parse_earthquake(feature)

        assert result is not None
        assert result.time is None

    def test_non_numeric_time_keeps_event(self):
        """A non-numeric timestamp leaves time None."""
        feature = {
            "id": "badtime",
            "properties": {"mag": 2.0, "time": "yesterday"},
            "geometry": {"coordinates": [0, 0, 0]},
        }
        result = parse_earthquake(feature)

        assert result is not None
        assert result.time is None

    def test_missing_mag_type_is_empty(self):
        """A null magType becomes an empty string."""
        feature = {
            "id": "notype",
            "properties": {"mag": 2.0, "magType": None},
            "geometry": {"coordinates": [0, 0, 0]},
        }
        result = parse_earthquake(feature)

        assert result is not None
        assert result.mag_type == ""

    def test_returns_none_for_missing_coordinates(self):
        """Should return None if coordinates are missing."""
        feature = {
            "id": "test",
            "properties": {"mag": 3.0, "time": 1703001600000},
            "geometry": {"coordinates": []},
        }
        assert parse_earthquake(feature) is None

    def test_returns_none_for_missing_depth(self):
        """Should return None if only lon/lat are given."""
        feature = {
            "id": "test",
            "properties": {"mag": 3.0},
            "geometry": {"coordinates": [1.0, 2.0]},
        }
        assert parse_earthquake(feature) is None

    def test_returns_none_for_null_geometry(self):
        """Should return None if geometry is null."""
        feature = {"id": "test", "properties": {"mag": 3.0}, "geometry": None}
        assert parse_earthquake(feature) is None

    def test_returns_none_for_non_numeric_coordinates(self):
        """Should return None if coordinates are not numbers."""
        feature = {
            "id": "test",
            "properties": {"mag": 3.0},
            "geometry": {"coordinates": ["a", "b", "c"]},
        }
        assert parse_earthquake(feature) is None

    def test_defaults_place_when_null(self):
        """A null place falls back to a placeholder."""
        feature = {
            "id": "test",
            "properties": {"mag": 1.0, "place": None},
            "geometry": {"coordinates": [0, 0, 0]},
        }
        result = parse_earthquake(feature)

        assert result is not None
        assert result.place == "Unknown location"


class TestParseEarthquakes:
    """Tests for parse_earthquakes() pure function."""

    def test_parses_geojson_response(self):
        """Should parse full GeoJSON response."""
        result = parse_earthquakes(SAMPLE_GEOJSON)

        assert len(result) == 1
        assert result[0].id == "nc75095866"

    def test_filters_invalid_features(self):
        """Should skip invalid features."""
        geojson = {
            "features": [
                SAMPLE_FEATURE,
                {"properties": {}, "geometry": {}},  # Invalid
            ]
        }
        result = parse_earthquakes(geojson)
        assert len(result) == 1

    def test_out_of_range_time_does_not_abort_batch(self):
        """One bad timestamp should not drop the other events."""
        geojson = {
            "metadata": {"count": 2},
            "features": [
                {
                    "id": "fartime",
                    "properties": {"mag": 1.5, "time": 10**20},
                    "geometry": {"coordinates": [10.0, 20.0, 5.0]},
                },
                SAMPLE_FEATURE,
            ],
        }
        result = parse_earthquakes(geojson)

        assert [e.id for e in result] == ["fartime", "nc75095866"]
        assert len(result) == get_reported_count(geojson)

    def test_preserves_feed_order(self):
        """Should keep the order the feed lists events in."""
        older_feature = {
            **SAMPLE_FEATURE,
            "id": "older",
            "properties": {
                **SAMPLE_FEATURE["properties"],
                "time": 1702915200000,  # 1 day earlier
            },
        }
        geojson = {"features": [older_feature, SAMPLE_FEATURE]}

        result = parse_earthquakes(geojson)

        assert [e.id for e in result] == ["older", "nc75095866"]

    def test_handles_empty_features(self):
        """Should return empty list for no features."""
        assert parse_earthquakes({"features": []}) == []

    def test_handles_missing_features(self):
        """Should return empty list if features key missing."""
        assert parse_earthquakes({}) == []


class TestGetReportedCount:
    """Tests for get_reported_count()."""

    def test_reads_metadata_count(self):
        """Should return metadata.count."""
        assert get_reported_count(SAMPLE_GEOJSON) == 1

    def test_missing_metadata_returns_none(self):
        """Should return None without metadata."""
        assert get_reported_count({"features": []}) is None

    def test_missing_count_returns_none(self):
        """Should return None if metadata has no count."""
        assert get_reported_count({"metadata": {"title": "x"}}) is None

    def test_invalid_count_returns_none(self):
        """Should return None for a non-numeric count."""
        assert get_reported_count({"metadata": {"count": "many"}}) is None


class TestFilterByMagnitude:
    """Tests for filter_by_magnitude() pure function."""

    @pytest.fixture
    def earthquakes(self):
        """Create test earthquakes with various magnitudes."""
        base = parse_earthquake(SAMPLE_FEATURE)
        assert base is not None

        return [
            Earthquake(**{**base.__dict__, "id": "m2", "magnitude": 2.0}),
            Earthquake(**{**base.__dict__, "id": "m4", "magnitude": 4.0}),
            Earthquake(**{**base.__dict__, "id": "m6", "magnitude": 6.0}),
            Earthquake(**{**base.__dict__, "id": "none", "magnitude": None}),
        ]

    def test_filters_by_min_magnitude(self, earthquakes):
        """Should filter out earthquakes below minimum."""
        result = filter_by_magnitude(earthquakes, min_magnitude=4.0)

        assert [e.id for e in result] == ["m4", "m6"]

    def test_min_is_inclusive(self, earthquakes):
        """Events exactly at the minimum are kept."""
        result = filter_by_magnitude(earthquakes, min_magnitude=6.0)

        assert [e.id for e in result] == ["m6"]

    def test_no_filter_returns_all(self, earthquakes):
        """Should return all, including unknown magnitudes, if no filters given."""
        result = filter_by_magnitude(earthquakes)
        assert len(result) == 4


class TestEarthquakeModel:
    """Tests for Earthquake dataclass."""

    def test_is_immutable(self):
        """Earthquake should be immutable (frozen)."""
        eq = parse_earthquake(SAMPLE_FEATURE)
        assert eq is not None

        with pytest.raises(Exception):  # FrozenInstanceError
            eq.magnitude = 5.0  # type: ignore
