"""Earthquake data models and parsing - Pure functions.

This module handles parsing USGS GeoJSON feed data into typed Earthquake
objects. All functions are pure with no side effects.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any


@dataclass(frozen=True)
class Earthquake:
    """Immutable earthquake data model.

    Attributes:
        id: Unique USGS event ID
        magnitude: Event magnitude, None if the feed has not assigned one yet
        place: Human-readable location description
        time: Event timestamp (UTC), None if missing from the feed
        latitude: Epicenter latitude
        longitude: Epicenter longitude
        depth_km: Depth in kilometers
        url: USGS event detail URL
        mag_type: Magnitude type (e.g., 'ml', 'md', 'mb'), empty if unknown
    """
    id: str
    magnitude: float | None
    place: str
    time: datetime | None
    latitude: float
    longitude: float
    depth_km: float
    url: str = ""
    mag_type: str = ""


def _parse_time(time_ms: Any) -> datetime | None:
    """Convert USGS milliseconds since epoch to a UTC datetime.

    Out-of-range or non-numeric values give None; the event keeps its marker.
    """
    if time_ms is None:
        return None
    try:
        return datetime.fromtimestamp(time_ms / 1000, tz=timezone.utc)
    except (OverflowError, OSError, TypeError, ValueError):
        return None


def parse_earthquake(feature: dict[str, Any]) -> Earthquake | None:
    """Parse a single GeoJSON feature into an Earthquake.

    Pure function: takes raw dict, returns typed Earthquake or None if the
    feature has no usable position. Events without a magnitude are kept so
    that every reported event still gets a marker.

    Args:
        feature: GeoJSON feature dict from the USGS feed

    Returns:
        Earthquake object or None if parsing fails
    """
    try:
        props = feature.get("properties") or {}
        geometry = feature.get("geometry") or {}
        coords = geometry.get("coordinates") or []

        # lon, lat, depth
        if len(coords) < 3:
            return None

        event_time = _parse_time(props.get("time"))

        magnitude = props.get("mag")

        return Earthquake(
            id=feature.get("id", ""),
            magnitude=float(magnitude) if magnitude is not None else None,
            place=props.get("place") or "Unknown location",
            time=event_time,
            longitude=float(coords[0]),
            latitude=float(coords[1]),
            depth_km=float(coords[2]),
            url=props.get("url") or "",
            mag_type=props.get("magType") or "",
        )
    except (AttributeError, KeyError, TypeError, ValueError):
        return None


def parse_earthquakes(geojson: dict[str, Any]) -> list[Earthquake]:
    """Parse a USGS GeoJSON FeatureCollection into a list of Earthquakes.

    Pure function: skips invalid features and keeps feed order, so markers
    are drawn in the same order the feed lists them.

    Args:
        geojson: Full GeoJSON FeatureCollection from the USGS feed

    Returns:
        List of valid Earthquake objects
    """
    features = geojson.get("features") or []
    earthquakes = []

    for feature in features:
        earthquake = parse_earthquake(feature)
        if earthquake is not None:
            earthquakes.append(earthquake)

    return earthquakes


def get_reported_count(geojson: dict[str, Any]) -> int | None:
    """Get the event count the feed reports in its metadata.

    Pure function.

    Args:
        geojson: Full GeoJSON FeatureCollection from the USGS feed

    Returns:
        metadata.count, or None if the feed does not report one
    """
    metadata = geojson.get("metadata") or {}
    count = metadata.get("count")
    if count is None:
        return None
    try:
        return int(count)
    except (TypeError, ValueError):
        return None


def filter_by_magnitude(
    earthquakes: list[Earthquake],
    min_magnitude: float | None = None,
) -> list[Earthquake]:
    """Filter earthquakes by minimum magnitude.

    Pure function. Events without a magnitude are dropped once a minimum
    is given.

    Args:
        earthquakes: List of earthquakes to filter
        min_magnitude: Minimum magnitude (inclusive), None for no minimum

    Returns:
        Filtered list of earthquakes
    """
    if min_magnitude is None:
        return earthquakes

    return [
        e for e in earthquakes
        if e.magnitude is not None and e.magnitude >= min_magnitude
    ]
