"""Marker styling - Pure functions.

This module maps earthquake attributes to marker visuals: fill color from
depth and circle radius from magnitude. Drawing is handled by the shell.
"""

from dataclasses import dataclass

from quake_map.core.earthquake import Earthquake


@dataclass(frozen=True)
class DepthBand:
    """A depth range drawn with a single fill color.

    Attributes:
        lower_km: Exclusive lower bound in kilometers (None for the open
            bottom band)
        color: CSS color name used for the band
    """
    lower_km: float | None
    color: str


# Ascending. A depth belongs to the deepest band whose lower bound it
# strictly exceeds.
DEPTH_BANDS: tuple[DepthBand, ...] = (
    DepthBand(lower_km=None, color="lightgreen"),
    DepthBand(lower_km=10, color="yellow"),
    DepthBand(lower_km=30, color="gold"),
    DepthBand(lower_km=50, color="orange"),
    DepthBand(lower_km=70, color="orangered"),
    DepthBand(lower_km=90, color="red"),
)

# Circle radius in meters
MIN_RADIUS_METERS = 1000.0
RADIUS_METERS_PER_MAGNITUDE = 10000.0

OUTLINE_COLOR = "black"
OUTLINE_WEIGHT = 0.5
MARKER_OPACITY = 1.0
MARKER_FILL_OPACITY = 1.0


@dataclass(frozen=True)
class MarkerStyle:
    """Immutable visual attributes for one earthquake marker.

    Attributes:
        latitude: Circle center latitude
        longitude: Circle center longitude
        radius_m: Circle radius in meters
        fill_color: Fill color derived from depth
        color: Outline color
        weight: Outline width in pixels
        opacity: Outline opacity
        fill_opacity: Fill opacity
    """
    latitude: float
    longitude: float
    radius_m: float
    fill_color: str
    color: str = OUTLINE_COLOR
    weight: float = OUTLINE_WEIGHT
    opacity: float = MARKER_OPACITY
    fill_opacity: float = MARKER_FILL_OPACITY


def get_depth_color(depth_km: float) -> str:
    """Get the fill color for an event depth.

    Pure function. Boundary values belong to the shallower band, so 10 km
    is lightgreen and 90 km is orangered.

    Args:
        depth_km: Event depth in kilometers

    Returns:
        CSS color name
    """
    for band in reversed(DEPTH_BANDS):
        if band.lower_km is None or depth_km > band.lower_km:
            return band.color
    return DEPTH_BANDS[0].color


def get_magnitude_radius(magnitude: float | None) -> float:
    """Get the circle radius for an event magnitude.

    Pure function. A zero magnitude gets the minimum radius, other
    magnitudes scale linearly. Missing or negative magnitudes also get the
    minimum so that every marker stays visible.

    Args:
        magnitude: Event magnitude

    Returns:
        Radius in meters, always greater than zero
    """
    if magnitude is None or magnitude <= 0:
        return MIN_RADIUS_METERS
    return magnitude * RADIUS_METERS_PER_MAGNITUDE


def create_marker_style(earthquake: Earthquake) -> MarkerStyle:
    """Create the marker style for an earthquake.

    Pure function.

    Args:
        earthquake: Earthquake to draw

    Returns:
        MarkerStyle with position, radius and colors set
    """
    return MarkerStyle(
        latitude=earthquake.latitude,
        longitude=earthquake.longitude,
        radius_m=get_magnitude_radius(earthquake.magnitude),
        fill_color=get_depth_color(earthquake.depth_km),
    )
