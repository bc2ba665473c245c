"""Depth legend - Pure functions.

The legend is derived from DEPTH_BANDS so its rows always agree with the
colors that get_depth_color() assigns.
"""

from dataclasses import dataclass

from quake_map.core.formatter import format_number
from quake_map.core.style import DEPTH_BANDS

# Shallowest depth shown on the legend (events can sit slightly above sea level)
LEGEND_FLOOR_KM = -10


@dataclass(frozen=True)
class LegendEntry:
    """One legend row.

    Attributes:
        label: Depth range text, e.g. "10-30 km"
        color: CSS color name of the band
    """
    label: str
    color: str


def build_legend_entries() -> list[LegendEntry]:
    """Build the legend rows, shallowest band first.

    Pure function.

    Returns:
        One entry per depth band
    """
    entries = []

    for i, band in enumerate(DEPTH_BANDS):
        lower = LEGEND_FLOOR_KM if band.lower_km is None else band.lower_km

        if i + 1 < len(DEPTH_BANDS):
            upper = DEPTH_BANDS[i + 1].lower_km
            label = f"{format_number(lower)}-{format_number(upper)} km"
        else:
            label = f"{format_number(lower)}+ km"

        entries.append(LegendEntry(label=label, color=band.color))

    return entries
