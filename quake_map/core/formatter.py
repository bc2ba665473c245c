"""HTML and text formatting - Pure functions.

This module formats earthquake data into popup and legend markup, and
render results into log lines. All functions are pure with no side effects.
"""

from html import escape
from typing import TYPE_CHECKING

from quake_map.core.earthquake import Earthquake

if TYPE_CHECKING:
    from quake_map.core.legend import LegendEntry


def format_number(value: float) -> str:
    """Format a number without a trailing ".0" on whole values.

    Pure function.
    """
    if float(value).is_integer():
        return str(int(value))
    return str(value)


def format_magnitude(magnitude: float | None, mag_type: str = "") -> str:
    """Format a magnitude for display, e.g. "4.5 ml".

    Pure function.
    """
    if magnitude is None:
        return "unknown"
    if mag_type:
        return f"{format_number(magnitude)} {mag_type}"
    return format_number(magnitude)


def format_popup_html(earthquake: Earthquake) -> str:
    """Format the popup shown when a marker is clicked.

    Pure function.

    Args:
        earthquake: Earthquake the marker represents

    Returns:
        HTML fragment with magnitude, location and depth lines
    """
    lines = [
        f"Magnitude: {format_magnitude(earthquake.magnitude, escape(earthquake.mag_type))}",
        f"Location: {format_number(earthquake.latitude)}, {format_number(earthquake.longitude)}",
        f"Depth: {format_number(earthquake.depth_km)}",
    ]

    if earthquake.place and earthquake.place != "Unknown location":
        lines.insert(0, f"<b>{escape(earthquake.place)}</b>")

    if earthquake.time is not None:
        lines.append(f"Time: {earthquake.time.strftime('%Y-%m-%d %H:%M:%S UTC')}")

    if earthquake.url:
        lines.append(
            f'<a href="{escape(earthquake.url, quote=True)}" target="_blank">'
            "USGS event page</a>"
        )

    return "<br> ".join(lines)


def format_legend_html(entries: list["LegendEntry"]) -> str:
    """Format legend rows as a colored square followed by the depth range.

    Pure function.

    Args:
        entries: Legend rows, in display order

    Returns:
        HTML fragment for the legend body
    """
    rows = [
        f"<i style='background: {escape(entry.color, quote=True)}'></i>"
        f"{escape(entry.label)}"
        for entry in entries
    ]
    return "<br>".join(rows)


def format_render_summary(
    reported_count: int | None,
    markers_drawn: int,
    error_count: int = 0,
) -> str:
    """Format a one-line summary of a render pass.

    Pure function.

    Args:
        reported_count: Event count from the feed metadata (None if absent)
        markers_drawn: Number of markers added to the map
        error_count: Number of errors recorded during the pass

    Returns:
        Human-readable summary string
    """
    reported = "unknown" if reported_count is None else str(reported_count)
    summary = f"Feed reported {reported} earthquakes, drew {markers_drawn} markers"
    if error_count:
        summary += f", {error_count} errors"
    return summary
