"""Functional Core - Pure functions with no side effects.

This module contains all map logic as pure functions:
- Earthquake feed parsing
- Depth color and magnitude radius
- Legend rows
- Popup and legend formatting
- Configuration models and validation

All functions here are deterministic and have no I/O.
"""

from quake_map.core.earthquake import Earthquake, parse_earthquakes, get_reported_count
from quake_map.core.style import MarkerStyle, get_depth_color, get_magnitude_radius, create_marker_style
from quake_map.core.legend import LegendEntry, build_legend_entries
from quake_map.core.formatter import format_popup_html, format_legend_html
from quake_map.core.config import Config, build_feed_url, validate_config

__all__ = [
    # Earthquake
    "Earthquake",
    "parse_earthquakes",
    "get_reported_count",
    # Style
    "MarkerStyle",
    "get_depth_color",
    "get_magnitude_radius",
    "create_marker_style",
    # Legend
    "LegendEntry",
    "build_legend_entries",
    # Formatter
    "format_popup_html",
    "format_legend_html",
    # Config
    "Config",
    "build_feed_url",
    "validate_config",
]
