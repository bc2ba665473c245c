"""Live USGS earthquake map.

Fetches a USGS GeoJSON feed and renders one circle per event, sized by
magnitude and colored by depth, with popups and a depth legend.
"""

__version__ = "1.0.0"
