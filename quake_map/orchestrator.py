"""Orchestrator - Wires Functional Core and Imperative Shell.

This module coordinates one rendering pass: fetch the feed, parse it,
style each event and draw it, then add the legend.
"""

import logging
from dataclasses import dataclass, field

import folium

from quake_map.core.config import Config
from quake_map.core.earthquake import (
    Earthquake,
    filter_by_magnitude,
    get_reported_count,
    parse_earthquakes,
)
from quake_map.core.formatter import format_popup_html, format_render_summary
from quake_map.core.legend import LegendEntry, build_legend_entries
from quake_map.core.style import MarkerStyle, create_marker_style
from quake_map.shell.map_renderer import FoliumMapRenderer
from quake_map.shell.static_map_client import MapImageResult, StaticMapClient
from quake_map.shell.usgs_client import USGSFeedClient


logger = logging.getLogger(__name__)


@dataclass
class RenderResult:
    """Result of a complete rendering pass.

    Attributes:
        map: The rendered folium map (legend is always present)
        reported_count: Event count from the feed metadata
        features_parsed: Events that parsed into Earthquakes
        markers: Styles of the markers that were drawn, in draw order
        legend: Legend rows that were drawn
        errors: Errors that prevented a complete render
        warnings: Inconsistencies that did not stop the render
        fetch_failed: True if the feed could not be fetched
    """
    map: folium.Map
    reported_count: int | None = None
    features_parsed: int = 0
    markers: list[MarkerStyle] = field(default_factory=list)
    legend: list[LegendEntry] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    fetch_failed: bool = False

    @property
    def markers_drawn(self) -> int:
        """Number of markers on the map."""
        return len(self.markers)

    @property
    def success(self) -> bool:
        """Returns True if no errors occurred."""
        return len(self.errors) == 0

    @property
    def summary(self) -> str:
        """Human-readable summary of the rendering pass."""
        return format_render_summary(
            self.reported_count,
            self.markers_drawn,
            len(self.errors),
        )


class Orchestrator:
    """Coordinates fetching the earthquake feed and drawing the map.

    This class wires together:
    - USGS feed client (fetches GeoJSON)
    - Core functions (parsing, styling, formatting, legend)
    - Folium renderer (draws the interactive map)
    - Static map client (optional PNG snapshot)
    """

    def __init__(
        self,
        config: Config,
        usgs_client: USGSFeedClient | None = None,
        renderer: FoliumMapRenderer | None = None,
        static_map_client: StaticMapClient | None = None,
    ) -> None:
        """Initialize orchestrator with configuration.

        Args:
            config: Application configuration
            usgs_client: USGS feed client (created if not provided)
            renderer: Interactive map renderer (created if not provided)
            static_map_client: Static map client (created if not provided)
        """
        self.config = config
        self.usgs_client = usgs_client or USGSFeedClient(
            timeout=config.feed.timeout_seconds,
        )
        self.renderer = renderer or FoliumMapRenderer(config.view)
        self.static_map_client = static_map_client or StaticMapClient(
            tile_url=config.view.tile_url,
        )

    def _select_earthquakes(self, earthquakes: list[Earthquake]) -> list[Earthquake]:
        """Apply the optional minimum magnitude setting."""
        if self.config.feed.min_magnitude is None:
            return earthquakes

        selected = filter_by_magnitude(
            earthquakes,
            min_magnitude=self.config.feed.min_magnitude,
        )
        logger.info(
            "%d of %d earthquakes at or above M%.1f",
            len(selected),
            len(earthquakes),
            self.config.feed.min_magnitude,
        )
        return selected

    def _draw_markers(
        self,
        fmap: folium.Map,
        earthquakes: list[Earthquake],
    ) -> list[MarkerStyle]:
        """Style and draw one marker per earthquake."""
        markers = []

        for earthquake in earthquakes:
            # Pure core functions
            style = create_marker_style(earthquake)
            popup_html = format_popup_html(earthquake)

            self.renderer.add_marker(fmap, style, popup_html)
            markers.append(style)

        return markers

    def render(self) -> RenderResult:
        """Run one complete rendering pass.

        This is the main entry point that:
        1. Creates the map view and basemap
        2. Fetches the earthquake feed
        3. Parses and styles each event
        4. Draws markers with popups
        5. Adds the depth legend

        A fetch failure still yields a map with the basemap and legend.

        Returns:
            RenderResult with the map and details of what happened
        """
        fmap = self.renderer.create_map()
        legend = build_legend_entries()
        result = RenderResult(map=fmap, legend=legend)

        # Step 1: Fetch feed
        try:
            geojson = self.usgs_client.fetch_feed(self.config.feed.url)
        except Exception as e:
            error_msg = f"Failed to fetch earthquakes: {e}"
            logger.error(error_msg)
            result.errors.append(error_msg)
            result.fetch_failed = True
            self.renderer.add_legend(fmap, legend)
            return result

        # Step 2: Parse (pure core function)
        earthquakes = parse_earthquakes(geojson)
        result.reported_count = get_reported_count(geojson)
        result.features_parsed = len(earthquakes)

        logger.info("Parsed %d earthquakes from feed", len(earthquakes))

        # Step 3: Draw markers
        result.markers = self._draw_markers(fmap, self._select_earthquakes(earthquakes))

        # Step 4: Legend
        self.renderer.add_legend(fmap, legend)

        if (
            self.config.feed.min_magnitude is None
            and result.reported_count is not None
            and result.reported_count != result.markers_drawn
        ):
            warning = (
                f"Feed reported {result.reported_count} earthquakes "
                f"but {result.markers_drawn} markers were drawn"
            )
            logger.warning(warning)
            result.warnings.append(warning)

        logger.info("Completed: %s", result.summary)

        return result

    def render_snapshot(self, result: RenderResult) -> MapImageResult:
        """Render a PNG snapshot of the markers from a completed pass.

        Args:
            result: Result of render()

        Returns:
            MapImageResult with image bytes or error
        """
        return self.static_map_client.generate_map(self.config.view, result.markers)
