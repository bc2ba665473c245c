"""Interactive Map Renderer - Imperative Shell.

This module draws styled markers and the depth legend onto a Leaflet map
using folium, and writes the resulting standalone HTML page. Marker
styles, popup text and legend rows come from the core module.
"""

import logging
from pathlib import Path

import folium
from branca.element import MacroElement, Template

from quake_map.core.config import MapViewConfig
from quake_map.core.formatter import format_legend_html
from quake_map.core.legend import LegendEntry
from quake_map.core.style import MarkerStyle


logger = logging.getLogger(__name__)

POPUP_MAX_WIDTH = 300


class DepthLegend(MacroElement):
    """Static legend drawn as a Leaflet control in one corner of the map.

    Attributes:
        entries: Legend rows, in display order
        position: Leaflet control corner (e.g. "bottomright")
    """

    _template = Template("""
        {% macro header(this, kwargs) %}
        <style>
            .info.legend {
                padding: 6px 8px;
                font: 14px/16px Arial, Helvetica, sans-serif;
                background: white;
                background: rgba(255, 255, 255, 0.8);
                box-shadow: 0 0 15px rgba(0, 0, 0, 0.2);
                border-radius: 5px;
                line-height: 18px;
                color: #555;
            }
            .info.legend i {
                width: 18px;
                height: 18px;
                float: left;
                margin-right: 8px;
                opacity: 1;
            }
        </style>
        {% endmacro %}

        {% macro script(this, kwargs) %}
        var {{ this.get_name() }} = L.control({position: {{ this.position|tojson }}});
        {{ this.get_name() }}.onAdd = function() {
            var div = L.DomUtil.create("div", "info legend");
            div.innerHTML = {{ this.body_html|tojson }};
            return div;
        };
        {{ this.get_name() }}.addTo({{ this._parent.get_name() }});
        {% endmacro %}
    """)

    def __init__(self, entries: list[LegendEntry], position: str = "bottomright") -> None:
        super().__init__()
        self._name = "DepthLegend"
        self.entries = list(entries)
        self.position = position
        self.body_html = format_legend_html(self.entries)


class FoliumMapRenderer:
    """Renders earthquake markers onto an interactive folium map.

    This is part of the imperative shell - the resulting page loads tiles
    from the basemap server when opened.
    """

    def __init__(self, view: MapViewConfig | None = None) -> None:
        """Initialize renderer.

        Args:
            view: Initial view and basemap. Defaults to MapViewConfig().
        """
        self.view = view or MapViewConfig()

    def create_map(self) -> folium.Map:
        """Create an empty map centered on the configured view with a basemap.

        Returns:
            folium.Map with a single tile layer
        """
        fmap = folium.Map(
            location=[self.view.center_latitude, self.view.center_longitude],
            zoom_start=self.view.zoom,
            tiles=None,
        )
        folium.TileLayer(
            tiles=self.view.tile_url,
            attr=self.view.attribution,
            name="Basemap",
        ).add_to(fmap)
        return fmap

    def add_marker(
        self,
        fmap: folium.Map,
        style: MarkerStyle,
        popup_html: str,
    ) -> folium.Circle:
        """Draw one circle marker with a popup.

        Args:
            fmap: Map to draw on
            style: Marker position and visuals
            popup_html: HTML shown when the marker is clicked

        Returns:
            The circle that was added
        """
        circle = folium.Circle(
            location=[style.latitude, style.longitude],
            radius=style.radius_m,
            color=style.color,
            weight=style.weight,
            opacity=style.opacity,
            fill=True,
            fill_color=style.fill_color,
            fill_opacity=style.fill_opacity,
            popup=folium.Popup(popup_html, max_width=POPUP_MAX_WIDTH),
        )
        circle.add_to(fmap)
        return circle

    def add_legend(self, fmap: folium.Map, entries: list[LegendEntry]) -> DepthLegend:
        """Add the depth legend control.

        Args:
            fmap: Map to add the legend to
            entries: Legend rows, in display order

        Returns:
            The legend element that was added
        """
        legend = DepthLegend(entries, position=self.view.legend_position)
        legend.add_to(fmap)
        return legend

    def to_html(self, fmap: folium.Map) -> str:
        """Render the map as a standalone HTML page."""
        return fmap.get_root().render()

    def save(self, fmap: folium.Map, path: str | Path) -> Path:
        """Write the map page to disk.

        This method performs file I/O.

        Args:
            fmap: Map to write
            path: Destination HTML file

        Returns:
            Path that was written
        """
        path = Path(path)
        if path.parent and not path.parent.exists():
            path.parent.mkdir(parents=True, exist_ok=True)

        fmap.save(str(path))
        logger.info("Saved map page to %s", path)
        return path
