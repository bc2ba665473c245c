"""Static Map Client - Imperative Shell.

This module renders a PNG snapshot of the earthquake markers using
OpenStreetMap tiles. All I/O is contained here; marker styles are computed
in the core module.
"""

import io
import logging
import math
from dataclasses import dataclass

from staticmap import StaticMap, CircleMarker

from quake_map.core.config import MapViewConfig
from quake_map.core.style import MarkerStyle


logger = logging.getLogger(__name__)

# Ground resolution at the equator for zoom 0 with 256px tiles
EQUATOR_METERS_PER_PIXEL = 156543.03392

OUTLINE_WIDTH_PX = 1


@dataclass
class MapImageResult:
    """Result of map image generation.

    Attributes:
        success: Whether the image was generated successfully
        image_bytes: PNG image data if successful
        markers_drawn: Number of earthquake markers on the image
        error: Error message if failed
    """
    success: bool
    image_bytes: bytes | None = None
    markers_drawn: int = 0
    error: str | None = None


def meters_to_pixels(radius_m: float, latitude: float, zoom: int) -> int:
    """Convert a ground distance to pixels at the given latitude and zoom.

    Args:
        radius_m: Distance in meters
        latitude: Latitude the distance is measured at
        zoom: Map zoom level

    Returns:
        Pixel distance, at least 1
    """
    meters_per_pixel = (
        EQUATOR_METERS_PER_PIXEL * math.cos(math.radians(latitude)) / (2 ** zoom)
    )
    if meters_per_pixel <= 0:
        return 1
    return max(1, round(radius_m / meters_per_pixel))


class StaticMapClient:
    """Client for generating static map images.

    This is part of the imperative shell - it handles I/O (fetching map tiles
    and rendering images).
    """

    def __init__(self, tile_url: str | None = None) -> None:
        """Initialize static map client.

        Args:
            tile_url: Custom tile URL template. Defaults to OpenStreetMap.
                A Leaflet "{s}." subdomain placeholder is dropped since the
                tile fetcher does not expand it.
        """
        # Default to OpenStreetMap tiles
        tile_url = tile_url or "https://tile.openstreetmap.org/{z}/{x}/{y}.png"
        self.tile_url = tile_url.replace("{s}.", "")

    def generate_map(
        self,
        view: MapViewConfig,
        markers: list[MarkerStyle],
    ) -> MapImageResult:
        """Generate a static snapshot of the earthquake map.

        This method performs I/O (fetches map tiles from tile server).

        Args:
            view: Center, zoom and image size
            markers: Styled markers to draw

        Returns:
            MapImageResult with image bytes or error
        """
        logger.info(
            "Generating static map for (%.4f, %.4f) at zoom %d with %d markers",
            view.center_latitude,
            view.center_longitude,
            view.zoom,
            len(markers),
        )

        try:
            static_map = StaticMap(
                view.width,
                view.height,
                url_template=self.tile_url,
            )

            for style in markers:
                radius_px = meters_to_pixels(style.radius_m, style.latitude, view.zoom)
                coord = (style.longitude, style.latitude)  # (lon, lat) order for staticmap

                # Outline first so it renders behind the fill
                static_map.add_marker(
                    CircleMarker(coord, style.color, radius_px + OUTLINE_WIDTH_PX)
                )
                static_map.add_marker(CircleMarker(coord, style.fill_color, radius_px))

            image = static_map.render(
                zoom=view.zoom,
                center=(view.center_longitude, view.center_latitude),
            )

            buffer = io.BytesIO()
            image.save(buffer, format="PNG")
            image_bytes = buffer.getvalue()

            logger.info(
                "Generated map image: %d bytes",
                len(image_bytes),
            )

            return MapImageResult(
                success=True,
                image_bytes=image_bytes,
                markers_drawn=len(markers),
            )

        except Exception as e:
            logger.error("Failed to generate map: %s", str(e))
            return MapImageResult(
                success=False,
                error=str(e),
            )
