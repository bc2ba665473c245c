"""USGS Feed Client - Imperative Shell.

This module handles HTTP communication with the USGS earthquake summary
feeds. All I/O is contained here; parsing is in the core module.
"""

import logging
from typing import Any

import requests

from quake_map.core.earthquake import get_reported_count


logger = logging.getLogger(__name__)


# Default timeout for feed requests (seconds)
DEFAULT_TIMEOUT = 30


class USGSFeedClient:
    """Client for fetching GeoJSON earthquake feeds from USGS.

    This is part of the imperative shell - it handles HTTP I/O.
    """

    def __init__(self, timeout: int = DEFAULT_TIMEOUT) -> None:
        """Initialize USGS feed client.

        Args:
            timeout: Request timeout in seconds
        """
        self.timeout = timeout

    def fetch_feed(self, url: str) -> dict[str, Any]:
        """Fetch a GeoJSON FeatureCollection.

        This method performs HTTP I/O.

        Args:
            url: Feed URL

        Returns:
            Raw GeoJSON document

        Raises:
            requests.RequestException: If the request fails
            ValueError: If the response body is not a JSON object
        """
        logger.info("Fetching earthquake feed %s", url)

        response = requests.get(url, timeout=self.timeout)
        response.raise_for_status()

        data = response.json()
        if not isinstance(data, dict):
            raise ValueError(f"Expected a GeoJSON object from {url}")

        logger.info(
            "Fetched %s earthquakes from USGS",
            get_reported_count(data),
        )

        return data

