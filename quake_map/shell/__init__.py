"""Imperative Shell - I/O and side effects.

This module contains all code that interacts with external systems:
- USGS feed client (HTTP)
- Interactive map renderer (HTML output)
- Static map client (tile fetching, PNG output)
- Configuration loading (environment/files)

Keep this layer thin and simple. All map logic should be in core.
"""

from quake_map.shell.usgs_client import USGSFeedClient
from quake_map.shell.map_renderer import FoliumMapRenderer
from quake_map.shell.static_map_client import StaticMapClient
from quake_map.shell.config_loader import load_config, Config

__all__ = [
    "USGSFeedClient",
    "FoliumMapRenderer",
    "StaticMapClient",
    "load_config",
    "Config",
]
