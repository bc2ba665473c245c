"""Configuration Loader - Imperative Shell.

This module handles loading configuration from YAML files and
environment variables. All I/O is contained here.

Models (Config, MapViewConfig, FeedConfig) are defined in
quake_map/core/config.py.
"""

import logging
import os
from pathlib import Path
from typing import Any

import yaml

from quake_map.core.config import (
    DEFAULT_FEED,
    DEFAULT_PERIOD,
    Config,
    FeedConfig,
    MapViewConfig,
    build_feed_url,
)


logger = logging.getLogger(__name__)


def _resolve_value(value: Any) -> Any:
    """Resolve a value that may be a ${ENV_VAR} placeholder.

    Unset variables leave the placeholder in place so validation can
    report it.

    Args:
        value: Value to resolve

    Returns:
        Resolved value
    """
    if not isinstance(value, str):
        return value

    if value.startswith("${") and value.endswith("}"):
        var_name = value[2:-1]
        env_value = os.environ.get(var_name)
        if env_value:
            return env_value
        logger.warning("Environment variable %s not set", var_name)

    return value


def _parse_center(value: Any) -> tuple[float, float]:
    """Parse a "lat,lon" string or [lat, lon] list."""
    if isinstance(value, str):
        parts = [p.strip() for p in value.split(",")]
    else:
        parts = list(value)

    if len(parts) != 2:
        raise ValueError(f"Center must be 'lat,lon', got {value!r}")

    return float(parts[0]), float(parts[1])


def _parse_view(data: dict[str, Any]) -> MapViewConfig:
    """Parse the map view section from config data."""
    defaults = MapViewConfig()

    latitude = defaults.center_latitude
    longitude = defaults.center_longitude
    if "center" in data:
        latitude, longitude = _parse_center(_resolve_value(data["center"]))
    else:
        latitude = float(data.get("center_latitude", latitude))
        longitude = float(data.get("center_longitude", longitude))

    return MapViewConfig(
        center_latitude=latitude,
        center_longitude=longitude,
        zoom=int(data.get("zoom", defaults.zoom)),
        tile_url=_resolve_value(data.get("tile_url", defaults.tile_url)),
        attribution=data.get("attribution", defaults.attribution),
        legend_position=data.get("legend_position", defaults.legend_position),
        width=int(data.get("width", defaults.width)),
        height=int(data.get("height", defaults.height)),
    )


def _parse_feed(data: dict[str, Any]) -> FeedConfig:
    """Parse the feed section from config data.

    An explicit url wins over the magnitude/period summary feed selection.
    """
    if "url" in data:
        url = _resolve_value(data["url"])
    else:
        url = build_feed_url(
            str(data.get("magnitude", DEFAULT_FEED)),
            str(data.get("period", DEFAULT_PERIOD)),
        )

    min_magnitude = data.get("min_magnitude")

    return FeedConfig(
        url=url,
        timeout_seconds=int(data.get("timeout_seconds", 30)),
        min_magnitude=float(min_magnitude) if min_magnitude is not None else None,
    )


def load_config_from_dict(data: dict[str, Any]) -> Config:
    """Load configuration from a dictionary.

    This is a pure-ish function (only env var expansion has side effects).

    Args:
        data: Configuration dictionary

    Returns:
        Parsed Config object
    """
    return Config(
        view=_parse_view(data.get("view") or {}),
        feed=_parse_feed(data.get("feed") or {}),
        output_path=data.get("output_path", "earthquake_map.html"),
        snapshot_path=data.get("snapshot_path"),
    )


def load_config(config_path: str | Path | None = None) -> Config:
    """Load configuration from a YAML file.

    This method performs file I/O.

    Args:
        config_path: Path to YAML config file.
                    If None, uses CONFIG_PATH env var or default.

    Returns:
        Parsed Config object

    Raises:
        yaml.YAMLError: If config file is invalid YAML
        ValueError: If a value cannot be parsed
    """
    if config_path is None:
        config_path = os.environ.get("CONFIG_PATH", "config/config.yaml")

    path = Path(config_path)

    logger.info("Loading configuration from %s", path)

    if not path.exists():
        logger.warning("Config file not found: %s, using defaults", path)
        return Config()

    with open(path, "r") as f:
        data = yaml.safe_load(f)

    if data is None:
        logger.warning("Config file is empty, using defaults")
        return Config()

    config = load_config_from_dict(data)

    logger.info(
        "Loaded config: feed %s, center (%.4f, %.4f), zoom %d",
        config.feed.url,
        config.view.center_latitude,
        config.view.center_longitude,
        config.view.zoom,
    )

    return config


def load_config_from_env() -> Config:
    """Load configuration from environment variables.

    Useful for simple deployments without a YAML file.

    Environment variables:
        QUAKE_MAP_FEED_URL: Full feed URL (overrides feed/period)
        QUAKE_MAP_FEED: Summary feed magnitude class (default: all)
        QUAKE_MAP_PERIOD: Summary feed period (default: week)
        QUAKE_MAP_CENTER: Initial center as "lat,lon"
        QUAKE_MAP_ZOOM: Initial zoom level
        QUAKE_MAP_MIN_MAGNITUDE: Only draw events at or above this magnitude
        QUAKE_MAP_TIMEOUT: Feed request timeout in seconds
        QUAKE_MAP_OUTPUT: HTML output path for the CLI

    Returns:
        Config object from environment
    """
    feed_data: dict[str, Any] = {
        "magnitude": os.environ.get("QUAKE_MAP_FEED", DEFAULT_FEED),
        "period": os.environ.get("QUAKE_MAP_PERIOD", DEFAULT_PERIOD),
        "timeout_seconds": os.environ.get("QUAKE_MAP_TIMEOUT", "30"),
    }
    if os.environ.get("QUAKE_MAP_FEED_URL"):
        feed_data["url"] = os.environ["QUAKE_MAP_FEED_URL"]
    if os.environ.get("QUAKE_MAP_MIN_MAGNITUDE"):
        feed_data["min_magnitude"] = os.environ["QUAKE_MAP_MIN_MAGNITUDE"]

    view_data: dict[str, Any] = {}
    if os.environ.get("QUAKE_MAP_CENTER"):
        view_data["center"] = os.environ["QUAKE_MAP_CENTER"]
    if os.environ.get("QUAKE_MAP_ZOOM"):
        view_data["zoom"] = os.environ["QUAKE_MAP_ZOOM"]

    data: dict[str, Any] = {"feed": feed_data, "view": view_data}
    if os.environ.get("QUAKE_MAP_OUTPUT"):
        data["output_path"] = os.environ["QUAKE_MAP_OUTPUT"]

    return load_config_from_dict(data)
