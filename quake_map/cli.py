"""Render the earthquake map to a local HTML file.

Fetches the configured USGS feed once, draws the map and writes a
standalone page that can be opened in any browser.

Usage:
    # Past week, all magnitudes (default feed)
    quake-map

    # Past day, M2.5+, with a PNG snapshot
    quake-map --feed 2.5 --period day --png snapshot.png

    # Check configuration without fetching anything
    quake-map --config config/config.yaml --validate-only

Environment:
    CONFIG_PATH: Path to config file (default: config/config.yaml)
    LOG_LEVEL: Logging level (default: INFO)
"""

import argparse
import logging
import os
import sys
from pathlib import Path

import yaml

from quake_map.core.config import (
    FEED_MAGNITUDES,
    FEED_PERIODS,
    Config,
    build_feed_url,
    validate_config,
)
from quake_map.orchestrator import Orchestrator
from quake_map.shell.config_loader import load_config


logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""
    parser = argparse.ArgumentParser(
        prog="quake-map",
        description="Render a live USGS earthquake map to an HTML page",
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to YAML config file (default: $CONFIG_PATH or config/config.yaml)",
    )
    parser.add_argument(
        "--feed",
        choices=FEED_MAGNITUDES,
        default=None,
        help="USGS summary feed magnitude class",
    )
    parser.add_argument(
        "--period",
        choices=FEED_PERIODS,
        default=None,
        help="USGS summary feed time window",
    )
    parser.add_argument(
        "--feed-url",
        type=str,
        default=None,
        help="Full GeoJSON feed URL (overrides --feed/--period)",
    )
    parser.add_argument(
        "--min-magnitude",
        type=float,
        default=None,
        help="Only draw events at or above this magnitude",
    )
    parser.add_argument(
        "--output",
        "-o",
        type=str,
        default=None,
        help="HTML output path (default: earthquake_map.html)",
    )
    parser.add_argument(
        "--png",
        type=str,
        default=None,
        help="Also write a static PNG snapshot to this path",
    )
    parser.add_argument(
        "--validate-only",
        action="store_true",
        help="Validate configuration and exit",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def apply_overrides(config: Config, args: argparse.Namespace) -> Config:
    """Apply command line overrides on top of loaded configuration.

    Args:
        config: Loaded configuration (modified in place)
        args: Parsed command line arguments

    Returns:
        The updated configuration
    """
    if args.feed_url:
        config.feed.url = args.feed_url
    elif args.feed or args.period:
        config.feed.url = build_feed_url(args.feed or "all", args.period or "week")

    if args.min_magnitude is not None:
        config.feed.min_magnitude = args.min_magnitude

    if args.output:
        config.output_path = args.output

    if args.png:
        config.snapshot_path = args.png

    return config


def main(argv: list[str] | None = None) -> int:
    """Run one fetch and render.

    Args:
        argv: Command line arguments (defaults to sys.argv[1:])

    Returns:
        Process exit status
    """
    args = build_parser().parse_args(argv)

    log_level = "DEBUG" if args.verbose else os.environ.get("LOG_LEVEL", "INFO").upper()
    logging.basicConfig(
        level=getattr(logging, log_level, logging.INFO),
        format="%(levelname)s: %(message)s",
    )

    try:
        config = apply_overrides(load_config(args.config), args)
    except (ValueError, yaml.YAMLError) as e:
        logger.error("Invalid configuration: %s", e)
        return 1

    validation = validate_config(config)
    for warning in validation.warnings:
        logger.warning("%s: %s", warning.field, warning.message)
    for error in validation.critical_errors:
        logger.error("%s: %s", error.field, error.message)

    if not validation.valid:
        return 1

    if args.validate_only:
        logger.info("Configuration is valid")
        return 0

    orchestrator = Orchestrator(config)
    result = orchestrator.render()

    if result.fetch_failed:
        return 1

    orchestrator.renderer.save(result.map, config.output_path)

    if config.snapshot_path:
        snapshot = orchestrator.render_snapshot(result)
        if snapshot.success and snapshot.image_bytes:
            snapshot_path = Path(config.snapshot_path)
            snapshot_path.parent.mkdir(parents=True, exist_ok=True)
            snapshot_path.write_bytes(snapshot.image_bytes)
            logger.info("Saved snapshot to %s", config.snapshot_path)
        else:
            logger.error("Snapshot failed: %s", snapshot.error)
            return 1

    logger.info(result.summary)

    return 0


if __name__ == "__main__":
    sys.exit(main())
