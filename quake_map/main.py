"""Cloud Function Entry Point.

This module provides the HTTP entry point for Google Cloud Functions.
Every request triggers one feed fetch and one render, and the response
is the standalone map page.
"""

import logging
import os
from typing import Any

import functions_framework
from flask import Request

from quake_map.core.config import validate_config
from quake_map.orchestrator import Orchestrator
from quake_map.shell.config_loader import load_config, load_config_from_env


# Configure logging
log_level = os.environ.get("LOG_LEVEL", "INFO").upper()
logging.basicConfig(
    level=getattr(logging, log_level, logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

HTML_HEADERS = {"Content-Type": "text/html; charset=utf-8"}


def _get_config():
    """Load configuration from file or environment."""
    config_path = os.environ.get("CONFIG_PATH")

    if config_path:
        return load_config(config_path)
    elif any(key.startswith("QUAKE_MAP_") for key in os.environ):
        # Simple env-based config
        return load_config_from_env()
    else:
        # Try default config path
        return load_config()


@functions_framework.http
def earthquake_map(request: Request) -> tuple[Any, int] | tuple[Any, int, dict[str, str]]:
    """HTTP Cloud Function entry point.

    Args:
        request: Flask request object (not used, but required by framework)

    Returns:
        Tuple of (HTML page, 200, headers) on success, or
        (error dict, HTTP status code) if the feed or render failed
    """
    logger.info("Rendering earthquake map")

    try:
        config = _get_config()

        validation = validate_config(config)
        if not validation.valid:
            message = "; ".join(
                f"{e.field}: {e.message}" for e in validation.critical_errors
            )
            logger.error("Invalid configuration: %s", message)
            return {
                "status": "error",
                "message": message,
            }, 500

        orchestrator = Orchestrator(config)
        result = orchestrator.render()

        if result.fetch_failed:
            return {
                "status": "error",
                "message": "; ".join(result.errors),
            }, 502

        html = orchestrator.renderer.to_html(result.map)

        logger.info("Completed: %s", result.summary)

        return html, 200, HTML_HEADERS

    except Exception as e:
        logger.exception("Unexpected error rendering earthquake map")
        return {
            "status": "error",
            "message": str(e),
        }, 500
