"""Cloud Function Entry Point - Root Module.

This is the root-level entry point for Google Cloud Functions.
It imports from the quake_map package.
"""

from quake_map.main import earthquake_map

__all__ = [
    "earthquake_map",
]
