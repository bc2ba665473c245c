"""Configuration models - Pure data structures.

These are domain models for configuration. The actual loading
(I/O) is handled by the shell layer.
"""

from dataclasses import dataclass, field


# USGS summary feed base URL
USGS_FEED_BASE = "https://earthquake.usgs.gov/earthquakes/feed/v1.0/summary"

FEED_MAGNITUDES = ("significant", "4.5", "2.5", "1.0", "all")
FEED_PERIODS = ("hour", "day", "week", "month")

DEFAULT_FEED = "all"
DEFAULT_PERIOD = "week"

OSM_TILE_URL = "https://{s}.tile.openstreetmap.org/{z}/{x}/{y}.png"
OSM_ATTRIBUTION = (
    '&copy; <a href="https://www.openstreetmap.org/copyright">OpenStreetMap</a> '
    "contributors"
)

LEGEND_POSITIONS = ("topleft", "topright", "bottomleft", "bottomright")


def build_feed_url(magnitude: str = DEFAULT_FEED, period: str = DEFAULT_PERIOD) -> str:
    """Build a USGS summary feed URL.

    Pure function.

    Args:
        magnitude: Feed magnitude class (e.g. "all", "2.5", "significant")
        period: Feed time window ("hour", "day", "week", "month")

    Returns:
        GeoJSON feed URL

    Raises:
        ValueError: If magnitude or period is not a published feed
    """
    if magnitude not in FEED_MAGNITUDES:
        raise ValueError(
            f"Unknown feed '{magnitude}', expected one of {', '.join(FEED_MAGNITUDES)}"
        )
    if period not in FEED_PERIODS:
        raise ValueError(
            f"Unknown period '{period}', expected one of {', '.join(FEED_PERIODS)}"
        )
    return f"{USGS_FEED_BASE}/{magnitude}_{period}.geojson"


@dataclass
class MapViewConfig:
    """Initial map view and basemap.

    Attributes:
        center_latitude: Initial center latitude
        center_longitude: Initial center longitude
        zoom: Initial zoom level (0-18)
        tile_url: Basemap tile URL template
        attribution: Basemap attribution HTML
        legend_position: Leaflet control corner for the legend
        width: Static snapshot width in pixels
        height: Static snapshot height in pixels
    """
    center_latitude: float = 37.0902
    center_longitude: float = -95.7129
    zoom: int = 4
    tile_url: str = OSM_TILE_URL
    attribution: str = OSM_ATTRIBUTION
    legend_position: str = "bottomright"
    width: int = 1200
    height: int = 800


@dataclass
class FeedConfig:
    """Earthquake feed settings.

    Attributes:
        url: GeoJSON feed URL
        timeout_seconds: HTTP request timeout
        min_magnitude: Only draw events at or above this magnitude (None for all)
    """
    url: str = field(default_factory=build_feed_url)
    timeout_seconds: int = 30
    min_magnitude: float | None = None


@dataclass
class Config:
    """Application configuration.

    This is a pure data structure - no I/O or side effects.

    Attributes:
        view: Initial map view and basemap
        feed: Earthquake feed settings
        output_path: Where the CLI writes the HTML page
        snapshot_path: Where the CLI writes a PNG snapshot (None to skip)
    """
    view: MapViewConfig = field(default_factory=MapViewConfig)
    feed: FeedConfig = field(default_factory=FeedConfig)
    output_path: str = "earthquake_map.html"
    snapshot_path: str | None = None


@dataclass
class ValidationError:
    """A configuration validation error.

    Attributes:
        field: The field that has an error
        message: Human-readable error description
        severity: 'error' or 'warning'
    """
    field: str
    message: str
    severity: str = "error"


@dataclass
class ValidationResult:
    """Result of validating configuration.

    Attributes:
        valid: True if no errors (warnings are OK)
        errors: List of validation errors/warnings
    """
    valid: bool
    errors: list[ValidationError] = field(default_factory=list)

    @property
    def warnings(self) -> list[ValidationError]:
        """Get only warnings."""
        return [e for e in self.errors if e.severity == "warning"]

    @property
    def critical_errors(self) -> list[ValidationError]:
        """Get only critical errors."""
        return [e for e in self.errors if e.severity == "error"]


def validate_coordinates(lat: float, lon: float, field_name: str) -> list[ValidationError]:
    """Validate latitude/longitude coordinates.

    Pure function.

    Args:
        lat: Latitude value
        lon: Longitude value
        field_name: Name of the field for error messages

    Returns:
        List of validation errors (empty if valid)
    """
    errors = []

    if not -90 <= lat <= 90:
        errors.append(ValidationError(
            field=field_name,
            message=f"Latitude {lat} out of range [-90, 90]",
        ))

    if not -180 <= lon <= 180:
        errors.append(ValidationError(
            field=field_name,
            message=f"Longitude {lon} out of range [-180, 180]",
        ))

    return errors


def validate_config(config: Config) -> ValidationResult:
    """Validate configuration for errors and warnings.

    Pure function.

    Args:
        config: Configuration to validate

    Returns:
        ValidationResult with any errors/warnings found
    """
    errors: list[ValidationError] = []
    view = config.view

    errors.extend(validate_coordinates(
        view.center_latitude, view.center_longitude,
        "view.center",
    ))

    if not 0 <= view.zoom <= 18:
        errors.append(ValidationError(
            field="view.zoom",
            message=f"Zoom {view.zoom} out of range [0, 18]",
        ))

    if view.legend_position not in LEGEND_POSITIONS:
        errors.append(ValidationError(
            field="view.legend_position",
            message=(
                f"Unknown legend position '{view.legend_position}', "
                f"expected one of {', '.join(LEGEND_POSITIONS)}"
            ),
        ))

    missing = [p for p in ("{z}", "{x}", "{y}") if p not in view.tile_url]
    if missing:
        errors.append(ValidationError(
            field="view.tile_url",
            message=f"Tile URL is missing placeholders: {', '.join(missing)}",
        ))

    if view.width <= 0 or view.height <= 0:
        errors.append(ValidationError(
            field="view.size",
            message=f"Snapshot size must be positive, got {view.width}x{view.height}",
        ))

    if config.feed.timeout_seconds <= 0:
        errors.append(ValidationError(
            field="feed.timeout_seconds",
            message=f"Timeout must be positive, got {config.feed.timeout_seconds}",
        ))

    if not config.feed.url or config.feed.url.startswith("${"):
        errors.append(ValidationError(
            field="feed.url",
            message="Feed URL not resolved (still contains placeholder)",
        ))
    elif not config.feed.url.startswith(("http://", "https://")):
        errors.append(ValidationError(
            field="feed.url",
            message=f"Feed URL is not an HTTP URL: {config.feed.url}",
        ))

    if not view.attribution:
        errors.append(ValidationError(
            field="view.attribution",
            message="Basemap attribution is empty",
            severity="warning",
        ))

    has_critical = any(e.severity == "error" for e in errors)

    return ValidationResult(
        valid=not has_critical,
        errors=errors,
    )
