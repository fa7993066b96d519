"""
CLI State Management

Holds the observer location given on the command line (or through the
environment) and resolves it, together with the --time option, for the
subcommands.
"""

from datetime import UTC, datetime
from typing import Any

import typer

from skyframe.api.coordinates import Observer
from skyframe.api.core.exceptions import ConfigurationError


_cli_state: dict[str, Any] = {
    "latitude": None,
    "longitude": None,
}


def set_location(latitude: float | None, longitude: float | None) -> None:
    """Remember the observer location for this invocation."""
    _cli_state["latitude"] = latitude
    _cli_state["longitude"] = longitude


def get_observer() -> Observer:
    """
    Build the Observer from the configured location.

    Raises:
        ConfigurationError: If latitude or longitude was not given
        InvalidCoordinateError: If the location is out of range
    """
    latitude = _cli_state["latitude"]
    longitude = _cli_state["longitude"]
    if latitude is None or longitude is None:
        raise ConfigurationError(
            "Observer location not set. Use --latitude/--longitude or SKYFRAME_LATITUDE/SKYFRAME_LONGITUDE"
        )
    return Observer(latitude, longitude)


def parse_time(value: str | None) -> datetime:
    """
    Parse the --time option.

    Args:
        value: ISO 8601 timestamp, or None for the current time. Values
            without an offset are taken as UTC.

    Returns:
        Timezone-aware datetime
    """
    if value is None:
        return datetime.now(UTC)
    try:
        moment = datetime.fromisoformat(value)
    except ValueError as e:
        raise typer.BadParameter(f"Invalid time '{value}', expected ISO 8601 (e.g. 2025-01-01T12:00:00Z)") from e
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=UTC)
    return moment
