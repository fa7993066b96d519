"""
Conversion Commands

Commands for converting between equatorial and horizontal coordinates and
measuring angular separation.
"""

import typer

from skyframe.api.coordinates import EquatorialCoordinate, HorizontalCoordinate
from skyframe.api.core.exceptions import SkyframeError
from skyframe.api.time import JulianDate
from skyframe.cli.utils.groups import SortedCommandsGroup
from skyframe.cli.utils.output import print_error, print_json, print_table
from skyframe.cli.utils.state import get_observer, parse_time


app = typer.Typer(help="Coordinate conversion commands", cls=SortedCommandsGroup)


@app.command("to-horizontal", rich_help_panel="Transform")
def to_horizontal(
    ra: float = typer.Option(..., "--ra", help="Right ascension in degrees (0-360)"),
    dec: float = typer.Option(..., "--dec", help="Declination in degrees (-90 to +90)"),
    time_value: str | None = typer.Option(None, "--time", "-t", help="UTC time, ISO 8601 (default: now)"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """
    Convert RA/Dec to Az/Alt for the configured observer.

    Example:
        skyframe --lat 37.5665 --lon 126.978 convert to-horizontal --ra 37.95 --dec 89.26
        skyframe convert to-horizontal --ra 101.2875 --dec=-16.7161 --time 2025-01-01T12:00:00Z --json
    """
    moment = parse_time(time_value)
    try:
        observer = get_observer()
        equatorial = EquatorialCoordinate(ra, dec)
        horizontal = observer.to_horizontal(equatorial, moment)
    except SkyframeError as e:
        print_error(f"Failed to convert: {e}")
        raise typer.Exit(code=1) from e

    jd = JulianDate.from_datetime(moment)
    if json_output:
        print_json(
            {
                "observer": {"latitude": observer.latitude, "longitude": observer.longitude},
                "julian_date": jd.value,
                "equatorial": {"ra_degrees": equatorial.right_ascension, "dec_degrees": equatorial.declination},
                "horizontal": {
                    "azimuth": horizontal.azimuth,
                    "altitude": horizontal.altitude,
                    "azimuth_formatted": horizontal.format_azimuth(),
                    "altitude_formatted": horizontal.format_altitude(),
                },
            }
        )
    else:
        print_table(
            "Horizontal Position",
            [
                ("Observer", str(observer)),
                ("Time (UTC)", jd.to_datetime().isoformat()),
                ("Right Ascension", equatorial.format_right_ascension()),
                ("Declination", equatorial.format_declination()),
                ("Azimuth", horizontal.format_azimuth()),
                ("Altitude", horizontal.format_altitude()),
            ],
        )


@app.command("to-equatorial", rich_help_panel="Transform")
def to_equatorial(
    az: float = typer.Option(..., "--az", help="Azimuth in degrees (0-360, clockwise from north)"),
    alt: float = typer.Option(..., "--alt", help="Altitude in degrees (-90 to +90)"),
    time_value: str | None = typer.Option(None, "--time", "-t", help="UTC time, ISO 8601 (default: now)"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """
    Convert Az/Alt to RA/Dec for the configured observer.

    Example:
        skyframe --lat 37.5665 --lon 126.978 convert to-equatorial --az 0 --alt 37.5665
    """
    moment = parse_time(time_value)
    try:
        observer = get_observer()
        horizontal = HorizontalCoordinate(az, alt)
        equatorial = observer.to_equatorial(horizontal, moment)
    except SkyframeError as e:
        print_error(f"Failed to convert: {e}")
        raise typer.Exit(code=1) from e

    jd = JulianDate.from_datetime(moment)
    if json_output:
        print_json(
            {
                "observer": {"latitude": observer.latitude, "longitude": observer.longitude},
                "julian_date": jd.value,
                "horizontal": {"azimuth": horizontal.azimuth, "altitude": horizontal.altitude},
                "equatorial": {
                    "ra_degrees": equatorial.right_ascension,
                    "ra_hours": equatorial.right_ascension_hours,
                    "dec_degrees": equatorial.declination,
                    "ra_formatted": equatorial.format_right_ascension(),
                    "dec_formatted": equatorial.format_declination(),
                },
            }
        )
    else:
        print_table(
            "Equatorial Position",
            [
                ("Observer", str(observer)),
                ("Time (UTC)", jd.to_datetime().isoformat()),
                ("Azimuth", horizontal.format_azimuth()),
                ("Altitude", horizontal.format_altitude()),
                ("Right Ascension", equatorial.format_right_ascension()),
                ("Declination", equatorial.format_declination()),
            ],
        )


@app.command(rich_help_panel="Measure")
def separation(
    ra1: float = typer.Option(..., "--ra1", help="First right ascension in degrees"),
    dec1: float = typer.Option(..., "--dec1", help="First declination in degrees"),
    ra2: float = typer.Option(..., "--ra2", help="Second right ascension in degrees"),
    dec2: float = typer.Option(..., "--dec2", help="Second declination in degrees"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """
    Angular separation between two RA/Dec positions.

    Example:
        skyframe convert separation --ra1 0 --dec1 0 --ra2 0 --dec2 90
    """
    try:
        first = EquatorialCoordinate(ra1, dec1)
        second = EquatorialCoordinate(ra2, dec2)
    except SkyframeError as e:
        print_error(f"Invalid coordinates: {e}")
        raise typer.Exit(code=1) from e

    degrees = first.angular_separation(second)
    if json_output:
        print_json({"separation_degrees": degrees})
    else:
        print_table(
            "Angular Separation",
            [
                ("First", f"{first.format_right_ascension()}, {first.format_declination()}"),
                ("Second", f"{second.format_right_ascension()}, {second.format_declination()}"),
                ("Separation", f"{degrees:.6f}°"),
            ],
        )
