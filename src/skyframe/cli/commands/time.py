"""
Time Commands

Commands for Julian Date and sidereal time.
"""

import typer

from skyframe.api.core.exceptions import SkyframeError
from skyframe.api.time import JulianDate, format_hour_angle, greenwich_sidereal_time
from skyframe.cli.utils.groups import SortedCommandsGroup
from skyframe.cli.utils.output import print_error, print_json, print_table
from skyframe.cli.utils.state import get_observer, parse_time


app = typer.Typer(help="Julian Date and sidereal time commands", cls=SortedCommandsGroup)


@app.command(rich_help_panel="Time Scales")
def julian(
    time_value: str | None = typer.Option(None, "--time", "-t", help="UTC time, ISO 8601 (default: now)"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """
    Show the Julian Date of a moment.

    Example:
        skyframe time julian --time 2000-01-01T12:00:00Z
    """
    jd = JulianDate.from_datetime(parse_time(time_value))

    if json_output:
        print_json(
            {
                "julian_date": jd.value,
                "modified_julian_date": jd.modified_julian_date,
                "julian_centuries": jd.julian_centuries(),
            }
        )
    else:
        print_table(
            "Julian Date",
            [
                ("Time (UTC)", jd.to_datetime().isoformat()),
                ("Julian Date", f"{jd.value:.6f}"),
                ("Modified Julian Date", f"{jd.modified_julian_date:.6f}"),
                ("Centuries since J2000", f"{jd.julian_centuries():.10f}"),
            ],
        )


@app.command(rich_help_panel="Time Scales")
def sidereal(
    time_value: str | None = typer.Option(None, "--time", "-t", help="UTC time, ISO 8601 (default: now)"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """
    Show Greenwich and Local Sidereal Time for the configured observer.

    Example:
        skyframe --lat 38.9 --lon=-77.0365 time sidereal --time 2000-01-01T12:00:00Z
    """
    jd = JulianDate.from_datetime(parse_time(time_value))
    try:
        observer = get_observer()
    except SkyframeError as e:
        print_error(f"Failed to compute sidereal time: {e}")
        raise typer.Exit(code=1) from e

    gst = greenwich_sidereal_time(jd)
    lst = observer.local_sidereal_time(jd)

    if json_output:
        print_json(
            {
                "julian_date": jd.value,
                "longitude": observer.longitude,
                "gst_hours": gst,
                "lst_hours": lst,
                "gst_formatted": format_hour_angle(gst),
                "lst_formatted": format_hour_angle(lst),
            }
        )
    else:
        print_table(
            "Sidereal Time",
            [
                ("Observer", str(observer)),
                ("Time (UTC)", jd.to_datetime().isoformat()),
                ("Greenwich Sidereal Time", format_hour_angle(gst)),
                ("Local Sidereal Time", format_hour_angle(lst)),
            ],
        )
