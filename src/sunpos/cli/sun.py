"""CLI command printing the sun's position and the day's twilight times."""

import json
import logging
import sys

import click

from ..compute import compute
from ..errors import SunError
from ..io.params import read_parameters
from ..io.report import format_report, report_dict
from ..io.timezones import resolve_location
from ..model.site import Instant, validate

logger = logging.getLogger(__name__)


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


@click.command()
@click.argument("parameter_file", type=click.Path(dir_okay=False))
@click.argument("day", type=int)
@click.argument("month", type=int)
@click.argument("year", type=int)
@click.argument("hour", type=int)
@click.argument("minute", type=int)
@click.option(
    "--json",
    "as_json",
    is_flag=True,
    help="Print the result as a JSON object",
)
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Log intermediate quantities to stderr",
)
def main(parameter_file, day, month, year, hour, minute, as_json, verbose):
    """Sun position and twilight times for a site and a local date/time.

    PARAMETER_FILE holds one "key value" pair per line for latitude,
    longitude (decimal degrees, north/east positive) and timezone (IANA name),
    or the same keys as a YAML mapping when it ends in .yaml/.yml.

    Examples:
        # Berlin, 21 August 2020 at 14:47 local time
        sun berlin.txt 21 8 2020 14 47

        # Same, as JSON with the intermediate values logged
        sun --json --verbose berlin.txt 21 8 2020 14 47
    """
    configure_logging(verbose)

    try:
        instant = validate(Instant(year=year, month=month, day=day, hour=hour, minute=minute))
        site = read_parameters(parameter_file)
        location = resolve_location(site, instant)
    except SunError as e:
        click.echo(f"ERROR: {e}", err=True)
        sys.exit(1)

    report = compute(location, instant, site.timezone)
    if as_json:
        click.echo(json.dumps(report_dict(report), indent=2, ensure_ascii=False))
    else:
        click.echo(format_report(report))


if __name__ == "__main__":
    main()
