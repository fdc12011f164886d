import sys

import click

from ..core.timebase import Timebase
from ..daylight import Daylight
from ..errors import SunError
from ..io.params import read_parameters
from ..model.constants import Twilight
from ..model.site import Instant, validate
from .sun import configure_logging

COLUMNS = ("Astro", "Naut", "Civil", "Rise", "Set", "Civil", "Naut", "Astro")


def _row(crossings):
  by_threshold = {c.threshold: c.display() for c in crossings}
  deepest_first = (Twilight.ASTRONOMICAL, Twilight.NAUTICAL, Twilight.CIVIL, Twilight.SUNRISE)
  mornings = [by_threshold[t][0] for t in deepest_first]
  evenings = [by_threshold[t][1] for t in reversed(deepest_first)]
  return mornings + evenings


@click.command()
@click.argument("parameter_file", type=click.Path(dir_okay=False))
@click.argument("month", type=int)
@click.argument("year", type=int)
@click.option("-v", "--verbose", is_flag=True, help="Log intermediate quantities to stderr")
def main(parameter_file, month, year, verbose):
  """Twilight, sunrise and sunset for every day of MONTH in YEAR."""
  configure_logging(verbose)
  try:
    validate(Instant(year=year, month=month, day=1, hour=12, minute=0))
    site = read_parameters(parameter_file)
    daylight = Daylight(site)
    rows = [(d, _row(daylight.crossings(d))) for d in Timebase(year, month).days()]
  except SunError as e:
    click.echo(f"ERROR: {e}", err=True)
    sys.exit(1)

  click.echo(f"{site.timezone} ({site.latitude:+.4f}, {site.longitude:+.4f})")
  click.echo("Date       | " + " | ".join(c.ljust(5) for c in COLUMNS))
  click.echo("-" * 10 + "-|" + "|".join("-" * 7 for _ in COLUMNS))
  for d, times in rows:
    click.echo(f"{d.isoformat()} | " + " | ".join(times))


if __name__ == "__main__":
  main()
