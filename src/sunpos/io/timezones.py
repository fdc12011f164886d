from datetime import datetime
import logging

import pytz

from ..errors import TimezoneError
from ..model.site import Instant, Location, SiteParameters

logger = logging.getLogger(__name__)


def utc_offset_hours(name: str, instant: Instant) -> float:
  """Offset from UTC, in hours, of the local wall-clock instant in zone `name`."""
  try:
    tz = pytz.timezone(name)
  except pytz.UnknownTimeZoneError as e:
    raise TimezoneError(f"unknown timezone {name!r}") from e

  local = datetime(instant.year, instant.month, instant.day, instant.hour, instant.minute)
  try:
    aware = tz.localize(local, is_dst=None)
  except pytz.NonExistentTimeError as e:
    raise TimezoneError(f"{local:%Y-%m-%d %H:%M} does not exist in {name} (DST gap)") from e
  except pytz.AmbiguousTimeError:
    logger.warning(f"{local:%Y-%m-%d %H:%M} is ambiguous in {name}, using standard time")
    aware = tz.localize(local, is_dst=False)
  return aware.utcoffset().total_seconds() / 3600


def resolve_location(site: SiteParameters, instant: Instant) -> Location:
  offset = utc_offset_hours(site.timezone, instant)
  logger.debug(f"{site.timezone} at {instant}: UTC{offset:+.2f}")
  return Location(latitude=site.latitude, longitude=site.longitude, timezone_offset_hours=offset)
