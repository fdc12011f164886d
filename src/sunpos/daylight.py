from dataclasses import dataclass
from datetime import date
from typing import Tuple

from .astro import CrossingTimes
from .compute import compute
from .io.timezones import resolve_location
from .model.constants import CONSTANTS, AstroConstants, Twilight
from .model.site import Instant, SiteParameters, validate


@dataclass
class Daylight:
  site: SiteParameters
  constants: AstroConstants = CONSTANTS

  def crossings(self, d: date) -> Tuple[CrossingTimes, ...]:
    # local noon, so the offset is the one in force for most of the daylight
    instant = validate(Instant(year=d.year, month=d.month, day=d.day, hour=12, minute=0))
    location = resolve_location(self.site, instant)
    return compute(location, instant, self.site.timezone, self.constants).crossings

  def sunrise_sunset(self, d: date) -> Tuple[str, str]:
    for c in self.crossings(d):
      if c.threshold is Twilight.SUNRISE:
        return c.display()
    raise KeyError(Twilight.SUNRISE)
