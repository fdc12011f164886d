"""Runs the solar pipeline for one validated location and instant."""

from dataclasses import dataclass
import logging
from typing import Tuple

from .astro import (
  CrossingTimes,
  Ephemeris,
  HorizontalPosition,
  crossing_times,
  equation_of_time,
  horizontal_position,
  hours_utc,
  local_hour_angle,
  solar_ephemeris,
)
from .core.timebase import day_count
from .model.constants import CONSTANTS, AstroConstants, Twilight
from .model.site import Instant, Location

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SunReport:
  location: Location
  instant: Instant
  timezone: str
  ephemeris: Ephemeris
  position: HorizontalPosition
  equation_of_time: float  # hours
  crossings: Tuple[CrossingTimes, ...]

  def crossing(self, threshold: Twilight) -> CrossingTimes:
    for c in self.crossings:
      if c.threshold is threshold:
        return c
    raise KeyError(threshold)


def compute(
  location: Location,
  instant: Instant,
  timezone: str = "",
  constants: AstroConstants = CONSTANTS,
) -> SunReport:
  """Sun position at the instant plus the day's crossing times.

  Both arguments must already be validated; nothing here checks ranges.
  """
  utc = hours_utc(instant.hour, instant.minute, location.timezone_offset_hours)
  t = day_count(instant.day, instant.month, instant.year, utc)
  logger.debug(f"{instant} tz={location.timezone_offset_hours:+.2f}h -> UTC hours {utc:.4f}, T={t:.6f}")

  eph = solar_ephemeris(t)
  theta = local_hour_angle(instant.day, instant.month, instant.year, utc, location.longitude, constants)
  position = horizontal_position(eph.declination, eph.right_ascension, theta, location.latitude, constants)

  eot = equation_of_time(t, eph.right_ascension)
  logger.debug(f"mean local time correction {eot:+.4f} h")
  crossings = tuple(
    crossing_times(
      threshold,
      eph.declination,
      location.latitude,
      location.longitude,
      location.timezone_offset_hours,
      eot,
      constants,
    )
    for threshold in constants.thresholds
  )
  return SunReport(
    location=location,
    instant=instant,
    timezone=timezone,
    ephemeris=eph,
    position=position,
    equation_of_time=eot,
    crossings=crossings,
  )
