"""Hour-angle half-widths to local clock times."""

from dataclasses import dataclass
import logging
import math
from typing import Optional, Tuple

from ..core.angles import trunc_hours_minutes
from ..errors import DomainError
from ..model.constants import CONSTANTS, AstroConstants, Twilight
from .twilight import hour_angle_half_width

logger = logging.getLogger(__name__)

NO_CROSSING = "--:--"


@dataclass(frozen=True)
class CrossingTimes:
  threshold: Twilight
  morning: Optional[str]  # "HH:MM", None when the sun does not cross
  evening: Optional[str]
  morning_hours: Optional[float] = None  # local decimal hours before wrapping
  evening_hours: Optional[float] = None

  @property
  def crossed(self) -> bool:
    return self.morning is not None

  def display(self) -> Tuple[str, str]:
    if not self.crossed:
      return NO_CROSSING, NO_CROSSING
    return self.morning, self.evening


def mean_right_ascension_hours(t: float) -> float:
  tn = t / 36525
  ra = 18.71506921 + 2400.0513369 * tn + 0.000025862 * tn ** 2 - 0.00000000172 * tn ** 3
  return ra - 24 * int(ra / 24)


def equation_of_time(t: float, right_ascension: float) -> float:
  """Local world time to mean local time correction, hours.

  Close to 24 h while the right ascension sits below 0h (late December to
  March); the clock wraps it together with the crossing times.
  """
  ra_hours = 24 * right_ascension / (2 * math.pi)
  return 1.0027379 * (mean_right_ascension_hours(t) - ra_hours)


def format_clock(hours: float) -> str:
  h, m = trunc_hours_minutes(hours)
  return f"{h % 24:02d}:{m:02d}"


def local_times(half_width, eot, longitude, timezone_offset_hours, constants: AstroConstants = CONSTANTS):
  """(morning, evening) decimal local civil hours for a half-width in hours."""
  shift = eot - longitude / constants.deg_per_hour + timezone_offset_hours
  return 12 - half_width + shift, 12 + half_width + shift


def crossing_times(
  threshold: Twilight,
  declination: float,
  latitude: float,
  longitude: float,
  timezone_offset_hours: float,
  eot: float,
  constants: AstroConstants = CONSTANTS,
) -> CrossingTimes:
  try:
    half_width = hour_angle_half_width(threshold.altitude, declination, math.radians(latitude))
  except DomainError as e:
    logger.info(f"No {threshold.name.lower()} crossing at latitude {latitude}: {e}")
    return CrossingTimes(threshold, None, None)

  morning, evening = local_times(half_width, eot, longitude, timezone_offset_hours, constants)
  m_str, e_str = format_clock(morning), format_clock(evening)
  if m_str == e_str:
    return CrossingTimes(threshold, None, None, morning, evening)
  return CrossingTimes(threshold, m_str, e_str, morning, evening)
