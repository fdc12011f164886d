from ..core.timebase import day_count
from ..model.constants import CONSTANTS, AstroConstants


def hours_utc(hour: int, minute: int, timezone_offset_hours: float) -> float:
  # may be negative or >= 24 when the UTC date differs from the local one
  return hour - timezone_offset_hours + minute / 60


def greenwich_hour_angle(t_midnight: float, utc_hours: float, constants: AstroConstants = CONSTANTS) -> float:
  """Greenwich hour angle of the vernal equinox, degrees (not reduced)."""
  centuries = t_midnight / 36525
  sidereal_hours = 6.697376 + 2400.05134 * centuries + 1.002738 * utc_hours
  return constants.deg_per_hour * sidereal_hours


def local_hour_angle(day, month, year, utc_hours, longitude, constants: AstroConstants = CONSTANTS) -> float:
  t_midnight = day_count(day, month, year, 0)
  return greenwich_hour_angle(t_midnight, utc_hours, constants) + longitude
