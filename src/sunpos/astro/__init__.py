"""Solar position and twilight pipeline."""

from .ephemeris import Ephemeris, solar_ephemeris
from .horizon import HorizontalPosition, horizontal_position, refraction
from .sidereal import greenwich_hour_angle, hours_utc, local_hour_angle
from .times import NO_CROSSING, CrossingTimes, crossing_times, equation_of_time
from .twilight import hour_angle_half_width

__all__ = [
  "Ephemeris",
  "solar_ephemeris",
  "HorizontalPosition",
  "horizontal_position",
  "refraction",
  "greenwich_hour_angle",
  "hours_utc",
  "local_hour_angle",
  "NO_CROSSING",
  "CrossingTimes",
  "crossing_times",
  "equation_of_time",
  "hour_angle_half_width",
]
