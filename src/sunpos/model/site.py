from dataclasses import dataclass

from pydantic import BaseModel, Field

from ..core.timebase import EPOCH_YEAR, days_in_month
from ..errors import RangeError


class SiteParameters(BaseModel):
  latitude: float = Field(ge=-90, le=90)
  longitude: float = Field(ge=-180, le=180)
  timezone: str = Field(min_length=1)


@dataclass(frozen=True)
class Location:
  latitude: float
  longitude: float
  timezone_offset_hours: float


@dataclass(frozen=True)
class Instant:
  year: int
  month: int
  day: int
  hour: int
  minute: int


def validate(instant: Instant) -> Instant:
  """Return the instant unchanged or raise RangeError for the first bad field."""
  if instant.year < EPOCH_YEAR:
    raise RangeError("year", instant.year, EPOCH_YEAR, "inf")
  if not 1 <= instant.month <= 12:
    raise RangeError("month", instant.month, 1, 12)
  last_day = days_in_month(instant.month, instant.year)
  if not 1 <= instant.day <= last_day:
    raise RangeError("day", instant.day, 1, last_day)
  if not 0 <= instant.hour <= 23:
    raise RangeError("hour", instant.hour, 0, 23)
  if not 0 <= instant.minute <= 59:
    raise RangeError("minute", instant.minute, 0, 59)
  return instant
