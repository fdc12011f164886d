from dataclasses import dataclass
from datetime import date, timedelta


EPOCH_YEAR = 2000

# days per month, February resolved through leap_year()
_MONTH_DAYS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def leap_year(year: int) -> bool:
  if year % 400 == 0:
    return True
  return year % 4 == 0 and year % 100 != 0


def days_in_month(month: int, year: int) -> int:
  if month == 2 and leap_year(year):
    return 29
  return _MONTH_DAYS[month - 1]


def day_count(day: int, month: int, year: int, utc_hour: float) -> float:
  """Days since 2000-01-01 12:00 UTC.

  utc_hour may fall outside [0, 24) when the local date differs from the UTC
  date; the result stays continuous because it is just an offset in days.
  """
  days = 0
  for y in range(EPOCH_YEAR, year):
    days += 366 if leap_year(y) else 365
  for m in range(1, month):
    days += days_in_month(m, year)
  days += day - 1
  return days + (utc_hour - 12) / 24


@dataclass
class Timebase:
  year: int
  month: int = 0  # 0 = whole year

  def days(self):
    d = date(self.year, self.month or 1, 1)
    while d.year == self.year and (not self.month or d.month == self.month):
      yield d
      d += timedelta(days=1)
