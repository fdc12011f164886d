"""Plain-text and JSON renderings of a SunReport."""

from ..compute import SunReport
from ..model.constants import Twilight

LABEL_WIDTH = 30

MONTH_NAMES = (
  "January", "February", "March", "April", "May", "June",
  "July", "August", "September", "October", "November", "December",
)


def _split_dms(value: float):
  # whole tenths of an arcsecond, so 59.96" carries into the next minute
  tenths = round(abs(value) * 36000)
  degrees, rest = divmod(tenths, 36000)
  minutes, tenths = divmod(rest, 600)
  return degrees, minutes, tenths / 10


def signed_dms(value: float) -> str:
  sign = "-" if value < 0 else "+"
  d, m, s = _split_dms(value)
  return f"{sign}{d:02d}° {m:02d}' {s:04.1f}\""


def geo_dms(value: float, axis: str) -> str:
  """axis is "lat" or "lon"; the hemisphere letter replaces the sign."""
  if value > 0:
    hemisphere = "N" if axis == "lat" else "E"
  elif value < 0:
    hemisphere = "S" if axis == "lat" else "W"
  else:
    hemisphere = " "
  d, m, s = _split_dms(value)
  return f"{d:3d}° {m:02d}' {s:04.1f}\" {hemisphere}"


def format_offset(hours: float) -> str:
  sign = "-" if hours < 0 else "+"
  total = round(abs(hours) * 60)
  return f"UTC{sign}{total // 60:02d}:{total % 60:02d}"


def _line(label: str, value: str) -> str:
  return label.ljust(LABEL_WIDTH) + value


def format_report(report: SunReport) -> str:
  loc, when = report.location, report.instant
  tz = format_offset(loc.timezone_offset_hours)
  astro = report.crossing(Twilight.ASTRONOMICAL).display()
  nautical = report.crossing(Twilight.NAUTICAL).display()
  civil = report.crossing(Twilight.CIVIL).display()
  sun = report.crossing(Twilight.SUNRISE).display()
  lines = [
    f"Data for {when.day:02d} {MONTH_NAMES[when.month - 1]} {when.year:4d}, "
    f"{when.hour:02d}:{when.minute:02d} Local Time ({tz})",
    _line("Latitude:", geo_dms(loc.latitude, "lat")),
    _line("Longitude:", geo_dms(loc.longitude, "lon")),
    # aligned with the three-wide degree column above
    _line("Timezone:", " " + tz),
    _line("Azimuth:", signed_dms(report.position.azimuth)),
    _line("Height:", signed_dms(report.position.height)),
    _line("Astronomical morning dawn at:", astro[0]),
    _line("Nautical morning dawn at:", nautical[0]),
    _line("Civil morning dawn at:", civil[0]),
    _line("Sunrise at:", sun[0]),
    _line("Sunset at:", sun[1]),
    _line("Civil evening dawn at:", civil[1]),
    _line("Nautical evening dawn at:", nautical[1]),
    _line("Astronomical evening dawn at:", astro[1]),
  ]
  return "\n".join(lines)


def report_dict(report: SunReport) -> dict:
  when = report.instant
  return {
    "date": f"{when.year:04d}-{when.month:02d}-{when.day:02d}",
    "time": f"{when.hour:02d}:{when.minute:02d}",
    "latitude": report.location.latitude,
    "longitude": report.location.longitude,
    "timezone": report.timezone,
    "utc_offset": format_offset(report.location.timezone_offset_hours),
    "azimuth": round(report.position.azimuth, 4),
    "height": round(report.position.height, 4),
    "refracted_height": round(report.position.refracted_height, 4),
    "mean_time_correction_h": round(report.equation_of_time, 4),
    "crossings": {
      c.threshold.name.lower(): {"morning": c.morning, "evening": c.evening}
      for c in report.crossings
    },
  }
