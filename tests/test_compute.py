from sunpos.compute import compute
from sunpos.io.report import format_report
from sunpos.model.constants import Twilight
from sunpos.model.site import Instant, Location

BERLIN = """\
Data for 21 August 2020, 14:47 Local Time (UTC+02:00)
Latitude:                      52° 30' 59.0" N
Longitude:                     13° 22' 40.0" E
Timezone:                      UTC+02:00
Azimuth:                      +34° 44' 16.6"
Height:                       +44° 51' 46.3"
Astronomical morning dawn at: 03:34
Nautical morning dawn at:     04:30
Civil morning dawn at:        05:17
Sunrise at:                   05:55
Sunset at:                    20:13
Civil evening dawn at:        20:51
Nautical evening dawn at:     21:38
Astronomical evening dawn at: 22:34"""


def _times(report, threshold):
  return report.crossing(threshold).display()


def test_berlin_reference_report():
  report = compute(Location(52.516389, 13.377778, 2.0), Instant(2020, 8, 21, 14, 47), "Europe/Berlin")
  assert format_report(report) == BERLIN
  assert report.position.refracted_height > report.position.height


def test_polar_day_has_no_crossings():
  report = compute(Location(70.0, 19.0, 2.0), Instant(2024, 6, 21, 12, 0))
  assert not any(c.crossed for c in report.crossings)
  text = format_report(report)
  assert "Sunrise at:                   --:--" in text
  assert "Astronomical evening dawn at: --:--" in text


def test_polar_night_keeps_deep_twilight():
  report = compute(Location(78.2232, 15.6267, 1.0), Instant(2023, 12, 21, 12, 0))
  assert not report.crossing(Twilight.SUNRISE).crossed
  assert not report.crossing(Twilight.CIVIL).crossed
  assert _times(report, Twilight.NAUTICAL) == ("11:03", "12:58")
  assert _times(report, Twilight.ASTRONOMICAL) == ("07:42", "16:19")


def test_southern_hemisphere_before_utc_midnight():
  # 09:30 AEDT is 22:30 UTC of the previous day
  report = compute(Location(-33.8688, 151.2093, 11.0), Instant(2024, 1, 1, 9, 30))
  assert _times(report, Twilight.SUNRISE) == ("05:46", "20:08")
  assert _times(report, Twilight.ASTRONOMICAL) == ("04:02", "21:51")
  lines = format_report(report).splitlines()
  assert lines[1] == "Latitude:                      33° 52' 07.7\" S"
  assert lines[2] == "Longitude:                    151° 12' 33.5\" E"


def test_western_zone_after_utc_midnight():
  # 20:15 EDT is 00:15 UTC of the next day
  report = compute(Location(40.7128, -74.0060, -4.0), Instant(2022, 7, 4, 20, 15))
  assert _times(report, Twilight.SUNRISE) == ("05:22", "20:22")
  assert _times(report, Twilight.CIVIL) == ("04:49", "20:55")
  lines = format_report(report).splitlines()
  assert lines[0] == "Data for 04 July 2022, 20:15 Local Time (UTC-04:00)"
  assert lines[2] == "Longitude:                     74° 00' 21.6\" W"
  assert lines[4] == "Azimuth:                      +119° 04' 05.9\""
  assert lines[5] == "Height:                       +01° 42' 25.4\""


def test_half_hour_zone_before_sunrise():
  report = compute(Location(28.6139, 77.2090, 5.5), Instant(2023, 3, 15, 6, 0))
  assert report.position.height < 0
  assert _times(report, Twilight.SUNRISE) == ("06:18", "18:15")
  assert "Timezone:                      UTC+05:30" in format_report(report)
