import math

import pytest

from sunpos.astro import crossing_times, equation_of_time, hour_angle_half_width, solar_ephemeris
from sunpos.astro.times import NO_CROSSING, format_clock, local_times, mean_right_ascension_hours
from sunpos.core.timebase import day_count
from sunpos.model.constants import Twilight


def test_format_clock_truncates_and_wraps():
  assert format_clock(5.91972) == "05:55"
  assert format_clock(22.5696) == "22:34"
  assert format_clock(29.7687) == "05:46"
  assert format_clock(-1.5) == "22:30"
  assert format_clock(24.0) == "00:00"


def test_local_times_apply_longitude_and_zone():
  morning, evening = local_times(6.0, 0.0, 15.0, 1.0)
  assert morning == pytest.approx(6.0)
  assert evening == pytest.approx(18.0)


def test_evening_minus_morning_is_twice_half_width():
  t = day_count(21, 8, 2020, 12.78)
  eph = solar_ephemeris(t)
  eot = equation_of_time(t, eph.right_ascension)
  for threshold in Twilight:
    c = crossing_times(threshold, eph.declination, 52.516389, 13.377778, 2.0, eot)
    half_width = hour_angle_half_width(threshold.altitude, eph.declination, math.radians(52.516389))
    assert c.crossed
    assert c.evening_hours - c.morning_hours == pytest.approx(2 * half_width)


def test_no_crossing_sentinel():
  c = crossing_times(Twilight.SUNRISE, math.radians(23.4), 75.0, 0.0, 0.0, 0.0)
  assert not c.crossed
  assert c.morning is None and c.evening is None
  assert c.display() == (NO_CROSSING, NO_CROSSING)


def test_mean_time_correction_is_not_reduced():
  # early February: right ascension below 0h, mean right ascension near 21h
  t = day_count(1, 2, 2024, 11)
  ra = solar_ephemeris(t).right_ascension
  expected = 1.0027379 * (mean_right_ascension_hours(t) - 24 * ra / (2 * math.pi))
  assert equation_of_time(t, ra) == pytest.approx(expected)
  assert equation_of_time(t, ra) == pytest.approx(23.858, abs=0.005)


def test_mean_time_correction_in_august():
  t = day_count(21, 8, 2020, 12.78)
  eot = equation_of_time(t, solar_ephemeris(t).right_ascension)
  assert -0.1 < eot < 0
