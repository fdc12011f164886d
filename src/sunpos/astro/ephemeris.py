"""Low-precision solar ephemeris (about one arcminute between 1950 and 2050)."""

from dataclasses import dataclass
import logging
import math

from ..core.angles import normalize_deg, resolve_quadrant

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Ephemeris:
  declination: float  # rad
  right_ascension: float  # rad, same half-plane as ecliptic_longitude
  mean_longitude: float  # deg
  mean_anomaly: float  # deg
  ecliptic_longitude: float  # deg
  obliquity: float  # rad


def solar_ephemeris(t: float) -> Ephemeris:
  """Equatorial coordinates of the sun for day count t (days since J2000.0)."""
  mean_longitude = normalize_deg(280.460 + 0.9856474 * t)
  mean_anomaly = normalize_deg(357.528 + 0.9856003 * t)
  obliquity = math.radians(23.43929111 - 0.0000004 * t)

  g = math.radians(mean_anomaly)
  ecliptic_longitude = mean_longitude + 1.915 * math.sin(g) + 0.020 * math.sin(2 * g)
  lam = math.radians(ecliptic_longitude)

  declination = math.asin(math.sin(obliquity) * math.sin(lam))
  right_ascension = resolve_quadrant(
    math.atan(math.tan(lam) * math.cos(obliquity)),
    math.cos(lam),
  )
  logger.debug(
    f"T={t:.5f} L={mean_longitude:.4f} g={mean_anomaly:.4f} lambda={ecliptic_longitude:.4f} "
    f"dec={math.degrees(declination):.4f} ra={math.degrees(right_ascension):.4f}"
  )
  return Ephemeris(
    declination=declination,
    right_ascension=right_ascension,
    mean_longitude=mean_longitude,
    mean_anomaly=mean_anomaly,
    ecliptic_longitude=ecliptic_longitude,
    obliquity=obliquity,
  )
