"""Equatorial to horizontal coordinates for a ground observer."""

from dataclasses import dataclass
import logging
import math

from ..core.angles import resolve_quadrant, wrap_pi
from ..model.constants import CONSTANTS, AstroConstants

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HorizontalPosition:
  azimuth: float  # deg from south, positive westwards, (-180, 180]
  height: float  # deg, geometric
  refracted_height: float  # deg, apparent


def refraction(height_deg: float, constants: AstroConstants = CONSTANTS) -> float:
  """Mean refraction in arcminutes for the reference atmosphere.

  Zero below the floor altitude, where the formula no longer describes the
  atmosphere and diverges at -refraction_shift degrees.
  """
  if height_deg < constants.refraction_floor_deg:
    return 0.0
  arg = height_deg + constants.refraction_offset / (height_deg + constants.refraction_shift)
  return constants.refraction_scale / math.tan(math.radians(arg))


def horizontal_position(
  declination: float,
  right_ascension: float,
  equinox_hour_angle_deg: float,
  latitude: float,
  constants: AstroConstants = CONSTANTS,
) -> HorizontalPosition:
  phi = math.radians(latitude)
  tau = math.radians(equinox_hour_angle_deg) - right_ascension

  denominator = math.cos(tau) * math.sin(phi) - math.tan(declination) * math.cos(phi)
  if denominator == 0:
    raw = math.copysign(math.pi / 2, math.sin(tau))
  else:
    raw = math.atan(math.sin(tau) / denominator)
  azimuth = wrap_pi(resolve_quadrant(raw, denominator))

  s = math.cos(declination) * math.cos(tau) * math.cos(phi) + math.sin(declination) * math.sin(phi)
  height = math.asin(max(-1.0, min(1.0, s)))

  azimuth_deg = math.degrees(azimuth)
  height_deg = math.degrees(height)
  corrected = height_deg + refraction(height_deg, constants) / 60
  logger.debug(f"tau={math.degrees(tau):.4f} az={azimuth_deg:.4f} h={height_deg:.4f} h_refr={corrected:.4f}")
  return HorizontalPosition(azimuth=azimuth_deg, height=height_deg, refracted_height=corrected)
