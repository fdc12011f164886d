import logging
import math

from ..errors import DomainError

logger = logging.getLogger(__name__)


def hour_angle_half_width(threshold: float, declination: float, latitude_rad: float) -> float:
  """Hours from local solar noon until the sun sinks below threshold (radians).

  Raises DomainError on polar day or polar night, where the sun stays on one
  side of the threshold all day.
  """
  denominator = math.cos(latitude_rad) * math.cos(declination)
  if denominator == 0:
    # observer on a pole: the altitude never changes during the day
    raise DomainError(math.inf)
  arg = (math.sin(threshold) - math.sin(latitude_rad) * math.sin(declination)) / denominator
  logger.debug(f"threshold={math.degrees(threshold):.3f} cos(H)={arg:.6f}")
  if arg < -1 or arg > 1:
    raise DomainError(arg)
  return 12 * math.acos(arg) / math.pi
