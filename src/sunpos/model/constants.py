from dataclasses import dataclass
from enum import Enum
import math
from typing import Tuple


class Twilight(Enum):
  """Solar altitudes (degrees) that bound the day arc, from shallowest to deepest."""

  SUNRISE = -50 / 60  # upper limb on the horizon, refraction included
  CIVIL = -6.0
  NAUTICAL = -12.0
  ASTRONOMICAL = -18.0

  @property
  def altitude(self) -> float:
    return math.radians(self.value)


@dataclass(frozen=True)
class AstroConstants:
  thresholds: Tuple[Twilight, ...] = tuple(Twilight)
  deg_per_hour: float = 15.0  # longitude per hour of time
  # Saemundsson refraction, 1010 mbar and 10 C
  refraction_scale: float = 1.02
  refraction_offset: float = 10.3
  refraction_shift: float = 5.11
  refraction_floor_deg: float = -1.0


CONSTANTS = AstroConstants()
