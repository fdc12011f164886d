import math


FULL_CIRCLE = 360.0


def normalize_deg(x: float) -> float:
  """Reduce x into [0, 360)."""
  r = math.fmod(x, FULL_CIRCLE)
  if r < 0:
    r += FULL_CIRCLE
  # -1e-20 + 360 rounds to exactly 360
  if r >= FULL_CIRCLE:
    r -= FULL_CIRCLE
  return r


def resolve_quadrant(raw: float, disambiguating_sign: float) -> float:
  """atan() is only unique modulo pi; move raw to the half-plane the sign selects."""
  if disambiguating_sign < 0:
    return raw + math.pi
  return raw


def wrap_pi(angle: float) -> float:
  """Bring an angle already within one turn of the range into (-pi, pi]."""
  if angle > math.pi:
    angle -= 2 * math.pi
  if angle <= -math.pi:
    angle += 2 * math.pi
  return angle


def trunc_hours_minutes(hours: float):
  """Split decimal hours into clock (hour, minute), truncating toward zero.

  A negative minute remainder borrows from the hour so -1.5 gives (-2, 30);
  the caller wraps the hour onto the clock face.
  """
  h = int(hours)
  m = int(60 * (hours - h))
  if m < 0:
    m += 60
    h -= 1
  return h, m
