"""Exceptions raised between input parsing and the solar computation."""


class SunError(Exception):
  """Base class for every error the sun tools report to the user."""


class RangeError(SunError):
  """A date or time component lies outside its calendar bounds."""

  def __init__(self, field: str, value, low, high):
    self.field = field
    self.value = value
    self.low = low
    self.high = high
    super().__init__(f"{field}={value} is outside [{low}, {high}]")


class FileError(SunError):
  """Parameter file missing, unreadable or incomplete."""


class TimezoneError(SunError):
  """Timezone identifier unknown, or the local time does not exist in it."""


class DomainError(SunError):
  """Inverse-trig argument outside [-1, 1]: the sun never crosses the threshold."""

  def __init__(self, argument: float):
    self.argument = argument
    super().__init__(f"acos argument {argument:.6f} outside [-1, 1]")
