import pytest

from sunpos.errors import RangeError
from sunpos.model.site import Instant, validate


def test_valid_instant_passes_through():
  i = Instant(year=2024, month=2, day=29, hour=23, minute=59)
  assert validate(i) is i


@pytest.mark.parametrize(
  "fields, bad",
  [
    (dict(year=2020, month=1, day=32, hour=12, minute=0), "day"),
    (dict(year=2020, month=2, day=30, hour=12, minute=0), "day"),
    (dict(year=2023, month=2, day=29, hour=12, minute=0), "day"),
    (dict(year=2020, month=4, day=31, hour=12, minute=0), "day"),
    (dict(year=2020, month=1, day=0, hour=12, minute=0), "day"),
    (dict(year=2020, month=13, day=1, hour=12, minute=0), "month"),
    (dict(year=2020, month=1, day=1, hour=24, minute=0), "hour"),
    (dict(year=2020, month=1, day=1, hour=12, minute=60), "minute"),
    (dict(year=1999, month=12, day=31, hour=12, minute=0), "year"),
  ],
)
def test_out_of_range_rejected(fields, bad):
  with pytest.raises(RangeError) as exc:
    validate(Instant(**fields))
  assert exc.value.field == bad


def test_first_violation_reported():
  with pytest.raises(RangeError) as exc:
    validate(Instant(year=1999, month=13, day=40, hour=25, minute=61))
  assert exc.value.field == "year"
  assert "1999" in str(exc.value)
