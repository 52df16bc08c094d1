# test/test_timeconv.py
from datetime import date, datetime, timedelta, timezone

import numpy as np
import pytest

from seisslide.core.timeconv import (
    midnight_us,
    round_digits_us,
    round_half_away,
    to_us,
    unix_to_us,
    us_to_datetime64,
    us_to_unix,
)

AUG12 = 1_534_032_000  # 2018-08-12T00:00:00 UTC


def test_round_half_away_scalars_and_arrays():
    assert round_half_away(2.5) == 3.0
    assert round_half_away(-2.5) == -3.0
    assert round_half_away(0.4999) == 0.0
    assert np.array_equal(round_half_away([0.5, 1.5, -0.5]), [1.0, 2.0, -1.0])


def test_to_us_accepts_calendar_types():
    expected = AUG12 * 1_000_000
    assert to_us(np.datetime64("2018-08-12T00:00:00")) == expected
    assert to_us("2018-08-12T00:00:00") == expected
    assert to_us(datetime(2018, 8, 12)) == expected
    assert to_us(date(2018, 8, 12)) == expected

    tz = timezone(timedelta(hours=2))
    assert to_us(datetime(2018, 8, 12, 2, tzinfo=tz)) == expected


def test_to_us_accepts_unix_seconds():
    assert to_us(AUG12 + 0.5) == AUG12 * 1_000_000 + 500_000
    assert to_us(np.float64(1.000001)) == 1_000_001
    assert unix_to_us(0.1 + 0.2) == 300_000


def test_to_us_rejects_bad_input():
    with pytest.raises(TypeError):
        to_us(object())
    with pytest.raises(ValueError):
        to_us(np.datetime64("NaT"))
    with pytest.raises(ValueError):
        to_us(float("nan"))


def test_us_roundtrip_helpers():
    assert us_to_unix(1_500_000) == 1.5
    assert us_to_datetime64(0) == np.datetime64("1970-01-01T00:00:00")

    arr = us_to_datetime64([0, 1_000_000])
    assert arr.dtype == np.dtype("datetime64[us]")
    assert np.allclose(us_to_unix(np.array([0, 2_500_000])), [0.0, 2.5])


def test_midnight_us():
    assert midnight_us(to_us("2018-08-12T13:45:10.25")) == AUG12 * 1_000_000
    assert midnight_us(AUG12 * 1_000_000) == AUG12 * 1_000_000


def test_round_digits_us():
    assert round_digits_us(1_000_049, 4) == 1_000_000
    assert round_digits_us(1_000_050, 4) == 1_000_100
    assert round_digits_us(1_000_049, 6) == 1_000_049
