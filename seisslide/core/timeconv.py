# seisslide/core/timeconv.py
"""
Time conversion helpers.

Every time value handled by the windowing layer is an integer number of
microseconds since the Unix epoch (UTC). Floats (Unix seconds) and calendar
types only appear at the API boundary and are converted with the helpers
below.
"""
from __future__ import annotations

import numbers
from datetime import date, datetime, timezone

import numpy as np


US_PER_S = 1_000_000
US_PER_DAY = 86_400 * US_PER_S

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def round_half_away(x):
    """
    Round half away from zero.

    Works on scalars (returns float) and arrays (returns float ndarray).
    This is the only rounding rule used for boundaries and sample indices.
    """
    a = np.asarray(x, dtype=float)
    out = np.sign(a) * np.floor(np.abs(a) + 0.5)
    if out.ndim == 0:
        return float(out)
    return out


def unix_to_us(seconds: float) -> int:
    return int(round_half_away(float(seconds) * US_PER_S))


def us_to_unix(us):
    """Microseconds -> Unix seconds (float or float ndarray)."""
    if np.ndim(us) == 0:
        return int(us) / US_PER_S
    return np.asarray(us, dtype=np.int64) / US_PER_S


def us_to_datetime64(us):
    """Microseconds -> numpy datetime64[us] (scalar or array)."""
    if np.ndim(us) == 0:
        return np.datetime64(int(us), "us")
    return np.asarray(us, dtype=np.int64).astype("datetime64[us]")


def to_us(t) -> int:
    """
    Coerce a time value to integer microseconds since the epoch.

    Accepted inputs:
    - numpy.datetime64
    - datetime (naive values are taken as UTC) or date (midnight)
    - ISO-8601 string, e.g. "2018-08-12T00:00:00"
    - real number, interpreted as Unix seconds
    """
    if isinstance(t, np.datetime64):
        if np.isnat(t):
            raise ValueError("Cannot convert NaT to a timestamp.")
        return int(t.astype("datetime64[us]").astype(np.int64))

    if isinstance(t, datetime):
        if t.tzinfo is None:
            t = t.replace(tzinfo=timezone.utc)
        delta = t - _EPOCH
        return (delta.days * 86_400 + delta.seconds) * US_PER_S + delta.microseconds

    if isinstance(t, date):
        return to_us(datetime(t.year, t.month, t.day))

    if isinstance(t, str):
        try:
            parsed = np.datetime64(t, "us")
        except ValueError as e:
            raise ValueError(f"Cannot parse time string {t!r}.") from e
        return to_us(parsed)

    if isinstance(t, numbers.Real) and not isinstance(t, bool):
        if not np.isfinite(float(t)):
            raise ValueError(f"Time value must be finite, got {t!r}.")
        return unix_to_us(float(t))

    raise TypeError(f"Unsupported time type: {type(t).__name__}")


def midnight_us(us: int) -> int:
    """Floor a timestamp to 00:00:00 UTC of its day."""
    return int(us) - int(us) % US_PER_DAY


def round_digits_us(us: int, digits: int = 4) -> int:
    """Round a timestamp to `digits` decimal digits of seconds."""
    if digits >= 6:
        return int(us)
    quantum = 10 ** (6 - digits)
    return int(round_half_away(int(us) / quantum)) * quantum
