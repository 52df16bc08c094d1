# seisslide/windowing/index.py
"""Absolute time -> sample index mapping."""
from __future__ import annotations

import numpy as np

from seisslide.core.exceptions import InvalidRange
from seisslide.core.timeconv import US_PER_S, round_half_away, to_us


def sample_offsets(t_us, t0_us: int, sample_rate: float):
    """
    0-based sample index of time(s) `t_us` in an array whose first sample is
    at `t0_us`.

    The product is rounded to 4 digits first so that float noise such as
    499.99999999 lands on 500, then rounded half away from zero.
    """
    offset = (np.asarray(t_us, dtype=np.int64) - int(t0_us)) * (float(sample_rate) / US_PER_S)
    idx = round_half_away(np.round(offset, 4))
    if np.ndim(idx) == 0:
        return int(idx)
    return idx.astype(np.int64)


def slide_ind(start_slice, end_slice, sample_rate: float, time_segments) -> tuple[int, int]:
    """
    Map an absolute time range to 0-based, inclusive sample indices.

    Arguments:
        start_slice, end_slice: bounds as Unix seconds or calendar time.
        sample_rate: sample rate in Hz.
        time_segments: (k, 2) time segments; row 0 holds the first-sample time
            in microseconds.
    """
    fs = float(sample_rate)
    if not np.isfinite(fs) or fs <= 0:
        raise InvalidRange(f"sample_rate must be positive and finite, got {sample_rate!r}.")

    t = np.asarray(time_segments)
    if t.ndim != 2 or t.shape[0] == 0:
        raise InvalidRange(f"time_segments must have shape (k, 2), got {t.shape}")
    t0 = int(t[0, 1])

    return sample_offsets(to_us(start_slice), t0, fs), sample_offsets(to_us(end_slice), t0, fs)
