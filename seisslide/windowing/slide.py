# seisslide/windowing/slide.py
"""Cut 1D sample arrays into fixed-length, possibly overlapping windows."""
from __future__ import annotations

import logging
from functools import singledispatch

import numpy as np

from seisslide.core.channel import SeisChannel
from seisslide.core.exceptions import InvalidRange
from seisslide.core.sampling import Regular
from seisslide.core.timeconv import to_us, us_to_unix

from .config import WindowConfig
from .index import sample_offsets
from .span import t_win

logger = logging.getLogger(__name__)


def window_grid(
    start_us: int,
    end_us: int,
    config: WindowConfig,
    period_us: int,
) -> tuple[np.ndarray, np.ndarray]:
    """
    Start and end times (microseconds) of every window that fits in
    [start_us, end_us].

    Candidate starts run from start_us to end_us in steps of cc_step; a
    candidate is kept while its last sample, start + cc_len - 1/fs, is
    <= end_us. Ends grow monotonically, so the kept candidates are a prefix.
    """
    if end_us < start_us:
        empty = np.empty(0, dtype=np.int64)
        return empty, empty

    n_candidates = (end_us - start_us) // config.step_us + 1
    starts = start_us + config.step_us * np.arange(n_candidates, dtype=np.int64)
    ends = starts + config.len_us - period_us
    n = int(np.searchsorted(ends, end_us, side="right"))
    return starts[:n], ends[:n]


def _slide(
    A: np.ndarray,
    config: WindowConfig,
    sample_rate: float,
    start_us: int,
    end_us: int,
) -> tuple[np.ndarray, np.ndarray]:
    N = A.size
    window_samples = config.window_samples(sample_rate)
    fs = float(sample_rate)
    starts, _ = window_grid(start_us, end_us, config, Regular(fs).period_us)

    if starts.size == 0:
        logger.debug(
            "No %.6g s window fits between %d and %d us", config.cc_len, start_us, end_us
        )
        return np.empty((window_samples, 0), dtype=A.dtype), np.empty(0, dtype=float)

    if config.contiguous:
        n_windows = N // window_samples
        remainder = N % window_samples
        if remainder:
            logger.debug("Discarding %d trailing samples", remainder)
        if n_windows != starts.size:
            logger.warning(
                "%d contiguous windows in the data but %d start times in the span; keeping %d",
                n_windows,
                starts.size,
                min(n_windows, starts.size),
            )
        n = min(n_windows, starts.size)
        # window i is the contiguous run A[i*ws:(i+1)*ws], stored as column i
        out = np.array(A[: n * window_samples].reshape(n, window_samples).T)
        return out, us_to_unix(starts[:n])

    # every column holds exactly window_samples values starting at `first`
    first = sample_offsets(starts, start_us, fs)
    inside = (first >= 0) & (first + window_samples <= N)
    if not inside.all():
        logger.warning(
            "Dropping %d windows that run past the %d available samples",
            int((~inside).sum()),
            N,
        )
        first = first[inside]
        starts = starts[inside]

    rows = np.arange(window_samples, dtype=np.int64)[:, None]
    out = A[rows + first[None, :]]
    logger.debug("Cut %d overlapping windows of %d samples", starts.size, window_samples)
    return out, us_to_unix(starts)


@singledispatch
def slide(data, cc_len, cc_step, sample_rate, start_time, end_time):
    """
    Cut a 1D time series into sliding windows.

    Arguments:
        data: 1D samples; or a SeisChannel, in which case only cc_len and
            cc_step are given and the span comes from the channel. Sample
            indices are mapped as if the samples were contiguous: gaps
            lengthen the span but do not shift samples, so after a gap a
            window's start time no longer matches its first sample.
        cc_len: window length in seconds.
        cc_step: step between window starts in seconds.
        sample_rate: sample rate in Hz.
        start_time: time of the first sample (Unix seconds or calendar time).
        end_time: time of the last sample (Unix seconds or calendar time).

    Returns:
        windows: array of shape (window_samples, n_windows); column i is a window.
        starts: start time of each window in Unix seconds, paired with the columns.
    """
    A = np.asarray(data)
    if A.ndim != 1:
        raise ValueError(f"slide() expects 1D samples, got shape {A.shape}")
    config = WindowConfig(cc_len, cc_step)
    return _slide(A, config, sample_rate, to_us(start_time), to_us(end_time))


@slide.register
def _(data: SeisChannel, cc_len, cc_step):
    if not data.is_regular:
        raise InvalidRange(f"Channel '{data.name}' is irregularly sampled; cannot slide it.")
    config = WindowConfig(cc_len, cc_step)
    start_us, end_us = t_win(data)
    return _slide(data.samples, config, data.sample_rate, start_us, end_us)
