# seisslide/windowing/align.py
"""
Snap window boundaries to a grid anchored at midnight.

Windows computed on different days and stations line up when their starts
sit on multiples of cc_step after 00:00:00 UTC.
"""
from __future__ import annotations

import logging
from datetime import date
from functools import singledispatch

import numpy as np

from seisslide.core.channel import SeisChannel
from seisslide.core.exceptions import InvalidRange
from seisslide.core.sampling import Regular
from seisslide.core.timeconv import midnight_us, round_digits_us, to_us, us_to_unix

from .config import WindowConfig
from .span import t_win

logger = logging.getLogger(__name__)


def _nearest(su: int, eu: int, config: WindowConfig, period_us: int) -> tuple[float, float]:
    """
    First grid start >= su and last grid end <= eu, as Unix seconds.

    Grid starts are anchor + k * cc_step (anchor = midnight of su's day),
    bounded by eu; each end is start + cc_len - 1/fs.
    """
    if eu < su:
        raise InvalidRange(f"End time ({eu} us) is before start time ({su} us).")

    anchor = midnight_us(su)
    step = config.step_us

    k_max = (eu - anchor) // step
    k_first = -((anchor - su) // step)
    if k_first > k_max:
        raise InvalidRange(
            f"No valid start: no grid point of {config.cc_step} s after midnight "
            f"falls between {us_to_unix(su)} and {us_to_unix(eu)}."
        )

    k_last = min(k_max, (eu - anchor - config.len_us + period_us) // step)
    if k_last < 0:
        raise InvalidRange(
            f"No valid end: no {config.cc_len} s window ends before {us_to_unix(eu)}."
        )
    if k_last < k_first:
        raise InvalidRange(
            f"No valid start/end: span {us_to_unix(su)}-{us_to_unix(eu)} is shorter "
            f"than one aligned {config.cc_len} s window."
        )

    start = anchor + k_first * step
    end = anchor + k_last * step + config.len_us - period_us
    logger.debug("Aligned span %d-%d us to %d-%d us", su, eu, start, end)
    return us_to_unix(start), us_to_unix(end)


@singledispatch
def nearest_start_end(source, *args):
    """
    Return the best possible (start, end) in Unix seconds for the given
    cc_len and cc_step.

    Two forms:
    - nearest_start_end(channel, cc_len, cc_step): span taken from the
      channel and rounded to 4 decimal digits of seconds.
    - nearest_start_end(S, E, sample_rate, cc_len, cc_step): calendar start
      and end (datetime, datetime64 or ISO string), whole-second cc_len and
      cc_step.

    Raises InvalidRange when no aligned window fits inside the span.
    """
    raise TypeError(f"nearest_start_end() does not support {type(source).__name__}")


@nearest_start_end.register
def _(source: SeisChannel, cc_len, cc_step):
    if not source.is_regular:
        raise InvalidRange(f"Channel '{source.name}' is irregularly sampled; no window grid applies.")
    config = WindowConfig(cc_len, cc_step)
    config.window_samples(source.sample_rate)

    su, eu = t_win(source)
    # round due to numerical roundoff
    su = round_digits_us(su, 4)
    eu = round_digits_us(eu, 4)
    return _nearest(su, eu, config, source.sampling.period_us)


def _calendar(S, E, sample_rate, cc_len, cc_step):
    config = WindowConfig(cc_len, cc_step)
    for attr in ("cc_len", "cc_step"):
        if not getattr(config, attr).is_integer():
            raise InvalidRange(
                f"{attr} must be a whole number of seconds, got {getattr(config, attr)!r}."
            )
    config.window_samples(sample_rate)
    return _nearest(to_us(S), to_us(E), config, Regular(sample_rate).period_us)


nearest_start_end.register(date, _calendar)
nearest_start_end.register(np.datetime64, _calendar)
nearest_start_end.register(str, _calendar)
