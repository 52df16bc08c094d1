# seisslide/windowing/span.py
"""Covered start/end time of channels, accounting for sampling gaps."""
from __future__ import annotations

import logging
from functools import singledispatch

import numpy as np

from seisslide.core.channel import SeisChannel
from seisslide.core.collection import ChannelCollection
from seisslide.core.exceptions import InvalidRange
from seisslide.core.timeconv import US_PER_S, round_half_away, us_to_datetime64

logger = logging.getLogger(__name__)


def t_win(channel: SeisChannel) -> tuple[int, int]:
    """
    Return (start, end) of `channel` in integer microseconds since the epoch.

    Regular data: end = start + sum of gaps + (n - 1) sample periods.
    Irregular data: end is the timestamp of the last segment row.
    """
    start = channel.start_us
    if not channel.is_regular:
        return start, int(channel.time_segments[-1, 1])

    if channel.n == 0:
        raise InvalidRange(f"Channel '{channel.name}' has no samples.")

    gaps = int(channel.gaps[:, 1].sum())
    length = int(round_half_away((channel.n - 1) * US_PER_S / channel.sample_rate))
    return start, start + gaps + length


@singledispatch
def start_end(data):
    """
    Return start and end times as numpy datetime64[us].

    - SeisChannel -> (start, end)
    - ChannelCollection -> (starts, ends), parallel arrays in channel order
    """
    raise TypeError(f"start_end() does not support {type(data).__name__}")


@start_end.register
def _(data: SeisChannel):
    su, eu = t_win(data)
    return us_to_datetime64(su), us_to_datetime64(eu)


@start_end.register
def _(data: ChannelCollection):
    starts = np.empty(data.n, dtype=np.int64)
    ends = np.empty(data.n, dtype=np.int64)
    for i, ch in enumerate(data):
        starts[i], ends[i] = t_win(ch)
    logger.debug("start_end computed for %d channels", data.n)
    return us_to_datetime64(starts), us_to_datetime64(ends)
