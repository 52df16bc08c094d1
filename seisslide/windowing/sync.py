# seisslide/windowing/sync.py
from __future__ import annotations

import logging

import numpy as np

from seisslide.core.exceptions import EmptySelection, InvalidRange
from seisslide.core.records import RecordSet
from seisslide.core.timeconv import to_us, unix_to_us, us_to_datetime64

logger = logging.getLogger(__name__)


def sync(records: RecordSet, start_time, end_time) -> RecordSet:
    """
    Return the records of `records` whose timestamp lies in
    [start_time, end_time], inclusive, in their original order.

    Bounds accept Unix seconds or calendar time (datetime, datetime64, ISO
    string). Raises EmptySelection when nothing matches.
    """
    if not isinstance(records, RecordSet):
        raise TypeError(f"sync() expects a RecordSet, got {type(records).__name__}")

    start_us = to_us(start_time)
    end_us = to_us(end_time)
    if end_us < start_us:
        raise InvalidRange(
            f"End time {us_to_datetime64(end_us)} is before start time {us_to_datetime64(start_us)}."
        )

    t = np.array([unix_to_us(ts) for ts in records.timestamps], dtype=np.int64)
    ind = np.flatnonzero((start_us <= t) & (t <= end_us))
    if ind.size == 0:
        raise EmptySelection(
            f"No data in {records.kind} record set '{records.name}' between "
            f"{us_to_datetime64(start_us)} and {us_to_datetime64(end_us)}."
        )

    logger.debug("sync kept %d of %d records of '%s'", ind.size, len(records), records.name)
    return records[ind]
