# seisslide/core/__init__.py
"""
Core value types for seisslide.

This module defines the in-memory data model consumed by the windowing layer:
- SeisChannel: one (possibly gapped) time series with its time segments
- ChannelCollection: ordered collection of channels
- Record / RecordSet: processed windows (raw, fft, corr) tagged with a timestamp
- MultiChannelBlock: gapless rectangular multi-channel recording

Reading waveform files is left to the caller; the core layer does no I/O.
"""

from .sampling import Regular, Irregular, Sampling, sampling_from_rate
from .channel import SeisChannel
from .collection import ChannelCollection
from .records import Record, RecordSet, RECORD_KINDS
from .block import MultiChannelBlock
from .metadata import ChannelMeta, RecordSetMeta
from .exceptions import (
    CoreError,
    InvalidChannel,
    InvalidRecord,
    InvalidBlock,
    InvalidRange,
    ShapeConstraintViolation,
    EmptySelection,
    ChannelNotFound,
)


__all__ = [
    # sampling
    "Regular",
    "Irregular",
    "Sampling",
    "sampling_from_rate",

    # domain objects
    "SeisChannel",
    "ChannelCollection",
    "Record",
    "RecordSet",
    "RECORD_KINDS",
    "MultiChannelBlock",

    # metadata
    "ChannelMeta",
    "RecordSetMeta",

    # exceptions
    "CoreError",
    "InvalidChannel",
    "InvalidRecord",
    "InvalidBlock",
    "InvalidRange",
    "ShapeConstraintViolation",
    "EmptySelection",
    "ChannelNotFound",
]
