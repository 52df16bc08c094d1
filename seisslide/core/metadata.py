# seisslide/core/metadata.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .exceptions import InvalidChannel, InvalidRecord


@dataclass(frozen=True, slots=True)
class ChannelMeta:
    """
    Metadata attached to a SeisChannel.

    Kept lightweight; the waveform container owns the full station metadata:
    - unit: physical unit of the samples (m/s, counts, ...)
    - description: human-friendly description
    - source: origin (file, stream, computed, ...)
    - attrs: arbitrary additional fields
    """
    unit: str | None = None
    description: str | None = None
    source: str | None = None
    attrs: dict[str, Any] = field(default_factory=dict, repr=False)

    def __post_init__(self) -> None:
        if self.attrs is None:
            object.__setattr__(self, "attrs", {})
        elif not isinstance(self.attrs, dict):
            raise InvalidChannel("ChannelMeta.attrs must be a dict.")

    def copy(self) -> "ChannelMeta":
        return ChannelMeta(
            unit=self.unit,
            description=self.description,
            source=self.source,
            attrs=self.attrs.copy(),
        )


@dataclass(frozen=True, slots=True)
class RecordSetMeta:
    """
    Metadata attached to a RecordSet (windows, spectra or correlations).

    Example attrs:
    - cc_len / cc_step used to produce the windows
    - sample_rate of the parent channel
    """
    description: str | None = None
    source: str | None = None
    attrs: dict[str, Any] = field(default_factory=dict, repr=False)

    def __post_init__(self) -> None:
        if self.attrs is None:
            object.__setattr__(self, "attrs", {})
        elif not isinstance(self.attrs, dict):
            raise InvalidRecord("RecordSetMeta.attrs must be a dict.")

    def copy(self) -> "RecordSetMeta":
        return RecordSetMeta(
            description=self.description,
            source=self.source,
            attrs=self.attrs.copy(),
        )
