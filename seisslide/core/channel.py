# seisslide/core/channel.py

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

from .exceptions import InvalidChannel
from .metadata import ChannelMeta
from .sampling import Irregular, Regular, Sampling, sampling_from_rate
from .timeconv import to_us


@dataclass(frozen=True, slots=True)
class SeisChannel:
    """
    One continuous (possibly gapped) seismic time series.

    time_segments is an int64 array of shape (k, 2):
    - row 0: (0, start time in microseconds since the epoch)
    - regular data: every further row (i, gap_us) marks a gap of gap_us
      microseconds inserted before sample i; a trailing (n-1, 0) row is allowed
    - irregular data: every row holds (i, absolute timestamp in microseconds)
    """
    name: str
    samples: np.ndarray = field(repr=False)
    sampling: Sampling
    time_segments: np.ndarray = field(repr=False)
    meta: ChannelMeta = field(default_factory=ChannelMeta, repr=False)

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name.strip():
            raise InvalidChannel("SeisChannel.name must be a non-empty string.")

        if not isinstance(self.sampling, (Regular, Irregular)):
            object.__setattr__(self, "sampling", sampling_from_rate(self.sampling))

        if not isinstance(self.meta, ChannelMeta):
            raise InvalidChannel("SeisChannel.meta must be a ChannelMeta instance.")

        x = np.asarray(self.samples)
        if x.ndim != 1:
            raise InvalidChannel(f"`samples` must be 1D, got shape {x.shape}")

        t = np.asarray(self.time_segments)
        if t.ndim != 2 or t.shape[1] != 2 or t.shape[0] == 0:
            raise InvalidChannel(
                f"`time_segments` must have shape (k, 2) with k >= 1, got {t.shape}"
            )
        if not np.issubdtype(t.dtype, np.integer):
            if not np.array_equal(t, np.round(t)):
                raise InvalidChannel("`time_segments` must hold integer microseconds.")
        t = t.astype(np.int64)

        idx = t[:, 0]
        if idx[0] != 0:
            raise InvalidChannel("First time segment must start at sample index 0.")
        if np.any(np.diff(idx) < 0):
            raise InvalidChannel("`time_segments` must be sorted by sample index.")
        if x.size > 0 and idx[-1] >= x.size:
            raise InvalidChannel(
                f"Time segment index {int(idx[-1])} out of range for {x.size} samples."
            )

        object.__setattr__(self, "samples", x)
        object.__setattr__(self, "time_segments", t)

    @classmethod
    def gapless(
        cls,
        name: str,
        samples,
        sample_rate: float,
        start_time,
        *,
        meta: ChannelMeta | None = None,
    ) -> "SeisChannel":
        """Build a single-segment channel; `start_time` is anything `to_us` accepts."""
        return cls(
            name=name,
            samples=np.asarray(samples),
            sampling=Regular(sample_rate),
            time_segments=np.array([[0, to_us(start_time)]], dtype=np.int64),
            meta=meta if meta is not None else ChannelMeta(),
        )

    # Convenience accessors
    @property
    def n(self) -> int:
        return int(self.samples.size)

    @property
    def is_regular(self) -> bool:
        return isinstance(self.sampling, Regular)

    @property
    def sample_rate(self) -> float:
        # 0.0 keeps the numeric convention for irregular data
        return self.sampling.rate if self.is_regular else 0.0

    @property
    def start_us(self) -> int:
        return int(self.time_segments[0, 1])

    @property
    def gaps(self) -> np.ndarray:
        """Gap rows (sample index, gap in microseconds) of regular data."""
        if not self.is_regular:
            return np.empty((0, 2), dtype=np.int64)
        return self.time_segments[1:]

    @property
    def unit(self) -> str | None:
        return self.meta.unit

    # Core operations
    def rename(self, name: str) -> "SeisChannel":
        return SeisChannel(
            name=name,
            samples=self.samples,
            sampling=self.sampling,
            time_segments=self.time_segments,
            meta=self.meta.copy(),
        )

    def with_samples(self, samples) -> "SeisChannel":
        # Same timing, new values (e.g. after filtering)
        return SeisChannel(
            name=self.name,
            samples=np.asarray(samples),
            sampling=self.sampling,
            time_segments=self.time_segments,
            meta=self.meta.copy(),
        )

    def to_numpy(self, *, copy: bool = False) -> tuple[np.ndarray, np.ndarray]:
        if copy:
            return self.samples.copy(), self.time_segments.copy()
        return self.samples, self.time_segments
