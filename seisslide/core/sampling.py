# seisslide/core/sampling.py
from __future__ import annotations

import math
from dataclasses import dataclass

from .exceptions import InvalidChannel
from .timeconv import round_half_away


@dataclass(frozen=True, slots=True)
class Regular:
    """Regularly sampled time series at `rate` Hz."""

    rate: float

    def __post_init__(self) -> None:
        try:
            rate = float(self.rate)
        except (TypeError, ValueError) as e:
            raise InvalidChannel(f"Sample rate must be a real number, got {self.rate!r}.") from e
        if not math.isfinite(rate) or rate <= 0:
            raise InvalidChannel(f"Sample rate must be positive and finite, got {self.rate!r}.")
        object.__setattr__(self, "rate", rate)

    @property
    def period_us(self) -> int:
        """Sample period rounded to the nearest microsecond."""
        return int(round_half_away(1e6 / self.rate))


@dataclass(frozen=True, slots=True)
class Irregular:
    """Non-time-series data: every time-segment row is a timestamped sample."""


Sampling = Regular | Irregular


def sampling_from_rate(fs: float) -> Sampling:
    """Convert a numeric rate (0 meaning irregular) to a Sampling variant."""
    if isinstance(fs, (Regular, Irregular)):
        return fs
    if fs == 0:
        return Irregular()
    return Regular(fs)
