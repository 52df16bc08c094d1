# seisslide/windowing/config.py
from __future__ import annotations

import math
from dataclasses import dataclass

from seisslide.core.exceptions import InvalidRange
from seisslide.core.timeconv import US_PER_S, round_half_away


@dataclass(frozen=True, slots=True)
class WindowConfig:
    """
    Cross-correlation window length and step, in seconds.

    Attributes:
        cc_len: window length in seconds.
        cc_step: offset between consecutive window starts in seconds.
            cc_step < cc_len gives overlapping windows, cc_step == cc_len
            contiguous ones and cc_step > cc_len skips data between windows.
    """
    cc_len: float
    cc_step: float

    def __post_init__(self) -> None:
        for attr in ("cc_len", "cc_step"):
            value = getattr(self, attr)
            try:
                v = float(value)
            except (TypeError, ValueError) as e:
                raise InvalidRange(f"{attr} must be a real number, got {value!r}.") from e
            if not math.isfinite(v) or v <= 0:
                raise InvalidRange(f"{attr} must be positive and finite, got {value!r}.")
            object.__setattr__(self, attr, v)

        if self.len_us <= 0 or self.step_us <= 0:
            raise InvalidRange("cc_len and cc_step must be at least one microsecond.")

    @property
    def len_us(self) -> int:
        return int(round_half_away(self.cc_len * US_PER_S))

    @property
    def step_us(self) -> int:
        return int(round_half_away(self.cc_step * US_PER_S))

    @property
    def overlap(self) -> float:
        """Seconds shared by consecutive windows (0 when they do not overlap)."""
        return max(self.cc_len - self.cc_step, 0.0)

    @property
    def contiguous(self) -> bool:
        return self.len_us == self.step_us

    def window_samples(self, sample_rate: float) -> int:
        """Number of samples in one window at `sample_rate` Hz."""
        try:
            fs = float(sample_rate)
        except (TypeError, ValueError) as e:
            raise InvalidRange(f"sample_rate must be a real number, got {sample_rate!r}.") from e
        if not math.isfinite(fs) or fs <= 0:
            raise InvalidRange(f"sample_rate must be positive and finite, got {sample_rate!r}.")
        n = int(round_half_away(self.cc_len * fs))
        if n < 1:
            raise InvalidRange(
                f"cc_len={self.cc_len} s is shorter than one sample at {fs} Hz."
            )
        return n
