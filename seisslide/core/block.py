# seisslide/core/block.py
from __future__ import annotations

import math
from dataclasses import dataclass, field

import numpy as np

from .exceptions import InvalidBlock


@dataclass(frozen=True, slots=True)
class MultiChannelBlock:
    """Gapless rectangular recording, shape (samples_per_channel, n_channels)."""

    data: np.ndarray = field(repr=False)
    sample_rate: float
    names: tuple[str, ...] | None = None

    def __post_init__(self) -> None:
        d = np.asarray(self.data)
        if d.ndim != 2:
            raise InvalidBlock(f"`data` must be 2D (samples, channels), got shape {d.shape}")

        try:
            fs = float(self.sample_rate)
        except (TypeError, ValueError) as e:
            raise InvalidBlock(f"Sample rate must be a real number, got {self.sample_rate!r}.") from e
        if not math.isfinite(fs) or fs <= 0:
            raise InvalidBlock(f"Sample rate must be positive and finite, got {self.sample_rate!r}.")

        if self.names is not None:
            names = tuple(self.names)
            if len(names) != d.shape[1]:
                raise InvalidBlock(
                    f"{len(names)} channel names for {d.shape[1]} channels."
                )
            object.__setattr__(self, "names", names)

        object.__setattr__(self, "data", d)
        object.__setattr__(self, "sample_rate", fs)

    @property
    def n(self) -> int:
        return int(self.data.shape[1])

    @property
    def samples_per_channel(self) -> int:
        return int(self.data.shape[0])
