# seisslide/core/collection.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator

import numpy as np

from .channel import SeisChannel
from .exceptions import ChannelNotFound, InvalidChannel


@dataclass(frozen=True, slots=True)
class ChannelCollection:
    """
    Ordered collection of SeisChannels.

    Design goals:
    - positional and name access: coll[0], coll["BK.CMB..BHZ"]
    - parallel views (samples, sample_rates, time_segments) in channel order
    - immutable; transformations return a new collection
    """
    channels: tuple[SeisChannel, ...] = field(default_factory=tuple, repr=False)

    def __post_init__(self) -> None:
        if isinstance(self.channels, SeisChannel):
            raise InvalidChannel("ChannelCollection expects an iterable of SeisChannel.")
        chans = tuple(self.channels)
        seen: set[str] = set()
        for ch in chans:
            if not isinstance(ch, SeisChannel):
                raise InvalidChannel("ChannelCollection values must be SeisChannel instances.")
            if ch.name in seen:
                raise InvalidChannel(f"Duplicate channel name '{ch.name}'.")
            seen.add(ch.name)
        object.__setattr__(self, "channels", chans)

    # ---- sequence API ----
    def __len__(self) -> int:
        return len(self.channels)

    def __iter__(self) -> Iterator[SeisChannel]:
        return iter(self.channels)

    def __contains__(self, name: object) -> bool:
        return any(ch.name == name for ch in self.channels)

    def __getitem__(self, key):
        if isinstance(key, str):
            for ch in self.channels:
                if ch.name == key:
                    return ch
            raise ChannelNotFound(key)
        if isinstance(key, slice):
            return ChannelCollection(self.channels[key])
        return self.channels[key]

    @property
    def n(self) -> int:
        return len(self.channels)

    # ---- parallel views ----
    @property
    def names(self) -> list[str]:
        return [ch.name for ch in self.channels]

    @property
    def samples(self) -> list[np.ndarray]:
        return [ch.samples for ch in self.channels]

    @property
    def sample_rates(self) -> np.ndarray:
        return np.array([ch.sample_rate for ch in self.channels], dtype=float)

    @property
    def time_segments(self) -> list[np.ndarray]:
        return [ch.time_segments for ch in self.channels]

    # ---- transformations ----
    def add(self, channel: SeisChannel, *, overwrite: bool = False) -> "ChannelCollection":
        """
        Return a new collection with `channel` appended.

        If a channel with the same name exists, it is replaced in place when
        overwrite=True, otherwise InvalidChannel is raised.
        """
        if not isinstance(channel, SeisChannel):
            raise InvalidChannel("add() expects a SeisChannel instance.")

        if channel.name in self:
            if not overwrite:
                raise InvalidChannel(f"Channel '{channel.name}' already exists (overwrite=False).")
            return ChannelCollection(
                tuple(channel if ch.name == channel.name else ch for ch in self.channels)
            )
        return ChannelCollection(self.channels + (channel,))

    def select(self, names: Iterable[str], *, missing: str = "raise") -> "ChannelCollection":
        """
        Keep only the given channel names (order follows `names`).

        missing:
          - "raise": error if any name is missing
          - "ignore": skip missing names
        """
        selected: list[SeisChannel] = []
        for name in names:
            if name in self:
                selected.append(self[name])
            elif missing == "raise":
                raise ChannelNotFound(name)
        return ChannelCollection(tuple(selected))
