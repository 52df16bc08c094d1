# seisslide/core/exceptions.py
from __future__ import annotations


class CoreError(Exception):
    """Base error for all seisslide exceptions."""


# ---- Validation / construction errors ----
class InvalidChannel(CoreError):
    """Raised when a SeisChannel / ChannelMeta is constructed with invalid inputs."""


class InvalidRecord(CoreError):
    """Raised when a Record / RecordSet is constructed with invalid inputs."""


class InvalidBlock(CoreError):
    """Raised when a MultiChannelBlock is constructed with invalid inputs."""


# ---- Windowing errors (also behave like ValueError) ----
class InvalidRange(CoreError, ValueError):
    """Raised when window parameters or a time range admit no valid window."""


class ShapeConstraintViolation(CoreError, ValueError):
    """Raised when a block cannot be cut into equal windows."""

    def __init__(self, message: str, *, length: int, window_samples: float) -> None:
        super().__init__(message)
        self.length = length
        self.window_samples = window_samples


# ---- Lookup errors ----
class EmptySelection(CoreError, LookupError):
    """Raised when a time filter matches no records."""


class ChannelNotFound(CoreError, KeyError):
    """Raised when a requested channel name is not present."""
