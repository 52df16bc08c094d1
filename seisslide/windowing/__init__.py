# seisslide/windowing/__init__.py
"""
Windowing and temporal alignment of continuous seismic records.

- start_end / t_win: covered span of a channel or collection
- slide: fixed-length, possibly overlapping windows anchored to clock time
- nearest_start_end: window boundaries aligned to midnight
- slide_ind: absolute time range -> sample indices
- sync: keep the records inside a time range
- slice_block (alias slice): equal windows of a gapless multi-channel block

All functions are pure; inputs are never modified.
"""

from .config import WindowConfig
from .span import start_end, t_win
from .slide import slide, window_grid
from .align import nearest_start_end
from .index import slide_ind, sample_offsets
from .sync import sync
from .grid import slice_block
from .grid import slice_block as slice


__all__ = [
    "WindowConfig",
    "start_end",
    "t_win",
    "slide",
    "window_grid",
    "nearest_start_end",
    "slide_ind",
    "sample_offsets",
    "sync",
    "slice_block",
    "slice",
]
