# seisslide/windowing/grid.py
from __future__ import annotations

import logging

import numpy as np

from seisslide.core.block import MultiChannelBlock
from seisslide.core.exceptions import ShapeConstraintViolation
from seisslide.core.timeconv import round_half_away

logger = logging.getLogger(__name__)


def slice_block(block: MultiChannelBlock, win_len: float) -> np.ndarray:
    """
    Cut a gapless multi-channel block into equal windows of `win_len` seconds.

    Returns an array of shape (window_samples, n_channels, n_windows) with
    out[i, c, w] == block.data[w * window_samples + i, c].

    Raises ShapeConstraintViolation unless win_len * sample_rate is a whole
    number of samples that divides the block length.
    """
    length = block.samples_per_channel
    window_samples = float(win_len) * block.sample_rate
    ws = int(round_half_away(window_samples))

    # tolerate float noise such as 0.07 * 100 == 7.000000000000001
    if ws < 1 or not np.isclose(window_samples, ws, rtol=0.0, atol=1e-6):
        raise ShapeConstraintViolation(
            f"Window of {win_len} s at {block.sample_rate} Hz is not a whole number of samples.",
            length=length,
            window_samples=window_samples,
        )
    if length % ws:
        raise ShapeConstraintViolation(
            f"Window size ({ws} samples) must be a factor of the total data length ({length}).",
            length=length,
            window_samples=ws,
        )

    n_windows = length // ws
    logger.debug("Slicing %d channels into %d windows of %d samples", block.n, n_windows, ws)
    return np.transpose(block.data.reshape(n_windows, ws, block.n), (1, 2, 0)).copy()
