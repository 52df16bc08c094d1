# test/test_align.py
from datetime import datetime

import numpy as np
import pytest

from seisslide.core import InvalidRange, Irregular, SeisChannel
from seisslide.windowing import nearest_start_end, t_win

MIDNIGHT = 1_534_032_000.0  # 2018-08-12T00:00:00 UTC


def _hour_channel(start_offset, fs=100.0, seconds=3600):
    n = int(seconds * fs) + 1
    return SeisChannel.gapless("x", np.zeros(n), fs, MIDNIGHT + start_offset)


def test_channel_start_snaps_to_next_step_after_midnight():
    ch = _hour_channel(3.5)
    start, end = nearest_start_end(ch, 600.0, 300.0)

    assert start == MIDNIGHT + 300.0
    assert end == pytest.approx(MIDNIGHT + 3599.99, abs=1e-6)


def test_channel_starting_at_midnight_keeps_its_start():
    start, end = nearest_start_end(_hour_channel(0.0), 600.0, 600.0)
    assert start == MIDNIGHT
    assert end == pytest.approx(MIDNIGHT + 3599.99, abs=1e-6)


@pytest.mark.parametrize("offset", [0.0, 0.01, 59.5, 299.99, 3600.0, 43_210.25])
def test_result_lies_inside_data_and_on_the_grid(offset):
    ch = _hour_channel(offset)
    su, eu = (x / 1e6 for x in t_win(ch))
    start, end = nearest_start_end(ch, 600.0, 300.0)

    assert start >= su
    assert end <= eu
    assert (start - MIDNIGHT) % 300.0 == pytest.approx(0.0, abs=1e-6)


def test_float_noise_on_start_is_rounded_away():
    ch = _hour_channel(0.00003)
    start, _ = nearest_start_end(ch, 600.0, 300.0)
    assert start == MIDNIGHT


def test_span_shorter_than_one_window_raises():
    ch = _hour_channel(10.0, seconds=10)
    with pytest.raises(InvalidRange):
        nearest_start_end(ch, 600.0, 300.0)


def test_irregular_channel_raises():
    ch = SeisChannel(
        name="irr",
        samples=np.ones(2),
        sampling=Irregular(),
        time_segments=np.array([[0, 0], [1, 10]]),
    )
    with pytest.raises(InvalidRange):
        nearest_start_end(ch, 10.0, 10.0)


def test_calendar_form():
    S = datetime(2018, 8, 12, 0, 0, 3)
    E = datetime(2018, 8, 12, 1, 0, 3)
    start, end = nearest_start_end(S, E, 100.0, 600, 300)

    assert start == MIDNIGHT + 300.0
    assert end == pytest.approx(MIDNIGHT + 3599.99, abs=1e-6)

    assert nearest_start_end("2018-08-12T00:00:03", np.datetime64("2018-08-12T01:00:03"), 100.0, 600, 300) == (
        start,
        end,
    )


def test_calendar_form_requires_whole_seconds():
    with pytest.raises(InvalidRange):
        nearest_start_end(datetime(2018, 8, 12), datetime(2018, 8, 13), 100.0, 600.5, 300)


def test_calendar_form_end_before_start_raises():
    with pytest.raises(InvalidRange):
        nearest_start_end(datetime(2018, 8, 12, 1), datetime(2018, 8, 12), 100.0, 600, 300)


def test_unsupported_source_raises_type_error():
    with pytest.raises(TypeError):
        nearest_start_end(12345, 600.0, 300.0)


@pytest.mark.parametrize("fs, cc_len", [("fast", 600), (100.0, "long")])
def test_calendar_form_non_numeric_parameters_raise_invalid_range(fs, cc_len):
    with pytest.raises(InvalidRange):
        nearest_start_end(datetime(2018, 8, 12), datetime(2018, 8, 13), fs, cc_len, 300)
