# test/test_channel.py
import numpy as np
import pytest

from seisslide.core import (
    ChannelMeta,
    InvalidChannel,
    Irregular,
    Regular,
    SeisChannel,
    sampling_from_rate,
)


def _segments(*rows):
    return np.array(rows, dtype=np.int64)


def test_gapless_builds_single_segment_channel():
    ch = SeisChannel.gapless("BK.CMB..BHZ", np.arange(100.0), 40.0, "2018-08-12T00:00:00")

    assert ch.n == 100
    assert ch.is_regular
    assert ch.sample_rate == 40.0
    assert ch.start_us == 1_534_032_000_000_000
    assert ch.time_segments.shape == (1, 2)
    assert ch.gaps.shape == (0, 2)


def test_numeric_sampling_is_converted():
    ch = SeisChannel(
        name="x",
        samples=np.ones(3),
        sampling=0,
        time_segments=_segments([0, 10], [1, 20], [2, 35]),
    )
    assert isinstance(ch.sampling, Irregular)
    assert ch.sample_rate == 0.0
    assert not ch.is_regular

    assert sampling_from_rate(100) == Regular(100.0)


def test_regular_rejects_non_positive_rate():
    with pytest.raises(InvalidChannel):
        Regular(-1.0)
    with pytest.raises(InvalidChannel):
        Regular(float("inf"))


def test_period_us():
    assert Regular(100.0).period_us == 10_000
    assert Regular(3.0).period_us == 333_333


def test_channel_rejects_empty_name():
    with pytest.raises(InvalidChannel):
        SeisChannel.gapless("  ", np.ones(3), 1.0, 0.0)


def test_channel_rejects_non_1d_samples():
    with pytest.raises(InvalidChannel):
        SeisChannel(name="x", samples=np.ones((2, 2)), sampling=Regular(1.0), time_segments=_segments([0, 0]))


@pytest.mark.parametrize(
    "segments",
    [
        np.zeros((0, 2), dtype=np.int64),   # no rows
        np.zeros((2, 3), dtype=np.int64),   # wrong width
        _segments([1, 0]),                  # must start at sample 0
        _segments([0, 0], [5, 10], [3, 10]),  # unsorted
        _segments([0, 0], [10, 10]),        # index past the end
        np.array([[0.0, 0.5]]),             # fractional microseconds
    ],
)
def test_channel_rejects_bad_time_segments(segments):
    with pytest.raises(InvalidChannel):
        SeisChannel(name="x", samples=np.ones(10), sampling=Regular(1.0), time_segments=segments)


def test_float_segments_holding_integers_are_accepted():
    ch = SeisChannel(name="x", samples=np.ones(10), sampling=Regular(1.0), time_segments=np.array([[0.0, 5.0]]))
    assert ch.time_segments.dtype == np.int64
    assert ch.start_us == 5


def test_gaps_exposes_rows_after_the_first():
    ch = SeisChannel(
        name="x",
        samples=np.ones(10),
        sampling=Regular(1.0),
        time_segments=_segments([0, 0], [4, 2_000_000], [9, 0]),
    )
    assert np.array_equal(ch.gaps, [[4, 2_000_000], [9, 0]])


def test_rename_and_with_samples_copy_meta():
    ch = SeisChannel.gapless("a", np.ones(4), 1.0, 0.0, meta=ChannelMeta(unit="m/s", attrs={"k": 1}))

    ch2 = ch.rename("b")
    assert ch2.name == "b"
    assert ch2.unit == "m/s"
    assert ch2.meta.attrs == {"k": 1}
    assert ch2.meta.attrs is not ch.meta.attrs

    ch3 = ch.with_samples(np.zeros(4))
    assert ch3.name == "a"
    assert np.array_equal(ch3.samples, np.zeros(4))
    assert np.array_equal(ch3.time_segments, ch.time_segments)


def test_to_numpy_copy_flag():
    ch = SeisChannel.gapless("a", np.arange(3.0), 1.0, 0.0)
    x, t = ch.to_numpy()
    assert x is ch.samples and t is ch.time_segments
    x_cp, t_cp = ch.to_numpy(copy=True)
    assert x_cp is not ch.samples and np.array_equal(x_cp, ch.samples)
