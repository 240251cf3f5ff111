import pytest

from fake_video import FakeVideoSource, uniform_frame
from Video_to_Art.Art_Errors import SourceOpenError
from Video_to_Art.Frame_Sampler import compute_stride, open_video_source, sample_frames


def test_compute_stride():
    assert compute_stride(100, 10) == 10
    assert compute_stride(105, 10) == 10
    assert compute_stride(9, 10) == 0
    assert compute_stride(0, 10) == 0


def test_samples_exactly_width_frames_spaced_by_stride():
    source = FakeVideoSource([uniform_frame(i) for i in range(105)])
    samples = list(sample_frames(source, 10))

    indices = [index for index, _ in samples]
    assert indices == list(range(0, 100, 10))
    assert source.seeks == indices
    # each yielded frame is the one at its index
    assert [int(frame[0, 0, 0]) for _, frame in samples] == indices


def test_warm_up_frame_read_before_sampling():
    source = FakeVideoSource([uniform_frame(i) for i in range(20)])
    samples = list(sample_frames(source, 4))
    assert len(samples) == 4
    # one warm-up read plus one per sample
    assert source.reads == 5


def test_on_start_reports_count_and_stride():
    seen = []
    source = FakeVideoSource([uniform_frame(i) for i in range(30)])
    list(sample_frames(source, 4, on_start=lambda total, stride: seen.append((total, stride))))
    assert seen == [(30, 7)]


def test_fewer_frames_than_width_samples_every_frame():
    source = FakeVideoSource([uniform_frame(i) for i in range(3)])
    samples = list(sample_frames(source, 5))
    assert [index for index, _ in samples] == [0, 1, 2]


def test_empty_read_ends_sampling_early():
    # container claims 100 frames but only 30 decode
    source = FakeVideoSource([uniform_frame(i) for i in range(30)], reported_count=100)
    samples = list(sample_frames(source, 10))
    assert [index for index, _ in samples] == [0, 10, 20]
    assert source.seeks == [0, 10, 20, 30]


def test_empty_source_yields_nothing():
    source = FakeVideoSource([])
    assert list(sample_frames(source, 10)) == []
    assert source.seeks == []


def test_open_missing_video_raises(tmp_path):
    with pytest.raises(SourceOpenError):
        open_video_source(str(tmp_path / "missing.mp4"))
