"""
Frame_Sampler.py

Opens a movie and yields frames spaced evenly across its length,
one frame for each column of the art image.
"""

import math

import cv2

from Video_to_Art.Art_Errors import SourceOpenError


class CvVideoSource:
    """Thin wrapper around cv2.VideoCapture exposing only what the sampler needs."""

    def __init__(self, path):
        self.path = str(path)
        self.cap = cv2.VideoCapture(self.path)

    def is_opened(self):
        return self.cap.isOpened()

    def read(self):
        ret, frame = self.cap.read()
        if not ret or frame is None or frame.size == 0:
            return None
        return frame

    def seek(self, frame_index):
        self.cap.set(cv2.CAP_PROP_POS_FRAMES, frame_index)

    def frame_count(self):
        count = self.cap.get(cv2.CAP_PROP_FRAME_COUNT)
        if not count or math.isnan(count) or count < 0:
            return 0
        return int(count)

    def dimensions(self):
        w = int(self.cap.get(cv2.CAP_PROP_FRAME_WIDTH))
        h = int(self.cap.get(cv2.CAP_PROP_FRAME_HEIGHT))
        return w, h

    def release(self):
        self.cap.release()


def open_video_source(path):
    source = CvVideoSource(path)
    if not source.is_opened():
        source.release()
        raise SourceOpenError(path)
    return source


def compute_stride(total_frames, sample_count):
    if sample_count <= 0:
        return 0
    return total_frames // sample_count


def sample_frames(source, sample_count, on_start=None):
    """
    Yield (frame_index, frame) for up to sample_count frames of source.

    The first frame is read and thrown away before the frame count is
    queried; some containers only report it correctly after a read.
    A stride of 0 (fewer frames than samples) steps one frame at a time.
    An empty read ends the sequence early.

    on_start, if given, is called once with (total_frames, stride)
    before the first sample is read.
    """
    source.read()

    total_frames = source.frame_count()
    stride = compute_stride(total_frames, sample_count)
    step = max(stride, 1)
    if on_start is not None:
        on_start(total_frames, stride)

    current_frame = 0
    produced = 0
    while current_frame < total_frames and produced < sample_count:
        source.seek(current_frame)
        frame = source.read()
        if frame is None:
            break

        yield current_frame, frame

        current_frame += step
        produced += 1
