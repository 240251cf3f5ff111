"""
In-memory stand-in for CvVideoSource used by the tests.
"""

import numpy as np


def uniform_frame(value, h=2, w=2):
    return np.full((h, w, 3), value, dtype=np.uint8)


class FakeVideoSource:
    def __init__(self, frames, reported_count=None):
        self.frames = list(frames)
        self.reported_count = len(self.frames) if reported_count is None else reported_count
        self.pos = 0
        self.seeks = []
        self.reads = 0
        self.released = False

    def is_opened(self):
        return True

    def read(self):
        self.reads += 1
        if self.pos >= len(self.frames):
            return None
        frame = self.frames[self.pos]
        self.pos += 1
        return frame

    def seek(self, frame_index):
        self.seeks.append(frame_index)
        self.pos = frame_index

    def frame_count(self):
        return self.reported_count

    def dimensions(self):
        if not self.frames:
            return 0, 0
        h, w = self.frames[0].shape[:2]
        return w, h

    def release(self):
        self.released = True
