"""
Column_Reducer.py

Collapses one video frame into one column of the art image.

Every reducer takes a BGR frame of shape (h, w, 3) and the art height
and returns a uint8 array of shape (art_height, 3).
"""

import numpy as np

from Video_to_Art.Art_Config import (
    ART_STYLE_AVERAGE_COLOR,
    ART_STYLE_CENTER_PIXEL,
    ART_STYLE_PIXEL_STRIP,
)
from Video_to_Art.Art_Errors import UnknownStyleError


def reduce_center_pixel(frame, art_height):
    frame_h, frame_w = frame.shape[:2]
    pixel = frame[frame_h // 2, frame_w // 2]
    return np.tile(pixel.astype(np.uint8), (art_height, 1))


def reduce_average_color(frame, art_height):
    frame_h, frame_w = frame.shape[:2]
    # int64 sums stay exact well past 8K frames
    totals = frame.sum(axis=(0, 1), dtype=np.int64)
    color = (totals // (frame_h * frame_w)).astype(np.uint8)
    return np.tile(color, (art_height, 1))


def reduce_pixel_strip(frame, art_height):
    """
    Average consecutive runs of pixels, one run per output row.

    Pixels are scanned column by column (outer loop over x, inner over y).
    Strip k starts at k * s, with s = (w * h) // art_height, and is closed
    once its count goes past s, so it takes one extra pixel: the first
    pixel of strip k + 1. That shared pixel biases every row slightly
    toward the next strip. The last strip is cut short at the end of the
    scan, and on frames with fewer pixels than rows the rows past the
    last pixel stay black.
    """
    frame_h, frame_w = frame.shape[:2]
    column = np.zeros((art_height, 3), dtype=np.uint8)

    pixels = frame.transpose(1, 0, 2).reshape(-1, 3)
    pixel_count = len(pixels)
    nominal = pixel_count // art_height
    step = max(nominal, 1)
    span = nominal + 1 if nominal else 1

    starts = np.arange(art_height, dtype=np.int64) * step
    ends = np.minimum(starts + span, pixel_count)
    reached = ends > starts
    starts, ends = starts[reached], ends[reached]
    if len(starts) == 0:
        return column

    # a trailing black pixel keeps every end index inside the array
    padded = np.concatenate([pixels, np.zeros((1, 3), dtype=pixels.dtype)])
    bounds = np.column_stack([starts, ends]).ravel()
    sums = np.add.reduceat(padded, bounds, axis=0, dtype=np.int64)[::2]
    column[:len(starts)] = sums // (ends - starts)[:, None]

    return column


REDUCERS = {
    ART_STYLE_CENTER_PIXEL: reduce_center_pixel,
    ART_STYLE_AVERAGE_COLOR: reduce_average_color,
    ART_STYLE_PIXEL_STRIP: reduce_pixel_strip,
}


def reduce_frame(frame, style, art_height):
    reducer = REDUCERS.get(style)
    if reducer is None:
        raise UnknownStyleError(style)
    if frame.ndim != 3 or frame.shape[2] != 3 or frame.shape[0] == 0 or frame.shape[1] == 0:
        raise ValueError(f"Expected a (h, w, 3) frame, got shape {frame.shape}")
    return reducer(frame, art_height)
