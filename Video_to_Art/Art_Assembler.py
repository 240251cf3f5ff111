"""
Art_Assembler.py

Holds the art raster, writes reduced columns into it and saves the result.
"""

import csv
import os

import cv2
import numpy as np

from Video_to_Art.Art_Errors import OutputWriteError

META_FIELDS = ["column", "frame_index", "style", "status"]


def new_art_image(art_width, art_height):
    return np.zeros((art_height, art_width, 3), dtype=np.uint8)


def write_column(art_image, column, column_id):
    # column_id is kept in range by the sampling loop
    art_image[:, column_id, :] = column


def save_art_image(art_image, path, writer=cv2.imwrite):
    """
    Write the art raster to path; the format follows the extension.

    Raises OutputWriteError when the directory can't be created, the
    extension has no encoder or the writer reports failure.
    """
    out_dir = os.path.dirname(str(path))
    try:
        if out_dir:
            os.makedirs(out_dir, exist_ok=True)
        ok = writer(str(path), art_image)
    except (OSError, cv2.error) as e:
        raise OutputWriteError(path, str(e).strip()) from e
    if not ok:
        raise OutputWriteError(path, "encoder returned failure")
    return str(path)


def write_sample_metadata(samples, path):
    out_dir = os.path.dirname(str(path))
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)
    with open(path, 'w', newline='') as f:
        writer = csv.DictWriter(f, fieldnames=META_FIELDS)
        writer.writeheader()
        writer.writerows(samples)
    return str(path)
