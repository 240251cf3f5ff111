"""
Movie_Wall_Art.py

Builds the wall art for one movie:

1) Opens the movie and samples up to ART_WIDTH evenly spaced frames
2) Reduces every sampled frame to one column of ART_HEIGHT colors
3) Writes the columns left to right into the art raster

Produces:
   - the art raster (saved by the caller)
   - a run report with one entry per sampled column
"""

import cv2
from tqdm import tqdm

from Video_to_Art.Art_Assembler import new_art_image, write_column
from Video_to_Art.Art_Config import ArtConfig
from Video_to_Art.Art_Errors import SourceOpenError, UnknownStyleError
from Video_to_Art.Column_Reducer import reduce_frame
from Video_to_Art.Frame_Sampler import open_video_source, sample_frames


def new_report():
    return {
        "source_opened": False,
        "total_frames": 0,
        "stride": 0,
        "columns_written": 0,
        "skipped_columns": [],
        "samples": [],
    }


def create_movie_wall_art(config=None, open_source=open_video_source, preview=None):
    """
    Sample the movie in config.movie_path and return (art_image, report).

    open_source(path) must return an object with read/seek/frame_count/
    dimensions/release, or raise SourceOpenError. An unopenable movie gives
    an all-black image. Columns whose reduction fails are left black and
    listed in report["skipped_columns"]. The source is always released.
    """
    config = config or ArtConfig()
    art_image = new_art_image(config.art_width, config.art_height)
    report = new_report()

    try:
        source = open_source(config.movie_path)
    except SourceOpenError as e:
        print(f"[ERROR] {e}")
        return art_image, report
    report["source_opened"] = True

    pbar = tqdm(total=config.art_width, desc="Movie Wall Art", unit="col")

    def on_start(total_frames, stride):
        report["total_frames"] = total_frames
        report["stride"] = stride
        w, h = source.dimensions()
        pbar.write(f"[INFO] Opened {config.movie_path} | frames={total_frames} | "
                   f"size={w}x{h} | stride={stride} | style={config.art_style}")

    try:
        column_id = 0
        for frame_index, frame in sample_frames(source, config.art_width, on_start=on_start):
            status = "ok"
            try:
                column = reduce_frame(frame, config.art_style, config.art_height)
                write_column(art_image, column, column_id)
                report["columns_written"] += 1
            except (UnknownStyleError, ValueError, cv2.error) as e:
                status = "skipped"
                report["skipped_columns"].append(column_id)
                pbar.write(f"[WARN] Column {column_id} (frame {frame_index}) skipped: {e}")

            report["samples"].append({
                "column": column_id,
                "frame_index": frame_index,
                "style": config.art_style,
                "status": status,
            })

            if preview is not None:
                preview.show(frame, art_image, column_id)

            column_id += 1
            pbar.update(1)
    finally:
        pbar.close()
        source.release()
        if preview is not None:
            preview.close()

    if report["columns_written"] + len(report["skipped_columns"]) < config.art_width:
        print(f"[INFO] Movie ran out after {len(report['samples'])} columns, "
              f"remaining columns left black.")
    return art_image, report
