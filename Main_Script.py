#!/usr/bin/env python3
# movie wall art runner
import argparse
import sys
from datetime import datetime

from Tools.Preview_Window import PreviewWindow
from Video_to_Art import Art_Config
from Video_to_Art.Art_Assembler import save_art_image, write_sample_metadata
from Video_to_Art.Art_Config import ArtConfig
from Video_to_Art.Art_Errors import OutputWriteError
from Video_to_Art.Movie_Wall_Art import create_movie_wall_art


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Turn a movie into a one-column-per-frame wall art image")
    parser.add_argument('-i', '--input', dest='movie_path', default=Art_Config.MOVIE_PATH,
                        help='movie file to sample')
    parser.add_argument('-o', '--output', dest='art_path', default=Art_Config.ART_PATH,
                        help='art image to write, format from extension (png recommended)')
    parser.add_argument('-W', '--width', dest='art_width', type=int, default=Art_Config.ART_WIDTH,
                        help='art width in pixels, one sampled frame per column')
    parser.add_argument('-H', '--height', dest='art_height', type=int, default=Art_Config.ART_HEIGHT,
                        help='art height in pixels')
    parser.add_argument('-s', '--style', dest='art_style', choices=Art_Config.ART_STYLES,
                        default=Art_Config.ART_STYLE, help='how each frame is reduced to a column')
    parser.add_argument('-p', '--preview', dest='show_preview', action='store_true',
                        default=Art_Config.SHOW_PREVIEW, help='show a live preview window')
    parser.add_argument('--preview-fps', dest='preview_fps', type=int, default=Art_Config.PREVIEW_FPS,
                        help='preview refresh rate')
    parser.add_argument('-m', '--meta', dest='meta_path', default=Art_Config.META_PATH,
                        help='optional CSV listing the frame sampled for each column')
    return parser.parse_args(argv)


def config_from_args(args):
    return ArtConfig(
        art_width=args.art_width,
        art_height=args.art_height,
        movie_path=args.movie_path,
        art_path=args.art_path,
        art_style=args.art_style,
        show_preview=args.show_preview,
        preview_fps=args.preview_fps,
        meta_path=args.meta_path,
    )


def run(config):
    ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    print(f"[{ts}] Running: {config.movie_path} -> {config.art_path}")

    preview = None
    if config.show_preview:
        preview = PreviewWindow(fps=config.preview_fps, max_side=Art_Config.PREVIEW_MAX_SIDE)

    art_image, report = create_movie_wall_art(config, preview=preview)

    try:
        out_path = save_art_image(art_image, config.art_path)
    except OutputWriteError as e:
        print(f"[{ts}] Error: {e}")
        return 1
    print(f"[INFO] Saved art: {out_path} ({report['columns_written']} columns, "
          f"{len(report['skipped_columns'])} skipped)")

    if config.meta_path:
        try:
            meta_path = write_sample_metadata(report["samples"], config.meta_path)
            print(f"[INFO] Saved metadata CSV: {meta_path}")
        except OSError as e:
            print(f"[WARN] Could not write metadata CSV {config.meta_path}: {e}")

    ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    print(f"[{ts}] Completed: {config.art_path}")
    return 0


def main(argv=None):
    args = parse_args(argv)
    try:
        config = config_from_args(args).validate()
    except ValueError as e:
        print(f"[ERROR] {e}")
        return 1
    return run(config)


if __name__ == "__main__":
    sys.exit(main())
