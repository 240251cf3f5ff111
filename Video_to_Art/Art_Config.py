"""
Art_Config.py

Defaults for a movie wall art run and the ArtConfig structure that
carries them into the pipeline.
"""

from dataclasses import dataclass
from typing import Optional

# =========================
# USER-TUNABLE PARAMETERS
# =========================
ART_WIDTH = 1080
ART_HEIGHT = 1920

MOVIE_PATH = "movie.mp4"
ART_PATH = "TEMP/movie_wall_art.png"

# Reduction styles
ART_STYLE_CENTER_PIXEL = "center_pixel"
ART_STYLE_AVERAGE_COLOR = "average_color"
ART_STYLE_PIXEL_STRIP = "pixel_strip"
ART_STYLES = (ART_STYLE_CENTER_PIXEL, ART_STYLE_AVERAGE_COLOR, ART_STYLE_PIXEL_STRIP)

ART_STYLE = ART_STYLE_AVERAGE_COLOR

# Preview / debug
SHOW_PREVIEW = False
PREVIEW_FPS = 300
PREVIEW_MAX_SIDE = 720

# Optional per-column CSV
META_PATH = None


@dataclass
class ArtConfig:
    art_width: int = ART_WIDTH
    art_height: int = ART_HEIGHT
    movie_path: str = MOVIE_PATH
    art_path: str = ART_PATH
    art_style: str = ART_STYLE
    show_preview: bool = SHOW_PREVIEW
    preview_fps: int = PREVIEW_FPS
    meta_path: Optional[str] = META_PATH

    def validate(self):
        if self.art_width <= 0 or self.art_height <= 0:
            raise ValueError(f"Art size must be positive, got {self.art_width}x{self.art_height}")
        if self.preview_fps <= 0:
            raise ValueError(f"Preview fps must be positive, got {self.preview_fps}")
        if self.art_style not in ART_STYLES:
            raise ValueError(f"Unknown art style {self.art_style!r}, expected one of {', '.join(ART_STYLES)}")
        return self
