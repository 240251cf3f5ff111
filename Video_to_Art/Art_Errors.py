"""
Art_Errors.py

Errors raised while building a movie wall art image.
The pipeline catches the source and style errors and keeps going;
only OutputWriteError is fatal to a run.
"""


class ArtError(RuntimeError):
    pass


class SourceOpenError(ArtError):
    """The video file is missing, unreadable or not decodable."""

    def __init__(self, path):
        super().__init__(f"Cannot open video: {path}")
        self.path = path


class UnknownStyleError(ArtError, ValueError):
    """A reduction style name that has no reducer."""

    def __init__(self, style):
        super().__init__(f"Style not set or found: {style!r}")
        self.style = style


class OutputWriteError(ArtError):
    """The finished art image could not be written to disk."""

    def __init__(self, path, reason=""):
        message = f"Cannot write art image: {path}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)
        self.path = path
