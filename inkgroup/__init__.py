"""InkGroup — clusters freehand strokes into drawn objects."""

__version__ = "0.1.0"
