"""
Export drawing primitives to PGF/TikZ.

The package writes paths, rectangles, polylines and circles as TikZ
commands to a text stream, and generates names for arbitrary colors.
"""

from .config import ConfigManager, PictureConfig
from .core.color import Color
from .core.geometry import Circle, Path, Polyline, Rect
from .encoder.tikz import TikzEncoder
from .picture import TikzPicture
from .registry import ColorRegistry

__all__ = [
    "Circle",
    "Color",
    "ColorRegistry",
    "ConfigManager",
    "Path",
    "PictureConfig",
    "Polyline",
    "Rect",
    "TikzEncoder",
    "TikzPicture",
]
