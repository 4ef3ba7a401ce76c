"""
The core module contains the geometry and color value types that the
encoder and the picture consume.
"""

from .color import (
    BASIC_COLORS,
    Color,
    basic_color_name,
    canonical_color_name,
)
from .geometry import (
    Circle,
    CurveToDataElement,
    CurveToElement,
    LineToElement,
    MoveToElement,
    Path,
    PathElement,
    Polyline,
    Rect,
)

__all__ = [
    "BASIC_COLORS",
    "Color",
    "basic_color_name",
    "canonical_color_name",
    "Circle",
    "CurveToDataElement",
    "CurveToElement",
    "LineToElement",
    "MoveToElement",
    "Path",
    "PathElement",
    "Polyline",
    "Rect",
]
