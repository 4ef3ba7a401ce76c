from .base import GeometryEncoder
from .tikz import SegmentState, TikzEncoder

__all__ = [
    "GeometryEncoder",
    "SegmentState",
    "TikzEncoder",
]
