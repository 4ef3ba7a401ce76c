import logging
from enum import Enum, auto
from typing import List, Tuple
from ..core.geometry import (
    Circle,
    CurveToDataElement,
    CurveToElement,
    LineToElement,
    MoveToElement,
    Path,
    Point,
    Polyline,
    Rect,
)
from ..util.formatting import format_coord, format_number
from .base import GeometryEncoder


logger = logging.getLogger(__name__)


class SegmentState(Enum):
    """Progress through the points of a cubic Bezier segment."""

    IDLE = auto()
    AWAITING_SECOND_CONTROL = auto()
    AWAITING_CURVE_END = auto()


class TikzEncoder(GeometryEncoder):
    """
    Encodes geometry as TikZ path text, e.g.
    '(0.00, 0.00) -- (1.00, 1.00)'. The result is the geometry part of a
    command only; wrapping it into \\draw etc. is up to the caller.
    An empty string means there is nothing to draw.
    """

    def __init__(self, precision: int = 2, indent: str = "    ") -> None:
        self.precision = max(0, precision)
        self.indent = indent

    def encode(self, geometry, *args, **kwargs) -> str:
        match geometry:
            case Path():
                return self.encode_path(geometry)
            case Rect():
                return self.encode_rect(geometry)
            case Polyline():
                return self.encode_polyline(geometry)
            case Circle():
                return self.encode_circle(geometry)
            case _:
                raise TypeError(
                    f"Cannot encode {type(geometry).__name__} as TikZ"
                )

    def format_coord(self, point: Point) -> str:
        return format_coord(point, self.precision)

    def encode_path(self, path: Path) -> str:
        """
        Converts a path into TikZ path text. Each sub-path that is
        followed by another one is closed with '-- cycle'; the last
        sub-path is written as it is. Sub-paths are separated by
        newlines, continuation lines are indented.

        A sub-path made of a single move_to draws nothing and is dropped.
        """
        subpaths: List[str] = []
        current = ""
        extended = False
        state = SegmentState.IDLE

        for element in path:
            coord = self.format_coord(element.end)
            match element:
                case MoveToElement():
                    if extended:
                        subpaths.append(current + " -- cycle")
                    current = (self.indent if subpaths else "") + coord
                    extended = False
                    state = SegmentState.IDLE
                case _ if not current:
                    logger.debug(
                        f"Ignoring {element!r} before the first move_to"
                    )
                case LineToElement():
                    current += " -- " + coord
                    extended = True
                case CurveToElement():
                    current += " .. controls " + coord
                    extended = True
                    state = SegmentState.AWAITING_SECOND_CONTROL
                case CurveToDataElement():
                    current, state = self._curve_data(current, coord, state)

        if extended:
            subpaths.append(current)
        return "\n".join(subpaths)

    def _curve_data(
        self, current: str, coord: str, state: SegmentState
    ) -> Tuple[str, SegmentState]:
        match state:
            case SegmentState.AWAITING_SECOND_CONTROL:
                return (
                    current + " and " + coord,
                    SegmentState.AWAITING_CURVE_END,
                )
            case SegmentState.AWAITING_CURVE_END:
                return current + " .. " + coord, SegmentState.IDLE
            case _:
                logger.debug(
                    f"Discarding curve data {coord} without a pending curve"
                )
                return current, state

    def encode_clip_path(self, path: Path) -> str:
        """
        Converts a path into a clipping region. Only straight sub-paths
        are supported; every sub-path is closed, including the last one.
        """
        subpaths: List[str] = []
        current = ""
        extended = False

        for element in path:
            coord = self.format_coord(element.end)
            match element:
                case MoveToElement():
                    if extended:
                        subpaths.append(current + " -- cycle")
                    current = ("      " if subpaths else "") + coord
                    extended = False
                case LineToElement() if current:
                    current += " -- " + coord
                    extended = True
                case LineToElement():
                    logger.debug(
                        f"Ignoring {element!r} before the first move_to"
                    )
                case _:
                    logger.warning(
                        f"Unknown path element for clipping: {element!r}"
                    )

        if extended:
            subpaths.append(current + " -- cycle")
        return "\n".join(subpaths)

    def encode_rect(self, rect: Rect) -> str:
        if rect.is_empty():
            logger.debug(f"Skipping empty rectangle {rect}")
            return ""
        return (
            f"{self.format_coord(rect.top_left)} rectangle "
            f"{self.format_coord(rect.bottom_right)}"
        )

    def encode_line(self, p: Point, q: Point) -> str:
        return f"{self.format_coord(p)} -- {self.format_coord(q)}"

    def encode_polyline(self, polyline: Polyline) -> str:
        if len(polyline) < 2:
            logger.debug(f"Skipping polyline with {len(polyline)} point(s)")
            return ""
        text = " -- ".join(self.format_coord(pt) for pt in polyline)
        if polyline.closed:
            text += " -- cycle"
        return text

    def encode_circle(self, circle: Circle) -> str:
        if not circle.radius > 0:
            logger.debug(f"Skipping circle with radius {circle.radius}")
            return ""
        radius = format_number(circle.radius, self.precision)
        return f"{self.format_coord(circle.center)} circle ({radius}cm)"
