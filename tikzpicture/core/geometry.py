from __future__ import annotations
import logging
from copy import deepcopy
from dataclasses import dataclass
from typing import (
    Any,
    Dict,
    Iterable,
    Iterator,
    List,
    Optional,
    Sequence,
    Tuple,
    TypeVar,
    Union,
)
import numpy as np

logger = logging.getLogger(__name__)

Point = Tuple[float, float]
PointsLike = Union[Sequence[Sequence[float]], np.ndarray]

T_Path = TypeVar("T_Path", bound="Path")


def _to_point_array(points: PointsLike) -> np.ndarray:
    """Converts a sequence of (x, y) pairs into a float (N, 2) array."""
    arr = np.asarray(points, dtype=float)
    if arr.size == 0:
        return np.empty((0, 2), dtype=float)
    if arr.ndim != 2 or arr.shape[1] != 2:
        raise ValueError(
            f"Expected a sequence of (x, y) points, got shape {arr.shape}"
        )
    return arr


class PathElement:
    """Base for all path elements. Every element carries one point."""

    def __init__(self, x: float, y: float) -> None:
        self.end: Point = (float(x), float(y))

    @property
    def x(self) -> float:
        return self.end[0]

    @property
    def y(self) -> float:
        return self.end[1]

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.x!r}, {self.y!r})"

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.end == other.end  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((self.__class__.__name__, self.end))

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.__class__.__name__, "end": self.end}


class MoveToElement(PathElement):
    """Starts a new sub-path at its point."""

    pass


class LineToElement(PathElement):
    """A straight segment to its point."""

    pass


class CurveToElement(PathElement):
    """
    Starts a cubic Bezier segment. Its point is the first control point.
    It must be followed by two CurveToDataElements: the second control
    point and the end point of the curve.
    """

    pass


class CurveToDataElement(PathElement):
    """Carries the remaining points of a cubic Bezier segment."""

    pass


@dataclass(frozen=True)
class Rect:
    """
    An axis-aligned rectangle given by its left/top and right/bottom
    edges. A rectangle with a non-positive width or height is empty.
    """

    left: float
    top: float
    right: float
    bottom: float

    @classmethod
    def from_corners(cls, p: Point, q: Point) -> Rect:
        """Creates a normalized rectangle spanned by two corner points."""
        return cls(
            min(p[0], q[0]),
            min(p[1], q[1]),
            max(p[0], q[0]),
            max(p[1], q[1]),
        )

    @classmethod
    def from_size(
        cls, x: float, y: float, width: float, height: float
    ) -> Rect:
        return cls(x, y, x + width, y + height)

    @property
    def width(self) -> float:
        return self.right - self.left

    @property
    def height(self) -> float:
        return self.bottom - self.top

    @property
    def top_left(self) -> Point:
        return self.left, self.top

    @property
    def bottom_right(self) -> Point:
        return self.right, self.bottom

    def is_empty(self) -> bool:
        return self.width <= 0 or self.height <= 0


class Polyline:
    """An ordered sequence of points, optionally closed."""

    def __init__(self, points: PointsLike, closed: bool = False) -> None:
        self.points: np.ndarray = _to_point_array(points)
        self.closed: bool = closed

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[Point]:
        for x, y in self.points:
            yield float(x), float(y)

    def __repr__(self) -> str:
        return f"Polyline({len(self)} points, closed={self.closed})"


@dataclass(frozen=True)
class Circle:
    center: Point
    radius: float


class Path:
    """
    An ordered sequence of path elements. A MoveToElement starts a new
    sub-path; all following elements up to the next MoveToElement belong
    to it.
    """

    def __init__(self, elements: Optional[Iterable[PathElement]] = None):
        self.elements: List[PathElement] = list(elements or [])

    def __iter__(self) -> Iterator[PathElement]:
        return iter(self.elements)

    def __len__(self) -> int:
        return len(self.elements)

    def __repr__(self) -> str:
        return f"Path({self.elements!r})"

    def copy(self: T_Path) -> T_Path:
        """Creates a deep copy of the Path object."""
        return self.__class__(deepcopy(self.elements))

    def is_empty(self) -> bool:
        return not self.elements

    def clear(self) -> None:
        self.elements = []

    def add(self, element: PathElement) -> None:
        self.elements.append(element)

    def move_to(self, x: float, y: float) -> None:
        self.elements.append(MoveToElement(x, y))

    def line_to(self, x: float, y: float) -> None:
        self.elements.append(LineToElement(x, y))

    def cubic_to(
        self,
        c1x: float,
        c1y: float,
        c2x: float,
        c2y: float,
        x: float,
        y: float,
    ) -> None:
        """
        Appends a cubic Bezier segment from the current point to (x, y)
        with the control points (c1x, c1y) and (c2x, c2y).
        """
        self.elements.append(CurveToElement(c1x, c1y))
        self.elements.append(CurveToDataElement(c2x, c2y))
        self.elements.append(CurveToDataElement(x, y))

    def element_count(self) -> int:
        return len(self.elements)

    def subpath_count(self) -> int:
        return sum(1 for e in self.elements if isinstance(e, MoveToElement))

    def bounding_rect(self) -> Optional[Rect]:
        """
        Returns the rectangle spanned by all element points, including
        control points, or None for an empty path.
        """
        if not self.elements:
            return None
        pts = np.array([e.end for e in self.elements], dtype=float)
        x_min, y_min = pts.min(axis=0)
        x_max, y_max = pts.max(axis=0)
        return Rect(float(x_min), float(y_min), float(x_max), float(y_max))

    def to_dict(self) -> Dict[str, Any]:
        return {"elements": [e.to_dict() for e in self.elements]}

    @classmethod
    def from_points(cls, points: PointsLike, closed: bool = False) -> Path:
        """
        Builds a single straight-line sub-path through the given points.
        A closed sub-path ends with a line back to its first point.
        """
        path = cls()
        arr = _to_point_array(points)
        if len(arr) == 0:
            return path
        path.move_to(*arr[0])
        for x, y in arr[1:]:
            path.line_to(x, y)
        if closed and len(arr) > 1:
            path.line_to(*arr[0])
        return path

    @classmethod
    def from_rect(cls, rect: Rect) -> Path:
        """Builds a closed sub-path along the edges of a rectangle."""
        path = cls()
        if rect.is_empty():
            logger.debug(f"Skipping empty rectangle {rect}")
            return path
        path.move_to(rect.left, rect.top)
        path.line_to(rect.right, rect.top)
        path.line_to(rect.right, rect.bottom)
        path.line_to(rect.left, rect.bottom)
        path.line_to(rect.left, rect.top)
        return path
