"""
Defines TikzPicture, which writes PGF/TikZ markup to a text stream.

A typical session looks like this:

    with open("picture.tikz", "w") as f:
        pic = TikzPicture()
        pic.set_stream(f)
        pic.begin()
        pic.line((0, 0), (1, 1), "thick, dashed")
        pic.draw(path, "fill=green!50, draw=green!50!black")
        pic.end()

Every method is a no-op while no stream is set. The picture does not
track begin/end nesting; balancing them is up to the caller.
"""

from __future__ import annotations
import logging
import numbers
from typing import Any, Optional, Protocol, Sequence, Union
from .config import PictureConfig
from .core.color import ColorLike, basic_color_name, to_color
from .core.geometry import Circle, Path, Point, PointsLike, Polyline, Rect
from .encoder.tikz import TikzEncoder
from .registry import ColorRegistry
from .util.formatting import format_number

logger = logging.getLogger(__name__)

Geometry = Union[Path, Rect, Polyline, Circle]


class TextSink(Protocol):
    def write(self, text: str, /) -> Any: ...


class TikzPicture:
    """
    Writes TikZ commands to an output stream. Owns the color registry,
    so every color is defined at most once per picture.
    """

    def __init__(self, config: Optional[PictureConfig] = None) -> None:
        """Initializes a TikzPicture without an output stream.

        Args:
            config: Output settings. A default PictureConfig is used if
              none is given. The picture follows later changes to it.
        """
        self.config: PictureConfig = config or PictureConfig()
        self.colors = ColorRegistry()
        self.encoder = TikzEncoder(
            self.config.precision, indent=self.config.indent
        )
        self._stream: Optional[TextSink] = None
        self._precision: int = self.config.precision

        self.config.changed.connect(self._on_config_changed)

    def _on_config_changed(
        self, sender: PictureConfig, field: Optional[str] = None, **kwargs
    ) -> None:
        # Precision set through set_stream() survives unrelated changes
        if field == "precision":
            self.precision = sender.precision
        elif field == "indent":
            self.encoder.indent = sender.indent

    @property
    def stream(self) -> Optional[TextSink]:
        return self._stream

    @property
    def precision(self) -> int:
        return self._precision

    @precision.setter
    def precision(self, precision: int) -> None:
        self._precision = max(0, int(precision))
        self.encoder.precision = self._precision

    def set_stream(
        self, stream: Optional[TextSink], precision: int = 2
    ) -> None:
        """
        Sets the output stream. Numbers are written in fixed-point
        notation with `precision` fractional digits, so a precision of
        2 gives numbers like '2.34'. Passing None detaches the stream.
        """
        self._stream = stream
        self.precision = precision
        logger.debug(
            f"Output stream set to {stream!r}, precision {self.precision}"
        )

    def _write(self, text: str) -> None:
        if self._stream is not None:
            self._stream.write(text)

    def register_color(self, color: ColorLike) -> str:
        """
        Returns a name to use for `color` in drawing options. The eight
        basic TikZ colors (red, green, blue, black, white, cyan, magenta,
        yellow) are returned by name. Any other color gets a generated
        name, and its \\definecolor is written the first time it is
        registered:

            col = pic.register_color(Color.from_rgb(100, 200, 0))
            pic.draw(path, "draw=" + col)
        """
        color = to_color(color)
        name = basic_color_name(color)
        if name is not None:
            return name
        write = self._write if self._stream is not None else None
        return self.colors.register(color, write)

    def _begin_env(self, environment: str, options: str) -> None:
        if self._stream is None:
            return
        if options:
            self._write(f"\\begin{{{environment}}}[{options}]\n")
        else:
            self._write(f"\\begin{{{environment}}}\n")

    def _end_env(self, environment: str) -> None:
        if self._stream is None:
            return
        self._write(f"\\end{{{environment}}}\n")

    def begin(self, options: str = "") -> None:
        """Opens the picture environment, i.e. \\begin{tikzpicture}."""
        self._begin_env(self.config.environment, options)

    def end(self) -> None:
        self._end_env(self.config.environment)

    def begin_scope(self, options: str = "") -> None:
        """
        Opens a nested scope. Every begin_scope() needs a matching
        end_scope() for the picture to be valid.
        """
        self._begin_env(self.config.scope_environment, options)

    def end_scope(self) -> None:
        self._end_env(self.config.scope_environment)

    def newline(self, count: int = 1) -> None:
        if self._stream is None or count <= 0:
            return
        self._write("\n" * count)

    def comment(self, text: str) -> None:
        if self._stream is None:
            return
        self._write(f"% {text}\n")

    def write_command(self, name: str, body: str, options: str = "") -> None:
        """
        Writes '\\name[options] body;'. Nothing is written for an empty
        body, which is how degenerate shapes vanish from the output.
        """
        if self._stream is None or not body:
            return
        opts = f"[{options}]" if options else ""
        self._write(f"\\{name}{opts} {body};\n")

    def path(self, geometry: Geometry, options: str = "") -> None:
        self.write_command("path", self.encoder.encode(geometry), options)

    def draw(self, geometry: Geometry, options: str = "") -> None:
        self.write_command("draw", self.encoder.encode(geometry), options)

    def fill(self, geometry: Geometry, options: str = "") -> None:
        self.write_command("fill", self.encoder.encode(geometry), options)

    def clip(self, geometry: Geometry) -> None:
        """
        Clips to `geometry` for the rest of the current scope. Use it
        together with begin_scope() and end_scope().
        """
        if isinstance(geometry, Path):
            body = self.encoder.encode_clip_path(geometry)
        else:
            body = self.encoder.encode(geometry)
        self.write_command("clip", body)

    def rectangle(self, rect: Rect, options: str = "") -> None:
        self.path(rect, options)

    def circle(self, center: Point, radius: float, options: str = "") -> None:
        self.draw(Circle(center, radius), options)

    def line(self, p: Point, q: Point, options: str = "") -> None:
        self.write_command("draw", self.encoder.encode_line(p, q), options)

    def polyline(
        self,
        points: Union[PointsLike, Sequence[Point]],
        options: str = "",
        closed: bool = False,
    ) -> None:
        self.draw(Polyline(points, closed=closed), options)

    def write(self, value: Union[str, int, float]) -> TikzPicture:
        """
        Writes `value` to the stream as it is, for full control over the
        output. Floats are rounded to the current precision.
        """
        if self._stream is None:
            return self
        match value:
            case bool():
                raise TypeError("Cannot write a bool to a TikZ picture")
            case str():
                if value:
                    self._write(value)
            case numbers.Integral():
                self._write(str(int(value)))
            case numbers.Real():
                self._write(format_number(float(value), self.precision))
            case _:
                raise TypeError(
                    f"Cannot write {type(value).__name__} to a TikZ picture"
                )
        return self

    def __lshift__(self, value: Union[str, int, float]) -> TikzPicture:
        return self.write(value)
