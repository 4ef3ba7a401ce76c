from __future__ import annotations
import re
from dataclasses import dataclass
from typing import Dict, Optional, Tuple, Union

# An 8 bit per channel RGB triple.
RGB255 = Tuple[int, int, int]

_HEX_RE = re.compile(r"^#?([0-9a-fA-F]{6})$")

# Hex digits map onto 'q'..'z' because TeX color names may not contain
# digits. Letters a-f stay as they are, so the mapping is injective.
_DIGIT_TABLE = str.maketrans("0123456789", "qrstuvwxyz")


@dataclass(frozen=True)
class Color:
    """An RGB color with float channels in the range [0, 1]."""

    red: float
    green: float
    blue: float

    def __post_init__(self) -> None:
        for channel in (self.red, self.green, self.blue):
            if not 0.0 <= channel <= 1.0:
                raise ValueError(
                    f"Color channels must be within [0, 1], got {self}"
                )

    @classmethod
    def from_rgb(cls, red: int, green: int, blue: int) -> Color:
        """Creates a color from 0-255 channel values."""
        for channel in (red, green, blue):
            if not 0 <= channel <= 255:
                raise ValueError(
                    f"Color channels must be within [0, 255], got "
                    f"({red}, {green}, {blue})"
                )
        return cls(red / 255.0, green / 255.0, blue / 255.0)

    @classmethod
    def from_hex(cls, value: str) -> Color:
        """Creates a color from a '#rrggbb' (or 'rrggbb') string."""
        m = _HEX_RE.match(value.strip())
        if not m:
            raise ValueError(f"Invalid hex color: {value!r}")
        digits = m.group(1)
        return cls.from_rgb(
            int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16)
        )

    def to_rgb255(self) -> RGB255:
        return (
            int(round(self.red * 255)),
            int(round(self.green * 255)),
            int(round(self.blue * 255)),
        )

    def hex_name(self) -> str:
        """Returns the six lowercase hex digits of the color, no '#'."""
        return "{:02x}{:02x}{:02x}".format(*self.to_rgb255())


ColorLike = Union[Color, RGB255]

# Colors PGF/TikZ knows without a \definecolor.
BASIC_COLORS: Dict[str, RGB255] = {
    "red": (255, 0, 0),
    "green": (0, 255, 0),
    "blue": (0, 0, 255),
    "black": (0, 0, 0),
    "white": (255, 255, 255),
    "cyan": (0, 255, 255),
    "magenta": (255, 0, 255),
    "yellow": (255, 255, 0),
}

# Keyed by the exact float channels, so near-basic colors get defined.
_BASIC_BY_COLOR: Dict[Color, str] = {
    Color.from_rgb(*rgb): name for name, rgb in BASIC_COLORS.items()
}


def to_color(value: ColorLike) -> Color:
    """Accepts a Color or a (r, g, b) tuple of 0-255 values."""
    if isinstance(value, Color):
        return value
    red, green, blue = value
    return Color.from_rgb(red, green, blue)


def basic_color_name(color: Color) -> Optional[str]:
    """Returns the predefined TikZ name of `color`, or None."""
    return _BASIC_BY_COLOR.get(color)


def canonical_color_name(color: Color) -> str:
    """
    Returns the digit-free TeX identifier for `color`, e.g.
    Color.from_rgb(100, 200, 0) -> 'cwucyqq'.
    """
    return "c" + color.hex_name().lower().translate(_DIGIT_TABLE)
