"""
Locale-independent number formatting for TikZ output.

TeX parses coordinates with a fixed '.' decimal point, so numbers are
never passed through locale-aware formatting. Python's format mini
language without the 'n' type is locale-independent; the helpers here
only add the rules TikZ output needs on top of it.
"""

from typing import Tuple

Point = Tuple[float, float]


def format_number(value: float, precision: int) -> str:
    """
    Formats a number in fixed-point notation with exactly `precision`
    fractional digits, e.g. format_number(2.345, 2) -> '2.35'
    (subject to binary rounding).

    A value that rounds to zero is written as an unsigned zero, so
    -0.001 at precision 2 gives '0.00' rather than '-0.00'.
    """
    precision = max(0, int(precision))
    text = f"{float(value):.{precision}f}"
    if text.startswith("-") and float(text) == 0.0:
        text = text[1:]
    return text


def format_real(value: float) -> str:
    """
    Formats a number in general notation with six significant digits,
    which is what color channel values use. Independent of the
    coordinate precision.
    """
    text = f"{float(value):g}"
    if text == "-0":
        text = "0"
    return text


def format_coord(point: Point, precision: int) -> str:
    """Formats a point as a TikZ coordinate, e.g. '(1.00, 2.50)'."""
    x, y = point
    return (
        f"({format_number(x, precision)}, {format_number(y, precision)})"
    )
