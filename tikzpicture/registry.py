"""
The color registry hands out TeX color names and makes sure every
\\definecolor is written only once per picture.
"""

import logging
from typing import Callable, Dict, List, Optional
from blinker import Signal
from .core.color import Color, canonical_color_name
from .util.formatting import format_real

logger = logging.getLogger(__name__)


class ColorRegistry:
    """
    Maps canonical color names to their defined state. Names are added
    exactly once and never removed.
    """

    def __init__(self) -> None:
        self._defined: Dict[str, bool] = {}
        # Sent once for every newly defined color.
        self.color_defined = Signal()

    def __contains__(self, name: object) -> bool:
        return name in self._defined

    def __len__(self) -> int:
        return len(self._defined)

    def names(self) -> List[str]:
        """Returns the defined names in definition order."""
        return list(self._defined)

    def register(
        self, color: Color, write: Optional[Callable[[str], object]] = None
    ) -> str:
        """
        Returns the canonical name of `color`. The first time a name is
        seen, its \\definecolor command is passed to `write` (if given)
        and the name is recorded.
        """
        name = canonical_color_name(color)
        if name in self._defined:
            return name

        if write is not None:
            write(definecolor(name, color))
        self._defined[name] = True
        logger.debug(f"Defined color {name} for #{color.hex_name()}")
        self.color_defined.send(self, name=name, color=color)
        return name


def definecolor(name: str, color: Color) -> str:
    return (
        f"\\definecolor{{{name}}}{{rgb}}{{{format_real(color.red)}, "
        f"{format_real(color.green)}, {format_real(color.blue)}}}\n"
    )
