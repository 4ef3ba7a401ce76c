from abc import ABC, abstractmethod
from typing import Any


class GeometryEncoder(ABC):
    """
    Transforms geometry (paths, rectangles, polylines, circles) into
    something else. Examples:

    - Geometry to TikZ path text
    """

    @abstractmethod
    def encode(self, geometry: Any, *args, **kwargs) -> Any:
        pass
