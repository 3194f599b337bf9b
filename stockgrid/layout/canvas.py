"""
Canvas size providers.

The grid never measures the device it is drawn on; callers hand it a
CanvasSize. The providers here cover the common cases: a fixed size, and
the medium home-screen widget size derived from the phone's screen width.
"""

import math
from abc import ABC, abstractmethod
from typing import NamedTuple


class CanvasSize(NamedTuple):
    """Panel size in pixels."""
    width: int
    height: int


class CanvasSizeProvider(ABC):
    """Supplies the canvas size for a render pass."""

    @abstractmethod
    def canvas_size(self) -> CanvasSize:
        pass


class FixedCanvasProvider(CanvasSizeProvider):
    """Always returns the same size."""

    def __init__(self, width: int, height: int):
        self._size = CanvasSize(width, height)

    def canvas_size(self) -> CanvasSize:
        return self._size


class MediumWidgetCanvasProvider(CanvasSizeProvider):
    """Medium widget size for a given screen width in points."""

    # Screen width -> medium widget size for known phone models
    KNOWN_SIZES: dict[int, CanvasSize] = {
        428: CanvasSize(364, 170),   # 14 Pro Max, 13 Pro Max
        414: CanvasSize(360, 169),   # 11 Pro Max, XS Max
        393: CanvasSize(338, 158),   # 14 Pro
        390: CanvasSize(338, 158),   # 14, 13, 12
        375: CanvasSize(329, 155),   # SE 3rd gen, 11 Pro, XS, X
    }

    def __init__(self, screen_width: int):
        self.screen_width = screen_width

    def canvas_size(self) -> CanvasSize:
        known = self.KNOWN_SIZES.get(self.screen_width)
        if known is not None:
            return known

        width = math.floor((self.screen_width - 60) * 0.94)
        height = math.floor(width * 0.47)
        return CanvasSize(width, height)
