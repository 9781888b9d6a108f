"""Pixel surfaces the painters draw into.

``PixelSurface`` is the narrow interface the simulation consumes.
``ArraySurface`` backs it with a ``(height, width)`` numpy ``uint32`` buffer
of packed ``0xRRGGBBAA`` colours.
"""

from __future__ import annotations

from typing import Protocol

import numpy as np

from sand_traveler.domain.color import Color


class PixelSurface(Protocol):
    """Minimal mutable pixel buffer."""

    @property
    def width(self) -> int: ...

    @property
    def height(self) -> int: ...

    def get_pixel(self, x: int, y: int) -> Color: ...

    def set_pixel(self, x: int, y: int, color: Color) -> None: ...

    def clear(self, color: Color) -> None: ...


class ArraySurface:
    """numpy-backed :class:`PixelSurface`.

    Reads outside the buffer return 0 and writes outside it are dropped.
    """

    def __init__(self, width: int, height: int) -> None:
        if width < 1 or height < 1:
            raise ValueError("surface dimensions must be >= 1x1")
        self._pixels = np.zeros((height, width), dtype=np.uint32)

    @property
    def width(self) -> int:
        return int(self._pixels.shape[1])

    @property
    def height(self) -> int:
        return int(self._pixels.shape[0])

    @property
    def pixels(self) -> np.ndarray:
        """The live ``(H, W)`` packed-colour buffer."""
        return self._pixels

    def _in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self._pixels.shape[1] and 0 <= y < self._pixels.shape[0]

    def get_pixel(self, x: int, y: int) -> Color:
        if not self._in_bounds(x, y):
            return 0
        return int(self._pixels[y, x])

    def set_pixel(self, x: int, y: int, color: Color) -> None:
        if self._in_bounds(x, y):
            self._pixels[y, x] = color & 0xFFFFFFFF

    def clear(self, color: Color) -> None:
        self._pixels.fill(color & 0xFFFFFFFF)

    def to_rgba_array(self) -> np.ndarray:
        """Return a ``(H, W, 4)`` ``uint8`` copy with channels in RGBA order."""
        packed = self._pixels
        rgba = np.empty(packed.shape + (4,), dtype=np.uint8)
        rgba[..., 0] = (packed >> 24) & 0xFF
        rgba[..., 1] = (packed >> 16) & 0xFF
        rgba[..., 2] = (packed >> 8) & 0xFF
        rgba[..., 3] = packed & 0xFF
        return rgba
