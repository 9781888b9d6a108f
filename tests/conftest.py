"""Shared fixtures: a pixel surface that records every write."""

from __future__ import annotations

from collections.abc import Callable

import pytest


class RecordingSurface:
    """In-memory PixelSurface that logs each ``set_pixel`` call."""

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self.pixels: dict[tuple[int, int], int] = {}
        self.writes: list[tuple[int, int, int]] = []
        self.background = 0

    def get_pixel(self, x: int, y: int) -> int:
        return self.pixels.get((x, y), self.background)

    def set_pixel(self, x: int, y: int, color: int) -> None:
        self.writes.append((x, y, color))
        self.pixels[(x, y)] = color

    def clear(self, color: int) -> None:
        self.background = color
        self.pixels.clear()
        self.writes.clear()


@pytest.fixture
def recording_surface() -> Callable[[int, int], RecordingSurface]:
    return RecordingSurface
