"""Grain painter: turns a pair of points into a drifting cluster of sand dabs."""

from __future__ import annotations

import math
from random import Random

from sand_traveler.config.constants import (
    GRAIN_DRIFT,
    GRAINS,
    MAX_GRAIN_DISTANCE,
    PERPENDICULAR_OFFSET,
)
from sand_traveler.domain.color import BlendMode, Color, choose_blend_mode, plot, some_color
from sand_traveler.domain.surface import PixelSurface


class GrainPainter:
    """Stochastic brush with two drifting state variables.

    ``p`` positions the cluster along the stroke (through ``sin(p)``) and
    ``grain_distance`` controls how far the grains spread around it. Both
    random-walk on every render, which is what gives the strokes their sand
    texture. Colour, blend mode and alpha cap are fixed at construction.
    """

    def __init__(
        self,
        rng: Random,
        *,
        blending_additive: bool = True,
        blending_subtractive: bool = True,
        color: Color | None = None,
    ) -> None:
        self._rng = rng
        self.color: Color = some_color(rng) if color is None else color
        self.grain_distance = rng.uniform(0.01, 0.1)
        self.p = rng.random()
        self.mode: BlendMode
        self.max_alpha: int
        self.mode, self.max_alpha = choose_blend_mode(
            rng, blending_additive, blending_subtractive
        )

    def render(self, surface: PixelSurface, x: float, y: float, ox: float, oy: float) -> None:
        """Paint a stroke from origin ``(ox, oy)`` toward ``(x, y)``."""
        self._paint(surface, x, y, ox, oy)

    def render_perpendicular(
        self, surface: PixelSurface, x: float, y: float, ox: float, oy: float
    ) -> None:
        """Paint a stroke across the segment, rotated about its midpoint."""
        mx = (x + ox) / 2
        my = (y + oy) / 2
        g = PERPENDICULAR_OFFSET
        x1 = mx + (y - my) * g
        y1 = my - (x - mx) * g
        ox1 = mx + (oy - my) * g
        oy1 = my - (ox - mx) * g
        self._paint(surface, x1, y1, ox1, oy1)

    def _paint(self, surface: PixelSurface, x: float, y: float, ox: float, oy: float) -> None:
        # sweep
        sinp = math.sin(self.p)
        plot(
            surface,
            ox + (x - ox) * sinp,
            oy + (y - oy) * sinp,
            self.color,
            self.max_alpha / 10,
            self.mode,
        )

        self._drift()

        w = self.grain_distance / 10.0
        for i in range(GRAINS):
            a = (0.1 - i / (GRAINS * 10)) * self.max_alpha
            siniw = math.sin(i * w)
            sin1 = math.sin(self.p + siniw)
            sin2 = math.sin(self.p - siniw)
            plot(
                surface,
                math.trunc(ox + (x - ox) * sin1),
                math.trunc(oy + (y - oy) * sin1),
                self.color,
                a,
                self.mode,
            )
            plot(
                surface,
                math.trunc(ox + (x - ox) * sin2),
                math.trunc(oy + (y - oy) * sin2),
                self.color,
                a,
                self.mode,
            )

    def _drift(self) -> None:
        """Random-walk ``grain_distance`` and ``p`` and clamp them to range."""
        self.grain_distance += self._rng.uniform(-GRAIN_DRIFT, GRAIN_DRIFT)
        self.grain_distance = max(-MAX_GRAIN_DISTANCE, min(MAX_GRAIN_DISTANCE, self.grain_distance))

        self.p += self._rng.uniform(-GRAIN_DRIFT, GRAIN_DRIFT)
        self.p = max(0.0, min(1.0, self.p))
