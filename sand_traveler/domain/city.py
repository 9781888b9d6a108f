"""City agents: spring-coupled points that paint sand toward their friend."""

from __future__ import annotations

import math
from random import Random
from typing import TYPE_CHECKING

from sand_traveler.config.constants import (
    FRIEND_PULL_DIVISOR,
    FRIEND_RANGE_DIVISOR,
    FRIEND_SELECTION_ATTEMPTS,
    GRAINS,
    TRAVELER_ALPHA,
    TRAVELER_COLOR,
    TRAVELER_NOISE_AMPLITUDE,
    TRAVELER_NOISE_THRESHOLD,
    TWO_PI,
    VELOCITY_DAMPING,
)
from sand_traveler.domain.color import BlendMode, Color, choose_blend_mode, plot
from sand_traveler.domain.painter import GrainPainter

if TYPE_CHECKING:
    from sand_traveler.domain.field import SimulationField


def euclidean(x0: float, y0: float, x1: float, y1: float) -> float:
    """Distance between two points."""
    dx = x1 - x0
    dy = y1 - y0
    return math.sqrt(dx * dx + dy * dy)


class CityAgent:
    """One moving point of the swarm.

    The friend is stored as an index into the owning field's city list,
    never as an object reference.
    """

    def __init__(
        self,
        index: int,
        x: float,
        y: float,
        vx: float,
        vy: float,
        rng: Random,
        *,
        sand_painter_count: int = 3,
        blending_additive: bool = True,
        blending_subtractive: bool = True,
    ) -> None:
        self._index = int(index)
        self.x = x
        self.y = y
        self.vx = vx
        self.vy = vy
        self.friend_index = self._index

        self.painters: tuple[GrainPainter, ...] = tuple(
            GrainPainter(
                rng,
                blending_additive=blending_additive,
                blending_subtractive=blending_subtractive,
            )
            for _ in range(sand_painter_count)
        )

        self.traveler_color: Color = TRAVELER_COLOR
        self.traveler_mode: BlendMode
        self.traveler_mode, _ = choose_blend_mode(rng, blending_additive, blending_subtractive)
        self.traveler_alpha = TRAVELER_ALPHA

    @property
    def index(self) -> int:
        return self._index

    def advance(self, field: SimulationField) -> None:
        """Pull toward the friend, damp, integrate, and paint when close."""
        fx, fy = field.position_of(self.friend_index)

        self.vx += (fx - self.x) / FRIEND_PULL_DIVISOR
        self.vy += (fy - self.y) / FRIEND_PULL_DIVISOR

        self.vx *= VELOCITY_DAMPING
        self.vy *= VELOCITY_DAMPING

        self.x += self.vx
        self.y += self.vy

        config = field.config
        if config.draw_travelers:
            self.draw_travelers(field, fx, fy)
        if config.use_sand_painters:
            distance = field.distance_between(self._index, self.friend_index)
            if distance < config.distance_minimum:
                self.draw_sand_painters(field, fx, fy)

    def assign_friend(self, field: SimulationField) -> int:
        """Choose a friend a short way ahead in index order.

        Raises ``ValueError`` if no friend distinct from this city is found
        within ``FRIEND_SELECTION_ATTEMPTS`` draws.
        """
        total = len(field.cities)
        for _ in range(FRIEND_SELECTION_ATTEMPTS):
            offset = int(1 + field.rng.random() * (total / FRIEND_RANGE_DIVISOR))
            friend = (self._index + offset) % total
            if friend != self._index:
                self.friend_index = friend
                return friend
        raise ValueError(f"friend selection cannot terminate for N={total} (city {self._index})")

    def draw_travelers(self, field: SimulationField, fx: float, fy: float) -> None:
        """Scatter traveler/anti-traveler dabs along the line to the friend."""
        rng = field.rng
        color = field.cities[self.friend_index].traveler_color
        mid_x = (self.x + fx) / 2
        mid_y = (self.y + fy) / 2
        half_dx = (self.x - fx) / 2
        half_dy = (self.y - fy) / 2
        amp = TRAVELER_NOISE_AMPLITUDE
        for _ in range(GRAINS):
            s = math.sin(rng.random() * TWO_PI)
            for sign in (1, -1):
                dx = sign * s * half_dx + mid_x
                dy = sign * s * half_dy + mid_y
                if rng.random() * 1000 > TRAVELER_NOISE_THRESHOLD:
                    dx += rng.random() * amp - rng.random() * amp
                    dy += rng.random() * amp - rng.random() * amp
                plot(
                    field.surface,
                    math.trunc(dx),
                    math.trunc(dy),
                    color,
                    self.traveler_alpha,
                    self.traveler_mode,
                )

    def draw_sand_painters(self, field: SimulationField, fx: float, fy: float) -> None:
        surface = field.surface
        if field.config.draw_perpendicular:
            for painter in self.painters:
                painter.render_perpendicular(surface, self.x, self.y, fx, fy)
        else:
            for painter in self.painters:
                painter.render(surface, self.x, self.y, fx, fy)
