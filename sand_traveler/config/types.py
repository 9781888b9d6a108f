"""Configuration dataclasses for sand-traveler runs.

The whole run is parameterised by one frozen :class:`SimulationConfig`;
changing a knob means building a new value (``dataclasses.replace``) and
passing it to ``SimulationField.start``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from sand_traveler.config.constants import (
    CANVAS_BACKGROUND_COLOR,
    CANVAS_HEIGHT,
    CANVAS_WIDTH,
    DEFAULT_SEED,
    ITERATIONS_PER_TICK,
    MAX_ITERATIONS,
    MIN_DISTANCE,
    MIN_FRIEND_CITIES,
    NUM_CITIES,
    NUM_SANDPAINTERS,
    VELOCITY,
)

__all__ = [
    "SimulationConfig",
    "UpdateMode",
]


class UpdateMode(Enum):
    """City update semantics for one iteration."""

    SEQUENTIAL = "sequential"
    SYNCHRONOUS = "synchronous"


@dataclass(frozen=True)
class SimulationConfig:
    """Every tunable of one sand-traveler run."""

    city_count: int = NUM_CITIES
    sand_painter_count: int = NUM_SANDPAINTERS
    iterations_max: int = MAX_ITERATIONS
    iterations_per_tick: int = ITERATIONS_PER_TICK
    distance_minimum: float = MIN_DISTANCE
    velocity: float = VELOCITY
    blending_additive: bool = True
    blending_subtractive: bool = True
    draw_travelers: bool = False
    draw_perpendicular: bool = True
    use_sand_painters: bool = True
    seed: int | str = DEFAULT_SEED
    background_color: int = CANVAS_BACKGROUND_COLOR
    canvas_width: int = CANVAS_WIDTH
    canvas_height: int = CANVAS_HEIGHT
    update_mode: UpdateMode = UpdateMode.SEQUENTIAL

    def __post_init__(self) -> None:
        if self.city_count < 1:
            raise ValueError("city_count must be >= 1")
        if self.city_count < MIN_FRIEND_CITIES:
            raise ValueError(
                f"friend selection cannot terminate for N < {MIN_FRIEND_CITIES}"
                f" (city_count={self.city_count})"
            )
        if self.sand_painter_count < 0:
            raise ValueError("sand_painter_count must be >= 0")
        if self.iterations_max < 1:
            raise ValueError("iterations_max must be >= 1")
        if self.iterations_per_tick < 1:
            raise ValueError("iterations_per_tick must be >= 1")
        if self.distance_minimum < 0:
            raise ValueError("distance_minimum must be >= 0")
        if not 0 <= self.background_color <= 0xFFFFFFFF:
            raise ValueError("background_color must be a 32-bit RGBA value")
        if self.canvas_width < 1 or self.canvas_height < 1:
            raise ValueError("canvas dimensions must be >= 1x1")
        if not isinstance(self.update_mode, UpdateMode):
            raise ValueError("update_mode must be an UpdateMode")
