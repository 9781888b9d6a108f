"""Configuration layer: constants and typed config dataclasses."""

from sand_traveler.config.constants import (
    CANVAS_BACKGROUND_COLOR,
    CANVAS_HEIGHT,
    CANVAS_WIDTH,
    DEFAULT_SEED,
    GRAINS,
    ITERATIONS_PER_TICK,
    MAX_ITERATIONS,
    MIN_DISTANCE,
    NUM_CITIES,
    NUM_SANDPAINTERS,
    VELOCITY,
)
from sand_traveler.config.types import SimulationConfig, UpdateMode

__all__ = [
    "CANVAS_BACKGROUND_COLOR",
    "CANVAS_HEIGHT",
    "CANVAS_WIDTH",
    "DEFAULT_SEED",
    "GRAINS",
    "ITERATIONS_PER_TICK",
    "MAX_ITERATIONS",
    "MIN_DISTANCE",
    "NUM_CITIES",
    "NUM_SANDPAINTERS",
    "SimulationConfig",
    "UpdateMode",
    "VELOCITY",
]
