"""Domain layer: colour blending, pixel surfaces, painters, cities, and the field."""

from sand_traveler.domain.city import CityAgent
from sand_traveler.domain.color import (
    BlendMode,
    Color,
    blend,
    blend_additive,
    blend_normal,
    blend_subtractive,
    pack,
    plot,
    unpack,
    unpack_a,
    unpack_b,
    unpack_g,
    unpack_r,
)
from sand_traveler.domain.field import SimulationField
from sand_traveler.domain.painter import GrainPainter
from sand_traveler.domain.surface import ArraySurface, PixelSurface

__all__ = [
    "ArraySurface",
    "BlendMode",
    "CityAgent",
    "Color",
    "GrainPainter",
    "PixelSurface",
    "SimulationField",
    "blend",
    "blend_additive",
    "blend_normal",
    "blend_subtractive",
    "pack",
    "plot",
    "unpack",
    "unpack_a",
    "unpack_b",
    "unpack_g",
    "unpack_r",
]
