"""Sand traveler: cities chase their friends and paint sand between them.

Public entry points are re-exported here; see :mod:`sand_traveler.domain`
for the engine and :mod:`sand_traveler.cli` for the command-line driver.
"""

from sand_traveler.config.types import SimulationConfig, UpdateMode
from sand_traveler.domain.color import BlendMode
from sand_traveler.domain.field import SimulationField
from sand_traveler.domain.surface import ArraySurface, PixelSurface
from sand_traveler.simulation.driver import capture_frames, run_frames

__all__ = [
    "ArraySurface",
    "BlendMode",
    "PixelSurface",
    "SimulationConfig",
    "SimulationField",
    "UpdateMode",
    "capture_frames",
    "run_frames",
]
