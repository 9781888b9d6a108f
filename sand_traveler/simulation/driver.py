"""Frame-driven loop around :class:`SimulationField`.

Stands in for an animation host: one ``tick()`` per frame, with an optional
per-frame callback for presentation.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

import numpy as np

from sand_traveler.domain.field import SimulationField
from sand_traveler.domain.surface import ArraySurface

logger = logging.getLogger(__name__)

FrameCallback = Callable[[int, SimulationField], None]
"""Called after each frame with the zero-based frame number and the field."""


def run_frames(
    field: SimulationField,
    n_frames: int,
    on_frame: FrameCallback | None = None,
) -> int:
    """Tick *field* once per frame for *n_frames* frames.

    Starts the field first if it has not been started. Returns the number of
    completed runs (restarts included) observed at the end.
    """
    if n_frames < 0:
        raise ValueError("n_frames must be >= 0")
    if not field.started:
        field.start()

    for frame in range(n_frames):
        field.tick()
        if on_frame is not None:
            on_frame(frame, field)
        if (frame + 1) % 100 == 0:
            logger.debug(
                "frame %d/%d: run %d, iteration %d",
                frame + 1,
                n_frames,
                field.run_count,
                field.iteration_count,
            )
    return field.run_count


def capture_frames(field: SimulationField, n_frames: int, every: int = 1) -> list[np.ndarray]:
    """Run *n_frames* frames and collect an RGBA snapshot every *every* frames.

    Requires the field to paint into an :class:`ArraySurface`.
    """
    if every < 1:
        raise ValueError("every must be >= 1")
    if not isinstance(field.surface, ArraySurface):
        raise ValueError("capture_frames requires an ArraySurface")
    surface = field.surface
    frames: list[np.ndarray] = []

    def _capture(frame: int, _field: SimulationField) -> None:
        if (frame + 1) % every == 0:
            frames.append(surface.to_rgba_array())

    run_frames(field, n_frames, on_frame=_capture)
    return frames
