"""Simulation driver: frame loop and snapshot capture."""

from sand_traveler.simulation.driver import capture_frames, run_frames

__all__ = [
    "capture_frames",
    "run_frames",
]
