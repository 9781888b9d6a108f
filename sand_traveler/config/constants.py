"""Centralized domain constants for the sand-traveler simulation.

All magic numbers shared between the motion model, the grain painter, and
the configuration defaults are defined here.
"""

from __future__ import annotations

import math

TWO_PI = math.pi * 2
"""Full turn in radians."""

CANVAS_WIDTH = 800
"""Default canvas width in pixels."""

CANVAS_HEIGHT = 800
"""Default canvas height in pixels."""

NUM_CITIES = 400
"""Default number of cities per run."""

NUM_SANDPAINTERS = 3
"""Default number of grain painters owned by each city."""

MAX_ITERATIONS = 120 * 20
"""Default iteration budget before a run restarts."""

ITERATIONS_PER_TICK = 1
"""Default number of iterations performed by one ``tick()``."""

MIN_DISTANCE = 333.0
"""Cities closer than this to their friend paint sand."""

VELOCITY = 20.0
"""Initial spiral velocity of city 0."""

DEFAULT_SEED = "Sand Traveler by Jared Tarbell"
"""Seed used when none is configured."""

CANVAS_BACKGROUND_COLOR = 0x000000FF
"""Opaque black, packed as 0xRRGGBBAA."""

TRAVELER_COLOR = 0xFFFFFFFF
"""Opaque white traveler dabs."""

# ---------------------------------------------------------------------------
# Motion model
# ---------------------------------------------------------------------------

FRIEND_PULL_DIVISOR = 1000.0
"""Velocity gains (friend - self) / FRIEND_PULL_DIVISOR each iteration."""

VELOCITY_DAMPING = 0.936
"""Per-iteration velocity damping factor."""

SPIRAL_VVT_START = 0.2
"""Initial velocity increment of the spiral placement."""

SPIRAL_VVT_DECAY = 0.00033
"""Per-city decrement of the spiral velocity increment."""

SPIRAL_TURNS = 1.1 * 2
"""Angular multiplier of the spiral placement."""

FRIEND_RANGE_DIVISOR = 5
"""Friends are chosen within ``city_count / FRIEND_RANGE_DIVISOR`` indices ahead."""

MIN_FRIEND_CITIES = 5
"""Smallest population for which friend selection is guaranteed to terminate."""

FRIEND_SELECTION_ATTEMPTS = 64
"""Upper bound on friend re-selection before giving up."""

# ---------------------------------------------------------------------------
# Grain painting
# ---------------------------------------------------------------------------

GRAINS = 11
"""Grain pairs painted per render call (and traveler pairs per city)."""

MAX_GRAIN_DISTANCE = 0.22
"""Grain spread is clamped to [-MAX_GRAIN_DISTANCE, MAX_GRAIN_DISTANCE]."""

GRAIN_DRIFT = 0.05
"""Painter state drifts by a uniform step in [-GRAIN_DRIFT, GRAIN_DRIFT)."""

PERPENDICULAR_OFFSET = 0.42
"""Scale of the perpendicular brushstroke relative to the segment."""

BLENDED_MAX_ALPHA = 128
"""Alpha cap for additive and subtractive painters."""

NORMAL_MAX_ALPHA = 255
"""Alpha cap for normal-alpha painters."""

TRAVELER_ALPHA = 255
"""Alpha used for traveler dabs."""

TRAVELER_NOISE_THRESHOLD = 990
"""A traveler dab is jittered when ``random() * 1000`` exceeds this value."""

TRAVELER_NOISE_AMPLITUDE = 3.0
"""Maximum jitter per term of a noisy traveler dab."""

SAND_PALETTE: tuple[int, ...] = (
    0x3A242BFF,
    0x3B2426FF,
    0x352325FF,
    0x836454FF,
    0x7D5533FF,
    0x8B7352FF,
    0xB1A181FF,
    0xA4632EFF,
    0xBB6B33FF,
    0xB47249FF,
    0xCA7239FF,
    0xD29057FF,
    0xE0B87EFF,
    0xD9B166FF,
    0xF5EABEFF,
    0xFCFADFFF,
    0xD8C9B5FF,
    0x6A8687FF,
    0x3B5A63FF,
    0x96A9A6FF,
)
"""Paint colours handed out to grain painters."""
