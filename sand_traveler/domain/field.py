"""Simulation field: owns the cities, the run's PRNG, and the run lifecycle.

Lifecycle: a field is created uninitialised; ``start()`` begins a run by
clearing the surface, laying the cities out on a spiral and assigning
friends. ``tick()`` advances the run and restarts it automatically once the
iteration budget is spent, so a field never reaches a terminal state.

Update-order invariant: in ``UpdateMode.SEQUENTIAL`` cities advance in
ascending index order and read their friend's live position, so a friend
with a lower index has already moved this iteration. ``UpdateMode.SYNCHRONOUS``
reads friend positions from a snapshot taken at the start of the iteration.
"""

from __future__ import annotations

import logging
import math
from random import Random

import networkx as nx
import numpy as np

from sand_traveler.config.constants import (
    SPIRAL_TURNS,
    SPIRAL_VVT_DECAY,
    SPIRAL_VVT_START,
    TWO_PI,
)
from sand_traveler.config.types import SimulationConfig, UpdateMode
from sand_traveler.domain.city import CityAgent, euclidean
from sand_traveler.domain.surface import ArraySurface, PixelSurface

logger = logging.getLogger(__name__)


class SimulationField:
    """Arena of :class:`CityAgent` instances addressed by index.

    ``surface`` defaults to an :class:`ArraySurface` sized from the config's
    canvas dimensions; a caller-supplied surface keeps its own size.
    """

    def __init__(
        self,
        config: SimulationConfig | None = None,
        surface: PixelSurface | None = None,
    ) -> None:
        self.config = config if config is not None else SimulationConfig()
        self._owns_surface = surface is None
        self.surface: PixelSurface = (
            surface
            if surface is not None
            else ArraySurface(self.config.canvas_width, self.config.canvas_height)
        )
        self.rng = Random(self.config.seed)
        self.cities: list[CityAgent] = []
        self.iteration_count = 0
        self.run_count = 0
        self.paused = False
        self._snapshot: list[tuple[float, float]] | None = None

    @property
    def started(self) -> bool:
        return bool(self.cities)

    def start(self, config: SimulationConfig | None = None) -> None:
        """Begin a new run, optionally under a new configuration.

        Passing *config* re-seeds the PRNG from ``config.seed``, so starting
        twice with the same config replays the same run. Automatic restarts
        pass no config and continue the current random stream. A default
        surface is rebuilt when the canvas dimensions change.
        """
        if config is not None:
            self.rng = Random(config.seed)
            self.config = config
        config = self.config
        if self._owns_surface and (self.surface.width, self.surface.height) != (
            config.canvas_width,
            config.canvas_height,
        ):
            self.surface = ArraySurface(config.canvas_width, config.canvas_height)

        self.paused = False
        self.iteration_count = 0
        self.run_count += 1
        self.surface.clear(config.background_color)

        n = config.city_count
        center_x = self.surface.width / 2
        center_y = self.surface.height / 2
        velocity = config.velocity
        vvt = SPIRAL_VVT_START
        ot = self.rng.random() * TWO_PI
        cities: list[CityAgent] = []
        for index in range(n):
            tinc = ot + (SPIRAL_TURNS * index * TWO_PI) / n
            vx = velocity * math.sin(tinc)
            vy = velocity * math.cos(tinc)
            cities.append(
                CityAgent(
                    index,
                    center_x + vx * 2,
                    center_y + vy * 2,
                    vx,
                    vy,
                    self.rng,
                    sand_painter_count=config.sand_painter_count,
                    blending_additive=config.blending_additive,
                    blending_subtractive=config.blending_subtractive,
                )
            )
            vvt -= SPIRAL_VVT_DECAY
            velocity += vvt
        self.cities = cities

        for city in self.cities:
            city.assign_friend(self)

        logger.info(
            "run %d started: %d cities, %d painters each, budget %d iterations",
            self.run_count,
            n,
            config.sand_painter_count,
            config.iterations_max,
        )
        if logger.isEnabledFor(logging.DEBUG):
            graph = self.friend_graph()
            reciprocal = sum(1 for a, b in graph.edges if graph.has_edge(b, a)) // 2
            logger.debug(
                "friend graph: %d weak components, %d reciprocal pairs",
                nx.number_weakly_connected_components(graph),
                reciprocal,
            )

    def tick(self) -> None:
        """Run ``iterations_per_tick`` iterations; no-op while paused.

        An unstarted field starts its first run on the first tick.
        """
        if self.paused:
            return
        if not self.started:
            self.start()

        for _ in range(self.config.iterations_per_tick):
            self._iterate()
            self.iteration_count += 1
            if self.iteration_count > self.config.iterations_max:
                logger.debug("iteration budget %d exhausted", self.config.iterations_max)
                self.start()
                return

    def _iterate(self) -> None:
        if self.config.update_mode == UpdateMode.SYNCHRONOUS:
            self._snapshot = [(city.x, city.y) for city in self.cities]
        try:
            for city in self.cities:
                city.advance(self)
        finally:
            self._snapshot = None

    def pause(self, paused: bool) -> None:
        self.paused = paused

    def position_of(self, index: int) -> tuple[float, float]:
        """Position of city *index* as seen by cities advancing right now."""
        if self._snapshot is not None:
            return self._snapshot[index]
        city = self.cities[index]
        return city.x, city.y

    def distance_between(self, a: int, b: int) -> float:
        """Euclidean distance between cities *a* and *b* (0 when equal)."""
        a = int(a)
        b = int(b)
        if a == b:
            return 0.0
        city_a = self.cities[a]
        city_b = self.cities[b]
        return euclidean(city_a.x, city_a.y, city_b.x, city_b.y)

    def positions(self) -> np.ndarray:
        """Return city positions as an ``(N, 2)`` float array."""
        return np.array([(city.x, city.y) for city in self.cities], dtype=float).reshape(-1, 2)

    def friend_graph(self) -> nx.DiGraph:
        """Return the friend relation as a directed graph with one out-edge per city."""
        graph = nx.DiGraph()
        for city in self.cities:
            graph.add_node(city.index, x=city.x, y=city.y)
        for city in self.cities:
            graph.add_edge(city.index, city.friend_index)
        return graph
