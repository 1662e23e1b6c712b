"""
Layer by layer expansion of a digital object.

Starting from seed points, the expander visits the object in breadth-first
order along its foreground adjacency. Layer k holds the points at exactly k
steps from the closest seed (the geodesic distance inside the object).
Layers are pairwise disjoint and, once the expansion is finished, their
union is the set of points reachable from the seeds.

Example:
    >>> expander = Expander(disk, (0, 0))
    >>> while not expander.finished():
    ...     print(expander.distance, len(expander.layer))
    ...     expander.next_layer()
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from kernel.point import Norm, distance
from kernel.sets import HashPointSet, ListPointSet, PointSet
from localtypes import Point
from topology.object import Object

logger = logging.getLogger(__name__)


def _as_points(seeds: Point | Iterable[Point]) -> list[Point]:
    """Accept a single point or any iterable of points."""
    if isinstance(seeds, tuple) and seeds and not isinstance(seeds[0], tuple):
        return [seeds]
    return list(seeds)  # type: ignore[arg-type]


class Expander:
    """
    Restartable breadth-first traversal of an object.

    Attributes exposed:
        layer: Current frontier.
        core: Every point visited so far, current layer included.
        distance: Index of the current layer (geodesic distance to seeds).
        metric_distance: Largest Euclidean distance between a visited point
            and its closest seed.
    """

    def __init__(self, obj: Object, seeds: Point | Iterable[Point]) -> None:
        assert obj.is_valid(), "Cannot expand an invalid object"
        # Later changes to the caller's object must not leak into the traversal
        self._object = obj.copy()
        domain = self._object.domain

        self._seeds: list[Point] = []
        self._layer: PointSet = ListPointSet(domain)
        self._core: PointSet = HashPointSet(domain)
        for seed in _as_points(seeds):
            if self._object.contains(seed) and not self._core.contains(seed):
                self._seeds.append(seed)
                self._layer.insert_new(seed)
                self._core.insert_new(seed)

        self._distance = 0
        self._metric_distance = 0.0
        self._finished = self._layer.empty()

    @property
    def object(self) -> Object:
        return self._object

    @property
    def seeds(self) -> tuple[Point, ...]:
        return tuple(self._seeds)

    @property
    def layer(self) -> PointSet:
        return self._layer

    @property
    def core(self) -> PointSet:
        return self._core

    @property
    def distance(self) -> int:
        return self._distance

    @property
    def metric_distance(self) -> float:
        return self._metric_distance

    def finished(self) -> bool:
        return self._finished

    def _distance_to_seeds(self, point: Point) -> float:
        return min(distance(point, seed, Norm.L2) for seed in self._seeds)

    def next_layer(self) -> None:
        """
        Replace the current layer by the points of the object adjacent to it
        that have not been visited yet.
        """
        assert not self._finished, "Expansion is already finished"
        core = self._core
        layer = ListPointSet(self._object.domain)

        for point in self._layer:
            for neighbor in self._object.iter_proper_neighborhood(point):
                if not core.contains(neighbor):
                    core.insert_new(neighbor)
                    layer.insert_new(neighbor)

        self._layer = layer
        if layer.empty():
            self._finished = True
            logger.debug(f"Expansion finished at distance {self._distance}")
            return

        self._distance += 1
        self._metric_distance = max(
            self._metric_distance,
            max(self._distance_to_seeds(point) for point in layer),
        )
        logger.debug(f"Layer {self._distance}: {layer.size()} point(s)")

    def iter_layers(self) -> Iterator[PointSet]:
        """Yield the current layer and every following one until the end."""
        while not self._finished:
            yield self._layer
            self.next_layer()

    def __str__(self) -> str:
        return (
            f"[Expander layer={self._distance} #layer={self._layer.size()} "
            f"#core={self._core.size()}]"
        )
