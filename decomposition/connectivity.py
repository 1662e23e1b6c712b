"""
Adjacency relations on Z^n.

An adjacency defines which points are "neighbors" of each other, enabling
neighborhoods, borders and connected component extraction. Different
adjacencies produce different decompositions of the same point set.

Metric adjacencies are the standard ones of digital topology: two points
are adjacent when they differ by at most 1 on every axis and by at most
`max_norm1` in L1 norm.
- 2D: max_norm1=1 -> 4-adjacency, max_norm1=2 -> 8-adjacency
- 3D: max_norm1=1 -> 6-adjacency, 2 -> 18-adjacency, 3 -> 26-adjacency

Every adjacency is reflexive: a point belongs to its own (closed)
neighborhood, and its proper neighborhood excludes it.
"""

from collections.abc import Iterator
from typing import Protocol, runtime_checkable

import numpy as np
from scipy.ndimage import generate_binary_structure

from kernel.domain import HyperRectDomain
from kernel.point import norm1, norm_max, subtract
from localtypes import Point, PointNeighborFunc, Vector


@runtime_checkable
class Adjacency(Protocol):
    """Capability needed by digital objects from an adjacency relation."""

    @property
    def dimension(self) -> int: ...

    @property
    def degree(self) -> int: ...

    def is_adjacent_to(self, p: Point, q: Point) -> bool: ...

    def is_properly_adjacent_to(self, p: Point, q: Point) -> bool: ...

    def neighborhood(self, p: Point) -> Iterator[Point]: ...

    def proper_neighborhood(self, p: Point) -> Iterator[Point]: ...


def metric_offsets(dimension: int, max_norm1: int) -> tuple[Vector, ...]:
    """
    Displacements to the proper neighbors of the origin, in lexicographic
    order.

    The structuring element of scipy has exactly the points of the unit
    cube within L1 distance `max_norm1` of its center.
    """
    structure = generate_binary_structure(dimension, max_norm1)
    offsets = np.argwhere(structure) - 1
    return tuple(
        tuple(int(c) for c in offset) for offset in offsets if np.any(offset)
    )


class MetricAdjacency:
    """
    Adjacency of Z^n defined by the L1 norm inside the unit cube.

    Example:
        >>> adj4 = MetricAdjacency(2, 1)
        >>> sorted(adj4.proper_neighborhood((0, 0)))
        [(-1, 0), (0, -1), (0, 1), (1, 0)]
    """

    __slots__ = ("_dimension", "_max_norm1", "_offsets")

    def __init__(self, dimension: int, max_norm1: int) -> None:
        if dimension < 1:
            raise ValueError(f"Invalid dimension: {dimension}")
        if not 1 <= max_norm1 <= dimension:
            raise ValueError(
                f"max_norm1 must lie in [1, {dimension}], got {max_norm1}"
            )
        self._dimension = dimension
        self._max_norm1 = max_norm1
        self._offsets = metric_offsets(dimension, max_norm1)

    @property
    def dimension(self) -> int:
        return self._dimension

    @property
    def max_norm1(self) -> int:
        return self._max_norm1

    @property
    def degree(self) -> int:
        return len(self._offsets)

    @property
    def offsets(self) -> tuple[Vector, ...]:
        return self._offsets

    def is_adjacent_to(self, p: Point, q: Point) -> bool:
        vector = subtract(p, q)
        return norm_max(vector) <= 1 and norm1(vector) <= self._max_norm1

    def is_properly_adjacent_to(self, p: Point, q: Point) -> bool:
        return p != q and self.is_adjacent_to(p, q)

    def proper_neighborhood(self, p: Point) -> Iterator[Point]:
        if self._dimension == 2:
            x, y = p
            for dx, dy in self._offsets:
                yield (x + dx, y + dy)
        else:
            for offset in self._offsets:
                yield tuple(a + b for a, b in zip(p, offset))

    def neighborhood(self, p: Point) -> Iterator[Point]:
        yield p
        yield from self.proper_neighborhood(p)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, MetricAdjacency):
            return (self._dimension, self._max_norm1) == (
                other._dimension,
                other._max_norm1,
            )
        return False

    def __hash__(self) -> int:
        return hash((MetricAdjacency, self._dimension, self._max_norm1))

    def __repr__(self) -> str:
        return f"MetricAdjacency(dimension={self._dimension}, degree={self.degree})"


class DomainAdjacency:
    """
    An adjacency restricted to the points of a domain.

    Neighbors outside the domain are never enumerated, and points outside
    it are adjacent to nothing.
    """

    __slots__ = ("_domain", "_adjacency")

    def __init__(self, domain: HyperRectDomain, adjacency: Adjacency) -> None:
        if domain.dimension != adjacency.dimension:
            raise ValueError(
                f"Domain of dimension {domain.dimension} does not match "
                f"adjacency of dimension {adjacency.dimension}"
            )
        self._domain = domain
        self._adjacency = adjacency

    @property
    def domain(self) -> HyperRectDomain:
        return self._domain

    @property
    def adjacency(self) -> Adjacency:
        return self._adjacency

    @property
    def dimension(self) -> int:
        return self._adjacency.dimension

    @property
    def degree(self) -> int:
        return self._adjacency.degree

    def is_adjacent_to(self, p: Point, q: Point) -> bool:
        return (
            self._domain.contains(p)
            and self._domain.contains(q)
            and self._adjacency.is_adjacent_to(p, q)
        )

    def is_properly_adjacent_to(self, p: Point, q: Point) -> bool:
        return p != q and self.is_adjacent_to(p, q)

    def proper_neighborhood(self, p: Point) -> Iterator[Point]:
        contains = self._domain.contains
        return (q for q in self._adjacency.proper_neighborhood(p) if contains(q))

    def neighborhood(self, p: Point) -> Iterator[Point]:
        if self._domain.contains(p):
            yield p
        yield from self.proper_neighborhood(p)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, DomainAdjacency):
            return (self._domain, self._adjacency) == (
                other._domain,
                other._adjacency,
            )
        return False

    def __hash__(self) -> int:
        return hash((DomainAdjacency, self._domain, self._adjacency))

    def __repr__(self) -> str:
        return f"DomainAdjacency({self._domain}, {self._adjacency})"


def make_neighbors(adjacency: Adjacency) -> PointNeighborFunc:
    """
    Create a neighbor function from an adjacency.

    The returned function computes which points of a universe are proper
    neighbors of a given point.

    Example:
        >>> neighbors = make_neighbors(adjacency_8())
        >>> sorted(neighbors((1, 1), frozenset([(0, 0), (1, 0), (3, 3)])))
        [(0, 0), (1, 0)]
    """

    def neighbors(point: Point, universe: frozenset[Point]) -> frozenset[Point]:
        return frozenset(
            q for q in adjacency.proper_neighborhood(point) if q in universe
        )

    return neighbors


# Standard adjacencies
def adjacency_4() -> MetricAdjacency:
    return MetricAdjacency(2, 1)


def adjacency_8() -> MetricAdjacency:
    return MetricAdjacency(2, 2)


def adjacency_6() -> MetricAdjacency:
    return MetricAdjacency(3, 1)


def adjacency_18() -> MetricAdjacency:
    return MetricAdjacency(3, 2)


def adjacency_26() -> MetricAdjacency:
    return MetricAdjacency(3, 3)
