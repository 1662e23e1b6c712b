"""
Digital objects: a point set seen through a digital topology.

An object pairs an immutable `DigitalTopology` with a point set held in a
copy-on-write container. Copying an object is O(1); the point set is only
duplicated when one of the copies is modified through
`mutable_point_set()`.

Key operations:
- **Neighborhoods**: N(p) (closed, includes p) and N*(p) (proper) under the
  foreground adjacency, restricted to the object.
- **Border**: points having a background neighbor outside the object.
- **Components**: maximal foreground-connected subsets.

Preconditions (valid object, points inside the domain, symmetric background
adjacency for `border`) are only checked by assertions.
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Callable, Iterator

from decomposition.connectivity import Adjacency
from decomposition.objects import iter_components
from kernel.cow import CowPtr
from kernel.domain import HyperRectDomain
from kernel.sets import HashPointSet, ListPointSet, PointSet
from localtypes import Point
from topology.digital_topology import DigitalTopology

logger = logging.getLogger(__name__)

type ObjectSink = Callable[[Object], object]


class Object:
    """
    A digital object.

    Construction:
        Object()                            invalid object, must not be queried
        Object(topology, point_set)         copies the point set
        Object(topology, cow_ptr)           shares an existing CowPtr
        Object(topology, domain, kind=...)  empty object over a domain
        Object.attach(topology, point_set)  adopts the point set, no copy

    Note that `b = a` only binds a second name: use `a.copy()` (or
    `copy.copy(a)`) to get an independent object.
    """

    __slots__ = ("_topology", "_points")

    def __init__(
        self,
        topology: DigitalTopology | None = None,
        points: PointSet | CowPtr[PointSet] | HyperRectDomain | None = None,
        *,
        kind: type[PointSet] = HashPointSet,
    ) -> None:
        self._topology: DigitalTopology | None = None
        self._points: CowPtr[PointSet] | None = None

        if topology is None and points is None:
            return
        if topology is None or points is None:
            raise TypeError("An object needs both a topology and a point set")

        match points:
            case CowPtr():
                shared = points.copy()
            case PointSet():
                shared = CowPtr(points.copy())
            case HyperRectDomain():
                shared = CowPtr(kind(points))  # type: ignore[call-arg]
            case _:
                raise TypeError(f"Cannot build an object from {type(points)}")

        self._set_state(topology, shared)

    @classmethod
    def attach(cls, topology: DigitalTopology, point_set: PointSet) -> Object:
        """
        Wrap a point set without copying it.

        The object becomes the logical owner of `point_set`: the caller must
        stop modifying it directly.
        """
        obj = cls.__new__(cls)
        obj._set_state(topology, CowPtr(point_set))
        return obj

    def _set_state(self, topology: DigitalTopology, points: CowPtr[PointSet]) -> None:
        dimension = points.read().dimension
        if dimension != topology.dimension:
            raise ValueError(
                f"Point set of dimension {dimension} does not match "
                f"topology of dimension {topology.dimension}"
            )
        self._topology = topology
        self._points = points

    # Copy

    def copy(self) -> Object:
        """O(1) copy; storage is shared until one side writes."""
        clone = Object.__new__(Object)
        clone._topology = self._topology
        clone._points = None if self._points is None else self._points.copy()
        return clone

    def __copy__(self) -> Object:
        return self.copy()

    def __deepcopy__(self, memo: dict) -> Object:
        clone = Object.__new__(Object)
        clone._topology = self._topology
        clone._points = copy.deepcopy(self._points, memo)
        return clone

    # Accessors

    def is_valid(self) -> bool:
        return self._topology is not None and self._points is not None

    @property
    def topology(self) -> DigitalTopology:
        assert self._topology is not None, "Invalid object"
        return self._topology

    @property
    def adjacency(self) -> Adjacency:
        """Foreground adjacency."""
        return self.topology.foreground

    @property
    def background_adjacency(self) -> Adjacency:
        return self.topology.background

    @property
    def point_set(self) -> PointSet:
        """
        Read access to the points. Never duplicates the storage; do not
        modify the returned set, use `mutable_point_set()` instead.
        """
        assert self._points is not None, "Invalid object"
        return self._points.read()

    def mutable_point_set(self) -> PointSet:
        """Write access to the points, duplicating them first if shared."""
        assert self._points is not None, "Invalid object"
        return self._points.write()

    @property
    def domain(self) -> HyperRectDomain:
        return self.point_set.domain

    def size(self) -> int:
        return self.point_set.size()

    def __len__(self) -> int:
        return self.size()

    def contains(self, point: Point) -> bool:
        return self.point_set.contains(point)

    def __contains__(self, point: object) -> bool:
        return point in self.point_set

    def __iter__(self) -> Iterator[Point]:
        return iter(self.point_set)

    # Neighborhoods

    def _small_object(self, points: Iterator[Point]) -> Object:
        small = ListPointSet(self.domain)
        for point in points:
            small.insert_new(point)
        return Object.attach(self.topology, small)

    def iter_neighborhood(self, point: Point) -> Iterator[Point]:
        """Points of the object in the closed neighborhood N(point)."""
        contains = self.point_set.contains
        return (q for q in self.adjacency.neighborhood(point) if contains(q))

    def iter_proper_neighborhood(self, point: Point) -> Iterator[Point]:
        """Points of the object in the proper neighborhood N*(point)."""
        contains = self.point_set.contains
        return (q for q in self.adjacency.proper_neighborhood(point) if contains(q))

    def neighborhood(self, point: Point) -> Object:
        """
        Sub-object made of the points of the object adjacent to `point`,
        `point` itself included when it belongs to the object.
        """
        return self._small_object(self.iter_neighborhood(point))

    def neighborhood_size(self, point: Point) -> int:
        return sum(1 for _ in self.iter_neighborhood(point))

    def proper_neighborhood(self, point: Point) -> Object:
        """Same as `neighborhood`, without `point`."""
        return self._small_object(self.iter_proper_neighborhood(point))

    def proper_neighborhood_size(self, point: Point) -> int:
        return sum(1 for _ in self.iter_proper_neighborhood(point))

    # Border

    def border(self) -> Object:
        """
        Points of the object having at least one background neighbor outside
        the object.

        Background neighbors are the ones enumerated by the background
        adjacency: a domain-restricted adjacency never looks past the domain.
        The background adjacency is assumed symmetric, which is not checked.
        """
        points = self.point_set
        contains = points.contains
        background = self.background_adjacency
        border = type(points)(points.domain)  # type: ignore[call-arg]

        for point in points:
            if any(not contains(q) for q in background.proper_neighborhood(point)):
                border.insert_new(point)

        return Object.attach(self.topology, border)

    # Connected components

    def write_components(self, sink: ObjectSink) -> int:
        """
        Decompose the object into its foreground-connected components.

        Args:
            sink: Called once per component with an `Object` holding it,
                for instance `list.append`.

        Returns:
            The number of components.
        """
        points = self.point_set
        kind = type(points)
        count = 0

        for component in iter_components(points, self.adjacency):
            component_set = kind(points.domain)  # type: ignore[call-arg]
            for point in component:
                component_set.insert_new(point)
            sink(Object.attach(self.topology, component_set))
            count += 1

        logger.debug(f"Found {count} connected component(s) in {self}")
        return count

    def components(self) -> list[Object]:
        """Connected components as a list of objects, in discovery order."""
        result: list[Object] = []
        self.write_components(result.append)
        return result

    # Display

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Object):
            return NotImplemented
        if not (self.is_valid() and other.is_valid()):
            return self.is_valid() == other.is_valid()
        return self.topology == other.topology and self.point_set == other.point_set

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        if not self.is_valid():
            return "[Object invalid]"
        return f"[Object topology={self.topology} counting={self.size()}]"

    def __repr__(self) -> str:
        if not self.is_valid():
            return "Object()"
        return f"Object(size={self.size()}, domain={self.domain})"
