"""
Point sets bounded by a domain.

A point set is a mutable collection of lattice points that all lie in a
`HyperRectDomain`. Three storage backends trade memory for lookup speed:

**ListPointSet**
    Python list in insertion order. Linear lookups, tiny footprint.
    Meant for neighborhoods and other sets of a few points.

**HashPointSet**
    Python set. Constant-time lookups, memory proportional to the number
    of points. The general purpose backend.

**ArrayPointSet**
    numpy boolean mask over the whole domain. Constant-time lookups,
    memory proportional to the domain, iteration in domain order.

`select_point_set` picks a backend from size/access preferences, and
`assign` copies any set into any other, whatever their backends.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable, Iterator
from enum import Enum, auto
from typing import Self

import numpy as np

from kernel.domain import HyperRectDomain
from localtypes import Point

type PointPredicate = Callable[[Point], bool]


class PointSet(ABC):
    """
    Interface shared by every point set backend.

    Every point of the set must lie in `domain`. Inserting a point outside
    the domain is a precondition violation, only caught by assertions.
    """

    def __init__(self, domain: HyperRectDomain) -> None:
        self._domain = domain

    @property
    def domain(self) -> HyperRectDomain:
        return self._domain

    @property
    def dimension(self) -> int:
        return self._domain.dimension

    # Backend specific primitives

    @abstractmethod
    def contains(self, point: Point) -> bool: ...

    @abstractmethod
    def insert(self, point: Point) -> None:
        """Insert a point, doing nothing if it is already there."""

    @abstractmethod
    def insert_new(self, point: Point) -> None:
        """
        Insert a point known to be absent, skipping the membership test.

        Inserting a point already present leaves the set in an undefined
        state.
        """

    @abstractmethod
    def erase(self, point: Point) -> None:
        """Remove a point, doing nothing if it is absent."""

    @abstractmethod
    def clear(self) -> None: ...

    @abstractmethod
    def size(self) -> int: ...

    @abstractmethod
    def __iter__(self) -> Iterator[Point]: ...

    @abstractmethod
    def copy(self) -> Self:
        """Independent copy over the same domain."""

    # Derived operations

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, point: object) -> bool:
        return isinstance(point, tuple) and self.contains(point)

    def empty(self) -> bool:
        return self.size() == 0

    def update(self, points: Iterable[Point]) -> None:
        for point in points:
            self.insert(point)

    def difference_update(self, other: Iterable[Point]) -> None:
        """Erase every point of `other`."""
        for point in other:
            self.erase(point)

    def assign_from(
        self, other: Iterable[Point], predicate: PointPredicate | None = None
    ) -> None:
        """
        Make this set hold exactly the points of `other` that satisfy
        `predicate` (all of them when no predicate is given).
        """
        if other is self:
            if predicate is not None:
                self.difference_update(
                    [point for point in self if not predicate(point)]
                )
            return
        points = list(other)
        self.clear()
        seen = set()
        for point in points:
            if point in seen or (predicate is not None and not predicate(point)):
                continue
            seen.add(point)
            self.insert_new(point)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PointSet):
            return NotImplemented
        if self.size() != other.size():
            return False
        return all(other.contains(point) for point in self)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}(size={self.size()}, domain={self._domain})"


class ListPointSet(PointSet):
    """Point set stored as a list, in insertion order."""

    def __init__(
        self, domain: HyperRectDomain, points: Iterable[Point] = ()
    ) -> None:
        super().__init__(domain)
        self._points: list[Point] = []
        self.update(points)

    def contains(self, point: Point) -> bool:
        return point in self._points

    def insert(self, point: Point) -> None:
        if point not in self._points:
            self.insert_new(point)

    def insert_new(self, point: Point) -> None:
        assert self._domain.contains(point), f"{point} is outside {self._domain}"
        self._points.append(point)

    def erase(self, point: Point) -> None:
        if point in self._points:
            self._points.remove(point)

    def clear(self) -> None:
        self._points.clear()

    def size(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self._points)

    def copy(self) -> ListPointSet:
        clone = ListPointSet(self._domain)
        clone._points = list(self._points)
        return clone


class HashPointSet(PointSet):
    """Point set stored as a hash set."""

    def __init__(
        self, domain: HyperRectDomain, points: Iterable[Point] = ()
    ) -> None:
        super().__init__(domain)
        self._points: set[Point] = set()
        self.update(points)

    def contains(self, point: Point) -> bool:
        return point in self._points

    def insert(self, point: Point) -> None:
        assert self._domain.contains(point), f"{point} is outside {self._domain}"
        self._points.add(point)

    def insert_new(self, point: Point) -> None:
        self.insert(point)

    def update(self, points: Iterable[Point]) -> None:
        points = list(points)
        assert all(self._domain.contains(p) for p in points), (
            f"Some points are outside {self._domain}"
        )
        self._points.update(points)

    def erase(self, point: Point) -> None:
        self._points.discard(point)

    def clear(self) -> None:
        self._points.clear()

    def size(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self._points)

    def copy(self) -> HashPointSet:
        clone = HashPointSet(self._domain)
        clone._points = set(self._points)
        return clone


class ArrayPointSet(PointSet):
    """
    Point set stored as a boolean mask covering the whole domain.

    Example:
        >>> domain = HyperRectDomain((0, 0), (2, 2))
        >>> points = ArrayPointSet(domain, [(0, 0), (2, 1)])
        >>> list(points)
        [(0, 0), (2, 1)]
    """

    def __init__(
        self, domain: HyperRectDomain, points: Iterable[Point] = ()
    ) -> None:
        super().__init__(domain)
        self._mask = np.zeros(domain.shape, dtype=bool)
        self._count = 0
        self.update(points)

    @classmethod
    def from_mask(cls, domain: HyperRectDomain, mask: np.ndarray) -> ArrayPointSet:
        """Build a set from a boolean array indexed like `domain.index`."""
        mask = np.asarray(mask, dtype=bool)
        if mask.shape != domain.shape:
            raise ValueError(
                f"Mask of shape {mask.shape} does not fit domain of shape {domain.shape}"
            )
        points = cls(domain)
        points._mask = mask.copy()
        points._count = int(np.count_nonzero(mask))
        return points

    @property
    def mask(self) -> np.ndarray:
        """Read-only view of the underlying mask."""
        view = self._mask.view()
        view.flags.writeable = False
        return view

    def contains(self, point: Point) -> bool:
        if not self._domain.contains(point):
            return False
        return bool(self._mask[self._domain.index(point)])

    def insert(self, point: Point) -> None:
        assert self._domain.contains(point), f"{point} is outside {self._domain}"
        index = self._domain.index(point)
        if not self._mask[index]:
            self._mask[index] = True
            self._count += 1

    def insert_new(self, point: Point) -> None:
        assert self._domain.contains(point), f"{point} is outside {self._domain}"
        self._mask[self._domain.index(point)] = True
        self._count += 1

    def erase(self, point: Point) -> None:
        if not self._domain.contains(point):
            return
        index = self._domain.index(point)
        if self._mask[index]:
            self._mask[index] = False
            self._count -= 1

    def clear(self) -> None:
        self._mask[...] = False
        self._count = 0

    def size(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[Point]:
        lower = self._domain.lower
        for index in np.argwhere(self._mask).tolist():
            yield tuple(i + low for i, low in zip(index, lower))

    def copy(self) -> ArrayPointSet:
        return ArrayPointSet.from_mask(self._domain, self._mask)


# Backend selection


class SetSize(Enum):
    """Expected number of points, relative to the domain."""

    SMALL = auto()
    MEDIUM = auto()
    BIG = auto()


class SetAccess(Enum):
    """Dominant access pattern."""

    HIGH_ITER = auto()  # Mostly iterated
    HIGH_BEL = auto()  # Mostly membership tests


def select_point_set(
    size: SetSize, access: SetAccess = SetAccess.HIGH_BEL
) -> type[PointSet]:
    """
    Choose a point set backend from usage preferences.

    Args:
        size: Expected size of the set.
        access: Whether iteration or membership tests dominate.

    Returns:
        The backend class to instantiate with a domain.
    """
    match size, access:
        case SetSize.SMALL, _:
            return ListPointSet
        case SetSize.MEDIUM, _:
            return HashPointSet
        case SetSize.BIG, SetAccess.HIGH_BEL:
            return ArrayPointSet
        case SetSize.BIG, SetAccess.HIGH_ITER:
            return HashPointSet
    raise ValueError(f"Unsupported set preferences: {size}, {access}")


def make_point_set(
    domain: HyperRectDomain,
    points: Iterable[Point] = (),
    kind: type[PointSet] = HashPointSet,
) -> PointSet:
    return kind(domain, points)  # type: ignore[call-arg]


def assign(target: PointSet, source: Iterable[Point]) -> None:
    """Make `target` hold exactly the points of `source`."""
    target.assign_from(source)


__all__ = [
    "PointSet",
    "PointPredicate",
    "ListPointSet",
    "HashPointSet",
    "ArrayPointSet",
    "SetSize",
    "SetAccess",
    "select_point_set",
    "make_point_set",
    "assign",
]
