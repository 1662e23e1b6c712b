"""
Bounded rectangular domains of Z^n.

A domain only bounds iteration and validates points: point sets are
always attached to one, and array-backed sets use it to size their
storage.
"""

from collections.abc import Iterator
from itertools import product

import numpy as np

from localtypes import Point


class HyperRectDomain:
    """
    Axis-aligned box [lower, upper] of Z^n, bounds included.

    Example:
        >>> domain = HyperRectDomain((-1, -1), (1, 1))
        >>> len(domain)
        9
        >>> (0, 1) in domain
        True
    """

    __slots__ = ("_lower", "_upper")

    def __init__(self, lower: Point, upper: Point) -> None:
        lower, upper = tuple(lower), tuple(upper)
        if len(lower) != len(upper):
            raise ValueError(
                f"Domain bounds have different dimensions: {lower}, {upper}"
            )
        if any(low > up for low, up in zip(lower, upper)):
            raise ValueError(f"Empty domain: lower {lower} exceeds upper {upper}")
        self._lower: Point = lower
        self._upper: Point = upper

    @property
    def lower(self) -> Point:
        return self._lower

    @property
    def upper(self) -> Point:
        return self._upper

    @property
    def dimension(self) -> int:
        return len(self._lower)

    @property
    def shape(self) -> tuple[int, ...]:
        """Number of points along each axis."""
        return tuple(up - low + 1 for low, up in zip(self._lower, self._upper))

    def size(self) -> int:
        return int(np.prod(self.shape))

    def __len__(self) -> int:
        return self.size()

    def contains(self, point: Point) -> bool:
        if len(point) != len(self._lower):
            return False
        # Called once per candidate neighbor: plain loop, no generator
        for c, low, up in zip(point, self._lower, self._upper):
            if c < low or c > up:
                return False
        return True

    def __contains__(self, point: object) -> bool:
        return isinstance(point, tuple) and self.contains(point)

    def __iter__(self) -> Iterator[Point]:
        """Every point of the domain, first coordinate varying slowest."""
        ranges = [range(low, up + 1) for low, up in zip(self._lower, self._upper)]
        return iter(product(*ranges))

    def index(self, point: Point) -> tuple[int, ...]:
        """Array index of a point, (0, ..., 0) being the lower corner."""
        return tuple(c - low for c, low in zip(point, self._lower))

    def point(self, index: tuple[int, ...]) -> Point:
        """Inverse of `index`."""
        return tuple(int(i) + low for i, low in zip(index, self._lower))

    def coordinates(self) -> tuple[np.ndarray, ...]:
        """
        One integer array per axis, each of `shape`, holding the coordinate
        of every point along that axis. Used to build predicates on the
        whole domain at once.
        """
        grids = np.indices(self.shape)
        return tuple(grid + low for grid, low in zip(grids, self._lower))

    def __eq__(self, other: object) -> bool:
        if isinstance(other, HyperRectDomain):
            return self._lower == other._lower and self._upper == other._upper
        return False

    def __hash__(self) -> int:
        return hash((self._lower, self._upper))

    def __repr__(self) -> str:
        return f"HyperRectDomain({self._lower}, {self._upper})"
