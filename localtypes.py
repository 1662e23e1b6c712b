"""
Type definitions for digital topology.

This module contains the custom types used throughout the library,
organized by their primary use cases.

Coordinate Convention:
    A point of the digital space Z^n is a plain tuple of n integers.
    Displacements between points (vectors) share the same representation.
"""

from collections.abc import Callable

# Lattice points
type Point = tuple[int, ...]  # (x_0, ..., x_{n-1})
type Vector = tuple[int, ...]  # Difference of two points

# Graph traversal
# A neighbor function takes a point and a universe, returns neighbors within that universe
type PointNeighborFunc = Callable[[Point, frozenset[Point]], frozenset[Point]]


__all__ = [
    # Point types
    "Point",
    "Vector",
    # Graph types
    "PointNeighborFunc",
]
