"""
Generic object extraction via connected components.

Objects are connected sets of points. What constitutes "connected"
is determined by the adjacency (connectivity).

This module works on any point collection and any adjacency, independently
of the digital object machinery built on top of it.
"""

from collections.abc import Iterable, Iterator, Set

from decomposition.connectivity import Adjacency
from kernel.sets import PointSet
from localtypes import Point
from utils.graph import iter_connected_components, nodes_to_connected_components


def iter_components(
    points: Set[Point] | Iterable[Point],
    adjacency: Adjacency,
) -> Iterator[list[Point]]:
    """
    Yield the connected components of `points` under `adjacency`.

    `points` may be any collection supporting membership tests (a point set
    for instance); other iterables are materialized first.
    """
    universe = points if isinstance(points, (Set, PointSet)) else frozenset(points)
    return iter_connected_components(universe, adjacency.proper_neighborhood)


def extract_connected_components(
    points: frozenset[Point],
    adjacency: Adjacency,
) -> frozenset[frozenset[Point]]:
    """
    Extract connected components from points using given adjacency.

    Args:
        points: Set of points to partition.
        adjacency: Relation deciding which points are neighbors.

    Returns:
        Frozenset of connected components (each a frozenset of points).
    """
    if not points:
        return frozenset()

    return nodes_to_connected_components(points, adjacency.proper_neighborhood)
