"""
Generic decomposition primitives.

This package provides domain-agnostic primitives for decomposing point sets:

**Connectivity** (connectivity.py)
    Defines adjacency relations. Different adjacencies produce different
    decompositions of the same data.
    - MetricAdjacency: unit-cube adjacency bounded in L1 norm
    - DomainAdjacency: any adjacency restricted to a domain
    - adjacency_4 / adjacency_8 in 2D, adjacency_6 / 18 / 26 in 3D

**Objects** (objects.py)
    Connected component extraction parameterized by adjacency.
    - extract_connected_components(points, adjacency) -> components
    - iter_components(points, adjacency) -> lazy components

The digital object built on top of these (topology, border, expansion)
lives in topology/.
"""

from .connectivity import (
    Adjacency,
    DomainAdjacency,
    MetricAdjacency,
    adjacency_4,
    adjacency_6,
    adjacency_8,
    adjacency_18,
    adjacency_26,
    make_neighbors,
    metric_offsets,
)
from .objects import (
    extract_connected_components,
    iter_components,
)

__all__ = [
    # Connectivity
    "Adjacency",
    "MetricAdjacency",
    "DomainAdjacency",
    "metric_offsets",
    "make_neighbors",
    "adjacency_4",
    "adjacency_8",
    "adjacency_6",
    "adjacency_18",
    "adjacency_26",
    # Objects
    "extract_connected_components",
    "iter_components",
]
