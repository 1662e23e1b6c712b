"""
Kernel of the digital space: points, domains and point sets.

**Points** (point.py)
    Integer tuples with translation, difference and norms.

**Domains** (domain.py)
    HyperRectDomain bounding every point set.

**Point sets** (sets.py)
    Mutable sets of points with list, hash and array backends.

**Copy-on-write** (cow.py)
    CowPtr, sharing a point set between owners until one writes to it.

**Shapes** (shapes.py)
    Digital balls for the L1, L2 and Linf norms.
"""

from .cow import CowPtr
from .domain import HyperRectDomain
from .point import Norm, add, distance, norm, norm1, norm_max, origin, subtract
from .shapes import ball_mask, make_ball
from .sets import (
    ArrayPointSet,
    HashPointSet,
    ListPointSet,
    PointSet,
    SetAccess,
    SetSize,
    assign,
    make_point_set,
    select_point_set,
)

__all__ = [
    # Points
    "Norm",
    "origin",
    "add",
    "subtract",
    "norm",
    "norm1",
    "norm_max",
    "distance",
    # Domains
    "HyperRectDomain",
    # Point sets
    "PointSet",
    "ListPointSet",
    "HashPointSet",
    "ArrayPointSet",
    "SetSize",
    "SetAccess",
    "select_point_set",
    "make_point_set",
    "assign",
    # Copy-on-write
    "CowPtr",
    # Shapes
    "ball_mask",
    "make_ball",
]
