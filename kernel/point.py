"""
Point arithmetic on the digital space Z^n.

Points and vectors are plain integer tuples, so they are hashable,
comparable and cheap to build. This module gathers the few operations
the topology layer needs: translation, difference and norms.
"""

import math
from enum import StrEnum

from localtypes import Point, Vector


class Norm(StrEnum):
    """Norms available to measure vectors"""

    L1 = "l1"
    L2 = "l2"
    LINF = "linf"


def origin(dimension: int) -> Point:
    return (0,) * dimension


def add(point: Point, vector: Vector) -> Point:
    assert len(point) == len(vector), f"Dimension mismatch: {point} + {vector}"
    return tuple(a + b for a, b in zip(point, vector))


def subtract(p: Point, q: Point) -> Vector:
    assert len(p) == len(q), f"Dimension mismatch: {p} - {q}"
    return tuple(a - b for a, b in zip(p, q))


def norm1(vector: Vector) -> int:
    return sum(abs(c) for c in vector)


def norm_max(vector: Vector) -> int:
    return max((abs(c) for c in vector), default=0)


def norm(vector: Vector, kind: Norm = Norm.L2) -> float:
    """
    Measure a vector.

    Args:
        vector: Integer displacement.
        kind: Which norm to use, Euclidean by default.

    Returns:
        The norm as a float (exact for L1 and Linf).
    """
    match kind:
        case Norm.L1:
            return float(norm1(vector))
        case Norm.LINF:
            return float(norm_max(vector))
        case Norm.L2:
            return math.sqrt(sum(c * c for c in vector))


def distance(p: Point, q: Point, kind: Norm = Norm.L2) -> float:
    """Norm of the vector p - q."""
    return norm(subtract(p, q), kind)
