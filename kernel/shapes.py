"""
Digital balls, built over a whole domain at once with numpy.
"""

import numpy as np

from kernel.domain import HyperRectDomain
from kernel.point import Norm
from kernel.sets import ArrayPointSet, HashPointSet, PointSet
from localtypes import Point


def ball_mask(
    domain: HyperRectDomain,
    center: Point,
    radius: float,
    kind: Norm = Norm.L2,
    strict: bool = False,
) -> np.ndarray:
    """
    Boolean mask (indexed like `domain.index`) of the points p of the domain
    with norm(p - center) <= radius, or < radius when `strict`.
    """
    if len(center) != domain.dimension:
        raise ValueError(f"Center {center} does not fit {domain}")
    deltas = [axis - c for axis, c in zip(domain.coordinates(), center)]
    match kind:
        case Norm.L1:
            measure = sum(np.abs(d) for d in deltas)
        case Norm.LINF:
            measure = np.max(np.abs(np.stack(deltas)), axis=0)
        case Norm.L2:
            measure = np.sqrt(sum(d.astype(np.float64) ** 2 for d in deltas))
    return measure < radius if strict else measure <= radius


def make_ball(
    domain: HyperRectDomain,
    center: Point,
    radius: float,
    kind: Norm = Norm.L2,
    strict: bool = False,
    set_kind: type[PointSet] = HashPointSet,
) -> PointSet:
    """
    Point set of a digital ball.

    Example:
        >>> domain = HyperRectDomain((-449, -449), (449, 449))
        >>> len(make_ball(domain, (0, 0), 450, strict=True))
        636101
    """
    mask = ball_mask(domain, center, radius, kind, strict)
    array = ArrayPointSet.from_mask(domain, mask)
    if set_kind is ArrayPointSet:
        return array
    points = set_kind(domain)  # type: ignore[call-arg]
    points.assign_from(array)
    return points
