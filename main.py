"""
Run the reference digital topology scenarios.

- disk: a Euclidean disk under the (4, 8) topology. Exercises copy-on-write,
  neighborhoods, borders, components and expansion.
- diamond: an L1 ball in 3D under the (6, 18) topology. Exercises
  copy-on-write on a large set.
"""

import argparse
import logging
import math
import time

from constants import DIAMOND_DOMAIN_RADIUS, DIAMOND_RADIUS, DISK_RADIUS, LOG_FORMAT
from decomposition import (
    DomainAdjacency,
    adjacency_4,
    adjacency_6,
    adjacency_8,
    adjacency_18,
)
from kernel import HyperRectDomain, Norm, make_ball
from topology import DigitalTopology, DigitalTopologyProperties, Expander, Object

logger = logging.getLogger(__name__)


def run_disk(radius: int = DISK_RADIUS) -> dict[str, int | float]:
    """
    Disk of norm < radius + 1 in [-radius, radius]^2.

    Returns the measured quantities, keyed by name.
    """
    domain = HyperRectDomain((-radius, -radius), (radius, radius))
    topology = DigitalTopology(
        DomainAdjacency(domain, adjacency_4()),
        DomainAdjacency(domain, adjacency_8()),
        DigitalTopologyProperties.JORDAN,
    )
    center = (0, 0)
    right = (radius, 0)

    start = time.perf_counter()
    disk = Object.attach(topology, make_ball(domain, center, radius + 1, strict=True))
    logger.info(f"Disk built in {time.perf_counter() - start:.2f}s: {disk}")

    full = disk.copy()
    disk.mutable_point_set().erase(center)
    results: dict[str, int | float] = {
        "size": full.size(),
        "size_without_center": disk.size(),
        "neighborhood_center": disk.neighborhood_size(center),
        "neighborhood_center_full": full.neighborhood_size(center),
        "proper_neighborhood_right": disk.proper_neighborhood_size(right),
    }

    start = time.perf_counter()
    border = disk.border()
    results["border_without_center"] = border.size()
    results["border"] = full.border().size()
    logger.info(f"Borders computed in {time.perf_counter() - start:.2f}s")

    results["border_components"] = len(border.components())

    expander = Expander(full, center)
    for _ in expander.iter_layers():
        pass
    results["expansion_distance"] = expander.distance
    results["expansion_metric_distance"] = round(expander.metric_distance, 3)
    results["expansion_bound"] = round(math.sqrt(2.0) * (radius + 1), 3)
    return results


def run_diamond(
    radius: int = DIAMOND_RADIUS, domain_radius: int = DIAMOND_DOMAIN_RADIUS
) -> dict[str, int | float]:
    """L1 ball of the given radius in [-domain_radius, domain_radius]^3."""
    r = domain_radius
    domain = HyperRectDomain((-r, -r, -r), (r, r, r))
    topology = DigitalTopology(
        adjacency_6(), adjacency_18(), DigitalTopologyProperties.JORDAN
    )
    center = (0, 0, 0)

    diamond = Object.attach(topology, make_ball(domain, center, radius, Norm.L1))
    # Almost free: the point set is shared
    clone = diamond.copy()
    # The point set is duplicated here, since it is shared
    clone.mutable_point_set().erase(center)

    return {
        "size": diamond.size(),
        "clone_size": clone.size(),
        "border": diamond.border().size(),
    }


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Run digital topology scenarios")
    parser.add_argument(
        "--scenario",
        choices=["disk", "diamond"],
        default="disk",
        help="Scenario to run",
    )
    parser.add_argument(
        "--radius",
        type=int,
        default=None,
        help="Domain half-width of the disk, or L1 radius of the diamond",
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    logger.info(f"Running scenario: {args.scenario}")
    if args.scenario == "disk":
        results = run_disk(args.radius if args.radius is not None else DISK_RADIUS)
    else:
        radius = args.radius if args.radius is not None else DIAMOND_RADIUS
        results = run_diamond(radius, max(DIAMOND_DOMAIN_RADIUS, radius))

    for name, value in results.items():
        logger.info(f"  {name}: {value}")


if __name__ == "__main__":
    main()
