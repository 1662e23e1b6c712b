"""
Reference scenarios on large objects.

- A Euclidean disk of radius < 450 in [-449, 449]^2 under the (4, 8) topology.
- An L1 ball of radius 45 in [-50, 50]^3 under the (6, 18) topology.
"""

import math

import pytest

from decomposition import (
    DomainAdjacency,
    adjacency_4,
    adjacency_6,
    adjacency_8,
    adjacency_18,
)
from kernel import HashPointSet, HyperRectDomain, ListPointSet, Norm, assign, make_ball
from main import main, run_diamond, run_disk
from topology import DigitalTopology, DigitalTopologyProperties, Expander, Object

RADIUS = 449
CENTER = (0, 0)
RIGHT = (RADIUS, 0)


@pytest.fixture(scope="module")
def domain():
    return HyperRectDomain((-RADIUS, -RADIUS), (RADIUS, RADIUS))


@pytest.fixture(scope="module")
def dt48(domain):
    return DigitalTopology(
        DomainAdjacency(domain, adjacency_4()),
        DomainAdjacency(domain, adjacency_8()),
        DigitalTopologyProperties.JORDAN,
    )


@pytest.fixture(scope="module")
def disks(domain, dt48):
    """The disk without its center, and a full copy of it."""
    disk_set = make_ball(domain, CENTER, RADIUS + 1, strict=True, set_kind=HashPointSet)
    disk = Object(dt48, disk_set)
    full = disk.copy()
    disk.mutable_point_set().erase(CENTER)
    full.mutable_point_set().insert(CENTER)
    return disk, full


@pytest.fixture(scope="module")
def border(disks):
    disk, _ = disks
    return disk.border()


class TestDisk:
    def test_sizes(self, disks):
        disk, full = disks
        assert full.size() == 636101
        assert disk.size() == 636100

    def test_copy_on_write(self, disks):
        disk, full = disks
        assert not disk.contains(CENTER)
        assert full.contains(CENTER)
        assert disk.point_set is not full.point_set

    def test_neighborhoods(self, disks):
        disk, full = disks
        assert disk.neighborhood(CENTER).size() == 4
        assert disk.proper_neighborhood(RIGHT).size() == 3
        assert disk.proper_neighborhood_size(RIGHT) == 3
        assert full.neighborhood(CENTER).size() == 5

    def test_set_converter(self, disks):
        disk, full = disks
        neighborhood = full.neighborhood(CENTER)
        assert isinstance(neighborhood.point_set, ListPointSet)
        assign(neighborhood.mutable_point_set(), disk.point_set)
        assert neighborhood.size() == 636100
        assign(neighborhood.mutable_point_set(), full.neighborhood(CENTER).point_set)
        assert neighborhood.size() == 5

    def test_borders(self, disks, border):
        _, full = disks
        assert border.size() == 3372
        assert full.border().size() == 3364

    def test_border_components(self, border):
        # Outer ring and the ring around the removed center
        assert sorted(c.size() for c in border.components()) == [8, 3364]

    def test_expansion_on_border(self, border):
        expander = Expander(border, min(border.point_set))
        while not expander.finished():
            assert expander.layer.size() <= 2
            expander.next_layer()
        assert expander.core.size() == 3364

    def test_expansion_from_center(self, disks):
        _, full = disks
        expander = Expander(full, CENTER)
        while not expander.finished():
            expander.next_layer()
        assert expander.core.size() == full.size()
        assert expander.distance <= math.sqrt(2.0) * (RADIUS + 1)
        assert expander.metric_distance < RADIUS + 1


class TestDiamond:
    def test_clone_then_erase_center(self):
        domain = HyperRectDomain((-50, -50, -50), (50, 50, 50))
        topology = DigitalTopology(
            adjacency_6(), adjacency_18(), DigitalTopologyProperties.JORDAN
        )
        diamond = Object(topology, make_ball(domain, (0, 0, 0), 45, Norm.L1))
        clone = diamond.copy()
        clone.mutable_point_set().erase((0, 0, 0))

        objects = []
        objects.append(diamond)
        objects.append(clone)
        assert objects[0].size() == objects[1].size() + 1
        # (2n + 1)(2n^2 + 2n + 3) / 3 points for n = 45
        assert diamond.size() == 125671


class TestCommandLine:
    def test_small_disk(self):
        results = run_disk(5)
        assert results["size_without_center"] == results["size"] - 1
        assert results["neighborhood_center"] == 4
        assert results["neighborhood_center_full"] == 5
        assert results["proper_neighborhood_right"] == 3
        assert results["border_without_center"] == results["border"] + 8
        assert results["border_components"] == 2
        assert results["expansion_distance"] <= results["expansion_bound"]

    def test_small_diamond(self):
        results = run_diamond(3, 5)
        assert results["size"] == 63
        assert results["clone_size"] == 62

    def test_main_runs(self):
        main(["--scenario", "diamond", "--radius", "3"])
