"""Tests for topology/expander.py"""

import math

import numpy as np
import pytest

from decomposition import DomainAdjacency, adjacency_4, adjacency_8
from kernel import HashPointSet, HyperRectDomain
from topology import DigitalTopology, Expander, Object


@pytest.fixture
def domain():
    return HyperRectDomain((-6, -6), (6, 6))


@pytest.fixture
def dt48(domain):
    return DigitalTopology(
        DomainAdjacency(domain, adjacency_4()),
        DomainAdjacency(domain, adjacency_8()),
    )


@pytest.fixture
def line(dt48, domain):
    return Object(dt48, HashPointSet(domain, [(x, 0) for x in range(5)]))


def drive(expander):
    """Run an expander to the end, returning the list of its layers."""
    return [set(layer) for layer in expander.iter_layers()]


class TestExpander:
    def test_seed_layer(self, line):
        expander = Expander(line, (0, 0))
        assert set(expander.layer) == {(0, 0)}
        assert set(expander.core) == {(0, 0)}
        assert expander.distance == 0
        assert expander.metric_distance == 0.0
        assert not expander.finished()

    def test_from_line_end(self, line):
        expander = Expander(line, (0, 0))
        layers = drive(expander)
        assert layers == [{(x, 0)} for x in range(5)]
        assert expander.finished()
        assert expander.distance == 4
        assert expander.metric_distance == 4.0
        assert expander.layer.size() == 0

    def test_from_line_middle(self, line):
        expander = Expander(line, (2, 0))
        expander.next_layer()
        assert set(expander.layer) == {(1, 0), (3, 0)}
        assert expander.distance == 1
        expander.next_layer()
        assert set(expander.layer) == {(0, 0), (4, 0)}
        expander.next_layer()
        assert expander.finished()
        assert expander.distance == 2

    def test_several_seeds(self, line):
        expander = Expander(line, [(0, 0), (4, 0), (0, 0)])
        assert expander.seeds == ((0, 0), (4, 0))
        layers = drive(expander)
        assert layers == [{(0, 0), (4, 0)}, {(1, 0), (3, 0)}, {(2, 0)}]
        assert expander.metric_distance == 2.0

    def test_seed_outside_object(self, line):
        expander = Expander(line, (3, 3))
        assert expander.finished()
        assert expander.layer.empty()
        assert drive(expander) == []

    def test_next_layer_after_finish_is_a_precondition_violation(self, line):
        expander = Expander(line, (3, 3))
        with pytest.raises(AssertionError):
            expander.next_layer()

    def test_stays_in_seed_component(self, dt48, domain):
        points = [(x, 0) for x in range(3)] + [(x, 2) for x in range(3)]
        obj = Object(dt48, HashPointSet(domain, points))
        expander = Expander(obj, (0, 0))
        drive(expander)
        assert set(expander.core) == {(0, 0), (1, 0), (2, 0)}

    def test_isolated_from_later_mutations(self, line):
        expander = Expander(line, (0, 0))
        line.mutable_point_set().erase((2, 0))
        layers = drive(expander)
        assert len(layers) == 5
        assert line.size() == 4

    def test_coverage_and_disjointness(self, dt48, domain):
        rng = np.random.default_rng(3)
        points = [p for p in domain if rng.random() < 0.6] + [(0, 0)]
        obj = Object(dt48, HashPointSet(domain, points))
        expander = Expander(obj, (0, 0))

        seen = set()
        previous_distance = -1
        while not expander.finished():
            layer = set(expander.layer)
            assert not layer & seen
            assert expander.distance > previous_distance
            previous_distance = expander.distance
            seen |= layer
            expander.next_layer()

        (component,) = [
            set(c) for c in obj.components() if c.contains((0, 0))
        ]
        assert seen == component
        assert set(expander.core) == component

    def test_metric_distance_bounds(self, dt48, domain):
        obj = Object(dt48, HashPointSet(domain, domain))
        expander = Expander(obj, (0, 0))
        drive(expander)
        # 4-adjacency: geodesic distance is the L1 norm
        assert expander.distance == 12
        assert expander.metric_distance == pytest.approx(math.sqrt(72))
        assert expander.metric_distance <= expander.distance

    def test_display(self, line):
        expander = Expander(line, (0, 0))
        expander.next_layer()
        assert str(expander) == "[Expander layer=1 #layer=1 #core=2]"
