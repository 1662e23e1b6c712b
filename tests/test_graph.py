"""Tests for utils/graph.py"""

from utils.graph import iter_connected_components, nodes_to_connected_components

# A path 1 - 2 - 3, an edge 4 - 5 and an isolated node 6
EDGES = {1: {2}, 2: {1, 3}, 3: {2}, 4: {5}, 5: {4}, 6: set()}


def neighbours(node):
    return EDGES[node]


class TestConnectedComponents:
    def test_partition(self):
        result = nodes_to_connected_components(frozenset(EDGES), neighbours)
        expected = frozenset(
            [frozenset({1, 2, 3}), frozenset({4, 5}), frozenset({6})]
        )
        assert result == expected

    def test_empty_graph(self):
        assert nodes_to_connected_components(frozenset(), neighbours) == frozenset()

    def test_components_are_disjoint_lists(self):
        components = list(iter_connected_components(set(EDGES), neighbours))
        nodes = [node for component in components for node in component]
        assert len(nodes) == len(set(nodes)) == len(EDGES)

    def test_neighbours_outside_nodes_are_ignored(self):
        components = list(iter_connected_components({1, 2}, neighbours))
        assert components == [[1, 2]] or components == [[2, 1]]

    def test_breadth_first_order_within_component(self):
        components = list(iter_connected_components({2, 1, 3}, neighbours))
        assert len(components) == 1
        (component,) = components
        assert sorted(component) == [1, 2, 3]
        # Every node is reached from one listed before it
        for i, node in enumerate(component[1:], start=1):
            assert EDGES[node] & set(component[:i])

