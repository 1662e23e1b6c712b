"""
Functions related to graphs
"""

from collections import deque
from collections.abc import Callable, Collection, Hashable, Iterable, Iterator, Set
from typing import TypeVar

T = TypeVar("T", bound=Hashable)


def iter_connected_components(
    nodes: Collection[T], node_to_neighbours: Callable[[T], Iterable[T]]
) -> Iterator[list[T]]:
    """
    Extract connected components from an undirected graph structure.

    Components are yielded in discovery order, each as the list of its nodes
    in breadth-first order. A node is marked when it is enqueued, so no node
    is visited twice.

    Args:
        nodes: Nodes of the graph, also used for membership tests, which
            should therefore be fast (a set or a hashed point set).
        node_to_neighbours: Function returning the nodes adjacent to a node.
            Only neighbours belonging to `nodes` are followed.

    Yields:
        list[T]: One connected component at a time.
    """
    seen: set[T] = set()

    for node in nodes:
        # Avoid visiting an already seen component
        if node in seen:
            continue

        seen.add(node)
        component = [node]
        queue = deque([node])
        while queue:
            current = queue.popleft()
            for neighbour in node_to_neighbours(current):
                if neighbour in seen or neighbour not in nodes:
                    continue
                seen.add(neighbour)
                component.append(neighbour)
                queue.append(neighbour)

        yield component


def nodes_to_connected_components(
    nodes: Set[T], node_to_neighbours: Callable[[T], Iterable[T]]
) -> frozenset[frozenset[T]]:
    """
    Extract connected components from an undirected graph structure.

    Args:
        nodes: set of nodes in the graph.
        node_to_neighbours: Function returning the set of nodes a given node points to.

    Returns:
        frozenset[frozenset[T]]: set of connected components of the graph
    """
    return frozenset(
        frozenset(component)
        for component in iter_connected_components(nodes, node_to_neighbours)
    )

