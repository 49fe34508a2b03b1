"""Shortest-path computation using Dijkstra's algorithm.

This module computes minimum-cost paths between two stations of a
graph view and recomputes the cost of a given path. Weights are
assumed to be non-negative; the graph is only read.
"""

import heapq
from typing import Dict, List, Sequence, Tuple

from ..domain.errors import PathConsistencyError
from ..ports.graph import GraphView

INF = float("inf")


def shortest_path(graph: GraphView, start: str, end: str) -> Tuple[List[str], float]:
    """Compute the shortest path between two stations using Dijkstra.

    Parameters
    ----------
    graph:
        Graph to search, usually a ``GraphStore``.
    start:
        Identifier of the departure station.
    end:
        Identifier of the arrival station.

    Returns
    -------
    list[str], float
        The sequence of station identifiers from ``start`` to ``end``
        (inclusive) and its total weight. If no path exists, returns
        ``([], float("inf"))``. ``start == end`` gives ``([start], 0.0)``.

    Notes
    -----
    Heap entries are ``(cost, station)`` tuples, so equal costs pop in
    station id order. A node's predecessor only changes on a strictly
    cheaper relaxation.
    """
    adjacency = graph.adjacency
    distances: Dict[str, float] = {station: INF for station in graph.stations}
    previous: Dict[str, str] = {}
    distances[start] = 0.0

    heap: List[Tuple[float, str]] = [(0.0, start)]

    while heap:
        current_distance, u = heapq.heappop(heap)

        if current_distance > distances.get(u, INF):
            continue  # stale

        if u == end:
            break

        for connection in adjacency.get(u, ()):
            v = connection.target
            new_distance = current_distance + connection.weight
            if new_distance < distances.get(v, INF):
                distances[v] = new_distance
                previous[v] = u
                heapq.heappush(heap, (new_distance, v))

    if end not in previous and end != start:
        return [], INF

    path: List[str] = [end]
    current = end
    while current != start:
        current = previous[current]
        path.append(current)

    path.reverse()
    return path, distances[end]


def find_shortest_path(graph: GraphView, start: str, end: str) -> List[str]:
    """Return only the station sequence of the shortest path (may be empty)."""
    path, _ = shortest_path(graph, start, end)
    return path


def calculate_path_cost(graph: GraphView, path: Sequence[str]) -> float:
    """Sum the weights along ``path``.

    For each hop the first connection from ``path[i]`` to ``path[i + 1]``
    in insertion order is used.

    Raises
    ------
    PathConsistencyError
        If a hop has no matching connection in the graph.
    """
    adjacency = graph.adjacency
    total = 0.0
    for source, target in zip(path, path[1:]):
        for connection in adjacency.get(source, ()):
            if connection.target == target:
                total += connection.weight
                break
        else:
            raise PathConsistencyError(
                f"No connection from {source} to {target}",
                source=source,
                target=target,
            )
    return total
