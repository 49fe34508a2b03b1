"""Dijkstra Route Solver adapter.

This adapter wraps graph/dijkstra.py and adds:
- Domain model output (RouteResult)
- Station resolution
- Typed errors for unknown endpoints and unreachable pairs
- Logging
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Sequence, Tuple

from ...domain.errors import NoRouteFoundError, StationNotFoundError
from ...domain.models import RouteResult, Station
from ...graph.dijkstra import calculate_path_cost, shortest_path
from ...ports.graph import GraphView


@dataclass
class DijkstraRouteSolver:
    """Route solver using Dijkstra's shortest path algorithm.

    This adapter implements RouteSolverPort.
    """

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def solve(
        self,
        graph: GraphView,
        departure: str,
        arrival: str,
    ) -> RouteResult:
        """Find the minimum-cost path between two stations.

        Args:
            graph: The network to search.
            departure: Departure station code.
            arrival: Arrival station code.

        Returns:
            RouteResult with path, cost, and station details.

        Raises:
            StationNotFoundError: If departure or arrival is not a station.
            NoRouteFoundError: If no path exists.
        """
        self._logger.debug(
            "Solving route",
            extra={"departure": departure, "arrival": arrival},
        )

        # Validate inputs
        if departure not in graph.stations:
            raise StationNotFoundError(
                f"Departure station not in graph: {departure}",
                station_code=departure,
            )
        if arrival not in graph.stations:
            raise StationNotFoundError(
                f"Arrival station not in graph: {arrival}",
                station_code=arrival,
            )

        path, cost = shortest_path(graph, departure, arrival)

        if not path:
            self._logger.warning(
                "No route found",
                extra={"departure": departure, "arrival": arrival},
            )
            raise NoRouteFoundError(
                f"No path from {departure} to {arrival}",
                departure=departure,
                arrival=arrival,
            )

        self._logger.info(
            "Route found",
            extra={
                "departure": departure,
                "arrival": arrival,
                "stops": len(path),
                "cost": cost,
            },
        )

        return RouteResult(
            path=tuple(path),
            total_cost=cost,
            stations=self._resolve(graph, path),
        )

    def solve_safe(
        self,
        graph: GraphView,
        departure: str,
        arrival: str,
    ) -> RouteResult:
        """Find the shortest path, returning an empty result on failure.

        Like solve(), but returns an empty RouteResult instead of raising.
        """
        try:
            return self.solve(graph, departure, arrival)
        except (StationNotFoundError, NoRouteFoundError):
            return RouteResult(path=(), total_cost=float("inf"))

    def path_cost(self, graph: GraphView, path: Sequence[str]) -> float:
        """Recompute the cost of ``path`` from the graph's connections.

        Raises:
            PathConsistencyError: If a hop has no matching connection.
        """
        return calculate_path_cost(graph, path)

    @staticmethod
    def _resolve(graph: GraphView, path: List[str]) -> Tuple[Station, ...]:
        stations = graph.stations
        return tuple(stations[code] for code in path if code in stations)
