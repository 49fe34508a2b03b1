"""Route planner service - Session orchestrator.

Ties the graph store to its persistence, the route solver and the
optional map renderer for one interactive session.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from ..adapters.graph.csv_repository import SaveReport
from ..domain.errors import NoRouteFoundError, RenderingError
from ..domain.models import Connection, RouteResult, Station
from ..graph.store import GraphStore
from ..io.report import format_connections, format_route, format_stations
from ..ports.graph import GraphRepositoryPort, RouteSolverPort
from ..ports.rendering import MapRendererPort


@dataclass
class RoutePlannerService:
    """Main service for an interactive route planning session.

    The store is created by the caller and owned by this service for
    the lifetime of the session.

    Attributes:
        store: The session's graph
        repository: Loads and saves the graph
        route_solver: Computes shortest paths
        map_renderer: Optional route map rendering
        map_output_path: Where rendered maps are written
    """

    store: GraphStore
    repository: GraphRepositoryPort
    route_solver: RouteSolverPort
    map_renderer: Optional[MapRendererPort] = None
    map_output_path: Optional[Path] = None

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def load(self) -> int:
        """Load the persisted graph into the store.

        Returns:
            Number of stations in the store after loading.

        Raises:
            GraphError: If the data files are missing or malformed.
        """
        self.repository.load_into(self.store)
        return self.store.station_count

    def add_station(self, code: str, name: str, lat: float, lon: float) -> Station:
        return self.store.add_station(code, name, lat, lon)

    def add_connection(
        self, source: str, target: str, transport_type: str, weight: float
    ) -> Connection:
        return self.store.add_connection(source, target, transport_type, weight)

    def delete_station(self, code: str) -> bool:
        return self.store.delete_station(code)

    def delete_connection(self, source: str, target: str) -> int:
        return self.store.delete_connection(source, target)

    def find_route(self, departure: str, arrival: str) -> RouteResult:
        """Find the cheapest route between two existing stations.

        The reported cost is recomputed from the path's connections.

        Returns:
            The route, or an empty RouteResult when ``arrival`` is
            unreachable.

        Raises:
            StationNotFoundError: If either station does not exist.
        """
        try:
            route = self.route_solver.solve(self.store, departure, arrival)
        except NoRouteFoundError:
            return RouteResult(path=(), total_cost=float("inf"))

        cost = self.route_solver.path_cost(self.store, route.path)
        return RouteResult(path=route.path, total_cost=cost, stations=route.stations)

    def render_route(self, route: RouteResult) -> Optional[Path]:
        """Render ``route`` to a map if a renderer is configured.

        Rendering failures are logged and swallowed so the session
        continues.

        Returns:
            The written map path, or None if nothing was rendered.
        """
        if self.map_renderer is None or self.map_output_path is None:
            return None
        if not route.stations:
            return None

        try:
            return self.map_renderer.render(route.stations, self.map_output_path)
        except RenderingError as e:
            self._logger.warning(
                "Map generation failed",
                extra={"error": str(e)},
            )
            return None

    def save(self) -> SaveReport:
        report = self.repository.save(self.store)
        for error in report.errors:
            self._logger.warning(
                "Save incomplete",
                extra={"file_path": error.file_path, "error": str(error)},
            )
        return report

    def describe_stations(self) -> str:
        return format_stations(self.store)

    def describe_connections(self) -> str:
        return format_connections(self.store)

    def describe_route(self, route: RouteResult) -> str:
        return format_route(self.store, route)
