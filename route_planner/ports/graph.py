"""Graph ports - Abstractions for graph persistence and routing.

These protocols define the contracts for graph operations: a read-only
view the path finder works against, persistence of the station and
connection records, and route computation.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Mapping, Protocol, Sequence

if TYPE_CHECKING:
    from ..adapters.graph.csv_repository import SaveReport
    from ..domain.models import Connection, RouteResult, Station
    from ..graph.store import GraphStore

# Raw tabular rows, header first
Records = Sequence[Sequence[str]]


class GraphView(Protocol):
    """Read-only view of a graph.

    Implementation: graph/store.py (GraphStore)

    ``adjacency`` maps a station id to its outgoing connections in
    insertion order. A missing entry means the station has no
    outgoing connections.
    """

    @property
    def stations(self) -> Mapping[str, Station]:
        ...

    @property
    def adjacency(self) -> Mapping[str, Sequence[Connection]]:
        ...


class GraphRepositoryPort(Protocol):
    """Port for loading and saving graph data.

    Implementation: adapters/graph/csv_repository.py
    """

    def load_into(self, store: GraphStore) -> None:
        """Load stations then connections into ``store``.

        Raises:
            GraphError: If either source is missing or malformed.
        """
        ...

    def save(self, store: GraphStore) -> SaveReport:
        """Persist the current contents of ``store``.

        Returns:
            A report listing any per-file failures.
        """
        ...


class RouteSolverPort(Protocol):
    """Port for route computation.

    Implementation: adapters/graph/dijkstra_solver.py
    """

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
        """
        ...

    def path_cost(self, graph: GraphView, path: Sequence[str]) -> float:
        """Recompute the total weight of ``path``."""
        ...
