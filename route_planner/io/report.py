"""Human-readable listings of stations, connections and routes."""

from __future__ import annotations

from typing import List

from ..domain.models import RouteResult
from ..graph.store import GraphStore

ID_WIDTH = 10
NAME_WIDTH = 25
MAX_NAME_CHARS = 24
UNKNOWN_NAME = "?"
ARROW = " → "


def truncate_name(name: str) -> str:
    if len(name) > MAX_NAME_CHARS:
        return name[:MAX_NAME_CHARS] + "..."
    return name


def _name_or_unknown(store: GraphStore, code: str) -> str:
    # Loaded connections may point at stations that do not exist
    station = store.get_station(code)
    return station.name if station is not None else UNKNOWN_NAME


def format_stations(store: GraphStore) -> str:
    lines: List[str] = [
        f"=== All Stations ({store.station_count}) ===",
        f"{'ID':<{ID_WIDTH}}{'Name':<{NAME_WIDTH}}Coordinates",
        "-" * 60,
    ]
    for station in store.list_stations():
        lines.append(
            f"{station.code:<{ID_WIDTH}}"
            f"{truncate_name(station.name):<{NAME_WIDTH}}"
            f"({station.lat:.6f}, {station.lon:.6f})"
        )
    return "\n".join(lines)


def format_connections(store: GraphStore) -> str:
    lines: List[str] = ["=== All Connections ==="]
    for connection in store.list_connections():
        lines.append(
            f"{connection.source} ({_name_or_unknown(store, connection.source)})"
            f"{ARROW}"
            f"{connection.target} ({_name_or_unknown(store, connection.target)})"
            f" via {connection.transport_type} ({connection.weight:g})"
        )
    return "\n".join(lines)


def format_route(store: GraphStore, route: RouteResult) -> str:
    """Format a route as ``A (name) → B (name)`` plus its total cost."""
    if route.is_empty:
        return "No path exists!"

    stops = ARROW.join(
        f"{code} ({_name_or_unknown(store, code)})" for code in route.path
    )
    return f"Optimal Route:\n{stops}\nTotal cost: {route.total_cost:g}"
