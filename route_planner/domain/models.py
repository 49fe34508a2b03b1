"""Immutable domain models for the route planner.

Stations and connections are frozen dataclasses; the graph store
replaces them rather than mutating them in place.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class Station:
    """A named location in the network.

    Coordinates are not range-checked here: records loaded from disk
    are accepted as-is, only interactive adds are validated.

    Attributes:
        code: Unique station identifier (e.g., 'PAR_N')
        name: Display name, stored untruncated
        lat: Latitude in degrees
        lon: Longitude in degrees
    """

    code: str
    name: str
    lat: float
    lon: float


@dataclass(frozen=True, slots=True)
class Connection:
    """A directed, weighted link between two stations.

    Attributes:
        source: Station the connection leaves from
        target: Station the connection arrives at
        transport_type: Free-text label (bus, train, ...)
        weight: Travel cost
    """

    source: str
    target: str
    transport_type: str
    weight: float


@dataclass(frozen=True, slots=True)
class RouteResult:
    """Result of a route query between two stations.

    Attributes:
        path: Ordered tuple of station codes forming the route
        total_cost: Sum of connection weights along the route
        stations: Resolved station details for each stop
    """

    path: tuple[str, ...]
    total_cost: float
    stations: tuple[Station, ...] = field(default_factory=tuple)

    @property
    def is_empty(self) -> bool:
        """Check if no route was found."""
        return len(self.path) == 0

    @property
    def num_stops(self) -> int:
        """Return the number of stops in the route."""
        return len(self.path)
