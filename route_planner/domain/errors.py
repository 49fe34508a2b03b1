"""Typed domain errors for the route planner.

Every failure the core can signal has its own type so that each layer
can decide whether it is fatal (loading), recoverable at the prompt
(validation) or a contract violation (lookups on unknown ids).

All errors inherit from RoutePlannerError and can optionally wrap a
root cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class RoutePlannerError(Exception):
    """Base error for the route planner domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class GraphError(RoutePlannerError):
    """Graph data could not be loaded.

    Raised when a data file is missing or unreadable at startup.

    Attributes:
        file_path: Path to the graph data file if relevant
    """

    file_path: Optional[str] = None


@dataclass
class RecordParseError(GraphError):
    """A record could not be parsed while loading.

    Attributes:
        row_number: 1-based row number in the source (header is row 1)
        value: The raw field that failed to parse, if any
    """

    row_number: int = 0
    value: Optional[str] = None


@dataclass
class ValidationError(RoutePlannerError):
    """Input rejected before it reached the graph store.

    Attributes:
        field_name: Name of the rejected field
        value: The rejected value, as given
    """

    field_name: str = ""
    value: object = None


@dataclass
class InvalidStationIdError(ValidationError):
    """Station id does not match the identifier format."""


@dataclass
class DuplicateStationError(ValidationError):
    """Station id is already in use."""


@dataclass
class CoordinateOutOfRangeError(ValidationError):
    """Latitude or longitude outside its valid range."""


@dataclass
class UnknownStationError(ValidationError):
    """A connection endpoint does not reference an existing station."""


@dataclass
class InvalidWeightError(ValidationError):
    """Connection weight is not a strictly positive number."""


@dataclass
class StationNotFoundError(RoutePlannerError):
    """Station code not found in the graph.

    Attributes:
        station_code: The station code that was not found
    """

    station_code: str = ""


@dataclass
class NoRouteFoundError(RoutePlannerError):
    """No path exists between the requested stations.

    Attributes:
        departure: Departure station code
        arrival: Arrival station code
    """

    departure: str = ""
    arrival: str = ""


@dataclass
class PathConsistencyError(RoutePlannerError):
    """A path contains a hop that has no matching connection.

    Attributes:
        source: Station the hop starts from
        target: Station the hop should reach
    """

    source: str = ""
    target: str = ""


@dataclass
class PersistenceError(RoutePlannerError):
    """Graph data could not be written.

    Attributes:
        file_path: Path of the file that failed
    """

    file_path: Optional[str] = None


@dataclass
class RenderingError(RoutePlannerError):
    """Map rendering failed.

    Attributes:
        output_path: Path where rendering was attempted
        renderer_type: Type of renderer that failed
    """

    output_path: Optional[str] = None
    renderer_type: str = ""


@dataclass
class ConfigurationError(RoutePlannerError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
        expected_type: Expected type or format
    """

    setting_name: str = ""
    expected_type: Optional[str] = None
