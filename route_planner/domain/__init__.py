"""Domain layer - Core models and errors.

This module contains immutable domain models and typed errors
used throughout the application. No external dependencies.
"""

from .errors import (
    ConfigurationError,
    CoordinateOutOfRangeError,
    DuplicateStationError,
    GraphError,
    InvalidStationIdError,
    InvalidWeightError,
    NoRouteFoundError,
    PathConsistencyError,
    PersistenceError,
    RecordParseError,
    RenderingError,
    RoutePlannerError,
    StationNotFoundError,
    UnknownStationError,
    ValidationError,
)
from .models import Connection, RouteResult, Station

__all__ = [
    # Models
    "Station",
    "Connection",
    "RouteResult",
    # Errors
    "RoutePlannerError",
    "GraphError",
    "RecordParseError",
    "ValidationError",
    "InvalidStationIdError",
    "DuplicateStationError",
    "CoordinateOutOfRangeError",
    "UnknownStationError",
    "InvalidWeightError",
    "StationNotFoundError",
    "NoRouteFoundError",
    "PathConsistencyError",
    "PersistenceError",
    "RenderingError",
    "ConfigurationError",
]
