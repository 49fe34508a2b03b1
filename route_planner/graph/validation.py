"""Validation rules for interactively entered graph data.

The graph store applies these checks on every interactive add, and the
prompts reuse them so that a rejected answer can be re-asked before it
ever reaches the store. Records loaded from disk bypass them.
"""

from __future__ import annotations

import math
import re

from ..domain.errors import (
    CoordinateOutOfRangeError,
    InvalidStationIdError,
    InvalidWeightError,
)

MAX_STATION_ID_LENGTH = 10
LATITUDE_RANGE = (-90.0, 90.0)
LONGITUDE_RANGE = (-180.0, 180.0)

_STATION_ID_RE = re.compile(r"[A-Za-z0-9_]{1,%d}" % MAX_STATION_ID_LENGTH)


def is_valid_station_id(code: str) -> bool:
    """Return True if ``code`` is 1-10 ASCII letters, digits or underscores."""
    return _STATION_ID_RE.fullmatch(code) is not None


def check_station_id(code: str) -> str:
    if not is_valid_station_id(code):
        raise InvalidStationIdError(
            "Invalid ID format! Use only letters/numbers/underscores "
            f"(max {MAX_STATION_ID_LENGTH} chars)",
            field_name="id",
            value=code,
        )
    return code


def _check_range(value: float, bounds: tuple[float, float], field_name: str) -> float:
    low, high = bounds
    # NaN fails both comparisons, so it is rejected here as well
    if not low <= value <= high:
        raise CoordinateOutOfRangeError(
            f"{field_name.capitalize()} must be between {low:g} and {high:g}",
            field_name=field_name,
            value=value,
        )
    return value


def check_latitude(lat: float) -> float:
    return _check_range(lat, LATITUDE_RANGE, "latitude")


def check_longitude(lon: float) -> float:
    return _check_range(lon, LONGITUDE_RANGE, "longitude")


def check_weight(weight: float) -> float:
    """Reject weights that are not finite and strictly positive."""
    if not math.isfinite(weight) or weight <= 0:
        raise InvalidWeightError(
            "Weight must be a positive number",
            field_name="weight",
            value=weight,
        )
    return weight
