"""In-memory graph of stations and connections.

The store owns every Station and Connection of a session. Records read
from disk are loaded as-is (last station record wins, connections may
point at stations that are not loaded), while interactive adds are
validated against the rules in ``validation``.

Each mutation computes its new state before assigning it, so a failed
or interrupted call never leaves the store half-updated.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from ..domain.errors import (
    DuplicateStationError,
    RecordParseError,
    StationNotFoundError,
    UnknownStationError,
)
from ..domain.models import Connection, Station
from . import validation

STATION_HEADER = ("id", "name", "lat", "lon")
CONNECTION_HEADER = ("from", "to", "transport_type", "weight")

Record = List[str]


def format_coordinate(value: float) -> str:
    return f"{value:.6f}"


def format_weight(value: float) -> str:
    """Render a weight so that ``float()`` gives it back unchanged."""
    if value.is_integer():
        return str(int(value))
    return repr(value)


def _parse_float(raw: str, row_number: int, field_name: str, label: str) -> float:
    try:
        return float(raw)
    except ValueError as e:
        raise RecordParseError(
            f"{label} row {row_number}: invalid {field_name} {raw!r}",
            row_number=row_number,
            value=raw,
            cause=e,
        )


def _data_rows(
    records: Iterable[Sequence[str]], width: int, label: str
) -> Iterable[Tuple[int, List[str]]]:
    """Yield ``(row_number, fields)`` for every non-blank data row."""
    for index, record in enumerate(records):
        if index == 0:
            continue  # header

        row_number = index + 1
        fields = [value.strip() for value in record]
        if not any(fields):
            continue

        if len(fields) < width:
            raise RecordParseError(
                f"{label} row {row_number}: expected {width} fields, got {len(fields)}",
                row_number=row_number,
                value=",".join(record),
            )
        yield row_number, fields


@dataclass
class GraphStore:
    """Stations plus, per source station, its outgoing connections.

    Example:
        store = GraphStore()
        store.add_station("A", "Alpha", 48.85, 2.35)
        store.add_station("B", "Beta", 45.76, 4.83)
        store.add_connection("A", "B", "train", 4.5)
    """

    _stations: Dict[str, Station] = field(default_factory=dict, repr=False)
    _adjacency: Dict[str, List[Connection]] = field(default_factory=dict, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------

    @property
    def stations(self) -> Mapping[str, Station]:
        return MappingProxyType(self._stations)

    @property
    def adjacency(self) -> Mapping[str, Sequence[Connection]]:
        return MappingProxyType(self._adjacency)

    @property
    def station_count(self) -> int:
        return len(self._stations)

    @property
    def connection_count(self) -> int:
        return sum(len(connections) for connections in self._adjacency.values())

    def station_exists(self, code: str) -> bool:
        return code in self._stations

    def get_station(self, code: str) -> Optional[Station]:
        """Return the station for ``code``, or None if it is unknown."""
        return self._stations.get(code)

    def get_station_name(self, code: str) -> str:
        """Return the display name of ``code``.

        Raises:
            StationNotFoundError: If the station does not exist. Callers
                are expected to check ``station_exists`` first.
        """
        station = self._stations.get(code)
        if station is None:
            raise StationNotFoundError(
                f"Station not found: {code}",
                station_code=code,
            )
        return station.name

    def list_stations(self) -> List[Station]:
        return list(self._stations.values())

    def list_connections(self) -> List[Connection]:
        """All connections, grouped by source in insertion order."""
        return [
            connection
            for connections in self._adjacency.values()
            for connection in connections
        ]

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    def load_stations(
        self, records: Iterable[Sequence[str]], label: str = "stations"
    ) -> int:
        """Insert or overwrite one station per record.

        The first record is a header and is skipped. Ids and coordinate
        ranges are not validated.

        Args:
            records: Rows of ``id,name,lat,lon``.
            label: Source name used in error messages.

        Returns:
            Number of station records applied.

        Raises:
            RecordParseError: If a row is short or a coordinate is not a number.
        """
        loaded: Dict[str, Station] = {}
        count = 0
        for row_number, fields in _data_rows(records, len(STATION_HEADER), label):
            code, name = fields[0], fields[1]
            lat = _parse_float(fields[2], row_number, "lat", label)
            lon = _parse_float(fields[3], row_number, "lon", label)
            loaded[code] = Station(code=code, name=name, lat=lat, lon=lon)
            count += 1

        self._stations.update(loaded)
        self._logger.debug(
            "Stations loaded",
            extra={"records": count, "stations": len(self._stations)},
        )
        return count

    def load_connections(
        self, records: Iterable[Sequence[str]], label: str = "connections"
    ) -> int:
        """Append one connection per record.

        The first record is a header and is skipped. Endpoints are not
        required to exist and weights are not required to be positive.

        Args:
            records: Rows of ``from,to,transport_type,weight``.
            label: Source name used in error messages.

        Returns:
            Number of connections appended.

        Raises:
            RecordParseError: If a row is short or the weight is not a number.
        """
        parsed: List[Connection] = []
        for row_number, fields in _data_rows(records, len(CONNECTION_HEADER), label):
            weight = _parse_float(fields[3], row_number, "weight", label)
            parsed.append(
                Connection(
                    source=fields[0],
                    target=fields[1],
                    transport_type=fields[2],
                    weight=weight,
                )
            )

        for connection in parsed:
            self._adjacency.setdefault(connection.source, []).append(connection)

        self._logger.debug(
            "Connections loaded",
            extra={"records": len(parsed), "connections": self.connection_count},
        )
        return len(parsed)

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def add_station(self, code: str, name: str, lat: float, lon: float) -> Station:
        """Validate and insert a new station.

        Raises:
            InvalidStationIdError: If ``code`` is not 1-10 letters, digits or ``_``.
            DuplicateStationError: If ``code`` already exists.
            CoordinateOutOfRangeError: If ``lat`` or ``lon`` is out of range.
        """
        validation.check_station_id(code)
        if code in self._stations:
            raise DuplicateStationError(
                "Station ID already exists!",
                field_name="id",
                value=code,
            )
        validation.check_latitude(lat)
        validation.check_longitude(lon)

        station = Station(code=code, name=name, lat=lat, lon=lon)
        self._stations[code] = station
        self._logger.info("Station added", extra={"station": code})
        return station

    def add_connection(
        self, source: str, target: str, transport_type: str, weight: float
    ) -> Connection:
        """Validate and append a connection from ``source`` to ``target``.

        Raises:
            UnknownStationError: If either endpoint does not exist.
            InvalidWeightError: If ``weight`` is not strictly positive.
        """
        for field_name, code in (("from", source), ("to", target)):
            if code not in self._stations:
                raise UnknownStationError(
                    f"Station doesn't exist: {code}",
                    field_name=field_name,
                    value=code,
                )
        validation.check_weight(weight)

        connection = Connection(
            source=source,
            target=target,
            transport_type=transport_type,
            weight=weight,
        )
        self._adjacency.setdefault(source, []).append(connection)
        self._logger.info(
            "Connection added",
            extra={"from": source, "to": target, "weight": weight},
        )
        return connection

    def delete_station(self, code: str) -> bool:
        """Remove a station and every connection touching it.

        Returns:
            False if the station did not exist, True otherwise.
        """
        if code not in self._stations:
            return False

        adjacency = {
            source: [c for c in connections if c.target != code]
            for source, connections in self._adjacency.items()
            if source != code
        }
        removed = self.connection_count - sum(len(c) for c in adjacency.values())

        del self._stations[code]
        self._adjacency = adjacency
        self._logger.info(
            "Station deleted",
            extra={"station": code, "connections_removed": removed},
        )
        return True

    def delete_connection(self, source: str, target: str) -> int:
        """Remove every connection from ``source`` to ``target``.

        Returns:
            How many connections were removed.
        """
        connections = self._adjacency.get(source)
        if not connections:
            return 0

        kept = [c for c in connections if c.target != target]
        removed = len(connections) - len(kept)
        self._adjacency[source] = kept
        if removed:
            self._logger.info(
                "Connection deleted",
                extra={"from": source, "to": target, "removed": removed},
            )
        return removed

    def clear(self) -> None:
        self._stations = {}
        self._adjacency = {}

    # ------------------------------------------------------------------
    # Export
    # ------------------------------------------------------------------

    def snapshot_for_export(self) -> Tuple[List[Record], List[Record]]:
        """Flatten the store into station and connection records.

        Both record lists start with their header row, so they can be
        fed straight back into ``load_stations`` / ``load_connections``.
        """
        station_records: List[Record] = [list(STATION_HEADER)]
        for station in self._stations.values():
            station_records.append(
                [
                    station.code,
                    station.name,
                    format_coordinate(station.lat),
                    format_coordinate(station.lon),
                ]
            )

        connection_records: List[Record] = [list(CONNECTION_HEADER)]
        for connection in self.list_connections():
            connection_records.append(
                [
                    connection.source,
                    connection.target,
                    connection.transport_type,
                    format_weight(connection.weight),
                ]
            )

        return station_records, connection_records
