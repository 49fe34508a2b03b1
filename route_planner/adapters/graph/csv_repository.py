"""CSV Graph Repository adapter.

Reads station and connection records from two CSV files into a
GraphStore and writes the store back out on save:
- Configuration injection (paths from config)
- Typed errors for missing or malformed files
- Per-file save reporting (one failed file does not stop the other)
"""

from __future__ import annotations

import csv
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Sequence

from ...config import GraphConfig, get_config
from ...domain.errors import GraphError, PersistenceError, RecordParseError
from ...graph.store import GraphStore


@dataclass
class SaveReport:
    """Outcome of a save.

    Attributes:
        written: Files that were written successfully
        errors: One PersistenceError per file that could not be written
    """

    written: List[Path] = field(default_factory=list)
    errors: List[PersistenceError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors


@dataclass
class CSVGraphRepository:
    """Graph repository backed by ``stations.csv`` and ``connections.csv``.

    This adapter implements GraphRepositoryPort.

    Attributes:
        config: Graph configuration (paths, file names)
    """

    config: GraphConfig = field(default_factory=lambda: get_config().graph)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def read_station_records(self) -> List[List[str]]:
        """Return every row of the stations file, header included."""
        return self._read_records(self.config.stations_path)

    def read_connection_records(self) -> List[List[str]]:
        """Return every row of the connections file, header included."""
        return self._read_records(self.config.connections_path)

    def _read_records(self, path: Path) -> List[List[str]]:
        try:
            with path.open(newline="", encoding="utf-8") as f:
                return list(csv.reader(f))
        except (OSError, UnicodeDecodeError, csv.Error) as e:
            raise GraphError(
                f"Failed to open: {path}",
                file_path=str(path),
                cause=e,
            )

    def load_into(self, store: GraphStore) -> None:
        """Load stations, then connections, into ``store``.

        Raises:
            GraphError: If a file is missing or unreadable.
            RecordParseError: If a row cannot be parsed.
        """
        stations_path = self.config.stations_path
        connections_path = self.config.connections_path
        self._logger.debug(
            "Loading graph",
            extra={
                "stations_path": str(stations_path),
                "connections_path": str(connections_path),
            },
        )

        station_records = self.read_station_records()
        try:
            store.load_stations(station_records, label=stations_path.name)
        except RecordParseError as e:
            e.file_path = str(stations_path)
            raise

        connection_records = self.read_connection_records()
        try:
            store.load_connections(connection_records, label=connections_path.name)
        except RecordParseError as e:
            e.file_path = str(connections_path)
            raise

        self._logger.info(
            "Graph loaded",
            extra={
                "stations": store.station_count,
                "connections": store.connection_count,
            },
        )

    def save(self, store: GraphStore) -> SaveReport:
        """Overwrite both files with the current contents of ``store``.

        A failure on one file is recorded in the report; the other file
        is still attempted.
        """
        station_records, connection_records = store.snapshot_for_export()
        report = SaveReport()

        for path, records in (
            (self.config.stations_path, station_records),
            (self.config.connections_path, connection_records),
        ):
            error = self._write_records(path, records)
            if error is None:
                report.written.append(path)
            else:
                report.errors.append(error)

        if report.ok:
            self._logger.info(
                "Graph saved",
                extra={"files": [str(p) for p in report.written]},
            )
        return report

    def _write_records(
        self, path: Path, records: Sequence[Sequence[str]]
    ) -> Optional[PersistenceError]:
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with path.open("w", newline="", encoding="utf-8") as f:
                writer = csv.writer(f, lineterminator="\n")
                writer.writerows(records)
        except OSError as e:
            self._logger.error(
                "Failed to write graph file",
                extra={"path": str(path), "error": str(e)},
            )
            return PersistenceError(
                f"Couldn't write {path.name}",
                file_path=str(path),
                cause=e,
            )
        return None
