"""Tests for the in-memory graph store."""

from __future__ import annotations

import math

import pytest

from route_planner.domain.errors import (
    CoordinateOutOfRangeError,
    DuplicateStationError,
    InvalidStationIdError,
    InvalidWeightError,
    RecordParseError,
    StationNotFoundError,
    UnknownStationError,
    ValidationError,
)
from route_planner.domain.models import Connection, Station
from route_planner.graph.dijkstra import find_shortest_path
from route_planner.graph.store import GraphStore

STATION_ROWS = [
    ["id", "name", "lat", "lon"],
    ["A", "Alpha", "48.85", "2.35"],
    ["B", "Beta", "45.76", "4.83"],
    ["C", "Gamma", "43.30", "5.38"],
]

CONNECTION_ROWS = [
    ["from", "to", "transport_type", "weight"],
    ["A", "B", "bus", "5"],
    ["B", "C", "bus", "3"],
    ["A", "C", "train", "10"],
]


@pytest.fixture
def store():
    store = GraphStore()
    store.load_stations(STATION_ROWS)
    store.load_connections(CONNECTION_ROWS)
    return store


# ----------------------------------------------------------------------
# Loading
# ----------------------------------------------------------------------


def test_load_skips_header_and_reads_fields(store):
    assert store.station_count == 3
    assert "id" not in store.stations
    assert store.get_station("A") == Station(code="A", name="Alpha", lat=48.85, lon=2.35)
    assert store.connection_count == 3
    assert store.adjacency["A"] == [
        Connection("A", "B", "bus", 5.0),
        Connection("A", "C", "train", 10.0),
    ]


def test_load_stations_last_record_wins():
    store = GraphStore()
    count = store.load_stations(
        [
            ["id", "name", "lat", "lon"],
            ["A", "First", "1", "1"],
            ["A", "Second", "2", "2"],
        ]
    )

    assert count == 2
    assert store.station_count == 1
    assert store.get_station_name("A") == "Second"


def test_load_does_not_validate_ids_ranges_or_weights():
    store = GraphStore()
    store.load_stations(
        [["id", "name", "lat", "lon"], ["TOO-LONG-IDENTIFIER", "Odd", "95", "-200"]]
    )
    store.load_connections(
        [
            ["from", "to", "transport_type", "weight"],
            ["GHOST", "NOWHERE", "teleport", "-1"],
        ]
    )

    assert store.station_exists("TOO-LONG-IDENTIFIER")
    assert store.adjacency["GHOST"][0].weight == -1.0


def test_load_skips_blank_rows():
    store = GraphStore()
    store.load_stations([["id", "name", "lat", "lon"], [], ["A", "Alpha", "1", "2"], [""]])

    assert list(store.stations) == ["A"]


def test_load_stations_bad_number_is_fatal_with_row_number():
    store = GraphStore()

    with pytest.raises(RecordParseError) as excinfo:
        store.load_stations(
            [
                ["id", "name", "lat", "lon"],
                ["A", "Alpha", "1", "2"],
                ["B", "Beta", "north", "2"],
            ]
        )

    assert excinfo.value.row_number == 3
    assert excinfo.value.value == "north"
    # Nothing from the failed batch is applied
    assert store.station_count == 0


def test_load_connections_short_row_is_fatal():
    store = GraphStore()

    with pytest.raises(RecordParseError):
        store.load_connections([["from", "to", "transport_type", "weight"], ["A", "B"]])

    assert store.connection_count == 0


def test_load_connections_bad_weight_is_fatal():
    store = GraphStore()

    with pytest.raises(RecordParseError) as excinfo:
        store.load_connections(
            [["from", "to", "transport_type", "weight"], ["A", "B", "bus", "fast"]]
        )

    assert excinfo.value.row_number == 2


# ----------------------------------------------------------------------
# Lookups
# ----------------------------------------------------------------------


def test_lookups(store):
    assert store.station_exists("A")
    assert not store.station_exists("Z")
    assert store.get_station("Z") is None
    assert store.get_station_name("B") == "Beta"


def test_get_station_name_unknown_raises(store):
    with pytest.raises(StationNotFoundError) as excinfo:
        store.get_station_name("Z")

    assert excinfo.value.station_code == "Z"


def test_read_only_views(store):
    with pytest.raises(TypeError):
        store.stations["Z"] = Station("Z", "Zed", 0, 0)


# ----------------------------------------------------------------------
# Adding
# ----------------------------------------------------------------------


def test_add_station(store):
    station = store.add_station("NEW_1", "New Station", -33.9, 151.2)

    assert station == Station("NEW_1", "New Station", -33.9, 151.2)
    assert store.station_exists("NEW_1")


@pytest.mark.parametrize("code", ["", "ELEVENCHARS", "HAS-HYPHEN", "sp ace", "é"])
def test_add_station_rejects_bad_ids(store, code):
    with pytest.raises(InvalidStationIdError):
        store.add_station(code, "Bad", 0, 0)

    assert store.station_count == 3


def test_add_station_accepts_ten_character_id(store):
    store.add_station("ABCDEFGHIJ", "Ten", 0, 0)

    assert store.station_exists("ABCDEFGHIJ")


def test_add_station_rejects_duplicate(store):
    with pytest.raises(DuplicateStationError):
        store.add_station("A", "Again", 0, 0)

    assert store.get_station_name("A") == "Alpha"


@pytest.mark.parametrize(
    "lat, lon",
    [(91, 0), (-90.5, 0), (0, 180.01), (0, -181), (math.nan, 0)],
)
def test_add_station_rejects_out_of_range_coordinates(store, lat, lon):
    with pytest.raises(CoordinateOutOfRangeError):
        store.add_station("D", "Delta", lat, lon)

    assert not store.station_exists("D")


def test_add_station_accepts_boundaries(store):
    store.add_station("N", "North pole", 90, 180)
    store.add_station("S", "South pole", -90, -180)

    assert store.station_count == 5


def test_add_connection_appends_duplicates(store):
    store.add_connection("A", "B", "train", 2)

    assert [c.transport_type for c in store.adjacency["A"]] == ["bus", "train", "train"]
    assert store.adjacency["A"][-1] == Connection("A", "B", "train", 2)


@pytest.mark.parametrize("source, target", [("Z", "A"), ("A", "Z")])
def test_add_connection_rejects_unknown_station(store, source, target):
    with pytest.raises(UnknownStationError):
        store.add_connection(source, target, "bus", 1)

    assert store.connection_count == 3


@pytest.mark.parametrize("weight", [0, -1, math.inf, math.nan])
def test_add_connection_rejects_bad_weight(store, weight):
    with pytest.raises(InvalidWeightError):
        store.add_connection("A", "B", "bus", weight)

    assert store.connection_count == 3


def test_validation_errors_share_base(store):
    with pytest.raises(ValidationError):
        store.add_station("A", "Dup", 0, 0)


# ----------------------------------------------------------------------
# Deleting
# ----------------------------------------------------------------------


def test_delete_station_cascades(store):
    store.add_connection("C", "B", "bus", 1)

    assert store.delete_station("B") is True

    assert not store.station_exists("B")
    assert "B" not in store.adjacency
    assert all(c.target != "B" for c in store.list_connections())
    assert store.adjacency["A"] == [Connection("A", "C", "train", 10.0)]
    assert store.adjacency["C"] == []


def test_delete_station_blocks_routes_through_it(store):
    assert find_shortest_path(store, "A", "C") == ["A", "B", "C"]

    store.delete_station("B")

    assert find_shortest_path(store, "A", "C") == ["A", "C"]


def test_delete_missing_station_is_noop(store):
    before = store.snapshot_for_export()

    assert store.delete_station("Z") is False
    assert store.snapshot_for_export() == before


def test_delete_connection_removes_all_matches_only(store):
    store.add_connection("A", "B", "train", 2)
    store.add_connection("A", "C", "bus", 7)

    removed = store.delete_connection("A", "B")

    assert removed == 2
    assert store.adjacency["A"] == [
        Connection("A", "C", "train", 10.0),
        Connection("A", "C", "bus", 7),
    ]
    assert store.adjacency["B"] == [Connection("B", "C", "bus", 3.0)]


def test_delete_connection_nothing_matched(store):
    assert store.delete_connection("C", "A") == 0
    assert store.delete_connection("Z", "A") == 0
    assert "Z" not in store.adjacency


# ----------------------------------------------------------------------
# Export
# ----------------------------------------------------------------------


def test_snapshot_for_export_formats_records(store):
    stations, connections = store.snapshot_for_export()

    assert stations[0] == ["id", "name", "lat", "lon"]
    assert stations[1] == ["A", "Alpha", "48.850000", "2.350000"]
    assert connections[0] == ["from", "to", "transport_type", "weight"]
    assert connections[1:] == [
        ["A", "B", "bus", "5"],
        ["A", "C", "train", "10"],
        ["B", "C", "bus", "3"],
    ]


def test_snapshot_keeps_fractional_weights_exact():
    store = GraphStore()
    store.load_connections([["from", "to", "transport_type", "weight"], ["A", "B", "bus", "0.1"]])

    _, connections = store.snapshot_for_export()

    assert float(connections[1][3]) == 0.1


def test_export_then_load_round_trip(store):
    store.add_station("D", "Delta, the big one", 1.5, -2.25)
    store.add_connection("D", "A", "ferry", 12.5)
    store.add_connection("A", "D", "ferry", 12.5)
    store.add_connection("A", "B", "walk", 40)

    stations, connections = store.snapshot_for_export()
    copy = GraphStore()
    copy.load_stations(stations)
    copy.load_connections(connections)

    assert copy.list_stations() == store.list_stations()
    assert copy.list_connections() == store.list_connections()
    assert copy.snapshot_for_export() == (stations, connections)


def test_clear(store):
    store.clear()

    assert store.station_count == 0
    assert store.connection_count == 0
