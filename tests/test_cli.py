"""Tests for the interactive menu, driven with scripted input."""

from __future__ import annotations

import logging

import pytest

from route_planner import cli
from route_planner.adapters.graph import CSVGraphRepository, DijkstraRouteSolver
from route_planner.cli import RoutePlannerCLI
from route_planner.config import GraphConfig, reset_config
from route_planner.graph.store import GraphStore
from route_planner.services import RoutePlannerService


def run_session(service, *answers):
    """Run the menu with ``answers`` as input; return everything printed."""
    remaining = list(answers)
    output = []

    def ask(message):
        output.append(message)
        if not remaining:
            raise EOFError
        return remaining.pop(0)

    RoutePlannerCLI(service, ask=ask, say=output.append).run()
    return "\n".join(output)


@pytest.fixture
def data_dir(tmp_path):
    (tmp_path / "stations.csv").write_text(
        "id,name,lat,lon\nA,Alpha,1,1\nB,Beta,2,2\nC,Gamma,3,3\n",
        encoding="utf-8",
    )
    (tmp_path / "connections.csv").write_text(
        "from,to,transport_type,weight\nA,B,bus,5\nB,C,bus,3\nA,C,train,10\nA,B,train,7\n",
        encoding="utf-8",
    )
    return tmp_path


@pytest.fixture
def service(data_dir):
    service = RoutePlannerService(
        store=GraphStore(),
        repository=CSVGraphRepository(GraphConfig(data_dir=data_dir)),
        route_solver=DijkstraRouteSolver(),
    )
    service.load()
    return service


def test_exit(service):
    output = run_session(service, "0")

    assert "===== MAIN MENU =====" in output
    assert output.endswith("Exiting...")


def test_end_of_input_exits(service):
    output = run_session(service)

    assert output.endswith("Exiting...")


def test_non_numeric_and_unknown_choices(service):
    output = run_session(service, "abc", "42", "0")

    assert "Invalid input! Please enter a number." in output
    assert "Invalid choice!" in output


def test_add_station_reprompts_until_valid(service):
    output = run_session(
        service,
        "1",
        "way-too-long-id",
        "A",
        "NEW",
        "New Town",
        "91",
        "45.5",
        "north",
        "-73.25",
        "0",
    )

    station = service.store.get_station("NEW")
    assert station is not None
    assert (station.name, station.lat, station.lon) == ("New Town", 45.5, -73.25)
    assert "Station ID already exists!" in output
    assert "Invalid! Enter between -90 and 90: " in output
    assert "Invalid! Enter between -180 and 180: " in output
    assert "Station 'NEW' added successfully!" in output


def test_add_connection_lists_stations_on_unknown_id(service):
    output = run_session(service, "2", "Z", "C", "A", "ferry", "-1", "2.5", "0")

    assert service.store.adjacency["C"][-1].target == "A"
    assert service.store.adjacency["C"][-1].weight == 2.5
    assert "Station doesn't exist!" in output
    assert "Available stations:" in output
    assert "Invalid! Enter positive number: " in output
    assert "Connection added successfully!" in output


def test_view_stations_and_connections(service):
    output = run_session(service, "3", "4", "0")

    assert "=== All Stations (3) ===" in output
    assert "A (Alpha) → B (Beta) via bus (5)" in output


def test_find_path(service):
    output = run_session(service, "5", "A", "C", "0")

    assert "Optimal Route:" in output
    assert "A (Alpha) → B (Beta) → C (Gamma)" in output
    assert "Total cost: 8" in output


def test_find_path_requires_existing_stations(service):
    output = run_session(service, "5", "A", "Z", "0")

    assert "Invalid stations!" in output
    assert "Optimal Route:" not in output


def test_find_path_unreachable(service):
    output = run_session(service, "5", "C", "A", "0")

    assert "No path exists!" in output


def test_delete_station_with_confirmation(service):
    output = run_session(service, "6", "B", "y", "0")

    assert "Confirm delete B (Beta)? (y/n): " in output
    assert "Station deleted!" in output
    assert not service.store.station_exists("B")
    assert [c.target for c in service.store.list_connections()] == ["C"]


def test_delete_station_declined_or_cancelled(service):
    run_session(service, "6", "B", "n", "6", "cancel", "6", "Z", "0")

    assert service.store.station_exists("B")


def test_delete_connection_removes_all_matches(service):
    output = run_session(service, "7", "A", "B", "7", "A", "B", "0")

    assert "Connection deleted!" in output
    assert "No connection found!" in output
    assert [c.target for c in service.store.adjacency["A"]] == ["C"]


def test_delete_connection_requires_existing_stations(service):
    output = run_session(service, "7", "A", "Z", "0")

    assert "Invalid station IDs!" in output
    assert service.store.connection_count == 4


def test_save(service, data_dir):
    service.store.delete_station("C")

    output = run_session(service, "8", "0")

    assert "Data saved to files successfully!" in output
    assert "Gamma" not in (data_dir / "stations.csv").read_text(encoding="utf-8")


@pytest.fixture
def package_logger():
    logger = logging.getLogger("route_planner")
    yield logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


def test_main_reports_fatal_load_error(tmp_path, monkeypatch, capsys, package_logger):
    monkeypatch.setenv("RP_GRAPH_DATA_DIR", str(tmp_path / "missing"))
    reset_config()
    try:
        assert cli.main() == 1
    finally:
        reset_config()

    err = capsys.readouterr().err
    assert "FATAL ERROR: Failed to open" in err


def test_main_runs_menu(data_dir, monkeypatch, capsys, package_logger):
    monkeypatch.setenv("RP_GRAPH_DATA_DIR", str(data_dir))
    monkeypatch.setattr("builtins.input", lambda _: "0")
    reset_config()
    try:
        assert cli.main() == 0
    finally:
        reset_config()

    out = capsys.readouterr().out
    assert "System ready! Found 3 stations." in out
