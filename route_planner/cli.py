"""Interactive menu for the route planner.

Every command collects and validates its input through ``io.prompts``
before calling the service, so the graph store only ever receives
values it accepts.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import Callable, Dict

from .container import Container
from .domain.errors import GraphError
from .io.prompts import (
    Ask,
    Prompt,
    Say,
    existing_station_id,
    new_station_id,
    parse_latitude,
    parse_longitude,
    parse_non_empty,
    parse_weight,
)
from .monitoring import configure_logging
from .services import RoutePlannerService

MENU = (
    "\n===== MAIN MENU =====\n"
    "1. Add Station\n2. Add Connection\n3. View Stations\n"
    "4. View Connections\n5. Find Path\n6. Delete Station\n"
    "7. Delete Connection\n8. Save Data\n0. Exit"
)


@dataclass
class RoutePlannerCLI:
    """Line-based menu loop over a RoutePlannerService.

    Attributes:
        service: The session being driven
        ask: Reads one answer after showing a prompt (``input`` by default)
        say: Writes one message (``print`` by default)
    """

    service: RoutePlannerService
    ask: Ask = field(default_factory=lambda: input)
    say: Say = field(default_factory=lambda: print)

    _commands: Dict[int, Callable[[], None]] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._commands = {
            1: self.add_station,
            2: self.add_connection,
            3: self.view_stations,
            4: self.view_connections,
            5: self.find_path,
            6: self.delete_station,
            7: self.delete_connection,
            8: self.save,
        }

    def run(self) -> None:
        """Show the menu until the user exits or input ends."""
        while True:
            self.say(MENU)
            try:
                raw = self.ask("Enter choice: ").strip()
                try:
                    choice = int(raw)
                except ValueError:
                    self.say("Invalid input! Please enter a number.")
                    continue
                if choice == 0:
                    self.say("Exiting...")
                    return
                command = self._commands.get(choice)
                if command is None:
                    self.say("Invalid choice!")
                    continue
                command()
            except EOFError:
                self.say("\nExiting...")
                return

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def add_station(self) -> None:
        store = self.service.store
        self.say("\n=== Add New Station ===")
        code = Prompt(
            "Enter Station ID (alphanumeric, max 10 chars): ",
            new_station_id(store),
        ).run(self.ask, self.say)
        name = Prompt("Enter Station Name: ", str).run(self.ask, self.say)
        lat = Prompt(
            "Enter Latitude (-90 to 90): ",
            parse_latitude,
            retry_message="Invalid! Enter between -90 and 90: ",
        ).run(self.ask, self.say)
        lon = Prompt(
            "Enter Longitude (-180 to 180): ",
            parse_longitude,
            retry_message="Invalid! Enter between -180 and 180: ",
        ).run(self.ask, self.say)

        self.service.add_station(code, name, lat, lon)
        self.say(f"Station '{code}' added successfully!")

    def add_connection(self) -> None:
        store = self.service.store
        self.say("\n=== Add New Connection ===")

        def show_stations(_: Exception) -> None:
            self.say("Available stations:")
            self.view_stations()

        source = Prompt(
            "Enter FROM Station ID: ",
            existing_station_id(store),
            on_reject=show_stations,
        ).run(self.ask, self.say)
        target = Prompt(
            "Enter TO Station ID: ",
            existing_station_id(store),
            on_reject=show_stations,
        ).run(self.ask, self.say)
        transport = Prompt("Enter Transport Type: ", parse_non_empty).run(
            self.ask, self.say
        )
        weight = Prompt(
            "Enter Travel Weight (positive number): ",
            parse_weight,
            retry_message="Invalid! Enter positive number: ",
        ).run(self.ask, self.say)

        self.service.add_connection(source, target, transport, weight)
        self.say("Connection added successfully!")

    def view_stations(self) -> None:
        self.say(self.service.describe_stations())

    def view_connections(self) -> None:
        self.say(self.service.describe_connections())

    def find_path(self) -> None:
        store = self.service.store
        start = self.ask("Start Station ID: ").strip()
        end = self.ask("End Station ID: ").strip()

        if not store.station_exists(start) or not store.station_exists(end):
            self.say("Invalid stations!")
            return

        route = self.service.find_route(start, end)
        self.say(self.service.describe_route(route))

        map_path = self.service.render_route(route)
        if map_path is not None:
            self.say(f"Map saved to: {map_path}")

    def delete_station(self) -> None:
        store = self.service.store
        self.view_stations()
        code = self.ask("\nEnter Station ID to delete (or 'cancel'): ").strip()
        if code == "cancel":
            return
        if not store.station_exists(code):
            self.say("Station doesn't exist!")
            return

        answer = self.ask(
            f"Confirm delete {code} ({store.get_station_name(code)})? (y/n): "
        )
        if answer.strip().lower()[:1] != "y":
            return

        self.service.delete_station(code)
        self.say("Station deleted!")

    def delete_connection(self) -> None:
        store = self.service.store
        self.view_connections()
        source = self.ask("\nEnter FROM Station ID: ").strip()
        target = self.ask("Enter TO Station ID: ").strip()

        if not store.station_exists(source) or not store.station_exists(target):
            self.say("Invalid station IDs!")
            return

        removed = self.service.delete_connection(source, target)
        self.say("Connection deleted!" if removed else "No connection found!")

    def save(self) -> None:
        report = self.service.save()
        for error in report.errors:
            self.say(f"Error: {error}")
        if report.ok:
            self.say("\nData saved to files successfully!")


def main() -> int:
    """Load the graph, then run the menu.

    Returns:
        0 on a normal exit, 1 if the graph could not be loaded.
    """
    configure_logging()
    container = Container.create_default()
    service: RoutePlannerService = container.resolve(RoutePlannerService)

    print("=== TRANSPORT ROUTE PLANNER ===")
    print("Initializing system...\n")

    try:
        count = service.load()
    except GraphError as e:
        print(f"\nFATAL ERROR: {e}", file=sys.stderr)
        print("Check that data files exist in the data/ folder", file=sys.stderr)
        return 1

    print(f"System ready! Found {count} stations.")
    RoutePlannerCLI(service).run()
    print("\nProgram completed.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
