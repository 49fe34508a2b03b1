"""Launcher for the interactive route planner.

Run from the directory that holds ``data/stations.csv`` and
``data/connections.csv`` (or point RP_GRAPH_DATA_DIR elsewhere).
"""

from __future__ import annotations

import sys

from route_planner.cli import main

if __name__ == "__main__":
    sys.exit(main())
