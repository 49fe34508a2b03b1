"""Graph adapters - Implementations of graph-related ports.

Available implementations:
- CSVGraphRepository: Loads and saves the graph as CSV files
- DijkstraRouteSolver: Finds shortest paths using Dijkstra's algorithm
"""

from .csv_repository import CSVGraphRepository, SaveReport
from .dijkstra_solver import DijkstraRouteSolver

__all__ = ["CSVGraphRepository", "DijkstraRouteSolver", "SaveReport"]
