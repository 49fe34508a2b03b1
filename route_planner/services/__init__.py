"""Services layer - Application orchestration.

Available services:
- RoutePlannerService: Interactive session over one graph store
"""

from .planner import RoutePlannerService

__all__ = ["RoutePlannerService"]
