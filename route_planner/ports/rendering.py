"""Rendering port - Abstraction for route map generation.

This protocol defines the contract for map rendering, allowing
different implementations to be used.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Protocol, Sequence

if TYPE_CHECKING:
    from ..domain.models import Station


class MapRendererPort(Protocol):
    """Port for map rendering.

    Implementation: adapters/rendering/folium_adapter.py
    """

    def render(
        self,
        stations: Sequence[Station],
        output_path: Path,
    ) -> Path:
        """Render a route on a map and save to file.

        Args:
            stations: Sequence of stations forming the route.
            output_path: Where to save the rendered map.

        Returns:
            Path to the generated map file.
        """
        ...
