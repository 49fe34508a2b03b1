"""Folium map renderer adapter.

Draws a computed route as an interactive HTML map:
- Domain model input (Station objects)
- Typed errors (RenderingError)
- Configuration injection
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Sequence

import folium

from ...config import RenderingConfig, get_config
from ...domain.errors import RenderingError
from ...domain.models import Station


@dataclass
class FoliumMapRenderer:
    """Folium-based interactive map renderer.

    This adapter implements MapRendererPort.
    """

    config: RenderingConfig = field(default_factory=lambda: get_config().rendering)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

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

        Raises:
            RenderingError: If rendering fails.
        """
        if not stations:
            raise RenderingError(
                "Cannot render empty route",
                output_path=str(output_path),
                renderer_type="folium",
            )

        self._logger.info(
            "Rendering route map",
            extra={
                "stations": len(stations),
                "output_path": str(output_path),
            },
        )

        coordinates = [(s.lat, s.lon) for s in stations]
        center_lat = sum(lat for lat, _ in coordinates) / len(coordinates)
        center_lon = sum(lon for _, lon in coordinates) / len(coordinates)

        try:
            m = folium.Map(
                location=[center_lat, center_lon],
                zoom_start=self.config.zoom_start,
                control_scale=True,
            )

            last = len(stations) - 1
            for i, station in enumerate(stations):
                icon_color = "green" if i == 0 else "red" if i == last else "blue"
                folium.Marker(
                    location=[station.lat, station.lon],
                    popup=f"{i + 1}. {station.name} ({station.code})",
                    tooltip=station.code,
                    icon=folium.Icon(color=icon_color),
                ).add_to(m)

            if len(coordinates) >= 2:
                folium.PolyLine(
                    coordinates,
                    weight=3,
                    color="blue",
                    opacity=0.8,
                ).add_to(m)
                m.fit_bounds(coordinates)

            output_path.parent.mkdir(parents=True, exist_ok=True)
            m.save(str(output_path))
        except OSError as e:
            self._logger.error(
                "Map rendering failed",
                extra={"error": str(e), "output_path": str(output_path)},
            )
            raise RenderingError(
                f"Map rendering failed: {e}",
                output_path=str(output_path),
                renderer_type="folium",
                cause=e,
            )

        self._logger.info(
            "Map rendered successfully",
            extra={"output_path": str(output_path)},
        )
        return output_path
