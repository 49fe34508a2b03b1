"""Tests for the Folium map renderer adapter."""

from unittest.mock import patch

import pytest

from route_planner.adapters.rendering import FoliumMapRenderer
from route_planner.config import RenderingConfig
from route_planner.domain.errors import RenderingError
from route_planner.domain.models import Station

ROUTE = (
    Station("PAR", "Paris Gare de Lyon", 48.844722, 2.373889),
    Station("DIJ", "Dijon Ville", 47.323333, 5.027222),
    Station("LYO", "Lyon Part-Dieu", 45.760556, 4.859444),
)


class TestFoliumMapRenderer:
    """Test suite for FoliumMapRenderer."""

    @pytest.fixture
    def renderer(self):
        return FoliumMapRenderer(RenderingConfig(zoom_start=5))

    def test_render_writes_html(self, renderer, tmp_path):
        output = tmp_path / "maps" / "route.html"

        result = renderer.render(ROUTE, output)

        assert result == output
        html = output.read_text(encoding="utf-8")
        assert "Dijon Ville" in html
        assert "PAR" in html

    def test_render_single_station(self, renderer, tmp_path):
        output = tmp_path / "single.html"

        renderer.render(ROUTE[:1], output)

        assert output.exists()

    def test_render_empty_route_raises(self, renderer, tmp_path):
        with pytest.raises(RenderingError) as excinfo:
            renderer.render((), tmp_path / "empty.html")

        assert excinfo.value.renderer_type == "folium"

    def test_render_write_failure_raises(self, renderer, tmp_path):
        with patch("folium.Map.save", side_effect=OSError("disk full")):
            with pytest.raises(RenderingError) as excinfo:
                renderer.render(ROUTE, tmp_path / "route.html")

        assert isinstance(excinfo.value.cause, OSError)
