"""Tests del presentador de mapa, la superficie folium y los gráficos."""

import folium
import pytest

from frontend.components.charts import bank_counts
from frontend.components.maps import AtmInfoWindow, FoliumMapSurface, MapPresenter


@pytest.fixture
def surface():
    return FoliumMapSurface()


@pytest.fixture
def presenter(surface):
    presenter = MapPresenter()
    presenter.on_surface_ready(surface, AtmInfoWindow())
    return presenter


def count_atm_markers(m):
    layers = [child for child in m._children.values() if isinstance(child, folium.FeatureGroup)]
    return sum(
        isinstance(child, folium.Marker)
        for layer in layers
        for child in layer._children.values()
    )


class TestMapPresenter:

    def test_ready_without_data_draws_nothing(self, presenter, surface):
        assert presenter.is_ready
        assert surface.markers == []

    def test_one_marker_per_atm(self, presenter, surface, sample_atms):
        first_three = sample_atms[:3]
        presenter.set_markers(first_three)

        assert presenter.marker_count == 3
        for marker, atm in zip(surface.markers, first_three):
            assert marker['location'] == [atm.coordinate.latitude, atm.coordinate.longitude]
            assert atm.bank in marker['popup']
            assert atm.bank in marker['tooltip']

    def test_update_replaces_previous_markers(self, presenter, surface, sample_atms):
        presenter.set_markers(sample_atms[:3])
        presenter.set_markers(sample_atms[:5])

        assert presenter.marker_count == 5
        assert [m['tooltip'] for m in surface.markers] == [
            AtmInfoWindow().tooltip(atm) for atm in sample_atms[:5]
        ]

    def test_markers_before_surface_are_drawn_on_ready(self, surface, sample_atms):
        presenter = MapPresenter()
        presenter.set_markers(sample_atms[:2])
        assert presenter.marker_count == 0

        presenter.on_surface_ready(surface, AtmInfoWindow())
        assert presenter.marker_count == 2

    def test_clear(self, presenter, sample_atms):
        presenter.set_markers(sample_atms)
        presenter.clear()
        assert presenter.marker_count == 0
        assert presenter.atms == []

    @pytest.mark.parametrize("distance,zoom", [(100, 18), (200, 17), (500, 16), (1000, 15)])
    def test_center_on_sets_zoom_for_radius(self, presenter, surface, center, distance, zoom):
        presenter.center_on(center, distance)
        assert surface.center == center
        assert surface.zoom == zoom
        assert surface.my_location == center
        assert surface.search_radius == distance

    def test_center_on_ignores_missing_location(self, presenter, surface):
        presenter.center_on(None, 500)
        assert surface.center is None


class TestFoliumMapSurface:

    def test_render_builds_map_with_markers(self, presenter, surface, sample_atms, center):
        presenter.set_markers(sample_atms[:4])
        presenter.center_on(center, 500)

        m = surface.render()

        assert isinstance(m, folium.Map)
        assert count_atm_markers(m) == 4

    def test_render_without_center(self, surface):
        assert isinstance(surface.render(), folium.Map)

    def test_get_map_async_calls_back_with_surface(self, surface):
        received = []
        surface.get_map_async(received.append)
        assert received == [surface]


class TestAtmInfoWindow:

    def test_content(self, sample_atms):
        atm = sample_atms[0]
        window = AtmInfoWindow()
        html = window.render(atm)
        assert atm.bank in html
        assert atm.address in html
        assert "LINK" in html
        assert window.color(atm) == 'blue'
        assert window.tooltip(atm) == f"{atm.bank} - {atm.address}"


class TestBankCounts:

    def test_counts_per_bank_and_network(self, sample_atms):
        counts = bank_counts(sample_atms)
        assert counts.iloc[0].tolist() == ['Banco Galicia', 'BANELCO', 2]
        assert counts['Cantidad'].sum() == len(sample_atms)

    def test_empty(self):
        assert len(bank_counts([])) == 0
