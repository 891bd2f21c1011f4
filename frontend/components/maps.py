"""
Componentes de mapas para la interfaz de usuario.

Este módulo conecta los resultados del modelo de filtros con el mapa
folium que se muestra en Streamlit.

Componentes principales:
    - FoliumMapSurface: Superficie de mapa (marcadores, cámara, ubicación)
    - AtmInfoWindow: Contenido de la ventana de información de cada cajero
    - MapPresenter: Sincroniza los cajeros publicados con los marcadores
    - atm_results_map: Renderiza la superficie en Streamlit
"""

import folium
import streamlit as st
from streamlit_folium import folium_static

from api.utils.config import DEFAULT_LATITUDE, DEFAULT_LONGITUDE

# Nivel de zoom según el radio de búsqueda en metros
ZOOM_BY_DISTANCE = {100: 18, 200: 17, 500: 16, 1000: 15}
DEFAULT_ZOOM = 16

NETWORK_COLORS = {'LINK': 'blue', 'BANELCO': 'red'}

class FoliumMapSurface:
    """
    Superficie de mapa sobre folium.

    Guarda los marcadores, la cámara y la ubicación del dispositivo, y arma
    un folium.Map nuevo cada vez que se llama a render().
    """

    def __init__(self):
        self.center = None
        self.zoom = DEFAULT_ZOOM
        self.markers = []
        self.my_location = None
        self.search_radius = None

    def get_map_async(self, callback):
        """Avisa que el mapa está listo. Folium no necesita carga previa."""
        callback(self)

    def clear_markers(self):
        self.markers = []

    def add_marker(self, coordinate, info_content, tooltip=None, color='gray'):
        self.markers.append({
            'location': coordinate.as_list(),
            'popup': info_content,
            'tooltip': tooltip,
            'color': color,
        })

    def move_camera(self, coordinate, zoom=None):
        self.center = coordinate
        if zoom is not None:
            self.zoom = zoom

    def show_my_location(self, coordinate):
        self.my_location = coordinate

    def show_search_radius(self, meters):
        self.search_radius = meters

    def render(self):
        """
        Crea el mapa folium con el estado actual.

        Returns:
            folium.Map
        """
        if self.center is not None:
            location = self.center.as_list()
        else:
            location = [DEFAULT_LATITUDE, DEFAULT_LONGITUDE]

        m = folium.Map(location=location, zoom_start=self.zoom)

        # Radio de búsqueda alrededor del dispositivo
        if self.my_location is not None and self.search_radius:
            folium.Circle(
                location=self.my_location.as_list(),
                radius=self.search_radius,
                color='#4e73df',
                weight=1,
                fill=True,
                fill_opacity=0.08,
            ).add_to(m)

        if self.my_location is not None:
            folium.CircleMarker(
                location=self.my_location.as_list(),
                radius=8,
                color='#ffffff',
                weight=2,
                fill=True,
                fill_color='#1a73e8',
                fill_opacity=1.0,
                tooltip="Mi ubicación",
            ).add_to(m)

        atms_layer = folium.FeatureGroup(name="Cajeros")
        for marker in self.markers:
            folium.Marker(
                location=marker['location'],
                popup=folium.Popup(marker['popup'], max_width=250),
                tooltip=marker['tooltip'],
                icon=folium.Icon(color=marker['color'], icon='money-bill-alt', prefix='fa')
            ).add_to(atms_layer)
        atms_layer.add_to(m)

        return m

class AtmInfoWindow:
    """Contenido de la ventana de información de un cajero."""

    def render(self, atm):
        title = atm.name or atm.bank
        network = atm.network or "-"
        return f"""
            <div style="width: 200px">
                <h4>{title}</h4>
                <b>Banco:</b> {atm.bank}<br>
                <b>Red:</b> {network}<br>
                <b>Dirección:</b> {atm.address}<br>
            </div>
        """

    def tooltip(self, atm):
        if atm.address:
            return f"{atm.bank} - {atm.address}"
        return atm.bank

    def color(self, atm):
        return NETWORK_COLORS.get(atm.network, 'gray')

class MapPresenter:
    """
    Mantiene los marcadores del mapa sincronizados con los cajeros.

    Cada actualización borra todos los marcadores y dibuja los nuevos. Si
    llegan cajeros antes de que el mapa esté listo, se dibujan al estarlo.
    """

    def __init__(self):
        self.surface = None
        self.info_window = None
        self.atms = []

    @property
    def is_ready(self):
        return self.surface is not None

    @property
    def marker_count(self):
        return len(self.surface.markers) if self.surface is not None else 0

    def on_surface_ready(self, surface, info_window):
        self.surface = surface
        self.info_window = info_window
        self._draw()

    def set_markers(self, atms):
        self.atms = list(atms)
        if self.is_ready:
            self._draw()

    def clear(self):
        self.set_markers([])

    def center_on(self, coordinate, distance_meters=None):
        """
        Centra la cámara en el dispositivo y muestra el radio de búsqueda.

        Args:
            coordinate: Coordinate del dispositivo
            distance_meters: Radio de búsqueda actual
        """
        if not self.is_ready or coordinate is None:
            return
        zoom = ZOOM_BY_DISTANCE.get(distance_meters, DEFAULT_ZOOM)
        self.surface.move_camera(coordinate, zoom)
        self.surface.show_my_location(coordinate)
        self.surface.show_search_radius(distance_meters)

    def _draw(self):
        self.surface.clear_markers()
        for atm in self.atms:
            self.surface.add_marker(
                atm.coordinate,
                self.info_window.render(atm),
                tooltip=self.info_window.tooltip(atm),
                color=self.info_window.color(atm),
            )

def atm_results_map(presenter, width=800, height=600):
    """
    Renderiza el mapa de cajeros en Streamlit.

    Args:
        presenter: MapPresenter con la superficie lista
        width: Ancho del mapa en píxeles
        height: Altura del mapa en píxeles

    Returns:
        Componente de mapa folium renderizado en Streamlit
    """
    if not presenter.is_ready:
        st.info("Cargando mapa...")
        return None

    m = presenter.surface.render()
    folium_static(m, width=width, height=height)

    return m
