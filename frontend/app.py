"""
Aplicación Streamlit para encontrar cajeros automáticos cercanos.

Muestra en un mapa los cajeros cercanos a la ubicación del usuario y permite
filtrarlos por distancia, red (LINK / BANELCO) y banco.

Uso:
    streamlit run frontend/app.py
"""

import streamlit as st
import os
import sys

# Agregar la ruta del proyecto al path para importar módulos
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from api.models.atm import DISTANCES, NETWORKS, Coordinate
from api.models.filters import AtmFilterViewModel
from api.utils.config import get_settings
from api.utils.helpers import format_distance
from api.utils.logging_config import setup_logging
from frontend.components.charts import atm_results_summary
from frontend.components.maps import FoliumMapSurface, MapPresenter, atm_results_map
from frontend.screen import MapScreen, ScreenState
from frontend.utils.api_client import create_directory
from frontend.utils.connectivity import ConnectivityChecker
from frontend.utils.location import LocationManager
from frontend.utils.ui_helpers import run_async, show_dialog

# Configuración de la página
st.set_page_config(
    page_title="Cajeros Cercanos",
    page_icon="🏧",
    layout="wide",
    initial_sidebar_state="expanded"
)

settings = get_settings()
setup_logging(settings.log_level)

@st.cache_resource
def load_directory():
    """El directorio se comparte entre sesiones: sus datos no cambian."""
    return create_directory(settings)

def create_screen():
    """Arma la pantalla con sus colaboradores."""
    location_manager = LocationManager(
        prompt=lambda: st.session_state.get('share_location', True),
        position=Coordinate(settings.default_latitude, settings.default_longitude),
    )
    view_model = AtmFilterViewModel(load_directory(), location_manager)
    connectivity = ConnectivityChecker(
        settings.connectivity_probe_url, timeout=settings.connectivity_timeout
    )
    return MapScreen(connectivity, location_manager, view_model, MapPresenter(), FoliumMapSurface())

if 'screen' not in st.session_state:
    st.session_state.screen = create_screen()
    run_async(st.session_state.screen, st.session_state.screen.start)

screen = st.session_state.screen
view_model = screen.view_model

def on_filter_change(key, handler):
    run_async(screen, handler, st.session_state[key])

def on_share_location_change():
    run_async(screen, screen.check_location_permission)

def on_location_input():
    coordinate = Coordinate(st.session_state['latitude'], st.session_state['longitude'])
    run_async(screen, screen.on_location_changed, coordinate)

# Título principal
st.title("Cajeros Cercanos")
st.markdown("Encontrá cajeros automáticos cerca tuyo y filtralos por red y banco.")

# Ubicación en el sidebar
st.sidebar.title("Ubicación")
st.sidebar.toggle(
    "Compartir mi ubicación", value=True,
    key='share_location', on_change=on_share_location_change
)
st.sidebar.number_input(
    "Latitud", value=settings.default_latitude, format="%.6f",
    key='latitude', on_change=on_location_input
)
st.sidebar.number_input(
    "Longitud", value=settings.default_longitude, format="%.6f",
    key='longitude', on_change=on_location_input
)

# Sin conexión o sin permiso de ubicación sólo se muestra el diálogo
if screen.state in (ScreenState.BLOCKED, ScreenState.PERMISSION_DENIED):
    show_dialog(screen)
    st.stop()

# Filtros en sidebar
st.sidebar.title("Filtros")

st.sidebar.selectbox(
    "Distancia",
    options=DISTANCES,
    index=DISTANCES.index(view_model.distance),
    format_func=format_distance,
    key='distance',
    on_change=on_filter_change,
    args=('distance', screen.on_distance_selected)
)

st.sidebar.selectbox(
    "Red",
    options=NETWORKS,
    index=NETWORKS.index(view_model.network),
    format_func=lambda network: network or "Todas",
    key='network',
    on_change=on_filter_change,
    args=('network', screen.on_network_selected)
)

# La lista de bancos depende de la red: un selector distinto por red
banks = screen.banks
bank_key = f"bank_{view_model.network or 'all'}"
st.sidebar.selectbox(
    "Banco",
    options=banks,
    index=banks.index(view_model.bank) if view_model.bank in banks else 0,
    format_func=lambda bank: bank or "Todos",
    key=bank_key,
    on_change=on_filter_change,
    args=(bank_key, screen.on_bank_selected)
)

show_dialog(screen)

# Dividir en dos columnas
col1, col2 = st.columns([2, 1])

# Columna 1: Mapa de cajeros
with col1:
    atm_results_map(screen.presenter, width=800, height=550)

# Columna 2: Resumen de resultados
with col2:
    atm_results_summary(screen.presenter.atms)
    st.caption(
        f"Radio: {format_distance(view_model.selection.distance_meters)} · "
        f"Red: {view_model.network or 'Todas'} · Banco: {view_model.bank or 'Todos'}"
    )
