"""
Pantalla de cajeros cercanos.

Coordina la conectividad, el permiso de ubicación, el modelo de filtros y el
mapa. No depende de Streamlit: la app sólo le pasa los eventos del usuario y
muestra su estado y su diálogo pendiente.

Estados:
    CHECKING_CONNECTIVITY -> INITIALIZING -> READY
    CHECKING_CONNECTIVITY -> BLOCKED (reintento -> CHECKING_CONNECTIVITY)
    INITIALIZING -> PERMISSION_DENIED (reintento -> pedir permiso otra vez)

Los manejadores que recargan datos programan tareas asyncio, por lo que
deben llamarse con un event loop en ejecución.
"""

import logging
from enum import Enum

from frontend.components.dialogs import (
    connection_lost_dialog,
    empty_result_dialog,
    location_dialog,
    no_connection_dialog,
)
from frontend.components.maps import AtmInfoWindow

logger = logging.getLogger(__name__)


class ScreenState(Enum):
    CHECKING_CONNECTIVITY = 'checking_connectivity'
    BLOCKED = 'blocked'
    INITIALIZING = 'initializing'
    PERMISSION_DENIED = 'permission_denied'
    READY = 'ready'


class MapScreen:
    """
    Controlador de la pantalla de cajeros.

    Args:
        connectivity: Objeto con is_connected()
        location_manager: Objeto con request_permission(callback) y get_location()
        view_model: AtmFilterViewModel
        presenter: MapPresenter
        surface: Superficie de mapa con get_map_async(callback)
    """

    def __init__(self, connectivity, location_manager, view_model, presenter, surface):
        self.connectivity = connectivity
        self.location_manager = location_manager
        self.view_model = view_model
        self.presenter = presenter
        self.surface = surface

        self.state = None
        self.dialog = None
        self.banks = self.view_model.banks.value
        self._observing_atms = False
        self._observing_banks = False

    def _set_state(self, state):
        if state != self.state:
            logger.info("Pantalla: %s -> %s", self.state and self.state.value, state.value)
        self.state = state

    def start(self):
        """Punto de entrada: verifica la conexión antes de todo lo demás."""
        self._set_state(ScreenState.CHECKING_CONNECTIVITY)
        if self.connectivity.is_connected():
            self.dialog = None
            self._initialize()
        else:
            self._set_state(ScreenState.BLOCKED)
            self.dialog = no_connection_dialog(self.start)

    def _initialize(self):
        self._set_state(ScreenState.INITIALIZING)
        if not self._observing_atms:
            self.view_model.atms.observe(self._on_atms)
            self._observing_atms = True
        self.check_location_permission()

    def check_location_permission(self):
        self.location_manager.request_permission(self._on_permission_result)

    def _on_permission_result(self, granted):
        if granted and self.location_manager.get_location() is not None:
            if self.state == ScreenState.READY:
                return
            self.dialog = None
            self._init_map()
        else:
            self._set_state(ScreenState.PERMISSION_DENIED)
            self.presenter.clear()
            self.dialog = location_dialog(self.check_location_permission)

    def _init_map(self):
        self.surface.get_map_async(self.on_map_ready)
        if not self._observing_banks:
            self.view_model.banks.observe(self._on_banks)
            self._observing_banks = True
        self._set_state(ScreenState.READY)
        self.view_model.load_banks()
        self.view_model.load_atms()

    def on_map_ready(self, surface):
        self.presenter.on_surface_ready(surface, AtmInfoWindow())
        self._center_camera()

    def _center_camera(self):
        self.presenter.center_on(
            self.location_manager.get_location(), self.view_model.selection.distance_meters
        )

    # Manejadores de los selectores

    def on_distance_selected(self, distance):
        self.view_model.set_distance(distance)
        self.view_model.load_atms()
        self._center_camera()

    def on_network_selected(self, network):
        self.view_model.set_network(network)
        self.view_model.set_bank("")
        self.view_model.load_banks()
        self.view_model.load_atms()

    def on_bank_selected(self, bank):
        self.view_model.set_bank(bank)
        self.view_model.load_atms()

    def on_location_changed(self, coordinate):
        """La posición del dispositivo cambió: recentrar y recargar."""
        self.location_manager.update_position(coordinate)
        if self.state == ScreenState.READY:
            self._center_camera()
            self.view_model.load_atms()

    # Observadores

    def _on_atms(self, atms):
        if atms is None:
            self.presenter.clear()
            self.dialog = connection_lost_dialog(self.reload)
        elif len(atms) == 0:
            self.presenter.clear()
            self.dialog = empty_result_dialog(self.view_model.is_max_distance)
        else:
            self.dialog = None
            self.presenter.set_markers(atms)

    def _on_banks(self, banks):
        self.banks = banks

    # Acciones del usuario sobre el diálogo

    def reload(self):
        """Repite la búsqueda con los filtros actuales."""
        self.dialog = None
        self.view_model.load_atms()

    def retry(self):
        if self.dialog is None or self.dialog.retry is None:
            return
        self.dialog.retry()

    def dismiss_dialog(self):
        if self.dialog is not None and self.dialog.cancelable:
            self.dialog = None
