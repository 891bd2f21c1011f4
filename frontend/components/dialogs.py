"""
Diálogos de la pantalla de cajeros.

Cada situación de error o resultado vacío se presenta al usuario como un
diálogo. Ningún error se reintenta automáticamente: los diálogos con
reintento ejecutan su acción sólo cuando el usuario lo pide.

Elementos principales:
    - DialogKind: Tipos de diálogo
    - Dialog: Diálogo a mostrar (mensaje + acción de reintento)
    - no_connection_dialog, location_dialog, empty_result_dialog,
      connection_lost_dialog: Constructores de cada diálogo
"""

from dataclasses import dataclass
from enum import Enum

RETRY_LABEL = "Reintentar"

MESSAGES = {
    'no_connection_error': "No hay conexión a internet. Verificá tu conexión e intentá nuevamente.",
    'location_error': "No pudimos obtener tu ubicación. Habilitá el permiso de ubicación para ver los cajeros cercanos.",
    'empty_max_range': "No se encontraron cajeros, ni siquiera en el rango máximo de búsqueda.",
    'empty_range': "No se encontraron cajeros en este rango. Probá ampliando la distancia o cambiando los filtros.",
    'connection_lost': "Se perdió la conexión mientras se buscaban cajeros.",
}

class DialogKind(Enum):
    NO_CONNECTION = 'no_connection'
    LOCATION_ERROR = 'location_error'
    EMPTY_MAX_RANGE = 'empty_max_range'
    EMPTY_RANGE = 'empty_range'
    CONNECTION_LOST = 'connection_lost'

@dataclass
class Dialog:
    """
    Diálogo pendiente de mostrar.

    Attributes:
        kind: Tipo de diálogo
        message: Texto a mostrar
        retry: Acción a ejecutar con "Reintentar", o None si es informativo
        cancelable: Si el usuario puede cerrarlo sin reintentar
    """

    kind: DialogKind
    message: str
    retry: object = None
    cancelable: bool = True

    @property
    def is_error(self):
        return self.kind in (
            DialogKind.NO_CONNECTION, DialogKind.LOCATION_ERROR, DialogKind.CONNECTION_LOST
        )

def no_connection_dialog(retry):
    return Dialog(DialogKind.NO_CONNECTION, MESSAGES['no_connection_error'], retry, cancelable=False)

def location_dialog(retry):
    return Dialog(DialogKind.LOCATION_ERROR, MESSAGES['location_error'], retry, cancelable=False)

def empty_result_dialog(is_max_distance):
    """
    Diálogo para una búsqueda sin resultados.

    Args:
        is_max_distance: Si la distancia seleccionada ya es la máxima

    Returns:
        Dialog informativo (sin reintento)
    """
    if is_max_distance:
        return Dialog(DialogKind.EMPTY_MAX_RANGE, MESSAGES['empty_max_range'])
    return Dialog(DialogKind.EMPTY_RANGE, MESSAGES['empty_range'])

def connection_lost_dialog(retry):
    return Dialog(DialogKind.CONNECTION_LOST, MESSAGES['connection_lost'], retry)
