"""
Permiso y ubicación del dispositivo.

El permiso lo responde una función `prompt` inyectada por quien arma la
pantalla (en la app de Streamlit, el interruptor "Compartir mi ubicación").
La posición la informa la misma interfaz con update_position().
"""

import logging

logger = logging.getLogger(__name__)


class LocationManager:
    """
    Ciclo de vida del permiso de ubicación y última posición conocida.

    Args:
        prompt: Función sin argumentos que devuelve True si el usuario
            concede el permiso
        position: Coordinate inicial, o None si todavía no se conoce
    """

    def __init__(self, prompt, position=None):
        self.prompt = prompt
        self.position = position
        self.granted = False

    def request_permission(self, callback):
        """
        Pide el permiso de ubicación.

        Args:
            callback: Función que recibe granted (bool)
        """
        self.granted = bool(self.prompt())
        if not self.granted:
            logger.info("Permiso de ubicación denegado")
        callback(self.granted)

    def update_position(self, coordinate):
        self.position = coordinate

    def get_location(self):
        """Última posición conocida, o None sin permiso o sin posición."""
        if not self.granted:
            return None
        return self.position
