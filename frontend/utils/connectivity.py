"""
Verificación de conectividad.

La pantalla consulta la conectividad una vez al entrar y de nuevo cada vez
que el usuario pide reintentar.
"""

import logging

import requests

logger = logging.getLogger(__name__)


class ConnectivityChecker:
    """
    Comprueba si hay conexión haciendo un HEAD a una URL conocida.

    Args:
        probe_url: URL a consultar
        timeout: Timeout en segundos
    """

    def __init__(self, probe_url, timeout=3.0):
        self.probe_url = probe_url
        self.timeout = timeout

    def is_connected(self):
        try:
            requests.head(self.probe_url, timeout=self.timeout, allow_redirects=True)
        except requests.RequestException as e:
            logger.info("Sin conexión (%s): %s", self.probe_url, e)
            return False
        return True
