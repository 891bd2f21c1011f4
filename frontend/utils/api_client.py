"""
Cliente para la API del directorio de cajeros.

Este módulo proporciona el directorio remoto de cajeros, que consulta los
endpoints del backend y convierte las respuestas en objetos ATM.

Elementos principales:
    - HttpAtmDirectory: Directorio remoto (GET /atms, GET /banks)
    - create_directory: Elige el directorio según la configuración
"""

import asyncio
import logging

import requests

from api.data.directory import LocalAtmDirectory
from api.models.atm import ANY, ATM
from api.utils.errors import DirectoryError

logger = logging.getLogger(__name__)


class HttpAtmDirectory:
    """
    Directorio de cajeros accedido por HTTP.

    Args:
        base_url: URL base del servicio, sin barra final
        timeout: Timeout de cada request en segundos
        session: requests.Session opcional (para reutilizar conexiones)
    """

    def __init__(self, base_url, timeout=10.0, session=None):
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.session = session or requests.Session()

    def _get(self, path, params):
        url = f"{self.base_url}{path}"
        try:
            response = self.session.get(url, params=params, timeout=self.timeout)
            response.raise_for_status()
            return response.json()
        except requests.HTTPError as e:
            status = e.response.status_code if e.response is not None else None
            raise DirectoryError(f"{url} respondió {status}", status_code=status) from e
        except requests.RequestException as e:
            raise DirectoryError(f"No se pudo consultar {url}: {e}") from e
        except ValueError as e:
            raise DirectoryError(f"Respuesta inválida de {url}") from e

    def get_atms(self, center, radius_meters, network=ANY, bank=ANY):
        """
        Consulta los cajeros cercanos.

        Args:
            center: Coordinate del dispositivo
            radius_meters: Radio de búsqueda en metros
            network: Red ("" para cualquiera)
            bank: Banco ("" para cualquiera)

        Returns:
            Lista de ATM en el orden devuelto por el servicio

        Raises:
            DirectoryError: Si el servicio no responde o la respuesta es inválida
        """
        params = {
            'lat': center.latitude,
            'lng': center.longitude,
            'radius': radius_meters,
        }
        if network:
            params['network'] = network
        if bank:
            params['bank'] = bank

        payload = self._get('/atms', params)
        if isinstance(payload, dict):
            payload = payload.get('atms')
        if not isinstance(payload, list):
            raise DirectoryError("La respuesta de /atms no contiene una lista de cajeros")

        try:
            return [ATM.from_dict(item) for item in payload]
        except (KeyError, TypeError, ValueError) as e:
            raise DirectoryError(f"Cajero con formato inválido: {e}") from e

    def get_banks(self, network=ANY):
        """
        Consulta los bancos con cajeros en una red.

        Returns:
            Lista de nombres de bancos

        Raises:
            DirectoryError: Si el servicio no responde o la respuesta es inválida
        """
        params = {'network': network} if network else {}
        payload = self._get('/banks', params)
        if isinstance(payload, dict):
            payload = payload.get('banks')
        if not isinstance(payload, list):
            raise DirectoryError("La respuesta de /banks no contiene una lista de bancos")
        return [str(name) for name in payload]

    async def query_atms(self, center, radius_meters, network=ANY, bank=ANY):
        return await asyncio.to_thread(self.get_atms, center, radius_meters, network, bank)

    async def query_banks(self, network=ANY):
        return await asyncio.to_thread(self.get_banks, network)


def create_directory(settings):
    """
    Crea el directorio de cajeros según la configuración.

    Con ATM_DIRECTORY_URL se usa el servicio remoto, si no el directorio
    local (base de datos o datos simulados).
    """
    if settings.directory_url:
        logger.info("Usando directorio remoto de cajeros: %s", settings.directory_url)
        return HttpAtmDirectory(settings.directory_url, timeout=settings.http_timeout)

    logger.info("Usando directorio local de cajeros")
    return LocalAtmDirectory.from_database(settings=settings)
