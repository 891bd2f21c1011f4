"""
Modelo de filtros de cajeros.

Mantiene la selección actual (distancia, red, banco), consulta al directorio
de cajeros de forma asíncrona y publica dos valores observables: los cajeros
encontrados y la lista de bancos disponibles para la red seleccionada.

Los setters no disparan consultas. Quien llama decide cuándo recargar, de
modo que puede agrupar varios cambios (por ejemplo red + banco) en una sola
consulta.

Resultados publicados en `atms`:
    - lista con cajeros: hay resultados
    - lista vacía: la consulta fue válida pero no hubo coincidencias
    - None: el directorio no respondió o falló

Una respuesta se descarta si, al llegar, la selección o la ubicación ya no
son las que se usaron para pedirla.
"""

import asyncio
import logging

from api.models.atm import ANY, DISTANCES, NETWORKS, FilterSelection
from api.utils.errors import DirectoryError
from api.utils.observable import Observable

logger = logging.getLogger(__name__)


def build_bank_list(names):
    """
    Arma la lista de bancos del selector.

    Args:
        names: Nombres devueltos por el directorio

    Returns:
        Lista que empieza con la opción "cualquiera" ("") seguida de los
        nombres sin repetir, en el orden recibido
    """
    banks = [ANY]
    for name in names:
        if name and name not in banks:
            banks.append(name)
    return banks


class AtmFilterViewModel:
    """
    Estado de los filtros y resultados de búsqueda de cajeros.

    Args:
        directory: Directorio con query_atms() y query_banks() asíncronos
        location_source: Objeto con get_location() que devuelve una
            Coordinate o None
    """

    def __init__(self, directory, location_source):
        self.directory = directory
        self.location_source = location_source
        self._selection = FilterSelection()
        self._pending = set()

        self.atms = Observable()
        self.banks = Observable(build_bank_list([]))

    @property
    def selection(self):
        return self._selection

    @property
    def distance(self):
        return self._selection.distance

    @property
    def network(self):
        return self._selection.network

    @property
    def bank(self):
        return self._selection.bank

    @property
    def is_max_distance(self):
        return self._selection.is_max_distance

    def set_distance(self, value):
        if value not in DISTANCES:
            raise ValueError(f"Distancia inválida: {value!r}")
        self._selection = self._selection.with_distance(value)

    def set_network(self, value):
        if value not in NETWORKS:
            raise ValueError(f"Red inválida: {value!r}")
        self._selection = self._selection.with_network(value)

    def set_bank(self, value):
        if value != ANY and value not in self.banks.value:
            raise ValueError(f"Banco fuera de la lista actual: {value!r}")
        self._selection = self._selection.with_bank(value)

    def load_atms(self):
        """
        Consulta los cajeros para la selección y ubicación actuales.

        Returns:
            La tarea programada, o None si no hay ubicación disponible
        """
        center = self.location_source.get_location()
        if center is None:
            logger.warning("Sin ubicación del dispositivo, no se consultan cajeros")
            return None
        return self._schedule(self._fetch_atms(self._selection, center))

    def load_banks(self):
        """
        Consulta los bancos con cajeros en la red seleccionada.

        Returns:
            La tarea programada
        """
        return self._schedule(self._fetch_banks(self._selection.network))

    async def join(self):
        """Espera a que terminen todas las consultas en curso."""
        while self._pending:
            await asyncio.gather(*list(self._pending))

    def _schedule(self, coro):
        task = asyncio.get_running_loop().create_task(coro)
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        return task

    async def _fetch_atms(self, requested, center):
        logger.debug(
            "Consultando cajeros: radio=%s red=%r banco=%r",
            requested.distance, requested.network, requested.bank
        )
        try:
            result = await self.directory.query_atms(
                center, requested.distance_meters, requested.network, requested.bank
            )
            result = list(result)
        except DirectoryError as e:
            logger.warning("El directorio de cajeros no respondió: %s", e)
            result = None
        except Exception:
            logger.exception("Error inesperado consultando cajeros")
            result = None

        if requested != self._selection or center != self.location_source.get_location():
            logger.debug("Descartando resultado de cajeros desactualizado: %s", requested)
            return
        self.atms.publish(result)

    async def _fetch_banks(self, network):
        logger.debug("Consultando bancos de la red %r", network)
        try:
            names = await self.directory.query_banks(network)
            banks = build_bank_list(names)
        except DirectoryError as e:
            logger.warning("No se pudo obtener la lista de bancos: %s", e)
            banks = build_bank_list([])
        except Exception:
            logger.exception("Error inesperado consultando bancos")
            banks = build_bank_list([])

        if network != self._selection.network:
            logger.debug("Descartando lista de bancos desactualizada para la red %r", network)
            return
        self.banks.publish(banks)
