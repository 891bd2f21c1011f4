"""
Modelo de datos de cajeros automáticos y filtros.

Este módulo define los registros inmutables que circulan entre el
directorio de cajeros, el modelo de filtros y el mapa.

Elementos principales:
    - Coordinate: Punto geográfico en grados decimales
    - ATM: Cajero automático devuelto por el directorio
    - FilterSelection: Distancia, red y banco seleccionados
    - DISTANCES, NETWORKS: Valores válidos de los selectores
"""

from dataclasses import dataclass, replace

# Distancias en metros, en el orden en que se muestran en el selector
DISTANCES = ("100", "200", "500", "1000")
DEFAULT_DISTANCE_INDEX = 2
MAX_DISTANCE = DISTANCES[-1]

# "" significa cualquier red / cualquier banco
ANY = ""
NETWORKS = (ANY, "LINK", "BANELCO")


@dataclass(frozen=True)
class Coordinate:
    latitude: float
    longitude: float

    def as_list(self):
        """Formato [lat, lon] que espera folium."""
        return [self.latitude, self.longitude]


@dataclass(frozen=True)
class ATM:
    """
    Cajero automático.

    Los cajeros no se modifican nunca: cada recarga reemplaza el conjunto
    completo de resultados.
    """

    id: str
    coordinate: Coordinate
    bank: str
    network: str
    address: str
    name: str = ""

    @classmethod
    def from_dict(cls, data):
        """
        Crea un cajero a partir de un diccionario.

        Acepta tanto 'lat'/'lng' como 'latitude'/'longitude'.

        Raises:
            KeyError, TypeError, ValueError: Si faltan campos o tienen tipos inválidos
        """
        latitude = data['latitude'] if 'latitude' in data else data['lat']
        longitude = data['longitude'] if 'longitude' in data else data['lng']
        return cls(
            id=str(data['id']),
            coordinate=Coordinate(float(latitude), float(longitude)),
            bank=str(data['bank']),
            network=str(data['network']),
            address=str(data.get('address') or ''),
            name=str(data.get('name') or ''),
        )

    def to_dict(self):
        return {
            'id': self.id,
            'latitude': self.coordinate.latitude,
            'longitude': self.coordinate.longitude,
            'bank': self.bank,
            'network': self.network,
            'address': self.address,
            'name': self.name,
        }


@dataclass(frozen=True)
class FilterSelection:
    """Filtros aplicados: distancia en metros (como texto), red y banco."""

    distance: str = DISTANCES[DEFAULT_DISTANCE_INDEX]
    network: str = ANY
    bank: str = ANY

    @property
    def distance_meters(self):
        return int(self.distance)

    @property
    def is_max_distance(self):
        return self.distance == MAX_DISTANCE

    def with_distance(self, distance):
        return replace(self, distance=distance)

    def with_network(self, network):
        # Los bancos dependen de la red: cambiar la red invalida el banco
        return replace(self, network=network, bank=ANY)

    def with_bank(self, bank):
        return replace(self, bank=bank)
