"""Fixtures compartidas de los tests del buscador de cajeros."""

import asyncio

import pytest

from api.data.directory import LocalAtmDirectory
from api.models.atm import ATM, Coordinate
from api.utils.errors import DirectoryError

CENTER = Coordinate(-34.6037, -58.3816)

# Metros por grado de latitud con R = 6371 km
METERS_PER_DEGREE = 111194.93


def atm_north_of(center, atm_id, meters, bank, network, address=""):
    """Cajero ubicado `meters` metros al norte del centro."""
    return ATM(
        id=atm_id,
        coordinate=Coordinate(center.latitude + meters / METERS_PER_DEGREE, center.longitude),
        bank=bank,
        network=network,
        address=address or f"Calle {atm_id}",
    )


class FakeConnectivity:
    def __init__(self, connected=True):
        self.connected = connected
        self.checks = 0

    def is_connected(self):
        self.checks += 1
        return self.connected


class ControlledDirectory:
    """Directorio cuyas respuestas se resuelven a mano desde el test."""

    def __init__(self):
        self.atm_requests = []
        self.bank_requests = []

    async def query_atms(self, center, radius_meters, network, bank):
        future = asyncio.get_running_loop().create_future()
        self.atm_requests.append(((center, radius_meters, network, bank), future))
        return await future

    async def query_banks(self, network):
        future = asyncio.get_running_loop().create_future()
        self.bank_requests.append((network, future))
        return await future


class FailingDirectory:
    async def query_atms(self, center, radius_meters, network, bank):
        raise DirectoryError("sin conexión")

    async def query_banks(self, network):
        raise DirectoryError("sin conexión")


class BrokenDirectory:
    """Directorio con un error que no es DirectoryError."""

    async def query_atms(self, center, radius_meters, network, bank):
        raise KeyError("latitude")

    async def query_banks(self, network):
        raise KeyError("bank")


class StaticLocation:
    def __init__(self, position=CENTER):
        self.position = position

    def get_location(self):
        return self.position


@pytest.fixture
def center():
    return CENTER


@pytest.fixture
def sample_atms():
    """Cinco cajeros a menos de 1 km y uno lejano."""
    return [
        atm_north_of(CENTER, 'a1', 80, 'Banco Nación', 'LINK'),
        atm_north_of(CENTER, 'a2', 150, 'Banco Galicia', 'BANELCO'),
        atm_north_of(CENTER, 'a3', 400, 'Banco Ciudad', 'LINK'),
        atm_north_of(CENTER, 'a4', 700, 'Banco Galicia', 'BANELCO'),
        atm_north_of(CENTER, 'a5', 900, 'Banco Nación', 'LINK'),
        atm_north_of(CENTER, 'far', 5000, 'HSBC', 'BANELCO'),
    ]


@pytest.fixture
def local_directory(sample_atms):
    return LocalAtmDirectory.from_atms(sample_atms)


@pytest.fixture
def controlled_directory():
    return ControlledDirectory()


@pytest.fixture
def location():
    return StaticLocation()
