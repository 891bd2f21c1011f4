"""
Módulo para la simulación de datos de cajeros automáticos.

Este módulo proporciona funciones para generar cajeros de ejemplo cuando no
hay una base de datos ni un directorio remoto disponibles.

Funciones principales:
    - generate_sample_atms: Genera cajeros alrededor de un punto
"""

import random

import numpy as np
import pandas as pd

from api.utils.config import DEFAULT_LATITUDE, DEFAULT_LONGITUDE
from api.utils.helpers import ATM_COLUMNS

# Bancos de ejemplo por red
BANKS_BY_NETWORK = {
    'LINK': ['Banco Ciudad', 'Banco Nación', 'Banco Provincia', 'Banco Patagonia'],
    'BANELCO': ['Banco Galicia', 'Banco Santander', 'BBVA', 'Banco Macro', 'HSBC'],
}

STREETS = [
    'Av. Corrientes', 'Av. de Mayo', 'Av. Rivadavia', 'Florida', 'Lavalle',
    'Av. Córdoba', 'Tucumán', 'Sarmiento', 'Av. 9 de Julio', 'Esmeralda',
]

def generate_sample_atms(num_atms=60, center_lat=DEFAULT_LATITUDE,
                         center_lon=DEFAULT_LONGITUDE, max_offset=1500, seed=None):
    """
    Genera datos de ejemplo para cajeros cuando no hay datos reales.

    Args:
        num_atms: Número de cajeros a generar
        center_lat, center_lon: Centro alrededor del cual se ubican
        max_offset: Distancia máxima al centro en metros
        seed: Semilla para obtener siempre los mismos cajeros

    Returns:
        DataFrame con datos simulados de cajeros
    """
    rng = random.Random(seed)

    # Metros por grado en la latitud del centro
    meters_per_deg_lat = 111320.0
    meters_per_deg_lon = meters_per_deg_lat * np.cos(np.radians(center_lat))

    atms_data = []

    for i in range(1, num_atms + 1):
        network = rng.choice(list(BANKS_BY_NETWORK))
        bank = rng.choice(BANKS_BY_NETWORK[network])

        # Posición aleatoria dentro de un círculo de radio max_offset
        distance = max_offset * np.sqrt(rng.random())
        angle = rng.uniform(0, 2 * np.pi)
        lat_offset = distance * np.sin(angle) / meters_per_deg_lat
        lon_offset = distance * np.cos(angle) / meters_per_deg_lon

        atm = {
            'id': f'{i:04d}',
            'name': f'Cajero {i:03d}',
            'bank': bank,
            'network': network,
            'address': f'{rng.choice(STREETS)} {rng.randint(100, 2500)}',
            'latitude': center_lat + lat_offset,
            'longitude': center_lon + lon_offset,
        }
        atms_data.append(atm)

    return pd.DataFrame(atms_data, columns=ATM_COLUMNS)
