"""
Módulo de funciones auxiliares.

Este módulo proporciona funciones de utilidad general que pueden ser
utilizadas por otros componentes del sistema.
"""

import numpy as np
import pandas as pd

ATM_COLUMNS = ['id', 'name', 'bank', 'network', 'address', 'latitude', 'longitude']

def haversine_distance(lat1, lon1, lat2, lon2):
    """
    Calcula distancia entre coordenadas geográficas.

    Acepta escalares o arreglos de numpy/pandas para calcular muchas
    distancias de una vez.

    Args:
        lat1, lon1: Coordenadas del primer punto
        lat2, lon2: Coordenadas del segundo punto

    Returns:
        Distancia en metros
    """
    # Radio de la Tierra en metros
    R = 6371000.0

    # Convertir de grados a radianes
    lat1_rad = np.radians(lat1)
    lon1_rad = np.radians(lon1)
    lat2_rad = np.radians(lat2)
    lon2_rad = np.radians(lon2)

    # Diferencias
    dlon = lon2_rad - lon1_rad
    dlat = lat2_rad - lat1_rad

    # Fórmula de Haversine
    a = np.sin(dlat / 2)**2 + np.cos(lat1_rad) * np.cos(lat2_rad) * np.sin(dlon / 2)**2
    c = 2 * np.arctan2(np.sqrt(a), np.sqrt(1 - a))
    distance = R * c

    return distance

def atms_to_dataframe(atms):
    """
    Convierte una lista de cajeros en DataFrame.

    Args:
        atms: Lista de ATM (puede ser None o vacía)

    Returns:
        DataFrame con una fila por cajero y las columnas de ATM_COLUMNS
    """
    if not atms:
        return pd.DataFrame(columns=ATM_COLUMNS)
    return pd.DataFrame([atm.to_dict() for atm in atms], columns=ATM_COLUMNS)

def format_distance(meters):
    """
    Formatea una distancia para mostrar en pantalla.

    Args:
        meters: Distancia en metros

    Returns:
        Cadena como "500 m" o "1 km"
    """
    meters = float(meters)
    if meters >= 1000:
        return f"{meters / 1000:g} km"
    return f"{meters:.0f} m"
