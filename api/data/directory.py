"""
Directorio local de cajeros automáticos.

Responde las consultas de cajeros y bancos sobre un DataFrame en memoria,
cargado desde la base de datos o generado por simulación.

Elementos principales:
    - LocalAtmDirectory: Directorio en memoria
"""

import logging

import pandas as pd

from api.data.db_connector import load_atm_data
from api.data.simulation import generate_sample_atms
from api.models.atm import ANY, ATM, Coordinate
from api.utils.helpers import ATM_COLUMNS, haversine_distance

logger = logging.getLogger(__name__)


class LocalAtmDirectory:
    """
    Directorio de cajeros sobre un DataFrame.

    Args:
        atms_df: DataFrame con las columnas de ATM_COLUMNS
    """

    def __init__(self, atms_df):
        missing = set(ATM_COLUMNS) - set(atms_df.columns)
        if missing:
            raise ValueError(f"Faltan columnas en el DataFrame de cajeros: {sorted(missing)}")
        atms_df = atms_df[ATM_COLUMNS].reset_index(drop=True)
        self.atms_df = atms_df.astype({'latitude': float, 'longitude': float})

    @classmethod
    def from_atms(cls, atms):
        return cls(pd.DataFrame([atm.to_dict() for atm in atms], columns=ATM_COLUMNS))

    @classmethod
    def from_database(cls, engine=None, settings=None):
        """
        Carga los cajeros de la base de datos.

        Si la base no está disponible o no tiene cajeros se usan datos
        simulados alrededor de la ubicación por defecto.
        """
        atms_df = load_atm_data(engine, settings)

        if len(atms_df) == 0:
            logger.warning("No se encontraron cajeros en la base de datos. Usando datos simulados.")
            kwargs = {}
            if settings is not None:
                kwargs = {
                    'num_atms': settings.sample_atms,
                    'center_lat': settings.default_latitude,
                    'center_lon': settings.default_longitude,
                }
            atms_df = generate_sample_atms(seed=0, **kwargs)

        return cls(atms_df)

    def find_atms(self, center, radius_meters, network=ANY, bank=ANY):
        """
        Filtra los cajeros por distancia, red y banco.

        Args:
            center: Coordinate del dispositivo
            radius_meters: Radio de búsqueda en metros
            network: Red ("" para cualquiera)
            bank: Banco ("" para cualquiera)

        Returns:
            Lista de ATM ordenada por distancia al centro (empates por id)
        """
        df = self.atms_df
        distances = haversine_distance(
            center.latitude, center.longitude, df['latitude'], df['longitude']
        )

        mask = distances <= radius_meters
        if network:
            mask &= df['network'] == network
        if bank:
            mask &= df['bank'] == bank

        matches = df[mask].assign(distance=distances[mask])
        matches = matches.sort_values(['distance', 'id'])

        return [
            ATM(
                id=str(row['id']),
                coordinate=Coordinate(float(row['latitude']), float(row['longitude'])),
                bank=row['bank'],
                network=row['network'],
                address=row['address'],
                name=row['name'],
            )
            for _, row in matches.iterrows()
        ]

    def find_banks(self, network=ANY):
        """
        Bancos con cajeros en la red indicada.

        Returns:
            Lista de nombres sin repetir, en orden alfabético
        """
        df = self.atms_df
        if network:
            df = df[df['network'] == network]
        return sorted(df['bank'].dropna().unique().tolist())

    async def query_atms(self, center, radius_meters, network=ANY, bank=ANY):
        return self.find_atms(center, radius_meters, network, bank)

    async def query_banks(self, network=ANY):
        return self.find_banks(network)
