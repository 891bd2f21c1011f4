"""
Módulo para la conexión a la base de datos.

Este módulo proporciona funciones para conectarse a la base de datos
(PostgreSQL por defecto) y cargar la tabla de cajeros automáticos que usa
el directorio local.

Funciones principales:
    - create_db_connection: Establece conexión con la base de datos
    - load_atm_data: Carga datos de cajeros automáticos
"""

import logging

import pandas as pd
from sqlalchemy import create_engine, text
from sqlalchemy.exc import SQLAlchemyError

from api.utils.config import database_url, get_settings
from api.utils.helpers import ATM_COLUMNS

logger = logging.getLogger(__name__)

ATM_QUERY = """
SELECT id, name, bank, network, address, latitude, longitude
FROM atms;
"""

def create_db_connection(settings=None):
    """
    Se crea la conexión a la base de datos.

    Args:
        settings: Configuración. Si es None, se lee del entorno.

    Returns:
        SQLAlchemy engine
    """
    if settings is None:
        settings = get_settings()

    engine = create_engine(database_url(settings))

    logger.info("Conectado a: %s", engine.url.render_as_string(hide_password=True))
    return engine

def load_atm_data(engine=None, settings=None):
    """
    Carga los cajeros automáticos de la tabla atms.

    Args:
        engine: SQLAlchemy engine. Si es None, se crea uno nuevo.
        settings: Configuración para crear el engine

    Returns:
        DataFrame con las columnas de ATM_COLUMNS. Vacío si hay un error.
    """
    try:
        if engine is None:
            engine = create_db_connection(settings)

        with engine.connect() as conn:
            atms_df = pd.read_sql(text(ATM_QUERY), conn)
        logger.info("Cajeros cargados: %d", len(atms_df))

        # Normalizar tipos: los ids y textos se manejan siempre como str
        for column in ['id', 'name', 'bank', 'network', 'address']:
            atms_df[column] = atms_df[column].fillna('').astype(str)
        return atms_df[ATM_COLUMNS]

    except (SQLAlchemyError, ImportError) as e:
        logger.warning("Error al cargar datos: %s", e)
        logger.warning("Devolviendo DataFrame vacío. Se puede usar simulación para generar datos.")

        # Crear DataFrame vacío con las columnas correctas
        return pd.DataFrame(columns=ATM_COLUMNS)
