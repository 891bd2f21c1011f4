"""
Configuración de la aplicación.

Los valores se leen de variables de entorno, cargando antes el archivo .env
si existe.

Funciones principales:
    - get_settings: Devuelve la configuración actual
    - database_url: Cadena de conexión para SQLAlchemy
"""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from api.utils.errors import ConfigurationError

# Obelisco, Buenos Aires
DEFAULT_LATITUDE = -34.6037
DEFAULT_LONGITUDE = -58.3816


@dataclass(frozen=True)
class Settings:
    """Valores de configuración ya convertidos a su tipo."""

    db_user: str
    db_password: str
    db_host: str
    db_port: str
    db_name: str
    database_url: str
    directory_url: str
    http_timeout: float
    connectivity_probe_url: str
    connectivity_timeout: float
    default_latitude: float
    default_longitude: float
    sample_atms: int
    log_level: str


def _get_number(key, default, cast=float):
    raw = os.getenv(key)
    if raw is None or raw.strip() == "":
        return default
    try:
        return cast(raw)
    except ValueError:
        raise ConfigurationError(key, raw) from None


def get_settings():
    """
    Lee la configuración desde el entorno.

    Returns:
        Instancia de Settings

    Raises:
        ConfigurationError: Si un valor numérico no se puede convertir
    """
    load_dotenv()

    return Settings(
        db_user=os.getenv('DB_USER', 'postgres'),
        db_password=os.getenv('DB_PASSWORD', 'yourpassword'),
        db_host=os.getenv('DB_HOST', 'localhost'),
        db_port=os.getenv('DB_PORT', '5432'),
        db_name=os.getenv('DB_NAME', 'atm_finder'),
        database_url=os.getenv('DATABASE_URL', ''),
        directory_url=os.getenv('ATM_DIRECTORY_URL', '').rstrip('/'),
        http_timeout=_get_number('ATM_HTTP_TIMEOUT', 10.0),
        connectivity_probe_url=os.getenv('CONNECTIVITY_PROBE_URL', 'https://www.google.com'),
        connectivity_timeout=_get_number('CONNECTIVITY_TIMEOUT', 3.0),
        default_latitude=_get_number('DEFAULT_LATITUDE', DEFAULT_LATITUDE),
        default_longitude=_get_number('DEFAULT_LONGITUDE', DEFAULT_LONGITUDE),
        sample_atms=_get_number('SAMPLE_ATMS', 60, cast=int),
        log_level=os.getenv('LOG_LEVEL', 'INFO'),
    )


def database_url(settings):
    """
    Arma la cadena de conexión para SQLAlchemy.

    Args:
        settings: Configuración actual

    Returns:
        DATABASE_URL si está definida, si no una URL de PostgreSQL
    """
    if settings.database_url:
        return settings.database_url
    return (
        f'postgresql://{settings.db_user}:{settings.db_password}'
        f'@{settings.db_host}:{settings.db_port}/{settings.db_name}'
    )
