"""
Excepciones del buscador de cajeros.

Los colaboradores externos (directorio de cajeros, configuración) lanzan
estas excepciones. El modelo de filtros las convierte en resultados
observables y la pantalla en diálogos, nunca llegan al usuario como errores.
"""


class AtmFinderError(Exception):
    """Excepción base del proyecto."""


class DirectoryError(AtmFinderError):
    """
    El directorio de cajeros no pudo responder la consulta.

    Cubre errores de red, timeouts, respuestas HTTP de error y
    respuestas con formato inválido.
    """

    def __init__(self, message, status_code=None):
        super().__init__(message)
        self.status_code = status_code


class ConfigurationError(AtmFinderError):
    """Valor de configuración inválido en el entorno o en el archivo .env."""

    def __init__(self, key, value):
        super().__init__(f"Valor inválido para {key}: {value!r}")
        self.key = key
        self.value = value
