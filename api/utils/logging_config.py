"""
Configuración del logging de la aplicación.
"""

import logging

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Librerías que generan demasiado ruido en nivel DEBUG
NOISY_LOGGERS = ("urllib3", "watchdog")


def setup_logging(level="INFO"):
    """
    Configura el handler raíz una sola vez.

    Args:
        level: Nombre o número del nivel de logging
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=level, format=LOG_FORMAT)
    root.setLevel(level)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))
