"""
Configuración de logging del servidor.

La salida va a stderr; el resto de módulos solo hacen logging.getLogger(__name__).
"""

from __future__ import annotations

import logging
import sys


def setup_logging(level: str | int = "INFO") -> logging.Logger:
    """Configura el logger raíz del paquete ``superrifas``.

    Args:
        level: Nombre ("DEBUG", "INFO", ...) o valor numérico del nivel.
               Un nombre desconocido cae a INFO.

    Returns:
        El logger ``superrifas`` ya configurado.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.strip().upper())
        if not isinstance(level, int):
            level = logging.INFO

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)-8s %(name)s: %(message)s"))

    logger = logging.getLogger("superrifas")
    logger.setLevel(level)

    # Avoid duplicate handlers if called multiple times
    logger.handlers.clear()
    logger.addHandler(handler)
    return logger
