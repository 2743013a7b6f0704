"""
PokerLog – Logging configuration
==================================
Configura logging con formato legible para desarrollo.

Todos los loggers del proyecto cuelgan de un único namespace (el nombre
del paquete raíz), así un solo setLevel controla toda la app.

SQL:
  El echo de SQLAlchemy se controla aquí (logger "sqlalchemy.engine")
  y no con create_engine(echo=True), que instala su propio handler y
  duplica cada línea.
"""

from __future__ import annotations

import logging
import sys
from typing import Union

# "pokerlog"
ROOT_NAMESPACE = __name__.split(".", 1)[0]

_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)-32s | %(message)s"

# Librerías ruidosas → WARNING
_QUIET_LOGGERS = ("aiosqlite", "uvicorn.access")


def setup_logging(level: Union[int, str] = logging.INFO, sql_echo: bool = False) -> None:
    """
    Configura el root logger una sola vez al arranque.

    Args:
        level: Nivel del root logger ("INFO", logging.DEBUG, ...)
        sql_echo: Si True, loguea cada query SQL a nivel INFO
    """
    root = logging.getLogger()
    # Evitar handlers duplicados si se llama más de una vez
    if not root.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        root.addHandler(handler)
    root.setLevel(level)

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logging.getLogger("sqlalchemy.engine").setLevel(
        logging.INFO if sql_echo else logging.WARNING
    )


def get_logger(name: str) -> logging.Logger:
    """Logger hijo del namespace del proyecto: get_logger("main") → pokerlog.main."""
    return logging.getLogger(f"{ROOT_NAMESPACE}.{name}")
