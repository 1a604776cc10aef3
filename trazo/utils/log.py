# File: trazo/utils/log.py
# Project: TrazoSvg (trazo)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-18
# Purpose: Handlers opcionales para el logger "trazo" (consola + archivo).
# Notes:
#   - Los módulos solo hacen logging.getLogger(__name__); nunca configuran nada.
#   - Esto lo llama la app que embebe el motor. El root logger no se toca.
from __future__ import annotations

import logging
import os
from pathlib import Path

from trazo.core.version import APP_SHORT

LOG_FILENAME = f"{APP_SHORT}.log"
_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_DATEFMT = "%Y-%m-%d %H:%M:%S"

# Marca en los handlers propios: permite re-llamar sin duplicarlos.
_OWN_HANDLER_ATTR = "_trazo_handler"


def _own_handlers(logger: logging.Logger) -> list[logging.Handler]:
    return [h for h in logger.handlers if getattr(h, _OWN_HANDLER_ATTR, False)]


def _attach(logger: logging.Logger, handler: logging.Handler, level: int) -> None:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt=_FORMAT, datefmt=_DATEFMT))
    setattr(handler, _OWN_HANDLER_ATTR, True)
    logger.addHandler(handler)


def setup_logging(
    log_dir: str | os.PathLike | None = None,
    level: int = logging.INFO,
    *,
    console: bool = True,
    propagate: bool = False,
) -> logging.Logger:
    """Configura el logger `trazo` (y por herencia `trazo.*`).

    - `log_dir`: si se da, agrega un FileHandler a `<log_dir>/trazo.log`.
      Si no se puede abrir, avisa y sigue solo con consola.
    - Idempotente: una segunda llamada reemplaza los handlers propios en
      vez de duplicarlos (sirve para cambiar nivel o carpeta).
    - `propagate=False` evita mensajes duplicados si el host ya loggea desde root.

    Devuelve el logger configurado.
    """
    logger = logging.getLogger(APP_SHORT)
    for h in _own_handlers(logger):
        logger.removeHandler(h)
        h.close()

    logger.setLevel(level)
    logger.propagate = propagate

    if console:
        _attach(logger, logging.StreamHandler(), level)

    if log_dir is not None:
        try:
            d = Path(log_dir)
            d.mkdir(parents=True, exist_ok=True)
            _attach(logger, logging.FileHandler(d / LOG_FILENAME, encoding="utf-8"), level)
        except OSError as e:
            logger.warning("No se pudo inicializar FileHandler en %s: %s", log_dir, e)

    return logger
