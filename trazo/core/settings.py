# File: trazo/core/settings.py
# Project: TrazoSvg (trazo)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-18
# Purpose: Defaults del motor (tension/algoritmo de spline) desde JSON + variables de entorno.
# Notes: Archivo repo-local trazo_settings.json; las env vars pisan al JSON.
from __future__ import annotations

import json
import logging
import math
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

from trazo.core.version import DEFAULT_SPLINE_ALGORITHM, DEFAULT_TENSION
from trazo.geom.spline import coerce_spline_algorithm
from trazo.utils.errors import InvalidInput

log = logging.getLogger(__name__)


# ------------------------------
# Project settings (repo-local)
# ------------------------------
# Archivo esperado: trazo_settings.json en la raíz del proyecto (o en un padre del CWD).
PROJECT_SETTINGS_FILENAME = "trazo_settings.json"

ENV_TENSION = "TRAZO_SPLINE_TENSION"
ENV_ALGORITHM = "TRAZO_SPLINE_ALGORITHM"


@dataclass(frozen=True)
class EngineSettings:
    tension: float = DEFAULT_TENSION
    spline_algorithm: str = DEFAULT_SPLINE_ALGORITHM


def find_project_settings_path(start: Path | None = None) -> Path | None:
    """Busca trazo_settings.json subiendo desde start (o CWD)."""
    start = (start or Path.cwd()).resolve()
    for p in (start, *start.parents):
        candidate = p / PROJECT_SETTINGS_FILENAME
        if candidate.is_file():
            return candidate
    return None


def load_project_settings(start: Path | None = None, *, logger: logging.Logger | None = None) -> Dict[str, Any]:
    """Carga el JSON de project settings. Devuelve {} si no existe o es inválido."""
    _log = logger or log
    p = find_project_settings_path(start)
    if not p:
        return {}
    try:
        data = json.loads(p.read_text(encoding="utf-8"))
        return data if isinstance(data, dict) else {}
    except (OSError, ValueError) as e:
        _log.warning("No se pudo leer %s: %s", p, e)
        return {}


def save_project_settings(data: Dict[str, Any], start: Path | None = None, *, logger: logging.Logger | None = None) -> Path | None:
    """Guarda project settings en trazo_settings.json.

    - Si se encuentra un archivo existente, lo pisa.
    - Si no existe, lo crea en start (o el CWD).

    Devuelve el Path guardado o None si falla.
    """
    _log = logger or log
    p = find_project_settings_path(start)
    if not p:
        p = (start or Path.cwd()).resolve() / PROJECT_SETTINGS_FILENAME
    try:
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(data, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")
        return p
    except OSError as e:
        _log.warning("No se pudo guardar %s: %s", p, e)
        return None


def _deep_get(d: Dict[str, Any], path: str, default: Any = None) -> Any:
    cur: Any = d
    for part in path.split("."):
        if not isinstance(cur, dict) or part not in cur:
            return default
        cur = cur[part]
    return cur


def _coerce_tension(value: Any, source: str, _log: logging.Logger) -> float | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        t = float(value)
    except (TypeError, ValueError):
        _log.warning("%s: tension inválida %r (se ignora)", source, value)
        return None
    if not math.isfinite(t):
        _log.warning("%s: tension no finita %r (se ignora)", source, value)
        return None
    return t


def _coerce_algorithm(value: Any, source: str, _log: logging.Logger) -> str | None:
    if value is None or value == "":
        return None
    try:
        return coerce_spline_algorithm(value).value
    except InvalidInput:
        _log.warning("%s: algoritmo de spline inválido %r (se ignora)", source, value)
        return None


def load_engine_settings(start: Path | None = None, *, logger: logging.Logger | None = None) -> EngineSettings:
    """Defaults -> trazo_settings.json -> variables de entorno.

    Claves JSON: spline.tension, spline.algorithm.
    Env vars: TRAZO_SPLINE_TENSION, TRAZO_SPLINE_ALGORITHM.
    Valores inválidos se loggean y se ignoran.
    """
    _log = logger or log
    data = load_project_settings(start, logger=_log)

    tension = DEFAULT_TENSION
    algorithm = DEFAULT_SPLINE_ALGORITHM

    t = _coerce_tension(_deep_get(data, "spline.tension"), PROJECT_SETTINGS_FILENAME, _log)
    if t is not None:
        tension = t
    a = _coerce_algorithm(_deep_get(data, "spline.algorithm"), PROJECT_SETTINGS_FILENAME, _log)
    if a is not None:
        algorithm = a

    t = _coerce_tension(os.environ.get(ENV_TENSION) or None, ENV_TENSION, _log)
    if t is not None:
        tension = t
    a = _coerce_algorithm(os.environ.get(ENV_ALGORITHM), ENV_ALGORITHM, _log)
    if a is not None:
        algorithm = a

    return EngineSettings(tension=tension, spline_algorithm=algorithm)
