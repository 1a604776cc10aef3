# File: trazo/svg/builder.py
# Project: TrazoSvg (trazo)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-18
# Purpose: Acumulador de definiciones d (formas + curvas) encadenable.
# Notes:
#   - No guarda referencia al documento dueño: el caller mergea `build()`/`compile()`.
#   - Estilos, gradientes, filtros e ids quedan del lado del ensamblador del documento.
from __future__ import annotations

from typing import Any, Sequence

from trazo.core.settings import EngineSettings
from trazo.geom.point_math import to_point
from trazo.geom.spline import SplineAlgorithm
from trazo.svg.path_writer import (
    build_d_for_ellipse,
    build_d_for_line,
    build_d_for_line_sequence,
    build_d_for_rectangle,
    build_spline_d_string,
)


class PathBuilder:
    """Junta strings d; cada método devuelve el builder para encadenar.

    `settings` fija tension/algoritmo por defecto de `curve`; se resuelve una
    sola vez (p.ej. `PathBuilder(load_engine_settings())`).
    """

    def __init__(self, settings: EngineSettings | None = None) -> None:
        self._settings = settings or EngineSettings()
        self._definitions: list[str] = []

    @property
    def settings(self) -> EngineSettings:
        return self._settings

    def __len__(self) -> int:
        return len(self._definitions)

    def rectangle(self, x: float, y: float, width: float, height: float) -> "PathBuilder":
        self._definitions.append(build_d_for_rectangle(x, y, width, height))
        return self

    def circle(self, center: Any, radius: float) -> "PathBuilder":
        cx, cy = to_point(center)
        self._definitions.append(build_d_for_ellipse(cx, cy, radius, radius))
        return self

    def ellipse(self, center: Any, rx: float, ry: float) -> "PathBuilder":
        cx, cy = to_point(center)
        self._definitions.append(build_d_for_ellipse(cx, cy, rx, ry))
        return self

    def line(self, a: Any, b: Any) -> "PathBuilder":
        self._definitions.append(build_d_for_line(a, b))
        return self

    def line_sequence(self, points: Sequence[Any], close: bool = False) -> "PathBuilder":
        self._definitions.append(build_d_for_line_sequence(points, close))
        return self

    def curve(
        self,
        points: Sequence[Any],
        tension: float | None = None,
        algorithm: SplineAlgorithm | str | None = None,
    ) -> "PathBuilder":
        self._definitions.append(build_spline_d_string(points, algorithm, tension, self._settings))
        return self

    def build(self) -> tuple[str, ...]:
        return tuple(self._definitions)

    def compile(self) -> str:
        return " ".join(self._definitions)
