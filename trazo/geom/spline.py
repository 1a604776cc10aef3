"""Spline fitting: point sequence -> list of simple curve segments.

Two algorithms are supported:

- Catmull-Rom: one cubic per consecutive pair of points, endpoints clamped
  (the curve does not loop). Passes through every input point.
- Canonical Spline: one cubic per interior pair. The first and last input
  points only act as neighbours and are never segment endpoints.

Short inputs bypass fitting and come back verbatim as a single simple path
(fewer than 4 points for Catmull-Rom, fewer than 5 for Canonical).

Tension: 0 = loose, 1 = tight. It is not clamped.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Sequence, Tuple

from trazo.geom.point_math import Point, add, difference, scaled_by, to_points
from trazo.utils.errors import InvalidInput

SimplePath = Tuple[Point, ...]
SimplePathList = list[SimplePath]


class SplineAlgorithm(str, Enum):
    """Algoritmo de descomposición.

    - catmull-rom: alias histórico "quadratic".
    - canonical: alias histórico "cubic".
    """

    CATMULL_ROM = "catmull-rom"
    CANONICAL = "canonical"


_ALIASES = {
    "catmull-rom": SplineAlgorithm.CATMULL_ROM,
    "catmullrom": SplineAlgorithm.CATMULL_ROM,
    "catmull_rom": SplineAlgorithm.CATMULL_ROM,
    "quadratic": SplineAlgorithm.CATMULL_ROM,
    "canonical": SplineAlgorithm.CANONICAL,
    "canonical-spline": SplineAlgorithm.CANONICAL,
    "canonical_spline": SplineAlgorithm.CANONICAL,
    "cubic": SplineAlgorithm.CANONICAL,
}


def coerce_spline_algorithm(v: object) -> SplineAlgorithm:
    if isinstance(v, SplineAlgorithm):
        return v
    key = str(v or "").strip().lower()
    try:
        return _ALIASES[key]
    except KeyError:
        raise InvalidInput(f"Algoritmo de spline desconocido: {v!r}") from None


def _checked_points(points: Sequence[Any]) -> list[Point]:
    if len(points) == 0:
        raise InvalidInput("Se requiere al menos 1 punto")
    return to_points(points)


def perform_catmull_rom(points: Sequence[Any], tension: float = 1.0) -> SimplePathList:
    pts = _checked_points(points)
    n = len(pts)
    if n < 4:
        return [tuple(pts)]

    result: SimplePathList = []
    for i in range(n - 1):
        p0 = pts[max(i - 1, 0)]
        p1 = pts[i]
        p2 = pts[i + 1]
        p3 = pts[min(i + 2, n - 1)]

        t1 = scaled_by(difference(p2, p0), tension / 2)
        t2 = scaled_by(difference(p3, p1), tension / 2)

        cp1 = add(p1, scaled_by(t1, 1 / 3))
        cp2 = difference(p2, scaled_by(t2, 1 / 3))
        result.append((p1, cp1, cp2, p2))
    return result


def perform_canonical_spline(points: Sequence[Any], tension: float = 1.0) -> SimplePathList:
    pts = _checked_points(points)
    n = len(pts)
    if n < 5:
        return [tuple(pts)]

    result: SimplePathList = []
    # Loop [1, n-3]: no hay segmento anclado en el primer/último punto.
    for i in range(1, n - 2):
        p0, p1, p2, p3 = pts[i - 1], pts[i], pts[i + 1], pts[i + 2]
        cp1 = add(p1, scaled_by(difference(p2, p0), tension / 6))
        cp2 = difference(p2, scaled_by(difference(p3, p1), tension / 6))
        result.append((p1, cp1, cp2, p2))
    return result


def fit(
    points: Sequence[Any],
    algorithm: SplineAlgorithm | str = SplineAlgorithm.CATMULL_ROM,
    tension: float = 1.0,
) -> SimplePathList:
    """Decompose `points` into simple paths with the chosen algorithm."""
    algo = coerce_spline_algorithm(algorithm)
    if algo is SplineAlgorithm.CATMULL_ROM:
        return perform_catmull_rom(points, tension)
    return perform_canonical_spline(points, tension)
