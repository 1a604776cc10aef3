# File: trazo/geom/point_math.py
# Project: TrazoSvg (trazo)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-18
# Purpose: Aritmética de puntos 2D (tuplas inmutables).
# Notes: Sin estado. Todas las funciones devuelven tuplas nuevas.
from __future__ import annotations

import math
from numbers import Real
from typing import Any, Sequence, Tuple

from trazo.utils.errors import InvalidInput

Point = Tuple[float, float]


def to_point(seq: Any) -> Point:
    """Convierte una secuencia [x, y] en Point.

    Solo se aceptan exactamente dos valores numéricos reales (bool no cuenta).
    """
    if isinstance(seq, (str, bytes)):
        raise InvalidInput(f"Punto inválido: {seq!r}")
    try:
        items = list(seq)
    except TypeError as e:
        raise InvalidInput(f"Punto inválido (no es secuencia): {seq!r}") from e
    if len(items) != 2:
        raise InvalidInput(f"Punto inválido: se esperan 2 valores, hay {len(items)}")
    for v in items:
        if isinstance(v, bool) or not isinstance(v, Real):
            raise InvalidInput(f"Punto inválido (valor no numérico): {v!r}")
    return (float(items[0]), float(items[1]))


def to_points(seqs: Sequence[Any]) -> list[Point]:
    return [to_point(s) for s in seqs]


def add(p1: Point, p2: Point) -> Point:
    return (p1[0] + p2[0], p1[1] + p2[1])


def difference(p1: Point, p2: Point) -> Point:
    return (p1[0] - p2[0], p1[1] - p2[1])


def scaled_by(p: Point, scalar: float) -> Point:
    return (p[0] * scalar, p[1] * scalar)


def term_by_term(p1: Point, p2: Point) -> Point:
    return (p1[0] * p2[0], p1[1] * p2[1])


def lerp(p1: Point, p2: Point, t: float) -> Point:
    return (p1[0] + (p2[0] - p1[0]) * t, p1[1] + (p2[1] - p1[1]) * t)


def direction_vector(theta: float) -> Point:
    """Vector unitario para un ángulo en radianes."""
    return (math.cos(theta), math.sin(theta))


def bow_at_midpoint(p1: Point, p2: Point, offset: float) -> tuple[Point, Point, Point]:
    """Quadratic [p1, control, p2] con el control desplazado del punto medio.

    Regla de la mano derecha: el desplazamiento va a +90° de p1->p2.
    """
    delta = difference(p2, p1)
    orth = math.atan2(delta[1], delta[0]) + math.pi / 2
    control = add(lerp(p1, p2, 0.5), scaled_by(direction_vector(orth), offset))
    return (p1, control, p2)
