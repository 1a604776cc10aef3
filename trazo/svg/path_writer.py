# File: trazo/svg/path_writer.py
# Project: TrazoSvg (trazo)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-18
# Purpose: Serialización de geometría al mini-lenguaje de paths (atributo d).
# Notes:
#   - Los tokens de segmentos solo llevan los puntos finales; el primero es el cursor.
#   - Números en decimal plano (sin notación científica).
from __future__ import annotations

import math
from decimal import Decimal
from typing import Any, Literal, Sequence

from trazo.core.settings import EngineSettings
from trazo.geom.point_math import Point, to_point, to_points
from trazo.geom.spline import SimplePath, SplineAlgorithm, fit
from trazo.utils.errors import InvalidInput, UnsupportedShape


def format_number(value: float) -> str:
    """Decimal más corto que hace round-trip, sin exponente.

    1.0 -> "1", -0.0 -> "0", 1e-07 -> "0.0000001".
    """
    v = float(value)
    if not math.isfinite(v):
        raise InvalidInput(f"Número no finito en path: {value!r}")
    if v == 0:
        return "0"
    if v.is_integer() and abs(v) < 1e16:
        return str(int(v))
    txt = format(Decimal(repr(v)), "f")
    if "." in txt:
        txt = txt.rstrip("0").rstrip(".")
    return txt


def _pt(p: Point) -> str:
    return f"{format_number(p[0])} {format_number(p[1])}"


def serialize_simple(path: Sequence[Any]) -> str:
    """Token para un simple path (sin el move-to del primer punto).

    - 2 puntos: "L x y"
    - 3 puntos: "Q cx cy x y"
    - 4 puntos: "C c1x c1y c2x c2y x y"
    """
    n = len(path)
    if n not in (2, 3, 4):
        if n > 4:
            raise UnsupportedShape(
                f"{n} puntos no forman un simple path (línea, quadratic, cubic). "
                "Usar descomposición Catmull-Rom o Canonical Spline."
            )
        raise UnsupportedShape(
            f"Un simple path necesita 2, 3 o 4 puntos (hay {n}). "
            "Un punto solo no se dibuja: usar un círculo."
        )
    pts = to_points(path)
    if n == 2:
        return f"L {_pt(pts[1])}"
    if n == 3:
        return f"Q {_pt(pts[1])} {_pt(pts[2])}"
    return f"C {_pt(pts[1])} {_pt(pts[2])} {_pt(pts[3])}"


def serialize_spline(segments: Sequence[SimplePath], start_point: Any = None) -> str:
    """Un solo move-to + los tokens de cada segmento, en orden.

    `start_point` por defecto es el primer punto del primer segmento.
    """
    if not segments:
        raise InvalidInput("No hay segmentos para serializar")
    start = to_point(start_point) if start_point is not None else to_point(segments[0][0])
    tokens = [f"M {_pt(start)}"]
    tokens.extend(serialize_simple(seg) for seg in segments)
    return " ".join(tokens)


def build_simple_path_d_string(path: Sequence[Any]) -> str:
    """d completo (M + token) para un único simple path."""
    token = serialize_simple(path)
    return f"M {_pt(to_point(path[0]))} {token}"


def build_spline_d_string(
    points: Sequence[Any],
    algorithm: SplineAlgorithm | str | None = None,
    tension: float | None = None,
    settings: EngineSettings | None = None,
) -> str:
    """Ajusta `points` y devuelve el d del spline.

    Lo que falte de `algorithm`/`tension` sale de `settings` (por defecto
    `EngineSettings()`). No lee archivos: quien quiera trazo_settings.json
    lo carga una vez con `load_engine_settings()` y lo pasa acá.
    """
    if algorithm is None or tension is None:
        cfg = settings or EngineSettings()
        algorithm = cfg.spline_algorithm if algorithm is None else algorithm
        tension = cfg.tension if tension is None else tension
    return serialize_spline(fit(points, algorithm, tension))


# ------------------------------
# Formas simples (glue de borde)
# ------------------------------

def build_d_for_rectangle(x: float, y: float, width: float, height: float) -> str:
    return (
        f"M {format_number(x)} {format_number(y)} h {format_number(width)} "
        f"v {format_number(height)} h {format_number(-width)} Z"
    )


def build_d_for_ellipse(cx: float, cy: float, rx: float, ry: float) -> str:
    """Elipse completa como dos arcos relativos (SVG no dibuja un arco de 360°)."""
    r = f"{format_number(rx)} {format_number(ry)}"
    return (
        f"M {format_number(cx - rx)} {format_number(cy)} "
        f"a {r} 0 1 0 {format_number(2 * rx)} 0 "
        f"a {r} 0 1 0 {format_number(-2 * rx)} 0"
    )


def build_d_for_ellipse_arc(
    cx: float,
    cy: float,
    rx: float,
    ry: float,
    start_angle: float,
    end_angle: float,
    direction: Literal["cw", "ccw"] = "cw",
) -> str:
    """Arco de elipse entre dos ángulos (radianes) alrededor de (cx, cy)."""
    if direction not in ("cw", "ccw"):
        raise InvalidInput(f"direction inválida: {direction!r}")
    start = (cx + rx * math.cos(start_angle), cy + ry * math.sin(start_angle))
    end = (cx + rx * math.cos(end_angle), cy + ry * math.sin(end_angle))
    large_arc = 0 if end_angle - start_angle <= math.pi else 1
    sweep = 1 if direction == "cw" else 0
    return (
        f"M {_pt(start)} A {format_number(rx)} {format_number(ry)} 0 "
        f"{large_arc} {sweep} {_pt(end)}"
    )


def build_d_for_line(a: Any, b: Any) -> str:
    return f"M {_pt(to_point(a))} L {_pt(to_point(b))}"


def build_d_for_line_sequence(points: Sequence[Any], close: bool = False) -> str:
    pts = to_points(points)
    if not pts:
        raise InvalidInput("Se requiere al menos 1 punto")
    parts = [f"M {_pt(pts[0])}"]
    parts.extend(f"L {_pt(p)}" for p in pts[1:])
    if close:
        parts.append("Z")
    return " ".join(parts)
