"""Typed geometry primitives produced by the path interpreter.

Each primitive carries only what is needed to compute its bounds, in
absolute coordinates. No reference back to the source path string.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from trazo.geom.arc_bounds import center_parameterization
from trazo.geom.point_math import Point


@dataclass(frozen=True)
class Line:
    p1: Point
    p2: Point

    kind = "line"


@dataclass(frozen=True)
class QuadraticBezier:
    p1: Point
    control: Point
    p2: Point

    kind = "quadraticBezier"


@dataclass(frozen=True)
class CubicBezier:
    p1: Point
    control1: Point
    control2: Point
    p2: Point

    kind = "cubicBezier"


@dataclass(frozen=True)
class EllipseArc:
    """SVG elliptical arc in endpoint parameterization.

    `rotation` is the x-axis rotation in degrees; flags are kept verbatim.
    Centre and angles are derived on demand (see `arc_bounds`).
    """

    start: Point
    rx: float
    ry: float
    rotation: float
    large_arc: bool
    sweep: bool
    end: Point

    kind = "ellipseArc"

    @property
    def center(self) -> Point | None:
        cp = center_parameterization(self)
        return cp.center if cp else None

    @property
    def start_angle(self) -> float | None:
        cp = center_parameterization(self)
        return cp.theta1 if cp else None

    @property
    def end_angle(self) -> float | None:
        cp = center_parameterization(self)
        return cp.theta1 + cp.delta if cp else None


Primitive = Union[Line, QuadraticBezier, CubicBezier, EllipseArc]
