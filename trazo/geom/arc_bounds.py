"""Bounds of SVG elliptical arcs.

An arc in a path string is given in *endpoint* form (start, radii, x-axis
rotation, flags, end). Bounds need the *centre* form: centre, effective
radii, start angle and signed sweep. The conversion follows the SVG
implementation notes (endpoint -> centre parameterization):

- radii are made positive, and scaled up when too small to span the chord;
- zero radius means a straight line between the endpoints;
- coincident endpoints mean the arc is omitted (bounds = the point).

The extremes of a rotated ellipse are where dx/dθ = 0 or dy/dθ = 0. Each
gives two angles, π apart; only those inside the swept interval count,
together with both endpoints.

No Qt / no svgelements here: plain `math`.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Tuple

if TYPE_CHECKING:
    from trazo.geom.primitives import EllipseArc

BBoxXYXYTuple = Tuple[float, float, float, float]

_TAU = 2.0 * math.pi
_EPS = 1e-12


@dataclass(frozen=True)
class ArcCenter:
    center: Tuple[float, float]
    rx: float
    ry: float
    phi: float  # x-axis rotation (radianes)
    theta1: float
    delta: float  # sweep con signo (radianes)

    def point_at(self, theta: float) -> Tuple[float, float]:
        cos_phi, sin_phi = math.cos(self.phi), math.sin(self.phi)
        cos_t, sin_t = math.cos(theta), math.sin(theta)
        x = self.center[0] + self.rx * cos_phi * cos_t - self.ry * sin_phi * sin_t
        y = self.center[1] + self.rx * sin_phi * cos_t + self.ry * cos_phi * sin_t
        return (x, y)

    def contains_angle(self, theta: float) -> bool:
        if self.delta >= 0:
            return (theta - self.theta1) % _TAU <= self.delta + _EPS
        return (self.theta1 - theta) % _TAU <= -self.delta + _EPS


def center_parameterization(arc: "EllipseArc") -> ArcCenter | None:
    """Endpoint -> centre conversion. None for degenerate arcs."""
    x1, y1 = arc.start
    x2, y2 = arc.end
    rx, ry = abs(float(arc.rx)), abs(float(arc.ry))
    if (x1 == x2 and y1 == y2) or rx < _EPS or ry < _EPS:
        return None

    phi = math.radians(float(arc.rotation) % 360.0)
    cos_phi, sin_phi = math.cos(phi), math.sin(phi)

    dx2 = (x1 - x2) / 2.0
    dy2 = (y1 - y2) / 2.0
    x1p = cos_phi * dx2 + sin_phi * dy2
    y1p = -sin_phi * dx2 + cos_phi * dy2

    # Radios fuera de rango: escalar hasta que la cuerda entre.
    lam = (x1p * x1p) / (rx * rx) + (y1p * y1p) / (ry * ry)
    if lam > 1.0:
        s = math.sqrt(lam)
        rx *= s
        ry *= s

    rx2, ry2 = rx * rx, ry * ry
    num = rx2 * ry2 - rx2 * y1p * y1p - ry2 * x1p * x1p
    den = rx2 * y1p * y1p + ry2 * x1p * x1p
    coef = math.sqrt(max(0.0, num / den)) if den > 0 else 0.0
    if bool(arc.large_arc) == bool(arc.sweep):
        coef = -coef

    cxp = coef * rx * y1p / ry
    cyp = -coef * ry * x1p / rx

    cx = cos_phi * cxp - sin_phi * cyp + (x1 + x2) / 2.0
    cy = sin_phi * cxp + cos_phi * cyp + (y1 + y2) / 2.0

    theta1 = math.atan2((y1p - cyp) / ry, (x1p - cxp) / rx)
    theta2 = math.atan2((-y1p - cyp) / ry, (-x1p - cxp) / rx)
    delta = (theta2 - theta1) % _TAU
    if not arc.sweep and delta > 0:
        delta -= _TAU

    return ArcCenter(center=(cx, cy), rx=rx, ry=ry, phi=phi, theta1=theta1, delta=delta)


def arc_bounds_xyxy(arc: "EllipseArc") -> BBoxXYXYTuple:
    """Tight (x0, y0, x1, y1) bounds of an elliptical arc."""
    xs = [float(arc.start[0]), float(arc.end[0])]
    ys = [float(arc.start[1]), float(arc.end[1])]

    cp = center_parameterization(arc)
    if cp is not None:
        cos_phi, sin_phi = math.cos(cp.phi), math.sin(cp.phi)
        # dx/dθ = 0 y dy/dθ = 0
        base_x = math.atan2(-cp.ry * sin_phi, cp.rx * cos_phi)
        base_y = math.atan2(cp.ry * cos_phi, cp.rx * sin_phi)
        for base in (base_x, base_y):
            for theta in (base, base + math.pi):
                if cp.contains_angle(theta):
                    x, y = cp.point_at(theta)
                    xs.append(x)
                    ys.append(y)

    return (min(xs), min(ys), max(xs), max(ys))
