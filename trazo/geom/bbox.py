"""Axis-aligned bounding boxes for geometry primitives.

- `BoundingBox` is the (x, y, width, height) value handed to frame fitting.
- `combine_bounding_boxes` folds boxes; `None` entries mean "no bounds for
  this item" and are skipped. All-None / empty input returns None
  (no content), which callers must branch on.
- `primitive_bounds` is analytic per primitive kind: endpoints plus the
  interior extrema of beziers (derivative roots in (0, 1)) and of arcs
  (see `arc_bounds`).
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Iterable, List, Optional, Sequence, Tuple

from trazo.geom.arc_bounds import arc_bounds_xyxy
from trazo.geom.point_math import Point
from trazo.geom.primitives import CubicBezier, EllipseArc, Line, Primitive, QuadraticBezier

_EPS = 1e-12


@dataclass(frozen=True)
class BoundingBox:
    x: float
    y: float
    width: float
    height: float

    @property
    def x1(self) -> float:
        return float(self.x + self.width)

    @property
    def y1(self) -> float:
        return float(self.y + self.height)

    def as_xyxy(self) -> Tuple[float, float, float, float]:
        return (float(self.x), float(self.y), self.x1, self.y1)

    def as_dict(self) -> dict[str, float]:
        return {
            "x": float(self.x),
            "y": float(self.y),
            "width": float(self.width),
            "height": float(self.height),
        }

    def union(self, other: Optional["BoundingBox"]) -> "BoundingBox":
        if other is None:
            return self
        return combine_bounding_boxes(self, other)  # type: ignore[return-value]

    @staticmethod
    def from_xyxy(x0: float, y0: float, x1: float, y1: float) -> "BoundingBox":
        return BoundingBox(float(x0), float(y0), float(x1 - x0), float(y1 - y0))

    @staticmethod
    def from_points(points: Sequence[Point]) -> "BoundingBox":
        xs = [float(p[0]) for p in points]
        ys = [float(p[1]) for p in points]
        return BoundingBox.from_xyxy(min(xs), min(ys), max(xs), max(ys))


def _as_box(item: Any) -> Optional[BoundingBox]:
    """Acepta BoundingBox o dict {x,y,width,height}; None pasa como None."""
    if item is None or isinstance(item, BoundingBox):
        return item
    if isinstance(item, dict):
        return BoundingBox(
            float(item["x"]), float(item["y"]), float(item["width"]), float(item["height"])
        )
    raise TypeError(f"bbox inválido: {item!r}")


def combine_bounding_boxes(*boxes: Any) -> Optional[BoundingBox]:
    """Smallest box containing every non-None box.

    Callable variadically, `combine_bounding_boxes(a, b, c)`, or with a single
    list/tuple/iterable, `combine_bounding_boxes([a, None, c])`.
    """
    if len(boxes) == 0:
        return None
    items: Iterable[Any]
    if len(boxes) == 1 and not isinstance(boxes[0], (BoundingBox, dict)) and boxes[0] is not None:
        items = boxes[0]
    else:
        items = boxes

    min_x = min_y = math.inf
    max_x = max_y = -math.inf
    found = False
    for item in items:
        box = _as_box(item)
        if box is None:
            continue
        found = True
        min_x = min(min_x, box.x)
        min_y = min(min_y, box.y)
        max_x = max(max_x, box.x1)
        max_y = max(max_y, box.y1)

    if not found:
        return None
    return BoundingBox.from_xyxy(min_x, min_y, max_x, max_y)


# ---------------------------------------------------------------------------
# Bezier extrema
# ---------------------------------------------------------------------------

def _quadratic_roots(a: float, b: float, c: float) -> List[float]:
    """Roots of a*t^2 + b*t + c inside (0, 1)."""
    if abs(a) < _EPS:
        if abs(b) < _EPS:
            return []
        roots = [-c / b]
    else:
        disc = b * b - 4.0 * a * c
        if disc < 0:
            return []
        sq = math.sqrt(disc)
        roots = [(-b + sq) / (2.0 * a), (-b - sq) / (2.0 * a)]
    return [t for t in roots if 0.0 < t < 1.0]


def _quadratic_axis_extrema(p0: float, p1: float, p2: float) -> List[float]:
    den = p0 - 2.0 * p1 + p2
    if abs(den) < _EPS:
        return []
    t = (p0 - p1) / den
    if 0.0 < t < 1.0:
        u = 1.0 - t
        return [u * u * p0 + 2.0 * u * t * p1 + t * t * p2]
    return []


def _cubic_axis_extrema(p0: float, p1: float, p2: float, p3: float) -> List[float]:
    # B'(t)/3 = a t^2 + b t + c
    a = -p0 + 3.0 * p1 - 3.0 * p2 + p3
    b = 2.0 * (p0 - 2.0 * p1 + p2)
    c = p1 - p0
    out = []
    for t in _quadratic_roots(a, b, c):
        u = 1.0 - t
        out.append(u * u * u * p0 + 3.0 * u * u * t * p1 + 3.0 * u * t * t * p2 + t * t * t * p3)
    return out


def _bounds_from_axes(xs: List[float], ys: List[float]) -> BoundingBox:
    return BoundingBox.from_xyxy(min(xs), min(ys), max(xs), max(ys))


def primitive_bounds(primitive: Primitive) -> Optional[BoundingBox]:
    """Bounds for one primitive; None for kinds without bounds support."""
    if isinstance(primitive, Line):
        return BoundingBox.from_points([primitive.p1, primitive.p2])

    if isinstance(primitive, QuadraticBezier):
        p0, p1, p2 = primitive.p1, primitive.control, primitive.p2
        xs = [p0[0], p2[0], *_quadratic_axis_extrema(p0[0], p1[0], p2[0])]
        ys = [p0[1], p2[1], *_quadratic_axis_extrema(p0[1], p1[1], p2[1])]
        return _bounds_from_axes(xs, ys)

    if isinstance(primitive, CubicBezier):
        p0, p1, p2, p3 = primitive.p1, primitive.control1, primitive.control2, primitive.p2
        xs = [p0[0], p3[0], *_cubic_axis_extrema(p0[0], p1[0], p2[0], p3[0])]
        ys = [p0[1], p3[1], *_cubic_axis_extrema(p0[1], p1[1], p2[1], p3[1])]
        return _bounds_from_axes(xs, ys)

    if isinstance(primitive, EllipseArc):
        return BoundingBox.from_xyxy(*arc_bounds_xyxy(primitive))

    return None


def bounds_of_primitives(primitives: Iterable[Primitive]) -> Optional[BoundingBox]:
    return combine_bounding_boxes([primitive_bounds(p) for p in primitives])
