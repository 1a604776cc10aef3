from __future__ import annotations

import pytest

from trazo.geom.arc_bounds import arc_bounds_xyxy, center_parameterization
from trazo.geom.bbox import (
    BoundingBox,
    bounds_of_primitives,
    combine_bounding_boxes,
    primitive_bounds,
)
from trazo.geom.primitives import CubicBezier, EllipseArc, Line, QuadraticBezier
from trazo.svg.path_reader import interpret_path


def test_combine_skips_absent_boxes() -> None:
    box = combine_bounding_boxes(
        [{"x": 0, "y": 0, "width": 10, "height": 5}, None, {"x": 5, "y": -5, "width": 10, "height": 10}]
    )
    # y va de -5 a 5: height = max(y + height) - min(y) = 10.
    assert box == BoundingBox(0, -5, 15, 10)


def test_combine_variadic_and_list_forms_agree() -> None:
    a = BoundingBox(0, 0, 1, 1)
    b = BoundingBox(2, 3, 1, 1)
    assert combine_bounding_boxes(a, b) == combine_bounding_boxes([a, b]) == BoundingBox(0, 0, 3, 4)
    assert combine_bounding_boxes(a) == a
    assert combine_bounding_boxes(iter([a, None])) == a


@pytest.mark.parametrize("args", [(), (None,), (None, None), ([],), ([None],)])
def test_combine_without_content_returns_none(args) -> None:
    assert combine_bounding_boxes(*args) is None


def test_combine_rejects_garbage() -> None:
    with pytest.raises(TypeError):
        combine_bounding_boxes(["not a box"])


def test_bounding_box_helpers() -> None:
    box = BoundingBox.from_xyxy(1, 2, 4, 8)
    assert (box.width, box.height) == (3, 6)
    assert box.as_xyxy() == (1, 2, 4, 8)
    assert box.union(None) is box
    assert box.union(BoundingBox(0, 0, 1, 1)) == BoundingBox(0, 0, 4, 8)
    assert BoundingBox.from_points([(3, 1), (-1, 5)]) == BoundingBox(-1, 1, 4, 4)


def test_line_bounds() -> None:
    assert primitive_bounds(Line((5, 1), (2, 7))) == BoundingBox(2, 1, 3, 6)


def test_quadratic_bounds_include_interior_extremum() -> None:
    box = primitive_bounds(QuadraticBezier((0, 0), (5, 10), (10, 0)))
    assert box.as_xyxy() == pytest.approx((0, 0, 10, 5))


def test_cubic_bounds_include_interior_extremum() -> None:
    box = primitive_bounds(CubicBezier((0, 0), (0, 10), (10, 10), (10, 0)))
    assert box.as_xyxy() == pytest.approx((0, 0, 10, 7.5))


def test_cubic_bounds_s_curve() -> None:
    # Extremos en x fuera del rango de los endpoints.
    box = primitive_bounds(CubicBezier((0, 0), (10, 0), (-10, 10), (0, 10)))
    assert box.x < 0 < box.x1
    assert box.y == pytest.approx(0)
    assert box.y1 == pytest.approx(10)
    assert box.x1 == pytest.approx(-box.x)


def test_full_circle_bounds() -> None:
    box = bounds_of_primitives(interpret_path("M 0 5 a 5 5 0 1 0 10 0 a 5 5 0 1 0 -10 0"))
    assert box.as_xyxy() == pytest.approx((0, 0, 10, 10), abs=1e-9)


def test_rotated_ellipse_bounds() -> None:
    box = bounds_of_primitives(interpret_path("M 0 -4 A 4 2 90 1 0 0 4 A 4 2 90 1 0 0 -4"))
    assert box.as_xyxy() == pytest.approx((-2, -4, 2, 4), abs=1e-9)


def test_quarter_arc_short_and_long_way() -> None:
    short = EllipseArc((10, 0), 10, 10, 0, False, True, (0, 10))
    assert arc_bounds_xyxy(short) == pytest.approx((0, 0, 10, 10), abs=1e-9)

    long = EllipseArc((10, 0), 10, 10, 0, True, False, (0, 10))
    assert arc_bounds_xyxy(long) == pytest.approx((-10, -10, 10, 10), abs=1e-9)


def test_small_radii_are_scaled_up() -> None:
    arc = EllipseArc((0, 0), 1, 1, 0, False, True, (10, 0))
    cp = center_parameterization(arc)
    assert cp is not None
    assert (cp.rx, cp.ry) == pytest.approx((5, 5))
    assert cp.center == pytest.approx((5, 0))
    # Media vuelta: sweep=1 pasa por arriba (y negativa), sweep=0 por abajo.
    assert arc_bounds_xyxy(arc) == pytest.approx((0, -5, 10, 0), abs=1e-9)

    other_side = EllipseArc((0, 0), 1, 1, 0, False, False, (10, 0))
    assert arc_bounds_xyxy(other_side) == pytest.approx((0, 0, 10, 5), abs=1e-9)


def test_negative_radii_use_absolute_value() -> None:
    a = EllipseArc((10, 0), -10, -10, 0, False, True, (0, 10))
    b = EllipseArc((10, 0), 10, 10, 0, False, True, (0, 10))
    assert arc_bounds_xyxy(a) == pytest.approx(arc_bounds_xyxy(b))


def test_zero_radius_arc_is_a_line() -> None:
    arc = EllipseArc((0, 0), 0, 5, 0, False, True, (10, 10))
    assert center_parameterization(arc) is None
    assert primitive_bounds(arc) == BoundingBox(0, 0, 10, 10)


def test_coincident_endpoints_arc_is_a_point() -> None:
    arc = EllipseArc((1, 1), 5, 5, 0, False, True, (1, 1))
    assert primitive_bounds(arc) == BoundingBox(1, 1, 0, 0)


def test_unknown_primitive_has_no_bounds() -> None:
    assert primitive_bounds(object()) is None  # type: ignore[arg-type]
    assert bounds_of_primitives([]) is None
