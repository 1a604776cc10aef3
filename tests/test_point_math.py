from __future__ import annotations

import math

import pytest

from trazo.geom import point_math as pm
from trazo.utils.errors import InvalidInput


def test_to_point_accepts_two_numbers() -> None:
    assert pm.to_point([1, 2]) == (1.0, 2.0)
    assert pm.to_point((0.5, -3)) == (0.5, -3.0)


@pytest.mark.parametrize(
    "bad",
    [[], [1], [1, 2, 3], "12", ["a", 1], [True, 1], None, 5],
)
def test_to_point_rejects_malformed(bad) -> None:
    with pytest.raises(InvalidInput):
        pm.to_point(bad)


def test_vector_arithmetic() -> None:
    assert pm.add((1, 2), (3, 4)) == (4, 6)
    assert pm.difference((1, 2), (3, 4)) == (-2, -2)
    assert pm.scaled_by((1, -2), 3) == (3, -6)
    assert pm.term_by_term((2, 3), (4, 5)) == (8, 15)
    assert pm.lerp((0, 0), (10, 20), 0.25) == (2.5, 5.0)


def test_direction_vector_is_unit() -> None:
    x, y = pm.direction_vector(math.pi / 3)
    assert math.isclose(math.hypot(x, y), 1.0)
    assert math.isclose(x, 0.5)


def test_bow_at_midpoint_offsets_to_the_left_of_travel() -> None:
    p1, control, p2 = pm.bow_at_midpoint((0, 0), (10, 0), 2)
    assert p1 == (0, 0) and p2 == (10, 0)
    assert control[0] == pytest.approx(5.0)
    assert control[1] == pytest.approx(2.0)
