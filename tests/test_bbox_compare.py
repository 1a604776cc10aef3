from __future__ import annotations

import pytest

from trazo.geom.bbox import BoundingBox
from trazo.geom.bbox_compare import bbox_from_xyxy_tuple, check_path_bounds, compare_bboxes
from trazo.geom.svgelements_bbox import compute_path_bbox


def test_compare_pass_warn_fail() -> None:
    eng = BoundingBox(0, 0, 10, 10)
    assert compare_bboxes(eng, (0, 0, 10, 10))["status"] == "PASS"
    assert compare_bboxes(eng, (0, 0, 10, 10.0005))["status"] == "WARN"
    rep = compare_bboxes(eng, (0, 0, 12, 10))
    assert rep["status"] == "FAIL"
    assert rep["max_abs_err"] == pytest.approx(2)
    assert rep["diff"]["dx1"] == pytest.approx(-2)


def test_compare_missing_sides() -> None:
    assert compare_bboxes(BoundingBox(0, 0, 1, 1), None)["status"] == "NO_REF"
    assert compare_bboxes(None, (0, 0, 1, 1))["status"] == "NO_CONTENT"


def test_compare_notes_degenerate_engine_bbox() -> None:
    rep = compare_bboxes(BoundingBox(0, 0, 10, 0), (0, 0, 10, 0))
    assert rep["status"] == "PASS"
    assert "engine bbox degenerate" in rep["notes"]


@pytest.mark.parametrize("raw", [None, (1, 2, 3), ("a", 0, 0, 0), "0 0 1 1"])
def test_bbox_from_xyxy_tuple_rejects_garbage(raw) -> None:
    assert bbox_from_xyxy_tuple(raw) is None


@pytest.mark.parametrize(
    "d",
    [
        "M 0 0 L 10 0 L 10 10 Z",
        "M 0 0 C 0 10 10 10 10 0",
        "M 0 0 Q 5 10 10 0",
        "M 0 5 a 5 5 0 1 0 10 0 a 5 5 0 1 0 -10 0",
        "M 10 0 A 10 10 0 1 0 0 10",
    ],
)
def test_engine_bbox_matches_svgelements(d: str) -> None:
    pytest.importorskip("svgelements")
    ref = compute_path_bbox(d)
    assert ref["available"] is True
    assert ref["bbox"] is not None

    rep = check_path_bounds(d, tol_abs=1e-6, warn_abs=1e-3)
    assert rep["reference_available"] is True
    assert rep["status"] in ("PASS", "WARN"), rep
