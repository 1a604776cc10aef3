"""BBox comparison helpers (engine vs. reference).

Purpose
- Compare the engine's analytic bbox (`trazo.geom.bbox`) against an
  independent reference bbox (typically `svgelements`).
- Produce a JSON-serializable report with tolerances and a simple status.

Notes
- Both sides are pure geometry (no stroke), so tolerances are tight by
  default. Differences usually point at arc/bezier extrema handling.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from trazo.geom.bbox import BoundingBox
from trazo.geom.svgelements_bbox import compute_path_bbox
from trazo.svg.frame import bounds_of_path


@dataclass(frozen=True)
class BBoxXYXY:
    x0: float
    y0: float
    x1: float
    y1: float

    @property
    def w(self) -> float:
        return float(self.x1 - self.x0)

    @property
    def h(self) -> float:
        return float(self.y1 - self.y0)

    def as_list(self) -> List[float]:
        return [float(self.x0), float(self.y0), float(self.x1), float(self.y1)]


def bbox_from_box(box: Optional[BoundingBox]) -> Optional[BBoxXYXY]:
    if box is None:
        return None
    return BBoxXYXY(*box.as_xyxy())


def bbox_from_xyxy_tuple(xyxy: Any) -> Optional[BBoxXYXY]:
    """Coerce (x0,y0,x1,y1) to BBoxXYXY."""

    if xyxy is None:
        return None
    if isinstance(xyxy, (list, tuple)) and len(xyxy) == 4:
        try:
            x0, y0, x1, y1 = xyxy
            return BBoxXYXY(float(x0), float(y0), float(x1), float(y1))
        except (TypeError, ValueError):
            return None
    return None


def compare_bboxes(
    engine_bbox: Optional[BoundingBox],
    reference_bbox_xyxy: Any,
    *,
    tol_abs: float = 1e-6,
    warn_abs: float = 1e-3,
) -> Dict[str, Any]:
    """Compare bboxes and return a JSON-serializable report.

    Status:
    - PASS: max_abs_err <= tol_abs
    - WARN: tol_abs < max_abs_err <= warn_abs
    - FAIL: max_abs_err > warn_abs
    - NO_REF: missing reference bbox
    - NO_CONTENT: engine found no geometry
    """

    notes: List[str] = []

    eng = bbox_from_box(engine_bbox)
    ref = bbox_from_xyxy_tuple(reference_bbox_xyxy)

    base: Dict[str, Any] = {
        "tol_abs": float(tol_abs),
        "warn_abs": float(warn_abs),
        "engine_bbox_xyxy": eng.as_list() if eng else None,
        "reference_bbox_xyxy": ref.as_list() if ref else None,
        "max_abs_err": None,
        "diff": None,
    }

    if ref is None:
        return {**base, "status": "NO_REF", "notes": ["reference bbox not available"]}

    if eng is None:
        return {**base, "status": "NO_CONTENT", "notes": ["engine found no geometry"]}

    dx0 = float(eng.x0 - ref.x0)
    dy0 = float(eng.y0 - ref.y0)
    dx1 = float(eng.x1 - ref.x1)
    dy1 = float(eng.y1 - ref.y1)

    max_abs = max(abs(dx0), abs(dy0), abs(dx1), abs(dy1))

    if eng.w <= 1e-9 or eng.h <= 1e-9:
        notes.append("engine bbox degenerate")

    if max_abs <= float(tol_abs):
        status = "PASS"
    elif max_abs <= float(warn_abs):
        status = "WARN"
    else:
        status = "FAIL"

    return {
        **base,
        "status": status,
        "max_abs_err": float(max_abs),
        "diff": {
            "dx0": dx0,
            "dy0": dy0,
            "dx1": dx1,
            "dy1": dy1,
            "dw": float(eng.w - ref.w),
            "dh": float(eng.h - ref.h),
        },
        "notes": notes,
    }


def check_path_bounds(d: str, *, tol_abs: float = 1e-6, warn_abs: float = 1e-3) -> Dict[str, Any]:
    """Engine bbox of `d` vs. the svgelements bbox of the same string."""
    ref = compute_path_bbox(d)
    report = compare_bboxes(bounds_of_path(d), ref.get("bbox"), tol_abs=tol_abs, warn_abs=warn_abs)
    report["reference_available"] = bool(ref.get("available"))
    if ref.get("error"):
        report["notes"] = [*report.get("notes", []), str(ref["error"])]
    return report
