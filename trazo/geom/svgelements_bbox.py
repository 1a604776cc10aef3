"""svgelements adapter for a reference path bbox (debug tooling).

Gives an *independent* bbox for a path string, computed by `svgelements`,
to cross-check the engine's own bounds (`trazo.geom.bbox`).

This module is intentionally optional: if `svgelements` is not installed,
callers must keep working (returning `available: False`).
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Tuple


def _safe_float(v: Any) -> Optional[float]:
    if v is None:
        return None
    try:
        return float(v)
    except Exception:
        return None


def _as_xyxy(b: Any) -> Optional[Tuple[float, float, float, float]]:
    if b is None:
        return None
    if isinstance(b, (list, tuple)) and len(b) >= 4:
        vals = [_safe_float(v) for v in b[:4]]
        if None in vals:
            return None
        return (vals[0], vals[1], vals[2], vals[3])  # type: ignore[return-value]
    return None


def compute_path_bbox(d: str) -> Dict[str, Any]:
    """Compute a path bbox using `svgelements` if available.

    Returns a dict like:
    - available: bool
    - bbox: (x0, y0, x1, y1) or None (None also for paths that draw nothing)
    - error: str (optional)
    """

    try:
        from svgelements import Path as SvgPath  # type: ignore
    except Exception as e:
        return {"available": False, "bbox": None, "error": f"{type(e).__name__}: {e}"}

    try:
        sp = SvgPath(d)
        return {"available": True, "bbox": _as_xyxy(sp.bbox())}
    except Exception as e:
        return {"available": True, "bbox": None, "error": f"{type(e).__name__}: {e}"}
