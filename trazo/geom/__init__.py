"""Geometry helpers.

Pure geometry: points, spline fitting, primitives and their bounds.

`svgelements` is only used by the reference-bbox adapter
(`svgelements_bbox`), to cross-check the analytic bounds.
"""

from __future__ import annotations
