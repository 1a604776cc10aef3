# File: trazo/svg/frame.py
# Project: TrazoSvg (trazo)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-18
# Purpose: Bbox de strings d y auto-ajuste del frame contenedor (viewBox) al contenido.
# Notes: Sin contenido, el frame queda igual y se loggea un warning.
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable

from trazo.geom.bbox import BoundingBox, bounds_of_primitives, combine_bounding_boxes
from trazo.svg.path_reader import interpret_path
from trazo.svg.path_writer import format_number
from trazo.utils.errors import NoContent

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class ViewFrame:
    """Frame contenedor (viewBox) en unidades de usuario."""

    x: float
    y: float
    width: float
    height: float

    @staticmethod
    def from_bbox(box: BoundingBox) -> "ViewFrame":
        return ViewFrame(float(box.x), float(box.y), float(box.width), float(box.height))

    def as_viewbox_attr(self) -> str:
        return " ".join(format_number(v) for v in (self.x, self.y, self.width, self.height))


def bounds_of_path(d: str, *, require: bool = False) -> BoundingBox | None:
    """Bbox de un string d. None si no dibuja nada (p.ej. solo move-to).

    Con `require=True`, la falta de contenido levanta NoContent.
    """
    box = bounds_of_primitives(interpret_path(d))
    if box is None and require:
        raise NoContent(f"El path no tiene geometría: {d!r}")
    return box


def content_bounding_box(paths: Iterable[str]) -> BoundingBox | None:
    """Bbox combinado de varios strings d (uno por elemento path)."""
    return combine_bounding_boxes([bounds_of_path(d) for d in paths])


def fit_frame_to_content(frame: ViewFrame, paths: Iterable[str]) -> ViewFrame:
    """Devuelve un frame ajustado al contenido de `paths`.

    Si no hay contenido se devuelve `frame` sin cambios y se avisa por log.
    """
    box = content_bounding_box(paths)
    if box is None:
        log.warning("No hay contenido para ajustar el frame; se mantiene %s", frame)
        return frame
    fitted = ViewFrame.from_bbox(box)
    log.debug("frame ajustado al contenido: %s -> %s", frame, fitted)
    return fitted
