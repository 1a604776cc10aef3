from __future__ import annotations

import logging

import pytest

from trazo.geom.bbox import BoundingBox
from trazo.svg.frame import ViewFrame, bounds_of_path, content_bounding_box, fit_frame_to_content
from trazo.utils.errors import NoContent


def test_bounds_of_path() -> None:
    assert bounds_of_path("M 0 0 L 10 0 L 10 10 Z") == BoundingBox(0, 0, 10, 10)


def test_bounds_of_path_without_geometry() -> None:
    assert bounds_of_path("M 1 1") is None
    with pytest.raises(NoContent):
        bounds_of_path("M 1 1", require=True)


def test_content_bounding_box_combines_elements() -> None:
    box = content_bounding_box(["M 0 0 L 10 5", "M 1 1", "M -5 2 L 0 0"])
    assert box == BoundingBox(-5, 0, 15, 5)
    assert content_bounding_box([]) is None


def test_fit_frame_to_content() -> None:
    frame = ViewFrame(0, 0, 100, 100)
    fitted = fit_frame_to_content(frame, ["M 0 0 L 10 5", "M -5 2 L 0 0"])
    assert fitted == ViewFrame(-5, 0, 15, 5)
    assert fitted.as_viewbox_attr() == "-5 0 15 5"


def test_fit_frame_without_content_warns_and_keeps_frame(caplog) -> None:
    frame = ViewFrame(0, 0, 100, 50)
    with caplog.at_level(logging.WARNING, logger="trazo.svg.frame"):
        fitted = fit_frame_to_content(frame, ["M 3 3", "M 4 4 Z"])
    assert fitted is frame
    assert any("No hay contenido" in r.getMessage() for r in caplog.records)
