from __future__ import annotations

import logging

import pytest

from trazo.svg.frame import ViewFrame, fit_frame_to_content
from trazo.utils.log import LOG_FILENAME, setup_logging


@pytest.fixture
def trazo_logger():
    logger = logging.getLogger("trazo")
    saved = (list(logger.handlers), logger.level, logger.propagate)
    yield logger
    for h in logger.handlers:
        if h not in saved[0]:
            h.close()
    logger.handlers = saved[0]
    logger.setLevel(saved[1])
    logger.propagate = saved[2]


def test_setup_logging_writes_engine_messages_to_file(tmp_path, trazo_logger) -> None:
    root_before = list(logging.getLogger().handlers)
    logger = setup_logging(tmp_path / "logs", level=logging.DEBUG)
    setup_logging(tmp_path / "logs", level=logging.DEBUG)

    assert logger is trazo_logger
    assert len(trazo_logger.handlers) == 2
    assert logging.getLogger().handlers == root_before

    fit_frame_to_content(ViewFrame(0, 0, 1, 1), ["M 1 1"])
    for h in trazo_logger.handlers:
        h.flush()
    text = (tmp_path / "logs" / LOG_FILENAME).read_text(encoding="utf-8")
    assert "trazo.svg.frame" in text
    assert "No hay contenido" in text


def test_setup_logging_console_only(trazo_logger) -> None:
    setup_logging(level=logging.WARNING)
    assert len(trazo_logger.handlers) == 1
    assert trazo_logger.level == logging.WARNING
    assert trazo_logger.propagate is False


def test_unwritable_log_dir_falls_back_to_console(tmp_path, trazo_logger) -> None:
    blocker = tmp_path / "no_es_carpeta"
    blocker.write_text("x", encoding="utf-8")

    setup_logging(blocker, level=logging.INFO, propagate=True)
    assert [type(h) for h in trazo_logger.handlers] == [logging.StreamHandler]
