"""Tests for bezierchart.logging_config."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from bezierchart.logging_config import APP_LOGGER_NAME, LOGGER_NAME, setup_logging


@pytest.fixture(autouse=True)
def restore_loggers():
    package = logging.getLogger(LOGGER_NAME)
    app = logging.getLogger(APP_LOGGER_NAME)
    saved = (package.level, app.level, list(package.handlers))
    yield
    for handler in package.handlers:
        if handler not in saved[2]:
            handler.close()
    package.setLevel(saved[0])
    app.setLevel(saved[1])
    package.handlers[:] = saved[2]


class TestSetupLogging:
    def test_geometry_debug_hidden_by_default(self) -> None:
        setup_logging(level=logging.INFO)
        assert not logging.getLogger("bezierchart.model.geometry_builder").isEnabledFor(logging.DEBUG)

    def test_trace_geometry_enables_builder_debug_only(self) -> None:
        logger = setup_logging(level=logging.INFO, trace_geometry=True)
        assert logging.getLogger("bezierchart.model.geometry_builder").isEnabledFor(logging.DEBUG)
        assert not logging.getLogger("bezierchart.app.state").isEnabledFor(logging.DEBUG)
        assert logger.handlers[0].level == logging.DEBUG

    def test_tracing_is_undone_by_next_setup(self) -> None:
        setup_logging(level=logging.INFO, trace_geometry=True)
        setup_logging(level=logging.INFO)
        assert logging.getLogger(APP_LOGGER_NAME).level == logging.NOTSET
        assert not logging.getLogger("bezierchart.model.geometry_builder").isEnabledFor(logging.DEBUG)

    def test_repeated_setup_does_not_duplicate_handlers(self) -> None:
        setup_logging()
        logger = setup_logging()
        assert len(logger.handlers) == 1

    def test_log_file_receives_geometry_trace(self, tmp_path: Path) -> None:
        log_file = tmp_path / "chart.log"
        logger = setup_logging(log_file=str(log_file), trace_geometry=True)
        logging.getLogger("bezierchart.model.geometry_builder").debug("Built chart geometry: test")
        for handler in logger.handlers:
            handler.flush()
        text = log_file.read_text(encoding="utf-8")
        assert "Logging initialized." in text
        assert "Built chart geometry: test" in text
