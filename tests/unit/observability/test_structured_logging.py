"""Unit tests for the structlog helpers."""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest
import structlog
from structlog.testing import capture_logs

from feature_manifest.config import ResolverConfig
from feature_manifest.observability.logging import configure_logging, get_logger


@pytest.fixture
def restore_logging() -> Iterator[None]:
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    structlog.reset_defaults()
    root.handlers[:] = handlers
    root.setLevel(level)


class TestGetLogger:
    def test_binds_initial_values(self) -> None:
        with capture_logs() as logs:
            logger = get_logger("tests.logging", component="resolver")
            logger.info("hello", features=3)
        assert logs == [
            {"event": "hello", "features": 3, "component": "resolver", "log_level": "info"}
        ]


class TestConfigureLogging:
    def test_installs_processor_formatter(self, restore_logging: None) -> None:
        configure_logging("DEBUG")
        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, structlog.stdlib.ProcessorFormatter)

    def test_console_renderer(self, restore_logging: None) -> None:
        configure_logging(logging.WARNING, json=False)
        assert logging.getLogger().level == logging.WARNING

    def test_apply_logging_from_config(self, restore_logging: None) -> None:
        ResolverConfig(log_level="error", log_json=True).apply_logging()
        assert logging.getLogger().level == logging.ERROR
