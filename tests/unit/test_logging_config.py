"""Tests for the centralized logging configuration module."""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest

from Quant_Trade.logging_config import LOG_FORMAT, configure_logging


@pytest.fixture(autouse=True)
def _reset_logging() -> Iterator[None]:
    """Reset root and module logger state between tests."""
    root = logging.getLogger()
    original_level = root.level
    original_handlers = root.handlers[:]
    yield
    root.setLevel(original_level)
    root.handlers = original_handlers
    for name in ("Quant_Trade.query", "Quant_Trade.services", "Quant_Trade.web"):
        logging.getLogger(name).setLevel(logging.NOTSET)


class TestConfigureLogging:
    """Tests for configure_logging() function."""

    def test_default_level_is_info(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Default call sets root logger to INFO."""
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        configure_logging()
        assert logging.getLogger().level == logging.INFO

    def test_verbose_sets_debug(self) -> None:
        configure_logging(verbose=True)
        assert logging.getLogger().level == logging.DEBUG

    def test_quiet_sets_warning(self) -> None:
        configure_logging(quiet=True)
        assert logging.getLogger().level == logging.WARNING

    def test_level_param_override(self) -> None:
        configure_logging(level="DEBUG")
        assert logging.getLogger().level == logging.DEBUG

    def test_env_var_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """LOG_LEVEL env var sets root logger level."""
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        configure_logging()
        assert logging.getLogger().level == logging.DEBUG

    def test_verbose_overrides_env_var(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "WARNING")
        configure_logging(verbose=True)
        assert logging.getLogger().level == logging.DEBUG

    def test_module_level_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """LOG_LEVEL_QUERY env var sets the query package logger level."""
        monkeypatch.setenv("LOG_LEVEL_QUERY", "DEBUG")
        configure_logging()
        assert logging.getLogger("Quant_Trade.query").level == logging.DEBUG

    def test_unknown_module_level_ignored(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOG_LEVEL_SERVICES", "CHATTY")
        configure_logging()
        assert logging.getLogger("Quant_Trade.services").level == logging.NOTSET

    def test_noisy_libraries_demoted(self) -> None:
        configure_logging(verbose=True)
        assert logging.getLogger("httpx").level == logging.WARNING
        assert logging.getLogger("uvicorn.access").level == logging.WARNING

    def test_force_overrides_existing(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """configure_logging() overrides a prior basicConfig(CRITICAL)."""
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        logging.basicConfig(level=logging.CRITICAL)
        configure_logging()
        assert logging.getLogger().level == logging.INFO

    def test_format_includes_logger_name(self) -> None:
        assert "%(name)s" in LOG_FORMAT
