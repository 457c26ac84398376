"""Tests for runtime settings resolution."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from Quant_Trade.config import (
    DEFAULT_API_BASE_URL,
    DEFAULT_REQUEST_TIMEOUT,
    ENV_API_URL,
    ENV_REQUEST_TIMEOUT,
    Settings,
    load_settings,
)


@pytest.fixture(autouse=True)
def _clear_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Start each test without Quant Trade environment variables."""
    monkeypatch.delenv(ENV_API_URL, raising=False)
    monkeypatch.delenv(ENV_REQUEST_TIMEOUT, raising=False)


class TestLoadSettings:
    """Tests for load_settings() precedence."""

    def test_defaults(self) -> None:
        settings = load_settings()
        assert settings.api_base_url == DEFAULT_API_BASE_URL
        assert settings.request_timeout == DEFAULT_REQUEST_TIMEOUT
        assert settings.default_page_size == 25

    def test_env_overrides_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(ENV_API_URL, "https://stocks.example.com/api/")
        monkeypatch.setenv(ENV_REQUEST_TIMEOUT, "2.5")
        settings = load_settings()
        assert settings.api_base_url == "https://stocks.example.com/api"
        assert settings.request_timeout == 2.5

    def test_explicit_args_override_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(ENV_API_URL, "https://env.example.com/api")
        monkeypatch.setenv(ENV_REQUEST_TIMEOUT, "2.5")
        settings = load_settings(api_base_url="http://cli.example.com/api", request_timeout=1.0)
        assert settings.api_base_url == "http://cli.example.com/api"
        assert settings.request_timeout == 1.0

    def test_invalid_timeout_env_ignored(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(ENV_REQUEST_TIMEOUT, "soon")
        assert load_settings().request_timeout == DEFAULT_REQUEST_TIMEOUT


class TestSettings:
    """Tests for the Settings model itself."""

    def test_frozen(self) -> None:
        settings = Settings()
        with pytest.raises(ValidationError):
            settings.request_timeout = 1.0  # type: ignore[misc]

    def test_non_positive_timeout_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Settings(request_timeout=0)
