"""Tests for environment-driven API settings."""

from __future__ import annotations

import pytest

from reforma.api.deps import DEFAULT_CORS_ORIGINS, Settings, load_settings


class TestLoadSettings:
    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("REFORMA_CORS_ORIGINS", raising=False)
        monkeypatch.delenv("REFORMA_LOG_LEVEL", raising=False)
        assert load_settings() == Settings()
        assert Settings().cors_origins == DEFAULT_CORS_ORIGINS

    def test_cors_origins_split_and_trimmed(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("REFORMA_CORS_ORIGINS", "https://a.example, https://b.example ,")
        assert load_settings().cors_origins == ("https://a.example", "https://b.example")

    def test_blank_cors_origins_fall_back(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("REFORMA_CORS_ORIGINS", " , ")
        assert load_settings().cors_origins == DEFAULT_CORS_ORIGINS

    def test_log_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("REFORMA_LOG_LEVEL", "debug")
        assert load_settings().log_level == "DEBUG"

    def test_unknown_log_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("REFORMA_LOG_LEVEL", "chatty")
        assert load_settings().log_level == "INFO"
