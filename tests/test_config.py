"""Tests for settings loading and logging setup."""

from __future__ import annotations

import logging

from industry_page.config import Settings
from industry_page.logging import configure_logging


class TestSettings:
    def test_defaults(self):
        settings = Settings(_env_file=None)
        assert settings.sticky_threshold == 100
        assert settings.feature_image_fallback == "/placeholder.svg?height=200&width=300"
        assert settings.log_format == "console"

    def test_env_prefix(self, monkeypatch):
        monkeypatch.setenv("INDUSTRY_PAGE_STICKY_THRESHOLD", "250")
        monkeypatch.setenv("INDUSTRY_PAGE_LOG_LEVEL", "warning")
        settings = Settings(_env_file=None)
        assert settings.sticky_threshold == 250
        assert settings.log_level == "warning"

    def test_env_file(self, tmp_path):
        env = tmp_path / ".env"
        env.write_text("INDUSTRY_PAGE_STICKY_THRESHOLD=42\n", encoding="utf-8")
        assert Settings(_env_file=env).sticky_threshold == 42


class TestConfigureLogging:
    def test_sets_root_level_and_single_handler(self):
        configure_logging(log_level="DEBUG", log_format="json")
        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1

    def test_unknown_level_falls_back_to_info(self):
        configure_logging(log_level="chatty")
        assert logging.getLogger().level == logging.INFO
