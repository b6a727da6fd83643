"""Tests for logging setup."""

import pytest
import structlog

from subvtt.api.logging import setup_logging


@pytest.fixture(autouse=True)
def reset_structlog(clear_settings_cache):
    yield
    structlog.reset_defaults()


class TestSetupLogging:
    def test_console_renderer_by_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("SUBVTT_LOG_JSON", raising=False)

        setup_logging()

        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)

    def test_json_renderer(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SUBVTT_LOG_JSON", "true")

        setup_logging()

        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)

    def test_unknown_level_falls_back_to_info(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("SUBVTT_LOG_LEVEL", "chatty")

        setup_logging()

        with structlog.testing.capture_logs() as logs:
            logger = structlog.get_logger()
            logger.debug("hidden")
            logger.info("shown")

        assert [entry["event"] for entry in logs] == ["shown"]
