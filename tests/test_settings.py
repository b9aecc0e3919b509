import logging

import pytest
from loguru import logger

from puppybowl.config.settings import AppSettings, load_settings
from puppybowl.logging.setup import setup_logging


def test_api_url_includes_cohort(monkeypatch):
    monkeypatch.setenv("API_BASE_URL", "https://example.test/api/")
    monkeypatch.setenv("COHORT_NAME", "2402-FTB-MT-WEB-PT")

    settings = AppSettings()

    assert settings.api_url == "https://example.test/api/2402-FTB-MT-WEB-PT"


def test_defaults_have_no_timeout(monkeypatch):
    monkeypatch.delenv("REQUEST_TIMEOUT", raising=False)

    assert AppSettings().request_timeout is None


def test_invalid_log_level_falls_back_to_info(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "chatty")

    assert load_settings().log_level == "INFO"


def test_log_level_is_uppercased(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "debug")

    assert load_settings().log_level == "DEBUG"


def test_setup_logging_intercepts_standard_logging(restore_logging):
    messages = []
    setup_logging()
    sink_id = logger.add(messages.append, format="{message}")
    try:
        logging.getLogger("httpx").warning("intercepted message")
    finally:
        logger.remove(sink_id)

    assert any("intercepted message" in m for m in messages)


def test_invalid_configuration_exits(monkeypatch):
    monkeypatch.setenv("REQUEST_TIMEOUT", "-1")

    with pytest.raises(SystemExit):
        load_settings()
