"""Test configuration loading."""

import pytest

from sitesearch.core.config import Environment, _get_environment, settings


def test_test_environment():
    assert settings.ENVIRONMENT == Environment.TEST


def test_defaults():
    assert settings.MIN_QUERY_LEN == 2
    assert settings.SNIPPET_CONTEXT == 60
    assert settings.TITLE_EXCERPT_LEN == 80
    assert settings.DEBOUNCE_DELAY == 0.3


def test_environment_defaults_to_production(monkeypatch):
    monkeypatch.delenv("ENVIRONMENT", raising=False)
    assert _get_environment() == Environment.PRODUCTION


def test_invalid_environment(monkeypatch):
    monkeypatch.setenv("ENVIRONMENT", "staging")
    with pytest.raises(RuntimeError, match="Invalid ENVIRONMENT"):
        _get_environment()
