"""Configure pytest fixtures and environment for helpkit tests."""

import pytest

from helpkit.core import logging as helpkit_logging
from helpkit.core.config import reset_settings


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch, tmp_path):
    """Isolate each test from the developer's environment and .env file."""
    for name in (
        "HELPKIT_DEBUG",
        "HELPKIT_JSON_LOGS",
        "HELPKIT_DEFAULT_FALLBACK_LOCALES",
        "HELPKIT_ROUNDING_MODE",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(helpkit_logging, "_correlation_id", None)

    reset_settings()
    yield
    reset_settings()
    helpkit_logging.reset_logging()


@pytest.fixture
def greetings():
    """Localized greetings keyed by locale tag."""
    return {
        "en": "Hello",
        "en-US": "Howdy",
        "fr": "Bonjour",
        "es": "Hola",
    }


@pytest.fixture
def people():
    """People with repeated ages, in a fixed order."""
    return [
        {"age": 18, "name": "John"},
        {"age": 18, "name": "Joe"},
        {"age": 16, "name": "Jack"},
    ]
