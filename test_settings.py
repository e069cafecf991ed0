"""Tests for environment-driven settings."""

import pytest
from pydantic import ValidationError

from forum_query.core.models import ForumSettings


def test_defaults(monkeypatch):
    for name in ("MONGO_URI", "MONGO_DATABASE", "LISTING_DEFAULT_LIMIT", "LISTING_MAX_LIMIT", "CORS_ORIGINS"):
        monkeypatch.delenv(name, raising=False)
    settings = ForumSettings.from_env()
    assert settings.database_name == "Forum"
    assert settings.default_limit == 20
    assert settings.max_limit == 100
    assert settings.cors_origins == ["http://localhost:5173"]


def test_values_from_environment(monkeypatch):
    monkeypatch.setenv("MONGO_DATABASE", "ForumTest")
    monkeypatch.setenv("LISTING_DEFAULT_LIMIT", "10")
    monkeypatch.setenv("CORS_ORIGINS", "http://a.test, http://b.test")
    settings = ForumSettings.from_env()
    assert settings.database_name == "ForumTest"
    assert settings.default_limit == 10
    assert settings.cors_origins == ["http://a.test", "http://b.test"]


def test_invalid_limit_is_rejected(monkeypatch):
    monkeypatch.setenv("LISTING_DEFAULT_LIMIT", "0")
    with pytest.raises(ValidationError):
        ForumSettings.from_env()


def test_default_limit_above_max_limit_is_rejected(monkeypatch):
    monkeypatch.setenv("LISTING_DEFAULT_LIMIT", "200")
    monkeypatch.setenv("LISTING_MAX_LIMIT", "100")
    with pytest.raises(ValidationError):
        ForumSettings.from_env()


def test_default_limit_equal_to_max_limit_is_accepted():
    settings = ForumSettings(default_limit=50, max_limit=50)
    assert settings.default_limit == settings.max_limit == 50
