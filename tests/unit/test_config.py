"""Tests for application settings and the command-line entrypoint."""

import pytest
from pydantic import ValidationError

from hexpath import main as entrypoint
from hexpath.config import Settings, get_settings


def test_defaults(monkeypatch):
    for name in ("HEXPATH_HOST", "HEXPATH_PORT", "HEXPATH_LOG_LEVEL", "HEXPATH_CORS_ORIGINS"):
        monkeypatch.delenv(name, raising=False)
    settings = Settings(_env_file=None)
    assert settings.host == "127.0.0.1"
    assert settings.port == 8000
    assert settings.log_level == "INFO"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("HEXPATH_PORT", "9001")
    monkeypatch.setenv("HEXPATH_LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("HEXPATH_CORS_ORIGINS", '["http://example.com"]')
    settings = Settings(_env_file=None)
    assert settings.port == 9001
    assert settings.log_level == "DEBUG"
    assert settings.cors_origins == ["http://example.com"]


def test_port_must_be_valid():
    with pytest.raises(ValidationError):
        Settings(port=0)


def test_get_settings_is_cached():
    assert get_settings() is get_settings()


def test_main_runs_uvicorn(monkeypatch):
    calls = []

    def fake_run(target, **kwargs):
        calls.append((target, kwargs))

    monkeypatch.setattr(entrypoint.uvicorn, "run", fake_run)
    entrypoint.main(["--host", "0.0.0.0", "--port", "9100", "--log-level", "debug"])

    assert len(calls) == 1
    target, kwargs = calls[0]
    assert target is entrypoint.app
    assert kwargs["host"] == "0.0.0.0"
    assert kwargs["port"] == 9100
    assert kwargs["reload"] is False


def test_main_reload_uses_import_string(monkeypatch):
    calls = []
    monkeypatch.setattr(entrypoint.uvicorn, "run", lambda target, **kw: calls.append(target))
    entrypoint.main(["--reload"])
    assert calls == ["hexpath.api.app:app"]
