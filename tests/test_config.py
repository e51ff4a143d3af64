"""Tests for runtime settings loading."""

from __future__ import annotations

from inkgroup.config import Settings


def test_dotenv_file_is_read(tmp_path, monkeypatch):
    monkeypatch.delenv("INKGROUP_DEBOUNCE_MS", raising=False)
    monkeypatch.delenv("INKGROUP_LOG_LEVEL", raising=False)
    env_file = tmp_path / ".env"
    env_file.write_text("INKGROUP_DEBOUNCE_MS=250\nINKGROUP_LOG_LEVEL=debug\n")

    s = Settings(_env_file=env_file)
    assert s.debounce_ms == 250
    assert s.log_level == "debug"


def test_environment_overrides_dotenv_file(tmp_path, monkeypatch):
    env_file = tmp_path / ".env"
    env_file.write_text("INKGROUP_DEFAULT_THRESHOLD=0.7\n")
    monkeypatch.setenv("INKGROUP_DEFAULT_THRESHOLD", "0.2")

    assert Settings(_env_file=env_file).default_threshold == 0.2


def test_defaults_without_dotenv_file(tmp_path, monkeypatch):
    for name in ("INKGROUP_DEBOUNCE_MS", "INKGROUP_DEFAULT_LAYER"):
        monkeypatch.delenv(name, raising=False)
    s = Settings(_env_file=tmp_path / "missing.env")
    assert s.debounce_ms == 600
    assert s.default_layer == 1
