"""Tests for centralized settings."""

from __future__ import annotations

from pathlib import Path

from optimismo.core.config import LogFormat, Settings


class TestSettings:
    def test_defaults(self, monkeypatch) -> None:
        monkeypatch.delenv("OPTIMISMO_LEXICON_PATH", raising=False)
        settings = Settings(_env_file=None)
        assert settings.lexicon_path is None
        assert settings.uses_bundled_lexicon is True
        assert settings.log_level == "INFO"
        assert settings.log_format == LogFormat.JSON

    def test_env_overrides(self, monkeypatch, tmp_path) -> None:
        path = tmp_path / "lexicon.json"
        monkeypatch.setenv("OPTIMISMO_LEXICON_PATH", str(path))
        monkeypatch.setenv("OPTIMISMO_LOG_FORMAT", "console")
        settings = Settings(_env_file=None)
        assert settings.lexicon_path == Path(path)
        assert settings.uses_bundled_lexicon is False
        assert settings.log_format == LogFormat.CONSOLE
