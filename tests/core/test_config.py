"""Unit tests for src/core/config.py"""

from unittest.mock import patch

import pytest

from src.core.config import IN_MEMORY_DATABASE_URL, Settings, configure_logging


def test_defaults_keep_everything_in_memory(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ["CHESS_DATABASE_URL", "CHESS_DB_ECHO", "CHESS_LOG_LEVEL"]:
        monkeypatch.delenv(name, raising=False)
    settings = Settings.from_env()
    assert settings.database_url == IN_MEMORY_DATABASE_URL
    assert settings.database_echo is False
    assert settings.log_level == "INFO"


def test_settings_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CHESS_DATABASE_URL", "sqlite:///chess.db")
    monkeypatch.setenv("CHESS_DB_ECHO", "true")
    monkeypatch.setenv("CHESS_LOG_LEVEL", "debug")
    settings = Settings.from_env()
    assert settings.database_url == "sqlite:///chess.db"
    assert settings.database_echo is True
    assert settings.log_level == "DEBUG"


def test_configure_logging_uses_settings_level() -> None:
    with patch("src.core.config.logging.basicConfig") as basic_config:
        configure_logging(Settings(log_level="DEBUG"))
    basic_config.assert_called_once()
    assert basic_config.call_args.kwargs["level"] == "DEBUG"
