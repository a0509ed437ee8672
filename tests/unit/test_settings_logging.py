"""Тесты настроек (pydantic-settings) и настройки логирования.

Coverage:
- Значения по умолчанию и чтение из окружения (MARKETPLACE_*)
- Валидация уровня логирования и money_places
- setup_logging: обработчики stderr/файл, повторный вызов
"""

import logging

import pytest
from pydantic import ValidationError

from src.core.settings import MarketplaceSettings, get_settings
from src.utils.logger import get_logger, setup_logging


@pytest.fixture
def clean_env(monkeypatch):
    for var in (
        "MARKETPLACE_LOG_LEVEL",
        "MARKETPLACE_LOG_FILE",
        "MARKETPLACE_CURRENCY_SYMBOL",
        "MARKETPLACE_MONEY_PLACES",
    ):
        monkeypatch.delenv(var, raising=False)
    get_settings.cache_clear()
    yield monkeypatch
    get_settings.cache_clear()


@pytest.fixture
def restore_root_logging():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


class TestMarketplaceSettings:
    """Настройки маркетплейса."""

    def test_defaults(self, clean_env) -> None:
        settings = MarketplaceSettings(_env_file=None)
        assert settings.log_level == "INFO"
        assert settings.log_file is None
        assert settings.currency_symbol == "$"
        assert settings.money_places == 2

    def test_from_environment(self, clean_env) -> None:
        clean_env.setenv("MARKETPLACE_LOG_LEVEL", "debug")
        clean_env.setenv("MARKETPLACE_CURRENCY_SYMBOL", "€")
        clean_env.setenv("MARKETPLACE_MONEY_PLACES", "0")

        settings = MarketplaceSettings(_env_file=None)

        assert settings.log_level == "DEBUG"
        assert settings.currency_symbol == "€"
        assert settings.money_places == 0

    def test_invalid_log_level(self, clean_env) -> None:
        with pytest.raises(ValidationError):
            MarketplaceSettings(_env_file=None, log_level="LOUD")

    def test_negative_money_places(self, clean_env) -> None:
        with pytest.raises(ValidationError):
            MarketplaceSettings(_env_file=None, money_places=-1)

    def test_get_settings_cached(self, clean_env) -> None:
        assert get_settings() is get_settings()


class TestSetupLogging:
    """Настройка root logger."""

    def test_console_only(self, restore_root_logging) -> None:
        setup_logging(MarketplaceSettings(_env_file=None, log_level="WARNING"))

        root = restore_root_logging
        assert root.level == logging.WARNING
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0], logging.StreamHandler)

    def test_file_handler(self, restore_root_logging, tmp_path) -> None:
        log_file = tmp_path / "logs" / "marketplace.log"
        setup_logging(MarketplaceSettings(_env_file=None, log_file=str(log_file)))

        get_logger("src.tests").info("hello from test")
        for handler in restore_root_logging.handlers:
            handler.flush()

        assert log_file.exists()
        assert "hello from test" in log_file.read_text(encoding="utf-8")

    def test_repeated_setup_replaces_handlers(self, restore_root_logging) -> None:
        settings = MarketplaceSettings(_env_file=None)
        setup_logging(settings)
        setup_logging(settings)
        assert len(restore_root_logging.handlers) == 1
