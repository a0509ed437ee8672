"""
Settings — Конфигурация маркетплейса

Настройки читаются из переменных окружения с префиксом MARKETPLACE_
(и из .env, если он есть), типизируются и валидируются pydantic-settings.

Пример:
    MARKETPLACE_LOG_LEVEL=DEBUG MARKETPLACE_CURRENCY_SYMBOL=€ python -m src.scenario
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.core.math.money import DEFAULT_CURRENCY_SYMBOL, DEFAULT_MONEY_PLACES


class MarketplaceSettings(BaseSettings):
    """Настройки маркетплейса (логирование и вывод сумм)."""

    # Logging
    log_level: str = Field(default="INFO", description="Уровень root logger")
    log_file: Optional[str] = Field(
        default=None, description="Файл логов (None — только stderr)"
    )

    # Вывод денежных сумм
    currency_symbol: str = Field(
        default=DEFAULT_CURRENCY_SYMBOL, description="Символ валюты в листинге товаров"
    )
    money_places: int = Field(
        default=DEFAULT_MONEY_PLACES, ge=0, description="Знаков после запятой при выводе"
    )

    model_config = SettingsConfigDict(
        env_prefix="MARKETPLACE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Нормализация уровня логирования (debug → DEBUG)."""
        level = v.strip().upper()
        if level not in {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}:
            raise ValueError(f"Unsupported log level: {v!r}")
        return level


@lru_cache(maxsize=1)
def get_settings() -> MarketplaceSettings:
    """Singleton настроек (кэшируется до get_settings.cache_clear())."""
    return MarketplaceSettings()
