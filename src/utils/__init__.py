"""Вспомогательные утилиты (логирование)."""

from src.utils.logger import get_logger, setup_logging

__all__ = ["get_logger", "setup_logging"]
