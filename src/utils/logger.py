"""
Logging utilities.

Централизованная настройка логирования: root logger с обработчиком stderr
и (опционально) файловым обработчиком. stdout зарезервирован под листинг
товаров и чеки.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

from src.core.settings import MarketplaceSettings, get_settings

CONSOLE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(pathname)s:%(lineno)d - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(settings: Optional[MarketplaceSettings] = None) -> None:
    """
    Настройка root logger.

    Повторный вызов заменяет ранее установленные обработчики.

    Args:
        settings: Настройки (по умолчанию get_settings())
    """
    settings = settings or get_settings()

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, settings.log_level, logging.INFO))
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT, datefmt=DATE_FORMAT))
    root_logger.addHandler(console_handler)

    if settings.log_file:
        log_file = Path(settings.log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt=DATE_FORMAT))
        root_logger.addHandler(file_handler)

    root_logger.debug(
        "Logging initialized (level=%s, file=%s)", settings.log_level, settings.log_file
    )


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger for a module.

    Args:
        name: Module name (typically __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)
