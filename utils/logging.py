"""
utils/logging.py

Централизованная система логирования.

stdout занят анимацией, поэтому консольный handler пишет в stderr.
"""

import logging
import sys
from typing import Optional


LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


class HanoiLogger:
    """Логгер для решателей и рендерера."""

    def __init__(self, name: str = "hanoi", level: int = logging.INFO):
        """
        Инициализирует логгер.

        Args:
            name: имя логгера
            level: уровень логирования
        """
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level)

        # Избегаем дублирования handlers
        if not self.logger.handlers:
            console_handler = logging.StreamHandler(sys.stderr)
            console_handler.setLevel(level)
            console_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
            self.logger.addHandler(console_handler)

    def set_level(self, level: int):
        """Меняет уровень логгера и всех его handlers."""
        self.logger.setLevel(level)
        for handler in self.logger.handlers:
            handler.setLevel(level)

    def debug(self, message: str):
        self.logger.debug(message)

    def info(self, message: str):
        self.logger.info(message)


# Глобальный логгер
_default_logger: Optional[HanoiLogger] = None


def get_logger(name: str = "hanoi", level: int = logging.WARNING) -> HanoiLogger:
    """
    Возвращает глобальный логгер или создаёт новый.

    Args:
        name: имя логгера
        level: уровень логирования (учитывается только при первом вызове)

    Returns:
        HanoiLogger
    """
    global _default_logger
    if _default_logger is None:
        _default_logger = HanoiLogger(name, level)
    return _default_logger


def setup_file_logging(log_file: str = "hanoi.log", level: int = logging.INFO):
    """
    Перенаправляет логирование в файл.

    Консольный handler снимается: во время анимации любая строка
    в терминале ломает кадр.

    Args:
        log_file: путь к файлу лога
        level: уровень логирования
    """
    logger = get_logger()

    for handler in list(logger.logger.handlers):
        if isinstance(handler, logging.StreamHandler) and not isinstance(handler, logging.FileHandler):
            logger.logger.removeHandler(handler)

    file_handler = logging.FileHandler(log_file, encoding='utf-8')
    file_handler.setLevel(level)
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))

    logger.logger.addHandler(file_handler)
    logger.logger.setLevel(level)
