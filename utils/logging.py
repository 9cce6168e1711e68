"""
utils/logging.py

Централизованная система логирования.

Записи идут в stderr: stdout занят решениями.
"""

import logging
import sys
from typing import Optional, TextIO


class SolverLogger:
    """Логгер для решателя."""

    def __init__(self, name: str = "peg_solver", level: int = logging.INFO,
                 stream: Optional[TextIO] = None):
        """
        Инициализирует логгер.

        Args:
            name: имя логгера
            level: уровень логирования
            stream: поток вывода (по умолчанию sys.stderr)
        """
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level)

        # Избегаем дублирования handlers
        if not self.logger.handlers:
            console_handler = logging.StreamHandler(stream or sys.stderr)

            formatter = logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
                datefmt='%Y-%m-%d %H:%M:%S'
            )
            console_handler.setFormatter(formatter)

            self.logger.addHandler(console_handler)

    def set_level(self, level: int):
        """Меняет уровень логирования."""
        self.logger.setLevel(level)

    def debug(self, message: str):
        """Логирует отладочное сообщение."""
        self.logger.debug(message)

    def info(self, message: str):
        """Логирует информационное сообщение."""
        self.logger.info(message)


# Глобальный логгер
_default_logger: Optional[SolverLogger] = None


def get_logger(name: str = "peg_solver", level: int = logging.WARNING) -> SolverLogger:
    """
    Возвращает глобальный логгер или создаёт новый.

    Args:
        name: имя логгера
        level: уровень логирования (только при первом вызове)

    Returns:
        SolverLogger
    """
    global _default_logger
    if _default_logger is None:
        _default_logger = SolverLogger(name, level)
    return _default_logger
