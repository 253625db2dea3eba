"""
utils/error_handling.py

Иерархия исключений и проверки входных параметров.

Два класса ошибок:
- ошибки ввода (неверный размер игры) — сообщаются пользователю;
- нарушения инвариантов (снятие диска с пустого стержня, недоступный
  размер терминала) — дефекты, процесс завершается с диагностикой.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from core.config import GameConfig


class HanoiError(Exception):
    """Базовое исключение проекта."""
    pass


class ConfigError(HanoiError):
    """Некорректная конфигурация."""
    pass


class InvalidGameSizeError(HanoiError):
    """Число дисков вне допустимого диапазона."""

    def __init__(self, disc_count: int, min_discs: int, max_discs: int):
        self.disc_count = disc_count
        self.min_discs = min_discs
        self.max_discs = max_discs
        super().__init__(
            f"Размер игры {disc_count} вне диапазона {min_discs}..{max_discs}"
        )


class InvalidDiscError(HanoiError):
    """Размер диска больше максимального для игры."""
    pass


class EmptyPegUnderflowError(HanoiError):
    """Попытка снять диск с пустого стержня. Ошибка алгоритма, а не ввода."""
    pass


class TerminalSizeError(HanoiError):
    """Не удалось определить размер терминала."""
    pass


def validate_disc_count(disc_count: int, config: 'GameConfig') -> int:
    """
    Проверяет число дисков.

    Args:
        disc_count: запрошенное число дисков
        config: конфигурация с границами диапазона

    Returns:
        disc_count без изменений

    Raises:
        InvalidGameSizeError: если значение вне [min_discs, max_discs]
    """
    if not isinstance(disc_count, int) or isinstance(disc_count, bool):
        raise InvalidGameSizeError(disc_count, config.min_discs, config.max_discs)
    if not config.min_discs <= disc_count <= config.max_discs:
        raise InvalidGameSizeError(disc_count, config.min_discs, config.max_discs)
    return disc_count
