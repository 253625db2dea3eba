"""
core/config.py

Конфигурация игры: создаётся один раз и передаётся явно.
"""

from dataclasses import dataclass

from utils.error_handling import ConfigError


DEFAULT_MIN_DISCS = 1
DEFAULT_MAX_DISCS = 32


@dataclass(frozen=True)
class GameConfig:
    """Неизменяемые параметры игры и отрисовки."""
    min_discs: int = DEFAULT_MIN_DISCS
    max_discs: int = DEFAULT_MAX_DISCS
    refresh_interval_ms: int = 0
    fill: str = '='
    separator: str = '|'

    def __post_init__(self):
        if self.min_discs < 1:
            raise ConfigError(f"min_discs должен быть >= 1, получено {self.min_discs}")
        if self.max_discs < self.min_discs:
            raise ConfigError(
                f"max_discs ({self.max_discs}) меньше min_discs ({self.min_discs})"
            )
        if self.refresh_interval_ms < 0:
            raise ConfigError(
                f"refresh_interval_ms должен быть >= 0, получено {self.refresh_interval_ms}"
            )
        # Ширина ячеек считается в символах, глифы должны быть одиночными
        if len(self.fill) != 1:
            raise ConfigError(f"fill должен быть одним символом: {self.fill!r}")
        if len(self.separator) != 1:
            raise ConfigError(f"separator должен быть одним символом: {self.separator!r}")

    @property
    def refresh_interval(self) -> float:
        """Пауза между кадрами в секундах."""
        return self.refresh_interval_ms / 1000


DEFAULT_CONFIG = GameConfig()
