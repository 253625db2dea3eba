"""
hanoi_io - Вывод Tower of Hanoi в терминал

Экспортирует:
- Сборку кадра и покадровый рендерер
- Управляющие последовательности терминала
"""

from .renderer import TerminalRenderer, build_frame
from .terminal import (
    CLEAR_SCREEN, HIDE_CURSOR, SHOW_CURSOR,
    goto, get_terminal_height
)

__all__ = [
    'TerminalRenderer',
    'build_frame',
    'CLEAR_SCREEN',
    'HIDE_CURSOR',
    'SHOW_CURSOR',
    'goto',
    'get_terminal_height',
]
