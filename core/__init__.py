"""
core - Ядро Tower of Hanoi

Базовые структуры данных: диск, стержень, доска, конфигурация.
"""

from .config import GameConfig, DEFAULT_CONFIG
from .disc import Disc, EmptySlot, Slot, cell_width
from .peg import Peg, PegLabel, DISPLAY_RANK
from .board import Board

__all__ = [
    'GameConfig', 'DEFAULT_CONFIG',
    'Disc', 'EmptySlot', 'Slot', 'cell_width',
    'Peg', 'PegLabel', 'DISPLAY_RANK',
    'Board',
]
