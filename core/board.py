"""
core/board.py

Доска из трёх стержней.
"""

from typing import Dict, Tuple

from utils.error_handling import validate_disc_count
from .config import GameConfig, DEFAULT_CONFIG
from .peg import Peg, PegLabel


class Board:
    """
    Ровно три стержня: Left, Middle, Right.
    В начале игры все диски на Left, остальные пусты.
    """
    __slots__ = ('left', 'middle', 'right', 'disc_count')

    def __init__(self, left: Peg, middle: Peg, right: Peg):
        self.left = left
        self.middle = middle
        self.right = right
        self.disc_count = left.capacity

    @classmethod
    def new(cls, disc_count: int, config: GameConfig = DEFAULT_CONFIG) -> 'Board':
        """
        Создаёт начальную позицию.

        Raises:
            InvalidGameSizeError: disc_count вне [config.min_discs, config.max_discs]
        """
        validate_disc_count(disc_count, config)
        return cls(
            Peg.new_loaded(PegLabel.LEFT, disc_count, config.fill),
            Peg.new_empty(PegLabel.MIDDLE, disc_count, config.fill),
            Peg.new_empty(PegLabel.RIGHT, disc_count, config.fill),
        )

    def pegs(self) -> Tuple[Peg, Peg, Peg]:
        return self.left, self.middle, self.right

    def peg(self, label: PegLabel) -> Peg:
        if label is PegLabel.LEFT:
            return self.left
        if label is PegLabel.MIDDLE:
            return self.middle
        return self.right

    def is_solved(self, source: PegLabel = PegLabel.LEFT,
                  dest: PegLabel = PegLabel.RIGHT) -> bool:
        """Все диски на dest в правильном порядке, source пуст."""
        expected = tuple(range(self.disc_count - 1, -1, -1))
        return self.peg(source).is_empty() and self.peg(dest).sizes() == expected

    def snapshot(self) -> Dict[PegLabel, Tuple[int, ...]]:
        """Размеры дисков на каждом стержне (снизу вверх)."""
        return {peg.label: peg.sizes() for peg in self.pegs()}

    def __repr__(self) -> str:
        return f"Board({self.disc_count} discs: {self.left!r}, {self.middle!r}, {self.right!r})"
