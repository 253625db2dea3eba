"""
solvers/recursive.py

Классический рекурсивный перенос башни.

Глубина рекурсии равна номеру наибольшего переносимого диска,
то есть ограничена числом дисков из конфигурации.
"""

from core.peg import Peg
from .base import BaseSolver


class RecursiveSolver(BaseSolver):
    """
    Переносит диски 0..disc_size с source на dest через spare.

    Делает ровно 2^N - 1 переносов.
    """

    def _solve(self, disc_count: int, source: Peg, dest: Peg, spare: Peg) -> None:
        if disc_count == 0:
            return
        self.move_tower(disc_count - 1, source, dest, spare)

    def move_tower(self, disc_size: int, source: Peg, dest: Peg, spare: Peg,
                   depth: int = 1) -> None:
        """
        Args:
            disc_size: наибольший диск подзадачи (не число дисков)
            source, dest, spare: текущие роли стержней
            depth: текущая глубина рекурсии
        """
        if depth > self.stats.max_depth:
            self.stats.max_depth = depth

        if disc_size == 0:
            self._transfer(source, dest, spare)
            return

        self.move_tower(disc_size - 1, source, spare, dest, depth + 1)
        self._transfer(source, dest, spare)
        self.move_tower(disc_size - 1, spare, dest, source, depth + 1)
