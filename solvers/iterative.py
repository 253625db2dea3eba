"""
solvers/iterative.py

Нерекурсивный перенос башни по битовому правилу.

Ход k (с единицы) переносит диск с номером, равным индексу младшего
единичного бита k. Стержни хода:
    откуда: (k & (k - 1)) % 3
    куда:   ((k | (k - 1)) + 1) % 3
по порядку ролей (source, spare, dest) при нечётном N
и (source, dest, spare) при чётном N.
"""

from core.peg import Peg
from .base import BaseSolver


class IterativeSolver(BaseSolver):
    """Та же последовательность ходов, что у RecursiveSolver, без рекурсии."""

    def _solve(self, disc_count: int, source: Peg, dest: Peg, spare: Peg) -> None:
        if disc_count % 2:
            order = (source, spare, dest)
        else:
            order = (source, dest, spare)

        self.stats.max_depth = 1
        for k in range(1, 2 ** disc_count):
            src = order[(k & (k - 1)) % 3]
            dst = order[((k | (k - 1)) + 1) % 3]
            # третий стержень хода
            free = next(peg for peg in order if peg is not src and peg is not dst)
            self._transfer(src, dst, free)

    @staticmethod
    def disc_for_move(k: int) -> int:
        """Номер диска, переносимого ходом k (k >= 1)."""
        return (k & -k).bit_length() - 1
