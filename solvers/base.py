"""
solvers/base.py

Базовый класс для всех решателей.
"""

from abc import ABC, abstractmethod
from typing import List, NamedTuple, Optional, Protocol
from dataclasses import dataclass
import time

from core.board import Board
from core.peg import Peg, PegLabel
from utils.logging import get_logger


class Renderer(Protocol):
    """Всё, что умеет показать три стержня."""

    def display(self, peg_a: Peg, peg_b: Peg, peg_c: Peg) -> None:
        ...


class Move(NamedTuple):
    """Перенос диска disc со стержня source на dest."""
    disc: int
    source: PegLabel
    dest: PegLabel


@dataclass
class SolverStats:
    """Статистика работы решателя."""
    moves: int = 0
    frames: int = 0
    max_depth: int = 0
    time_elapsed: float = 0.0

    def __str__(self) -> str:
        return (
            f"Moves: {self.moves}, "
            f"Frames: {self.frames}, "
            f"Depth: {self.max_depth}, "
            f"Time: {self.time_elapsed:.3f}s"
        )


class BaseSolver(ABC):
    """
    Базовый класс решателя.

    Каждый физический перенос диска обрамлён двумя кадрами:
    «перед переносом» и «после переноса».
    """

    def __init__(self, renderer: Optional[Renderer] = None, record_moves: bool = False,
                 verbose: bool = False):
        self.renderer = renderer
        self.record_moves = record_moves
        self.verbose = verbose
        self.stats = SolverStats()
        self.moves: List[Move] = []

    def solve(self, board: Board, disc_count: Optional[int] = None,
              source: PegLabel = PegLabel.LEFT,
              dest: PegLabel = PegLabel.RIGHT,
              spare: PegLabel = PegLabel.MIDDLE) -> Board:
        """
        Переносит башню из disc_count дисков с source на dest.

        Args:
            board: доска, изменяется на месте
            disc_count: число дисков (по умолчанию — все диски доски)
            source, dest, spare: роли стержней

        Returns:
            Та же доска в решённом состоянии
        """
        if disc_count is None:
            disc_count = board.disc_count
        self.stats = SolverStats()
        self.moves = []

        self._log(f"Старт: {disc_count} дисков, {source.value} → {dest.value}")
        start = time.time()
        self._solve(disc_count, board.peg(source), board.peg(dest), board.peg(spare))
        self.stats.time_elapsed = time.time() - start
        self._log(f"Готово: {self.stats}")
        return board

    @abstractmethod
    def _solve(self, disc_count: int, source: Peg, dest: Peg, spare: Peg) -> None:
        """Выполняет все переносы."""
        pass

    def _transfer(self, source: Peg, dest: Peg, spare: Peg) -> None:
        """Один физический перенос верхнего диска с source на dest."""
        self._render(source, dest, spare)
        disc = source.pop_top()
        dest.push(disc)
        self.stats.moves += 1
        if self.record_moves:
            self.moves.append(Move(disc.size, source.label, dest.label))
        self._render(source, dest, spare)

    def _render(self, source: Peg, dest: Peg, spare: Peg) -> None:
        if self.renderer is None:
            return
        self.renderer.display(source, dest, spare)
        self.stats.frames += 1

    def _log(self, message: str) -> None:
        """Пишет в лог на уровне DEBUG, при verbose=True — на уровне INFO."""
        logger = get_logger()
        if self.verbose:
            logger.info(f"[{self.__class__.__name__}] {message}")
        else:
            logger.debug(f"[{self.__class__.__name__}] {message}")
