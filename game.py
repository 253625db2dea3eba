"""
game.py

Публичные операции ядра: создание доски, решение, запуск анимации.
"""

from typing import Optional, TextIO

from core.board import Board
from core.config import GameConfig, DEFAULT_CONFIG
from core.peg import PegLabel
from hanoi_io.renderer import TerminalRenderer
from solvers import SOLVERS, RecursiveSolver, SolverStats
from solvers.base import Renderer
from utils.logging import get_logger


def new_board(size: int, config: GameConfig = DEFAULT_CONFIG) -> Board:
    """Начальная позиция: size дисков на Left."""
    return Board.new(size, config)


def solve(board: Board, size: int, renderer: Optional[Renderer] = None,
          solver_name: str = 'recursive') -> Board:
    """
    Переносит башню с Left на Right.

    Args:
        board: начальная позиция, изменяется на месте
        size: число дисков
        renderer: получает кадр до и после каждого переноса
        solver_name: ключ из SOLVERS

    Returns:
        Решённая доска
    """
    solver_class = SOLVERS.get(solver_name, RecursiveSolver)
    solver = solver_class(renderer=renderer)
    return solver.solve(board, size, PegLabel.LEFT, PegLabel.RIGHT, PegLabel.MIDDLE)


def run_game(size: int, config: GameConfig = DEFAULT_CONFIG, stream: Optional[TextIO] = None,
             solver_name: str = 'recursive',
             terminal_height: Optional[int] = None,
             verbose: bool = False) -> SolverStats:
    """
    Анимирует решение в терминале.

    Курсор возвращается даже если решение прервано исключением.

    Raises:
        InvalidGameSizeError: size вне допустимого диапазона
        TerminalSizeError: размер терминала недоступен
    """
    logger = get_logger()
    board = new_board(size, config)
    renderer = TerminalRenderer(config, stream, terminal_height=terminal_height)
    solver = SOLVERS.get(solver_name, RecursiveSolver)(renderer=renderer, verbose=verbose)

    logger.info(f"Игра: {size} дисков, решатель {solver_name}, "
                f"пауза {config.refresh_interval_ms} мс")
    renderer.start()
    try:
        solver.solve(board, size)
    finally:
        renderer.finish()

    logger.info(f"Решено: {solver.stats}")
    return solver.stats
