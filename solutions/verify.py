"""
solutions/verify.py

Проверка позиций и записанных решений Tower of Hanoi.
"""

from typing import List

from core.board import Board
from core.config import GameConfig
from core.peg import PegLabel
from solvers.base import Move


def expected_move_count(disc_count: int) -> int:
    """Минимальное число переносов для disc_count дисков."""
    return 2 ** disc_count - 1


def check_board_invariants(board: Board, disc_count: int) -> bool:
    """
    Проверяет позицию.

    Правила:
    - на каждом стержне размеры строго убывают снизу вверх;
    - вместе стержни содержат ровно диски {0, ..., disc_count-1}.
    """
    seen: List[int] = []
    for peg in board.pegs():
        sizes = peg.sizes()
        for lower, upper in zip(sizes, sizes[1:]):
            if upper >= lower:
                return False
        seen.extend(sizes)
    return sorted(seen) == list(range(disc_count))


def verify_move_sequence(disc_count: int, moves: List[Move],
                         source: PegLabel = PegLabel.LEFT,
                         dest: PegLabel = PegLabel.RIGHT) -> bool:
    """
    Проигрывает moves на новой доске и проверяет решение.

    Правила:
    - каждый ход снимает с source верхний диск с указанным номером;
    - диск не кладётся на меньший;
    - ходов ровно 2^N - 1;
    - в конце все диски на dest, source пуст.
    """
    if disc_count < 1 or len(moves) != expected_move_count(disc_count):
        return False

    config = GameConfig(max_discs=max(disc_count, 1))
    board = Board.new(disc_count, config)
    if source is not PegLabel.LEFT:
        # Начальная башня должна стоять на source
        board.peg(source).stack, board.left.stack = board.left.stack, board.peg(source).stack

    for move in moves:
        from_peg = board.peg(move.source)
        to_peg = board.peg(move.dest)
        top = from_peg.top()
        if top is None or top.size != move.disc:
            return False
        target = to_peg.top()
        if target is not None and target.size < top.size:
            return False
        to_peg.push(from_peg.pop_top())

    return board.is_solved(source, dest)
