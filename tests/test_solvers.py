"""
tests/test_solvers.py

Тесты для RecursiveSolver и IterativeSolver.
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from typing import List
import pytest

from core.board import Board
from core.peg import Peg, PegLabel
from game import new_board, solve
from solutions.verify import (
    check_board_invariants, expected_move_count, verify_move_sequence
)
from solvers import SOLVERS, RecursiveSolver, IterativeSolver
from utils.error_handling import EmptyPegUnderflowError


class RecordingRenderer:
    """Запоминает каждый кадр и проверяет инварианты позиции."""

    def __init__(self, board: Board):
        self.board = board
        self.frames: List[dict] = []
        self.roles: List[tuple] = []
        self.violations = 0

    def display(self, peg_a: Peg, peg_b: Peg, peg_c: Peg) -> None:
        self.frames.append(self.board.snapshot())
        self.roles.append((peg_a.label, peg_b.label, peg_c.label))
        if not check_board_invariants(self.board, self.board.disc_count):
            self.violations += 1


@pytest.mark.parametrize("solver_class", [RecursiveSolver, IterativeSolver])
@pytest.mark.parametrize("size", range(1, 9))
def test_solves_board(solver_class, size):
    """Тест: башня целиком переезжает на Right за 2^N - 1 ходов."""
    board = new_board(size)
    solver = solver_class(record_moves=True)

    result = solver.solve(board, size)

    assert result is board
    assert board.is_solved()
    assert board.left.is_empty()
    assert board.middle.is_empty()
    assert board.right.sizes() == tuple(range(size - 1, -1, -1))
    assert solver.stats.moves == expected_move_count(size)
    assert verify_move_sequence(size, solver.moves)


@pytest.mark.parametrize("size,moves", [(1, 1), (2, 3), (3, 7)])
def test_move_counts(size, moves):
    board = new_board(size)
    solver = RecursiveSolver()
    solver.solve(board, size)
    assert solver.stats.moves == moves


@pytest.mark.parametrize("solver_name", list(SOLVERS))
def test_every_frame_is_legal(solver_name):
    """Тест: инварианты выполняются в каждом кадре, кадров вдвое больше ходов."""
    size = 5
    board = new_board(size)
    renderer = RecordingRenderer(board)

    solve(board, size, renderer=renderer, solver_name=solver_name)

    assert renderer.violations == 0
    assert len(renderer.frames) == 2 * expected_move_count(size)
    assert board.is_solved()


def test_frames_bracket_each_move():
    """Тест: кадры «до» и «после» отличаются ровно одним переносом."""
    board = new_board(3)
    renderer = RecordingRenderer(board)
    solver = RecursiveSolver(renderer=renderer)
    solver.solve(board, 3)

    assert solver.stats.frames == len(renderer.frames)
    for before, after in zip(renderer.frames[::2], renderer.frames[1::2]):
        changed = [label for label in before if before[label] != after[label]]
        assert len(changed) == 2


def test_single_disc_one_frame_pair():
    board = new_board(1)
    renderer = RecordingRenderer(board)
    solve(board, 1, renderer=renderer)

    assert len(renderer.frames) == 2
    assert renderer.frames[0][PegLabel.LEFT] == (0,)
    assert renderer.frames[1][PegLabel.RIGHT] == (0,)


def test_recursive_and_iterative_agree():
    """Тест: оба решателя дают одну и ту же последовательность ходов."""
    for size in range(1, 8):
        recursive = RecursiveSolver(record_moves=True)
        iterative = IterativeSolver(record_moves=True)
        recursive.solve(new_board(size), size)
        iterative.solve(new_board(size), size)
        assert recursive.moves == iterative.moves


def test_disc_for_move_matches_lowest_bit():
    solver = IterativeSolver(record_moves=True)
    solver.solve(new_board(5), 5)
    for k, move in enumerate(solver.moves, 1):
        assert IterativeSolver.disc_for_move(k) == move.disc


def test_recursion_depth_equals_disc_count():
    solver = RecursiveSolver()
    solver.solve(new_board(6), 6)
    assert solver.stats.max_depth == 6


def test_solve_to_other_peg():
    board = new_board(4)
    solver = RecursiveSolver(record_moves=True)
    solver.solve(board, 4, PegLabel.LEFT, PegLabel.MIDDLE, PegLabel.RIGHT)

    assert board.is_solved(PegLabel.LEFT, PegLabel.MIDDLE)
    assert verify_move_sequence(4, solver.moves, PegLabel.LEFT, PegLabel.MIDDLE)


def test_move_tower_from_empty_source_raises():
    """Тест: пустой source — нарушение инварианта, ошибка не глотается."""
    board = new_board(2)
    solver = RecursiveSolver()
    with pytest.raises(EmptyPegUnderflowError):
        solver.move_tower(0, board.middle, board.right, board.left)


def test_verify_rejects_bad_sequences():
    solver = RecursiveSolver(record_moves=True)
    solver.solve(new_board(3), 3)
    moves = list(solver.moves)

    assert verify_move_sequence(3, moves)
    assert not verify_move_sequence(3, moves[:-1])
    # первые два хода местами: диск 1 не наверху
    swapped = [moves[1], moves[0]] + moves[2:]
    assert not verify_move_sequence(3, swapped)
    assert not verify_move_sequence(0, [])
