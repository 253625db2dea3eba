"""
tests/test_board.py

Тесты для Board, GameConfig и проверок позиции.
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest

from core.board import Board
from core.config import GameConfig
from core.peg import PegLabel
from game import new_board
from solutions.verify import check_board_invariants
from utils.error_handling import ConfigError, InvalidGameSizeError


def test_new_board_layout():
    board = new_board(4)

    assert board.disc_count == 4
    assert board.left.sizes() == (3, 2, 1, 0)
    assert board.middle.is_empty()
    assert board.right.is_empty()
    assert {peg.capacity for peg in board.pegs()} == {4}
    assert check_board_invariants(board, 4)
    assert not board.is_solved()


@pytest.mark.parametrize("size", [0, -1, 33])
def test_new_board_rejects_invalid_size(size):
    """Тест: нулевой и слишком большой размер отклоняются."""
    with pytest.raises(InvalidGameSizeError):
        new_board(size)


def test_max_discs_is_configurable():
    config = GameConfig(max_discs=59)
    board = Board.new(40, config)
    assert board.disc_count == 40

    with pytest.raises(InvalidGameSizeError):
        Board.new(5, GameConfig(max_discs=4))


def test_invalid_config():
    with pytest.raises(ConfigError):
        GameConfig(refresh_interval_ms=-1)
    with pytest.raises(ConfigError):
        GameConfig(min_discs=0)
    with pytest.raises(ConfigError):
        GameConfig(min_discs=5, max_discs=4)
    with pytest.raises(ConfigError):
        GameConfig(fill='==')


def test_config_is_read_only():
    config = GameConfig()
    with pytest.raises(AttributeError):
        config.refresh_interval_ms = 10


def test_snapshot_and_peg_lookup():
    board = new_board(2)
    board.right.push(board.left.pop_top())

    assert board.peg(PegLabel.RIGHT) is board.right
    assert board.snapshot() == {
        PegLabel.LEFT: (1,),
        PegLabel.MIDDLE: (),
        PegLabel.RIGHT: (0,),
    }


def test_invariants_detect_bad_positions():
    """Тест: больший диск на меньшем и потеря диска обнаруживаются."""
    board = new_board(3)
    board.middle.push(board.left.pop_top())
    board.middle.push(board.left.pop_top())
    assert not check_board_invariants(board, 3)

    board = new_board(3)
    board.left.pop_top()
    assert not check_board_invariants(board, 3)
