"""
solutions - Проверка решений Tower of Hanoi
"""

from .verify import expected_move_count, check_board_invariants, verify_move_sequence

__all__ = [
    'expected_move_count',
    'check_board_invariants',
    'verify_move_sequence',
]
