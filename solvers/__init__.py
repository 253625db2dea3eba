"""
solvers - Решатели Tower of Hanoi

Экспортирует:
- RecursiveSolver: классическая рекурсия
- IterativeSolver: битовое правило, без рекурсии
"""

from .base import BaseSolver, SolverStats, Move
from .recursive import RecursiveSolver
from .iterative import IterativeSolver

SOLVERS = {
    'recursive': RecursiveSolver,
    'iterative': IterativeSolver,
}

__all__ = [
    'BaseSolver',
    'SolverStats',
    'Move',
    'RecursiveSolver',
    'IterativeSolver',
    'SOLVERS',
]
