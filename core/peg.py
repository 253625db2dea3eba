"""
core/peg.py

Стержень — именованный стек дисков фиксированной ёмкости.
"""

from enum import Enum
from typing import Dict, List, Optional, Tuple

from utils.error_handling import EmptyPegUnderflowError
from .disc import Disc, EmptySlot, Slot


class PegLabel(Enum):
    LEFT = 'Left'
    MIDDLE = 'Middle'
    RIGHT = 'Right'


# Порядок колонок при отрисовке. Алгоритм его не использует.
DISPLAY_RANK: Dict[PegLabel, int] = {
    PegLabel.LEFT: 0,
    PegLabel.MIDDLE: 1,
    PegLabel.RIGHT: 2,
}


class Peg:
    """
    Стек дисков: последний элемент stack — верхний диск.

    Инвариант: снизу вверх размеры строго убывают. push() его не
    проверяет — корректность гарантирует решатель.
    """
    __slots__ = ('label', 'capacity', 'fill', 'stack')

    def __init__(self, label: PegLabel, capacity: int, stack: Optional[List[Disc]] = None,
                 fill: str = '='):
        self.label = label
        self.capacity = capacity
        self.fill = fill
        self.stack: List[Disc] = stack if stack is not None else []

    @classmethod
    def new_loaded(cls, label: PegLabel, capacity: int, fill: str = '=') -> 'Peg':
        """Стержень со всеми дисками: capacity-1 внизу, 0 наверху."""
        max_size = capacity - 1
        stack = [Disc(size, max_size, fill) for size in range(max_size, -1, -1)]
        return cls(label, capacity, stack, fill)

    @classmethod
    def new_empty(cls, label: PegLabel, capacity: int, fill: str = '=') -> 'Peg':
        """Пустой стержень той же ёмкости."""
        return cls(label, capacity, [], fill)

    def pop_top(self) -> Disc:
        """
        Снимает верхний диск.

        Raises:
            EmptyPegUnderflowError: стержень пуст (ошибка алгоритма)
        """
        if not self.stack:
            raise EmptyPegUnderflowError(f"Невозможно снять диск с пустого стержня {self.label.value}")
        return self.stack.pop()

    def push(self, disc: Disc) -> None:
        self.stack.append(disc)

    def top(self) -> Optional[Disc]:
        return self.stack[-1] if self.stack else None

    def is_empty(self) -> bool:
        return not self.stack

    def sizes(self) -> Tuple[int, ...]:
        """Размеры дисков снизу вверх."""
        return tuple(disc.size for disc in self.stack)

    def slots(self) -> List[Slot]:
        """
        Ячейки сверху вниз: сначала пустые, затем диски от верхнего
        к нижнему. Длина всегда равна capacity.
        """
        empty = [EmptySlot(self.capacity)] * (self.capacity - len(self.stack))
        return empty + list(reversed(self.stack))

    def rows(self) -> List[str]:
        """Строки ячеек сверху вниз, все одной ширины."""
        return [slot.label for slot in self.slots()]

    def __len__(self) -> int:
        return len(self.stack)

    def __lt__(self, other: 'Peg') -> bool:
        if not isinstance(other, Peg):
            return NotImplemented
        return DISPLAY_RANK[self.label] < DISPLAY_RANK[other.label]

    def __repr__(self) -> str:
        return f"Peg({self.label.value}, {list(self.sizes())})"
