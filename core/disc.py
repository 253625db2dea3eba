"""
core/disc.py

Диск и пустая ячейка стержня.

Ячейка стержня — сумма двух вариантов: занятая (Disc) или пустая
(EmptySlot). Пустая ячейка хранит ёмкость стержня, чтобы отрисоваться
той же ширины, что и диск.
"""

from dataclasses import dataclass, field
from typing import Union

from utils.error_handling import InvalidDiscError


def cell_width(max_size: int) -> int:
    """
    Ширина ячейки для игры с наибольшим диском max_size.

    Наибольший диск: max_size глифов слева и справа от своего номера.
    """
    return 2 * max_size + len(str(max_size))


def center(text: str, width: int) -> str:
    """
    Центрирует text в поле width.

    При нечётном остатке левый отступ получает большую половину.
    """
    pad = width - len(text)
    if pad <= 0:
        return text
    left = (pad + 1) // 2
    right = pad // 2
    return ' ' * left + text + ' ' * right


@dataclass(frozen=True)
class Disc:
    """Диск: размер от 0 (наименьший) до max_size."""
    size: int
    max_size: int
    fill: str = '='
    label: str = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        if self.size < 0 or self.size > self.max_size:
            raise InvalidDiscError(
                f"Диск {self.size} вне диапазона 0..{self.max_size}"
            )
        glyphs = self.fill * self.size
        text = f"{glyphs}{self.size}{glyphs}"
        object.__setattr__(self, 'label', center(text, cell_width(self.max_size)))

    @property
    def width(self) -> int:
        return len(self.label)


@dataclass(frozen=True)
class EmptySlot:
    """Пустая ячейка стержня ёмкостью capacity."""
    capacity: int

    @property
    def label(self) -> str:
        return ' ' * cell_width(self.capacity - 1)

    @property
    def width(self) -> int:
        return cell_width(self.capacity - 1)


Slot = Union[Disc, EmptySlot]
