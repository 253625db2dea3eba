"""
hanoi_io/renderer.py

Покадровая отрисовка трёх стержней в терминале.

Каждый кадр пишется с одной и той же «домашней» строки, поэтому
новый кадр целиком перекрывает предыдущий.
"""

import sys
import time
from typing import Callable, List, Optional, TextIO

from core.config import GameConfig, DEFAULT_CONFIG
from core.peg import Peg, DISPLAY_RANK
from utils.error_handling import TerminalSizeError
from .terminal import (
    CLEAR_SCREEN, HIDE_CURSOR, SHOW_CURSOR,
    goto, enable_ansi, get_terminal_height
)


def build_frame(pegs: List[Peg], separator: str = '|') -> List[str]:
    """
    Собирает кадр из трёх стержней.

    Стержни приходят в порядке ролей алгоритма (source, dest, spare),
    колонки выводятся в порядке Left, Middle, Right.

    Args:
        pegs: три стержня одной игры
        separator: символ-разделитель ячеек

    Returns:
        capacity строк одинаковой ширины, сверху вниз
    """
    ordered = sorted(pegs, key=lambda peg: DISPLAY_RANK[peg.label])
    columns = [peg.rows() for peg in ordered]
    return [
        separator + separator.join(cells) + separator
        for cells in zip(*columns)
    ]


class TerminalRenderer:
    """
    Рисует кадры в stream и выдерживает паузу refresh_interval_ms.

    Args:
        config: конфигурация игры
        stream: поток вывода (по умолчанию stdout)
        terminal_height: фиксированная высота; None — спрашивать у терминала
        sleep: функция паузы
    """

    def __init__(self, config: GameConfig = DEFAULT_CONFIG, stream: Optional[TextIO] = None,
                 terminal_height: Optional[int] = None,
                 sleep: Callable[[float], None] = time.sleep):
        self.config = config
        self.stream = stream if stream is not None else sys.stdout
        self.terminal_height = terminal_height
        self.sleep = sleep
        self.frames = 0

    def home_row(self, capacity: int) -> int:
        """
        Строка, с которой начинается кадр.

        Под кадром остаётся строка для курсора, иначе терминал
        прокручивается на каждом кадре.

        Raises:
            TerminalSizeError: размер недоступен или кадр не помещается
        """
        height = self.terminal_height
        if height is None:
            height = get_terminal_height(self.stream)
        if capacity >= height:
            raise TerminalSizeError(
                f"Кадр из {capacity} строк не помещается в терминал высотой {height}"
            )
        return height - capacity

    def display(self, peg_a: Peg, peg_b: Peg, peg_c: Peg) -> None:
        """Перерисовывает доску на месте и ждёт refresh_interval_ms."""
        lines = build_frame([peg_a, peg_b, peg_c], self.config.separator)
        home = self.home_row(peg_a.capacity)

        self.stream.write(goto(1, home) + "\n".join(lines) + "\n")
        self.stream.flush()
        self.frames += 1

        if self.config.refresh_interval_ms:
            self.sleep(self.config.refresh_interval)

    def start(self) -> None:
        """Очищает экран и прячет курсор."""
        enable_ansi()
        self.stream.write(CLEAR_SCREEN + HIDE_CURSOR)
        self.stream.flush()

    def finish(self) -> None:
        """Возвращает курсор."""
        self.stream.write(SHOW_CURSOR)
        self.stream.flush()
