"""
hanoi_io/terminal.py

Управляющие последовательности терминала и размер окна.
"""

import os
from typing import TextIO

from colorama import just_fix_windows_console

from utils.error_handling import TerminalSizeError


CSI = "\x1b["

CLEAR_SCREEN = f"{CSI}2J"
HIDE_CURSOR = f"{CSI}?25l"
SHOW_CURSOR = f"{CSI}?25h"


def goto(column: int, row: int) -> str:
    """Перемещает курсор; нумерация с единицы."""
    return f"{CSI}{row};{column}H"


def enable_ansi() -> None:
    """Включает разбор ANSI-последовательностей в консоли Windows."""
    just_fix_windows_console()


def get_terminal_height(stream: TextIO) -> int:
    """
    Высота терминала, к которому подключён stream.

    Raises:
        TerminalSizeError: stream не терминал или размер недоступен
    """
    try:
        return os.get_terminal_size(stream.fileno()).lines
    except (AttributeError, ValueError, OSError) as e:
        raise TerminalSizeError(f"Не удалось определить размер терминала: {e}") from e
