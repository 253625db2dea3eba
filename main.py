#!/usr/bin/env python3
"""
main.py

Точка входа для анимации Tower of Hanoi.

Использование:
    python main.py                    # 3 диска, без паузы
    python main.py 8 --interval 50    # 8 дисков, 50 мс между кадрами
    python main.py 5 --solver iterative
"""

import sys
import argparse
import logging

from core.config import GameConfig, DEFAULT_MAX_DISCS, DEFAULT_MIN_DISCS
from game import run_game
from solvers import SOLVERS
from utils.error_handling import ConfigError, InvalidGameSizeError, TerminalSizeError
from utils.logging import get_logger, setup_file_logging


EXIT_INVALID_SIZE = 1
EXIT_TERMINAL_SIZE = 2


class HanoiArgumentParser(argparse.ArgumentParser):
    """Ошибки разбора аргументов — это неверный ввод, а не сбой терминала."""

    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(EXIT_INVALID_SIZE, f"{self.prog}: ошибка: {message}\n")


def build_parser() -> argparse.ArgumentParser:
    parser = HanoiArgumentParser(
        description='Tower of Hanoi — анимация в терминале',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Примеры:
  python main.py 4                       # 4 диска
  python main.py 10 -i 20                # 20 мс между кадрами
  python main.py 6 --solver iterative    # без рекурсии
        """
    )
    parser.add_argument(
        'discs', nargs='?', type=int, default=3,
        help=f'Число дисков ({DEFAULT_MIN_DISCS}..{DEFAULT_MAX_DISCS}, default: 3)'
    )
    parser.add_argument(
        '--interval', '-i', type=int, default=0,
        help='Пауза между кадрами в мс (default: 0)'
    )
    parser.add_argument(
        '--solver', '-s', choices=list(SOLVERS.keys()),
        default='recursive', help='Выбор решателя (default: recursive)'
    )
    parser.add_argument(
        '--log-file', help='Писать лог в файл'
    )
    parser.add_argument(
        '--verbose', '-v', action='store_true',
        help='Подробный лог (INFO)'
    )
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    level = logging.INFO if args.verbose else logging.WARNING
    logger = get_logger()
    logger.set_level(level)
    if args.log_file:
        setup_file_logging(args.log_file, level)

    try:
        config = GameConfig(refresh_interval_ms=args.interval)
    except ConfigError as e:
        print(f"❌ Ошибка: {e}", file=sys.stderr)
        return EXIT_INVALID_SIZE

    try:
        stats = run_game(args.discs, config, solver_name=args.solver,
                         verbose=args.verbose)
    except InvalidGameSizeError as e:
        print(f"❌ Ошибка: {e}", file=sys.stderr)
        return EXIT_INVALID_SIZE
    except TerminalSizeError as e:
        print(f"❌ Ошибка: {e}", file=sys.stderr)
        return EXIT_TERMINAL_SIZE

    print(f"✅ Решено за {stats.moves} ходов")
    return 0


if __name__ == "__main__":
    sys.exit(main())
