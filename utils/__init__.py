"""
utils - Логирование и обработка ошибок
"""

from .logging import HanoiLogger, get_logger, setup_file_logging
from .error_handling import (
    HanoiError, ConfigError, InvalidGameSizeError, InvalidDiscError,
    EmptyPegUnderflowError, TerminalSizeError, validate_disc_count
)

__all__ = [
    'HanoiLogger', 'get_logger', 'setup_file_logging',
    'HanoiError', 'ConfigError', 'InvalidGameSizeError', 'InvalidDiscError',
    'EmptyPegUnderflowError', 'TerminalSizeError', 'validate_disc_count',
]
