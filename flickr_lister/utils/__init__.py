"""Utils package initialization."""

from .table import format_table, print_table
from .ui import print_and_log, set_console_level, setup_logging

__all__ = [
    'format_table', 'print_table',
    'print_and_log', 'set_console_level', 'setup_logging'
]
