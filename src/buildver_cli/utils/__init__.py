"""Utility modules for buildver-cli."""

from .console import (
    _rich_success,
    _rich_error,
    _rich_warning,
    _rich_info,
    _rich_echo,
    _get_console,
    STATUS_SYMBOLS
)
from .helpers import atomic_write, to_posix_relative

__all__ = [
    '_rich_success',
    '_rich_error',
    '_rich_warning',
    '_rich_info',
    '_rich_echo',
    '_get_console',
    'STATUS_SYMBOLS',
    'atomic_write',
    'to_posix_relative'
]
