"""Utility modules for truct."""

from .console import (
    _rich_error,
    _rich_echo,
    _rich_exception,
    _plain_echo,
    _get_console,
    _get_err_console,
    STATUS_SYMBOLS
)

__all__ = [
    '_rich_error',
    '_rich_echo',
    '_rich_exception',
    '_plain_echo',
    '_get_console',
    '_get_err_console',
    'STATUS_SYMBOLS'
]
