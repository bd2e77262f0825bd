"""Console utility functions for formatting and output."""

from typing import Optional

import click
from rich.console import Console
from rich.theme import Theme


# Status symbols for consistent iconography
STATUS_SYMBOLS = {
    'success': '✓',
    'warning': '⚠',
    'error': '✗',
}

_THEME = Theme({
    "info": "cyan",
    "warning": "yellow",
    "error": "bold red",
    "success": "bold green",
    "muted": "dim white",
    "title": "bold cyan"
})

# Rich consoles resolve sys.stdout/sys.stderr at write time
_console = None
_err_console = None


def _get_console() -> Console:
    """Get the stdout Rich console with lazy loading."""
    global _console
    if _console is None:
        _console = Console(theme=_THEME)
    return _console


def _get_err_console() -> Console:
    """Get the stderr Rich console used for every diagnostic."""
    global _err_console
    if _err_console is None:
        _err_console = Console(theme=_THEME, stderr=True)
    return _err_console


def _rich_echo(message: str, color: str = "white", bold: bool = False,
               symbol: Optional[str] = None, err: bool = False):
    """Echo message with Rich formatting."""
    if symbol and symbol in STATUS_SYMBOLS:
        message = f"{STATUS_SYMBOLS[symbol]} {message}"

    console = _get_err_console() if err else _get_console()
    style = f"bold {color}" if bold else color
    # Paths may contain [brackets]; never treat messages as markup
    console.print(message, style=style, markup=False, highlight=False, soft_wrap=True)


def _rich_error(message: str, symbol: Optional[str] = None):
    """Display error message with red color on the error stream."""
    _rich_echo(message, color="red", symbol=symbol, err=True)


def _rich_exception(exc: BaseException):
    """Render an exception with its traceback on the error stream."""
    console = _get_err_console()
    if exc.__traceback__ is None:
        console.print(f"{type(exc).__name__}: {exc}", style="error", markup=False, soft_wrap=True)
        return
    # print_exception() reads sys.exc_info(), which is only set inside an
    # except block; build the traceback from the exception object instead.
    from rich.traceback import Traceback
    console.print(Traceback.from_exception(type(exc), exc, exc.__traceback__))


def _plain_echo(message: str, err: bool = False):
    """Write an unstyled line; used for the fixed banner and timing lines."""
    click.echo(message, err=err)
