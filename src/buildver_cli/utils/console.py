"""Console utility functions for formatting and output."""

import click
from typing import Optional

from colorama import Fore, Style, just_fix_windows_console
from rich.console import Console

just_fix_windows_console()


# Status symbols for consistent iconography
STATUS_SYMBOLS = {
    'success': '✨',
    'check': '✅',
    'info': '💡',
    'gear': '⚙️',
    'folder': '📁',
    'pencil': '📝',
    'search': '🔍',
    'warning': '⚠️',
    'error': '❌',
    'metrics': '📊'
}


def _get_console() -> Optional[Console]:
    """Get a Rich console bound to the current stdout."""
    try:
        return Console()
    except Exception:
        return None


def _rich_echo(message: str, color: str = "white", bold: bool = False, symbol: str = None):
    """Echo message with Rich formatting or colorama fallback."""
    if symbol and symbol in STATUS_SYMBOLS:
        message = f"{STATUS_SYMBOLS[symbol]} {message}"

    console = _get_console()
    if console:
        style_str = f"bold {color}" if bold else color
        # Paths and ids are printed verbatim, never as rich markup
        console.print(message, style=style_str, markup=False, highlight=False, soft_wrap=True)
        return

    color_map = {
        'red': Fore.RED,
        'green': Fore.GREEN,
        'yellow': Fore.YELLOW,
        'blue': Fore.BLUE,
        'cyan': Fore.CYAN,
        'white': Fore.WHITE,
        'muted': Fore.WHITE,
    }
    color_code = color_map.get(color, Fore.WHITE)
    style_code = Style.BRIGHT if bold else ""
    click.echo(f"{color_code}{style_code}{message}{Style.RESET_ALL}")


def _rich_success(message: str, symbol: str = None):
    """Display success message with green color and bold styling."""
    _rich_echo(message, color="green", symbol=symbol, bold=True)


def _rich_error(message: str, symbol: str = None):
    """Display error message with red color."""
    _rich_echo(message, color="red", symbol=symbol)


def _rich_warning(message: str, symbol: str = None):
    """Display warning message with yellow color."""
    _rich_echo(message, color="yellow", symbol=symbol)


def _rich_info(message: str, symbol: str = None):
    """Display info message with blue color."""
    _rich_echo(message, color="blue", symbol=symbol)
