"""
Flexoki-themed Console class for Rich library
Uses the warm, inky Flexoki color scheme by Steph Ango
https://stephango.com/flexoki
"""

import os

from rich.console import Console as RichConsole
from rich.table import Table
from rich.text import Text
from rich.theme import Theme

from traceforward_core.models.config import TraceForwardConfig

# Flexoki color palette (dark theme - 400 series)
COLORS_DARK = {
    'tx_2': '#CECDC3',
    'tx': '#E6E4D9',
    'red': '#D14D41',
    'yellow': '#D0A215',
    'green': '#879A39',
    'cyan': '#3AA99F',
    'blue': '#4385BE',
}

# Flexoki color palette (light theme - 600 series)
COLORS_LIGHT = {
    'tx_2': '#403E3C',
    'tx': '#100F0F',
    'red': '#AF3029',
    'yellow': '#AD8301',
    'green': '#66800B',
    'cyan': '#24837B',
    'blue': '#205EA6',
}


class Console:
    """
    A themed console wrapper using the Flexoki color scheme.
    Automatically detects terminal background and uses appropriate theme.
    """

    @staticmethod
    def detect_terminal_background(config: TraceForwardConfig = None):
        """
        Detect if the terminal has a light or dark background.
        Returns 'dark' or 'light'.

        Detection methods:
        1. Check TraceForwardConfig theme setting
        2. Check COLORFGBG environment variable
        3. Default to 'dark' if uncertain
        """
        if config is not None and config.theme is not None:
            return config.theme

        # Format is "foreground;background", background 7 or 15 is light
        colorfgbg = os.environ.get('COLORFGBG', '')
        if colorfgbg:
            parts = colorfgbg.split(';')
            if len(parts) >= 2:
                try:
                    bg_color = int(parts[-1])
                    if bg_color in (7, 15):
                        return 'light'
                    elif bg_color in (0, 1, 2, 3, 4, 5, 6, 8):
                        return 'dark'
                except ValueError:
                    pass

        return 'dark'

    def __init__(self, theme_mode=None, config: TraceForwardConfig = None):
        """
        Initialize the console with Flexoki theme.

        Args:
            theme_mode: Optional theme mode ('light' or 'dark').
                       If None, auto-detects based on config or terminal background.
            config: Optional TraceForwardConfig instance for loading theme from configuration.
        """
        if config is None:
            config = TraceForwardConfig()

        if theme_mode is None:
            theme_mode = self.detect_terminal_background(config)

        self.theme_mode = theme_mode
        self.COLORS = COLORS_LIGHT if theme_mode == 'light' else COLORS_DARK

        self.theme = Theme(
            {
                'default': f'{self.COLORS["tx"]}',
                'muted': f'{self.COLORS["tx_2"]}',
                'blue': f'{self.COLORS["blue"]}',
                'success': f'bold {self.COLORS["green"]}',
                'info': f'{self.COLORS["cyan"]}',
                'error': f'bold {self.COLORS["red"]}',
                'highlight': f'bold {self.COLORS["yellow"]}',
            }
        )

        self.console = RichConsole(theme=self.theme)

    def print(self, *args, style=None, **kwargs):
        """Print with optional style."""
        self.console.print(*args, style=style, **kwargs)

    def _icon_and_text(
        self,
        message: str,
        icon: str = '✓',
        icon_style: str = 'default',
        padding: int = 1,
    ):
        grid = Table.grid(padding=(0, padding), expand=False)
        grid.add_column(width=1)
        grid.add_column()

        grid.add_row(Text(icon, style=icon_style), Text(message))

        return grid

    def success(self, message: str, prefix: str = '✓'):
        """Print a success message."""
        self.print(
            self._icon_and_text(message=message, icon=prefix, icon_style='success')
        )

    def info(self, message: str, prefix: str = 'ℹ'):
        """Print an info message."""
        self.print(self._icon_and_text(message=message, icon=prefix, icon_style='info'))

    def error(self, message: str, prefix: str = '✗'):
        """Print an error message."""
        self.print(
            self._icon_and_text(message=message, icon=prefix, icon_style='error')
        )

    def muted(self, message: str):
        """Print muted text."""
        self.print(message, style='muted')

    def highlight(self, message: str):
        """Print highlighted text."""
        self.print(message, style='highlight')

    def newline(self, count: int = 1):
        """Print newlines."""
        self.console.print('\n' * (count - 1))
