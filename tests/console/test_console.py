"""
Unit tests for the Console class.

Tests cover theme detection and the message helpers used by the commands.
"""

import os
from unittest.mock import patch

import pytest

from traceforward_cli.console.console import Console, COLORS_DARK, COLORS_LIGHT
from traceforward_core.models.config import TraceForwardConfig


class TestConsoleThemeDetection:
    """Tests for terminal background detection and theme selection."""

    def test_detect_terminal_background_from_config_light(self):
        """Test theme detection from TraceForwardConfig - light theme."""
        config = TraceForwardConfig(theme='light')
        assert Console.detect_terminal_background(config) == 'light'

    @patch.dict(os.environ, {'COLORFGBG': '15;0'})
    def test_detect_terminal_background_from_colorfgbg_dark(self):
        """Test theme detection from COLORFGBG environment variable - dark."""
        assert Console.detect_terminal_background() == 'dark'

    @patch.dict(os.environ, {'COLORFGBG': '0;7'})
    def test_detect_terminal_background_from_colorfgbg_light(self):
        """Test theme detection from COLORFGBG environment variable - light."""
        assert Console.detect_terminal_background() == 'light'

    @patch.dict(os.environ, {'COLORFGBG': 'invalid;data'})
    def test_detect_terminal_background_invalid_colorfgbg(self):
        """Test theme detection with invalid COLORFGBG defaults to dark."""
        assert Console.detect_terminal_background() == 'dark'

    def test_console_selects_palette(self):
        assert Console(theme_mode='light').COLORS == COLORS_LIGHT
        assert Console(theme_mode='dark').COLORS == COLORS_DARK


class TestConsoleMessages:
    @pytest.fixture
    def console(self):
        console = Console(theme_mode='dark')
        console.console.record = True
        return console

    @pytest.mark.parametrize('method', ['success', 'info', 'error'])
    def test_message_helpers_print_text(self, console, method):
        getattr(console, method)('all good')

        assert 'all good' in console.console.export_text()

    def test_highlight_prints_text(self, console):
        console.highlight('TraceForward')

        assert 'TraceForward' in console.console.export_text()
