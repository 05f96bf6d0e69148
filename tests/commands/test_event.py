"""Test suite for the event command."""

from unittest.mock import patch, MagicMock

import pytest
from typer.testing import CliRunner
from click.utils import strip_ansi

from traceforward_cli.commands.event import app
from traceforward_core.models import TraceEventType


@pytest.fixture
def runner():
    """Fixture providing a CLI runner."""
    return CliRunner()


@pytest.fixture
def mock_forwarder():
    """Fixture replacing the forwarder created by the command."""
    with (
        patch('traceforward_cli.commands.event.create_forwarder') as mock_create,
        patch('traceforward_cli.commands.event.close_forwarder'),
    ):
        forwarder = MagicMock()
        mock_create.return_value = forwarder
        yield forwarder


def test_event_command_formats_arguments(runner, mock_forwarder):
    """Test that --arg values are passed as format arguments."""
    result = runner.invoke(
        app, ['val={0}', '--type', 'warning', '--id', '7', '--arg', '5']
    )

    assert result.exit_code == 0

    args = mock_forwarder.trace_event.call_args.args
    assert args[1:] == ('cli', TraceEventType.WARNING, 7, 'val={0}', '5')
    assert 'Forwarded warning event 7 from cli' in strip_ansi(result.stdout)


def test_event_command_defaults_to_information(runner, mock_forwarder):
    result = runner.invoke(app, ['started', '--source', 'worker'])

    assert result.exit_code == 0
    args = mock_forwarder.trace_event.call_args.args
    assert args[1:] == ('worker', TraceEventType.INFORMATION, 0, 'started')


def test_event_command_reports_bad_format(runner):
    """Test that a format string without matching arguments exits with an error."""
    result = runner.invoke(app, ['{0} {1}', '--arg', 'x'])

    assert result.exit_code == 1
    assert 'Invalid message format' in strip_ansi(result.stdout)


def test_event_command_rejects_unknown_type(runner):
    result = runner.invoke(app, ['hello', '--type', 'fatal'])

    assert result.exit_code != 0


def test_event_command_end_to_end(runner):
    """Test the submitted span carries the event id and severity."""
    result = runner.invoke(
        app, ['disk full', '--type', 'critical', '--id', '3', '--console']
    )

    assert result.exit_code == 0
    output = strip_ansi(result.stdout)
    assert '"message": "disk full"' in output
    assert '"severity_level": "critical"' in output
    assert '"properties.EventId": "3"' in output
