"""Test suite for the version command."""

from typer.testing import CliRunner
from click.utils import strip_ansi

from traceforward_core import __version__
from traceforward_cli.commands.version import app
from traceforward_cli.cli import app as cli_app


def test_version_command_prints_versions():
    result = CliRunner().invoke(app)

    assert result.exit_code == 0

    cleaned_output = strip_ansi(result.stdout)

    assert 'Version:' in cleaned_output
    assert f'SD: {__version__}' in cleaned_output
    assert 'Python' in cleaned_output


def test_cli_lists_commands():
    result = CliRunner().invoke(cli_app, ['--help'])

    assert result.exit_code == 0

    cleaned_output = strip_ansi(result.stdout)

    for command in ('event', 'write', 'data', 'version'):
        assert command in cleaned_output


def test_cli_version_option():
    result = CliRunner().invoke(cli_app, ['--version'])

    assert result.exit_code == 0
    assert 'TraceForward' in strip_ansi(result.stdout)
