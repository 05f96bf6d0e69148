"""Command line interface for TraceForward."""

from typing import Annotated, Optional

import typer
from importlib.metadata import version as metadata_version

from traceforward_cli.console.console import Console
from traceforward_cli.commands.event import app as event_command
from traceforward_cli.commands.write import app as write_command
from traceforward_cli.commands.data import app as data_command
from traceforward_cli.commands.version import app as version_command


# Create typer app
app = typer.Typer(
    name='traceforward',
    help='Forward traces to a telemetry service.',
    no_args_is_help=True,
    add_completion=False,
    pretty_exceptions_enable=False,
)

console = Console()


def version_callback(value: bool):
    if value:
        try:
            package_version = metadata_version('traceforward')
        except Exception:
            package_version = 'Development version'

        console.print(f'[{console.COLORS["blue"]}]▣ TraceForward[/{console.COLORS["blue"]}]. Traces to telemetry.')
        console.newline()
        console.info(f'Version: {package_version}')
        console.newline()
        console.muted('For more information run `traceforward version`.')
        raise typer.Exit()


@app.callback()
def callback(
    version: Annotated[
        Optional[bool],
        typer.Option(
            '--version',
            callback=version_callback,
            is_eager=True,
            help='Show TraceForward version',
        ),
    ] = None,
):
    """Define the common command options"""


app.add_typer(event_command)
app.add_typer(write_command)
app.add_typer(data_command)
app.add_typer(version_command)


def main():
    """Entry point for the CLI."""
    app()
