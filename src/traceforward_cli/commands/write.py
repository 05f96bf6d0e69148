from typing import Annotated, Optional

import typer

from traceforward_cli.console.console import Console
from traceforward_cli.services import close_forwarder, create_forwarder


app = typer.Typer()

console = Console()


@app.command()
def write(
    message: Annotated[str, typer.Argument(help='Message to forward.')],
    line: Annotated[
        bool,
        typer.Option('--line', '-l', help='Append the platform line terminator.'),
    ] = False,
    instrumentation_key: Annotated[
        Optional[str],
        typer.Option('--key', '-k', help='Instrumentation key, overrides the configured one.'),
    ] = None,
    console_output: Annotated[
        bool,
        typer.Option('--console', help='Print the telemetry to stdout.'),
    ] = False,
):
    """Forward a raw message as verbose telemetry."""
    forwarder = create_forwarder(instrumentation_key, console_output)

    try:
        if line:
            forwarder.write_line(message)
        else:
            forwarder.write(message)
    finally:
        close_forwarder(forwarder)

    console.success('Forwarded message.')
