from typing import Annotated, List, Optional

import typer

from traceforward_cli.console.console import Console
from traceforward_cli.models import EventType
from traceforward_cli.services import close_forwarder, create_forwarder
from traceforward_core.models import TraceEventCache


app = typer.Typer()

console = Console()


@app.command()
def event(
    message: Annotated[
        str,
        typer.Argument(help='Message, or format string when --arg is given.'),
    ],
    event_type: Annotated[
        EventType,
        typer.Option('--type', '-t', help='Type of the trace event.'),
    ] = EventType.INFORMATION,
    event_id: Annotated[
        int,
        typer.Option('--id', help='Numeric identifier of the event.'),
    ] = 0,
    source: Annotated[
        str,
        typer.Option('--source', '-s', help='Name of the source raising the event.'),
    ] = 'cli',
    args: Annotated[
        Optional[List[str]],
        typer.Option('--arg', '-a', help='Value substituted into the message. Repeatable.'),
    ] = None,
    instrumentation_key: Annotated[
        Optional[str],
        typer.Option('--key', '-k', help='Instrumentation key, overrides the configured one.'),
    ] = None,
    console_output: Annotated[
        bool,
        typer.Option('--console', help='Print the telemetry to stdout.'),
    ] = False,
):
    """Forward a trace event to the telemetry service."""
    forwarder = create_forwarder(instrumentation_key, console_output)

    try:
        forwarder.trace_event(
            TraceEventCache(),
            source,
            event_type.to_trace_event_type(),
            event_id,
            message,
            *(args or []),
        )
    except (IndexError, KeyError, ValueError) as e:
        console.error(f'Invalid message format: {str(e)}')
        raise typer.Exit(1)
    finally:
        close_forwarder(forwarder)

    console.success(f'Forwarded {event_type.value} event {event_id} from {source}.')
