from typing import Annotated, List, Optional

import typer

from traceforward_cli.console.console import Console
from traceforward_cli.models import EventType
from traceforward_cli.services import close_forwarder, create_forwarder
from traceforward_core.models import TraceEventCache


app = typer.Typer()

console = Console()


@app.command()
def data(
    values: Annotated[List[str], typer.Argument(help='Data values to forward.')],
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
    instrumentation_key: Annotated[
        Optional[str],
        typer.Option('--key', '-k', help='Instrumentation key, overrides the configured one.'),
    ] = None,
    console_output: Annotated[
        bool,
        typer.Option('--console', help='Print the telemetry to stdout.'),
    ] = False,
):
    """Forward trace data to the telemetry service."""
    forwarder = create_forwarder(instrumentation_key, console_output)

    try:
        forwarder.trace_data(
            TraceEventCache(),
            source,
            event_type.to_trace_event_type(),
            event_id,
            list(values),
        )
    finally:
        close_forwarder(forwarder)

    console.success(
        f'Forwarded {len(values)} value{"s" if len(values) != 1 else ""} from {source}.'
    )
