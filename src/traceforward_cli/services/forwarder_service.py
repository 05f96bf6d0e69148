import sys
from typing import Optional

from opentelemetry.sdk.trace.export import ConsoleSpanExporter

from traceforward_core.listeners import TraceForwarder
from traceforward_core.logging import create_isolated_logger
from traceforward_core.models.config import TraceForwardConfig
from traceforward_core.telemetry import TelemetryClient


def create_forwarder(
    instrumentation_key: Optional[str] = None,
    console_output: bool = False,
    config: Optional[TraceForwardConfig] = None,
) -> TraceForwarder:
    """Create a forwarder backed by a client configured from the environment.

    Args:
        instrumentation_key: Overrides the key configured in the environment
        console_output: Also print every tracked span to stdout
        config: Configuration to use instead of the environment

    Returns:
        A TraceForwarder owning a fresh TelemetryClient
    """
    config = config or TraceForwardConfig()

    logger = create_isolated_logger(
        'traceforward.telemetry',
        level=config.logging_level,
        add_file_handler=config.logging_file is not None,
        file_path=config.logging_file,
    )

    client = TelemetryClient(
        config=config.telemetry,
        exporter=ConsoleSpanExporter(out=sys.stdout) if console_output else None,
        logger=logger,
    )

    return TraceForwarder(instrumentation_key=instrumentation_key, telemetry_client=client)


def close_forwarder(forwarder: TraceForwarder) -> None:
    """Flush pending telemetry and shut the forwarder's client down."""
    forwarder.flush()
    forwarder.telemetry_client.shutdown()
