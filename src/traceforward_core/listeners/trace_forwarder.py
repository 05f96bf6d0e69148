import os
from typing import Any, Callable, Optional

from traceforward_core.listeners.abstract_listener import TraceListener
from traceforward_core.listeners.filters import TraceFilter
from traceforward_core.models import (
    SeverityLevel,
    TraceEventCache,
    TraceEventDescriptor,
    TraceEventType,
    TraceTelemetry,
)
from traceforward_core.telemetry import TelemetryClient
from traceforward_core.version import __version__

EVENT_ID_PROPERTY = 'EventId'

_SEVERITY_LEVELS = {
    TraceEventType.INFORMATION: SeverityLevel.INFORMATION,
    TraceEventType.WARNING: SeverityLevel.WARNING,
    TraceEventType.ERROR: SeverityLevel.ERROR,
    TraceEventType.CRITICAL: SeverityLevel.CRITICAL,
}


def get_severity_level(event_type: TraceEventType) -> SeverityLevel:
    """Map a trace event type to the telemetry severity level.

    Start, Stop, Suspend, Resume, Transfer and Verbose all map to Verbose.
    """
    return _SEVERITY_LEVELS.get(event_type, SeverityLevel.VERBOSE)


class TraceForwarder(TraceListener):
    """Listener that routes all tracing output to a telemetry client.

    Every accepted call submits exactly one `TraceTelemetry` to the client.
    Errors raised by the filter, by message formatting or by the client are
    never caught.

    Attributes
    ----------
    telemetry_client : TelemetryClient
        The client receiving the messages. Shared, the forwarder does not
        shut it down.

    Example
    -------
    >>> forwarder = TraceForwarder(instrumentation_key='my-key')
    >>> forwarder.trace_event(None, 'billing', TraceEventType.WARNING, 7, 'retry {0}', 3)
    >>> forwarder.write_line('done')
    """

    def __init__(
        self,
        instrumentation_key: Optional[str] = None,
        telemetry_client: Optional[TelemetryClient] = None,
        filter: TraceFilter | Callable[[TraceEventDescriptor], bool] | None = None,
        name: Optional[str] = None,
    ):
        """Initialize the forwarder.

        Parameters
        ----------
        instrumentation_key : str, optional
            Instrumentation key of your application. An empty or None key
            keeps the key already configured on the client.
        telemetry_client : TelemetryClient, optional
            The client to submit to. A default client is created when None.
        filter : TraceFilter | Callable, optional
            Decides which events are forwarded. All events pass when None.
        name : str, optional
            The listener name.
        """
        super().__init__(name=name, filter=filter)

        self.telemetry_client = (
            telemetry_client if telemetry_client is not None else TelemetryClient()
        )

        if instrumentation_key:
            self.telemetry_client.context.instrumentation_key = instrumentation_key

        self.telemetry_client.context.sdk_version = f'SD: {__version__}'

    def trace_event(
        self,
        event_cache: Optional[TraceEventCache],
        source: str,
        event_type: TraceEventType,
        id: int,
        message: Optional[str] = None,
        *args: Any,
    ) -> None:
        """Forward a trace event.

        Parameters
        ----------
        event_cache : TraceEventCache, optional
            Process, thread and time information of the event.
        source : str
            A name identifying the output, typically the application name.
        event_type : TraceEventType
            The type of event that caused the trace.
        id : int
            A numeric identifier for the event, sent as the `EventId` property.
        message : str, optional
            The message, or a format string when `args` are given. When None
            the message is the identifier itself.
        *args : Any
            Positional values substituted into `message`.
        """
        if message is None:
            message = str(id)
        elif args:
            if not self._should_trace(
                event_cache, source, event_type, id, message, args
            ):
                return

            message = message.format(*args)

        if not self._should_trace(event_cache, source, event_type, id, message):
            return

        self._track(message, event_type, id)

    def trace_data(
        self,
        event_cache: Optional[TraceEventCache],
        source: str,
        event_type: TraceEventType,
        id: int,
        data: Any,
    ) -> None:
        """Forward trace data.

        A list or tuple is forwarded as a data array, anything else as a
        single datum. Elements are rendered with `str()` and joined by
        `", "`, None elements are rendered as an empty string.
        """
        if not isinstance(data, (list, tuple)):
            if not self._should_trace(
                event_cache, source, event_type, id, '', data=data
            ):
                return

            data = [data]

        if not self._should_trace(
            event_cache, source, event_type, id, '', data_array=data
        ):
            return

        message = ', '.join('' if datum is None else str(datum) for datum in data)
        self._track(message, event_type, id)

    def write(self, message: str) -> None:
        """Forward a message as Verbose telemetry without an event identifier."""
        if not self._should_trace(None, '', TraceEventType.VERBOSE, 0, message):
            return

        self._track(message, TraceEventType.VERBOSE, None)

    def write_line(self, message: str) -> None:
        """Forward a message followed by the platform line terminator."""
        self.write(message + os.linesep)

    def flush(self) -> None:
        self.telemetry_client.flush()

    def _track(
        self, message: str, event_type: TraceEventType, id: Optional[int]
    ) -> None:
        telemetry = TraceTelemetry(
            message=message, severity_level=get_severity_level(event_type)
        )

        if id is not None:
            telemetry.properties[EVENT_ID_PROPERTY] = str(id)

        self.telemetry_client.track(telemetry)
