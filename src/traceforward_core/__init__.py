"""
TraceForward core library.

Forwards tracing and logging output to a telemetry ingestion client.

Usage:
    from traceforward_core import TraceForwarder, TraceEventType

    forwarder = TraceForwarder(instrumentation_key='my-key')
    forwarder.trace_event(None, 'billing', TraceEventType.ERROR, 500, 'payment failed')
"""

from traceforward_core.version import __version__
from traceforward_core.models import (
    SeverityLevel,
    TelemetryConfig,
    TraceEventCache,
    TraceEventDescriptor,
    TraceEventType,
    TraceForwardConfig,
    TraceTelemetry,
)
from traceforward_core.listeners import (
    EventTypeFilter,
    PredicateFilter,
    SourceFilter,
    TraceFilter,
    TraceForwarder,
    TraceListener,
    TraceListenerHandler,
    get_severity_level,
)
from traceforward_core.telemetry import TelemetryClient, TelemetryContext

__all__ = [
    '__version__',
    'EventTypeFilter',
    'PredicateFilter',
    'SeverityLevel',
    'SourceFilter',
    'TelemetryClient',
    'TelemetryConfig',
    'TelemetryContext',
    'TraceEventCache',
    'TraceEventDescriptor',
    'TraceEventType',
    'TraceFilter',
    'TraceForwardConfig',
    'TraceForwarder',
    'TraceListener',
    'TraceListenerHandler',
    'TraceTelemetry',
    'get_severity_level',
]
