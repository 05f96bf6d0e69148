"""
TraceForward Telemetry Module.

Provides the Open Telemetry backed client that receives forwarded traces.
"""

from traceforward_core.telemetry.client import (
    LoggingSpanExporter,
    TelemetryClient,
    TelemetryContext,
)

__all__ = [
    'LoggingSpanExporter',
    'TelemetryClient',
    'TelemetryContext',
]
