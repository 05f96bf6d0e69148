# Use an explicit re-export https://github.com/astral-sh/ruff/issues/5697#issuecomment-1631647211

from traceforward_core.models.models import (
    TraceEventType as TraceEventType,
    SeverityLevel as SeverityLevel,
    TraceEventCache as TraceEventCache,
    TraceEventDescriptor as TraceEventDescriptor,
    TraceTelemetry as TraceTelemetry,
)

from traceforward_core.models.config import (
    BaseConfig as BaseConfig,
    TelemetryConfig as TelemetryConfig,
    TraceForwardConfig as TraceForwardConfig,
)
