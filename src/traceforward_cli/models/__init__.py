from enum import Enum

from traceforward_core.models import TraceEventType


class EventType(str, Enum):
    """Valid trace event types."""

    CRITICAL = 'critical'
    ERROR = 'error'
    WARNING = 'warning'
    INFORMATION = 'information'
    VERBOSE = 'verbose'
    START = 'start'
    STOP = 'stop'
    SUSPEND = 'suspend'
    RESUME = 'resume'
    TRANSFER = 'transfer'

    def to_trace_event_type(self) -> TraceEventType:
        return TraceEventType[self.name]
