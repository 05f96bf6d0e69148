from traceforward_core.listeners.abstract_listener import (
    TraceListener as TraceListener,
)
from traceforward_core.listeners.filters import (
    TraceFilter as TraceFilter,
    PredicateFilter as PredicateFilter,
    SourceFilter as SourceFilter,
    EventTypeFilter as EventTypeFilter,
)
from traceforward_core.listeners.trace_forwarder import (
    TraceForwarder as TraceForwarder,
    get_severity_level as get_severity_level,
)
from traceforward_core.listeners.logging_handler import (
    TraceListenerHandler as TraceListenerHandler,
)
