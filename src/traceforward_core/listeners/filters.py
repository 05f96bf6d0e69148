from abc import ABC, abstractmethod
from typing import Callable

from traceforward_core.models import TraceEventDescriptor, TraceEventType


class TraceFilter(ABC):
    """Decide whether a trace event reaches a listener."""

    @abstractmethod
    def should_trace(self, descriptor: TraceEventDescriptor) -> bool:
        """Return True when the event described should be forwarded."""
        pass


class PredicateFilter(TraceFilter):
    """Filter delegating the decision to a callable."""

    def __init__(self, predicate: Callable[[TraceEventDescriptor], bool]):
        self.predicate = predicate

    def should_trace(self, descriptor: TraceEventDescriptor) -> bool:
        return bool(self.predicate(descriptor))


class SourceFilter(TraceFilter):
    """Accept only events raised by the named source."""

    def __init__(self, source: str):
        if not source:
            raise ValueError('The source name cannot be empty.')
        self.source = source

    def should_trace(self, descriptor: TraceEventDescriptor) -> bool:
        return descriptor.source == self.source


# Activity types carry no severity and only pass a Verbose threshold
_SEVERITY_RANK = {
    TraceEventType.CRITICAL: 5,
    TraceEventType.ERROR: 4,
    TraceEventType.WARNING: 3,
    TraceEventType.INFORMATION: 2,
    TraceEventType.VERBOSE: 1,
}


class EventTypeFilter(TraceFilter):
    """Accept events at or above a minimum event type.

    Parameters
    ----------
    minimum : TraceEventType
        The least severe event type that passes, one of Critical, Error,
        Warning, Information or Verbose.
    """

    def __init__(self, minimum: TraceEventType = TraceEventType.VERBOSE):
        if minimum not in _SEVERITY_RANK:
            raise ValueError(
                f'Minimum event type must be a severity, got {minimum.name}.'
            )
        self.minimum = minimum

    def should_trace(self, descriptor: TraceEventDescriptor) -> bool:
        rank = _SEVERITY_RANK.get(descriptor.event_type, 0)
        if rank == 0:
            return self.minimum == TraceEventType.VERBOSE
        return rank >= _SEVERITY_RANK[self.minimum]
