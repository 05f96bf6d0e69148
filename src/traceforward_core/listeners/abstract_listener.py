from abc import ABC, abstractmethod
from typing import Any, Callable, Optional, Sequence

from traceforward_core.listeners.filters import PredicateFilter, TraceFilter
from traceforward_core.models import (
    TraceEventCache,
    TraceEventDescriptor,
    TraceEventType,
)


class TraceListener(ABC):
    """Define a receiver of trace output.

    This class is intended to be abstract to serve as the starting point for implementing your own listener

    Note to implementers:
    - Subclasses must implement `write` and `write_line`.
    - `trace_event` and `trace_data` render a `<source> <EventType>: <id> : ` header
      followed by the message through `write_line`. Override them to handle
      structured events directly.

    Attributes
    ----------
    name : str
        The listener name, defaults to the class name.

    filter : TraceFilter, optional
        Decides which events reach the listener. A callable taking a
        `TraceEventDescriptor` is wrapped in a `PredicateFilter`.
    """

    name: str

    _filter: Optional[TraceFilter] = None

    def __init__(
        self,
        name: Optional[str] = None,
        filter: TraceFilter | Callable[[TraceEventDescriptor], bool] | None = None,
    ):
        self.name = name or self.__class__.__name__
        self.filter = filter

    @property
    def filter(self) -> Optional[TraceFilter]:
        return self._filter

    @filter.setter
    def filter(self, value: TraceFilter | Callable | None):
        if value is not None and not isinstance(value, TraceFilter):
            value = PredicateFilter(value)
        self._filter = value

    def _should_trace(
        self,
        event_cache: Optional[TraceEventCache],
        source: str,
        event_type: TraceEventType,
        id: int,
        message: Optional[str] = None,
        args: Optional[Sequence[Any]] = None,
        data: Any = None,
        data_array: Optional[Sequence[Any]] = None,
    ) -> bool:
        if self._filter is None:
            return True

        # Built without validation, the filter sees the call arguments as given
        return self._filter.should_trace(
            TraceEventDescriptor.model_construct(
                event_cache=event_cache,
                source=source,
                event_type=event_type,
                id=id,
                message=message,
                args=None if args is None else tuple(args),
                data=data,
                data_array=None if data_array is None else tuple(data_array),
            )
        )

    def trace_event(
        self,
        event_cache: Optional[TraceEventCache],
        source: str,
        event_type: TraceEventType,
        id: int,
        message: Optional[str] = None,
        *args: Any,
    ) -> None:
        """Write a trace event, optionally formatting `message` with `args`."""
        if not self._should_trace(event_cache, source, event_type, id, message, args):
            return

        if message is None:
            message = ''
        elif args:
            message = message.format(*args)

        self._write_header(source, event_type, id)
        self.write_line(message)

    def trace_data(
        self,
        event_cache: Optional[TraceEventCache],
        source: str,
        event_type: TraceEventType,
        id: int,
        data: Any,
    ) -> None:
        """Write trace data. Lists and tuples are written as a data array."""
        data_array = list(data) if isinstance(data, (list, tuple)) else [data]

        if not self._should_trace(
            event_cache, source, event_type, id, '', data_array=data_array
        ):
            return

        self._write_header(source, event_type, id)
        self.write_line(
            ', '.join('' if datum is None else str(datum) for datum in data_array)
        )

    def _write_header(self, source: str, event_type: TraceEventType, id: int) -> None:
        self.write(f'{source} {event_type.name.title()}: {id} : ')

    @abstractmethod
    def write(self, message: str) -> None:
        """Write a message to the listener output."""
        pass

    @abstractmethod
    def write_line(self, message: str) -> None:
        """Write a message followed by a line terminator."""
        pass

    def flush(self) -> None:
        """Flush any buffered output."""
        pass

    def close(self) -> None:
        """Release the listener resources."""
        self.flush()
