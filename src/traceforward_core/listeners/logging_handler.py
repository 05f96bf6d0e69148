"""Route standard library logging records into a TraceListener.

Quick start:
    import logging
    from traceforward_core import TraceForwarder, TraceListenerHandler

    logging.getLogger().addHandler(TraceListenerHandler(TraceForwarder('my-key')))

    logger = logging.getLogger('billing')
    logger.warning('card declined', extra={'event_id': 402})
"""

import logging
from datetime import datetime, timezone

from traceforward_core.listeners.abstract_listener import TraceListener
from traceforward_core.models import TraceEventCache, TraceEventType

# Records from these namespaces are produced while exporting telemetry
DEFAULT_EXCLUDED_LOGGERS = ('traceforward', 'opentelemetry')


def event_type_for_level(levelno: int) -> TraceEventType:
    """Map a logging level number to the closest trace event type."""
    if levelno >= logging.CRITICAL:
        return TraceEventType.CRITICAL
    if levelno >= logging.ERROR:
        return TraceEventType.ERROR
    if levelno >= logging.WARNING:
        return TraceEventType.WARNING
    if levelno >= logging.INFO:
        return TraceEventType.INFORMATION
    return TraceEventType.VERBOSE


class TraceListenerHandler(logging.Handler):
    """logging.Handler that forwards every record as a trace event.

    Args:
        listener:         The TraceListener receiving the events.
        level:            Minimum logging level handled (default: NOTSET).
        excluded_loggers: Logger name prefixes that are never forwarded.
    """

    def __init__(
        self,
        listener: TraceListener,
        level: int = logging.NOTSET,
        excluded_loggers: tuple[str, ...] = DEFAULT_EXCLUDED_LOGGERS,
    ) -> None:
        super().__init__(level)
        self.listener = listener
        self.excluded_loggers = excluded_loggers

    def _is_excluded(self, name: str) -> bool:
        return any(
            name == prefix or name.startswith(prefix + '.')
            for prefix in self.excluded_loggers
        )

    def emit(self, record: logging.LogRecord) -> None:
        """Forward the record as a trace event.

        The event id comes from `extra={'event_id': ...}` and defaults to 0.
        """
        if self._is_excluded(record.name):
            return

        try:
            event_cache = TraceEventCache(
                process_id=record.process or 0,
                thread_id=record.thread or 0,
                date_time=datetime.fromtimestamp(record.created, tz=timezone.utc),
            )
            self.listener.trace_event(
                event_cache,
                record.name,
                event_type_for_level(record.levelno),
                int(getattr(record, 'event_id', 0)),
                self.format(record),
            )
        except Exception:
            self.handleError(record)

    def flush(self) -> None:
        self.listener.flush()
