import os
import threading
from datetime import datetime, timezone
from enum import IntEnum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class TraceEventType(IntEnum):
    """Type of event that caused a trace.

    Values match the flags used by the standard tracing framework, so that
    listeners written against it keep the same numbering.
    """

    CRITICAL = 0x01
    ERROR = 0x02
    WARNING = 0x04
    INFORMATION = 0x08
    VERBOSE = 0x10
    START = 0x0100
    STOP = 0x0200
    SUSPEND = 0x0400
    RESUME = 0x0800
    TRANSFER = 0x1000


class SeverityLevel(IntEnum):
    """Telemetry side classification of a trace message."""

    VERBOSE = 0
    INFORMATION = 1
    WARNING = 2
    ERROR = 3
    CRITICAL = 4


class TraceEventCache(BaseModel):
    """Context captured where the trace event was raised."""

    process_id: int = Field(default_factory=os.getpid)
    thread_id: int = Field(default_factory=threading.get_ident)
    date_time: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    model_config = ConfigDict(frozen=True)


class TraceEventDescriptor(BaseModel):
    """All the parameters of a trace call, as seen by a filter.

    Only the fields relevant to the call are populated: `args` for formatted
    events, `data` for a single datum and `data_array` for a data sequence.
    """

    event_cache: Any = None
    source: Optional[str] = ''
    event_type: TraceEventType | int = TraceEventType.VERBOSE
    id: int = 0
    message: Optional[str] = None
    args: Optional[tuple[Any, ...]] = None
    data: Any = None
    data_array: Optional[tuple[Any, ...]] = None

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)


class TraceTelemetry(BaseModel):
    """A single trace message submitted to the telemetry client."""

    message: str
    severity_level: Optional[SeverityLevel] = None
    properties: dict[str, str] = Field(default_factory=dict)
