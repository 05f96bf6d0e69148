"""
TraceForward Telemetry Client.

This module provides the ingestion client the trace forwarder submits to. Each
tracked message becomes one Open Telemetry span, exported to an OTLP collector
when telemetry is enabled.

Usage:
    from traceforward_core.telemetry import TelemetryClient
    from traceforward_core.models import TraceTelemetry, SeverityLevel

    client = TelemetryClient()
    client.context.instrumentation_key = 'my-key'

    client.track(
        TraceTelemetry(message='Job started', severity_level=SeverityLevel.INFORMATION)
    )
    client.flush()
"""

from __future__ import annotations

import logging
from typing import Optional

from opentelemetry.exporter.otlp.proto.http.trace_exporter import OTLPSpanExporter
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import (
    BatchSpanProcessor,
    SimpleSpanProcessor,
    SpanExporter,
    SpanExportResult,
)
from opentelemetry.trace import Tracer

from traceforward_core.logging import create_null_logger
from traceforward_core.models.config import TelemetryConfig
from traceforward_core.models.models import TraceTelemetry

TRACE_SPAN_NAME = 'trace'


class LoggingSpanExporter(SpanExporter):
    """A span exporter that wraps another exporter and logs when spans are sent."""

    def __init__(
        self,
        wrapped_exporter: SpanExporter,
        endpoint: str,
        logger: logging.Logger | None = None,
    ):
        self._wrapped_exporter = wrapped_exporter
        self._endpoint = endpoint
        self._logger = logger or logging.getLogger('traceforward')

    def export(self, spans) -> SpanExportResult:
        if spans:
            span_count = len(spans)
            self._logger.debug(
                f'Sending {span_count} trace{"s" if span_count > 1 else ""} to {self._endpoint}'
            )
        return self._wrapped_exporter.export(spans)

    def shutdown(self):
        return self._wrapped_exporter.shutdown()

    def force_flush(self, timeout_millis: int = 30000):
        return self._wrapped_exporter.force_flush(timeout_millis)


class TelemetryContext:
    """Values attached to every item tracked by a client.

    Attributes:
        instrumentation_key: Key of the telemetry resource receiving the data
        sdk_version: Identifies the component that produced the telemetry
    """

    def __init__(
        self,
        instrumentation_key: Optional[str] = None,
        sdk_version: Optional[str] = None,
    ):
        self.instrumentation_key = instrumentation_key
        self.sdk_version = sdk_version


class TelemetryClient:
    """Telemetry ingestion client.

    Owns a private Open Telemetry tracer provider, so several clients can live
    in the same process without touching the global provider.

    Attributes:
        context: The TelemetryContext stamped on tracked items
        _config: The telemetry configuration
        _provider: The underlying Open Telemetry tracer provider
        _tracer: The tracer used to record spans
        _logger: Logger for configuration and export notifications
    """

    def __init__(
        self,
        config: TelemetryConfig | None = None,
        exporter: SpanExporter | None = None,
        logger: logging.Logger | None = None,
    ):
        """Create the client and wire its span processors.

        Parameters
        ----------
        config : TelemetryConfig, optional
            Telemetry settings. If None, loads them from the environment.
        exporter : SpanExporter, optional
            An exporter that receives every span synchronously, in addition to
            the OTLP exporter configured by `config`.
        logger : logging.Logger, optional
            Logger for notifications. A null logger named
            'traceforward.telemetry' is used if not provided.
        """
        self._config = config or TelemetryConfig()
        if logger is None:
            logger = create_null_logger(name='traceforward.telemetry')

        self._logger = logger

        self.context = TelemetryContext(
            instrumentation_key=self._config.instrumentation_key
        )

        self._provider = TracerProvider(
            resource=Resource.create({'service.name': self._config.service_name})
        )

        if self._config.enable:
            auth_headers = {}

            if self._config.api_key:
                auth_headers = {
                    self._config.authentication_header: self._config.api_key.get_secret_value()
                }

            otlp_exporter = OTLPSpanExporter(
                endpoint=self._config.traces_endpoint,
                headers=auth_headers,
                timeout=self._config.timeout_seconds,
            )

            span_exporter = (
                LoggingSpanExporter(
                    otlp_exporter, self._config.traces_endpoint, self._logger
                )
                if self._config.verbose
                else otlp_exporter
            )

            self._provider.add_span_processor(BatchSpanProcessor(span_exporter))

            self._logger.debug(
                f'Telemetry export enabled to {self._config.traces_endpoint}'
            )

        if exporter is not None:
            self._provider.add_span_processor(SimpleSpanProcessor(exporter))

        self._tracer: Tracer = self._provider.get_tracer('traceforward')

    @property
    def is_enabled(self) -> bool:
        """Check if export to the collector is enabled."""
        return self._config.enable

    def track(self, telemetry: TraceTelemetry) -> None:
        """Submit a trace message.

        Parameters
        ----------
        telemetry : TraceTelemetry
            The message to submit. Its properties are recorded as
            `properties.<key>` span attributes.
        """
        attributes: dict[str, str] = {'message': telemetry.message}

        if telemetry.severity_level is not None:
            attributes['severity_level'] = telemetry.severity_level.name.lower()

        if self.context.instrumentation_key:
            attributes['instrumentation_key'] = self.context.instrumentation_key

        if self.context.sdk_version:
            attributes['sdk_version'] = self.context.sdk_version

        for key, value in telemetry.properties.items():
            attributes[f'properties.{key}'] = value

        span = self._tracer.start_span(TRACE_SPAN_NAME, attributes=attributes)
        span.end()

    def flush(self, timeout_millis: int = 30000) -> bool:
        """Export all tracked items that are still buffered."""
        return self._provider.force_flush(timeout_millis)

    def shutdown(self) -> None:
        """Flush and release the span processors."""
        self._provider.shutdown()
