import logging
from unittest.mock import Mock, patch

import pytest
from opentelemetry.sdk.trace.export import SpanExportResult
from opentelemetry.sdk.trace.export.in_memory_span_exporter import (
    InMemorySpanExporter,
)

from traceforward_core.models import SeverityLevel, TelemetryConfig, TraceTelemetry
from traceforward_core.telemetry import (
    LoggingSpanExporter,
    TelemetryClient,
    TelemetryContext,
)


@pytest.fixture
def exporter():
    return InMemorySpanExporter()


@pytest.fixture
def client(exporter):
    return TelemetryClient(config=TelemetryConfig(enable=False), exporter=exporter)


class TestTelemetryContext:
    def test_defaults_are_empty(self):
        context = TelemetryContext()

        assert context.instrumentation_key is None
        assert context.sdk_version is None

    def test_key_comes_from_config(self):
        client = TelemetryClient(config=TelemetryConfig(instrumentation_key='cfg-key'))

        assert client.context.instrumentation_key == 'cfg-key'


class TestTrack:
    def test_track_records_one_span(self, client, exporter):
        client.track(
            TraceTelemetry(
                message='hello',
                severity_level=SeverityLevel.WARNING,
                properties={'EventId': '7'},
            )
        )

        spans = exporter.get_finished_spans()
        assert len(spans) == 1
        assert spans[0].name == 'trace'
        assert spans[0].attributes['message'] == 'hello'
        assert spans[0].attributes['severity_level'] == 'warning'
        assert spans[0].attributes['properties.EventId'] == '7'

    def test_track_stamps_context(self, client, exporter):
        client.context.instrumentation_key = 'my-key'
        client.context.sdk_version = 'SD: 1.0.0'

        client.track(TraceTelemetry(message='hello'))

        attributes = exporter.get_finished_spans()[0].attributes
        assert attributes['instrumentation_key'] == 'my-key'
        assert attributes['sdk_version'] == 'SD: 1.0.0'
        assert 'severity_level' not in attributes

    def test_track_without_key_omits_attribute(self, client, exporter):
        client.track(TraceTelemetry(message='hello'))

        assert 'instrumentation_key' not in exporter.get_finished_spans()[0].attributes

    def test_service_name_is_reported(self, exporter):
        client = TelemetryClient(
            config=TelemetryConfig(service_name='billing'), exporter=exporter
        )

        client.track(TraceTelemetry(message='hello'))

        span = exporter.get_finished_spans()[0]
        assert span.resource.attributes['service.name'] == 'billing'

    def test_clients_do_not_share_spans(self, exporter):
        other_exporter = InMemorySpanExporter()
        first = TelemetryClient(exporter=exporter)
        TelemetryClient(exporter=other_exporter)

        first.track(TraceTelemetry(message='only first'))

        assert len(exporter.get_finished_spans()) == 1
        assert other_exporter.get_finished_spans() == ()

    def test_flush_returns_true(self, client):
        assert client.flush() is True


class TestEnabledExport:
    @patch('traceforward_core.telemetry.client.OTLPSpanExporter')
    def test_enabled_config_creates_otlp_exporter(self, mock_exporter):
        config = TelemetryConfig(
            enable=True,
            endpoint='http://collector:4318/',
            api_key='secret',
            authentication_header='X-Api-Key',
        )

        client = TelemetryClient(config=config)

        assert client.is_enabled
        mock_exporter.assert_called_once_with(
            endpoint='http://collector:4318/v1/traces',
            headers={'X-Api-Key': 'secret'},
            timeout=10,
        )
        client.shutdown()

    @patch('traceforward_core.telemetry.client.OTLPSpanExporter')
    def test_disabled_config_creates_no_exporter(self, mock_exporter):
        client = TelemetryClient(config=TelemetryConfig(enable=False))

        assert not client.is_enabled
        mock_exporter.assert_not_called()


class TestLoggingSpanExporter:
    def test_export_logs_and_delegates(self):
        wrapped = Mock()
        wrapped.export.return_value = SpanExportResult.SUCCESS
        logger = Mock(spec=logging.Logger)
        exporter = LoggingSpanExporter(wrapped, 'http://collector', logger)

        result = exporter.export(['span-a', 'span-b'])

        assert result == SpanExportResult.SUCCESS
        wrapped.export.assert_called_once_with(['span-a', 'span-b'])
        logger.debug.assert_called_once_with('Sending 2 traces to http://collector')

    def test_empty_batch_is_not_logged(self):
        wrapped = Mock()
        logger = Mock(spec=logging.Logger)

        LoggingSpanExporter(wrapped, 'http://collector', logger).export([])

        logger.debug.assert_not_called()

    def test_shutdown_and_flush_delegate(self):
        wrapped = Mock()
        exporter = LoggingSpanExporter(wrapped, 'http://collector')

        exporter.force_flush(100)
        exporter.shutdown()

        wrapped.force_flush.assert_called_once_with(100)
        wrapped.shutdown.assert_called_once_with()


class TestDefaultLogger:
    def test_default_logger_is_isolated_and_silent(self):
        client = TelemetryClient(config=TelemetryConfig(enable=False))

        assert client._logger.name == 'traceforward.telemetry'
        assert client._logger.propagate is False
        assert [type(h) for h in client._logger.handlers] == [logging.NullHandler]

    def test_given_logger_is_used(self):
        logger = logging.getLogger('custom.telemetry')

        client = TelemetryClient(config=TelemetryConfig(enable=False), logger=logger)

        assert client._logger is logger
