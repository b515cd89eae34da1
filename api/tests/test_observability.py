# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
Tests for logging and tracing setup.
"""

import logging
from unittest.mock import patch

from observability.config import setup_observability, setup_structured_logging


class TestObservabilityConfig:
    """Test observability configuration by environment."""

    @patch('observability.config.trace.set_tracer_provider')
    @patch('observability.config.setup_structured_logging')
    def test_tracing_disabled(self, mock_logging, mock_set_provider, monkeypatch):
        """Test logging is still configured when tracing is disabled."""
        monkeypatch.setenv('OTEL_ENABLED', 'false')
        monkeypatch.setenv('ENVIRONMENT', 'test')

        setup_observability()

        mock_logging.assert_called_once_with('test')
        mock_set_provider.assert_not_called()

    @patch('observability.config.OTLPSpanExporter')
    @patch('observability.config.trace.set_tracer_provider')
    @patch('observability.config.setup_structured_logging')
    def test_production_without_collector(self, mock_logging, mock_set_provider, mock_exporter, monkeypatch):
        """Test production tracing skips the OTLP exporter when no endpoint is set."""
        monkeypatch.setenv('OTEL_ENABLED', 'true')
        monkeypatch.setenv('ENVIRONMENT', 'production')
        monkeypatch.delenv('OTEL_EXPORTER_OTLP_ENDPOINT', raising=False)

        setup_observability()

        mock_set_provider.assert_called_once()
        mock_exporter.assert_not_called()

    @patch('observability.config.OTLPSpanExporter')
    @patch('observability.config.trace.set_tracer_provider')
    @patch('observability.config.setup_structured_logging')
    def test_production_with_collector(self, mock_logging, mock_set_provider, mock_exporter, monkeypatch):
        """Test production tracing exports to the configured collector."""
        monkeypatch.setenv('OTEL_ENABLED', 'true')
        monkeypatch.setenv('ENVIRONMENT', 'production')
        monkeypatch.setenv('OTEL_EXPORTER_OTLP_ENDPOINT', 'http://collector:4317')

        setup_observability()

        assert mock_exporter.call_args.kwargs['endpoint'] == 'http://collector:4317'

    @patch('observability.config.logging.basicConfig')
    def test_log_levels(self, mock_basic_config):
        """Test log levels follow the environment."""
        setup_structured_logging('production')
        assert mock_basic_config.call_args.kwargs['level'] == logging.WARNING

        setup_structured_logging('staging')
        assert mock_basic_config.call_args.kwargs['level'] == logging.INFO


class TestObservabilityMiddleware:
    """Test request logging hooks."""

    def test_request_logged(self, client, caplog):
        """Test completed requests are logged with their status."""
        with caplog.at_level(logging.INFO, logger='observability.middleware'):
            client.get('/api/disasters')

        records = [r for r in caplog.records if r.getMessage() == "HTTP request completed"]
        assert len(records) == 1
        assert records[0].extra_fields['path'] == '/api/disasters'
        assert records[0].extra_fields['status_code'] == 200

    def test_no_trace_header_without_tracing(self, client):
        """Test no trace id is exposed when tracing is disabled."""
        response = client.get('/api/disasters')

        assert 'X-Trace-Id' not in response.headers
