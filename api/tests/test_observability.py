# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
Tests for tracing and logging setup.
"""

import logging
from opentelemetry.sdk.trace import TracerProvider

from observability import config as observability_config
from observability.config import setup_observability


class TestSetupObservability:
    """Test environment-driven observability setup."""

    def test_mapping_disables_tracing_over_process_env(self, monkeypatch):
        """Test an injected OTEL_ENABLED wins over the process environment."""
        installed = []
        monkeypatch.setenv("OTEL_ENABLED", "true")
        monkeypatch.setattr(observability_config.trace, "set_tracer_provider", installed.append)

        assert setup_observability({"ENVIRONMENT": "test", "OTEL_ENABLED": "false"}) is False
        assert installed == []

    def test_mapping_enables_tracing_over_process_env(self, monkeypatch, caplog):
        """Test an injected environment installs a tracer provider."""
        installed = []
        monkeypatch.setenv("OTEL_ENABLED", "false")
        monkeypatch.setattr(observability_config.trace, "set_tracer_provider", installed.append)

        with caplog.at_level(logging.WARNING, logger="observability.config"):
            assert setup_observability({"ENVIRONMENT": "staging", "OTEL_ENABLED": "true"}) is True

        assert len(installed) == 1
        assert isinstance(installed[0], TracerProvider)
        assert installed[0].resource.attributes["deployment.environment"] == "staging"
        assert "spans will not be exported" in caplog.text
