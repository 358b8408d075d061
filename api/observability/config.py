"""
OpenTelemetry Configuration

Sets up tracing and logging for the donor eligibility core from an
environment mapping.
"""

import os
import logging
from typing import Mapping, Optional
from opentelemetry import trace
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.sampling import TraceIdRatioBased
from opentelemetry.sdk.trace.export import BatchSpanProcessor, ConsoleSpanExporter
from opentelemetry.sdk.resources import Resource
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter

logger = logging.getLogger(__name__)

SERVICE_NAME = 'pet-donor-core'

SAMPLE_RATIOS = {
    'production': 0.1,
    'staging': 0.5,
}

LOG_LEVELS = {
    'production': logging.WARNING,
    'staging': logging.INFO,
    'development': logging.DEBUG,
    'test': logging.ERROR,
}


def setup_observability(environ: Optional[Mapping[str, str]] = None) -> bool:
    """
    Initialize tracing and logging from environment configuration.

    Args:
        environ: Variable mapping to read, defaults to os.environ

    Returns:
        True when a tracer provider was installed
    """
    if environ is None:
        environ = os.environ

    environment = environ.get('ENVIRONMENT', 'development')
    setup_structured_logging(environment)

    if environ.get('OTEL_ENABLED', 'true').lower() != 'true':
        return False

    tracer_provider = TracerProvider(
        sampler=TraceIdRatioBased(SAMPLE_RATIOS.get(environment, 1.0)),
        resource=Resource.create({
            "service.name": SERVICE_NAME,
            "service.version": environ.get('SERVICE_VERSION', '1.0.0'),
            "deployment.environment": environment
        })
    )

    otlp_endpoint = environ.get('OTEL_EXPORTER_OTLP_ENDPOINT')
    if otlp_endpoint:
        tracer_provider.add_span_processor(
            BatchSpanProcessor(OTLPSpanExporter(endpoint=otlp_endpoint))
        )
    elif environment == 'development':
        tracer_provider.add_span_processor(BatchSpanProcessor(ConsoleSpanExporter()))
    else:
        logger.warning(
            "OTEL_EXPORTER_OTLP_ENDPOINT not set; spans will not be exported",
            extra={"environment": environment}
        )

    trace.set_tracer_provider(tracer_provider)
    return True


def setup_structured_logging(environment: str):
    """Configure logging levels per environment."""
    logging.basicConfig(
        level=LOG_LEVELS.get(environment, logging.INFO),
        format='%(asctime)s %(levelname)s %(name)s %(message)s'
    )

    if environment == 'production':
        logging.getLogger('opentelemetry').setLevel(logging.ERROR)
