"""
OpenTelemetry tracing for the site API

- FastAPI server spans (health and metrics probes excluded)
- httpx client spans, so every CMS query/mutation and Resend call shows up
  under the request that triggered it
- OTLP export when OTEL_EXPORTER_OTLP_ENDPOINT is set, console export for local debugging
"""

from typing import Any, Optional

from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.instrumentation.httpx import HTTPXClientInstrumentor
from opentelemetry.sdk.resources import (
    DEPLOYMENT_ENVIRONMENT,
    SERVICE_NAME,
    SERVICE_VERSION,
    Resource,
)
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, ConsoleSpanExporter
from opentelemetry.sdk.trace.sampling import ParentBased, TraceIdRatioBased
from opentelemetry.trace import Status, StatusCode

from src.platform.config.core_setting import Settings


class TracingConfig:
    """
    Usage:
        tracing = TracingConfig.from_settings(settings)
        tracing.setup()
        tracing.instrument_httpx()
        ...
        tracing.shutdown()
    """

    def __init__(
        self,
        *,
        service_name: str,
        service_version: str = '0.1.0',
        deploy_env: str = 'local_dev',
        otlp_endpoint: Optional[str] = None,
        enable_console: bool = False,
        sample_ratio: float = 1.0,
    ) -> None:
        self.service_name = service_name
        self.service_version = service_version
        self.deploy_env = deploy_env
        self.otlp_endpoint = otlp_endpoint
        self.enable_console = enable_console
        self.sample_ratio = min(max(sample_ratio, 0.0), 1.0)
        self._provider: TracerProvider | None = None

    @classmethod
    def from_settings(cls, settings: Settings) -> 'TracingConfig':
        return cls(
            service_name=settings.SERVICE_NAME,
            service_version=settings.VERSION,
            deploy_env=settings.DEPLOY_ENV,
            otlp_endpoint=settings.OTEL_EXPORTER_OTLP_ENDPOINT,
            enable_console=settings.OTEL_CONSOLE_EXPORT,
            sample_ratio=settings.OTEL_SAMPLE_RATIO,
        )

    @property
    def exporting(self) -> bool:
        return bool(self.otlp_endpoint or self.enable_console)

    def setup(self) -> None:
        """Install the tracer provider. Call once at startup."""
        resource = Resource(
            attributes={
                SERVICE_NAME: self.service_name,
                SERVICE_VERSION: self.service_version,
                DEPLOYMENT_ENVIRONMENT: self.deploy_env,
            }
        )
        # Follow the caller's sampling decision when the frontend propagates one
        self._provider = TracerProvider(
            resource=resource, sampler=ParentBased(TraceIdRatioBased(self.sample_ratio))
        )

        if self.otlp_endpoint:
            self._provider.add_span_processor(
                BatchSpanProcessor(OTLPSpanExporter(endpoint=self.otlp_endpoint))
            )
        if self.enable_console:
            self._provider.add_span_processor(BatchSpanProcessor(ConsoleSpanExporter()))

        trace.set_tracer_provider(self._provider)

    def instrument_fastapi(self, *, app: Any, excluded_urls: str = 'health,metrics') -> None:
        FastAPIInstrumentor.instrument_app(app, excluded_urls=excluded_urls)

    def instrument_httpx(self) -> None:
        instrumentor = HTTPXClientInstrumentor()
        if not instrumentor.is_instrumented_by_opentelemetry:
            instrumentor.instrument()

    def shutdown(self) -> None:
        if self._provider:
            self._provider.shutdown()


def mark_span_error(span: trace.Span, e: BaseException) -> None:
    """Record an exception that is turned into an error response rather than propagated"""
    span.record_exception(e)
    span.set_status(Status(StatusCode.ERROR, str(e)))
