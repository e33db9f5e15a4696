from __future__ import annotations

import logging
import os

from fastapi import FastAPI
from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.propagate import set_global_textmap
from opentelemetry.sdk.resources import SERVICE_NAME, Resource
from opentelemetry.sdk.trace import SpanProcessor, TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor
from opentelemetry.trace.propagation.tracecontext import TraceContextTextMapPropagator

_TRACER_PROVIDER: TracerProvider | None = None
logger = logging.getLogger(__name__)


def _otlp_span_processor(endpoint: str) -> SpanProcessor | None:
    try:
        exporter = OTLPSpanExporter(
            endpoint=endpoint,
            insecure=endpoint.startswith("http://"),
        )
    except Exception:
        logger.exception("otel_exporter_setup_failed")
        return None
    return BatchSpanProcessor(exporter)


def _tracer_provider() -> TracerProvider:
    global _TRACER_PROVIDER
    if _TRACER_PROVIDER is not None:
        return _TRACER_PROVIDER

    service_name = os.getenv("OTEL_SERVICE_NAME", "fos-backend")
    endpoint = os.getenv("OTEL_EXPORTER_OTLP_ENDPOINT")

    provider = TracerProvider(resource=Resource.create({SERVICE_NAME: service_name}))
    if endpoint:
        processor = _otlp_span_processor(endpoint)
        if processor is not None:
            provider.add_span_processor(processor)

    trace.set_tracer_provider(provider)
    set_global_textmap(TraceContextTextMapPropagator())
    _TRACER_PROVIDER = provider
    return provider


def configure_otel(app: FastAPI) -> None:
    # One provider per process; each app instance still gets instrumented.
    FastAPIInstrumentor.instrument_app(app, tracer_provider=_tracer_provider())
