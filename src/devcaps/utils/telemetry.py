"""Tracing for the enhancer.

:func:`get_tracer` works against the OpenTelemetry API alone and yields
no-op spans until :func:`configure_telemetry` installs a real provider.
``devcaps enhance --telemetry`` (or a ``telemetry:`` block in the snapshot)
does that, which needs the ``otel`` extra: ``pip install devcaps[otel]``.
"""

from __future__ import annotations

import sys
from typing import IO

from opentelemetry import trace

ATTR_CAPABILITY_COUNT = "devcaps.capability_count"
ATTR_BROWSER_OVERRIDE = "devcaps.browser_override"
ATTR_DETECTION_TIME_MS = "devcaps.detection_time_ms"
ATTR_PROPERTY_COUNT = "devcaps.property_count"

SERVICE_NAME = "devcaps"

_OTEL_HINT = "Install the tracing extra with: pip install devcaps[otel]"


def get_tracer(name: str | None = None) -> trace.Tracer:
    return trace.get_tracer(name or SERVICE_NAME)


def configure_telemetry(
    *,
    otlp_endpoint: str | None = None,
    stream: IO[str] | None = None,
) -> trace.TracerProvider:
    """Install a tracer provider that exports enhancer spans.

    Spans are written as JSON to *stream* (stderr by default, so profile
    output on stdout stays parseable). With *otlp_endpoint* they are also
    batched to an OTLP/gRPC collector.

    Raises :class:`ImportError` when ``opentelemetry-sdk`` (or, for OTLP,
    ``opentelemetry-exporter-otlp``) is missing.
    """
    try:
        from opentelemetry.sdk.resources import Resource  # pyright: ignore[reportMissingImports]
        from opentelemetry.sdk.trace import TracerProvider  # pyright: ignore[reportMissingImports]
        from opentelemetry.sdk.trace.export import (  # pyright: ignore[reportMissingImports]
            BatchSpanProcessor,
            ConsoleSpanExporter,
            SimpleSpanProcessor,
        )
    except ImportError as exc:
        raise ImportError(f"Tracing needs opentelemetry-sdk. {_OTEL_HINT}") from exc

    provider = TracerProvider(resource=Resource.create({"service.name": SERVICE_NAME}))
    out = stream if stream is not None else sys.stderr
    provider.add_span_processor(SimpleSpanProcessor(ConsoleSpanExporter(out=out)))

    if otlp_endpoint:
        try:
            from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import (  # pyright: ignore[reportMissingImports]
                OTLPSpanExporter,
            )
        except ImportError as exc:
            raise ImportError(
                f"OTLP export needs opentelemetry-exporter-otlp. {_OTEL_HINT}"
            ) from exc
        provider.add_span_processor(BatchSpanProcessor(OTLPSpanExporter(endpoint=otlp_endpoint)))

    trace.set_tracer_provider(provider)
    return provider
