"""Install a tracer provider so resolver spans are exported."""

from opentelemetry import trace
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import (
    BatchSpanProcessor,
    ConsoleSpanExporter,
    SimpleSpanProcessor,
    SpanExporter,
)

from .. import __version__
from ..config import DEFAULT_SERVICE_NAME


def configure_tracer_provider(
    exporter: SpanExporter | None = None,
    service_name: str = DEFAULT_SERVICE_NAME,
    batch: bool = True,
) -> TracerProvider:
    """
    Create a tracer provider exporting to the given exporter (console when None)
    and set it as the global provider.
    """
    resource = Resource.create({"service.name": service_name, "service.version": __version__})
    provider = TracerProvider(resource=resource)
    if exporter is None:
        provider.add_span_processor(SimpleSpanProcessor(ConsoleSpanExporter()))
    elif batch:
        provider.add_span_processor(BatchSpanProcessor(exporter))
    else:
        provider.add_span_processor(SimpleSpanProcessor(exporter))
    trace.set_tracer_provider(provider)
    return provider
