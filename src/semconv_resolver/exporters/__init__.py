"""Span exporters for resolver traces."""

from .otlp_exporter import OTLP_PROTOCOLS, create_otlp_trace_exporter, otlp_traces_endpoint
from .provider import configure_tracer_provider

__all__ = [
    "OTLP_PROTOCOLS",
    "create_otlp_trace_exporter",
    "otlp_traces_endpoint",
    "configure_tracer_provider",
]
