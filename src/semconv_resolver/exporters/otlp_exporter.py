"""OTLP span exporter for resolver traces (HTTP or gRPC)."""

from opentelemetry.sdk.trace.export import SpanExporter

from ..config import get_otlp_endpoint

OTLP_PROTOCOLS = ("http", "grpc")
DEFAULT_OTLP_HTTP_ENDPOINT = "http://localhost:4318"
DEFAULT_OTLP_GRPC_ENDPOINT = "localhost:4317"
_TRACES_PATH = "/v1/traces"


def otlp_traces_endpoint(endpoint: str, protocol: str) -> str:
    """
    Normalize a collector endpoint for the given protocol.

    HTTP endpoints get the `/v1/traces` path appended once. gRPC endpoints are
    reduced to `host:port`, dropping the scheme and any trailing path.

    Raises:
        ValueError: protocol is neither "http" nor "grpc"
    """
    if protocol not in OTLP_PROTOCOLS:
        raise ValueError(f"unsupported OTLP protocol '{protocol}'")
    endpoint = endpoint.strip().rstrip("/")
    if protocol == "grpc":
        for scheme in ("http://", "https://"):
            if endpoint.startswith(scheme):
                endpoint = endpoint[len(scheme):]
        return endpoint.split("/", 1)[0]
    if endpoint.endswith(_TRACES_PATH):
        return endpoint
    return endpoint + _TRACES_PATH


def create_otlp_trace_exporter(endpoint: str | None = None, protocol: str = "http") -> SpanExporter:
    """
    Create the exporter sending resolver spans to a collector.

    Args:
        endpoint: Collector endpoint; OTEL_EXPORTER_OTLP_ENDPOINT, then the
            protocol's local default, when None
        protocol: "http" or "grpc"

    Returns:
        OTLP SpanExporter for the normalized endpoint
    """
    if endpoint is None:
        endpoint = get_otlp_endpoint()
    if endpoint is None:
        endpoint = DEFAULT_OTLP_GRPC_ENDPOINT if protocol == "grpc" else DEFAULT_OTLP_HTTP_ENDPOINT
    traces_endpoint = otlp_traces_endpoint(endpoint, protocol)

    if protocol == "grpc":
        from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter

        return OTLPSpanExporter(endpoint=traces_endpoint, insecure=True)

    from opentelemetry.exporter.otlp.proto.http.trace_exporter import (  # type: ignore[assignment]
        OTLPSpanExporter,
    )

    return OTLPSpanExporter(endpoint=traces_endpoint)
