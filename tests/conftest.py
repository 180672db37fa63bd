"""Shared fixtures: registry test data and in-memory span capture."""

from pathlib import Path

import pytest
from opentelemetry import trace
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import SimpleSpanProcessor
from opentelemetry.sdk.trace.export.in_memory_span_exporter import InMemorySpanExporter

DATA_DIR = Path(__file__).parent / "data"


@pytest.fixture
def registry_dir() -> Path:
    """Bundled sample registry (HTTP and server groups)."""
    return DATA_DIR / "registry"


@pytest.fixture(scope="session")
def _session_span_exporter() -> InMemorySpanExporter:
    exporter = InMemorySpanExporter()
    provider = TracerProvider()
    provider.add_span_processor(SimpleSpanProcessor(exporter))
    trace.set_tracer_provider(provider)
    return exporter


@pytest.fixture
def span_exporter(_session_span_exporter: InMemorySpanExporter) -> InMemorySpanExporter:
    """Span exporter cleared before each test (the global provider can only be set once)."""
    _session_span_exporter.clear()
    return _session_span_exporter


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Do not let the caller's environment leak into configuration."""
    for name in (
        "SEMCONV_REGISTRY",
        "SEMCONV_REGISTRY_URL",
        "SEMCONV_RESOLVER_LINEAGE",
        "SEMCONV_RESOLVER_LOG_LEVEL",
        "OTEL_EXPORTER_OTLP_ENDPOINT",
    ):
        monkeypatch.delenv(name, raising=False)
