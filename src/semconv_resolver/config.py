"""
Configuration for semantic convention registry resolution.

Values come from the environment so the CLI and tests can override them:
- SEMCONV_REGISTRY: registry path(s) to load, separated by os.pathsep
- SEMCONV_REGISTRY_URL: registry identifier recorded in the resolved registry
- SEMCONV_RESOLVER_LINEAGE: set to 0/false/no/off to disable lineage tracking
- SEMCONV_RESOLVER_LOG_LEVEL: log level for the CLI (default WARNING)
- OTEL_EXPORTER_OTLP_ENDPOINT: OTLP endpoint for resolver traces
"""

import os
from pathlib import Path
from typing import Any

import yaml

DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_SERVICE_NAME = "semconv-resolver"
# Suffixes of files picked up when a registry path is a directory.
SEMCONV_FILE_SUFFIXES = (".yaml", ".yml")

_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


def get_registry_paths() -> list[Path]:
    """Registry paths from SEMCONV_REGISTRY (empty list when unset)."""
    raw = os.environ.get("SEMCONV_REGISTRY", "").strip()
    if not raw:
        return []
    return [Path(p.strip()) for p in raw.split(os.pathsep) if p.strip()]


def get_registry_url(default: str | None = None) -> str:
    """Registry identifier from SEMCONV_REGISTRY_URL, else default, else the first registry path."""
    env_url = os.environ.get("SEMCONV_REGISTRY_URL", "").strip()
    if env_url:
        return env_url
    if default:
        return default
    paths = get_registry_paths()
    return str(paths[0]) if paths else ""


def lineage_enabled() -> bool:
    """Whether group lineage is tracked during resolution. Default: enabled."""
    raw = os.environ.get("SEMCONV_RESOLVER_LINEAGE", "").strip().lower()
    return raw not in _FALSE_VALUES


def get_log_level() -> str:
    """Log level name for the CLI."""
    return (os.environ.get("SEMCONV_RESOLVER_LOG_LEVEL") or DEFAULT_LOG_LEVEL).strip().upper()


def get_otlp_endpoint() -> str | None:
    """OTLP endpoint for resolver traces; None disables export."""
    endpoint = os.environ.get("OTEL_EXPORTER_OTLP_ENDPOINT", "").strip()
    return endpoint or None


def load_yaml(path: Path) -> Any:
    """Load a YAML document. Missing files and parse errors propagate to the caller."""
    with path.open(encoding="utf-8") as f:
        return yaml.safe_load(f)
