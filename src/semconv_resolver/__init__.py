"""
Semconv Resolver - resolution of semantic convention registries.

This package turns a set of semantic convention group specifications
(attributes, spans, metrics, events, resources, scopes) into a fully
resolved, deduplicated and deterministically ordered registry.
"""

__version__ = "0.5.0"
