"""Tests for registry statistics."""

from semconv_resolver.resolver import AttributeCatalog, resolve_semconv_registry
from semconv_resolver.schemas import SemConvRegistry
from semconv_resolver.stats import compute_registry_stats


def test_sample_registry_stats(registry_dir) -> None:
    catalog = AttributeCatalog()
    registry = resolve_semconv_registry(catalog, "sample", SemConvRegistry.from_paths([registry_dir]))

    stats = compute_registry_stats(registry, catalog)

    assert stats.group_count == 5
    assert stats.group_count_by_kind == {"attribute_group": 3, "span": 1, "metric": 1}
    assert stats.group_count_by_stability == {"unspecified": 4, "experimental": 1}
    assert stats.deprecated_group_count == 0
    # registry.http 2, common 2, registry.server 2, span 4, metric 2
    assert stats.attribute_ref_count == 12
    assert stats.attribute_count == 6
    assert stats.attribute_count_by_type == {"enum": 1, "int": 4, "string": 1}
    assert "Groups: 5" in str(stats)
