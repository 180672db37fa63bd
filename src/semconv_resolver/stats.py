"""
Statistics on a resolved semantic convention registry.

Counts groups per kind and stability, attribute references, and the distinct
attributes of the catalog per attribute type.
"""

from collections import Counter
from dataclasses import dataclass, field

from .resolved.registry import Registry, typed_group_name
from .resolver.attribute_catalog import AttributeCatalog
from .schemas.group_spec import EnumAttributeType


@dataclass
class RegistryStats:
    """Summary counts of a resolved registry."""

    registry_url: str
    group_count: int = 0
    group_count_by_kind: dict[str, int] = field(default_factory=dict)
    group_count_by_stability: dict[str, int] = field(default_factory=dict)
    deprecated_group_count: int = 0
    attribute_ref_count: int = 0
    attribute_count: int = 0
    attribute_count_by_type: dict[str, int] = field(default_factory=dict)

    def __str__(self) -> str:
        lines = [f"Registry: {self.registry_url}"]
        lines.append(f"  Groups: {self.group_count}")
        for kind, count in sorted(self.group_count_by_kind.items()):
            lines.append(f"    {kind}: {count}")
        if self.group_count_by_stability:
            lines.append("  Groups by stability:")
            for stability, count in sorted(self.group_count_by_stability.items()):
                lines.append(f"    {stability}: {count}")
        lines.append(f"  Deprecated groups: {self.deprecated_group_count}")
        lines.append(f"  Attribute references: {self.attribute_ref_count}")
        lines.append(f"  Distinct attributes: {self.attribute_count}")
        for attr_type, count in sorted(self.attribute_count_by_type.items()):
            lines.append(f"    {attr_type}: {count}")
        return "\n".join(lines)


def compute_registry_stats(registry: Registry, attr_catalog: AttributeCatalog) -> RegistryStats:
    """Compute statistics; call before draining the catalog."""
    kinds = Counter(typed_group_name(g.typed_group) for g in registry.groups)
    stabilities = Counter(
        g.stability.value if g.stability is not None else "unspecified" for g in registry.groups
    )
    attr_types: Counter[str] = Counter()
    for attribute in attr_catalog.attributes():
        attr_types["enum" if isinstance(attribute.type, EnumAttributeType) else attribute.type] += 1

    return RegistryStats(
        registry_url=registry.registry_url,
        group_count=len(registry.groups),
        group_count_by_kind=dict(kinds),
        group_count_by_stability=dict(stabilities),
        deprecated_group_count=sum(1 for g in registry.groups if g.deprecated is not None),
        attribute_ref_count=sum(len(g.attributes) for g in registry.groups),
        attribute_count=len(attr_catalog),
        attribute_count_by_type=dict(attr_types),
    )
