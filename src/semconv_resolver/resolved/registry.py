"""
Resolved registry model.

A resolved group carries its attributes as sorted catalog references and a
kind-specific payload (one dataclass per group kind).
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from opentelemetry.trace import SpanKind

from .attribute import AttributeRef, Stability
from .lineage import GroupLineage


class Instrument(Enum):
    """Metric instrument."""

    COUNTER = "counter"
    UP_DOWN_COUNTER = "updowncounter"
    GAUGE = "gauge"
    HISTOGRAM = "histogram"


@dataclass(frozen=True)
class AttributeGroupKind:
    pass


@dataclass(frozen=True)
class SpanGroupKind:
    span_kind: SpanKind | None = None
    events: tuple[str, ...] = ()


@dataclass(frozen=True)
class EventGroupKind:
    name: str | None = None


@dataclass(frozen=True)
class MetricGroupKind:
    metric_name: str | None = None
    instrument: Instrument | None = None
    unit: str | None = None


@dataclass(frozen=True)
class MetricGroupGroupKind:
    pass


@dataclass(frozen=True)
class ResourceGroupKind:
    pass


@dataclass(frozen=True)
class ScopeGroupKind:
    pass


TypedGroup = (
    AttributeGroupKind
    | SpanGroupKind
    | EventGroupKind
    | MetricGroupKind
    | MetricGroupGroupKind
    | ResourceGroupKind
    | ScopeGroupKind
)

_KIND_NAMES: dict[type, str] = {
    AttributeGroupKind: "attribute_group",
    SpanGroupKind: "span",
    EventGroupKind: "event",
    MetricGroupKind: "metric",
    MetricGroupGroupKind: "metric_group",
    ResourceGroupKind: "resource",
    ScopeGroupKind: "scope",
}


def typed_group_name(typed_group: TypedGroup) -> str:
    """Kind name of a typed group (e.g. 'span')."""
    return _KIND_NAMES[type(typed_group)]


def typed_group_to_dict(typed_group: TypedGroup) -> dict[str, Any]:
    """Serializable form of the kind-specific payload."""
    data: dict[str, Any] = {"type": typed_group_name(typed_group)}
    if isinstance(typed_group, SpanGroupKind):
        if typed_group.span_kind is not None:
            data["span_kind"] = typed_group.span_kind.name.lower()
        data["events"] = list(typed_group.events)
    elif isinstance(typed_group, EventGroupKind):
        data["name"] = typed_group.name
    elif isinstance(typed_group, MetricGroupKind):
        data["metric_name"] = typed_group.metric_name
        data["instrument"] = typed_group.instrument.value if typed_group.instrument else None
        data["unit"] = typed_group.unit
    return data


@dataclass(frozen=True)
class Constraint:
    """Resolved group constraint. `include` is carried but not evaluated."""

    any_of: tuple[str, ...] = ()
    include: str | None = None


@dataclass
class Group:
    """Semantic convention group; fully resolved once `extends` is None and all attributes are references."""

    id: str
    typed_group: TypedGroup
    brief: str = ""
    note: str = ""
    prefix: str = ""
    extends: str | None = None
    stability: Stability | None = None
    deprecated: str | None = None
    constraints: list[Constraint] = field(default_factory=list)
    attributes: list[AttributeRef] = field(default_factory=list)
    lineage: GroupLineage | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"id": self.id, **typed_group_to_dict(self.typed_group)}
        data["brief"] = self.brief
        data["note"] = self.note
        data["prefix"] = self.prefix
        if self.stability is not None:
            data["stability"] = self.stability.value
        if self.deprecated is not None:
            data["deprecated"] = self.deprecated
        data["constraints"] = [
            {"any_of": list(c.any_of), **({"include": c.include} if c.include else {})}
            for c in self.constraints
        ]
        data["attributes"] = [ref.index for ref in self.attributes]
        if self.lineage is not None:
            data["lineage"] = self.lineage.to_dict()
        return data


@dataclass
class Registry:
    """Resolved semantic convention registry."""

    registry_url: str
    groups: list[Group] = field(default_factory=list)

    def group(self, group_id: str) -> Group | None:
        for g in self.groups:
            if g.id == group_id:
                return g
        return None

    def to_dict(self) -> dict[str, Any]:
        return {
            "registry_url": self.registry_url,
            "groups": [g.to_dict() for g in self.groups],
        }
