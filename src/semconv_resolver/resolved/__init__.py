"""Resolved semantic convention registry model."""

from .attribute import Attribute, AttributeRef, Stability
from .lineage import FieldId, FieldLineage, GroupLineage, ResolutionMode, record_field_lineage
from .registry import (
    AttributeGroupKind,
    Constraint,
    EventGroupKind,
    Group,
    Instrument,
    MetricGroupGroupKind,
    MetricGroupKind,
    Registry,
    ResourceGroupKind,
    ScopeGroupKind,
    SpanGroupKind,
    TypedGroup,
    typed_group_name,
)

__all__ = [
    "Attribute",
    "AttributeGroupKind",
    "AttributeRef",
    "Constraint",
    "EventGroupKind",
    "FieldId",
    "FieldLineage",
    "Group",
    "GroupLineage",
    "Instrument",
    "MetricGroupGroupKind",
    "MetricGroupKind",
    "Registry",
    "ResolutionMode",
    "ResourceGroupKind",
    "ScopeGroupKind",
    "SpanGroupKind",
    "Stability",
    "TypedGroup",
    "record_field_lineage",
    "typed_group_name",
]
