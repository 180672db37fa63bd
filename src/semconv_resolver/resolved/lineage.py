"""
Lineage of resolved groups.

Records, per attribute and per field, how the final value was obtained:
inherited through `extends`, or overridden by a `ref` in the group itself.
Fields without a lineage entry come from the group's own definition.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from .attribute import AttributeRef


class ResolutionMode(Enum):
    """How a field value was obtained."""

    EXTENDS = "extends"
    OVERRIDE = "override"


class FieldId(Enum):
    """Identifier of a group or attribute field tracked by the lineage."""

    GROUP_ATTRIBUTES = "group_attributes"
    ATTRIBUTE_BRIEF = "attribute_brief"
    ATTRIBUTE_EXAMPLES = "attribute_examples"
    ATTRIBUTE_TAG = "attribute_tag"
    ATTRIBUTE_REQUIREMENT_LEVEL = "attribute_requirement_level"
    ATTRIBUTE_SAMPLING_RELEVANT = "attribute_sampling_relevant"
    ATTRIBUTE_NOTE = "attribute_note"
    ATTRIBUTE_STABILITY = "attribute_stability"
    ATTRIBUTE_DEPRECATED = "attribute_deprecated"


@dataclass(frozen=True)
class FieldLineage:
    """Resolution mode of a field and the group the value came from."""

    resolution_mode: ResolutionMode
    group_id: str


@dataclass
class GroupLineage:
    """Provenance of a group plus the field lineage of its attributes."""

    provenance: str
    attributes: dict[AttributeRef, dict[FieldId, FieldLineage]] = field(default_factory=dict)

    def add_attribute_field_lineage(
        self, attr_ref: AttributeRef, field_id: FieldId, field_lineage: FieldLineage
    ) -> None:
        self.attributes.setdefault(attr_ref, {})[field_id] = field_lineage

    def attribute_field_lineage(self, attr_ref: AttributeRef, field_id: FieldId) -> FieldLineage | None:
        return self.attributes.get(attr_ref, {}).get(field_id)

    def to_dict(self) -> dict[str, Any]:
        return {
            "provenance": self.provenance,
            "attributes": {
                ref.index: {
                    field_id.value: {
                        "resolution_mode": fl.resolution_mode.value,
                        "group_id": fl.group_id,
                    }
                    for field_id, fl in sorted(fields.items(), key=lambda kv: kv[0].value)
                }
                for ref, fields in sorted(self.attributes.items())
            },
        }


def record_field_lineage(
    lineage: GroupLineage | None,
    attr_ref: AttributeRef,
    field_id: FieldId,
    field_lineage: FieldLineage,
) -> None:
    """Record a field lineage entry when lineage tracking is enabled for the group."""
    if lineage is not None:
        lineage.add_attribute_field_lineage(attr_ref, field_id, field_lineage)
