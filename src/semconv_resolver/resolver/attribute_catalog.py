"""
Deduplicating catalog of resolved attributes.

Every distinct resolved attribute gets one AttributeRef, issued in strict
first-seen order. Inline definitions register the "root" attribute for their
full name; references resolve against those roots, merging any overridden
fields into a new (or already known) attribute.
"""

from dataclasses import dataclass
from typing import Any

from ..resolved.attribute import Attribute, AttributeRef
from ..resolved.lineage import (
    FieldId,
    FieldLineage,
    GroupLineage,
    ResolutionMode,
    record_field_lineage,
)
from ..schemas.group_spec import AttributeIdSpec, AttributeRefSpec, AttributeSpec, RequirementLevel
from .translators import resolve_stability

# Ref fields that may override the root attribute, with their lineage field id.
_OVERRIDABLE_FIELDS = (
    ("brief", FieldId.ATTRIBUTE_BRIEF),
    ("examples", FieldId.ATTRIBUTE_EXAMPLES),
    ("tag", FieldId.ATTRIBUTE_TAG),
    ("requirement_level", FieldId.ATTRIBUTE_REQUIREMENT_LEVEL),
    ("sampling_relevant", FieldId.ATTRIBUTE_SAMPLING_RELEVANT),
    ("note", FieldId.ATTRIBUTE_NOTE),
    ("stability", FieldId.ATTRIBUTE_STABILITY),
    ("deprecated", FieldId.ATTRIBUTE_DEPRECATED),
)


@dataclass(frozen=True)
class _RootAttribute:
    attribute: Attribute
    group_id: str


class AttributeCatalog:
    """Catalog of attributes shared by all groups of a registry."""

    def __init__(self):
        self._attribute_refs: dict[Attribute, AttributeRef] = {}
        self._attributes: list[Attribute] = []
        self._root_attributes: dict[str, _RootAttribute] = {}

    def attribute_ref(self, attribute: Attribute) -> AttributeRef:
        """Return the reference of an attribute, issuing the next one if it is new."""
        attr_ref = self._attribute_refs.get(attribute)
        if attr_ref is None:
            attr_ref = AttributeRef(len(self._attributes))
            self._attribute_refs[attribute] = attr_ref
            self._attributes.append(attribute)
        return attr_ref

    def resolve(
        self,
        group_id: str,
        group_prefix: str,
        attribute_spec: AttributeSpec,
        lineage: GroupLineage | None = None,
    ) -> AttributeRef | None:
        """Resolve an attribute spec of a group.

        Inline definitions always resolve. References resolve only once their
        target name has been defined inline somewhere in the registry;
        None is returned otherwise.
        """
        if isinstance(attribute_spec, AttributeIdSpec):
            return self._resolve_definition(group_id, group_prefix, attribute_spec)
        if isinstance(attribute_spec, AttributeRefSpec):
            return self._resolve_reference(group_id, attribute_spec, lineage)
        raise TypeError(f"unsupported attribute spec: {attribute_spec!r}")

    def _resolve_definition(self, group_id: str, group_prefix: str, spec: AttributeIdSpec) -> AttributeRef:
        name = f"{group_prefix}.{spec.id}" if group_prefix else spec.id
        attribute = Attribute(
            name=name,
            type=spec.type,
            brief=spec.brief or "",
            examples=spec.examples,
            tag=spec.tag,
            requirement_level=spec.requirement_level or RequirementLevel(),
            sampling_relevant=spec.sampling_relevant,
            note=spec.note,
            stability=resolve_stability(spec.stability),
            deprecated=spec.deprecated,
        )
        self._root_attributes[name] = _RootAttribute(attribute=attribute, group_id=group_id)
        return self.attribute_ref(attribute)

    def _resolve_reference(
        self, group_id: str, spec: AttributeRefSpec, lineage: GroupLineage | None
    ) -> AttributeRef | None:
        root = self._root_attributes.get(spec.ref)
        if root is None:
            return None

        values: dict[str, Any] = {}
        overridden: list[FieldId] = []
        for field_name, field_id in _OVERRIDABLE_FIELDS:
            value = getattr(spec, field_name)
            if value is None:
                values[field_name] = getattr(root.attribute, field_name)
                continue
            if field_name == "stability":
                value = resolve_stability(value)
            values[field_name] = value
            overridden.append(field_id)

        attr_ref = self.attribute_ref(Attribute(name=spec.ref, type=root.attribute.type, **values))
        for field_id in overridden:
            record_field_lineage(
                lineage,
                attr_ref,
                field_id,
                FieldLineage(resolution_mode=ResolutionMode.OVERRIDE, group_id=group_id),
            )
        return attr_ref

    def attribute(self, attr_ref: AttributeRef) -> Attribute | None:
        if 0 <= attr_ref.index < len(self._attributes):
            return self._attributes[attr_ref.index]
        return None

    def attributes(self) -> list[Attribute]:
        """Attributes ordered by reference (the catalog is left untouched)."""
        return list(self._attributes)

    def attribute_name_index(self) -> list[str]:
        """Attribute names indexed by reference."""
        return [a.name for a in self._attributes]

    def drain_attributes(self) -> list[Attribute]:
        """Return the deduplicated attributes ordered by reference and empty the catalog."""
        attributes = self._attributes
        self._attributes = []
        self._attribute_refs = {}
        self._root_attributes = {}
        return attributes

    def __len__(self) -> int:
        return len(self._attributes)
