"""Resolved attributes and the opaque references the catalog issues for them."""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from ..schemas.group_spec import (
    AttributeType,
    RequirementLevel,
    attribute_type_to_yaml,
    thaw_examples,
)


class Stability(Enum):
    """Stability level of a group or attribute."""

    DEPRECATED = "deprecated"
    EXPERIMENTAL = "experimental"
    STABLE = "stable"


@dataclass(frozen=True, order=True)
class AttributeRef:
    """Reference to an attribute in the catalog. Ordered by catalog assignment."""

    index: int

    def __str__(self) -> str:
        return str(self.index)


@dataclass(frozen=True)
class Attribute:
    """Fully resolved attribute definition (after override merging)."""

    name: str
    type: AttributeType
    brief: str = ""
    examples: Any = None
    tag: str | None = None
    requirement_level: RequirementLevel = RequirementLevel()
    sampling_relevant: bool | None = None
    note: str = ""
    stability: Stability | None = None
    deprecated: str | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "name": self.name,
            "type": attribute_type_to_yaml(self.type),
            "brief": self.brief,
            "requirement_level": self.requirement_level.to_yaml(),
        }
        if self.examples is not None:
            data["examples"] = thaw_examples(self.examples)
        if self.tag is not None:
            data["tag"] = self.tag
        if self.sampling_relevant is not None:
            data["sampling_relevant"] = self.sampling_relevant
        if self.note:
            data["note"] = self.note
        if self.stability is not None:
            data["stability"] = self.stability.value
        if self.deprecated is not None:
            data["deprecated"] = self.deprecated
        return data
