"""Semantic convention group specifications and registry file loading."""

from .group_spec import (
    AttributeIdSpec,
    AttributeRefSpec,
    AttributeSpec,
    ConstraintSpec,
    ConvType,
    EnumAttributeType,
    EnumMember,
    GroupSpec,
    GroupSpecWithProvenance,
    RequirementLevel,
    RequirementLevelKind,
    SemConvSpecError,
)
from .registry_loader import SemConvRegistry

__all__ = [
    "AttributeIdSpec",
    "AttributeRefSpec",
    "AttributeSpec",
    "ConstraintSpec",
    "ConvType",
    "EnumAttributeType",
    "EnumMember",
    "GroupSpec",
    "GroupSpecWithProvenance",
    "RequirementLevel",
    "RequirementLevelKind",
    "SemConvRegistry",
    "SemConvSpecError",
]
