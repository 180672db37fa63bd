"""
Errors raised by registry resolution.

UnresolvedReferencesError and UnsatisfiedAnyOfConstraintError report problems
in the registry being resolved. UnresolvedAttributeError is an internal
failure: the catalog issued a reference it cannot name.
"""

from dataclasses import dataclass

from ..resolved.attribute import AttributeRef


@dataclass(frozen=True)
class UnresolvedExtendsRef:
    """A group whose `extends` target could not be resolved."""

    group_id: str
    extends_ref: str
    provenance: str

    @property
    def target(self) -> str:
        return self.extends_ref

    def __str__(self) -> str:
        return f"group '{self.group_id}' extends unknown group '{self.extends_ref}' ({self.provenance})"


@dataclass(frozen=True)
class UnresolvedAttributeRef:
    """A group holding an attribute `ref` that could not be resolved."""

    group_id: str
    attribute_ref: str
    provenance: str

    @property
    def target(self) -> str:
        return self.attribute_ref

    def __str__(self) -> str:
        return (
            f"group '{self.group_id}' references unknown attribute '{self.attribute_ref}' "
            f"({self.provenance})"
        )


UnresolvedReference = UnresolvedExtendsRef | UnresolvedAttributeRef


class ResolverError(Exception):
    """Base class for registry resolution errors."""


class InternalResolverError(ResolverError):
    """A resolver invariant does not hold (not caused by the registry content)."""


class UnresolvedReferencesError(ResolverError):
    """Attribute or extends references left unresolved once resolution stopped progressing."""

    def __init__(self, refs: list[UnresolvedReference]):
        self.refs = list(refs)
        lines = [f"{len(self.refs)} unresolved reference(s):"]
        lines.extend(f"  - {ref}" for ref in self.refs)
        super().__init__("\n".join(lines))


class UnsatisfiedAnyOfConstraintError(ResolverError):
    """Every `any_of` constraint of a group is unsatisfied."""

    def __init__(
        self,
        group_id: str,
        group_attributes: list[str],
        any_of_constraints: list[list[str]],
    ):
        self.group_id = group_id
        self.group_attributes = group_attributes
        self.any_of_constraints = any_of_constraints
        super().__init__(
            f"group '{group_id}' satisfies none of its any_of constraints "
            f"{any_of_constraints}; group attributes: {group_attributes}"
        )


class UnresolvedAttributeError(InternalResolverError):
    """An attribute reference has no entry in the catalog name index."""

    def __init__(self, attribute_ref: AttributeRef):
        self.attribute_ref = attribute_ref
        super().__init__(f"attribute reference {attribute_ref} has no entry in the attribute catalog")
